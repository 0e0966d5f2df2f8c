"""Qt main window switching between login, quiz and result views."""

from __future__ import annotations

from enum import Enum, auto

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QStackedWidget, QVBoxLayout, QWidget

from trivia_app.constants.ui_constants import WINDOW_MIN_HEIGHT, WINDOW_MIN_WIDTH, WINDOW_TITLE
from trivia_app.core.models import Session
from trivia_app.core.session_driver import SessionDriver
from trivia_app.ui.components.login_panel import LoginPanel
from trivia_app.ui.components.quiz_panel import QuizPanel
from trivia_app.ui.components.result_panel import ResultPanel


class QuizView(Enum):
    """Which panel the window shows for a given session."""

    LOGIN = auto()
    QUIZ = auto()
    RESULT = auto()


def view_for_state(state: Session) -> QuizView:
    if not state.is_logged_in:
        return QuizView.LOGIN
    if state.is_quiz_finished:
        return QuizView.RESULT
    return QuizView.QUIZ


class QuizMainWindow(QMainWindow):
    """Main Qt window; renders the driver's state and forwards user actions."""

    def __init__(self, driver: SessionDriver) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)
        self.driver = driver
        self._view: QuizView | None = None

        self._build_ui()
        self.driver.subscribe(self._render)
        self._render(self.driver.current_state)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.view_stack = QStackedWidget(self)
        self.login_panel = LoginPanel(on_login=self.driver.login, parent=self)
        self.quiz_panel = QuizPanel(on_answer=self.driver.answer, parent=self)
        self.result_panel = ResultPanel(on_restart=self.driver.reset, parent=self)

        self.view_stack.addWidget(self.login_panel)
        self.view_stack.addWidget(self.quiz_panel)
        self.view_stack.addWidget(self.result_panel)
        root_layout.addWidget(self.view_stack)

    def _render(self, state: Session) -> None:
        view = view_for_state(state)
        if view == QuizView.QUIZ:
            self.quiz_panel.update_state(state)
        elif view == QuizView.RESULT:
            self.result_panel.show_summary(self.driver.summary())
        elif self._view != QuizView.LOGIN:
            self.login_panel.reset_state()

        if view != self._view:
            self._view = view
            index_map = {
                QuizView.LOGIN: 0,
                QuizView.QUIZ: 1,
                QuizView.RESULT: 2,
            }
            self.view_stack.setCurrentIndex(index_map[view])

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt override
        self.driver.unsubscribe(self._render)
        self.driver.stop()
        super().closeEvent(event)
