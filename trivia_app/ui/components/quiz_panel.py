"""Component for answering questions against the countdown."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from trivia_app.constants.quiz_constants import TIMER_WARNING_SECONDS
from trivia_app.constants.ui_constants import (
    ANSWERED_TEMPLATE,
    LOADING_MESSAGE,
    QUESTION_POSITION_TEMPLATE,
    TIMER_TEMPLATE,
    WELCOME_TEMPLATE,
)
from trivia_app.core.models import Question, Session
from trivia_app.ui.question_renderer import choice_display_text, render_question_html


class QuizPanel(QWidget):
    """UI component for the running quiz: timer, progress, question and choices."""

    def __init__(
        self,
        on_answer: Callable[[str], object],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_answer = on_answer
        self._question_font_size: int = 14
        self._shown_question: Question | None = None
        self.choice_buttons: list[QPushButton] = []
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.welcome_label = QLabel("", self)
        layout.addWidget(self.welcome_label)

        self.timer_label = QLabel("", self)
        layout.addWidget(self.timer_label)

        header_row = QHBoxLayout()
        self.position_label = QLabel("", self)
        header_row.addWidget(self.position_label)
        header_row.addStretch()
        self.answered_label = QLabel("", self)
        header_row.addWidget(self.answered_label)
        layout.addLayout(header_row)

        self.question_label = QLabel(LOADING_MESSAGE, self)
        self.question_label.setTextFormat(Qt.RichText)
        self.question_label.setWordWrap(True)
        layout.addWidget(self.question_label, stretch=1)

        self.choices_layout = QVBoxLayout()
        layout.addLayout(self.choices_layout)

    def update_state(self, state: Session) -> None:
        self.welcome_label.setText(WELCOME_TEMPLATE.format(username=state.username))
        self._update_timer(state.timer)

        question = state.current_question
        if question is None:
            self._shown_question = None
            self.position_label.clear()
            self.answered_label.clear()
            self.question_label.setText(LOADING_MESSAGE)
            self._clear_choices()
            return

        count = len(state.questions)
        self.position_label.setText(
            QUESTION_POSITION_TEMPLATE.format(position=state.current_question_index + 1, count=count)
        )
        self.answered_label.setText(ANSWERED_TEMPLATE.format(answered=state.total_answered, count=count))
        if question is self._shown_question:
            return
        self._shown_question = question
        self.question_label.setText(render_question_html(question.question, self._question_font_size))
        self._clear_choices()
        for choice in question.choices:
            button = QPushButton(choice_display_text(choice), self)
            button.clicked.connect(lambda _checked=False, value=choice: self.on_answer(value))
            self.choices_layout.addWidget(button)
            self.choice_buttons.append(button)

    def _update_timer(self, seconds: int) -> None:
        self.timer_label.setText(TIMER_TEMPLATE.format(seconds=seconds))
        if seconds <= TIMER_WARNING_SECONDS:
            self.timer_label.setStyleSheet("color: #D13438; font-weight: bold;")
        else:
            self.timer_label.setStyleSheet("")

    def _clear_choices(self) -> None:
        for button in self.choice_buttons:
            self.choices_layout.removeWidget(button)
            button.deleteLater()
        self.choice_buttons = []
