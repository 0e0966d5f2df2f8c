"""Component for the end-of-quiz summary."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from trivia_app.constants.ui_constants import (
    RESULT_ACCURACY_TEMPLATE,
    RESULT_CORRECT_TEMPLATE,
    RESULT_RESTART_BUTTON,
    RESULT_TIMED_OUT,
    RESULT_TITLE,
    RESULT_TOTAL_TEMPLATE,
    RESULT_WRONG_TEMPLATE,
)
from trivia_app.core.services.scoreboard import ScoreSummary


class ResultPanel(QWidget):
    """UI component showing correct and wrong counts with a restart button."""

    def __init__(self, on_restart: Callable[[], None], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_restart = on_restart
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(RESULT_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet("font-size: 16pt; font-weight: bold;")
        layout.addWidget(self.title_label)

        self.correct_label = QLabel(self)
        self.wrong_label = QLabel(self)
        self.total_label = QLabel(self)
        self.accuracy_label = QLabel(self)
        self.timed_out_label = QLabel(RESULT_TIMED_OUT, self)
        self.timed_out_label.setVisible(False)
        for label in (
            self.correct_label,
            self.wrong_label,
            self.total_label,
            self.accuracy_label,
            self.timed_out_label,
        ):
            layout.addWidget(label)

        layout.addStretch()
        self.restart_button = QPushButton(RESULT_RESTART_BUTTON, self)
        self.restart_button.clicked.connect(self.on_restart)
        layout.addWidget(self.restart_button)

    def show_summary(self, summary: ScoreSummary) -> None:
        self.correct_label.setText(RESULT_CORRECT_TEMPLATE.format(count=summary.correct_answers))
        self.wrong_label.setText(RESULT_WRONG_TEMPLATE.format(count=summary.wrong_answers))
        self.total_label.setText(
            RESULT_TOTAL_TEMPLATE.format(
                answered=summary.total_answered,
                count=summary.question_count,
            )
        )
        self.accuracy_label.setText(
            RESULT_ACCURACY_TEMPLATE.format(percentage=summary.accuracy_percentage)
        )
        self.timed_out_label.setVisible(summary.timed_out)
