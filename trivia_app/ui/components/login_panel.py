"""Component for entering the display name."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget

from trivia_app.constants.ui_constants import (
    LOGIN_BUTTON,
    LOGIN_EMPTY_HINT,
    LOGIN_PLACEHOLDER,
    LOGIN_TITLE,
)


class LoginPanel(QWidget):
    """UI component that collects a username and hands it to ``on_login``."""

    def __init__(self, on_login: Callable[[str], bool], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_login = on_login
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.title_label = QLabel(LOGIN_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet("font-size: 16pt; font-weight: bold;")
        layout.addWidget(self.title_label)

        self.name_input = QLineEdit(self)
        self.name_input.setPlaceholderText(LOGIN_PLACEHOLDER)
        self.name_input.returnPressed.connect(self._handle_login)
        layout.addWidget(self.name_input)

        self.login_button = QPushButton(LOGIN_BUTTON, self)
        self.login_button.clicked.connect(self._handle_login)
        layout.addWidget(self.login_button)

        self.hint_label = QLabel("", self)
        self.hint_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.hint_label)
        layout.addStretch()

    def _handle_login(self) -> None:
        if self.on_login(self.name_input.text()):
            self.hint_label.clear()
        else:
            self.hint_label.setText(LOGIN_EMPTY_HINT)

    def reset_state(self) -> None:
        self.name_input.clear()
        self.hint_label.clear()
