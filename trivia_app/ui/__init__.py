"""Qt UI components for the trivia application."""

from .main_window import QuizMainWindow, QuizView, view_for_state
from .qt_runtime import QSettingsStore, QtTickScheduler, create_qt_fetch_runner

__all__ = [
    "QSettingsStore",
    "QtTickScheduler",
    "QuizMainWindow",
    "QuizView",
    "create_qt_fetch_runner",
    "view_for_state",
]
