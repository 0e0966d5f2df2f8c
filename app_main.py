"""Application entry point for the TriviaQt quiz."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from trivia_app.constants.about import APP_NAME, APP_ORGANIZATION, APP_VERSION
from trivia_app.core.services.question_provider import OpenTriviaProvider
from trivia_app.core.services.session_store import SessionStore
from trivia_app.core.session_driver import SessionDriver
from trivia_app.ui.main_window import QuizMainWindow
from trivia_app.ui.qt_runtime import QSettingsStore, QtTickScheduler, create_qt_fetch_runner
from trivia_app.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, restore the saved session, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting %s %s", APP_NAME, APP_VERSION)

    app = QApplication(sys.argv)
    app.setOrganizationName(APP_ORGANIZATION)
    app.setApplicationName(APP_NAME)

    fetch_runner = create_qt_fetch_runner(app)
    driver = SessionDriver(
        store=SessionStore(QSettingsStore()),
        provider=OpenTriviaProvider(),
        scheduler=QtTickScheduler(app),
        fetch_runner=fetch_runner,
    )
    window = QuizMainWindow(driver)
    driver.start()
    window.show()

    exit_code = app.exec()
    fetch_runner.shutdown()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
