"""Qt-backed storage, tick scheduling and result marshalling for the session driver."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QSettings, QTimer, Signal, Slot

from trivia_app.constants.about import APP_NAME, APP_ORGANIZATION
from trivia_app.core.services.runners import ThreadFetchRunner


class QSettingsStore:
    """Key-value store persisted through ``QSettings``."""

    def __init__(self, settings: QSettings | None = None) -> None:
        self._settings = settings or QSettings(APP_ORGANIZATION, APP_NAME)

    def get(self, key: str) -> str | None:
        value = self._settings.value(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(key, value)
        self._settings.sync()

    def remove(self, key: str) -> None:
        self._settings.remove(key)
        self._settings.sync()


class QtTickScheduler:
    """Single-shot ``QTimer``; scheduling again restarts the countdown."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._fire)
        self._callback: Callable[[], None] | None = None

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._timer.start(delay_ms)

    def cancel(self) -> None:
        self._timer.stop()
        self._callback = None

    def is_active(self) -> bool:
        return self._timer.isActive()

    def _fire(self) -> None:
        callback = self._callback
        self._callback = None
        if callback is not None:
            callback()


class MainThreadPoster(QObject):
    """Queues callables from worker threads onto the thread that owns this object."""

    _posted = Signal(object)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._posted.connect(self._run)

    def post(self, callback: Callable[[], None]) -> None:
        self._posted.emit(callback)

    @Slot(object)
    def _run(self, callback: Callable[[], None]) -> None:
        callback()


def create_qt_fetch_runner(parent: QObject | None = None) -> ThreadFetchRunner:
    """Fetch on a worker thread and deliver the result on the Qt GUI thread."""
    poster = MainThreadPoster(parent)
    return ThreadFetchRunner(post=poster.post)
