"""Ways of running the question fetch and scheduling countdown ticks.

The driver never blocks on the provider: it hands the call to a fetch runner
and gets the finished :class:`~concurrent.futures.Future` back on its own
thread. Qt-backed implementations live in :mod:`trivia_app.ui.qt_runtime`.
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Protocol

from trivia_app.constants.network_constants import FETCH_WORKER_COUNT

FetchCallback = Callable[["Future[Any]"], None]


class FetchRunner(Protocol):
    def submit(self, work: Callable[[], Any], on_done: FetchCallback) -> None: ...


class TickScheduler(Protocol):
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> None:
        """Arm a single-shot callback, replacing any pending one."""

    def cancel(self) -> None: ...


class InlineFetchRunner:
    """Runs the fetch synchronously on the caller's thread."""

    def submit(self, work: Callable[[], Any], on_done: FetchCallback) -> None:
        future: Future[Any] = Future()
        try:
            future.set_result(work())
        except Exception as exc:
            future.set_exception(exc)
        on_done(future)


class ThreadFetchRunner:
    """Runs the fetch on a worker thread and posts the result back via ``post``."""

    def __init__(
        self,
        post: Callable[[Callable[[], None]], None],
        max_workers: int = FETCH_WORKER_COUNT,
    ) -> None:
        self._post = post
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="QuestionFetch")

    def submit(self, work: Callable[[], Any], on_done: FetchCallback) -> None:
        future = self._executor.submit(work)
        future.add_done_callback(lambda finished: self._post(lambda: on_done(finished)))

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)


class ManualTickScheduler:
    """Scheduler that only fires when told to; used by tests and headless drivers."""

    def __init__(self) -> None:
        self.pending: Callable[[], None] | None = None
        self.delay_ms: int | None = None
        self.schedule_count: int = 0

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.pending = callback
        self.delay_ms = delay_ms
        self.schedule_count += 1

    def cancel(self) -> None:
        self.pending = None
        self.delay_ms = None

    def fire(self) -> bool:
        callback = self.pending
        if callback is None:
            return False
        self.pending = None
        self.delay_ms = None
        callback()
        return True
