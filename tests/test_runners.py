from __future__ import annotations

from concurrent.futures import Future
import threading

import pytest

from trivia_app.core.services.runners import InlineFetchRunner, ManualTickScheduler, ThreadFetchRunner


def test_inline_runner_delivers_result():
    results: list[Future] = []
    InlineFetchRunner().submit(lambda: [1, 2], results.append)
    assert results[0].result() == [1, 2]


def test_inline_runner_delivers_exception():
    def fail():
        raise RuntimeError("boom")

    results: list[Future] = []
    InlineFetchRunner().submit(fail, results.append)
    with pytest.raises(RuntimeError, match="boom"):
        results[0].result()


def test_thread_runner_posts_result_back():
    posted = threading.Event()
    results: list[Future] = []

    def post(callback):
        callback()
        posted.set()

    runner = ThreadFetchRunner(post=post)
    try:
        runner.submit(lambda: "done", results.append)
        assert posted.wait(timeout=5)
    finally:
        runner.shutdown()
    assert results[0].result() == "done"


def test_manual_scheduler_replaces_and_cancels():
    scheduler = ManualTickScheduler()
    calls: list[str] = []
    scheduler.schedule(1000, lambda: calls.append("first"))
    scheduler.schedule(1000, lambda: calls.append("second"))
    assert scheduler.fire() is True
    assert calls == ["second"]
    assert scheduler.fire() is False

    scheduler.schedule(500, lambda: calls.append("third"))
    scheduler.cancel()
    assert scheduler.fire() is False
    assert calls == ["second"]
