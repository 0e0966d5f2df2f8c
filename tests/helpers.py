"""Builders and fakes shared by the test modules."""

from __future__ import annotations

from concurrent.futures import Future

from trivia_app.core.models import Question
from trivia_app.core.services.question_provider import QuestionProviderError, RawQuestion


def make_questions(count: int = 10) -> tuple[Question, ...]:
    return tuple(
        Question(
            id=position,
            question=f"Question {position}?",
            choices=(f"wrong {position}a", f"right {position}", f"wrong {position}b", f"wrong {position}c"),
            correct_answer=f"right {position}",
        )
        for position in range(1, count + 1)
    )


def make_raw_questions(count: int = 10) -> list[RawQuestion]:
    return [
        RawQuestion(
            question=f"Raw &quot;question&quot; {position}",
            correct_answer=f"right {position}",
            incorrect_answers=[f"wrong {position}a", f"wrong {position}b", f"wrong {position}c"],
        )
        for position in range(1, count + 1)
    ]


class FakeProvider:
    """Returns queued batches or raises queued errors, counting calls."""

    def __init__(self, *outcomes: list[RawQuestion] | Exception) -> None:
        self.outcomes = list(outcomes)
        self.calls = 0

    def fetch_questions(self) -> list[RawQuestion]:
        self.calls += 1
        if not self.outcomes:
            raise QuestionProviderError("no batch queued")
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class DeferredFetchRunner:
    """Holds submitted fetches until the test completes them."""

    def __init__(self) -> None:
        self.pending: list[tuple] = []

    def submit(self, work, on_done) -> None:
        self.pending.append((work, on_done))

    def complete_next(self) -> None:
        work, on_done = self.pending.pop(0)
        future: Future = Future()
        try:
            future.set_result(work())
        except Exception as exc:
            future.set_exception(exc)
        on_done(future)
