"""Turn raw provider records into session questions with shuffled choices."""

from __future__ import annotations

from collections.abc import Iterable
import random

from trivia_app.core.models import Question
from trivia_app.core.services.question_provider import RawQuestion


def format_questions(
    records: Iterable[RawQuestion],
    rng: random.Random | None = None,
) -> tuple[Question, ...]:
    """Number the records from 1 and shuffle each record's answer choices.

    ``random.Random.shuffle`` is a uniform Fisher-Yates shuffle. Pass a seeded
    ``rng`` for a reproducible order.
    """
    shuffle_rng = rng or random.Random()
    return tuple(
        _format_question(position, record, shuffle_rng)
        for position, record in enumerate(records, start=1)
    )


def _format_question(position: int, record: RawQuestion, rng: random.Random) -> Question:
    choices = [*record.incorrect_answers, record.correct_answer]
    rng.shuffle(choices)
    return Question(
        id=position,
        question=record.question,
        choices=tuple(choices),
        correct_answer=record.correct_answer,
    )
