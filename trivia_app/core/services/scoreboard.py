"""End-of-quiz score summary."""

from __future__ import annotations

from dataclasses import dataclass

from trivia_app.core.models import Session


@dataclass(frozen=True, slots=True)
class ScoreSummary:
    """Immutable snapshot returned to the result screen."""

    username: str
    correct_answers: int
    wrong_answers: int
    total_answered: int
    question_count: int
    accuracy_percentage: float
    timed_out: bool


def summarize(session: Session) -> ScoreSummary:
    """Build the summary shown once a session is finished."""
    accuracy = 0.0
    if session.total_answered:
        accuracy = (session.correct_answers / session.total_answered) * 100
    return ScoreSummary(
        username=session.username,
        correct_answers=session.correct_answers,
        wrong_answers=session.wrong_answers,
        total_answered=session.total_answered,
        question_count=len(session.questions),
        accuracy_percentage=accuracy,
        timed_out=session.timer <= 0
        and (not session.questions or session.total_answered < len(session.questions)),
    )
