"""JSON snapshot format for persisting a :class:`Session`.

The snapshot mirrors the session field by field using camelCase keys::

    {"username": "alice", "isLoggedIn": true,
     "questions": [{"id": 1, "question": "...", "choices": [...], "correctAnswer": "..."}],
     "currentQuestionIndex": 0, "correctAnswers": 0, "wrongAnswers": 0,
     "totalAnswered": 0, "isQuizFinished": false, "timer": 10}

Decoding validates both the schema and the session invariants, so a corrupt
snapshot never reaches the state machine.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from trivia_app.constants.quiz_constants import TIMER_START_SECONDS
from trivia_app.core.models import Question, Session


class SnapshotError(Exception):
    """Raised when a persisted snapshot cannot be turned back into a session."""


class _SnapshotModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class QuestionSnapshot(_SnapshotModel):
    id: int
    question: str
    choices: list[str]
    correct_answer: str


class SessionSnapshot(_SnapshotModel):
    username: str = ""
    is_logged_in: bool = False
    questions: list[QuestionSnapshot] = Field(default_factory=list)
    current_question_index: int = Field(default=0, ge=0)
    correct_answers: int = Field(default=0, ge=0)
    wrong_answers: int = Field(default=0, ge=0)
    total_answered: int = Field(default=0, ge=0)
    is_quiz_finished: bool = False
    timer: int = Field(default=TIMER_START_SECONDS, ge=0)


def encode_snapshot(session: Session) -> str:
    """Serialize ``session`` to the snapshot JSON string."""
    snapshot = SessionSnapshot(
        username=session.username,
        is_logged_in=session.is_logged_in,
        questions=[
            QuestionSnapshot(
                id=question.id,
                question=question.question,
                choices=list(question.choices),
                correct_answer=question.correct_answer,
            )
            for question in session.questions
        ],
        current_question_index=session.current_question_index,
        correct_answers=session.correct_answers,
        wrong_answers=session.wrong_answers,
        total_answered=session.total_answered,
        is_quiz_finished=session.is_quiz_finished,
        timer=session.timer,
    )
    return snapshot.model_dump_json(by_alias=True)


def decode_snapshot(text: str) -> Session:
    """Parse a snapshot string, raising :class:`SnapshotError` if it is unusable."""
    try:
        snapshot = SessionSnapshot.model_validate_json(text)
    except ValidationError as exc:
        raise SnapshotError(f"Snapshot does not match the session schema: {exc}") from exc

    _check_invariants(snapshot)
    return Session(
        username=snapshot.username,
        is_logged_in=snapshot.is_logged_in,
        questions=tuple(
            Question(
                id=question.id,
                question=question.question,
                choices=tuple(question.choices),
                correct_answer=question.correct_answer,
            )
            for question in snapshot.questions
        ),
        current_question_index=snapshot.current_question_index,
        correct_answers=snapshot.correct_answers,
        wrong_answers=snapshot.wrong_answers,
        total_answered=snapshot.total_answered,
        is_quiz_finished=snapshot.is_quiz_finished,
        timer=snapshot.timer,
    )


def _check_invariants(snapshot: SessionSnapshot) -> None:
    if snapshot.current_question_index > len(snapshot.questions):
        raise SnapshotError("Question index points past the loaded questions.")
    if snapshot.correct_answers + snapshot.wrong_answers != snapshot.total_answered:
        raise SnapshotError("Correct and wrong answers do not add up to the answered total.")
    if snapshot.total_answered != snapshot.current_question_index:
        raise SnapshotError("Answered total does not match the question index.")
    for question in snapshot.questions:
        if question.correct_answer not in question.choices:
            raise SnapshotError(f"Question {question.id} is missing its correct answer.")
