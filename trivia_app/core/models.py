"""Domain models for the trivia quiz session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from trivia_app.constants.quiz_constants import TIMER_START_SECONDS


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with its answer choices already shuffled."""

    id: int
    question: str
    choices: tuple[str, ...]
    correct_answer: str


@dataclass(frozen=True, slots=True)
class Session:
    """Full state of one quiz attempt.

    Instances are never mutated; every transition returns a new value.
    """

    username: str = ""
    is_logged_in: bool = False
    questions: tuple[Question, ...] = ()
    current_question_index: int = 0
    correct_answers: int = 0
    wrong_answers: int = 0
    total_answered: int = 0
    is_quiz_finished: bool = False
    timer: int = TIMER_START_SECONDS

    @property
    def current_question(self) -> Question | None:
        if 0 <= self.current_question_index < len(self.questions):
            return self.questions[self.current_question_index]
        return None

    @property
    def is_awaiting_questions(self) -> bool:
        return self.is_logged_in and not self.questions and not self.is_quiz_finished


# --- Events ---


@dataclass(frozen=True, slots=True)
class Login:
    name: str


@dataclass(frozen=True, slots=True)
class SetQuestions:
    questions: tuple[Question, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class AnswerQuestion:
    choice: str


@dataclass(frozen=True, slots=True)
class Tick:
    pass


@dataclass(frozen=True, slots=True)
class FinishQuiz:
    pass


@dataclass(frozen=True, slots=True)
class LoadState:
    snapshot: Session


@dataclass(frozen=True, slots=True)
class Reset:
    pass


Event = Union[Login, SetQuestions, AnswerQuestion, Tick, FinishQuiz, LoadState, Reset]
