"""Pure transition function for the quiz session.

Every event maps the current :class:`Session` to a new one. Nothing here
performs I/O, reads the clock, or raises: persistence, scheduling and question
fetching belong to :mod:`trivia_app.core.session_driver`.
"""

from __future__ import annotations

from dataclasses import replace

from trivia_app.core.models import (
    AnswerQuestion,
    FinishQuiz,
    LoadState,
    Login,
    Reset,
    Session,
    SetQuestions,
    Tick,
)


def initial_session() -> Session:
    """Return the default, logged-out session."""
    return Session()


def transition(state: Session, event: object) -> Session:
    """Apply ``event`` to ``state`` and return the resulting session."""
    if isinstance(event, Login):
        return replace(state, username=event.name, is_logged_in=True)

    if isinstance(event, SetQuestions):
        return replace(state, questions=tuple(event.questions))

    if isinstance(event, AnswerQuestion):
        return _answer_question(state, event.choice)

    if isinstance(event, Tick):
        remaining = max(state.timer - 1, 0)
        return replace(
            state,
            timer=remaining,
            is_quiz_finished=remaining <= 0 or state.is_quiz_finished,
        )

    if isinstance(event, FinishQuiz):
        return replace(state, is_quiz_finished=True)

    if isinstance(event, LoadState):
        return event.snapshot

    if isinstance(event, Reset):
        return initial_session()

    return state


def _answer_question(state: Session, choice: str) -> Session:
    question = state.current_question
    if question is None or state.is_quiz_finished:
        return state

    is_correct = choice == question.correct_answer
    next_index = state.current_question_index + 1
    return replace(
        state,
        correct_answers=state.correct_answers + (1 if is_correct else 0),
        wrong_answers=state.wrong_answers + (0 if is_correct else 1),
        total_answered=state.total_answered + 1,
        current_question_index=next_index,
        is_quiz_finished=(
            next_index >= len(state.questions)
            or state.timer <= 0
            or state.is_quiz_finished
        ),
    )
