from __future__ import annotations

from tests.helpers import make_questions
from trivia_app.core.models import Session
from trivia_app.core.services.scoreboard import summarize


def test_summary_of_completed_quiz():
    session = Session(
        username="alice",
        is_logged_in=True,
        questions=make_questions(10),
        current_question_index=10,
        correct_answers=7,
        wrong_answers=3,
        total_answered=10,
        is_quiz_finished=True,
        timer=2,
    )
    summary = summarize(session)
    assert summary.username == "alice"
    assert (summary.correct_answers, summary.wrong_answers) == (7, 3)
    assert summary.total_answered == 10
    assert summary.question_count == 10
    assert summary.accuracy_percentage == 70.0
    assert summary.timed_out is False


def test_summary_when_time_ran_out():
    session = Session(
        username="bob",
        is_logged_in=True,
        questions=make_questions(10),
        current_question_index=2,
        correct_answers=1,
        wrong_answers=1,
        total_answered=2,
        is_quiz_finished=True,
        timer=0,
    )
    summary = summarize(session)
    assert summary.timed_out is True
    assert summary.accuracy_percentage == 50.0


def test_summary_with_nothing_answered():
    summary = summarize(Session(is_logged_in=True, is_quiz_finished=True, timer=0))
    assert summary.accuracy_percentage == 0.0
    assert summary.question_count == 0
    assert summary.timed_out is True
