from __future__ import annotations

from dataclasses import replace
import json

import pytest

from tests.helpers import make_questions
from trivia_app.core.models import Session
from trivia_app.core.snapshot_codec import SnapshotError, decode_snapshot, encode_snapshot


def _in_progress_session() -> Session:
    return Session(
        username="alice",
        is_logged_in=True,
        questions=make_questions(3),
        current_question_index=2,
        correct_answers=1,
        wrong_answers=1,
        total_answered=2,
        timer=6,
    )


def test_snapshot_uses_camel_case_keys():
    payload = json.loads(encode_snapshot(_in_progress_session()))
    assert set(payload) == {
        "username",
        "isLoggedIn",
        "questions",
        "currentQuestionIndex",
        "correctAnswers",
        "wrongAnswers",
        "totalAnswered",
        "isQuizFinished",
        "timer",
    }
    assert set(payload["questions"][0]) == {"id", "question", "choices", "correctAnswer"}


def test_decoding_an_encoded_session_gives_it_back():
    session = _in_progress_session()
    assert decode_snapshot(encode_snapshot(session)) == session


def test_missing_fields_fall_back_to_defaults():
    assert decode_snapshot('{"username": "bob", "isLoggedIn": true}') == Session(
        username="bob", is_logged_in=True
    )


@pytest.mark.parametrize("text", ["not json", "[]", '{"timer": "soon"}', '{"correctAnswers": -1}'])
def test_malformed_snapshots_are_rejected(text):
    with pytest.raises(SnapshotError):
        decode_snapshot(text)


@pytest.mark.parametrize(
    "broken",
    [
        replace(_in_progress_session(), current_question_index=5, total_answered=5, correct_answers=4),
        replace(_in_progress_session(), correct_answers=2),
        replace(_in_progress_session(), total_answered=1, correct_answers=0),
    ],
)
def test_inconsistent_counters_are_rejected(broken):
    with pytest.raises(SnapshotError):
        decode_snapshot(encode_snapshot(broken))


def test_question_without_its_correct_answer_is_rejected():
    payload = json.loads(encode_snapshot(_in_progress_session()))
    payload["questions"][0]["correctAnswer"] = "missing"
    with pytest.raises(SnapshotError):
        decode_snapshot(json.dumps(payload))
