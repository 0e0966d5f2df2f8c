from __future__ import annotations

import pytest
import requests

from trivia_app.constants.network_constants import OPEN_TRIVIA_URL
from trivia_app.core.services.question_provider import (
    OpenTriviaProvider,
    QuestionProviderError,
    RawQuestion,
)

_RESULT = {
    "type": "multiple",
    "difficulty": "easy",
    "category": "General Knowledge",
    "question": "Which planet is known as the &quot;Red Planet&quot;?",
    "correct_answer": "Mars",
    "incorrect_answers": ["Venus", "Jupiter", "Saturn"],
}


class _FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, json_error: Exception | None = None) -> None:
        self._payload = payload
        self.status_code = status_code
        self._json_error = json_error

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class _FakeSession:
    def __init__(self, response: _FakeResponse | None = None, error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[tuple[str, dict, float]] = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        if self.error is not None:
            raise self.error
        return self.response


def test_fetch_parses_results_and_sends_query():
    session = _FakeSession(_FakeResponse({"response_code": 0, "results": [_RESULT] * 10}))
    provider = OpenTriviaProvider(session=session, timeout=5.0)

    records = provider.fetch_questions()

    assert len(records) == 10
    assert records[0] == RawQuestion(
        question="Which planet is known as the &quot;Red Planet&quot;?",
        correct_answer="Mars",
        incorrect_answers=["Venus", "Jupiter", "Saturn"],
    )
    assert session.calls == [(OPEN_TRIVIA_URL, {"amount": 10, "type": "multiple"}, 5.0)]


def test_connection_error_becomes_provider_error():
    provider = OpenTriviaProvider(session=_FakeSession(error=requests.ConnectionError("offline")))
    with pytest.raises(QuestionProviderError, match="Could not reach"):
        provider.fetch_questions()


def test_http_error_becomes_provider_error():
    provider = OpenTriviaProvider(session=_FakeSession(_FakeResponse(status_code=429)))
    with pytest.raises(QuestionProviderError):
        provider.fetch_questions()


def test_invalid_json_becomes_provider_error():
    response = _FakeResponse(json_error=ValueError("Expecting value"))
    provider = OpenTriviaProvider(session=_FakeSession(response))
    with pytest.raises(QuestionProviderError, match="invalid JSON"):
        provider.fetch_questions()


def test_unexpected_payload_becomes_provider_error():
    response = _FakeResponse({"response_code": 0, "results": [{"question": "no answers"}]})
    provider = OpenTriviaProvider(session=_FakeSession(response))
    with pytest.raises(QuestionProviderError, match="unexpected payload"):
        provider.fetch_questions()


def test_non_zero_response_code_becomes_provider_error():
    response = _FakeResponse({"response_code": 5, "results": []})
    provider = OpenTriviaProvider(session=_FakeSession(response))
    with pytest.raises(QuestionProviderError, match="response code 5"):
        provider.fetch_questions()
