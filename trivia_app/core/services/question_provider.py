"""HTTP client that fetches raw multiple-choice questions from the Open Trivia Database."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, ValidationError
import requests

from trivia_app.constants.network_constants import (
    OPEN_TRIVIA_QUESTION_TYPE,
    OPEN_TRIVIA_URL,
    REQUEST_TIMEOUT_SECONDS,
)
from trivia_app.constants.quiz_constants import QUESTION_BATCH_SIZE

logger = logging.getLogger(__name__)


class QuestionProviderError(Exception):
    """Raised when a batch of questions cannot be retrieved or parsed."""


class RawQuestion(BaseModel):
    """Question record as delivered by the provider."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    question: str
    correct_answer: str
    incorrect_answers: list[str]


class _OpenTriviaResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    response_code: int
    results: list[RawQuestion]


class QuestionProvider(Protocol):
    def fetch_questions(self) -> list[RawQuestion]: ...


class OpenTriviaProvider:
    """Fetches one batch of multiple-choice questions per call."""

    def __init__(
        self,
        url: str = OPEN_TRIVIA_URL,
        amount: int = QUESTION_BATCH_SIZE,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self._url = url
        self._amount = amount
        self._timeout = timeout
        self._session = session or requests.Session()

    def fetch_questions(self) -> list[RawQuestion]:
        params = {"amount": self._amount, "type": OPEN_TRIVIA_QUESTION_TYPE}
        try:
            response = self._session.get(self._url, params=params, timeout=self._timeout)
            response.raise_for_status()
            payload: Any = response.json()
        except requests.exceptions.RequestException as exc:
            raise QuestionProviderError(f"Could not reach question provider: {exc}") from exc
        except ValueError as exc:
            raise QuestionProviderError("Question provider returned invalid JSON.") from exc

        try:
            parsed = _OpenTriviaResponse.model_validate(payload)
        except ValidationError as exc:
            raise QuestionProviderError("Question provider returned an unexpected payload.") from exc

        if parsed.response_code != 0:
            raise QuestionProviderError(
                f"Question provider answered with response code {parsed.response_code}."
            )

        logger.info("Fetched %d questions from %s", len(parsed.results), self._url)
        return list(parsed.results)
