from __future__ import annotations

import pytest

from tests.helpers import make_questions
from trivia_app.core.models import Question


@pytest.fixture
def questions() -> tuple[Question, ...]:
    return make_questions()
