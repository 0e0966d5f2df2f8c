"""Network configuration constants for the question provider."""

OPEN_TRIVIA_URL: str = "https://opentdb.com/api.php"
OPEN_TRIVIA_QUESTION_TYPE: str = "multiple"
REQUEST_TIMEOUT_SECONDS: float = 10.0
FETCH_WORKER_COUNT: int = 1
