"""Static metadata describing TriviaQt."""

APP_NAME = "TriviaQt"
APP_VERSION = "0.1"
APP_ORGANIZATION = "TriviaQt"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "TriviaQt is a small desktop trivia quiz built with Qt. "
    "Log in with a display name, answer ten questions from the Open Trivia Database "
    "before the countdown runs out, and review your score at the end."
)
