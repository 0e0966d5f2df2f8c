"""Quiz-related constants shared across UI and core layers."""

TIMER_START_SECONDS: int = 10
TICK_INTERVAL_MS: int = 1000
QUESTION_BATCH_SIZE: int = 10
TIMER_WARNING_SECONDS: int = 3
