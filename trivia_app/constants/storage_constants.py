"""Keys used when mirroring the session into the local key-value store."""

STATE_KEY: str = "quizState"
USERNAME_KEY: str = "username"
