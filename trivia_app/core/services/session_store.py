"""Service for mirroring the session into a string-keyed store and restoring it."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Protocol

from trivia_app.constants.storage_constants import STATE_KEY, USERNAME_KEY
from trivia_app.core.models import Session
from trivia_app.core.snapshot_codec import SnapshotError, decode_snapshot, encode_snapshot

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Opaque get/set string store."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class InMemoryStore:
    """Dictionary-backed store, handy for tests and headless runs."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)


@dataclass(slots=True)
class RestoredSession:
    """What was found in the store at startup."""

    session: Session | None
    username: str | None


class SessionStore:
    """Reads and writes the session snapshot plus the username slot."""

    def __init__(
        self,
        backend: KeyValueStore,
        state_key: str = STATE_KEY,
        username_key: str = USERNAME_KEY,
    ) -> None:
        self._backend = backend
        self._state_key = state_key
        self._username_key = username_key

    def save(self, session: Session) -> None:
        """Write the snapshot first; it carries the username too and is authoritative."""
        self._backend.set(self._state_key, encode_snapshot(session))
        self._backend.set(self._username_key, session.username)

    def load(self) -> RestoredSession:
        raw_state = self._backend.get(self._state_key)
        session = None
        if raw_state:
            try:
                session = decode_snapshot(raw_state)
            except SnapshotError as exc:
                logger.warning("Ignoring stored quiz state: %s", exc)
        username = self._backend.get(self._username_key) or None
        return RestoredSession(session=session, username=username)

    def clear(self) -> None:
        self._backend.remove(self._state_key)
        self._backend.remove(self._username_key)
