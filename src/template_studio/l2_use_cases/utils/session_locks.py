"""Per-session mutual exclusion keyed by session id."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from template_studio.l1_entities.session import TemplateGenerationSession


class SessionLocks:
    """Hands out one lock per session id.

    Two transitions on the same session serialize; different sessions never
    contend beyond the brief dictionary lookup. Once a session is terminal
    its lock is dropped, so the registry only holds open sessions.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.RLock] = {}

    def lock_for(self, session_id: str) -> threading.RLock:
        with self._guard:
            lock = self._locks.get(session_id)
            if lock is None:
                lock = threading.RLock()
                self._locks[session_id] = lock
            return lock

    @contextmanager
    def hold(self, session: TemplateGenerationSession) -> Iterator[None]:
        """Hold *session*'s lock; discard it on release if the session ended terminal."""
        try:
            with self.lock_for(session.id):
                yield
        finally:
            if session.is_terminal:
                self.discard(session.id)

    def discard(self, session_id: str) -> None:
        with self._guard:
            self._locks.pop(session_id, None)

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
