"""Gateway: in-process session storage — implements SessionRepository port."""

from __future__ import annotations

import threading

from template_studio.l1_entities.session import TemplateGenerationSession


class InMemorySessionRepository:
    """Holds sessions in a dict. Sessions are returned by reference, not copied."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sessions: dict[str, TemplateGenerationSession] = {}

    def add(self, session: TemplateGenerationSession) -> None:
        with self._lock:
            if session.id in self._sessions:
                raise ValueError(f"Session '{session.id}' already exists")
            self._sessions[session.id] = session

    def get(self, session_id: str) -> TemplateGenerationSession | None:
        with self._lock:
            return self._sessions.get(session_id)

    def list_for_user(self, user_id: str) -> list[TemplateGenerationSession]:
        with self._lock:
            owned = [s for s in self._sessions.values() if s.user_id == user_id]
        return sorted(owned, key=lambda s: s.created_at)
