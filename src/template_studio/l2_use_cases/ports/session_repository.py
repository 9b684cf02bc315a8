"""Port: session storage."""

from __future__ import annotations

from typing import Protocol

from template_studio.l1_entities.session import TemplateGenerationSession


class SessionRepository(Protocol):
    """Abstract holder of generation sessions."""

    def add(self, session: TemplateGenerationSession) -> None:
        """Store a newly created session."""
        ...

    def get(self, session_id: str) -> TemplateGenerationSession | None:
        """Return the session with *session_id*, or None."""
        ...

    def list_for_user(self, user_id: str) -> list[TemplateGenerationSession]:
        """Return every session owned by *user_id*, oldest first."""
        ...
