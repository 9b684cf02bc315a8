"""Use case: generation session lifecycle.

``in-progress`` is the only non-terminal state. ``completed`` and ``failed``
accept no further transition; a rejected call leaves the session untouched.
Every transition holds the session's lock for its whole check-then-mutate step.
Locks of terminal sessions are dropped from the registry on release.
"""

from __future__ import annotations

import logging
import secrets
import time
from collections.abc import Sequence

from template_studio.l1_entities.asset import GeneratedAsset
from template_studio.l1_entities.errors import (
    DuplicateAssetError,
    EmptySessionError,
    SessionNotFoundError,
)
from template_studio.l1_entities.session import SessionStatus, TemplateGenerationSession
from template_studio.l2_use_cases.ports.session_repository import SessionRepository
from template_studio.l2_use_cases.utils.session_locks import SessionLocks

log = logging.getLogger('ts.session')


def new_session_id() -> str:
    return f'session-{time.time_ns() // 1_000_000}-{secrets.token_hex(5)}'


class SessionStateMachine:
    def __init__(self, repository: SessionRepository, locks: SessionLocks | None = None) -> None:
        self._repository = repository
        self.locks = locks or SessionLocks()

    def create_session(
        self,
        template_id: str,
        user_id: str,
        *,
        style: str = '',
        palette: Sequence[str] = (),
    ) -> TemplateGenerationSession:
        session = TemplateGenerationSession(
            id=new_session_id(),
            template_id=template_id,
            user_id=user_id,
            selected_style=style,
            color_palette=list(palette),
        )
        self._repository.add(session)
        log.info('Created session %s (template=%s, user=%s)', session.id, template_id, user_id)
        return session

    def get_session(self, session_id: str, user_id: str) -> TemplateGenerationSession:
        """Look up a session; sessions owned by other users are reported as missing."""
        session = self._repository.get(session_id)
        if session is None or session.user_id != user_id:
            raise SessionNotFoundError(f"Session not found: '{session_id}'")
        return session

    def list_sessions(self, user_id: str) -> list[TemplateGenerationSession]:
        return self._repository.list_for_user(user_id)

    def choose_style(self, session: TemplateGenerationSession, style: str, palette: Sequence[str]) -> None:
        with self.locks.hold(session):
            session.ensure_open()
            session.selected_style = style
            session.color_palette = list(palette)
            session.touch()

    def record_generated_asset(self, session: TemplateGenerationSession, asset: GeneratedAsset) -> None:
        """Append *asset*. Order of generated_assets is arrival order."""
        with self.locks.hold(session):
            session.ensure_open()
            if any(a.id == asset.id for a in session.generated_assets):
                raise DuplicateAssetError(f"Asset '{asset.id}' already recorded in session '{session.id}'")
            session.generated_assets.append(asset)
            session.touch()
        log.debug('Session %s: recorded %s asset %s', session.id, asset.type.value, asset.id)

    def complete_session(self, session: TemplateGenerationSession) -> None:
        with self.locks.hold(session):
            session.ensure_open()
            if not session.generated_assets:
                raise EmptySessionError(f"Session '{session.id}' has no generated assets")
            session.status = SessionStatus.COMPLETED
            session.touch()
        log.info('Session %s completed with %d assets', session.id, len(session.generated_assets))

    def fail_session(self, session: TemplateGenerationSession, reason: str) -> None:
        with self.locks.hold(session):
            session.ensure_open()
            session.status = SessionStatus.FAILED
            session.failure_reason = reason
            session.touch()
        log.warning('Session %s failed: %s', session.id, reason)

