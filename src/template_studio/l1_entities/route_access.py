"""L1 entity: route classification and navigation decisions."""

from __future__ import annotations

import enum

from pydantic import BaseModel


class RouteAccess(enum.Enum):
    PROTECTED = 'protected'
    PUBLIC = 'public'
    NEUTRAL = 'neutral'


class AuthState(BaseModel):
    """Authentication state as supplied by the auth collaborator."""

    user_id: str | None = None
    loading: bool = False

    @property
    def signed_in(self) -> bool:
        return self.user_id is not None


class NavigationDecision(BaseModel):
    allow: bool
    redirect_to: str | None = None
