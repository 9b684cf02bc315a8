"""Template generation session entity."""

from __future__ import annotations

import enum
from datetime import datetime

from pydantic import BaseModel, Field

from template_studio.l1_entities.answers import TemplateAnswers
from template_studio.l1_entities.asset import GeneratedAsset, utc_now
from template_studio.l1_entities.errors import SessionClosedError


class SessionStatus(enum.Enum):
    IN_PROGRESS = 'in-progress'
    COMPLETED = 'completed'
    FAILED = 'failed'


class TemplateGenerationSession(BaseModel):
    """Mutable state of one user's pass through a template.

    Only the session state machine and the answer collector mutate it;
    everything else reads.
    """

    id: str
    template_id: str
    user_id: str
    answers: TemplateAnswers = Field(default_factory=dict)
    selected_style: str = ''
    color_palette: list[str] = Field(default_factory=list)
    generated_assets: list[GeneratedAsset] = Field(default_factory=list)
    status: SessionStatus = SessionStatus.IN_PROGRESS
    failure_reason: str | None = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def is_terminal(self) -> bool:
        return self.status != SessionStatus.IN_PROGRESS

    def touch(self) -> None:
        self.updated_at = utc_now()

    def ensure_open(self) -> None:
        if self.is_terminal:
            raise SessionClosedError(self.id, self.status.value)
