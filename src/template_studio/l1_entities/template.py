"""Template Pydantic models — pure data, no I/O."""

from __future__ import annotations

import enum
import string
from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from template_studio.l1_entities.asset import AssetType, utc_now

_FORMATTER = string.Formatter()


class QuestionKind(enum.Enum):
    TEXT = 'text'
    SELECT = 'select'
    TEXTAREA = 'textarea'
    MULTISELECT = 'multiselect'

    @property
    def has_options(self) -> bool:
        return self in (QuestionKind.SELECT, QuestionKind.MULTISELECT)


class TemplateOrigin(enum.Enum):
    BUILT_IN = 'built-in'
    CUSTOM = 'custom'


class TemplateQuestion(BaseModel):
    id: str
    question: str
    kind: QuestionKind = QuestionKind.TEXT
    options: list[str] = Field(default_factory=list)
    required: bool = False
    placeholder: str | None = None
    max_length: int | None = Field(default=None, gt=0)

    @model_validator(mode='after')
    def _validate_options(self) -> TemplateQuestion:
        if self.kind.has_options and not self.options:
            raise ValueError(f"Question '{self.id}' ({self.kind.value}) needs at least one option")
        if not self.kind.has_options and self.options:
            raise ValueError(f"Question '{self.id}' ({self.kind.value}) must not declare options")
        if self.max_length is not None and self.kind not in (QuestionKind.TEXT, QuestionKind.TEXTAREA):
            raise ValueError(f"Question '{self.id}': max_length applies to text and textarea only")
        return self


class ContentTemplate(BaseModel):
    id: str
    name: str
    origin: TemplateOrigin = TemplateOrigin.CUSTOM
    industry: str
    description: str = ''
    questions: list[TemplateQuestion] = Field(default_factory=list)
    prompt_template: str
    asset_types: list[AssetType] = Field(default_factory=lambda: [AssetType.BACKGROUND])
    is_active: bool = True
    created_at: datetime = Field(default_factory=utc_now)
    owner_id: str | None = None

    @model_validator(mode='after')
    def _validate_questions(self) -> ContentTemplate:
        seen: set[str] = set()
        for q in self.questions:
            if q.id in seen:
                raise ValueError(f"Duplicate question id '{q.id}'")
            seen.add(q.id)
        if not self.asset_types:
            raise ValueError('asset_types must not be empty')
        if self.origin == TemplateOrigin.BUILT_IN and self.owner_id is not None:
            raise ValueError('Built-in templates have no owner')
        for _, field_name, format_spec, conversion in _FORMATTER.parse(self.prompt_template):
            if field_name is not None and (format_spec or conversion):
                raise ValueError(f"Placeholder '{{{field_name}}}' must not carry a format spec or conversion")
        return self

    def question(self, question_id: str) -> TemplateQuestion | None:
        for q in self.questions:
            if q.id == question_id:
                return q
        return None

    def placeholders(self) -> list[str]:
        """Placeholder names referenced by prompt_template, in first-use order."""
        names: list[str] = []
        for _, field_name, _, _ in _FORMATTER.parse(self.prompt_template):
            if field_name is not None and field_name not in names:
                names.append(field_name)
        return names

    def undeclared_placeholders(self) -> list[str]:
        declared = {q.id for q in self.questions}
        return [name for name in self.placeholders() if name not in declared]
