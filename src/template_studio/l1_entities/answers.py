"""Questionnaire answers — a tagged union keyed by the question's kind."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

MULTISELECT_SEPARATOR = ', '


class SingleAnswer(BaseModel):
    """Answer to a text, textarea or select question."""

    kind: Literal['text', 'select', 'textarea']
    value: str

    def as_prompt_text(self) -> str:
        return self.value

    def is_blank(self) -> bool:
        return not self.value.strip()


class MultiAnswer(BaseModel):
    """Answer to a multiselect question."""

    kind: Literal['multiselect'] = 'multiselect'
    values: list[str] = Field(default_factory=list)

    def as_prompt_text(self) -> str:
        return MULTISELECT_SEPARATOR.join(self.values)

    def is_blank(self) -> bool:
        return not self.values


Answer = Annotated[Union[SingleAnswer, MultiAnswer], Field(discriminator='kind')]

TemplateAnswers = dict[str, Answer]
