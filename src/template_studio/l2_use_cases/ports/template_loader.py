"""Port: template loader."""

from __future__ import annotations

from typing import Protocol

from template_studio.l1_entities.template import ContentTemplate


class TemplateLoader(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Abstract template loader."""

    def load_builtins(self) -> list[ContentTemplate]:
        """Load every built-in template."""
        ...

    def load_file(self, path: str, owner_id: str) -> ContentTemplate:
        """Load a custom template owned by *owner_id* from a file."""
        ...

    def load_user_templates(self, owner_id: str) -> list[ContentTemplate]:
        """Load every template in the user template directory as *owner_id*'s."""
        ...
