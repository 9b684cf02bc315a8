"""Port: configuration loader."""

from __future__ import annotations

from typing import Protocol

from template_studio.l1_entities.config import StudioConfig


class ConfigLoader(Protocol):
    """Abstract configuration loader."""

    def load(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> StudioConfig:
        """Load and validate configuration, merging overrides."""
        ...

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return the merged user data before validation and defaults."""
        ...
