"""Port: asset generation capability."""

from __future__ import annotations

from typing import Protocol

from template_studio.l1_entities.asset import AssetGenerationRequest, GeneratedAsset


class AssetGenerator(Protocol):
    """Abstract image generator. May suspend on network I/O; raises on failure."""

    async def generate(self, request: AssetGenerationRequest) -> GeneratedAsset:
        """Produce one asset for *request*."""
        ...
