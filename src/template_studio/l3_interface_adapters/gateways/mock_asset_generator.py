"""Gateway: placeholder image generator — implements AssetGenerator port.

Produces descriptors for 1024x1024 PNGs at ``mock://`` URLs without rendering
anything. Used by the CLI and tests until a real image backend is wired in.
"""

from __future__ import annotations

import asyncio
import uuid

from template_studio.l1_entities.asset import (
    AssetGenerationRequest,
    AssetMetadata,
    AssetType,
    GeneratedAsset,
)

DEFAULT_SIZE = (1024, 1024)


class MockAssetGenerator:
    def __init__(
        self,
        *,
        delay: float = 0.0,
        fail_types: set[AssetType] | None = None,
        size: tuple[int, int] = DEFAULT_SIZE,
    ) -> None:
        self._delay = delay
        self._fail_types = fail_types or set()
        self._size = size
        self.requests: list[AssetGenerationRequest] = []

    async def generate(self, request: AssetGenerationRequest) -> GeneratedAsset:
        self.requests.append(request)
        if self._delay:
            await asyncio.sleep(self._delay)
        if request.type in self._fail_types:
            raise RuntimeError(f'{request.type.value} generation unavailable')
        asset_id = f'{request.type.value}-{uuid.uuid4().hex[:12]}'
        width, height = self._size
        return GeneratedAsset(
            id=asset_id,
            type=request.type,
            url=f'mock://assets/{asset_id}.png',
            prompt=request.prompt,
            style=request.style,
            metadata=AssetMetadata(width=width, height=height, format='png'),
        )
