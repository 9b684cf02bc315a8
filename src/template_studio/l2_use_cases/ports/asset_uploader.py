"""Port: asset upload capability."""

from __future__ import annotations

from typing import Protocol

from template_studio.l1_entities.asset import UploadedAsset, UploadFile


class AssetUploader(Protocol):
    """Abstract storage for user uploads. Called only after the file passed validation."""

    async def upload(
        self,
        file: UploadFile,
        content: bytes,
        asset_type: str,
        user_id: str,
        filename: str,
    ) -> UploadedAsset:
        """Store *content* under *filename* and return its descriptor."""
        ...
