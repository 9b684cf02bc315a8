"""Gateway: storage stand-in for uploads — implements AssetUploader port.

Keeps uploaded bytes in memory keyed by storage path; no cloud I/O.
"""

from __future__ import annotations

import logging

from template_studio.l1_entities.asset import AssetMetadata, UploadedAsset, UploadFile

log = logging.getLogger('ts.upload')

DEFAULT_DIMENSIONS = (1024, 1024)


def user_image_path(user_id: str, category: str, filename: str) -> str:
    return f'users/{user_id}/images/{category}/{filename}'


def user_thumbnail_path(user_id: str, category: str, filename: str) -> str:
    return f'users/{user_id}/thumbnails/{category}/{filename}'


class MockAssetUploader:
    def __init__(self, base_url: str = 'memory://') -> None:
        self._base_url = base_url
        self.objects: dict[str, bytes] = {}

    async def upload(
        self,
        file: UploadFile,
        content: bytes,
        asset_type: str,
        user_id: str,
        filename: str,
    ) -> UploadedAsset:
        path = user_image_path(user_id, asset_type, filename)
        thumb_path = user_thumbnail_path(user_id, asset_type, filename)
        self.objects[path] = content
        self.objects[thumb_path] = content
        log.debug('Stored %d bytes at %s', len(content), path)

        width, height = DEFAULT_DIMENSIONS
        return UploadedAsset(
            id=f"uploaded-{filename.partition('.')[0]}",
            url=f'{self._base_url}{path}',
            thumbnail=f'{self._base_url}{thumb_path}',
            name=file.name,
            type=asset_type,
            created_by=user_id,
            metadata=AssetMetadata(
                width=width,
                height=height,
                format=file.mime_type.split('/')[-1],
                size=file.size,
            ),
        )
