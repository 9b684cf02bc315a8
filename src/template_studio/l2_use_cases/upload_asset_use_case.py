"""Use case: validate a user upload, then hand it to the upload capability."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from template_studio.l1_entities.asset import UploadedAsset, UploadFile
from template_studio.l1_entities.errors import UploadRejectedError
from template_studio.l2_use_cases.ports.asset_uploader import AssetUploader
from template_studio.l2_use_cases.utils.file_validation import (
    FILE_SIZE_LIMITS,
    MIB,
    SUPPORTED_IMAGE_TYPES,
    generate_unique_filename,
    is_valid_file_size,
    is_valid_image_file,
)

log = logging.getLogger('ts.upload')


class UploadAssetUseCase:
    def __init__(
        self,
        uploader: AssetUploader,
        *,
        supported_types: Sequence[str] = SUPPORTED_IMAGE_TYPES,
        size_limit: int = FILE_SIZE_LIMITS['image'],
    ) -> None:
        self._uploader = uploader
        self._supported_types = tuple(supported_types)
        self._size_limit = size_limit

    @property
    def size_limit(self) -> int:
        return self._size_limit

    async def execute(self, file: UploadFile, content: bytes, asset_type: str, user_id: str) -> UploadedAsset:
        """Upload *content* for *user_id*. Raises UploadRejectedError before any I/O."""
        if not is_valid_image_file(file, self._supported_types):
            raise UploadRejectedError(
                f"Invalid file type '{file.mime_type}'. Supported: {', '.join(self._supported_types)}"
            )
        if not is_valid_file_size(file, self._size_limit):
            raise UploadRejectedError(f'File size exceeds limit of {self._size_limit / MIB:g}MB')

        filename = generate_unique_filename(file.name)
        log.info('Uploading %s as %s for user %s (%d bytes)', file.name, filename, user_id, file.size)
        return await self._uploader.upload(file, content, asset_type, user_id, filename)
