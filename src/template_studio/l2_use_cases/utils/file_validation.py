"""Pure upload pre-checks. Total functions: they never raise."""

from __future__ import annotations

import secrets
import time

from template_studio.l1_entities.asset import UploadFile

SUPPORTED_IMAGE_TYPES: tuple[str, ...] = (
    'image/jpeg',
    'image/jpg',
    'image/png',
    'image/gif',
    'image/webp',
)

MIB = 1024 * 1024

FILE_SIZE_LIMITS: dict[str, int] = {
    'image': 10 * MIB,
    'thumbnail': 1 * MIB,
    'export': 20 * MIB,
}


def is_valid_image_file(file: UploadFile, supported_types: tuple[str, ...] | list[str] = SUPPORTED_IMAGE_TYPES) -> bool:
    """True iff the declared MIME type is a supported image type."""
    return file.mime_type in supported_types


def is_valid_file_size(file: UploadFile, limit: int) -> bool:
    """True iff the file is at most *limit* bytes."""
    return file.size <= limit


def generate_unique_filename(original_name: str) -> str:
    """Return ``<ms timestamp>_<random>[.<ext>]`` keeping the original extension.

    The extension is whatever follows the final dot, case preserved; a name
    without a dot (or ending in one) gets no extension.
    """
    stamp = time.time_ns() // 1_000_000
    token = secrets.token_hex(8)
    _, dot, extension = original_name.rpartition('.')
    if dot and extension:
        return f'{stamp}_{token}.{extension}'
    return f'{stamp}_{token}'
