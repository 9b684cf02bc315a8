"""Asset entities: generation requests, generated assets, uploads."""

from __future__ import annotations

import enum
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AssetType(enum.Enum):
    BACKGROUND = 'background'
    LOGO = 'logo'
    TEXT_OVERLAY = 'text-overlay'
    DECORATIVE = 'decorative'


class AssetGenerationRequest(BaseModel):
    """One typed request handed to the generation capability. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    type: AssetType
    prompt: str
    style: str
    color_palette: tuple[str, ...] = ()
    industry: str
    sequence_index: int = 0


class AssetMetadata(BaseModel):
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    format: str
    size: int | None = None


class GeneratedAsset(BaseModel):
    """Result of one generation request, owned by the session that produced it."""

    id: str
    type: AssetType
    url: str
    prompt: str
    style: str
    created_at: datetime = Field(default_factory=utc_now)
    metadata: AssetMetadata


class UploadFile(BaseModel):
    """A file as declared by the client. Type and size are trusted, not sniffed."""

    name: str
    mime_type: str
    size: int = Field(ge=0)


class UploadedAsset(BaseModel):
    """Descriptor returned by the upload capability."""

    id: str
    url: str
    thumbnail: str
    name: str
    type: str
    created_by: str
    created_at: datetime = Field(default_factory=utc_now)
    metadata: AssetMetadata
