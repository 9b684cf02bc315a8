"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FileSizeLimits(BaseModel):
    image: int = Field(gt=0)
    thumbnail: int = Field(gt=0)
    export: int = Field(gt=0)


class UploadsConfig(BaseModel):
    supported_image_types: list[str]
    size_limits: FileSizeLimits


class RoutesConfig(BaseModel):
    protected_prefixes: list[str]
    public_prefixes: list[str]
    login_path: str
    home_path: str


class GenerationConfig(BaseModel):
    default_style: str
    default_palette: list[str]


class SessionStoreConfig(BaseModel):
    backend: str  # 'memory' | 'json'
    clear_prefixes: list[str]


class LoggingConfig(BaseModel):
    directory: str | None = None  # None → no file logging
    level: str = 'INFO'


class StudioConfig(BaseModel):
    uploads: UploadsConfig
    routes: RoutesConfig
    generation: GenerationConfig
    session_store: SessionStoreConfig
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
