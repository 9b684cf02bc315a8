"""Process-wide configuration defaults — lives in L4, not domain."""

from __future__ import annotations

import copy

from template_studio.l1_entities.config import StudioConfig
from template_studio.l2_use_cases.user_session_store import DEFAULT_CLEAR_PREFIXES
from template_studio.l2_use_cases.utils.file_validation import FILE_SIZE_LIMITS, SUPPORTED_IMAGE_TYPES
from template_studio.l2_use_cases.utils.route_policy import (
    HOME_PATH,
    LOGIN_PATH,
    PROTECTED_PREFIXES,
    PUBLIC_PREFIXES,
)
from template_studio.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'uploads': {
        'supported_image_types': list(SUPPORTED_IMAGE_TYPES),
        'size_limits': dict(FILE_SIZE_LIMITS),
    },
    'routes': {
        'protected_prefixes': list(PROTECTED_PREFIXES),
        'public_prefixes': list(PUBLIC_PREFIXES),
        'login_path': LOGIN_PATH,
        'home_path': HOME_PATH,
    },
    'generation': {
        'default_style': 'modern-minimal',
        'default_palette': ['#111827', '#F97316'],
    },
    'session_store': {
        'backend': 'json',
        'clear_prefixes': list(DEFAULT_CLEAR_PREFIXES),
    },
    'logging': {
        'directory': None,
        'level': 'INFO',
    },
}


def build_app_config(raw: dict) -> StudioConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return StudioConfig.model_validate(merged)
