"""Shared path constants for configuration and persisted client state."""

from __future__ import annotations

from platformdirs import user_config_path, user_data_path

CONFIG_DIR = user_config_path('template-studio')
DATA_DIR = user_data_path('template-studio')

USER_TEMPLATES_DIR = CONFIG_DIR / 'templates'
SESSION_STORE_PATH = DATA_DIR / 'session_store.json'

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
