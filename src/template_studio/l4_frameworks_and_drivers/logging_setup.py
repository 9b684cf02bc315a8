"""File-based debug logging setup."""

from __future__ import annotations

import logging
from pathlib import Path


def setup_file_logging(output_dir: Path, level: str = 'DEBUG') -> Path:
    """Attach a file handler to the ``ts`` logger hierarchy. Returns the log path."""
    output_dir.mkdir(parents=True, exist_ok=True)
    log_path = output_dir / 'template_studio.log'
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(message)s'))
    root = logging.getLogger('ts')
    root.setLevel(level.upper())
    root.addHandler(handler)
    root.info('Logging started → %s', log_path)
    return log_path
