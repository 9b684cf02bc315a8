"""Gateways: KeyValueStore backends for the user session store."""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

log = logging.getLogger('ts.store')


class InMemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileKeyValueStore:
    """Persists the whole map to one JSON file, rewritten on every change."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = threading.Lock()
        self._data: dict[str, str] = self._read()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value
            self._write()

    def delete(self, key: str) -> None:
        with self._lock:
            if self._data.pop(key, None) is not None:
                self._write()

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._data)

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        data = json.loads(self._path.read_text(encoding='utf-8') or '{}')
        if not isinstance(data, dict):
            raise ValueError(f'Session store at {self._path} is not a JSON object')
        return {str(k): str(v) for k, v in data.items()}

    def _write(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix('.tmp')
        tmp.write_text(json.dumps(self._data, indent=2, sort_keys=True), encoding='utf-8')
        tmp.replace(self._path)
        log.debug('Wrote %d keys to %s', len(self._data), self._path)
