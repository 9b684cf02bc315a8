"""Port: string key/value store backing the user session store."""

from __future__ import annotations

from typing import Protocol


class KeyValueStore(Protocol):
    """Abstract key/value store (in-memory for tests, file-backed in production)."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

    def keys(self) -> list[str]: ...
