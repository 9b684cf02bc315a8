"""Use case: user-scoped client state with an explicit logout cleanup."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from template_studio.l2_use_cases.ports.key_value_store import KeyValueStore

log = logging.getLogger('ts.store')

DEFAULT_CLEAR_PREFIXES: tuple[str, ...] = ('firebase:', 'user:', 'auth:')


class UserSessionStore:
    """Thin facade over a KeyValueStore; the backing store is injected."""

    def __init__(self, backend: KeyValueStore, clear_prefixes: Sequence[str] = DEFAULT_CLEAR_PREFIXES) -> None:
        self._backend = backend
        self._clear_prefixes = tuple(clear_prefixes)

    def get(self, key: str) -> str | None:
        return self._backend.get(key)

    def set(self, key: str, value: str) -> None:
        self._backend.set(key, value)

    def clear(self, prefixes: Sequence[str] | None = None) -> list[str]:
        """Remove every key starting with one of *prefixes*. Returns the removed keys."""
        scope = tuple(prefixes) if prefixes is not None else self._clear_prefixes
        removed = [k for k in self._backend.keys() if k.startswith(scope)]
        for key in removed:
            self._backend.delete(key)
        log.info('Cleared %d user-scoped keys', len(removed))
        return removed
