"""
src/i18n/storage.py
───────────────────
Persisted language preference.

The backend is any mutable mapping. In the running app it is the data of a
``dcc.Store(storage_type="local")``, so the value lives in the visitor's
localStorage and survives across sessions until overwritten.
"""
from __future__ import annotations

from collections.abc import MutableMapping

from config.settings import settings


class PreferenceStore:
    def __init__(self, backend: MutableMapping | None = None, key: str = settings.STORAGE_KEY):
        self.backend = backend if backend is not None else {}
        self.key = key

    def load(self) -> str | None:
        value = self.backend.get(self.key)
        return value if isinstance(value, str) and value else None

    def save(self, code: str) -> None:
        self.backend[self.key] = code

    def to_dict(self) -> dict:
        """Plain-dict snapshot, suitable as ``dcc.Store`` data."""
        return dict(self.backend)
