"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

from stringsets.store import InMemoryStringSetStore, StringSetStore

_store: StringSetStore | None = None


def get_store() -> StringSetStore:
    """
    Return a singleton store so uploaded sets persist across requests.
    """
    global _store
    if _store:
        return _store

    _store = InMemoryStringSetStore()
    return _store
