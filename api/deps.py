from __future__ import annotations

from fastapi import Depends, Query

from api.sessions import SessionRegistry
from engine.i18n import normalize_locale
from engine.journal.store import JournalStore

_journal: JournalStore | None = None
_registry: SessionRegistry | None = None


def get_journal() -> JournalStore:
    global _journal
    if _journal is None:
        _journal = JournalStore()
    return _journal


def get_registry(journal: JournalStore = Depends(get_journal)) -> SessionRegistry:
    global _registry
    if _registry is None:
        _registry = SessionRegistry(journal)
    return _registry


def get_locale(locale: str | None = Query(default=None)) -> str:
    return normalize_locale(locale)
