from __future__ import annotations

import datetime as dt
from typing import Literal

from fastapi import APIRouter, Depends, Query, Response, status

from api.deps import get_journal, get_locale
from api.schemas import JournalEntryView, JournalStatsView
from engine.errors import NotFound
from engine.journal.store import JournalStore
from engine.reading import ReadingKind

router = APIRouter(prefix="/api/v1/journal")


@router.get("", response_model=list[JournalEntryView])
def list_entries(
    kind: ReadingKind | None = None,
    q: str | None = None,
    limit: int | None = Query(default=None, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    journal: JournalStore = Depends(get_journal),
    locale: str = Depends(get_locale),
) -> list[JournalEntryView]:
    entries = journal.list_entries(kind, search=q, limit=limit, offset=offset)
    return [JournalEntryView.build(entry, locale) for entry in entries]


@router.get("/latest", response_model=JournalEntryView)
def latest_entry(
    kind: ReadingKind | None = None,
    journal: JournalStore = Depends(get_journal),
    locale: str = Depends(get_locale),
) -> JournalEntryView:
    entry = journal.latest(kind)
    if entry is None:
        raise NotFound("The journal is empty")
    return JournalEntryView.build(entry, locale)


@router.get("/stats", response_model=JournalStatsView)
def journal_stats(journal: JournalStore = Depends(get_journal)) -> JournalStatsView:
    return JournalStatsView.build(journal.stats())


@router.get("/export")
def export_journal(
    format: Literal["json", "csv"] = "json",
    journal: JournalStore = Depends(get_journal),
) -> Response:
    media_type = "application/json" if format == "json" else "text/csv"
    return Response(content=journal.export(format), media_type=media_type)


@router.get("/daily/{day}", response_model=JournalEntryView)
def daily_entry(
    day: dt.date,
    journal: JournalStore = Depends(get_journal),
    locale: str = Depends(get_locale),
) -> JournalEntryView:
    entry = journal.get_by_date(day)
    if entry is None:
        raise NotFound(f"No daily reading saved for {day.isoformat()}")
    return JournalEntryView.build(entry, locale)


@router.get("/{entry_id}", response_model=JournalEntryView)
def get_entry(
    entry_id: str,
    journal: JournalStore = Depends(get_journal),
    locale: str = Depends(get_locale),
) -> JournalEntryView:
    return JournalEntryView.build(journal.get(entry_id), locale)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_entry(entry_id: str, journal: JournalStore = Depends(get_journal)) -> Response:
    journal.delete(entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
