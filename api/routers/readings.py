from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from api.deps import get_locale, get_registry
from api.schemas import (
    DrawRequest,
    JournalEntryView,
    ReadingView,
    ResetRequest,
    SessionCreated,
    StartDailyRequest,
    StartSpreadRequest,
    TextRequest,
)
from api.sessions import SessionRegistry
from engine.errors import NoActiveReading

router = APIRouter(prefix="/api/v1/sessions")


@router.post("", response_model=SessionCreated, status_code=status.HTTP_201_CREATED)
def create_session(registry: SessionRegistry = Depends(get_registry)) -> SessionCreated:
    return SessionCreated(session_id=registry.create().id)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def close_session(session_id: str, registry: SessionRegistry = Depends(get_registry)) -> Response:
    registry.discard(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{session_id}/daily", response_model=ReadingView)
def start_daily_reading(
    session_id: str,
    payload: StartDailyRequest,
    registry: SessionRegistry = Depends(get_registry),
    locale: str = Depends(get_locale),
) -> ReadingView:
    reading = registry.get(session_id).start_daily_reading(
        payload.date, seed=payload.seed, resume=payload.resume
    )
    return ReadingView.build(reading, locale)


@router.post("/{session_id}/spread", response_model=ReadingView)
def start_spread_reading(
    session_id: str,
    payload: StartSpreadRequest,
    registry: SessionRegistry = Depends(get_registry),
    locale: str = Depends(get_locale),
) -> ReadingView:
    reading = registry.get(session_id).start_spread_reading(
        payload.template_id, day=payload.date
    )
    return ReadingView.build(reading, locale)


@router.get("/{session_id}/reading", response_model=ReadingView)
def get_reading(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
    locale: str = Depends(get_locale),
) -> ReadingView:
    reading = registry.get(session_id).current
    if reading is None:
        raise NoActiveReading(f"session {session_id} has no reading yet")
    return ReadingView.build(reading, locale)


@router.post("/{session_id}/slots/{slot_index}/draw", response_model=ReadingView)
def draw_one(
    session_id: str,
    slot_index: int,
    payload: DrawRequest | None = None,
    registry: SessionRegistry = Depends(get_registry),
    locale: str = Depends(get_locale),
) -> ReadingView:
    reveal = payload.reveal if payload is not None else True
    reading = registry.get(session_id).draw_one(slot_index, reveal=reveal)
    return ReadingView.build(reading, locale)


@router.post("/{session_id}/draw-all", response_model=ReadingView)
def draw_all(
    session_id: str,
    payload: DrawRequest | None = None,
    registry: SessionRegistry = Depends(get_registry),
    locale: str = Depends(get_locale),
) -> ReadingView:
    reveal = payload.reveal if payload is not None else True
    reading = registry.get(session_id).draw_all(reveal=reveal)
    return ReadingView.build(reading, locale)


@router.post("/{session_id}/slots/{slot_index}/reveal", response_model=ReadingView)
def reveal(
    session_id: str,
    slot_index: int,
    registry: SessionRegistry = Depends(get_registry),
    locale: str = Depends(get_locale),
) -> ReadingView:
    return ReadingView.build(registry.get(session_id).reveal(slot_index), locale)


@router.post("/{session_id}/reveal-all", response_model=ReadingView)
def reveal_all(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
    locale: str = Depends(get_locale),
) -> ReadingView:
    return ReadingView.build(registry.get(session_id).reveal_all(), locale)


@router.post("/{session_id}/reset", response_model=ReadingView)
def reset(
    session_id: str,
    payload: ResetRequest | None = None,
    registry: SessionRegistry = Depends(get_registry),
    locale: str = Depends(get_locale),
) -> ReadingView:
    seed = payload.seed if payload is not None else None
    return ReadingView.build(registry.get(session_id).reset(seed=seed), locale)


@router.put("/{session_id}/slots/{slot_index}/note", response_model=ReadingView)
def set_note(
    session_id: str,
    slot_index: int,
    payload: TextRequest,
    registry: SessionRegistry = Depends(get_registry),
    locale: str = Depends(get_locale),
) -> ReadingView:
    reading = registry.get(session_id).set_note(slot_index, payload.text)
    return ReadingView.build(reading, locale)


@router.put("/{session_id}/title", response_model=ReadingView)
def set_title(
    session_id: str,
    payload: TextRequest,
    registry: SessionRegistry = Depends(get_registry),
    locale: str = Depends(get_locale),
) -> ReadingView:
    return ReadingView.build(registry.get(session_id).set_title(payload.text), locale)


@router.put("/{session_id}/insights", response_model=ReadingView)
def set_insights(
    session_id: str,
    payload: TextRequest,
    registry: SessionRegistry = Depends(get_registry),
    locale: str = Depends(get_locale),
) -> ReadingView:
    return ReadingView.build(registry.get(session_id).set_insights(payload.text), locale)


@router.post("/{session_id}/save", response_model=JournalEntryView)
def save(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
    locale: str = Depends(get_locale),
) -> JournalEntryView:
    return JournalEntryView.build(registry.get(session_id).save(), locale)


@router.post("/{session_id}/reopen/{entry_id}", response_model=ReadingView)
def reopen(
    session_id: str,
    entry_id: str,
    registry: SessionRegistry = Depends(get_registry),
    locale: str = Depends(get_locale),
) -> ReadingView:
    return ReadingView.build(registry.get(session_id).reopen(entry_id), locale)
