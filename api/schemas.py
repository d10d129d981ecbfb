from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from engine.journal.store import JournalEntry, JournalStats
from engine.reading import Reading, SlotState
from engine.tarot.cards import TarotCard, get_card_by_id
from engine.tarot.draws import Orientation, orientation_label
from engine.tarot.spreads import SpreadTemplate, get_spread


class CardView(BaseModel):
    id: str
    number: int
    name: str
    keywords: list[str]
    meaning: str
    image_ref: str
    suit: str
    arcana: str
    element: str

    @classmethod
    def build(cls, card: TarotCard, locale: str) -> "CardView":
        return cls(
            id=card.id,
            number=card.number,
            name=card.display_name(locale),
            keywords=list(card.keywords_for(locale)),
            meaning=card.meaning_for(locale),
            image_ref=card.image_ref,
            suit=card.suit.value,
            arcana=card.arcana.value,
            element=card.element,
        )


class SpreadView(BaseModel):
    id: str
    name: str
    description: str
    card_count: int
    positions: list[str]
    is_premium: bool

    @classmethod
    def build(cls, spread: SpreadTemplate, locale: str) -> "SpreadView":
        return cls(
            id=spread.id,
            name=spread.name_for(locale),
            description=spread.description_for(locale),
            card_count=spread.card_count,
            positions=list(spread.position_names(locale)),
            is_premium=spread.is_premium,
        )


class SlotView(BaseModel):
    index: int
    position: str | None = None
    state: str
    card: CardView | None = None
    orientation: Orientation | None = None
    orientation_label: str | None = None
    is_revealed: bool
    note: str


def _slot_view(
    index: int,
    card: TarotCard | None,
    orientation: Orientation | None,
    is_revealed: bool,
    note: str,
    state: str,
    position: str | None,
    locale: str,
) -> SlotView:
    return SlotView(
        index=index,
        position=position,
        state=state,
        # Face-down cards stay hidden from the view.
        card=CardView.build(card, locale) if card is not None and is_revealed else None,
        orientation=orientation if is_revealed else None,
        orientation_label=orientation_label(orientation, locale)
        if orientation is not None and is_revealed
        else None,
        is_revealed=is_revealed,
        note=note,
    )


def _position_names(spread_template_id: str | None, locale: str) -> tuple[str, ...] | None:
    if spread_template_id is None:
        return None
    return get_spread(spread_template_id).position_names(locale)


class ReadingView(BaseModel):
    id: str
    kind: str
    date: dt.date
    spread_template_id: str | None
    title: str
    insights: str
    is_complete: bool
    saved_at: dt.datetime | None
    slots: list[SlotView]

    @classmethod
    def build(cls, reading: Reading, locale: str) -> "ReadingView":
        positions = _position_names(reading.spread_template_id, locale)
        return cls(
            id=reading.id,
            kind=reading.kind.value,
            date=reading.date,
            spread_template_id=reading.spread_template_id,
            title=reading.title,
            insights=reading.insights,
            is_complete=reading.is_complete,
            saved_at=reading.saved_at,
            slots=[
                _slot_view(
                    slot.index,
                    slot.card,
                    slot.orientation,
                    slot.is_revealed,
                    slot.note,
                    slot.state.value,
                    positions[slot.index] if positions else None,
                    locale,
                )
                for slot in reading.slots
            ],
        )


class JournalEntryView(BaseModel):
    id: str
    kind: str
    date: dt.date
    spread_template_id: str | None
    title: str
    insights: str
    saved_at: dt.datetime
    slots: list[SlotView]

    @classmethod
    def build(cls, entry: JournalEntry, locale: str) -> "JournalEntryView":
        positions = _position_names(entry.spread_template_id, locale)
        return cls(
            id=entry.id,
            kind=entry.kind.value,
            date=entry.date,
            spread_template_id=entry.spread_template_id,
            title=entry.title,
            insights=entry.insights,
            saved_at=entry.saved_at,
            slots=[
                _slot_view(
                    record.index,
                    get_card_by_id(record.card_id),
                    record.orientation,
                    record.is_revealed,
                    record.note,
                    (SlotState.REVEALED if record.is_revealed else SlotState.FACE_DOWN).value,
                    positions[record.index] if positions else None,
                    locale,
                )
                for record in entry.slots
            ],
        )


class JournalStatsView(BaseModel):
    total: int
    daily: int
    spread: int
    top_cards: list[dict[str, int | str]]
    reversed_ratio: float

    @classmethod
    def build(cls, stats: JournalStats) -> "JournalStatsView":
        return cls(
            total=stats.total,
            daily=stats.daily,
            spread=stats.spread,
            top_cards=[
                {"card_id": card_id, "count": count} for card_id, count in stats.top_cards
            ],
            reversed_ratio=stats.reversed_ratio,
        )


class SessionCreated(BaseModel):
    session_id: str


class StartDailyRequest(BaseModel):
    date: dt.date | None = None
    seed: str | None = None
    resume: bool = False


class StartSpreadRequest(BaseModel):
    template_id: str = Field(..., min_length=1)
    date: dt.date | None = None


class DrawRequest(BaseModel):
    reveal: bool = True


class ResetRequest(BaseModel):
    seed: str | None = None


class TextRequest(BaseModel):
    text: str


class ErrorResponse(BaseModel):
    error: str
    detail: str
