"""Reading state machine.

A reading is a fixed row of slots. Each slot moves ``EMPTY -> FACE_DOWN ->
REVEALED`` (or straight from ``EMPTY`` to ``REVEALED``) and only a whole
reading reset takes cards back out. The functions here mutate the reading in
place and are not thread-safe; callers serialize access (see
``engine.session.ReadingSession``).
"""

from __future__ import annotations

import copy
import logging
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from engine import config
from engine.errors import (
    IndexOutOfRange,
    InvalidNote,
    InvalidTitle,
    SlotEmpty,
    SlotOccupied,
)
from engine.tarot.cards import TarotCard, get_all_cards
from engine.tarot.draws import (
    DrawnCard,
    Orientation,
    Seed,
    date_seed,
    draw_cards,
    fresh_seed,
)
from engine.tarot.spreads import get_spread

HOURS_PER_DAY = 24

logger = logging.getLogger(__name__)


class ReadingKind(str, Enum):
    DAILY = "daily"
    SPREAD = "spread"


class SlotState(str, Enum):
    EMPTY = "empty"
    FACE_DOWN = "face_down"
    REVEALED = "revealed"


@dataclass
class Slot:
    index: int
    card: TarotCard | None = None
    orientation: Orientation | None = None
    is_revealed: bool = False
    note: str = ""

    @property
    def state(self) -> SlotState:
        if self.card is None:
            return SlotState.EMPTY
        return SlotState.REVEALED if self.is_revealed else SlotState.FACE_DOWN

    def clear(self) -> None:
        self.card = None
        self.orientation = None
        self.is_revealed = False
        self.note = ""


@dataclass
class Reading:
    kind: ReadingKind
    date: date
    slots: list[Slot]
    title: str = ""
    spread_template_id: str | None = None
    insights: str = ""
    seed: str | None = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    saved_at: datetime | None = None

    @property
    def is_complete(self) -> bool:
        return is_complete(self)


def default_title(reading: Reading) -> str:
    if reading.kind is ReadingKind.DAILY:
        return f"Daily Tarot {reading.date.isoformat()}"
    template = get_spread(reading.spread_template_id or "")
    return f"{template.display_name} {reading.date.isoformat()}"


def new_daily_reading(day: date, *, seed: Seed | None = None) -> Reading:
    reading = Reading(
        kind=ReadingKind.DAILY,
        date=day,
        slots=[Slot(index=hour) for hour in range(HOURS_PER_DAY)],
        seed=str(seed) if seed is not None else date_seed(day),
    )
    reading.title = default_title(reading)
    return reading


def new_spread_reading(template_id: str, *, day: date | None = None) -> Reading:
    template = get_spread(template_id)
    reading = Reading(
        kind=ReadingKind.SPREAD,
        date=day or date.today(),
        slots=[Slot(index=index) for index in range(template.card_count)],
        spread_template_id=template.id,
    )
    reading.title = default_title(reading)
    return reading


def is_complete(reading: Reading) -> bool:
    return all(slot.card is not None for slot in reading.slots)


def assigned_card_ids(reading: Reading) -> set[str]:
    return {slot.card.id for slot in reading.slots if slot.card is not None}


def empty_slot_indexes(reading: Reading) -> list[int]:
    return [slot.index for slot in reading.slots if slot.card is None]


def _slot(reading: Reading, slot_index: int) -> Slot:
    if isinstance(slot_index, bool) or not isinstance(slot_index, int):
        raise IndexOutOfRange(f"slot index must be an integer, got {slot_index!r}")
    if slot_index < 0 or slot_index >= len(reading.slots):
        raise IndexOutOfRange(
            f"slot {slot_index} is outside 0..{len(reading.slots) - 1}"
        )
    return reading.slots[slot_index]


def _remaining_deck(reading: Reading) -> list[TarotCard]:
    taken = assigned_card_ids(reading)
    return [card for card in get_all_cards() if card.id not in taken]


def _derive_seed(reading: Reading, tag: str) -> str | None:
    if reading.seed is None:
        return None
    return f"{reading.seed}:{tag}"


def _mark_unsaved(reading: Reading) -> None:
    reading.saved_at = None


def _place(slot: Slot, drawn: DrawnCard, *, reveal: bool) -> None:
    slot.card = drawn.card
    slot.orientation = drawn.orientation
    slot.is_revealed = reveal


def draw_one(reading: Reading, slot_index: int, *, reveal: bool = True) -> Slot:
    slot = _slot(reading, slot_index)
    if slot.card is not None:
        raise SlotOccupied(f"slot {slot_index} already holds {slot.card.id}")

    (drawn,) = draw_cards(
        _remaining_deck(reading), 1, _derive_seed(reading, f"slot:{slot_index}")
    )
    _place(slot, drawn, reveal=reveal)
    _mark_unsaved(reading)
    logger.info(
        "Drew card into slot",
        extra={"reading_id": reading.id, "slot": slot_index, "card_id": drawn.card.id},
    )
    return slot


def draw_all(reading: Reading, *, reveal: bool = True) -> list[Slot]:
    """Fill every empty slot in index order; returns the slots that were filled."""
    empties = empty_slot_indexes(reading)
    if not empties:
        return []

    tag = "all:" + ",".join(str(index) for index in empties)
    drawn = draw_cards(_remaining_deck(reading), len(empties), _derive_seed(reading, tag))
    filled: list[Slot] = []
    for index, drawn_card in zip(empties, drawn):
        slot = reading.slots[index]
        _place(slot, drawn_card, reveal=reveal)
        filled.append(slot)
    _mark_unsaved(reading)
    logger.info(
        "Filled empty slots",
        extra={"reading_id": reading.id, "count": len(filled)},
    )
    return filled


def reveal(reading: Reading, slot_index: int) -> Slot:
    slot = _slot(reading, slot_index)
    if slot.card is None:
        raise SlotEmpty(f"slot {slot_index} has no card to reveal")
    if not slot.is_revealed:
        slot.is_revealed = True
        _mark_unsaved(reading)
    return slot


def reveal_all(reading: Reading) -> list[Slot]:
    revealed: list[Slot] = []
    for slot in reading.slots:
        if slot.card is not None and not slot.is_revealed:
            slot.is_revealed = True
            revealed.append(slot)
    if revealed:
        _mark_unsaved(reading)
    return revealed


def reset_reading(reading: Reading, *, seed: Seed | None = None) -> Reading:
    """Start over as a new unsaved reading and redraw every slot face up.

    Slots, notes and insights are cleared. The reading gets a fresh id, so a
    journal entry saved before the reset keeps its cards.
    """
    reading.id = uuid.uuid4().hex
    reading.saved_at = None
    reading.seed = str(seed) if seed is not None else fresh_seed()
    for slot in reading.slots:
        slot.clear()
    reading.insights = ""
    draw_all(reading, reveal=True)
    logger.info("Reset reading", extra={"reading_id": reading.id, "kind": reading.kind.value})
    return reading


def _check_length(text: str, max_length: int, error: type[Exception], what: str) -> None:
    if len(text) > max_length:
        raise error(f"{what} is {len(text)} characters, limit is {max_length}")


def set_note(
    reading: Reading, slot_index: int, text: str, *, max_length: int | None = None
) -> Slot:
    slot = _slot(reading, slot_index)
    limit = config.MAX_NOTE_CHARS if max_length is None else max_length
    _check_length(text, limit, InvalidNote, "note")
    slot.note = text
    _mark_unsaved(reading)
    return slot


def set_insights(reading: Reading, text: str, *, max_length: int | None = None) -> Reading:
    limit = config.MAX_INSIGHTS_CHARS if max_length is None else max_length
    _check_length(text, limit, InvalidNote, "insights")
    reading.insights = text
    _mark_unsaved(reading)
    return reading


def set_title(reading: Reading, text: str, *, max_length: int | None = None) -> Reading:
    # Blank titles fall back to the template-derived default.
    limit = config.MAX_TITLE_CHARS if max_length is None else max_length
    cleaned = text.strip()
    _check_length(cleaned, limit, InvalidTitle, "title")
    reading.title = cleaned or default_title(reading)
    _mark_unsaved(reading)
    return reading


def snapshot(reading: Reading) -> Reading:
    return copy.deepcopy(reading)


__all__ = [
    "HOURS_PER_DAY",
    "ReadingKind",
    "SlotState",
    "Slot",
    "Reading",
    "assigned_card_ids",
    "default_title",
    "draw_all",
    "draw_one",
    "empty_slot_indexes",
    "is_complete",
    "new_daily_reading",
    "new_spread_reading",
    "reset_reading",
    "reveal",
    "reveal_all",
    "set_insights",
    "set_note",
    "set_title",
    "snapshot",
]
