from datetime import date, datetime, timezone

import pytest

from engine import config
from engine import reading as readings
from engine.errors import (
    IndexOutOfRange,
    InvalidNote,
    InvalidTitle,
    NotFound,
    SlotEmpty,
    SlotOccupied,
)
from engine.reading import HOURS_PER_DAY, ReadingKind, SlotState

DAY = date(2024, 3, 1)


def card_ids(reading: readings.Reading) -> list[str | None]:
    return [slot.card.id if slot.card else None for slot in reading.slots]


def test_three_card_spread_walkthrough() -> None:
    reading = readings.new_spread_reading("three-card", day=DAY)

    assert reading.kind is ReadingKind.SPREAD
    assert reading.title == "Three Card Spread 2024-03-01"
    assert [slot.state for slot in reading.slots] == [SlotState.EMPTY] * 3
    assert not reading.is_complete

    readings.draw_one(reading, 1)
    assert reading.slots[1].state is SlotState.REVEALED
    assert not reading.is_complete

    filled = readings.draw_all(reading)
    assert [slot.index for slot in filled] == [0, 2]
    assert reading.is_complete
    assert len(set(card_ids(reading))) == 3


def test_unknown_template_raises_not_found() -> None:
    with pytest.raises(NotFound):
        readings.new_spread_reading("seven-card", day=DAY)


def test_draw_into_occupied_slot_is_rejected() -> None:
    reading = readings.new_spread_reading("one-card", day=DAY)
    readings.draw_one(reading, 0)
    before = card_ids(reading)

    with pytest.raises(SlotOccupied):
        readings.draw_one(reading, 0)
    assert card_ids(reading) == before


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_slot_index_out_of_range(index: int) -> None:
    reading = readings.new_spread_reading("three-card", day=DAY)

    with pytest.raises(IndexOutOfRange):
        readings.draw_one(reading, index)
    with pytest.raises(IndexOutOfRange):
        readings.set_note(reading, index, "note")


def test_face_down_then_reveal() -> None:
    reading = readings.new_spread_reading("three-card", day=DAY)

    readings.draw_one(reading, 0, reveal=False)
    assert reading.slots[0].state is SlotState.FACE_DOWN

    readings.reveal(reading, 0)
    assert reading.slots[0].state is SlotState.REVEALED

    with pytest.raises(SlotEmpty):
        readings.reveal(reading, 1)


def test_reveal_all_flips_only_face_down_cards() -> None:
    reading = readings.new_spread_reading("five-card", day=DAY)
    readings.draw_one(reading, 0)
    readings.draw_one(reading, 1, reveal=False)
    readings.draw_one(reading, 2, reveal=False)

    flipped = readings.reveal_all(reading)

    assert [slot.index for slot in flipped] == [1, 2]
    assert reading.slots[3].state is SlotState.EMPTY


def test_completeness_only_grows_while_drawing() -> None:
    reading = readings.new_spread_reading("celtic-cross", day=DAY)
    seen_complete = False

    for index in range(len(reading.slots)):
        readings.draw_one(reading, index)
        if seen_complete:
            assert reading.is_complete
        seen_complete = reading.is_complete

    assert seen_complete


def test_draw_all_on_full_reading_is_noop() -> None:
    reading = readings.new_spread_reading("three-card", day=DAY)
    readings.draw_all(reading)
    before = card_ids(reading)

    assert readings.draw_all(reading) == []
    assert card_ids(reading) == before


def test_daily_reading_is_deterministic_for_a_day() -> None:
    first = readings.new_daily_reading(DAY)
    second = readings.new_daily_reading(DAY)
    readings.draw_all(first)
    readings.draw_all(second)

    assert len(first.slots) == HOURS_PER_DAY
    assert first.title == "Daily Tarot 2024-03-01"
    assert card_ids(first) == card_ids(second)
    assert [s.orientation for s in first.slots] == [s.orientation for s in second.slots]
    assert len(set(card_ids(first))) == HOURS_PER_DAY


def test_daily_reading_changes_with_the_day() -> None:
    today = readings.new_daily_reading(DAY)
    tomorrow = readings.new_daily_reading(date(2024, 3, 2))
    readings.draw_all(today)
    readings.draw_all(tomorrow)

    assert card_ids(today) != card_ids(tomorrow)


def test_single_draws_never_repeat_a_card() -> None:
    reading = readings.new_daily_reading(DAY, seed=5)

    for hour in range(HOURS_PER_DAY):
        readings.draw_one(reading, hour)

    assert len(set(card_ids(reading))) == HOURS_PER_DAY


def test_reset_redraws_everything_face_up() -> None:
    reading = readings.new_spread_reading("three-card", day=DAY)
    readings.draw_all(reading, reveal=False)
    readings.set_note(reading, 0, "first thoughts")
    readings.set_insights(reading, "overall")

    readings.reset_reading(reading, seed="again")

    assert reading.is_complete
    assert all(slot.state is SlotState.REVEALED for slot in reading.slots)
    assert all(slot.note == "" for slot in reading.slots)
    assert reading.insights == ""
    assert len(set(card_ids(reading))) == 3


def test_reset_with_same_seed_is_repeatable() -> None:
    first = readings.new_spread_reading("five-card", day=DAY)
    second = readings.new_spread_reading("five-card", day=DAY)

    readings.reset_reading(first, seed="same")
    readings.reset_reading(second, seed="same")
    once = card_ids(first)
    readings.reset_reading(first, seed="same")

    assert card_ids(first) == once == card_ids(second)


def test_notes_respect_the_limit() -> None:
    reading = readings.new_spread_reading("one-card", day=DAY)

    readings.set_note(reading, 0, "x" * config.MAX_NOTE_CHARS)
    assert len(reading.slots[0].note) == config.MAX_NOTE_CHARS

    with pytest.raises(InvalidNote):
        readings.set_note(reading, 0, "x" * (config.MAX_NOTE_CHARS + 1))
    assert len(reading.slots[0].note) == config.MAX_NOTE_CHARS

    readings.set_note(reading, 0, "")
    assert reading.slots[0].note == ""


def test_note_can_be_written_on_empty_slot() -> None:
    reading = readings.new_daily_reading(DAY)

    readings.set_note(reading, 9, "morning walk", max_length=20)

    assert reading.slots[9].note == "morning walk"
    assert reading.slots[9].state is SlotState.EMPTY


def test_insights_limit() -> None:
    reading = readings.new_daily_reading(DAY)

    with pytest.raises(InvalidNote):
        readings.set_insights(reading, "abc", max_length=2)


def test_title_rules() -> None:
    reading = readings.new_spread_reading("three-card", day=DAY)

    readings.set_title(reading, "  Morning question  ")
    assert reading.title == "Morning question"

    readings.set_title(reading, "   ")
    assert reading.title == "Three Card Spread 2024-03-01"

    with pytest.raises(InvalidTitle):
        readings.set_title(reading, "x" * 11, max_length=10)
    assert reading.title == "Three Card Spread 2024-03-01"


def test_snapshot_is_detached() -> None:
    reading = readings.new_spread_reading("three-card", day=DAY)
    copy = readings.snapshot(reading)

    readings.draw_all(reading)

    assert not copy.is_complete
    assert copy.id == reading.id


def test_reset_starts_a_new_unsaved_reading() -> None:
    reading = readings.new_spread_reading("three-card", day=DAY)
    readings.draw_all(reading)
    reading.saved_at = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)
    old_id = reading.id

    readings.reset_reading(reading, seed="again")

    assert reading.id != old_id
    assert reading.saved_at is None


@pytest.mark.parametrize(
    "edit",
    [
        lambda reading: readings.set_note(reading, 0, "note"),
        lambda reading: readings.set_title(reading, "Title"),
        lambda reading: readings.set_insights(reading, "insight"),
    ],
)
def test_edits_mark_reading_unsaved(edit) -> None:
    reading = readings.new_spread_reading("one-card", day=DAY)
    readings.draw_all(reading)
    reading.saved_at = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)

    edit(reading)

    assert reading.saved_at is None
    assert reading.id
