from datetime import date

import pytest

from engine.errors import Busy, IncompleteReading, NoActiveReading, SlotOccupied
from engine.journal import JournalStore
from engine.reading import SlotState
from engine.session import ReadingSession

DAY = date(2024, 3, 1)


@pytest.fixture()
def session(tmp_path) -> ReadingSession:
    return ReadingSession(JournalStore(tmp_path / "journal.db"))


def test_calls_before_start_raise_no_active_reading(session: ReadingSession) -> None:
    assert session.current is None
    with pytest.raises(NoActiveReading):
        session.draw_one(0)
    with pytest.raises(NoActiveReading):
        session.save()


def test_intent_while_busy_is_rejected(session: ReadingSession) -> None:
    session.start_spread_reading("three-card", day=DAY)

    session._lock.acquire()
    try:
        with pytest.raises(Busy):
            session.draw_all()
    finally:
        session._lock.release()

    assert session.draw_all().is_complete


def test_returned_readings_are_snapshots(session: ReadingSession) -> None:
    started = session.start_spread_reading("three-card", day=DAY)
    session.draw_one(0)

    assert started.slots[0].state is SlotState.EMPTY
    assert session.current.slots[0].state is SlotState.REVEALED


def test_full_spread_flow(session: ReadingSession) -> None:
    session.start_spread_reading("three-card", day=DAY)
    session.draw_one(2, reveal=False)
    with pytest.raises(SlotOccupied):
        session.draw_one(2)
    with pytest.raises(IncompleteReading):
        session.save()

    session.draw_all(reveal=False)
    reading = session.reveal_all()
    assert all(slot.is_revealed for slot in reading.slots)

    session.set_note(0, "what I carried")
    session.set_title("Sunday check-in")
    entry = session.save()

    assert entry.title == "Sunday check-in"
    assert entry.slots[0].note == "what I carried"
    assert session.journal.count() == 1


def test_resume_daily_reading(session: ReadingSession) -> None:
    session.start_daily_reading(DAY)
    session.draw_all()
    session.set_insights("steady day")
    saved = session.save()

    session.start_daily_reading(DAY)
    assert not session.current.is_complete

    resumed = session.start_daily_reading(DAY, resume=True)
    assert resumed.id == saved.id
    assert resumed.insights == "steady day"
    assert resumed.is_complete


def test_reopen_and_resave(session: ReadingSession) -> None:
    session.start_spread_reading("one-card", day=DAY)
    session.draw_all()
    entry = session.save()

    session.start_spread_reading("three-card", day=DAY)
    reopened = session.reopen(entry.id)
    assert reopened.id == entry.id

    session.set_note(0, "second thoughts")
    session.save()

    assert session.journal.count() == 1
    assert session.journal.get(entry.id).slots[0].note == "second thoughts"


def test_reset_redraws(session: ReadingSession) -> None:
    session.start_spread_reading("five-card", day=DAY)
    session.draw_all(reveal=False)

    reading = session.reset(seed="fixed")

    assert reading.is_complete
    assert all(slot.state is SlotState.REVEALED for slot in reading.slots)


def test_reset_after_save_keeps_the_saved_entry(session: ReadingSession) -> None:
    session.start_spread_reading("three-card", day=DAY)
    session.draw_all()
    first = session.save()

    redrawn = session.reset()
    assert redrawn.id != first.id
    assert redrawn.saved_at is None

    second = session.save()

    assert second.id != first.id
    assert session.journal.count() == 2
    assert session.journal.get(first.id).slots == first.slots


def test_edits_after_save_clear_saved_at(session: ReadingSession) -> None:
    session.start_spread_reading("one-card", day=DAY)
    session.draw_all()
    session.save()
    assert session.current.saved_at is not None

    edited = session.set_note(0, "one more thought")

    assert edited.saved_at is None
    assert session.save().id == edited.id
    assert session.journal.count() == 1
