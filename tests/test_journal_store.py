import csv
import io
import json
import threading
from datetime import date, datetime, timezone

import pytest

from engine import reading as readings
from engine.errors import IncompleteReading, NotFound
from engine.journal import JournalStore
from engine.reading import ReadingKind

DAY = date(2024, 3, 1)


@pytest.fixture()
def store(tmp_path) -> JournalStore:
    return JournalStore(tmp_path / "journal.db")


def full_spread(template_id: str = "three-card", day: date = DAY) -> readings.Reading:
    reading = readings.new_spread_reading(template_id, day=day)
    readings.draw_all(reading)
    return reading


def full_daily(day: date = DAY, seed=None) -> readings.Reading:
    reading = readings.new_daily_reading(day, seed=seed)
    readings.draw_all(reading)
    return reading


def at(hour: int) -> datetime:
    return datetime(2024, 3, 1, hour, 0, tzinfo=timezone.utc)


def test_incomplete_reading_cannot_be_saved(store: JournalStore) -> None:
    reading = readings.new_spread_reading("three-card", day=DAY)
    readings.draw_one(reading, 0)

    with pytest.raises(IncompleteReading):
        store.save(reading)
    assert store.count() == 0


def test_saved_entry_round_trips(store: JournalStore) -> None:
    reading = full_spread()
    readings.set_note(reading, 1, "present feels calm")
    readings.set_insights(reading, "patience")

    saved = store.save(reading, now=at(9))
    loaded = store.get(reading.id)

    assert loaded == saved
    assert loaded.kind is ReadingKind.SPREAD
    assert loaded.spread_template_id == "three-card"
    assert [slot.card_id for slot in loaded.slots] == [
        slot.card.id for slot in reading.slots
    ]
    assert loaded.slots[1].note == "present feels calm"
    assert loaded.insights == "patience"
    assert reading.saved_at == at(9)


def test_entry_is_a_snapshot(store: JournalStore) -> None:
    reading = full_spread()
    store.save(reading, now=at(9))

    readings.set_note(reading, 0, "edited after saving")

    assert store.get(reading.id).slots[0].note == ""


def test_saving_again_updates_the_same_entry(store: JournalStore) -> None:
    reading = full_spread()
    store.save(reading, now=at(9))
    readings.set_title(reading, "Second look")
    store.save(reading, now=at(10))

    assert store.count() == 1
    entry = store.get(reading.id)
    assert entry.title == "Second look"
    assert entry.saved_at == at(10)


def test_one_daily_entry_per_date(store: JournalStore) -> None:
    first = full_daily()
    second = full_daily(seed="other")
    store.save(first, now=at(8))
    store.save(second, now=at(9))

    assert store.count(ReadingKind.DAILY) == 1
    assert store.get_by_date(DAY).id == second.id
    with pytest.raises(NotFound):
        store.get(first.id)


def test_reopened_entry_saves_in_place(store: JournalStore) -> None:
    store.save(full_daily(), now=at(8))
    reopened = store.get_by_date(DAY).to_reading()

    readings.set_note(reopened, 5, "lunch with an old friend")
    store.save(reopened, now=at(12))

    assert store.count() == 1
    assert store.get_by_date(DAY).slots[5].note == "lunch with an old friend"


def test_list_orders_newest_first_and_filters(store: JournalStore) -> None:
    older = full_spread(day=date(2024, 2, 28))
    same_day_early = full_spread("one-card")
    same_day_late = full_spread("five-card")
    daily = full_daily(date(2024, 2, 29))
    store.save(older, now=at(1))
    store.save(same_day_early, now=at(2))
    store.save(same_day_late, now=at(3))
    store.save(daily, now=at(4))

    ids = [entry.id for entry in store.list_entries()]
    assert ids == [same_day_late.id, same_day_early.id, daily.id, older.id]

    spreads = store.list_entries(ReadingKind.SPREAD)
    assert daily.id not in [entry.id for entry in spreads]
    assert [entry.id for entry in store.list_entries("daily")] == [daily.id]

    page = store.list_entries(limit=2, offset=1)
    assert [entry.id for entry in page] == [same_day_early.id, daily.id]
    assert store.latest().id == same_day_late.id
    assert store.latest(ReadingKind.DAILY).id == daily.id


def test_search_matches_title_insights_and_notes(store: JournalStore) -> None:
    by_title = full_spread()
    readings.set_title(by_title, "Career crossroads")
    by_note = full_spread("one-card")
    readings.set_note(by_note, 0, "Talk about the CAREER move")
    by_insight = full_spread("five-card")
    readings.set_insights(by_insight, "50% sure")
    for reading in (by_title, by_note, by_insight):
        store.save(reading)

    found = {entry.id for entry in store.list_entries(search="career")}
    assert found == {by_title.id, by_note.id}
    assert [entry.id for entry in store.list_entries(search="50%")] == [by_insight.id]
    assert store.list_entries(search="%") == [store.get(by_insight.id)]
    assert store.count(search="career") == 2


def test_delete(store: JournalStore) -> None:
    reading = full_spread()
    store.save(reading)

    store.delete(reading.id)

    assert store.count() == 0
    with pytest.raises(NotFound):
        store.delete(reading.id)


def test_get_unknown_entry(store: JournalStore) -> None:
    with pytest.raises(NotFound):
        store.get("missing")
    assert store.get_by_date(DAY) is None
    assert store.latest() is None


def test_stats(store: JournalStore) -> None:
    store.save(full_daily())
    store.save(full_spread())

    stats = store.stats(top=3)

    assert (stats.total, stats.daily, stats.spread) == (2, 1, 1)
    assert len(stats.top_cards) == 3
    assert stats.top_cards[0][1] >= stats.top_cards[-1][1]
    assert 0.0 <= stats.reversed_ratio <= 1.0


def test_empty_stats(store: JournalStore) -> None:
    stats = store.stats()

    assert stats.total == 0
    assert stats.top_cards == ()
    assert stats.reversed_ratio == 0.0


def test_export_json_and_csv(store: JournalStore) -> None:
    reading = full_spread()
    readings.set_note(reading, 0, "한국어 메모")
    store.save(reading, now=at(9))

    records = json.loads(store.export("json"))
    assert records[0]["id"] == reading.id
    assert records[0]["slots"][0]["note"] == "한국어 메모"

    rows = list(csv.DictReader(io.StringIO(store.export("csv"))))
    assert len(rows) == 3
    assert rows[0]["entry_id"] == reading.id
    assert rows[0]["card_id"] == reading.slots[0].card.id

    with pytest.raises(ValueError):
        store.export("xml")


def test_concurrent_saves_and_reads(store: JournalStore) -> None:
    entries = [full_spread() for _ in range(8)]
    errors: list[Exception] = []

    def save(reading) -> None:
        try:
            store.save(reading)
            store.list_entries()
        except Exception as exc:  # pragma: no cover - surfaced via the assertion
            errors.append(exc)

    threads = [threading.Thread(target=save, args=(reading,)) for reading in entries]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert store.count() == 8
    for entry in store.list_entries():
        assert len(entry.slots) == 3
