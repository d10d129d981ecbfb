from __future__ import annotations

import logging
import threading
import uuid
from contextlib import contextmanager
from datetime import date, datetime
from typing import Iterator

from engine import reading as readings
from engine.errors import Busy, NoActiveReading
from engine.journal.store import JournalEntry, JournalStore
from engine.reading import Reading
from engine.tarot.draws import Seed

logger = logging.getLogger(__name__)


class ReadingSession:
    """One owner's working reading plus the journal it saves into.

    Mutating calls take the session lock without waiting: an intent that
    arrives while another one is still running fails with ``Busy``. Every call
    hands back a detached snapshot, never the working reading itself.
    """

    def __init__(self, journal: JournalStore, *, session_id: str | None = None) -> None:
        self.id = session_id or uuid.uuid4().hex
        self.journal = journal
        self._reading: Reading | None = None
        self._lock = threading.Lock()

    @contextmanager
    def _exclusive(self) -> Iterator[None]:
        if not self._lock.acquire(blocking=False):
            raise Busy(f"session {self.id} is busy")
        try:
            yield
        finally:
            self._lock.release()

    def _active(self) -> Reading:
        if self._reading is None:
            raise NoActiveReading(f"session {self.id} has no reading yet")
        return self._reading

    @property
    def current(self) -> Reading | None:
        with self._lock:
            return readings.snapshot(self._reading) if self._reading is not None else None

    def start_daily_reading(
        self, day: date | None = None, *, seed: Seed | None = None, resume: bool = False
    ) -> Reading:
        """Start the 24-hour reading for ``day``.

        With ``resume`` a journal entry saved for that day is reopened instead
        of starting fresh.
        """
        day = day or date.today()
        with self._exclusive():
            saved = self.journal.get_by_date(day) if resume else None
            if saved is not None:
                self._reading = saved.to_reading()
            else:
                self._reading = readings.new_daily_reading(day, seed=seed)
            logger.info(
                "Started daily reading",
                extra={"session_id": self.id, "day": day.isoformat(), "resumed": saved is not None},
            )
            return readings.snapshot(self._reading)

    def start_spread_reading(self, template_id: str, *, day: date | None = None) -> Reading:
        with self._exclusive():
            self._reading = readings.new_spread_reading(template_id, day=day)
            logger.info(
                "Started spread reading",
                extra={"session_id": self.id, "template_id": template_id},
            )
            return readings.snapshot(self._reading)

    def draw_one(self, slot_index: int, *, reveal: bool = True) -> Reading:
        with self._exclusive():
            reading = self._active()
            readings.draw_one(reading, slot_index, reveal=reveal)
            return readings.snapshot(reading)

    def draw_all(self, *, reveal: bool = True) -> Reading:
        with self._exclusive():
            reading = self._active()
            readings.draw_all(reading, reveal=reveal)
            return readings.snapshot(reading)

    def reveal(self, slot_index: int) -> Reading:
        with self._exclusive():
            reading = self._active()
            readings.reveal(reading, slot_index)
            return readings.snapshot(reading)

    def reveal_all(self) -> Reading:
        with self._exclusive():
            reading = self._active()
            readings.reveal_all(reading)
            return readings.snapshot(reading)

    def reset(self, *, seed: Seed | None = None) -> Reading:
        with self._exclusive():
            reading = self._active()
            readings.reset_reading(reading, seed=seed)
            return readings.snapshot(reading)

    def set_note(self, slot_index: int, text: str) -> Reading:
        with self._exclusive():
            reading = self._active()
            readings.set_note(reading, slot_index, text)
            return readings.snapshot(reading)

    def set_title(self, text: str) -> Reading:
        with self._exclusive():
            reading = self._active()
            readings.set_title(reading, text)
            return readings.snapshot(reading)

    def set_insights(self, text: str) -> Reading:
        with self._exclusive():
            reading = self._active()
            readings.set_insights(reading, text)
            return readings.snapshot(reading)

    def save(self, *, now: datetime | None = None) -> JournalEntry:
        # The working reading stays editable; saving it again updates the same entry.
        with self._exclusive():
            return self.journal.save(self._active(), now=now)

    def reopen(self, entry_id: str) -> Reading:
        with self._exclusive():
            self._reading = self.journal.get(entry_id).to_reading()
            return readings.snapshot(self._reading)


__all__ = ["ReadingSession"]
