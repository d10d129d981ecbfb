from __future__ import annotations

import csv
import io
import json
import logging
import sqlite3
import threading
from collections import Counter
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Iterator, Literal

from engine.errors import IncompleteReading, NotFound
from engine.reading import Reading, ReadingKind, Slot, is_complete
from engine.tarot.cards import get_card_by_id
from engine.tarot.draws import Orientation

from .migrate import apply_migrations, default_db_path

logger = logging.getLogger(__name__)

ExportFormat = Literal["json", "csv"]


@dataclass(frozen=True)
class SlotRecord:
    index: int
    card_id: str
    orientation: Orientation
    is_revealed: bool
    note: str = ""

    def to_record(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "card_id": self.card_id,
            "orientation": self.orientation.value,
            "is_revealed": self.is_revealed,
            "note": self.note,
        }


@dataclass(frozen=True)
class JournalEntry:
    id: str
    kind: ReadingKind
    date: date
    title: str
    slots: tuple[SlotRecord, ...]
    saved_at: datetime
    spread_template_id: str | None = None
    insights: str = ""
    seed: str | None = None

    @classmethod
    def from_reading(cls, reading: Reading, *, saved_at: datetime) -> "JournalEntry":
        slots: list[SlotRecord] = []
        for slot in reading.slots:
            if slot.card is None or slot.orientation is None:
                raise IncompleteReading(f"slot {slot.index} has no card")
            slots.append(
                SlotRecord(
                    index=slot.index,
                    card_id=slot.card.id,
                    orientation=Orientation(slot.orientation),
                    is_revealed=slot.is_revealed,
                    note=slot.note,
                )
            )
        return cls(
            id=reading.id,
            kind=reading.kind,
            date=reading.date,
            title=reading.title,
            slots=tuple(slots),
            saved_at=saved_at,
            spread_template_id=reading.spread_template_id,
            insights=reading.insights,
            seed=reading.seed,
        )

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "kind": self.kind.value,
            "date": self.date.isoformat(),
            "spread_template_id": self.spread_template_id,
            "title": self.title,
            "insights": self.insights,
            "seed": self.seed,
            "slots": [slot.to_record() for slot in self.slots],
            "saved_at": self.saved_at.isoformat(),
        }

    def to_reading(self) -> Reading:
        """Rebuild an editable reading from this snapshot; saving it again updates this entry."""
        return Reading(
            kind=self.kind,
            date=self.date,
            slots=[
                Slot(
                    index=record.index,
                    card=get_card_by_id(record.card_id),
                    orientation=record.orientation,
                    is_revealed=record.is_revealed,
                    note=record.note,
                )
                for record in self.slots
            ],
            title=self.title,
            spread_template_id=self.spread_template_id,
            insights=self.insights,
            seed=self.seed,
            id=self.id,
            saved_at=self.saved_at,
        )


@dataclass(frozen=True)
class JournalStats:
    total: int
    daily: int
    spread: int
    top_cards: tuple[tuple[str, int], ...]
    reversed_ratio: float


def _utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class JournalStore:
    """SQLite journal of saved readings.

    Every public call opens its own connection. Writes are serialized by a
    process-wide lock and run in a single ``BEGIN IMMEDIATE`` transaction, so
    a reader sees either the old entry or the new one, never a mix.
    """

    def __init__(self, db_path: str | Path | None = None) -> None:
        self.db_path = Path(db_path) if db_path is not None else default_db_path()
        apply_migrations(self.db_path)
        self._write_lock = threading.Lock()

    def _connect(self) -> sqlite3.Connection:
        connection = sqlite3.connect(self.db_path, timeout=10.0)
        connection.row_factory = sqlite3.Row
        connection.execute("PRAGMA foreign_keys = ON;")
        return connection

    @contextmanager
    def _transaction(self, *, write: bool = False) -> Iterator[sqlite3.Connection]:
        connection = self._connect()
        try:
            connection.execute("BEGIN IMMEDIATE;" if write else "BEGIN;")
            yield connection
            connection.commit()
        except Exception:
            connection.rollback()
            raise
        finally:
            connection.close()

    def save(self, reading: Reading, *, now: datetime | None = None) -> JournalEntry:
        if not is_complete(reading):
            raise IncompleteReading(
                f"reading {reading.id} still has empty slots"
            )
        saved_at = _utc(now or datetime.now(timezone.utc))
        entry = JournalEntry.from_reading(reading, saved_at=saved_at)

        with self._write_lock, self._transaction(write=True) as connection:
            replaced: list[str] = []
            if entry.kind is ReadingKind.DAILY:
                rows = connection.execute(
                    "SELECT id FROM journal_entries WHERE kind = 'daily' AND date = ? AND id != ?",
                    (entry.date.isoformat(), entry.id),
                ).fetchall()
                replaced = [row["id"] for row in rows]
            for stale_id in replaced:
                connection.execute("DELETE FROM journal_slots WHERE entry_id = ?", (stale_id,))
                connection.execute("DELETE FROM journal_entries WHERE id = ?", (stale_id,))

            connection.execute(
                """
                INSERT INTO journal_entries (
                    id, kind, date, spread_template_id, title, insights, seed, saved_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    kind = excluded.kind,
                    date = excluded.date,
                    spread_template_id = excluded.spread_template_id,
                    title = excluded.title,
                    insights = excluded.insights,
                    seed = excluded.seed,
                    saved_at = excluded.saved_at
                """,
                (
                    entry.id,
                    entry.kind.value,
                    entry.date.isoformat(),
                    entry.spread_template_id,
                    entry.title,
                    entry.insights,
                    entry.seed,
                    entry.saved_at.isoformat(),
                ),
            )
            connection.execute("DELETE FROM journal_slots WHERE entry_id = ?", (entry.id,))
            connection.executemany(
                """
                INSERT INTO journal_slots (
                    entry_id, slot_index, card_id, orientation, is_revealed, note
                ) VALUES (?, ?, ?, ?, ?, ?)
                """,
                [
                    (
                        entry.id,
                        slot.index,
                        slot.card_id,
                        slot.orientation.value,
                        int(slot.is_revealed),
                        slot.note,
                    )
                    for slot in entry.slots
                ],
            )

        reading.saved_at = saved_at
        logger.info(
            "Saved journal entry",
            extra={"entry_id": entry.id, "kind": entry.kind.value, "replaced": replaced},
        )
        return entry

    def get(self, entry_id: str) -> JournalEntry:
        with self._transaction() as connection:
            row = connection.execute(
                "SELECT * FROM journal_entries WHERE id = ?", (entry_id,)
            ).fetchone()
            if row is None:
                raise NotFound(f"No journal entry with id {entry_id!r}")
            return self._load_entries(connection, [row])[0]

    def get_by_date(self, day: date) -> JournalEntry | None:
        with self._transaction() as connection:
            row = connection.execute(
                "SELECT * FROM journal_entries WHERE kind = 'daily' AND date = ?",
                (day.isoformat(),),
            ).fetchone()
            if row is None:
                return None
            return self._load_entries(connection, [row])[0]

    def list_entries(
        self,
        kind: ReadingKind | str | None = None,
        *,
        search: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[JournalEntry]:
        """Entries newest first (``date`` then ``saved_at``, both descending)."""
        clauses, params = self._filters(kind, search)
        query = "SELECT * FROM journal_entries e"
        if clauses:
            query += " WHERE " + " AND ".join(clauses)
        query += " ORDER BY e.date DESC, e.saved_at DESC, e.id DESC LIMIT ? OFFSET ?"
        params.extend([limit if limit is not None else -1, max(offset, 0)])

        with self._transaction() as connection:
            rows = connection.execute(query, params).fetchall()
            return self._load_entries(connection, rows)

    def latest(self, kind: ReadingKind | str | None = None) -> JournalEntry | None:
        entries = self.list_entries(kind, limit=1)
        return entries[0] if entries else None

    def count(self, kind: ReadingKind | str | None = None, *, search: str | None = None) -> int:
        clauses, params = self._filters(kind, search)
        query = "SELECT COUNT(*) FROM journal_entries e"
        if clauses:
            query += " WHERE " + " AND ".join(clauses)
        with self._transaction() as connection:
            return int(connection.execute(query, params).fetchone()[0])

    def delete(self, entry_id: str) -> None:
        with self._write_lock, self._transaction(write=True) as connection:
            connection.execute("DELETE FROM journal_slots WHERE entry_id = ?", (entry_id,))
            cursor = connection.execute(
                "DELETE FROM journal_entries WHERE id = ?", (entry_id,)
            )
            if cursor.rowcount == 0:
                raise NotFound(f"No journal entry with id {entry_id!r}")
        logger.info("Deleted journal entry", extra={"entry_id": entry_id})

    def stats(self, *, top: int = 5) -> JournalStats:
        with self._transaction() as connection:
            per_kind = {
                row["kind"]: int(row["total"])
                for row in connection.execute(
                    "SELECT kind, COUNT(*) AS total FROM journal_entries GROUP BY kind"
                ).fetchall()
            }
            slot_rows = connection.execute(
                "SELECT card_id, orientation FROM journal_slots"
            ).fetchall()

        card_counts = Counter(row["card_id"] for row in slot_rows)
        reversed_count = sum(1 for row in slot_rows if row["orientation"] == "reversed")
        ranked = sorted(card_counts.items(), key=lambda item: (-item[1], item[0]))[:top]
        return JournalStats(
            total=sum(per_kind.values()),
            daily=per_kind.get(ReadingKind.DAILY.value, 0),
            spread=per_kind.get(ReadingKind.SPREAD.value, 0),
            top_cards=tuple(ranked),
            reversed_ratio=(reversed_count / len(slot_rows)) if slot_rows else 0.0,
        )

    def export(self, fmt: ExportFormat = "json") -> str:
        entries = self.list_entries()
        if fmt == "json":
            return json.dumps(
                [entry.to_record() for entry in entries], ensure_ascii=False, indent=2
            )
        if fmt == "csv":
            buffer = io.StringIO()
            writer = csv.writer(buffer)
            writer.writerow(
                [
                    "entry_id",
                    "kind",
                    "date",
                    "spread_template_id",
                    "title",
                    "saved_at",
                    "slot_index",
                    "card_id",
                    "card_name",
                    "orientation",
                    "is_revealed",
                    "note",
                ]
            )
            for entry in entries:
                for slot in entry.slots:
                    writer.writerow(
                        [
                            entry.id,
                            entry.kind.value,
                            entry.date.isoformat(),
                            entry.spread_template_id or "",
                            entry.title,
                            entry.saved_at.isoformat(),
                            slot.index,
                            slot.card_id,
                            get_card_by_id(slot.card_id).name,
                            slot.orientation.value,
                            int(slot.is_revealed),
                            slot.note,
                        ]
                    )
            return buffer.getvalue()
        raise ValueError(f"Unsupported export format: {fmt!r}")

    def _filters(
        self, kind: ReadingKind | str | None, search: str | None
    ) -> tuple[list[str], list[Any]]:
        clauses: list[str] = []
        params: list[Any] = []
        if kind is not None:
            clauses.append("e.kind = ?")
            params.append(ReadingKind(kind).value)
        if search and search.strip():
            pattern = f"%{_escape_like(search.strip().lower())}%"
            clauses.append(
                """
                (
                    LOWER(e.title) LIKE ? ESCAPE '\\'
                    OR LOWER(e.insights) LIKE ? ESCAPE '\\'
                    OR EXISTS (
                        SELECT 1 FROM journal_slots s
                        WHERE s.entry_id = e.id AND LOWER(s.note) LIKE ? ESCAPE '\\'
                    )
                )
                """
            )
            params.extend([pattern, pattern, pattern])
        return clauses, params

    def _load_entries(
        self, connection: sqlite3.Connection, rows: list[sqlite3.Row]
    ) -> list[JournalEntry]:
        if not rows:
            return []
        ids = [row["id"] for row in rows]
        placeholders = ", ".join("?" for _ in ids)
        slot_rows = connection.execute(
            f"""
            SELECT * FROM journal_slots
            WHERE entry_id IN ({placeholders})
            ORDER BY entry_id, slot_index
            """,
            ids,
        ).fetchall()

        slots_by_entry: dict[str, list[SlotRecord]] = {entry_id: [] for entry_id in ids}
        for slot_row in slot_rows:
            slots_by_entry[slot_row["entry_id"]].append(
                SlotRecord(
                    index=int(slot_row["slot_index"]),
                    card_id=slot_row["card_id"],
                    orientation=Orientation(slot_row["orientation"]),
                    is_revealed=bool(slot_row["is_revealed"]),
                    note=slot_row["note"] or "",
                )
            )

        return [
            JournalEntry(
                id=row["id"],
                kind=ReadingKind(row["kind"]),
                date=date.fromisoformat(row["date"]),
                title=row["title"] or "",
                slots=tuple(slots_by_entry[row["id"]]),
                saved_at=datetime.fromisoformat(row["saved_at"]),
                spread_template_id=row["spread_template_id"],
                insights=row["insights"] or "",
                seed=row["seed"],
            )
            for row in rows
        ]


__all__ = ["ExportFormat", "JournalEntry", "JournalStats", "JournalStore", "SlotRecord"]
