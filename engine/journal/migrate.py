"""Schema upgrades for the reading journal.

The journal lives in one SQLite file holding ``journal_entries`` (one row per
saved reading) and ``journal_slots`` (one row per card of a reading). Each
numbered ``.sql`` file under ``migrations/`` runs once and is recorded in
``schema_migrations``.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from pathlib import Path

from engine import config

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"
MIGRATION_FILES: tuple[str, ...] = (
    "001_init.sql",  # entries and slots
    "002_daily_insights.sql",  # insights, seed, one daily entry per date
)

logger = logging.getLogger(__name__)


def default_db_path() -> Path:
    return Path(config.JOURNAL_DB_PATH)


def _recorded(connection: sqlite3.Connection) -> set[str]:
    connection.execute(
        "CREATE TABLE IF NOT EXISTS schema_migrations (filename TEXT PRIMARY KEY)"
    )
    rows = connection.execute("SELECT filename FROM schema_migrations").fetchall()
    return {row[0] for row in rows}


def pending_migrations(db_path: str | Path | None = None) -> list[str]:
    """Journal migration files not yet applied to ``db_path``, in run order."""
    target_path = Path(db_path) if db_path is not None else default_db_path()
    if not target_path.exists():
        return list(MIGRATION_FILES)
    with closing(sqlite3.connect(target_path)) as connection:
        done = _recorded(connection)
    return [filename for filename in MIGRATION_FILES if filename not in done]


def apply_migrations(db_path: str | Path | None = None) -> Path:
    """Bring the journal schema up to date.

    Creates the database file and its directory when missing. Running it
    again on an up-to-date journal changes nothing.

    Returns:
        Path to the journal database.
    """
    target_path = Path(db_path) if db_path is not None else default_db_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)

    with closing(sqlite3.connect(target_path)) as connection:
        connection.execute("PRAGMA foreign_keys = ON;")
        done = _recorded(connection)
        for filename in MIGRATION_FILES:
            if filename in done:
                continue
            script = (MIGRATIONS_DIR / filename).read_text(encoding="utf-8")
            # executescript commits any open transaction before it runs.
            connection.executescript(script)
            connection.execute(
                "INSERT INTO schema_migrations (filename) VALUES (?)", (filename,)
            )
            connection.commit()
            logger.info(
                "Applied journal migration",
                extra={"migration": filename, "db_path": str(target_path)},
            )

    return target_path


__all__ = [
    "MIGRATIONS_DIR",
    "MIGRATION_FILES",
    "apply_migrations",
    "default_db_path",
    "pending_migrations",
]
