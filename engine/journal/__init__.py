from .migrate import apply_migrations, pending_migrations
from .store import ExportFormat, JournalEntry, JournalStats, JournalStore, SlotRecord

__all__ = [
    "ExportFormat",
    "JournalEntry",
    "JournalStats",
    "JournalStore",
    "SlotRecord",
    "apply_migrations",
    "pending_migrations",
]
