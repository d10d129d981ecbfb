from __future__ import annotations


class ReadingEngineError(Exception):
    """Base class for recoverable reading engine errors."""

    code = "reading_error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.__class__.__doc__ or self.code)

    @property
    def detail(self) -> str:
        return str(self.args[0]) if self.args else self.code


class InvalidCount(ReadingEngineError, ValueError):
    """Requested card count is outside the size of the deck."""

    code = "invalid_count"


class SlotOccupied(ReadingEngineError):
    """The slot already holds a card."""

    code = "slot_occupied"


class SlotEmpty(ReadingEngineError):
    """The slot has no card to reveal."""

    code = "slot_empty"


class IndexOutOfRange(ReadingEngineError, IndexError):
    """Slot index is outside the reading."""

    code = "index_out_of_range"


class InvalidNote(ReadingEngineError, ValueError):
    """Note text is longer than the configured limit."""

    code = "invalid_note"


class InvalidTitle(ReadingEngineError, ValueError):
    """Title text is longer than the configured limit."""

    code = "invalid_title"


class IncompleteReading(ReadingEngineError):
    """Every slot must hold a card before the reading can be saved."""

    code = "incomplete_reading"


class NotFound(ReadingEngineError, LookupError):
    """The requested item does not exist."""

    code = "not_found"


class Busy(ReadingEngineError):
    """Another operation is still running on this reading."""

    code = "busy"


class NoActiveReading(ReadingEngineError):
    """No reading has been started in this session."""

    code = "no_active_reading"


__all__ = [
    "ReadingEngineError",
    "InvalidCount",
    "SlotOccupied",
    "SlotEmpty",
    "IndexOutOfRange",
    "InvalidNote",
    "InvalidTitle",
    "IncompleteReading",
    "NotFound",
    "Busy",
    "NoActiveReading",
]
