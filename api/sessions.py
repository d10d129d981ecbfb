from __future__ import annotations

import threading

from engine.errors import NotFound
from engine.journal.store import JournalStore
from engine.session import ReadingSession


class SessionRegistry:
    """In-memory map of session id to ``ReadingSession``."""

    def __init__(self, journal: JournalStore) -> None:
        self.journal = journal
        self._sessions: dict[str, ReadingSession] = {}
        self._lock = threading.Lock()

    def create(self) -> ReadingSession:
        session = ReadingSession(self.journal)
        with self._lock:
            self._sessions[session.id] = session
        return session

    def get(self, session_id: str) -> ReadingSession:
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            raise NotFound(f"Unknown session id: {session_id!r}")
        return session

    def discard(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise NotFound(f"Unknown session id: {session_id!r}")

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


__all__ = ["SessionRegistry"]
