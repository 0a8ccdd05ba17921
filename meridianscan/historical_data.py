"""History of saved scan sessions."""

from __future__ import annotations

from typing import Iterator, NamedTuple

from .scan_session import ScanSession


class SessionRecord(NamedTuple):
    """A saved scan with the profile name and date it was saved under."""

    name: str
    date: str
    scan: ScanSession


class HistoricalData:
    """Ordered collection of saved scan sessions."""

    def __init__(self) -> None:
        self._sessions: list[SessionRecord] = []

    def add(self, name: str, date: str, scan: ScanSession) -> SessionRecord:
        """Append a session to the history and return its record."""
        record = SessionRecord(name, date, scan)
        self._sessions.append(record)
        return record

    def remove(self, name: str) -> None:
        """Remove every session saved under the given name."""
        self._sessions = [record for record in self._sessions if record.name != name]

    def sessions(self) -> list[SessionRecord]:
        """Return all sessions in the order they were added."""
        return list(self._sessions)

    def __iter__(self) -> Iterator[SessionRecord]:
        return iter(self._sessions)

    def __len__(self) -> int:
        return len(self._sessions)