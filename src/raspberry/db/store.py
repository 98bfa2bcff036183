"""Record store interface for the interval engine.

The engine depends on a narrow interface: list_winning_works() -> works.
It never learns which storage technology backs the catalog.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from raspberry.db import repo
from raspberry.db.repo import DbSession
from raspberry.models.domain import WinningWork


class RecordStore(ABC):
    """Abstract base class for winning-record sources.

    Each call must return an independent snapshot so that concurrent
    aggregations never share mutable state.
    """

    @abstractmethod
    def list_winning_works(self) -> list[WinningWork]:
        """Return every record flagged as a winner, in store order."""
        pass


class SessionRecordStore(RecordStore):
    """Record store backed by a SQLAlchemy session."""

    def __init__(self, session: DbSession):
        self.session = session

    def list_winning_works(self) -> list[WinningWork]:
        return repo.list_winning_works(self.session)


class InMemoryRecordStore(RecordStore):
    """Record store over a fixed list of works, kept in insertion order."""

    def __init__(self, works: Iterable[WinningWork] = ()):
        self._works = list(works)

    def add(self, work: WinningWork) -> None:
        self._works.append(work)

    def list_winning_works(self) -> list[WinningWork]:
        return list(self._works)
