"""Domain models for Raspberry.

Pure Python dataclasses representing domain entities.
These models are independent of SQLAlchemy and used throughout
the application for clean separation from the database layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ============================================================================
# Catalog Domain
# ============================================================================


@dataclass
class MovieEntity:
    """Domain model for a catalog movie."""

    movie_id: str
    year: int
    title: str
    studios: str
    producers: list[str] = field(default_factory=list)
    winner: bool = False


@dataclass(frozen=True)
class WinningWork:
    """A winning catalog entry as seen by the interval engine."""

    year: int
    title: str
    contributors: tuple[str, ...]


# ============================================================================
# Producer Interval Domain
# ============================================================================


class IntervalInvariantError(ValueError):
    """Raised when an interval would be built from non-increasing win years."""


@dataclass(frozen=True)
class ProducerWin:
    """A single win credited to a producer."""

    year: int
    title: str


@dataclass(frozen=True)
class ContributorRecord:
    """A producer and the wins credited to them, in insertion order."""

    name: str
    wins: tuple[ProducerWin, ...] = ()

    def add_win(self, year: int, title: str) -> ContributorRecord:
        """Return a new record with one more win appended."""
        return ContributorRecord(self.name, self.wins + (ProducerWin(year, title),))

    def win_years(self) -> list[int]:
        """Years of all wins, sorted chronologically."""
        return sorted(win.year for win in self.wins)


@dataclass(frozen=True)
class IntervalFact:
    """Interval between two consecutive wins of one producer.

    Raises:
        IntervalInvariantError: If the interval is negative, the years are
            not strictly increasing, or the interval does not match them.
    """

    producer: str
    interval: int
    previous_win: int
    following_win: int

    def __post_init__(self) -> None:
        if self.interval < 0:
            raise IntervalInvariantError(
                f"Interval cannot be negative: {self.producer} ({self.interval})"
            )
        if self.previous_win >= self.following_win:
            raise IntervalInvariantError(
                f"Previous win must be before following win: {self.producer} "
                f"({self.previous_win} -> {self.following_win})"
            )
        if self.interval != self.following_win - self.previous_win:
            raise IntervalInvariantError(
                f"Interval {self.interval} does not match win years "
                f"{self.previous_win} -> {self.following_win} for {self.producer}"
            )
