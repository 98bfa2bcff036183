"""Producer award interval aggregation.

Finds the producers with the shortest and longest gaps between two
consecutive wins. Stages are pure functions; the record store is the
only data source and is read once per call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from raspberry.db.store import RecordStore
from raspberry.models.domain import (
    ContributorRecord,
    IntervalFact,
    IntervalInvariantError,
    ProducerWin,
    WinningWork,
)
from raspberry.models.types import AwardIntervalItem, AwardIntervalsResponse

logger = logging.getLogger(__name__)


@dataclass
class IntervalExtrema:
    """Facts holding the global minimum and maximum interval."""

    min: list[IntervalFact]
    max: list[IntervalFact]


def accumulate_contributors(works: Iterable[WinningWork]) -> dict[str, ContributorRecord]:
    """Group wins by producer name.

    Every (name, work) credit adds one win, so a name listed twice on the
    same work is counted twice. Names are matched exactly.

    Args:
        works: Winning works in any order.

    Returns:
        Mapping of producer name to record, in first-seen order.
    """
    contributors: dict[str, ContributorRecord] = {}

    for work in works:
        for name in work.contributors:
            existing = contributors.get(name)
            if existing is None:
                contributors[name] = ContributorRecord(name, (ProducerWin(work.year, work.title),))
            else:
                # Reassigning an existing key keeps its first-seen position
                contributors[name] = existing.add_win(work.year, work.title)

    return contributors


def derive_intervals(record: ContributorRecord) -> list[IntervalFact]:
    """Build one interval per pair of chronologically consecutive wins.

    Args:
        record: A producer and their wins.

    Returns:
        n - 1 facts for n wins, in chronological order.

    Raises:
        IntervalInvariantError: If two wins share the same year.
    """
    years = record.win_years()

    # Need at least 2 wins to calculate an interval
    if len(years) < 2:
        return []

    return [
        IntervalFact(
            producer=record.name,
            interval=following - previous,
            previous_win=previous,
            following_win=following,
        )
        for previous, following in zip(years, years[1:])
    ]


def select_extrema(facts: list[IntervalFact]) -> IntervalExtrema:
    """Collect every fact at the minimum and at the maximum interval.

    Ties are all kept and the input order is preserved. When every
    interval is equal the same facts land in both lists.
    """
    if not facts:
        return IntervalExtrema(min=[], max=[])

    min_interval = min(f.interval for f in facts)
    max_interval = max(f.interval for f in facts)

    return IntervalExtrema(
        min=[f for f in facts if f.interval == min_interval],
        max=[f for f in facts if f.interval == max_interval],
    )


def _to_item(fact: IntervalFact) -> AwardIntervalItem:
    """Map an interval fact to the public response item."""
    return AwardIntervalItem(
        producer=fact.producer,
        interval=fact.interval,
        previous_win=fact.previous_win,
        following_win=fact.following_win,
    )


class IntervalAggregator:
    """Computes min/max producer award intervals from a record store.

    Holds no state between calls; every call rebuilds its working data
    from a fresh store read.
    """

    def __init__(self, store: RecordStore, log: logging.Logger | None = None):
        """Initialize aggregator.

        Args:
            store: Source of winning works.
            log: Logger for progress and failures. Defaults to module logger.
        """
        self.store = store
        self.log = log or logger

    def compute_intervals(self) -> AwardIntervalsResponse:
        """Calculate minimum and maximum award intervals for all producers.

        Only producers with at least two wins produce intervals.

        Returns:
            AwardIntervalsResponse with min and max lists (possibly empty).

        Raises:
            IntervalInvariantError: If any producer has two wins in one year.
        """
        self.log.debug("Calculating producer award intervals")
        works = self.store.list_winning_works()
        self.log.debug(f"Found {len(works)} winner movies to analyze")

        contributors = accumulate_contributors(works)
        self.log.debug(f"Grouped winners for {len(contributors)} unique producers")

        facts: list[IntervalFact] = []
        try:
            for record in contributors.values():
                facts.extend(derive_intervals(record))
        except IntervalInvariantError as e:
            self.log.error(f"Producer interval computation failed: {e}")
            raise

        self.log.debug(f"Calculated {len(facts)} intervals between consecutive wins")

        if not facts:
            self.log.info("No producer intervals found (no producers with multiple wins)")

        extrema = select_extrema(facts)

        return AwardIntervalsResponse(
            min=[_to_item(f) for f in extrema.min],
            max=[_to_item(f) for f in extrema.max],
        )
