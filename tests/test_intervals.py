"""Tests for producer award interval aggregation.

Properties:
1. Empty input and single-win producers yield empty min/max
2. n wins yield n - 1 chronological intervals
3. Ties are all kept, in first-seen producer order
4. A single interval appears in both min and max
5. Same-year wins fail the whole computation
6. Repeated calls give identical results
"""

import logging
from unittest.mock import MagicMock

import pytest

from raspberry.aggregation.intervals import (
    IntervalAggregator,
    accumulate_contributors,
    derive_intervals,
    select_extrema,
)
from raspberry.db.store import InMemoryRecordStore
from raspberry.models.domain import (
    ContributorRecord,
    IntervalFact,
    IntervalInvariantError,
    ProducerWin,
    WinningWork,
)


def work(year: int, *producers: str, title: str | None = None) -> WinningWork:
    """Build a winning work with a default title."""
    return WinningWork(year=year, title=title or f"Movie {year}", contributors=producers)


def record(name: str, *years: int) -> ContributorRecord:
    """Build a contributor record from win years."""
    return ContributorRecord(name, tuple(ProducerWin(y, f"Movie {y}") for y in years))


def compute(*works: WinningWork):
    return IntervalAggregator(InMemoryRecordStore(works)).compute_intervals()


class TestAccumulateContributors:
    """Test grouping of wins by producer."""

    def test_empty_input(self):
        """No works yields an empty mapping."""
        assert accumulate_contributors([]) == {}

    def test_groups_wins_by_name(self):
        """Each credit adds one win to that producer."""
        contributors = accumulate_contributors(
            [work(1980, "Allan Carr"), work(1985, "Allan Carr", "Jerry Weintraub")]
        )

        assert [w.year for w in contributors["Allan Carr"].wins] == [1980, 1985]
        assert [w.year for w in contributors["Jerry Weintraub"].wins] == [1985]

    def test_keeps_insertion_order_of_wins(self):
        """Wins are stored in iteration order, not sorted."""
        contributors = accumulate_contributors([work(1999, "A"), work(1990, "A")])
        assert [w.year for w in contributors["A"].wins] == [1999, 1990]

    def test_records_title(self):
        """Each win carries the work title."""
        contributors = accumulate_contributors([work(1984, "Bo Derek", title="Bolero")])
        assert contributors["Bo Derek"].wins == (ProducerWin(1984, "Bolero"),)

    def test_first_seen_order(self):
        """Mapping iterates producers in the order first seen."""
        contributors = accumulate_contributors(
            [work(1980, "B", "A"), work(1981, "C"), work(1982, "A", "D")]
        )
        assert list(contributors) == ["B", "A", "C", "D"]

    def test_duplicate_name_on_same_work_counted_twice(self):
        """A name repeated within one work adds two wins."""
        contributors = accumulate_contributors([work(1990, "A", "A")])
        assert len(contributors["A"].wins) == 2

    def test_names_matched_exactly(self):
        """Case and whitespace variants are distinct producers."""
        contributors = accumulate_contributors(
            [work(1980, "Joel Silver"), work(1981, "joel silver"), work(1982, "Joel Silver ")]
        )
        assert len(contributors) == 3


class TestDeriveIntervals:
    """Test interval derivation for one producer."""

    def test_single_win_yields_nothing(self):
        """Fewer than two wins produce no intervals."""
        assert derive_intervals(record("A", 1990)) == []

    def test_no_wins_yields_nothing(self):
        """A record without wins produces no intervals."""
        assert derive_intervals(ContributorRecord("A")) == []

    def test_two_wins(self):
        """Two wins produce one interval."""
        facts = derive_intervals(record("Bo Derek", 1984, 1990))
        assert facts == [IntervalFact("Bo Derek", 6, 1984, 1990)]

    def test_sorts_years_before_pairing(self):
        """Wins recorded out of order are paired chronologically."""
        facts = derive_intervals(record("A", 2002, 1990, 1999))

        assert [(f.previous_win, f.following_win, f.interval) for f in facts] == [
            (1990, 1999, 9),
            (1999, 2002, 3),
        ]

    def test_n_wins_yield_n_minus_one_intervals(self):
        """Every consecutive pair produces exactly one interval."""
        facts = derive_intervals(record("A", 1980, 1983, 1990, 1991, 2000))
        assert len(facts) == 4

    def test_same_year_wins_rejected(self):
        """Two wins in the same year violate the interval invariant."""
        with pytest.raises(IntervalInvariantError):
            derive_intervals(record("A", 1990, 1990))


class TestSelectExtrema:
    """Test global min/max selection."""

    def test_empty(self):
        """No facts yields empty lists."""
        extrema = select_extrema([])
        assert extrema.min == []
        assert extrema.max == []

    def test_single_fact_in_both(self):
        """One fact is both the minimum and the maximum."""
        fact = IntervalFact("A", 6, 1984, 1990)
        extrema = select_extrema([fact])
        assert extrema.min == [fact]
        assert extrema.max == [fact]

    def test_keeps_all_ties_in_input_order(self):
        """Every fact at an extreme is kept, in input order."""
        facts = [
            IntervalFact("B", 1, 1990, 1991),
            IntervalFact("A", 5, 1980, 1985),
            IntervalFact("A", 1, 1985, 1986),
            IntervalFact("C", 5, 2000, 2005),
        ]
        extrema = select_extrema(facts)

        assert extrema.min == [facts[0], facts[2]]
        assert extrema.max == [facts[1], facts[3]]

    def test_all_equal_gaps(self):
        """When all gaps are equal, every fact is in both lists."""
        facts = [IntervalFact("A", 2, 1980, 1982), IntervalFact("B", 2, 1990, 1992)]
        extrema = select_extrema(facts)
        assert extrema.min == facts
        assert extrema.max == facts


class TestIntervalAggregator:
    """Test the full aggregation over a record store."""

    def test_empty_store(self):
        """Zero winning works gives empty min and max."""
        result = compute()
        assert result.min == []
        assert result.max == []

    def test_single_win_per_producer(self):
        """Producers with one win each produce no intervals."""
        result = compute(work(1980, "A"), work(1981, "B"), work(1982, "C", "D"))
        assert result.min == []
        assert result.max == []

    def test_two_wins_one_producer(self):
        """Bo Derek 1984 -> 1990 appears in both min and max."""
        result = compute(work(1984, "Bo Derek"), work(1990, "Bo Derek"))

        expected = {"producer": "Bo Derek", "interval": 6, "previousWin": 1984, "followingWin": 1990}
        assert result.model_dump(by_alias=True) == {"min": [expected], "max": [expected]}

    def test_three_wins_one_producer(self):
        """1990, 1999, 2002 gives min gap 3 and max gap 9."""
        result = compute(work(1990, "A"), work(1999, "A"), work(2002, "A"))

        assert [(i.interval, i.previous_win, i.following_win) for i in result.min] == [
            (3, 1999, 2002)
        ]
        assert [(i.interval, i.previous_win, i.following_win) for i in result.max] == [
            (9, 1990, 1999)
        ]

    def test_tie_at_minimum(self):
        """Two producers with gap 1 both appear in min."""
        result = compute(
            work(1980, "A"),
            work(1981, "A"),
            work(1990, "B"),
            work(1991, "B"),
            work(1995, "C"),
            work(2005, "C"),
        )

        assert [i.producer for i in result.min] == ["A", "B"]
        assert [(i.producer, i.interval) for i in result.max] == [("C", 10)]

    def test_order_follows_first_seen_producer(self):
        """Ties are listed by first-seen producer, not by name or year."""
        result = compute(
            work(2000, "Zed"),
            work(1980, "Amy"),
            work(2001, "Zed"),
            work(1981, "Amy"),
        )
        assert [i.producer for i in result.min] == ["Zed", "Amy"]

    def test_chronological_pair_order_within_producer(self):
        """A producer's tied intervals are listed chronologically."""
        result = compute(work(2004, "A"), work(2000, "A"), work(2002, "A"))
        assert [i.previous_win for i in result.min] == [2000, 2002]

    def test_idempotent(self):
        """Two calls over unchanged records return identical results."""
        aggregator = IntervalAggregator(
            InMemoryRecordStore(
                [work(1980, "A"), work(1990, "A", "B"), work(1991, "B"), work(2010, "A")]
            )
        )
        first = aggregator.compute_intervals()
        second = aggregator.compute_intervals()
        assert first.model_dump() == second.model_dump()

    def test_same_year_wins_fail_the_call(self):
        """Same-year wins for one producer raise instead of returning a result."""
        with pytest.raises(IntervalInvariantError):
            compute(work(1980, "A"), work(1990, "A", title="X"), work(1990, "A", title="Y"))

    def test_invariant_failure_is_logged(self):
        """The injected logger receives an error on invariant failure."""
        log = MagicMock(spec=logging.Logger)
        aggregator = IntervalAggregator(
            InMemoryRecordStore([work(1990, "A"), work(1990, "A")]), log=log
        )

        with pytest.raises(IntervalInvariantError):
            aggregator.compute_intervals()
        log.error.assert_called_once()

        (message,) = log.error.call_args.args
        assert "A (1990 -> 1990)" in message

    def test_uses_injected_logger(self):
        """Progress is reported through the injected logger."""
        log = MagicMock(spec=logging.Logger)
        IntervalAggregator(InMemoryRecordStore([work(1990, "A")]), log=log).compute_intervals()

        assert log.debug.called
        log.info.assert_called_once()

    def test_reads_store_on_every_call(self):
        """Results reflect records added between calls."""
        store = InMemoryRecordStore([work(1990, "A"), work(1995, "A")])
        aggregator = IntervalAggregator(store)
        assert aggregator.compute_intervals().max[0].interval == 5

        store.add(work(2010, "A"))
        result = aggregator.compute_intervals()
        assert result.max[0].interval == 15
        assert result.min[0].interval == 5
