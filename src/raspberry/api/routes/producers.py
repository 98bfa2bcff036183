"""Producers API endpoint.

GET /api/producers/award-intervals - Min/max intervals between consecutive wins
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from raspberry.aggregation.intervals import IntervalAggregator
from raspberry.api.app import get_db_session
from raspberry.db.repo import DbSession
from raspberry.db.store import SessionRecordStore
from raspberry.models.types import AwardIntervalsResponse

router = APIRouter()


@router.get("/producers/award-intervals", response_model=AwardIntervalsResponse)
def get_award_intervals(
    session: DbSession = Depends(get_db_session),
) -> AwardIntervalsResponse:
    """Get producers with the shortest and longest intervals between two wins.

    Args:
        session: Database session (injected).

    Returns:
        AwardIntervalsResponse with min and max interval lists.
    """
    aggregator = IntervalAggregator(SessionRecordStore(session))
    return aggregator.compute_intervals()
