"""Pydantic models for the Raspberry API.

Field names follow the public API payloads. Interval items are
serialized with camelCase keys (previousWin, followingWin).
"""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt
from pydantic.alias_generators import to_camel


class MovieCreate(BaseModel):
    """Payload for creating a movie.

    producers is a raw string separated by commas or " and ".
    """

    year: StrictInt = Field(ge=1900)
    title: str = Field(min_length=1, max_length=500)
    studios: str = Field(min_length=1, max_length=500)
    producers: str = Field(min_length=1, max_length=1000)
    winner: StrictBool


class MovieUpdate(BaseModel):
    """Payload for partially updating a movie."""

    year: StrictInt | None = Field(default=None, ge=1900)
    title: str | None = Field(default=None, max_length=500)
    studios: str | None = Field(default=None, max_length=500)
    producers: str | None = Field(default=None, max_length=1000)
    winner: StrictBool | None = None


class MovieDetail(BaseModel):
    """Movie details for API response."""

    id: str
    year: int
    title: str
    studios: str
    producers: list[str]
    winner: bool


class AwardIntervalItem(BaseModel):
    """A single producer award interval."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    producer: str
    interval: int
    previous_win: int
    following_win: int


class AwardIntervalsResponse(BaseModel):
    """Producers with the shortest and longest intervals between wins."""

    min: list[AwardIntervalItem]
    max: list[AwardIntervalItem]


class HealthStatus(BaseModel):
    """Health check payload."""

    status: str
    uptime: int
    timestamp: str
    environment: str
