"""Database schema for Raspberry.

A single catalog table. row_id preserves catalog insertion order,
movie_id is the public identifier.
"""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Movie(Base):
    """A nominated movie.

    producers_json holds the ordered list of producer names as JSON.
    """

    __tablename__ = "movies"

    row_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    movie_id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    studios: Mapped[str] = mapped_column(String(500), nullable=False)
    producers_json: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    winner: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
