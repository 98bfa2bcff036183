"""Catalog operations for movies.

Create, update and delete movies. Domain logic is pure - database
operations go through repo.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace

from raspberry.core.producers import parse_producers
from raspberry.db import repo
from raspberry.db.repo import DbSession
from raspberry.models.domain import MovieEntity
from raspberry.models.types import MovieCreate, MovieUpdate

logger = logging.getLogger(__name__)


class MovieNotFoundError(LookupError):
    """Raised when a movie ID does not exist in the catalog."""


def get_movie_or_raise(session: DbSession, movie_id: str) -> MovieEntity:
    """Get movie by ID.

    Raises:
        MovieNotFoundError: If the movie is not found.
    """
    movie = repo.get_movie(session, movie_id)
    if movie is None:
        raise MovieNotFoundError(f"Movie with id {movie_id} not found")
    return movie


def create_movie(session: DbSession, payload: MovieCreate) -> MovieEntity:
    """Create and persist a new movie with a fresh UUID."""
    logger.debug(f"Creating movie: {payload.title} ({payload.year})")

    movie = MovieEntity(
        movie_id=str(uuid.uuid4()),
        year=payload.year,
        title=payload.title,
        studios=payload.studios,
        producers=parse_producers(payload.producers),
        winner=payload.winner,
    )
    repo.create_movie(session, movie)
    repo.commit(session)

    logger.info(f"Movie created successfully: {movie.title} (ID: {movie.movie_id})")
    return movie


def update_movie(session: DbSession, movie_id: str, payload: MovieUpdate) -> MovieEntity:
    """Partially update a movie. Only fields set in the payload change.

    Raises:
        MovieNotFoundError: If the movie is not found.
    """
    existing = get_movie_or_raise(session, movie_id)

    changes = payload.model_dump(exclude_none=True)
    # An empty producers string leaves the existing producers untouched
    producers = changes.pop("producers", None)
    if producers:
        changes["producers"] = parse_producers(producers)

    updated = replace(existing, **changes)
    if repo.update_movie(session, updated) is None:
        raise MovieNotFoundError(f"Movie with id {movie_id} not found")
    repo.commit(session)

    logger.info(f"Movie updated successfully: {updated.title} (ID: {movie_id})")
    return updated


def delete_movie(session: DbSession, movie_id: str) -> None:
    """Delete a movie.

    Raises:
        MovieNotFoundError: If the movie is not found.
    """
    if not repo.delete_movie(session, movie_id):
        logger.warning(f"Attempted to delete non-existent movie ID {movie_id}")
        raise MovieNotFoundError(f"Movie with id {movie_id} not found")
    repo.commit(session)

    logger.info(f"Movie deleted successfully (ID: {movie_id})")
