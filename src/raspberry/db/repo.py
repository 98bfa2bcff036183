"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping domain logic pure.
Returns domain models (not SQLAlchemy entities) to external callers.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Iterable

from sqlalchemy.orm import Session

from raspberry.db.schema import Movie
from raspberry.models.domain import MovieEntity, WinningWork

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]


# ============================================================================
# Converters: SQLAlchemy -> Domain
# ============================================================================


def _movie_to_entity(movie: Movie) -> MovieEntity:
    """Convert SQLAlchemy Movie to domain entity."""
    return MovieEntity(
        movie_id=movie.movie_id,
        year=movie.year,
        title=movie.title,
        studios=movie.studios,
        producers=list(json.loads(movie.producers_json)),
        winner=movie.winner,
    )


def _movie_to_winning_work(movie: Movie) -> WinningWork:
    """Convert SQLAlchemy Movie to the engine's input fact."""
    return WinningWork(
        year=movie.year,
        title=movie.title,
        contributors=tuple(json.loads(movie.producers_json)),
    )


def _entity_to_movie(entity: MovieEntity) -> Movie:
    return Movie(
        movie_id=entity.movie_id,
        year=entity.year,
        title=entity.title,
        studios=entity.studios,
        producers_json=json.dumps(entity.producers),
        winner=entity.winner,
    )


def _find_movie(session: DbSession, movie_id: str) -> Movie | None:
    return session.query(Movie).filter(Movie.movie_id == movie_id).first()


# ============================================================================
# Movie Repository
# ============================================================================


def list_movies(session: DbSession) -> list[MovieEntity]:
    """Get all movies in catalog order."""
    movies = session.query(Movie).order_by(Movie.row_id).all()
    return [_movie_to_entity(m) for m in movies]


def get_movie(session: DbSession, movie_id: str) -> MovieEntity | None:
    """Get movie by ID."""
    movie = _find_movie(session, movie_id)
    return _movie_to_entity(movie) if movie else None


def get_movies_by_year(session: DbSession, year: int) -> list[MovieEntity]:
    """Get all movies released in a year."""
    movies = session.query(Movie).filter(Movie.year == year).order_by(Movie.row_id).all()
    return [_movie_to_entity(m) for m in movies]


def get_winners(session: DbSession) -> list[MovieEntity]:
    """Get all winning movies."""
    movies = session.query(Movie).filter(Movie.winner.is_(True)).order_by(Movie.row_id).all()
    return [_movie_to_entity(m) for m in movies]


def list_winning_works(session: DbSession) -> list[WinningWork]:
    """Get all winning movies as interval engine input, in catalog order."""
    movies = session.query(Movie).filter(Movie.winner.is_(True)).order_by(Movie.row_id).all()
    return [_movie_to_winning_work(m) for m in movies]


def count_movies(session: DbSession) -> int:
    """Count movies in the catalog."""
    return session.query(Movie).count()


def create_movie(session: DbSession, entity: MovieEntity) -> MovieEntity:
    """Create a new movie."""
    session.add(_entity_to_movie(entity))
    return entity


def bulk_create_movies(session: DbSession, entities: Iterable[MovieEntity]) -> int:
    """Add many movies, preserving their order. Returns the number added."""
    rows = [_entity_to_movie(e) for e in entities]
    session.add_all(rows)
    return len(rows)


def update_movie(session: DbSession, entity: MovieEntity) -> MovieEntity | None:
    """Replace the stored fields of an existing movie.

    Returns None when no movie has entity.movie_id.
    """
    movie = _find_movie(session, entity.movie_id)
    if movie is None:
        return None
    movie.year = entity.year
    movie.title = entity.title
    movie.studios = entity.studios
    movie.producers_json = json.dumps(entity.producers)
    movie.winner = entity.winner
    return entity


def delete_movie(session: DbSession, movie_id: str) -> bool:
    """Delete a movie. Returns False when it does not exist."""
    movie = _find_movie(session, movie_id)
    if movie is None:
        return False
    session.delete(movie)
    return True


# ============================================================================
# Batch Operations
# ============================================================================


def commit(session: DbSession) -> None:
    """Commit current transaction."""
    session.commit()
