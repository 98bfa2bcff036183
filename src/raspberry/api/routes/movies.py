"""Movies API endpoints.

GET    /api/movies        - List movies (optional ?year= filter)
GET    /api/movies/{id}   - Get one movie
POST   /api/movies        - Create a movie
PUT    /api/movies/{id}   - Partially update a movie
DELETE /api/movies/{id}   - Delete a movie
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from raspberry.api.app import get_db_session
from raspberry.catalog import movies as catalog
from raspberry.catalog.movies import MovieNotFoundError
from raspberry.db import repo
from raspberry.db.repo import DbSession
from raspberry.models.domain import MovieEntity
from raspberry.models.types import MovieCreate, MovieDetail, MovieUpdate

router = APIRouter()


def _to_detail(movie: MovieEntity) -> MovieDetail:
    return MovieDetail(
        id=movie.movie_id,
        year=movie.year,
        title=movie.title,
        studios=movie.studios,
        producers=movie.producers,
        winner=movie.winner,
    )


@router.get("/movies", response_model=list[MovieDetail])
def list_movies(
    year: int | None = None,
    session: DbSession = Depends(get_db_session),
) -> list[MovieDetail]:
    """List all movies, or only those from one year."""
    if year is None:
        movies = repo.list_movies(session)
    else:
        movies = repo.get_movies_by_year(session, year)
    return [_to_detail(m) for m in movies]


@router.get("/movies/{movie_id}", response_model=MovieDetail)
def get_movie(
    movie_id: str,
    session: DbSession = Depends(get_db_session),
) -> MovieDetail:
    """Get movie by ID.

    Raises:
        HTTPException: 404 if movie not found.
    """
    try:
        movie = catalog.get_movie_or_raise(session, movie_id)
    except MovieNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return _to_detail(movie)


@router.post("/movies", response_model=MovieDetail, status_code=201)
def create_movie(
    payload: MovieCreate,
    session: DbSession = Depends(get_db_session),
) -> MovieDetail:
    """Create a new movie."""
    return _to_detail(catalog.create_movie(session, payload))


@router.put("/movies/{movie_id}", response_model=MovieDetail)
def update_movie(
    movie_id: str,
    payload: MovieUpdate,
    session: DbSession = Depends(get_db_session),
) -> MovieDetail:
    """Update a movie.

    Raises:
        HTTPException: 404 if movie not found.
    """
    try:
        movie = catalog.update_movie(session, movie_id, payload)
    except MovieNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return _to_detail(movie)


@router.delete("/movies/{movie_id}", status_code=204)
def delete_movie(
    movie_id: str,
    session: DbSession = Depends(get_db_session),
) -> Response:
    """Delete a movie.

    Raises:
        HTTPException: 404 if movie not found.
    """
    try:
        catalog.delete_movie(session, movie_id)
    except MovieNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return Response(status_code=204)
