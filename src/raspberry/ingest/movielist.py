"""Movie list ingestion.

Reads the semicolon-delimited nominee list:

    year;title;studios;producers;winner
    1980;Can't Stop the Music;Associated Film Distribution;Allan Carr;yes

Every row is validated; all row errors are reported together.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path

from raspberry.core.producers import parse_producers
from raspberry.db import repo
from raspberry.db.repo import DbSession
from raspberry.models.domain import MovieEntity

logger = logging.getLogger(__name__)

EXPECTED_HEADERS = ["year", "title", "studios", "producers", "winner"]
MIN_YEAR = 1900
MAX_YEAR = 2100


class CsvLoadError(ValueError):
    """Raised when a movie list file cannot be loaded."""


def load_movies_from_csv(path: Path | str) -> list[MovieEntity]:
    """Load and validate movies from a movie list file.

    Args:
        path: Path to the semicolon-delimited file.

    Returns:
        Movies in file order, each with a fresh UUID.

    Raises:
        CsvLoadError: If the file is missing, empty, has wrong headers,
            or contains any invalid row.
    """
    path = Path(path).resolve()
    logger.info(f"Loading movies from CSV: {path}")

    if not path.exists():
        raise CsvLoadError(f"CSV file not found: {path}")

    lines = [line for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]
    if not lines:
        raise CsvLoadError("CSV file is empty")

    if not _valid_headers(lines[0].split(";")):
        raise CsvLoadError(f"Invalid CSV headers. Expected: {', '.join(EXPECTED_HEADERS)}")

    movies: list[MovieEntity] = []
    errors: list[str] = []

    for line_number, line in enumerate(lines[1:], start=2):
        try:
            movies.append(parse_row(line))
        except ValueError as e:
            errors.append(f"Line {line_number}: {e}")
            logger.warning(f"Failed to parse line {line_number}: {e}")

    if errors:
        raise CsvLoadError(
            f"Failed to parse CSV file. {len(errors)} invalid rows found:\n" + "\n".join(errors)
        )

    logger.info(f"Successfully loaded {len(movies)} movies from CSV")
    return movies


def _valid_headers(headers: list[str]) -> bool:
    if len(headers) != len(EXPECTED_HEADERS):
        return False
    return all(h.strip().lower() == e for h, e in zip(headers, EXPECTED_HEADERS))


def parse_row(line: str) -> MovieEntity:
    """Parse one data row.

    Raises:
        ValueError: If the row is malformed.
    """
    columns = line.split(";")
    if len(columns) != len(EXPECTED_HEADERS):
        raise ValueError(f"Expected {len(EXPECTED_HEADERS)} columns, got {len(columns)}")

    year_str, title, studios, producers_str, winner_str = columns

    try:
        year = int(year_str.strip())
    except ValueError:
        raise ValueError(f"Invalid year: {year_str}") from None
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValueError(f"Invalid year: {year_str}")

    if not title.strip():
        raise ValueError("Title is required")
    if not studios.strip():
        raise ValueError("Studios is required")

    producers = parse_producers(producers_str)
    if not producers:
        raise ValueError("At least one producer is required")

    return MovieEntity(
        movie_id=str(uuid.uuid4()),
        year=year,
        title=title.strip(),
        studios=studios.strip(),
        producers=producers,
        winner=winner_str.strip().lower() == "yes",
    )


def seed_catalog(session: DbSession, path: Path | str) -> int:
    """Load a movie list into an empty catalog.

    Does nothing when the catalog already holds movies, so restarts
    against a persistent database do not duplicate records.

    Returns:
        Number of movies inserted.

    Raises:
        CsvLoadError: If the file cannot be loaded.
    """
    existing = repo.count_movies(session)
    if existing:
        logger.info(f"Catalog already holds {existing} movies, skipping CSV load")
        return 0

    movies = load_movies_from_csv(path)
    inserted = repo.bulk_create_movies(session, movies)
    repo.commit(session)

    logger.info(f"Loaded {inserted} movies into repository")
    return inserted
