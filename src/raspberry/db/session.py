"""Catalog database access.

One SQLite file per db_path. Engines and session factories are built
once per resolved path and reused by the API, the startup seed and
scripts/seed_movielist.py.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from raspberry.db.schema import Base

DEFAULT_DB_PATH = Path("data/raspberry.db")

# Keyed by resolved catalog path
_engines: dict[str, Engine] = {}
_session_factories: dict[str, sessionmaker] = {}


def _resolve(db_path: Path | None) -> tuple[Path, str]:
    db_path = Path(db_path) if db_path is not None else DEFAULT_DB_PATH
    return db_path, str(db_path.resolve())


def get_engine(db_path: Path | None = None) -> Engine:
    """Engine for the catalog file, creating its directory on first use.

    Args:
        db_path: Catalog database file. Defaults to data/raspberry.db.
    """
    db_path, key = _resolve(db_path)

    if key not in _engines:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        # Sync routes and the lifespan seed share the catalog across threads
        _engines[key] = create_engine(
            f"sqlite:///{db_path}",
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return _engines[key]


def get_session(db_path: Path | None = None) -> Session:
    """Open a catalog session. The caller closes it."""
    _, key = _resolve(db_path)

    if key not in _session_factories:
        _session_factories[key] = sessionmaker(bind=get_engine(db_path))

    return _session_factories[key]()


@contextmanager
def get_db_session(db_path: Path | None = None) -> Generator[Session, None, None]:
    """Session scope for scripts and startup work.

    Commits on success, rolls back on error, always closes.

    Example:
        with get_db_session(settings.db_path) as session:
            seed_catalog(session, settings.csv_path)
    """
    session = get_session(db_path)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(db_path: Path | None = None) -> None:
    """Create the movies table if it does not exist yet."""
    Base.metadata.create_all(get_engine(db_path))
