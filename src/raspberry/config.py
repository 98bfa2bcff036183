"""Runtime configuration.

All settings come from environment variables and are read once at
application startup.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from raspberry.db.session import DEFAULT_DB_PATH

DEFAULT_CSV_PATH = Path("data/Movielist.csv")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Settings:
    """Application settings."""

    db_path: Path = DEFAULT_DB_PATH
    csv_path: Path | None = DEFAULT_CSV_PATH
    log_level: str = "INFO"
    environment: str = "development"
    cors_origins: tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from RASPBERRY_* environment variables.

        An empty RASPBERRY_CSV_PATH disables the startup load.
        """
        csv_path = os.environ.get("RASPBERRY_CSV_PATH", str(DEFAULT_CSV_PATH))
        origins = os.environ.get("RASPBERRY_CORS_ORIGINS", "*")

        return cls(
            db_path=Path(os.environ.get("RASPBERRY_DB_PATH", str(DEFAULT_DB_PATH))),
            csv_path=Path(csv_path) if csv_path else None,
            log_level=os.environ.get("RASPBERRY_LOG_LEVEL", "INFO").upper(),
            environment=os.environ.get("RASPBERRY_ENV", "development"),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        )


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the raspberry logger."""
    root = logging.getLogger("raspberry")
    root.setLevel(level)

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        root.addHandler(handler)
