#!/usr/bin/env python3
"""Seed the catalog database from a movie list file.

Usage:
    python scripts/seed_movielist.py [path/to/Movielist.csv]

This script:
1. Initializes the database (RASPBERRY_DB_PATH or data/raspberry.db)
2. Loads the movie list into it if the catalog is empty
3. Prints the current producer award intervals
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from raspberry.aggregation.intervals import IntervalAggregator  # noqa: E402
from raspberry.config import Settings, configure_logging  # noqa: E402
from raspberry.db import repo  # noqa: E402
from raspberry.db.session import get_db_session, init_db  # noqa: E402
from raspberry.db.store import SessionRecordStore  # noqa: E402
from raspberry.ingest.movielist import CsvLoadError, seed_catalog  # noqa: E402


def main() -> int:
    """Main entry point."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    csv_path = Path(sys.argv[1]) if len(sys.argv) > 1 else settings.csv_path
    if csv_path is None:
        print("No movie list given and RASPBERRY_CSV_PATH is empty")
        return 1

    print("=" * 60)
    print("Raspberry Catalog Seeding Script")
    print("=" * 60)

    print(f"\n[1/3] Initializing database at {settings.db_path}...")
    init_db(settings.db_path)

    print(f"\n[2/3] Loading {csv_path}...")
    try:
        with get_db_session(settings.db_path) as session:
            inserted = seed_catalog(session, csv_path)
            total = repo.count_movies(session)
    except CsvLoadError as e:
        print(f"Error: {e}")
        return 1
    print(f"  Inserted {inserted} movies ({total} in catalog)")

    print("\n[3/3] Computing producer award intervals...")
    with get_db_session(settings.db_path) as session:
        result = IntervalAggregator(SessionRecordStore(session)).compute_intervals()
    print(json.dumps(result.model_dump(by_alias=True), indent=2))

    print("\n" + "=" * 60)
    print("Seeding complete!")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
