"""Database factory functions for creating journal store instances."""

import os
from pathlib import Path
from typing import Optional

from autojournal.database.sqlalchemy_db import SQLAlchemyDatabase

DB_PATH_ENV = "AUTOJOURNAL_DB_PATH"


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite journal store.

    Args:
        database_path: Path to SQLite database file. If None, checks
            AUTOJOURNAL_DB_PATH environment variable, then defaults to
            ~/.autojournal/journal.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        database_path = os.environ.get(DB_PATH_ENV)

    if database_path is None:
        db_dir = Path.home() / ".autojournal"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "journal.db")

    return SQLAlchemyDatabase(f"sqlite:///{database_path}")
