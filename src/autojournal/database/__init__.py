"""Journal storage layer for autojournal."""

from autojournal.database.base import Database
from autojournal.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
