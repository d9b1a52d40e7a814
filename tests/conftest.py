"""Shared pytest fixtures for autojournal tests."""

import tempfile
import os
from datetime import datetime, UTC
from decimal import Decimal
import pytest

from autojournal.database.factories import create_sqlite_database
from autojournal.domain.bookkeeping import BookkeepingService
from autojournal.domain.entities import NewJournalEntry
from autojournal.domain.ledger import Ledger


@pytest.fixture
def temp_db():
    """Create a temporary journal database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def ledger():
    """Create an empty Ledger."""
    return Ledger()


@pytest.fixture
def bookkeeping_service():
    """Create an in-memory BookkeepingService."""
    return BookkeepingService()


@pytest.fixture
def persistent_service(temp_db):
    """Create a BookkeepingService that saves entries to a temporary database."""
    return BookkeepingService.from_database(temp_db)


@pytest.fixture
def make_entry():
    """Factory for balanced posting requests."""

    def _make_entry(
        description="Test entry",
        debit="Cash",
        credit="Service Revenue",
        amount="100",
        date=None,
        validated=True,
    ):
        return NewJournalEntry(
            description=description,
            debit_account=debit,
            credit_account=credit,
            debit_amount=Decimal(amount),
            credit_amount=Decimal(amount),
            date=date,
            validated=validated,
        )

    return _make_entry


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def jan_dates():
    """Three increasing UTC timestamps."""
    return [
        datetime(2024, 1, 15, 10, tzinfo=UTC),
        datetime(2024, 1, 16, 10, tzinfo=UTC),
        datetime(2024, 1, 17, 10, tzinfo=UTC),
    ]
