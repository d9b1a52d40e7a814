"""Mapper functions to convert between domain models and SQLAlchemy models."""

from datetime import UTC

from autojournal.domain import entities as domain
from autojournal.database.models import JournalEntry as ORMJournalEntry


def journal_entry_to_domain(orm_entry: ORMJournalEntry) -> domain.JournalEntry:
    """Convert SQLAlchemy JournalEntry model to domain JournalEntry entity."""
    entry_date = orm_entry.date
    # SQLite drops the offset; stored values are always UTC.
    if entry_date.tzinfo is None:
        entry_date = entry_date.replace(tzinfo=UTC)
    return domain.JournalEntry(
        id=orm_entry.id,
        description=orm_entry.description,
        debit_account=orm_entry.debit_account,
        credit_account=orm_entry.credit_account,
        debit_amount=orm_entry.debit_amount,
        credit_amount=orm_entry.credit_amount,
        date=entry_date,
        validated=orm_entry.validated,
    )


def journal_entry_to_orm(entry: domain.JournalEntry) -> ORMJournalEntry:
    """Convert domain JournalEntry entity to a new SQLAlchemy model."""
    return ORMJournalEntry(
        id=entry.id,
        description=entry.description,
        debit_account=entry.debit_account,
        credit_account=entry.credit_account,
        debit_amount=entry.debit_amount,
        credit_amount=entry.credit_amount,
        date=entry.date.astimezone(UTC),
        validated=entry.validated,
    )
