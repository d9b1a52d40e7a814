"""Abstract journal store interface."""

from abc import ABC, abstractmethod

# Import entities directly to avoid circular import through domain/__init__.py
from autojournal.domain.entities import JournalEntry


class Database(ABC):
    """Abstract journal store for autojournal.

    Only journal entries are stored. Account balances are derived by
    replaying the journal into a Ledger.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def save_entry(self, entry: JournalEntry) -> None:
        """Save a posted journal entry, keeping its ledger-assigned ID.

        Implementations raise StorageError when the entry cannot be saved.
        """
        pass

    @abstractmethod
    def list_entries(self) -> list[JournalEntry]:
        """List stored journal entries in posting (ID) order."""
        pass

    @abstractmethod
    def count_entries(self) -> int:
        """Return the number of stored journal entries."""
        pass
