"""Ledger domain service: append-only journal with derived balances."""

from dataclasses import replace
from datetime import datetime, UTC
from decimal import Decimal
import logging
import threading
from typing import Callable, Iterable, Optional

from autojournal.domain.account import AccountDirectory
from autojournal.domain.entities import (
    Account,
    JournalEntry,
    NewJournalEntry,
    TrialBalance,
)
from autojournal.domain.errors import (
    EmptyDescriptionError,
    UnbalancedEntryError,
    ValidationError,
    empty_account_name,
    empty_description,
    negative_amount,
    unbalanced_entry,
)
from autojournal.domain.trial_balance import build_trial_balance

logger = logging.getLogger(__name__)


def to_utc(value: datetime) -> datetime:
    """Return value as an aware UTC datetime (naive values are taken as UTC)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class Ledger:
    """Journal of posted entries plus the account balance table.

    Every posting adds the amount to the debit account and subtracts it from
    the credit account, so the balances always sum to zero. The ledger is the
    only writer of its journal and its account directory.
    """

    def __init__(self, directory: Optional[AccountDirectory] = None):
        """Initialize an empty ledger.

        Args:
            directory: Account directory to own (a fresh one by default)
        """
        self.directory = directory if directory is not None else AccountDirectory()
        self._entries: list[JournalEntry] = []
        self._next_id = 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def post(
        self,
        entry: NewJournalEntry,
        on_commit: Optional[Callable[[JournalEntry], None]] = None,
    ) -> JournalEntry:
        """Post a journal entry.

        All checks run before anything changes, so a rejected entry leaves the
        journal and balances untouched.

        Args:
            entry: Entry to post; a missing date becomes the current time
            on_commit: Called with the final entry before the journal and
                balances change; if it raises, nothing is posted

        Returns:
            The stored JournalEntry with its assigned id and date

        Raises:
            EmptyDescriptionError: If the description is blank
            ValidationError: If an account name is blank or an amount is negative
            UnbalancedEntryError: If debit and credit amounts differ
        """
        self._validate(entry)

        with self._lock:
            stored = self._resolve(
                JournalEntry(
                    id=self._next_id,
                    description=entry.description,
                    debit_account=entry.debit_account,
                    credit_account=entry.credit_account,
                    debit_amount=entry.debit_amount,
                    credit_amount=entry.credit_amount,
                    date=entry.date if entry.date is not None else datetime.now(UTC),
                    validated=entry.validated,
                )
            )
            if on_commit is not None:
                on_commit(stored)
            self._apply(stored)

        logger.info(
            "Posted entry %d: %s / %s %s",
            stored.id,
            stored.debit_account,
            stored.credit_account,
            stored.amount,
        )
        return stored

    def restore(self, entries: Iterable[JournalEntry]) -> None:
        """Replay previously stored entries, keeping their ids.

        Every entry is checked before any is applied, so a bad entry leaves
        the ledger as it was.

        Raises:
            UnbalancedEntryError: If a stored entry does not balance
        """
        ordered = sorted(entries, key=lambda e: e.id)
        for entry in ordered:
            self._validate(entry)

        with self._lock:
            for entry in ordered:
                self._apply(self._resolve(entry))
            logger.debug("Restored ledger with %d entries", len(self._entries))

    def _validate(self, entry: NewJournalEntry | JournalEntry) -> None:
        if not entry.description or not entry.description.strip():
            raise EmptyDescriptionError(empty_description())
        if not entry.debit_account or not entry.debit_account.strip():
            raise ValidationError(empty_account_name("debit"))
        if not entry.credit_account or not entry.credit_account.strip():
            raise ValidationError(empty_account_name("credit"))
        for amount in (entry.debit_amount, entry.credit_amount):
            if amount < 0:
                raise ValidationError(negative_amount(amount))
        if entry.debit_amount != entry.credit_amount:
            raise UnbalancedEntryError(
                unbalanced_entry(entry.debit_amount, entry.credit_amount)
            )

    def _resolve(self, entry: JournalEntry) -> JournalEntry:
        # Account names as the directory spells them, date in UTC. Read-only.
        return replace(
            entry,
            debit_account=self.directory.display_name(entry.debit_account),
            credit_account=self.directory.display_name(entry.credit_account),
            date=to_utc(entry.date),
        )

    def _apply(self, entry: JournalEntry) -> None:
        # Caller holds the lock and has validated and resolved the entry.
        self.directory.adjust_balance(entry.debit_account, entry.debit_amount)
        self.directory.adjust_balance(entry.credit_account, -entry.credit_amount)
        self._entries.append(entry)
        self._next_id = max(self._next_id, entry.id + 1)

    def list_entries(self) -> list[JournalEntry]:
        """List entries newest first.

        Entries with the same date keep newest-first posting order.
        """
        with self._lock:
            # sorted() is stable, so reversing first puts later postings
            # ahead of earlier ones with an equal date.
            return sorted(reversed(self._entries), key=lambda e: e.date, reverse=True)

    def get_entry(self, entry_id: int) -> Optional[JournalEntry]:
        """Get entry by ID."""
        with self._lock:
            for entry in self._entries:
                if entry.id == entry_id:
                    return entry
        return None

    def list_accounts(self) -> list[Account]:
        """List all accounts in creation order."""
        with self._lock:
            return self.directory.list_accounts()

    def get_account(self, name: str) -> Optional[Account]:
        """Get account by name (case-insensitive)."""
        with self._lock:
            return self.directory.get(name)

    def total_balance(self) -> Decimal:
        """Sum of all account balances; zero for a consistent ledger."""
        with self._lock:
            return sum(
                (account.balance for account in self.directory.list_accounts()),
                Decimal("0"),
            )

    def trial_balance(self) -> TrialBalance:
        """Build a trial balance from the current account balances."""
        return build_trial_balance(self.list_accounts())
