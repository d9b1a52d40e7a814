"""Domain model entities for autojournal.

These are pure data classes representing bookkeeping concepts, independent of
how the journal is stored. Balances use a single signed number: debits
increase it and credits decrease it, whatever the account kind.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class AccountKind(str, Enum):
    """Accounting classification of an account."""

    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"
    REVENUE = "Revenue"
    EXPENSE = "Expense"


@dataclass(frozen=True)
class Account:
    """Ledger account domain entity."""

    id: int
    name: str
    kind: AccountKind
    balance: Decimal
    created_at: datetime


@dataclass(frozen=True)
class NewJournalEntry:
    """A journal entry as submitted for posting.

    ``date`` defaults to the posting time when left as None.
    """

    description: str
    debit_account: str
    credit_account: str
    debit_amount: Decimal
    credit_amount: Decimal
    date: Optional[datetime] = None
    validated: bool = True


@dataclass(frozen=True)
class JournalEntry:
    """Journal entry domain entity as stored in the ledger."""

    id: int
    description: str
    debit_account: str
    credit_account: str
    debit_amount: Decimal
    credit_amount: Decimal
    date: datetime
    validated: bool

    @property
    def amount(self) -> Decimal:
        """Amount moved by the entry (both legs are equal)."""
        return self.debit_amount


@dataclass(frozen=True)
class Classification:
    """Result of classifying a free-text description."""

    debit_account: str
    credit_account: str
    amount: Decimal
    amount_found: bool
    matched: bool
    rule: str

    @property
    def validated(self) -> bool:
        """True when a real rule matched and a non-zero amount was found."""
        return self.matched and self.amount_found and self.amount != 0

    def to_entry(
        self, description: str, date: Optional[datetime] = None
    ) -> NewJournalEntry:
        """Build a posting request from this classification."""
        return NewJournalEntry(
            description=description,
            debit_account=self.debit_account,
            credit_account=self.credit_account,
            debit_amount=self.amount,
            credit_amount=self.amount,
            date=date,
            validated=self.validated,
        )


@dataclass(frozen=True)
class TrialBalanceLine:
    """One account row of a trial balance."""

    account_name: str
    kind: AccountKind
    debit_balance: Decimal
    credit_balance: Decimal


@dataclass(frozen=True)
class TrialBalance:
    """Trial balance across all accounts at a point in time."""

    lines: tuple[TrialBalanceLine, ...]
    total_debits: Decimal
    total_credits: Decimal
    is_balanced: bool
