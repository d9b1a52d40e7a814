"""Account directory: name lookup, kind inference and lazy creation."""

from dataclasses import replace
from datetime import datetime, UTC
from decimal import Decimal
import logging
from typing import Optional

from autojournal.domain.entities import Account, AccountKind
from autojournal.domain.errors import ValidationError

logger = logging.getLogger(__name__)

# Evaluated in order; the first kind with a matching keyword wins.
KIND_KEYWORDS: tuple[tuple[AccountKind, tuple[str, ...]], ...] = (
    (AccountKind.ASSET, ("cash", "bank", "receivable", "furniture", "equipment")),
    (AccountKind.LIABILITY, ("payable", "loan", "debt")),
    (AccountKind.REVENUE, ("revenue", "income", "sales")),
    (AccountKind.EXPENSE, ("expense", "cost", "rent", "salary")),
    (AccountKind.EQUITY, ("equity", "capital")),
)

DEFAULT_KIND = AccountKind.ASSET


def normalize_name(name: str) -> str:
    """Return the lookup key for an account name (case-insensitive)."""
    return name.strip().lower()


def resolve_kind(name: str) -> AccountKind:
    """Infer the account kind from its name.

    Matching is a case-insensitive substring test against KIND_KEYWORDS.
    Names with no known keyword are treated as assets.
    """
    lowered = name.lower()
    for kind, keywords in KIND_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return kind
    return DEFAULT_KIND


class AccountDirectory:
    """Collection of ledger accounts keyed by case-insensitive name.

    Accounts enter the directory only through ``get_or_create``. The directory
    is owned by a Ledger; balances change only through ``adjust_balance``,
    which the ledger calls while posting.
    """

    def __init__(self):
        self._accounts: dict[str, Account] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, name: str) -> bool:
        return normalize_name(name) in self._accounts

    def resolve_kind(self, name: str) -> AccountKind:
        """Infer the kind an account with this name would get."""
        return resolve_kind(name)

    def get(self, name: str) -> Optional[Account]:
        """Get account by name.

        Args:
            name: Account name (any case)

        Returns:
            Account entity or None if not found
        """
        return self._accounts.get(normalize_name(name))

    def display_name(self, name: str) -> str:
        """Return the name an account is shown under, without creating it."""
        account = self.get(name)
        return account.name if account is not None else name.strip()

    def get_or_create(self, name: str) -> Account:
        """Get an account by name, creating it with a zero balance if unseen.

        Args:
            name: Account name; the first spelling seen becomes the display name

        Returns:
            Account entity

        Raises:
            ValidationError: If the name is empty
        """
        key = normalize_name(name)
        if not key:
            raise ValidationError("Account name is required")

        account = self._accounts.get(key)
        if account is not None:
            return account

        account = Account(
            id=self._next_id,
            name=name.strip(),
            kind=resolve_kind(name),
            balance=Decimal("0"),
            created_at=datetime.now(UTC),
        )
        self._next_id += 1
        self._accounts[key] = account
        logger.info("Created account %r (%s)", account.name, account.kind.value)
        return account

    def adjust_balance(self, name: str, delta: Decimal) -> Account:
        """Add a signed delta to an account's balance.

        Creates the account first if needed. Returns the updated account.
        """
        account = self.get_or_create(name)
        updated = replace(account, balance=account.balance + delta)
        self._accounts[normalize_name(name)] = updated
        return updated

    def list_accounts(self) -> list[Account]:
        """List all accounts in creation order."""
        return list(self._accounts.values())
