"""Tests for domain entities."""

import pytest
from datetime import datetime, UTC
from decimal import Decimal

from autojournal.domain.entities import (
    Account,
    AccountKind,
    Classification,
    JournalEntry,
    NewJournalEntry,
)


class TestAccount:
    """Tests for Account entity."""

    def test_account_immutability(self):
        """Test that Account entities are immutable."""
        account = Account(
            id=1,
            name="Cash",
            kind=AccountKind.ASSET,
            balance=Decimal("0"),
            created_at=datetime.now(UTC),
        )
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            account.balance = Decimal("10")

    def test_kind_values(self):
        """Test account kinds carry their display names."""
        assert [kind.value for kind in AccountKind] == [
            "Asset",
            "Liability",
            "Equity",
            "Revenue",
            "Expense",
        ]


class TestJournalEntry:
    """Tests for JournalEntry entity."""

    def test_amount_property(self):
        """Test amount mirrors the debit leg."""
        entry = JournalEntry(
            id=1,
            description="Paid rent",
            debit_account="Rent Expense",
            credit_account="Cash",
            debit_amount=Decimal("3000"),
            credit_amount=Decimal("3000"),
            date=datetime.now(UTC),
            validated=True,
        )
        assert entry.amount == Decimal("3000")

    def test_new_entry_defaults(self):
        """Test NewJournalEntry optional fields."""
        entry = NewJournalEntry(
            description="x",
            debit_account="Cash",
            credit_account="Sales",
            debit_amount=Decimal("1"),
            credit_amount=Decimal("1"),
        )
        assert entry.date is None
        assert entry.validated is True


class TestClassification:
    """Tests for Classification entity."""

    def _classification(self, amount="100", found=True, matched=True):
        return Classification(
            debit_account="Cash",
            credit_account="Service Revenue",
            amount=Decimal(amount),
            amount_found=found,
            matched=matched,
            rule="income-cash",
        )

    def test_validated(self):
        """Test validated needs a matched rule and a non-zero amount."""
        assert self._classification().validated is True
        assert self._classification(matched=False).validated is False
        assert self._classification(amount="0", found=False).validated is False
        assert self._classification(amount="0").validated is False

    def test_to_entry(self):
        """Test building a balanced posting request."""
        when = datetime(2024, 1, 1, tzinfo=UTC)
        entry = self._classification(amount="42.50").to_entry("Received $42.50 cash", date=when)

        assert entry.description == "Received $42.50 cash"
        assert entry.debit_account == "Cash"
        assert entry.credit_account == "Service Revenue"
        assert entry.debit_amount == entry.credit_amount == Decimal("42.50")
        assert entry.date == when
        assert entry.validated is True
