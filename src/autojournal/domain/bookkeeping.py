"""Bookkeeping domain service.

Composes amount extraction and rule classification into balanced journal
entries and posts them to a Ledger. When a journal store is attached, every
posted entry is saved to it as well, and ``from_database`` rebuilds the
in-memory ledger by replaying the stored journal.
"""

from __future__ import annotations

from datetime import datetime
import logging
from typing import TYPE_CHECKING, Optional

from autojournal.domain.classifier import TransactionClassifier
from autojournal.domain.entities import (
    Account,
    Classification,
    JournalEntry,
    NewJournalEntry,
    TrialBalance,
)
from autojournal.domain.errors import (
    AmountNotFoundError,
    EmptyDescriptionError,
    amount_not_found,
    empty_description,
)
from autojournal.domain.ledger import Ledger
from autojournal.domain.amount_extractor import extract_amount

if TYPE_CHECKING:
    from autojournal.database.base import Database

logger = logging.getLogger(__name__)


class BookkeepingService:
    """Service for classifying descriptions and recording journal entries."""

    def __init__(
        self,
        ledger: Optional[Ledger] = None,
        classifier: Optional[TransactionClassifier] = None,
        db: Optional[Database] = None,
    ):
        """Initialize bookkeeping service.

        Args:
            ledger: Ledger to post to (a new empty one by default)
            classifier: Classifier to use (default rule table by default)
            db: Optional journal store that receives every posted entry
        """
        self.ledger = ledger if ledger is not None else Ledger()
        self.classifier = classifier if classifier is not None else TransactionClassifier()
        self.db = db

    @classmethod
    def from_database(
        cls, db: Database, classifier: Optional[TransactionClassifier] = None
    ) -> BookkeepingService:
        """Create a service whose ledger replays the journal stored in db."""
        ledger = Ledger()
        ledger.restore(db.list_entries())
        return cls(ledger=ledger, classifier=classifier, db=db)

    def classify(self, description: str, strict: bool = False) -> Classification:
        """Classify a description into an account pair and amount.

        Missing amounts degrade the result (amount 0, not validated) rather
        than failing, unless ``strict`` is set.

        Args:
            description: Free-text description of the business event
            strict: Raise instead of degrading when no amount is found

        Returns:
            Classification result

        Raises:
            EmptyDescriptionError: If description is blank
            AmountNotFoundError: If strict and no amount was found
        """
        if not description or not description.strip():
            raise EmptyDescriptionError(empty_description())

        extracted = extract_amount(description)
        if strict and not extracted.found:
            raise AmountNotFoundError(amount_not_found(description))

        match = self.classifier.classify_accounts(description)
        result = Classification(
            debit_account=match.debit_account,
            credit_account=match.credit_account,
            amount=extracted.amount,
            amount_found=extracted.found,
            matched=match.matched,
            rule=match.rule.name,
        )
        if not result.validated:
            logger.warning("Classification of %r needs review", description)
        return result

    def post(self, entry: NewJournalEntry) -> JournalEntry:
        """Post an entry to the ledger and save it to the store, if any.

        The entry is saved before the ledger changes, so a failed save
        leaves both the store and the ledger without it.

        Raises:
            StorageError: If the store rejects the entry
        """
        on_commit = self.db.save_entry if self.db is not None else None
        return self.ledger.post(entry, on_commit=on_commit)

    def record(
        self,
        description: str,
        date: Optional[datetime] = None,
        strict: bool = False,
    ) -> JournalEntry:
        """Classify a description and post the resulting entry.

        Args:
            description: Free-text description of the business event
            date: Optional entry date (defaults to now)
            strict: Raise instead of degrading when no amount is found

        Returns:
            The stored JournalEntry
        """
        classification = self.classify(description, strict=strict)
        return self.post(classification.to_entry(description, date=date))

    def list_entries(self) -> list[JournalEntry]:
        """List journal entries newest first."""
        return self.ledger.list_entries()

    def list_accounts(self) -> list[Account]:
        """List accounts in creation order."""
        return self.ledger.list_accounts()

    def trial_balance(self) -> TrialBalance:
        """Build the current trial balance."""
        return self.ledger.trial_balance()
