"""Domain layer for autojournal application."""

from autojournal.domain.account import AccountDirectory
from autojournal.domain.classifier import TransactionClassifier
from autojournal.domain.ledger import Ledger
from autojournal.domain.bookkeeping import BookkeepingService

__all__ = [
    "AccountDirectory",
    "TransactionClassifier",
    "Ledger",
    "BookkeepingService",
]
