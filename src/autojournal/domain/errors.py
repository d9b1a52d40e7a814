"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class EmptyDescriptionError(ValidationError):
    """Transaction description is empty or whitespace-only."""


class AmountNotFoundError(ValidationError):
    """No monetary amount could be extracted from a description.

    Recoverable: classification degrades to an unvalidated result unless the
    caller asks for strict behavior.
    """


class UnbalancedEntryError(DomainError):
    """Journal entry whose debit and credit legs differ."""


class StorageError(DomainError):
    """Journal store rejected or failed to save an entry."""


def empty_description() -> str:
    """Return message for a missing description."""
    return "Description is required"


def empty_account_name(leg: str) -> str:
    """Return message for a blank account name on a leg."""
    return f"{leg.capitalize()} account name is required"


def amount_not_found(description: str) -> str:
    """Return message when no amount appears in a description."""
    return f"No amount found in '{description}'"


def negative_amount(amount: Decimal) -> str:
    """Return message for a negative posting amount."""
    return f"Amount must not be negative (got {amount})"


def unbalanced_entry(debit_amount: Decimal, credit_amount: Decimal) -> str:
    """Return message for an entry whose legs do not balance."""
    return (
        f"Entry is unbalanced: debit {debit_amount} does not equal "
        f"credit {credit_amount}"
    )


def storage_failed(entry_id: int, reason: object) -> str:
    """Return message for an entry the journal store could not save."""
    return f"Could not save journal entry {entry_id}: {reason}"
