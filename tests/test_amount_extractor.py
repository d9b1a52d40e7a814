"""Tests for amount extraction."""

import pytest
from decimal import Decimal

from autojournal.domain.errors import AmountNotFoundError, ValidationError
from autojournal.domain.amount_extractor import extract_amount, require_amount


def test_extract_dollar_amount_with_separator():
    """Test extracting '$5,000'."""
    result = extract_amount("Bought office furniture for $5,000 cash")
    assert result.found is True
    assert result.amount == Decimal("5000")
    assert result.raw == "$5,000"


def test_extract_plain_decimal():
    """Test extracting an amount without currency symbol or separators."""
    result = extract_amount("Sold goods worth 12000.50 to client")
    assert result.found is True
    assert result.amount == Decimal("12000.50")


def test_extract_separator_without_symbol():
    """Test extracting '3,000'."""
    assert extract_amount("Paid rent of 3,000 for March").amount == Decimal("3000")


def test_extract_other_currency_symbols():
    """Test euro and pound prefixes."""
    assert extract_amount("Paid €250 for cleaning").amount == Decimal("250")
    assert extract_amount("Received £1,200.75").amount == Decimal("1200.75")


def test_extract_trailing_punctuation_ignored():
    """Test that sentence punctuation after the number is not part of it."""
    assert extract_amount("Paid wages of $1,500.").amount == Decimal("1500")
    assert extract_amount("Received $2,000, thanks").amount == Decimal("2000")


def test_first_amount_wins():
    """Test that the leftmost number is used when several appear."""
    result = extract_amount("Credit card ending in 4321 charged $500")
    assert result.amount == Decimal("4321")


def test_no_amount():
    """Test text without numbers."""
    result = extract_amount("The weather is nice today")
    assert result.found is False
    assert result.amount == Decimal("0")
    assert result.raw is None


def test_empty_text():
    """Test empty text."""
    result = extract_amount("")
    assert result.found is False
    assert result.amount == Decimal("0")


def test_lone_comma_is_not_an_amount():
    """Test that punctuation alone never counts as a number."""
    assert extract_amount("Hello, world").found is False


def test_require_amount():
    """Test require_amount returns the amount."""
    assert require_amount("Paid $75 for supplies") == Decimal("75")


def test_require_amount_missing():
    """Test require_amount raises when nothing is found."""
    with pytest.raises(AmountNotFoundError) as exc_info:
        require_amount("Paid for supplies")
    assert isinstance(exc_info.value, ValidationError)
    assert "No amount found" in str(exc_info.value)
