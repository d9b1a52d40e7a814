"""Amount extraction from free-text descriptions."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import re
from typing import Optional

from autojournal.domain.errors import AmountNotFoundError, amount_not_found

# Optional currency symbol, digits with optional thousands separators,
# optional fractional part. "$5,000", "12000.50", "3,000".
AMOUNT_PATTERN = re.compile(r"[$€£¥]?\s?(\d[\d,]*(?:\.\d+)?)")


@dataclass(frozen=True)
class ExtractedAmount:
    """Amount found in a description, or zero when nothing matched."""

    amount: Decimal
    found: bool
    raw: Optional[str] = None


def extract_amount(text: str) -> ExtractedAmount:
    """Extract the first monetary amount from text.

    Only the leftmost numeric literal is used, so "card ending in 4321
    charged $500" yields 4321. Callers that need several amounts per
    description must split it themselves.

    Args:
        text: Free-text description

    Returns:
        ExtractedAmount with ``found=False`` and a zero amount when the text
        holds no number
    """
    if not text:
        return ExtractedAmount(amount=Decimal("0"), found=False)

    match = AMOUNT_PATTERN.search(text)
    if match is None:
        return ExtractedAmount(amount=Decimal("0"), found=False)

    digits = match.group(1).replace(",", "")
    try:
        amount = Decimal(digits)
    except InvalidOperation:
        return ExtractedAmount(amount=Decimal("0"), found=False)

    return ExtractedAmount(amount=amount, found=True, raw=match.group(0).strip())


def require_amount(text: str) -> Decimal:
    """Extract the first amount from text or raise.

    Raises:
        AmountNotFoundError: If the text contains no amount
    """
    extracted = extract_amount(text)
    if not extracted.found:
        raise AmountNotFoundError(amount_not_found(text))
    return extracted.amount
