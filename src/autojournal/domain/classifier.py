"""Rule-based transaction classifier.

Maps a free-text description to a debit/credit account pair with an ordered
keyword rule table. Rules are tried top to bottom and the first match wins,
so a phrase that satisfies several keyword tests ("paid ... on credit")
resolves deterministically. Text that matches no rule gets the fallback pair.
"""

from dataclasses import dataclass
import logging
from typing import Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """Keyword rule mapping text to an account pair.

    A rule matches when the lower-cased text contains any trigger and, if
    qualifiers are given, also contains any qualifier.
    """

    name: str
    triggers: tuple[str, ...]
    qualifiers: tuple[str, ...]
    debit_account: str
    credit_account: str

    def matches(self, text: str) -> bool:
        """Check whether lower-cased text satisfies this rule."""
        if not any(trigger in text for trigger in self.triggers):
            return False
        if not self.qualifiers:
            return True
        return any(qualifier in text for qualifier in self.qualifiers)


@dataclass(frozen=True)
class RuleMatch:
    """Account pair chosen for a description."""

    rule: Rule
    matched: bool

    @property
    def debit_account(self) -> str:
        return self.rule.debit_account

    @property
    def credit_account(self) -> str:
        return self.rule.credit_account


PURCHASE = ("bought", "purchased")
INCOME = ("received", "sold")
PAYMENT = ("paid", "expense")

# Evaluation order matters. Within each keyword family the qualified rules
# come before the unqualified one.
DEFAULT_RULES: tuple[Rule, ...] = (
    Rule("purchase-cash", PURCHASE, ("cash",), "Office Equipment", "Cash"),
    Rule("purchase-credit", PURCHASE, ("credit",), "Office Equipment", "Accounts Payable"),
    Rule("income-cash", INCOME, ("cash",), "Cash", "Service Revenue"),
    Rule("income-receivable", INCOME, (), "Accounts Receivable", "Service Revenue"),
    Rule("payment-rent", PAYMENT, ("rent",), "Rent Expense", "Cash"),
    Rule("payment-salary", PAYMENT, ("salary", "wage"), "Salary Expense", "Cash"),
    Rule("payment-general", PAYMENT, (), "General Expense", "Cash"),
)

FALLBACK_RULE = Rule("fallback", (), (), "General Account", "Cash")


class TransactionClassifier:
    """Ordered keyword classifier producing debit/credit account pairs."""

    def __init__(
        self,
        rules: Optional[Sequence[Rule]] = None,
        fallback: Rule = FALLBACK_RULE,
    ):
        """Initialize classifier.

        Args:
            rules: Rules in evaluation order (defaults to DEFAULT_RULES)
            fallback: Rule applied when nothing else matches
        """
        self.rules = tuple(DEFAULT_RULES if rules is None else rules)
        self.fallback = fallback

    def classify_accounts(self, text: str) -> RuleMatch:
        """Choose the account pair for a description.

        Args:
            text: Free-text description

        Returns:
            RuleMatch; ``matched`` is False when the fallback rule was used
        """
        lowered = text.lower()
        for rule in self.rules:
            if rule.matches(lowered):
                logger.debug("Rule %s matched %r", rule.name, text)
                return RuleMatch(rule=rule, matched=True)

        logger.debug("No rule matched %r, using %s", text, self.fallback.name)
        return RuleMatch(rule=self.fallback, matched=False)
