"""Trial balance computation."""

from decimal import Decimal
from typing import Iterable

from autojournal.domain.entities import Account, TrialBalance, TrialBalanceLine

BALANCE_TOLERANCE = Decimal("0.01")


def build_trial_balance(accounts: Iterable[Account]) -> TrialBalance:
    """Build a trial balance from account balances.

    A positive balance is reported in the debit column and a negative one, as
    an absolute value, in the credit column.

    Args:
        accounts: Accounts to include

    Returns:
        TrialBalance with one line per account and column totals
    """
    lines = []
    total_debits = Decimal("0")
    total_credits = Decimal("0")

    for account in accounts:
        debit = account.balance if account.balance > 0 else Decimal("0")
        credit = -account.balance if account.balance < 0 else Decimal("0")
        lines.append(
            TrialBalanceLine(
                account_name=account.name,
                kind=account.kind,
                debit_balance=debit,
                credit_balance=credit,
            )
        )
        total_debits += debit
        total_credits += credit

    return TrialBalance(
        lines=tuple(lines),
        total_debits=total_debits,
        total_credits=total_credits,
        is_balanced=abs(total_debits - total_credits) < BALANCE_TOLERANCE,
    )
