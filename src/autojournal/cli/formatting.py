"""Shared CLI output helpers."""

from decimal import Decimal

import click

from autojournal.domain.entities import Classification, JournalEntry


def format_money(amount: Decimal) -> str:
    """Format an amount as dollars with thousands separators."""
    return f"${amount:,.2f}"


def echo_classification(classification: Classification) -> None:
    """Print the account pair and amount of a classification."""
    click.echo(f"  Debit:  {classification.debit_account}")
    click.echo(f"  Credit: {classification.credit_account}")
    click.echo(f"  Amount: {format_money(classification.amount)}")
    click.echo(f"  Rule: {classification.rule}")
    if not classification.validated:
        click.echo("  Needs review: no rule matched or no amount found")


def echo_entry(entry: JournalEntry) -> None:
    """Print a stored journal entry."""
    click.echo(f"Recorded entry {entry.id}")
    click.echo(f"  Date: {entry.date:%Y-%m-%d %H:%M}")
    click.echo(f"  Debit:  {entry.debit_account}")
    click.echo(f"  Credit: {entry.credit_account}")
    click.echo(f"  Amount: {format_money(entry.amount)}")
    if not entry.validated:
        click.echo("  Needs review: no rule matched or no amount found")
