"""Record transaction command."""

import click
from autojournal.cli.error_handling import handle_domain_error
from autojournal.cli.formatting import echo_entry
from autojournal.domain.errors import DomainError
from autojournal.utils.date_parser import parse_datetime


@click.command("record")
@click.argument("description")
@click.option(
    "--date",
    help="Entry date (YYYY-MM-DD, a full timestamp, or 'today'/'yesterday'); defaults to now",
)
@click.option("--strict", is_flag=True, help="Fail instead of recording when no amount is found")
@click.pass_context
def record_transaction(ctx, description: str, date: str | None, strict: bool):
    """Classify a description and record the journal entry.

    Examples:
        autojournal record "Received $15,000 from customer for services"
        autojournal record "Paid rent of $3,000 for the month" --date 2024-01-17
    """
    service = ctx.obj["service"]

    entry_date = None
    if date:
        try:
            entry_date = parse_datetime(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        entry = service.record(description, date=entry_date, strict=strict)
    except DomainError as e:
        handle_domain_error(ctx, e)

    echo_entry(entry)


def register_commands(cli):
    """Register record command with main CLI."""
    cli.add_command(record_transaction)
