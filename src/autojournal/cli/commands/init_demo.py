"""Record a small set of demonstration transactions."""

import click
from datetime import datetime, UTC
from autojournal.cli.error_handling import handle_domain_error
from autojournal.domain.errors import DomainError

# (description, date) pairs for a fresh journal
DEMO_TRANSACTIONS = [
    ("Bought office furniture for $5,000 cash", datetime(2024, 1, 15, 10, tzinfo=UTC)),
    ("Received $15,000 cash from customer for services", datetime(2024, 1, 16, 10, tzinfo=UTC)),
    ("Paid rent of $3,000 for the month", datetime(2024, 1, 17, 10, tzinfo=UTC)),
]


@click.command("init-demo")
@click.pass_context
def init_demo(ctx):
    """Record demonstration transactions into an empty journal."""
    service = ctx.obj["service"]
    db = ctx.obj["db"]

    if db.count_entries() > 0:
        click.echo("Journal already has entries. Skipping demo transactions.")
        return

    try:
        for description, entry_date in DEMO_TRANSACTIONS:
            entry = service.record(description, date=entry_date)
            click.echo(f"Recorded entry {entry.id}: {description}")
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\nRecorded {len(DEMO_TRANSACTIONS)} demo transactions.")


def register_commands(cli):
    """Register init-demo command with main CLI."""
    cli.add_command(init_demo)
