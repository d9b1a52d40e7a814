"""Journal viewing command."""

import click
from autojournal.cli.formatting import format_money


@click.command("journal")
@click.option("--limit", type=int, help="Show only the N most recent entries")
@click.pass_context
def view_journal(ctx, limit: int | None):
    """List journal entries, newest first."""
    service = ctx.obj["service"]

    entries = service.list_entries()
    if limit is not None:
        entries = entries[:limit]

    if not entries:
        click.echo("No journal entries found.")
        return

    click.echo(f"\nFound {len(entries)} entry(ies):")
    click.echo("-" * 110)
    click.echo(
        f"{'ID':<6} {'Date':<17} {'Debit':<22} {'Credit':<22} {'Amount':<14} {'Description':<30}"
    )
    click.echo("-" * 110)

    for entry in entries:
        flag = "" if entry.validated else " (review)"
        description = entry.description[:30]
        click.echo(
            f"{entry.id:<6} {entry.date:%Y-%m-%d %H:%M} {entry.debit_account:<22} "
            f"{entry.credit_account:<22} {format_money(entry.amount):<14} {description}{flag}"
        )


def register_commands(cli):
    """Register journal command with main CLI."""
    cli.add_command(view_journal)
