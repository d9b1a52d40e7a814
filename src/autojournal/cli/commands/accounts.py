"""Account listing command."""

import click
from autojournal.cli.formatting import format_money


@click.command("accounts")
@click.pass_context
def list_accounts(ctx):
    """List all accounts with their signed balances."""
    service = ctx.obj["service"]

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 60)
    for acc in accounts:
        click.echo(
            f"ID: {acc.id:3d} | {acc.name:22s} | {acc.kind.value:9s} | {format_money(acc.balance)}"
        )


def register_commands(cli):
    """Register accounts command with main CLI."""
    cli.add_command(list_accounts)
