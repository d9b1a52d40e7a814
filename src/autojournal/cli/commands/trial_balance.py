"""Trial balance command."""

import click
from autojournal.cli.formatting import format_money


@click.command("trial-balance")
@click.pass_context
def show_trial_balance(ctx):
    """Show debit and credit balances per account with totals."""
    service = ctx.obj["service"]

    report = service.trial_balance()
    if not report.lines:
        click.echo("No accounts found. Record some transactions first.")
        return

    click.echo(f"\n{'Account':<26} {'Debit':>14} {'Credit':>14}")
    click.echo("=" * 56)
    for line in report.lines:
        debit = format_money(line.debit_balance) if line.debit_balance > 0 else ""
        credit = format_money(line.credit_balance) if line.credit_balance > 0 else ""
        click.echo(f"{line.account_name:<26} {debit:>14} {credit:>14}")
    click.echo("=" * 56)
    click.echo(
        f"{'Total':<26} {format_money(report.total_debits):>14} "
        f"{format_money(report.total_credits):>14}"
    )

    if report.is_balanced:
        click.echo("\nTrial balance is balanced.")
    else:
        click.echo("\nTrial balance is NOT balanced.", err=True)
        ctx.exit(1)


def register_commands(cli):
    """Register trial-balance command with main CLI."""
    cli.add_command(show_trial_balance)
