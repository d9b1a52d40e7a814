"""Main CLI entry point."""

import logging

import click
from autojournal.database.factories import DB_PATH_ENV, create_sqlite_database
from autojournal.domain.bookkeeping import BookkeepingService
from autojournal.domain.errors import DomainError
from autojournal.cli.error_handling import handle_domain_error

# Import and register all commands at module level
from autojournal.cli.commands import (
    classify,
    record,
    journal,
    accounts,
    trial_balance,
    init_demo,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to journal database file (overrides {DB_PATH_ENV} environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Autojournal - plain-language bookkeeping.

    Describe a business event in a sentence and get a balanced double-entry
    journal entry, with running account balances and a trial balance.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Open the journal only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        ctx.obj["db"] = db
        try:
            ctx.obj["service"] = BookkeepingService.from_database(db)
        except DomainError as e:
            handle_domain_error(ctx, e)


# Register all commands
classify.register_commands(cli)
record.register_commands(cli)
journal.register_commands(cli)
accounts.register_commands(cli)
trial_balance.register_commands(cli)
init_demo.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
