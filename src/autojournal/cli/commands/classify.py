"""Classify command (dry run, nothing is recorded)."""

import click
from autojournal.cli.error_handling import handle_domain_error
from autojournal.cli.formatting import echo_classification
from autojournal.domain.errors import DomainError


@click.command("classify")
@click.argument("description")
@click.option("--strict", is_flag=True, help="Fail when no amount is found")
@click.pass_context
def classify_description(ctx, description: str, strict: bool):
    """Show how a description would be journalized without recording it.

    Examples:
        autojournal classify "Bought office furniture for $5,000 cash"
    """
    service = ctx.obj["service"]

    try:
        classification = service.classify(description, strict=strict)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Classification for: {description}")
    echo_classification(classification)


def register_commands(cli):
    """Register classify command with main CLI."""
    cli.add_command(classify_description)
