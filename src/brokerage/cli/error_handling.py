"""CLI error handling helpers."""

import click

from brokerage.domain.errors import DomainError, InternalError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a business-rule error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_internal_error(ctx: click.Context, error: InternalError) -> None:
    """Render a store failure without its details and exit with failure.

    The underlying exception has already been logged where it was raised.
    """
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
