"""Admin report commands."""

import click

from brokerage.cli.date_filters import period_options, pop_period_flags, resolve_cli_date_range
from brokerage.cli.error_handling import handle_domain_error, handle_internal_error
from brokerage.cli.identity import require_caller
from brokerage.domain.errors import DomainError, InternalError
from brokerage.domain.report import DEFAULT_CLIENT_LIMIT, ReportService


@click.group()
def admin_group():
    """Reports across all profiles."""
    pass


@admin_group.command("best-profession")
@period_options
@click.pass_context
def best_profession(ctx, start_date: str | None, end_date: str | None, **periods):
    """Show the profession that earned the most for jobs paid in a window.

    Examples:
        brokerage --profile-id 1 admin best-profession --start 2020-08-01 --end 2020-08-31
        brokerage --profile-id 1 admin best-profession --last-month
    """
    require_caller(ctx)
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags=pop_period_flags(periods)
    )
    service = ReportService(ctx.obj["db"])

    try:
        result = service.best_profession(start, end)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except InternalError as e:
        handle_internal_error(ctx, e)

    if result is None:
        click.echo("No data found for the specified time range")
        return

    click.echo(f"Best profession: {result.profession} (${result.earnings:,.2f})")


@admin_group.command("best-clients")
@period_options
@click.option(
    "--limit",
    type=int,
    default=DEFAULT_CLIENT_LIMIT,
    show_default=True,
    help="Number of clients to show",
)
@click.pass_context
def best_clients(ctx, start_date: str | None, end_date: str | None, limit: int, **periods):
    """Show the clients who paid the most under contracts created in a window.

    Examples:
        brokerage --profile-id 1 admin best-clients --start 2020-08-01 --end 2020-08-31 --limit 3
    """
    require_caller(ctx)
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags=pop_period_flags(periods)
    )
    service = ReportService(ctx.obj["db"])

    try:
        clients = service.best_clients(start, end, limit=limit)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except InternalError as e:
        handle_internal_error(ctx, e)

    if not clients:
        click.echo("No data found for the specified time range")
        return

    click.echo("\nBest clients:")
    click.echo("-" * 60)
    for client in clients:
        click.echo(f"ID: {client.id:3d} | {client.full_name:30s} | Paid: ${client.paid:,.2f}")


def register_commands(cli):
    """Register admin commands with main CLI."""
    cli.add_command(admin_group, name="admin")
