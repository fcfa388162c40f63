"""CLI helpers for report window resolution."""

from datetime import date, datetime
from typing import Callable

import click

from brokerage.utils.date_parser import PERIODS, get_date_range, parse_window_bound


def period_options(command: Callable) -> Callable:
    """Add --start/--end and the --this-month style period flags to a command."""
    for period in reversed(PERIODS):
        command = click.option(
            f"--{period}",
            period.replace("-", "_"),
            is_flag=True,
            help=f"Use {period.replace('-', ' ')} as the window",
        )(command)
    command = click.option("--end", "end_date", help="Window end, inclusive (date or timestamp)")(command)
    command = click.option("--start", "start_date", help="Window start, inclusive (date or timestamp)")(command)
    return command


def pop_period_flags(kwargs: dict) -> dict[str, bool]:
    """Remove the period flags from command kwargs, keyed by period name."""
    return {period: kwargs.pop(period.replace("-", "_"), False) for period in PERIODS}


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
) -> tuple[date | datetime | None, date | datetime | None]:
    """Resolve a report window from period flags or explicit bounds.

    Missing bounds are returned as None; the report service rejects them.
    """
    period_count = sum(1 for is_set in period_flags.values() if is_set)

    if period_count > 1:
        click.echo(
            f"Error: Only one period option ({', '.join('--' + p for p in PERIODS)}) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if period_count > 0 and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --last-month, etc.) cannot be combined with --start or --end.",
            err=True,
        )
        ctx.exit(1)

    if period_count == 1:
        period = next(p for p, is_set in period_flags.items() if is_set)
        return get_date_range(period)

    start = None
    end = None
    if start_date:
        try:
            start = parse_window_bound(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start: {e}", err=True)
            ctx.exit(1)
    if end_date:
        try:
            end = parse_window_bound(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end: {e}", err=True)
            ctx.exit(1)

    return start, end
