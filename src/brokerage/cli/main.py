"""Main CLI entry point."""

import click

from brokerage.database.factories import DB_PATH_ENV, DB_URL_ENV, create_database
from brokerage.logging_config import configure_logging

# Import and register all commands at module level
from brokerage.cli.commands import (
    admin,
    balance,
    contract,
    job,
    profile,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to SQLite database file (overrides {DB_PATH_ENV} environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option(
    "--db-url",
    help="SQLAlchemy database URL; takes precedence over --db-path",
    envvar=DB_URL_ENV,
)
@click.option(
    "--profile-id",
    type=int,
    help="ID of the profile acting as caller",
    envvar="BROKERAGE_PROFILE_ID",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="BROKERAGE_LOG_LEVEL",
    help="Log level for the JSON log written to stderr",
)
@click.pass_context
def cli(ctx, db_path: str | None, db_url: str | None, profile_id: int | None, log_level: str):
    """Brokerage - pay contractors for jobs and manage client balances.

    Clients hire contractors under contracts made of jobs. Clients pay for
    jobs from their balance and top it up with deposits capped by their
    outstanding unpaid work.
    """
    ctx.ensure_object(dict)
    configure_logging(level=log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_database(database_url=db_url, database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.obj["profile_id"] = profile_id
        ctx.call_on_close(db.disconnect)


# Register all commands
profile.register_commands(cli)
contract.register_commands(cli)
job.register_commands(cli)
balance.register_commands(cli)
admin.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
