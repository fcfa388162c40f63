"""Profile management commands."""

import click

from brokerage.cli.error_handling import handle_domain_error, handle_internal_error
from brokerage.domain.entities import ProfileType
from brokerage.domain.errors import DomainError, InternalError
from brokerage.domain.profile import ProfileService
from brokerage.utils.amount_parser import parse_amount

PROFILE_TYPES = [t.value for t in ProfileType]


@click.group()
def profile_group():
    """Manage client and contractor profiles."""
    pass


@profile_group.command("create")
@click.argument("first_name")
@click.argument("last_name")
@click.option(
    "--type",
    "profile_type",
    type=click.Choice(PROFILE_TYPES, case_sensitive=False),
    required=True,
    help="Profile type",
)
@click.option("--profession", default="", help="Profession (used by the best-profession report)")
@click.option("--balance", default="0", help="Opening balance (e.g., 1150.00)")
@click.pass_context
def create_profile(ctx, first_name: str, last_name: str, profile_type: str, profession: str, balance: str):
    """Create a new profile.

    Examples:
        brokerage profile create Harry Potter --type client --profession Wizard --balance 1150
        brokerage profile create John Lennon --type contractor --profession Musician
    """
    service = ProfileService(ctx.obj["db"])

    try:
        opening = parse_amount(balance)
        profile_id = service.create_profile(
            first_name=first_name,
            last_name=last_name,
            profession=profession,
            profile_type=profile_type.lower(),
            balance=opening,
        )
        click.echo(f"Created {profile_type.lower()} '{first_name} {last_name}' (ID: {profile_id})")
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
    except InternalError as e:
        handle_internal_error(ctx, e)


@profile_group.command("list")
@click.option(
    "--type",
    "profile_type",
    type=click.Choice(PROFILE_TYPES, case_sensitive=False),
    help="Only list profiles of this type",
)
@click.pass_context
def list_profiles(ctx, profile_type: str | None):
    """List profiles with their balances."""
    service = ProfileService(ctx.obj["db"])

    try:
        profiles = service.list_profiles(profile_type=profile_type.lower() if profile_type else None)
    except InternalError as e:
        handle_internal_error(ctx, e)

    if not profiles:
        click.echo("No profiles found.")
        return

    click.echo("\nProfiles:")
    click.echo("-" * 80)
    for p in profiles:
        click.echo(
            f"ID: {p.id:3d} | {p.full_name:25s} | {p.type.value:10s} | "
            f"{p.profession:15s} | Balance: ${p.balance:,.2f}"
        )


def register_commands(cli):
    """Register profile commands with main CLI."""
    cli.add_command(profile_group, name="profile")
