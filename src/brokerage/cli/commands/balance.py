"""Balance commands."""

import click

from brokerage.cli.error_handling import handle_domain_error, handle_internal_error
from brokerage.domain.deposit import DepositService
from brokerage.domain.errors import DomainError, InternalError
from brokerage.utils.amount_parser import parse_amount


@click.group()
def balance_group():
    """Manage client balances."""
    pass


@balance_group.command("deposit")
@click.argument("client_id", type=int)
@click.argument("amount")
@click.pass_context
def deposit(ctx, client_id: int, amount: str):
    """Deposit AMOUNT into a client's balance.

    A client can deposit at most 25% of the total price of their unpaid jobs.

    Examples:
        brokerage balance deposit 1 50.00
    """
    service = DepositService(ctx.obj["db"])

    try:
        result = service.deposit(client_id=client_id, amount=parse_amount(amount))
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
    except InternalError as e:
        handle_internal_error(ctx, e)

    click.echo("Deposit successful")
    click.echo(f"  New balance: ${result.balance:,.2f}")


def register_commands(cli):
    """Register balance commands with main CLI."""
    cli.add_command(balance_group, name="balance")
