"""Contract commands."""

from datetime import datetime

import click

from brokerage.cli.error_handling import handle_domain_error, handle_internal_error
from brokerage.cli.identity import require_caller
from brokerage.domain.contract import ContractService
from brokerage.domain.entities import Contract, ContractStatus
from brokerage.domain.errors import DomainError, InternalError
from brokerage.utils.date_parser import parse_timestamp


def format_contract(contract: Contract) -> str:
    """Render a contract as a single line."""
    return (
        f"ID: {contract.id:3d} | {contract.status.value:11s} | "
        f"Client: {contract.client_id} | Contractor: {contract.contractor_id} | {contract.terms}"
    )


@click.group()
def contract_group():
    """Manage contracts."""
    pass


@contract_group.command("create")
@click.option("--client", "client_id", type=int, required=True, help="Client profile ID")
@click.option("--contractor", "contractor_id", type=int, required=True, help="Contractor profile ID")
@click.option("--terms", required=True, help="Contract terms")
@click.option(
    "--status",
    type=click.Choice([s.value for s in ContractStatus]),
    default=ContractStatus.NEW.value,
    show_default=True,
    help="Initial status",
)
@click.option("--created-at", help="Creation timestamp, for loading historical contracts")
@click.pass_context
def create_contract(ctx, client_id: int, contractor_id: int, terms: str, status: str, created_at: str | None):
    """Create a contract between a client and a contractor.

    Examples:
        brokerage contract create --client 1 --contractor 5 --terms "bla bla" --status in_progress
    """
    service = ContractService(ctx.obj["db"])

    created: datetime | None = None
    if created_at:
        try:
            created = parse_timestamp(created_at)
        except ValueError as e:
            click.echo(f"Error: Invalid creation time: {e}", err=True)
            ctx.exit(1)

    try:
        contract_id = service.create_contract(
            client_id=client_id,
            contractor_id=contractor_id,
            terms=terms,
            status=status,
            created_at=created,
        )
        click.echo(f"Created contract {contract_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)
    except InternalError as e:
        handle_internal_error(ctx, e)


@contract_group.command("show")
@click.argument("contract_id", type=int)
@click.pass_context
def show_contract(ctx, contract_id: int):
    """Show one of the caller's contracts."""
    caller = require_caller(ctx)
    service = ContractService(ctx.obj["db"])

    try:
        contract = service.get_contract_for(caller, contract_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except InternalError as e:
        handle_internal_error(ctx, e)

    click.echo(f"Contract {contract.id}")
    click.echo(f"  Status: {contract.status.value}")
    click.echo(f"  Terms: {contract.terms}")


@contract_group.command("list")
@click.pass_context
def list_contracts(ctx):
    """List the caller's contracts that are not terminated."""
    caller = require_caller(ctx)
    service = ContractService(ctx.obj["db"])

    try:
        contracts = service.list_active_contracts(caller)
    except InternalError as e:
        handle_internal_error(ctx, e)

    if not contracts:
        click.echo("No contracts found.")
        return

    click.echo("\nContracts:")
    click.echo("-" * 80)
    for contract in contracts:
        click.echo(format_contract(contract))


def register_commands(cli):
    """Register contract commands with main CLI."""
    cli.add_command(contract_group, name="contract")
