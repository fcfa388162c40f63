"""Job commands, including payment."""

import click

from brokerage.cli.error_handling import handle_domain_error, handle_internal_error
from brokerage.cli.identity import require_caller
from brokerage.domain.contract import ContractService
from brokerage.domain.errors import DomainError, InternalError
from brokerage.domain.payment import PaymentService
from brokerage.utils.amount_parser import parse_amount


@click.group()
def job_group():
    """Manage and pay jobs."""
    pass


@job_group.command("create")
@click.option("--contract", "contract_id", type=int, required=True, help="Contract ID")
@click.option("--description", required=True, help="Job description")
@click.option("--price", required=True, help="Job price (e.g., 200.00)")
@click.pass_context
def create_job(ctx, contract_id: int, description: str, price: str):
    """Add an unpaid job to a contract.

    Examples:
        brokerage job create --contract 2 --description work --price 201
    """
    service = ContractService(ctx.obj["db"])

    try:
        job_id = service.create_job(
            contract_id=contract_id,
            description=description,
            price=parse_amount(price),
        )
        click.echo(f"Created job {job_id}")
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)
    except InternalError as e:
        handle_internal_error(ctx, e)


@job_group.command("unpaid")
@click.pass_context
def list_unpaid(ctx):
    """List unpaid jobs of the caller's in-progress contracts."""
    caller = require_caller(ctx)
    service = ContractService(ctx.obj["db"])

    try:
        jobs = service.list_unpaid_jobs(caller)
    except InternalError as e:
        handle_internal_error(ctx, e)

    if not jobs:
        click.echo("No unpaid jobs found.")
        return

    click.echo("\nUnpaid jobs:")
    click.echo("-" * 60)
    for job in jobs:
        click.echo(f"ID: {job.id:3d} | Contract: {job.contract_id:3d} | ${job.price:>10,.2f} | {job.description}")


@job_group.command("pay")
@click.argument("job_id", type=int)
@click.pass_context
def pay_job(ctx, job_id: int):
    """Pay for a job as the contract's client.

    The job's price moves from the caller's balance to the contractor's.

    Examples:
        brokerage --profile-id 1 job pay 2
    """
    caller = require_caller(ctx)
    service = PaymentService(ctx.obj["db"])

    try:
        payment = service.pay_job(caller_id=caller.id, job_id=job_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except InternalError as e:
        handle_internal_error(ctx, e)

    click.echo("Payment successful")
    click.echo(f"  Job: {payment.job_id}")
    click.echo(f"  Amount: ${payment.amount:,.2f}")
    click.echo(f"  Paid to contractor: {payment.contractor_id}")


def register_commands(cli):
    """Register job commands with main CLI."""
    cli.add_command(job_group, name="job")
