"""Job payment domain service."""

from datetime import datetime, UTC
from typing import Callable, Optional

from brokerage.database.base import Database
from brokerage.domain.entities import Payment
from brokerage.domain.errors import (
    InsufficientFundsError,
    InvalidStateError,
    NotFoundError,
    UnauthorizedError,
    insufficient_balance,
    job_already_paid,
    job_not_found,
    profile_not_found,
    wrong_job,
)
from brokerage.logging_config import get_logger
from brokerage.utils.date_parser import to_naive_utc

logger = get_logger("domain.payment")


def utc_now() -> datetime:
    return datetime.now(UTC)


class PaymentService:
    """Service for paying contractors for their jobs."""

    def __init__(self, db: Database, clock: Optional[Callable[[], datetime]] = None):
        """Initialize payment service.

        Args:
            db: Database instance
            clock: Returns the current time; defaults to the system UTC clock
        """
        self.db = db
        self.clock = clock or utc_now

    def pay_job(self, caller_id: int, job_id: int) -> Payment:
        """Pay for a job, moving its price from the client to the contractor.

        All checks run before any row is touched, and the three writes (job,
        client, contractor) commit together. If a concurrent payment got in
        between the checks and the writes, the guarded writes fail and the
        whole unit of work is rolled back.

        Args:
            caller_id: Profile ID of the caller; must be the contract's client
            job_id: Job ID

        Returns:
            Payment record

        Raises:
            NotFoundError: If the job (or one of its parties) doesn't exist
            InvalidStateError: If the job is already paid
            UnauthorizedError: If the caller is not the contract's client
            InsufficientFundsError: If the client's balance is below the price
        """
        with self.db.unit_of_work() as uow:
            job = uow.get_job(job_id, for_update=True)
            if job is None:
                raise NotFoundError(job_not_found())
            if job.paid:
                raise InvalidStateError(job_already_paid())

            contract = uow.get_contract(job.contract_id)
            if contract is None:
                raise NotFoundError(job_not_found())
            if contract.client_id != caller_id:
                logger.info(
                    "payment_rejected",
                    extra={"job_id": job_id, "caller_id": caller_id, "reason": "wrong_client"},
                )
                raise UnauthorizedError(wrong_job())

            client = uow.get_profile(contract.client_id, for_update=True)
            if client is None:
                raise NotFoundError(profile_not_found(contract.client_id))
            contractor = uow.get_profile(contract.contractor_id, for_update=True)
            if contractor is None:
                raise NotFoundError(profile_not_found(contract.contractor_id))

            if client.balance < job.price:
                logger.info(
                    "payment_rejected",
                    extra={
                        "job_id": job_id,
                        "caller_id": caller_id,
                        "reason": "insufficient_funds",
                        "balance": client.balance,
                        "price": job.price,
                    },
                )
                raise InsufficientFundsError(insufficient_balance())

            paid_at = to_naive_utc(self.clock())
            if not uow.mark_job_paid(job.id, paid_at):
                raise InvalidStateError(job_already_paid())
            if not uow.debit_balance(client.id, job.price):
                raise InsufficientFundsError(insufficient_balance())
            if not uow.credit_balance(contractor.id, job.price):
                raise NotFoundError(profile_not_found(contractor.id))

        logger.info(
            "job_paid",
            extra={
                "job_id": job.id,
                "client_id": client.id,
                "contractor_id": contractor.id,
                "amount": job.price,
            },
        )
        return Payment(
            job_id=job.id,
            client_id=client.id,
            contractor_id=contractor.id,
            amount=job.price,
            paid_at=paid_at,
        )
