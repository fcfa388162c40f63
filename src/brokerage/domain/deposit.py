"""Client deposit domain service."""

from decimal import Decimal

from brokerage.database.base import Database
from brokerage.domain.entities import Deposit
from brokerage.domain.errors import (
    LimitExceededError,
    NotFoundError,
    ValidationError,
    client_not_found,
    deposit_limit_exceeded,
)
from brokerage.logging_config import get_logger
from brokerage.utils.money import Number, as_decimal, is_whole_cents

logger = get_logger("domain.deposit")

# A client may deposit at most this share of the price of their unpaid jobs
MAX_DEPOSIT_RATIO = Decimal("0.25")


class DepositService:
    """Service for crediting client balances."""

    def __init__(self, db: Database):
        """Initialize deposit service.

        Args:
            db: Database instance
        """
        self.db = db

    @staticmethod
    def ceiling_for(outstanding: Decimal) -> Decimal:
        """Return the largest deposit allowed for the given outstanding amount."""
        return outstanding * MAX_DEPOSIT_RATIO

    def deposit(self, client_id: int, amount: Number) -> Deposit:
        """Deposit money into a client's balance.

        The deposit is capped at MAX_DEPOSIT_RATIO of the client's outstanding
        unpaid work (all unpaid jobs, no time bound). A client with nothing
        outstanding cannot deposit at all. The outstanding sum and the credit
        happen in the same unit of work.

        Args:
            client_id: Profile ID to credit
            amount: Positive amount with at most two decimal places

        Returns:
            Deposit record with the new balance

        Raises:
            ValidationError: If the amount is not a positive whole-cent amount
            NotFoundError: If the profile doesn't exist
            LimitExceededError: If the amount is above the ceiling
        """
        try:
            value = as_decimal(amount)
        except ValueError as e:
            raise ValidationError(str(e))
        if value <= 0:
            raise ValidationError("Deposit amount must be positive")
        if not is_whole_cents(value):
            raise ValidationError("Deposit amount cannot have fractions of a cent")

        with self.db.unit_of_work() as uow:
            client = uow.get_profile(client_id, for_update=True)
            if client is None:
                raise NotFoundError(client_not_found())

            outstanding = uow.outstanding_for_client(client_id)
            ceiling = self.ceiling_for(outstanding)
            if value > ceiling:
                logger.info(
                    "deposit_rejected",
                    extra={"client_id": client_id, "amount": value, "ceiling": ceiling},
                )
                raise LimitExceededError(deposit_limit_exceeded())

            uow.credit_balance(client_id, value)
            balance = uow.get_profile(client_id).balance

        logger.info(
            "deposit_accepted",
            extra={"client_id": client_id, "amount": value, "balance": balance},
        )
        return Deposit(client_id=client_id, amount=value, ceiling=ceiling, balance=balance)
