"""Custom column types."""

from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import BigInteger
from sqlalchemy.types import TypeDecorator

from brokerage.utils.money import from_cents, to_cents


class Money(TypeDecorator):
    """Monetary amount stored as integer minor units.

    Python side values are Decimal amounts with two decimal places. Binding
    goes through ``to_cents`` so arithmetic and comparisons in SQL
    (``balance - :price``, ``balance >= :price``) never see a float.
    """

    impl = BigInteger
    cache_ok = True

    def process_bind_param(self, value: Any, dialect) -> Optional[int]:
        if value is None:
            return None
        return to_cents(value)

    def process_result_value(self, value: Any, dialect) -> Optional[Decimal]:
        if value is None:
            return None
        return from_cents(value)
