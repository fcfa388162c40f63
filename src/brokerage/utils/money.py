"""Fixed-point money helpers.

Amounts are ``Decimal`` values with two decimal places in Python and integer
minor units (cents) in storage. No float is ever used for a balance.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

MONEY_DECIMAL_PLACES = 2
CENTS = Decimal(10) ** MONEY_DECIMAL_PLACES
ZERO = Decimal("0.00")

Number = Union[Decimal, int, str]

# Largest amount whose cents fit a signed 64-bit column
MAX_CENTS = 2**63 - 1


def as_decimal(value: Number) -> Decimal:
    """Convert an int, str or Decimal to Decimal without rounding.

    Raises:
        ValueError: If the value is a float, not numeric or too large to store
    """
    if isinstance(value, float):
        raise ValueError("Float amounts are not accepted; use Decimal or str")
    try:
        result = Decimal(value) if not isinstance(value, Decimal) else value
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Could not parse amount '{value}': {e}")
    if not result.is_finite():
        raise ValueError(f"Amount must be finite, got '{value}'")
    if abs(result) * CENTS > MAX_CENTS:
        raise ValueError(f"Amount is out of range: '{value}'")
    return result


def round_money(value: Number) -> Decimal:
    """Round a monetary value to cents (half up)."""
    return as_decimal(value).quantize(ZERO, rounding=ROUND_HALF_UP)


def is_whole_cents(value: Decimal) -> bool:
    """Return True if the amount has no fraction of a cent."""
    return value == value.quantize(ZERO, rounding=ROUND_HALF_UP)


def to_cents(value: Number) -> int:
    """Convert an amount to integer minor units."""
    return int(round_money(value) * CENTS)


def from_cents(cents: Union[int, Decimal]) -> Decimal:
    """Convert integer minor units to a Decimal amount."""
    return (Decimal(cents) / CENTS).quantize(ZERO)
