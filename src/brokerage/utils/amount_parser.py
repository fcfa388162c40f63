"""Amount parsing utilities."""

from decimal import Decimal
import re

from brokerage.utils.money import as_decimal


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"

    Negative amounts are returned as-is; callers decide whether they are
    acceptable.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Remove currency symbol and thousands separators
    amount_str = re.sub(r"[$]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    return as_decimal(amount_str)
