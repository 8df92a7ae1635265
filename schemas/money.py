"""
Decimal helpers for monetary columns (NUMERIC(10, 2))
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

CENTS = Decimal("0.01")
ZERO = Decimal("0.00")

# NUMERIC(10, 2) leaves eight digits before the point
COLUMN_LIMIT = Decimal("100000000")


def to_money(value: Any) -> Optional[Decimal]:
    """
    Coerce a driver or request value to a two-place Decimal.

    asyncpg hands back Decimal, SQLite hands back float or int; both go
    through ``str`` so 1109.97 does not turn into 1109.9700000000000272.

    Raises:
        ValueError: the value is not a finite number
    """
    if value is None:
        return None
    try:
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        if not value.is_finite():
            raise ValueError(f"not a monetary amount: {value}")
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise ValueError(f"not a monetary amount: {value!r}") from e


def to_column_money(value: Any) -> Optional[Decimal]:
    """Like ``to_money``, and also rejects amounts a NUMERIC(10, 2) column cannot hold."""
    amount = to_money(value)
    if amount is not None and abs(amount) >= COLUMN_LIMIT:
        raise ValueError(f"amount {amount} exceeds NUMERIC(10, 2)")
    return amount
