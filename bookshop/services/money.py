"""
Money Utilities - Safe Decimal handling for price snapshots.

Avoids float precision issues by holding prices as Decimal and only
converting to float at the JSON boundary.
"""
from decimal import Decimal, InvalidOperation
from typing import Union

Number = Union[str, int, float, Decimal]


def to_decimal(value: Union[Number, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        if isinstance(value, float):
            # Go through str to keep 19.99 as 19.99
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def is_number(value) -> bool:
    """True for int/float/Decimal, False for bool and everything else."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def to_json_number(value: Number) -> Union[int, float]:
    """
    Convert a price to a JSON-friendly number.

    Whole amounts stay ints so 100 encodes as ``100``, not ``100.0``.
    """
    decimal_value = to_decimal(value)
    if decimal_value == decimal_value.to_integral_value():
        return int(decimal_value)
    return float(decimal_value)
