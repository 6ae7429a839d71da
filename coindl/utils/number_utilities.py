"""
Numeric coercion shared by the models and the formatters.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..errors import FormatError


def to_decimal(value: Any) -> Decimal:
    """
    Convert a raw numeric value into a Decimal.

    Floats go through their string form so 45000.125 stays 45000.125
    instead of its binary approximation.

    Args:
        value: int, float, Decimal or numeric string

    Returns:
        Decimal value (may be NaN or infinite)

    Raises:
        FormatError: If the value is not numeric
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or value is None:
        raise FormatError(f"Not a number: {value!r}")
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            raise FormatError(f"Not a number: {value!r}")
    raise FormatError(f"Not a number: {value!r}")


def optional_decimal(value: Any) -> Optional[Decimal]:
    """Like to_decimal, but None stays None"""
    if value is None:
        return None
    return to_decimal(value)
