"""
Number formatting for reports.
Turns raw API numbers into fixed two-decimal strings and trend markers.
"""

from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any, Tuple

from ..config import POSITIVE_MARKER, NEGATIVE_MARKER
from ..errors import FormatError
from ..utils.number_utilities import to_decimal

TWO_PLACES = Decimal("0.01")


def format_value(amount: Any) -> str:
    """
    Format a number with thousands separators and exactly 2 decimals.

    Args:
        amount: Number to format

    Returns:
        Formatted string, e.g. "1,234.50"

    Raises:
        FormatError: On NaN, infinity or non-numeric input
    """
    value = to_decimal(amount)
    if not value.is_finite():
        raise FormatError(f"Cannot format non-finite value: {value}")

    with localcontext() as ctx:
        # Room for every integer digit plus the two decimals
        ctx.prec = max(ctx.prec, value.adjusted() + 3)
        rounded = value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
        # -0.004 rounds to -0.00
        if rounded.is_zero():
            rounded = abs(rounded)

        return f"{rounded:,.2f}"


def is_negative(percent: Any) -> bool:
    return to_decimal(percent) < 0


def trend_indicator(percent: Any) -> Tuple[str, str]:
    """
    Pick the direction marker for a percentage change.

    Zero counts as positive.

    Returns:
        Tuple of (marker, formatted percent)
    """
    formatted = format_value(percent)
    marker = NEGATIVE_MARKER if is_negative(percent) else POSITIVE_MARKER
    return marker, formatted


def format_timestamp(moment: datetime) -> str:
    """Format a datetime like C's asctime, e.g. 'Mon Jan  2 15:04:05 2006'"""
    return f"{moment:%a %b} {moment.day:2d} {moment:%H:%M:%S %Y}"
