"""
Price and trend models.
Defines the priced snapshot and signed percentage change used by every report.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from ..utils.number_utilities import to_decimal


class Direction(str, Enum):
    """Direction of a price change"""
    UP = "up"
    DOWN = "down"
    FLAT = "flat"


@dataclass(frozen=True)
class PriceQuote:
    """Price of an asset in one currency"""
    amount: Decimal
    currency: str

    @classmethod
    def from_api(cls, amount: Any, currency: str) -> "PriceQuote":
        return cls(amount=to_decimal(amount), currency=currency.lower())


@dataclass(frozen=True)
class TrendValue:
    """Signed percentage change over one horizon"""
    percent: Decimal
    direction: Direction

    @classmethod
    def from_percent(cls, percent: Any) -> "TrendValue":
        """
        Build a trend from a raw percentage.

        Only the sign matters: negative is DOWN, anything else (zero included) is UP.
        """
        value = to_decimal(percent)
        direction = Direction.DOWN if not value.is_nan() and value < 0 else Direction.UP
        return cls(percent=value, direction=direction)
