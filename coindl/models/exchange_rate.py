"""
Data model for BTC exchange rates.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Any

from ..utils.number_utilities import to_decimal


@dataclass(frozen=True)
class ExchangeRate:
    """Value of 1 BTC in one currency"""
    code: str
    name: str
    unit: str
    value: Decimal
    type: str

    @classmethod
    def from_api(cls, code: str, data: Dict[str, Any]) -> "ExchangeRate":
        return cls(
            code=code,
            name=data.get("name", code.upper()),
            unit=data.get("unit", ""),
            value=to_decimal(data.get("value")),
            type=data.get("type", ""),
        )
