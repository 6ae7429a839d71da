"""
Data model for one row of the market listing.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional

from ..config import TREND_HORIZONS
from .quote import PriceQuote, TrendValue


@dataclass
class MarketRow:
    """Price and trends of one coin in the market table"""
    symbol: str
    name: str
    price: Optional[PriceQuote]
    trends: Dict[str, Optional[TrendValue]] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: Dict[str, Any], currency: str) -> "MarketRow":
        """
        Build a row from one entry of /coins/markets.

        Args:
            data: Market entry
            currency: vs_currency the entry was requested in

        Returns:
            MarketRow with one trend per horizon (None when the API has no value)
        """
        trends = {}
        for horizon in TREND_HORIZONS:
            percent = data.get(f"price_change_percentage_{horizon}_in_currency")
            trends[horizon] = TrendValue.from_percent(percent) if percent is not None else None

        price = data.get("current_price")
        return cls(
            symbol=data.get("symbol", ""),
            name=data.get("name", ""),
            price=PriceQuote.from_api(price, currency) if price is not None else None,
            trends=trends,
        )

    def trend(self, horizon: str) -> Optional[TrendValue]:
        return self.trends.get(horizon)
