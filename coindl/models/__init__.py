"""
coin-dl data models.
"""

from .quote import Direction, PriceQuote, TrendValue
from .coin import CoinInfo, CoinLinks, CoinMarketData
from .market import MarketRow
from .exchange_rate import ExchangeRate

__all__ = [
    "Direction", "PriceQuote", "TrendValue",
    "CoinInfo", "CoinLinks", "CoinMarketData",
    "MarketRow", "ExchangeRate"
]
