"""
Data models for a single coin's details.
Mirrors the parts of the CoinGecko /coins/{id} payload that the info report uses.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Any, Optional

from ..config import TREND_HORIZONS
from ..utils.number_utilities import optional_decimal
from .quote import PriceQuote, TrendValue


def _string_list(values: Any) -> List[str]:
    """Keep the non-empty strings of an API list field"""
    if not values:
        return []
    if isinstance(values, str):
        values = [values]
    return [value.strip() for value in values if isinstance(value, str) and value.strip()]


def _decimal_map(values: Optional[Dict[str, Any]]) -> Dict[str, Decimal]:
    """Convert a currency -> number map, dropping null entries"""
    if not values:
        return {}
    return {
        currency.lower(): optional_decimal(amount)
        for currency, amount in values.items()
        if amount is not None
    }


@dataclass
class CoinLinks:
    """Web links published for a coin. Every field may be empty."""
    homepage: List[str] = field(default_factory=list)
    blockchain_site: List[str] = field(default_factory=list)
    official_forum_url: List[str] = field(default_factory=list)
    twitter_screen_name: str = ""
    facebook_username: str = ""
    subreddit_url: str = ""
    repos_github: List[str] = field(default_factory=list)
    repos_bitbucket: List[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, data: Optional[Dict[str, Any]]) -> "CoinLinks":
        data = data or {}
        repos = data.get("repos_url") or {}
        return cls(
            homepage=_string_list(data.get("homepage")),
            blockchain_site=_string_list(data.get("blockchain_site")),
            official_forum_url=_string_list(data.get("official_forum_url")),
            twitter_screen_name=(data.get("twitter_screen_name") or "").strip(),
            facebook_username=(data.get("facebook_username") or "").strip(),
            subreddit_url=(data.get("subreddit_url") or "").strip(),
            repos_github=_string_list(repos.get("github")),
            repos_bitbucket=_string_list(repos.get("bitbucket")),
        )


@dataclass
class CoinMarketData:
    """Market figures for a coin, keyed by lower-case currency code"""
    current_price: Dict[str, Decimal] = field(default_factory=dict)
    high_24h: Dict[str, Decimal] = field(default_factory=dict)
    low_24h: Dict[str, Decimal] = field(default_factory=dict)
    market_cap: Dict[str, Decimal] = field(default_factory=dict)
    total_volume: Dict[str, Decimal] = field(default_factory=dict)
    price_change_percentage: Dict[str, Dict[str, Decimal]] = field(default_factory=dict)
    circulating_supply: Optional[Decimal] = None

    @classmethod
    def from_api(cls, data: Optional[Dict[str, Any]]) -> "CoinMarketData":
        data = data or {}
        changes = {
            horizon: _decimal_map(data.get(f"price_change_percentage_{horizon}_in_currency"))
            for horizon in TREND_HORIZONS
        }
        return cls(
            current_price=_decimal_map(data.get("current_price")),
            high_24h=_decimal_map(data.get("high_24h")),
            low_24h=_decimal_map(data.get("low_24h")),
            market_cap=_decimal_map(data.get("market_cap")),
            total_volume=_decimal_map(data.get("total_volume")),
            price_change_percentage=changes,
            circulating_supply=optional_decimal(data.get("circulating_supply")),
        )


@dataclass
class CoinInfo:
    """Details of one coin"""
    id: str
    name: str
    symbol: str
    market_cap_rank: Optional[int] = None
    market_data: CoinMarketData = field(default_factory=CoinMarketData)
    links: CoinLinks = field(default_factory=CoinLinks)
    description: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "CoinInfo":
        rank = data.get("market_cap_rank")
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            symbol=data.get("symbol", ""),
            market_cap_rank=int(rank) if rank is not None else None,
            market_data=CoinMarketData.from_api(data.get("market_data")),
            links=CoinLinks.from_api(data.get("links")),
            description=((data.get("description") or {}).get("en") or "").strip(),
        )

    def has_currency(self, currency: str) -> bool:
        return currency.lower() in self.market_data.current_price

    def quote(self, currency: str) -> Optional[PriceQuote]:
        """Current price in the given currency, None when not listed"""
        amount = self.market_data.current_price.get(currency.lower())
        if amount is None:
            return None
        return PriceQuote(amount=amount, currency=currency.lower())

    def trend(self, currency: str, horizon: str) -> Optional[TrendValue]:
        percent = self.market_data.price_change_percentage.get(horizon, {}).get(currency.lower())
        if percent is None:
            return None
        return TrendValue.from_percent(percent)

    def trends(self, currency: str) -> Dict[str, Optional[TrendValue]]:
        return {horizon: self.trend(currency, horizon) for horizon in TREND_HORIZONS}
