"""
CoinGecko API client.
Fetches coin details, market listings and BTC exchange rates.
"""

from typing import Dict, Any, List, Optional
from loguru import logger

from ..config import COINGECKO_BASE_URL, COINGECKO_API_KEY_HEADER, TREND_HORIZONS
from .base import BaseAPI
from .request_utilities import get_env_var


class CoinGeckoAPI(BaseAPI):
    """
    Client for the public CoinGecko v3 API.
    Returns the decoded JSON payloads unchanged.
    """

    def __init__(self, api_key: Optional[str] = None, base_url: str = COINGECKO_BASE_URL):
        """
        Initialize the CoinGecko client.

        Args:
            api_key: Demo API key (falls back to COINGECKO_API_KEY, optional)
            base_url: API root
        """
        if api_key is None:
            api_key = get_env_var("COINGECKO_API_KEY")

        super().__init__(
            base_url=base_url,
            api_key=api_key or None,
            api_key_header=COINGECKO_API_KEY_HEADER
        )

        logger.debug("Initialized CoinGeckoAPI")

    def get_coin(self, coin_id: str) -> Dict[str, Any]:
        """
        Get current data for a coin.

        Args:
            coin_id: CoinGecko coin id (e.g. "bitcoin")

        Returns:
            Coin payload including market_data and links
        """
        params = {
            "localization": "false",
            "tickers": "false",
            "market_data": "true",
            "community_data": "false",
            "developer_data": "false",
        }
        return self.get(f"coins/{coin_id}", params=params)

    def get_markets(self, currency: str, coin_ids: List[str]) -> List[Dict[str, Any]]:
        """
        Get market data for a list of coins.

        Args:
            currency: Target currency (vs_currency)
            coin_ids: CoinGecko coin ids; empty lists the top coins

        Returns:
            List of market entries ordered by market cap
        """
        params = {
            "vs_currency": currency,
            "ids": ",".join(coin_ids) if coin_ids else None,
            "price_change_percentage": ",".join(TREND_HORIZONS),
        }
        return self.get("coins/markets", params=params)

    def get_exchange_rates(self) -> Dict[str, Any]:
        """
        Get BTC-to-currency exchange rates.

        Returns:
            Payload with a "rates" mapping keyed by currency code
        """
        return self.get("exchange_rates")
