"""
Coin service.
Retrieves CoinGecko data and turns it into coin-dl models.
"""

from typing import Dict, List, Any, Optional
from loguru import logger

from ..api.coingecko import CoinGeckoAPI
from ..errors import NetworkError
from ..models import CoinInfo, MarketRow, ExchangeRate


class CoinService:
    """Service for retrieving coin, market and exchange-rate data"""

    def __init__(self, api: Optional[CoinGeckoAPI] = None):
        """
        Initialize the coin service.

        Args:
            api: CoinGecko client; a default one is created when omitted
        """
        self.api = api or CoinGeckoAPI()
        logger.debug("Initialized CoinService")

    def get_coin_info(self, coin_id: str) -> CoinInfo:
        """
        Get details for one coin.

        Args:
            coin_id: CoinGecko coin id

        Returns:
            CoinInfo model

        Raises:
            NetworkError: If the request fails or the payload is not a coin
        """
        data = self.api.get_coin(coin_id)
        if not isinstance(data, dict) or "market_data" not in data:
            raise NetworkError(f"Unexpected coin payload for '{coin_id}'", response=data)

        coin = CoinInfo.from_api(data)
        logger.debug(f"Fetched coin info for {coin.id}")
        return coin

    def get_market_rows(self, currency: str, coin_ids: List[str]) -> List[MarketRow]:
        """
        Get market rows for the given coins, in the order the API returns them.

        Args:
            currency: Target currency
            coin_ids: CoinGecko coin ids

        Returns:
            List of MarketRow
        """
        data = self.api.get_markets(currency, coin_ids)
        if not isinstance(data, list):
            raise NetworkError("Unexpected market payload", response=data)

        rows = [MarketRow.from_api(entry, currency) for entry in data]

        found = {entry.get("id") for entry in data}
        missing = [coin_id for coin_id in coin_ids if coin_id not in found]
        if missing:
            logger.warning(f"No market data for: {', '.join(missing)}")

        return rows

    def get_exchange_rates(self) -> Dict[str, ExchangeRate]:
        """
        Get the value of 1 BTC in every currency CoinGecko knows.

        Returns:
            Exchange rates keyed by currency code, in API order
        """
        data = self.api.get_exchange_rates()
        rates: Any = data.get("rates") if isinstance(data, dict) else None
        if not isinstance(rates, dict):
            raise NetworkError("Unexpected exchange rate payload", response=data)

        return {code: ExchangeRate.from_api(code, entry) for code, entry in rates.items()}
