import copy
import io
from datetime import datetime

import pytest
from loguru import logger
from rich.console import Console

from coindl.config import RunConfig

# Configure logging for tests
logger.remove()
logger.add(lambda msg: print(msg, end=""), level="INFO", colorize=False)


COIN_PAYLOAD = {
    "id": "bitcoin",
    "symbol": "btc",
    "name": "Bitcoin",
    "market_cap_rank": 1,
    "description": {"en": "Bitcoin is the first successful internet money."},
    "links": {
        "homepage": ["http://www.bitcoin.org", "", ""],
        "blockchain_site": ["https://blockchair.com/bitcoin/", "", "https://btc.com/"],
        "official_forum_url": ["https://bitcointalk.org/", ""],
        "twitter_screen_name": "bitcoin",
        "facebook_username": "bitcoins",
        "subreddit_url": "https://www.reddit.com/r/Bitcoin/",
        "repos_url": {
            "github": ["https://github.com/bitcoin/bitcoin"],
            "bitbucket": [],
        },
    },
    "market_data": {
        "current_price": {"usd": 45000.125, "eur": 41000.5},
        "market_cap": {"usd": 850000000000, "eur": 780000000000},
        "total_volume": {"usd": 30000000000.4, "eur": 27000000000},
        "high_24h": {"usd": 46000, "eur": 42000},
        "low_24h": {"usd": 44000.999, "eur": 40000},
        "price_change_percentage_1h_in_currency": {"usd": 0.1, "eur": 0.2},
        "price_change_percentage_24h_in_currency": {"usd": -2.5, "eur": 1.25},
        "price_change_percentage_7d_in_currency": {"usd": 3.3, "eur": 3.1},
        "price_change_percentage_14d_in_currency": {"usd": -8.0, "eur": -7.5},
        "price_change_percentage_30d_in_currency": {"usd": 12.0, "eur": 11.0},
        "circulating_supply": 19500000.0,
    },
}

MARKETS_PAYLOAD = [
    {
        "id": "bitcoin",
        "symbol": "btc",
        "name": "Bitcoin",
        "current_price": 45000.125,
        "market_cap_rank": 1,
        "price_change_percentage_1h_in_currency": 0.1,
        "price_change_percentage_24h_in_currency": -2.5,
        "price_change_percentage_7d_in_currency": 3.3,
        "price_change_percentage_14d_in_currency": -8.0,
        "price_change_percentage_30d_in_currency": 12.0,
    },
    {
        "id": "ethereum",
        "symbol": "eth",
        "name": "Ethereum",
        "current_price": 3000,
        "market_cap_rank": 2,
        "price_change_percentage_1h_in_currency": -0.4,
        "price_change_percentage_24h_in_currency": 0,
        "price_change_percentage_7d_in_currency": None,
        "price_change_percentage_14d_in_currency": 1.5,
        "price_change_percentage_30d_in_currency": -3.0,
    },
]

EXCHANGE_RATES_PAYLOAD = {
    "rates": {
        "btc": {"name": "Bitcoin", "unit": "BTC", "value": 1.0, "type": "crypto"},
        "usd": {"name": "US Dollar", "unit": "$", "value": 45000.125, "type": "fiat"},
        "eur": {"name": "Euro", "unit": "€", "value": 41000.5, "type": "fiat"},
        "xau": {"name": "Gold - Troy Ounce", "unit": "XAU", "value": 21.35, "type": "commodity"},
    }
}


class MockCoinGeckoAPI:
    """Stand-in for CoinGeckoAPI returning canned payloads"""

    def __init__(self, coin=None, markets=None, rates=None, error=None):
        self.coin = COIN_PAYLOAD if coin is None else coin
        self.markets = MARKETS_PAYLOAD if markets is None else markets
        self.rates = EXCHANGE_RATES_PAYLOAD if rates is None else rates
        self.error = error
        self.calls = []

    def _answer(self, name, payload, *args):
        self.calls.append((name,) + args)
        if self.error is not None:
            raise self.error
        return copy.deepcopy(payload)

    def get_coin(self, coin_id):
        return self._answer("get_coin", self.coin, coin_id)

    def get_markets(self, currency, coin_ids):
        return self._answer("get_markets", self.markets, currency, list(coin_ids))

    def get_exchange_rates(self):
        return self._answer("get_exchange_rates", self.rates)


@pytest.fixture
def coin_payload():
    """Fixture for a /coins/{id} payload"""
    return copy.deepcopy(COIN_PAYLOAD)


@pytest.fixture
def markets_payload():
    """Fixture for a /coins/markets payload"""
    return copy.deepcopy(MARKETS_PAYLOAD)


@pytest.fixture
def rates_payload():
    """Fixture for an /exchange_rates payload"""
    return copy.deepcopy(EXCHANGE_RATES_PAYLOAD)


@pytest.fixture
def mock_api():
    """Fixture for a mock CoinGecko client"""
    return MockCoinGeckoAPI()


@pytest.fixture
def api_factory():
    """Fixture returning the mock client class for custom payloads"""
    return MockCoinGeckoAPI


@pytest.fixture
def fixed_time():
    return datetime(2024, 3, 5, 9, 7, 3)


@pytest.fixture
def quiet_config():
    """Run configuration without notices or bell"""
    return RunConfig(show_notifications=False, play_notification_beep=False)


@pytest.fixture
def err_console():
    """Console capturing spinner and notice output"""
    return Console(file=io.StringIO(), force_terminal=False, width=100)


@pytest.fixture(scope="session", autouse=True)
def setup_environment():
    """Keep tests independent of a developer's CoinGecko key"""
    import os
    os.environ.pop("COINGECKO_API_KEY", None)
    yield
