"""
API clients.
"""

from .base import BaseAPI
from .coingecko import CoinGeckoAPI

__all__ = ["BaseAPI", "CoinGeckoAPI"]
