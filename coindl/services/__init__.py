"""
Data services.
"""

from .coin_service import CoinService

__all__ = ["CoinService"]
