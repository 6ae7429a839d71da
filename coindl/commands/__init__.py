"""
CLI commands.
"""

from .base import BaseCommand
from .info_commands import InfoCommand
from .market_commands import MarketCommand
from .exchange_commands import ExchangeRateCommand

__all__ = ["BaseCommand", "InfoCommand", "MarketCommand", "ExchangeRateCommand"]
