"""
Market command.
Lists price and 1h to 30d trends for one or more coins.
"""

from datetime import datetime
from typing import List

from ..config import DEFAULT_CURRENCY
from ..formatters.report_builder import build_market_report
from .base import BaseCommand


class MarketCommand(BaseCommand):
    """Command handler for the market table"""

    name = "market"
    spinner_suffix = " Getting Market Data from the Gecko"

    def __init__(self, run_config, coin_ids: List[str], currency: str = DEFAULT_CURRENCY, **kwargs):
        super().__init__(run_config, **kwargs)
        self.coin_ids = coin_ids
        self.currency = currency.lower()

    def build_markdown(self, generated_at: datetime) -> str:
        rows = self.service.get_market_rows(self.currency, self.coin_ids)
        return build_market_report(rows, self.currency, generated_at=generated_at)

    def notification_message(self) -> str:
        return f"market data ready ({self.currency.upper()})"
