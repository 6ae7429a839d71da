"""
Exchange rate command.
Shows what 1 BTC is worth in every, or selected, currencies.
"""

from datetime import datetime
from typing import List, Optional

from loguru import logger

from ..formatters.report_builder import build_exchange_rate_report
from .base import BaseCommand


class ExchangeRateCommand(BaseCommand):
    """Command handler for BTC exchange rates"""

    name = "exchange"
    spinner_suffix = " Getting Exchange Rates from the Gecko"

    def __init__(self, run_config, currencies: Optional[List[str]] = None, **kwargs):
        super().__init__(run_config, **kwargs)
        self.currencies = currencies or []

    def build_markdown(self, generated_at: datetime) -> str:
        rates = self.service.get_exchange_rates()

        unknown = [code for code in self.currencies if code not in rates]
        if unknown:
            logger.info(f"Skipping unknown currencies: {', '.join(unknown)}")

        return build_exchange_rate_report(rates, self.currencies, generated_at=generated_at)

    def notification_message(self) -> str:
        return "exchange rates ready"
