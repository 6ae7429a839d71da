"""
Coin info command.
Shows price, market cap, 24 hour figures and links for one coin.
"""

from datetime import datetime

from ..config import DEFAULT_COIN, DEFAULT_CURRENCY
from ..errors import ConfigError
from ..formatters.report_builder import build_asset_report
from .base import BaseCommand


class InfoCommand(BaseCommand):
    """Command handler for a single coin's details"""

    name = "info"
    spinner_suffix = " Getting Crypto Info from the Gecko"

    def __init__(
        self,
        run_config,
        coin_id: str = DEFAULT_COIN,
        currency: str = DEFAULT_CURRENCY,
        full: bool = False,
        **kwargs
    ):
        super().__init__(run_config, **kwargs)
        self.coin_id = coin_id.lower()
        self.currency = currency.lower()
        self.full = full

    def build_markdown(self, generated_at: datetime) -> str:
        coin = self.service.get_coin_info(self.coin_id)

        if not coin.has_currency(self.currency):
            raise ConfigError(f"{coin.name} has no price in '{self.currency}'")

        return build_asset_report(
            coin,
            self.currency,
            generated_at=generated_at,
            include_description=self.full,
        )

    def notification_message(self) -> str:
        return f"{self.coin_id} info ready"
