"""
Completion notices for finished commands.
"""

from typing import Optional

from loguru import logger
from rich.console import Console
from rich.text import Text


class Notifier:
    """Prints a one-line notice and rings the terminal bell, each if enabled"""

    def __init__(self, show: bool = True, beep: bool = True, console: Optional[Console] = None):
        self.show = show
        self.beep = beep
        self.console = console or Console(stderr=True)

    def notify(self, title: str, message: str) -> None:
        logger.debug(f"Notify: {title} - {message}")

        if self.show:
            self.console.print(Text.assemble("🔔 ", (title, "bold"), " ", message))

        if self.beep:
            self.console.bell()
