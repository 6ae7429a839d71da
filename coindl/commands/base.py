"""
Shared flow for the CLI commands.
Fetch under a spinner, build markdown, render, print, notify.
"""

import sys
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, Optional, TextIO

from loguru import logger
from rich.console import Console

from ..config import RunConfig
from ..notifier import Notifier
from ..render import MarkdownRenderer
from ..services.coin_service import CoinService
from ..spinner import Spinner


class BaseCommand(ABC):
    """Base class for commands that print one rendered report"""

    name: str = ""
    spinner_suffix: str = ""
    notification_title: str = "coin-dl"

    def __init__(
        self,
        run_config: RunConfig,
        service: Optional[CoinService] = None,
        renderer: Optional[MarkdownRenderer] = None,
        out: Optional[TextIO] = None,
        err_console: Optional[Console] = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        """
        Args:
            run_config: Notification, spinner and width settings
            service: Data service; a default CoinGecko-backed one is created when omitted
            renderer: Markdown renderer; defaults to run_config.render_width
            out: Stream the report is written to (stdout by default)
            err_console: Console for the spinner and notices (stderr by default)
            clock: Source of the report timestamp
        """
        self.run_config = run_config
        self.service = service or CoinService()
        self.renderer = renderer or MarkdownRenderer(width=run_config.render_width)
        self.out = out or sys.stdout
        self.err_console = err_console or Console(stderr=True)
        self.clock = clock
        self.notifier = Notifier(
            show=run_config.show_notifications,
            beep=run_config.play_notification_beep,
            console=self.err_console,
        )

    @abstractmethod
    def build_markdown(self, generated_at: datetime) -> str:
        """Fetch data and return the markdown report"""

    def notification_message(self) -> str:
        return "done"

    def execute(self) -> str:
        """
        Run the command and print the rendered report.

        Returns:
            Rendered report

        Raises:
            CoindlError: Any failure; nothing is printed to the output stream then
        """
        spinner_config = self.run_config.spinner.updated(suffix=self.spinner_suffix)

        with Spinner(spinner_config, console=self.err_console):
            markdown = self.build_markdown(self.clock())
            output = self.renderer.render(markdown)

        logger.debug(f"{self.name}: rendered {len(output)} characters")
        self.out.write(output)
        self.out.flush()

        self.notifier.notify(self.notification_title, self.notification_message())
        return output
