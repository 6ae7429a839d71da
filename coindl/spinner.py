"""
Loading spinner shown while the API call runs.
Drawn on stderr so stdout only carries the report.
"""

from typing import Optional

from rich.console import Console
from rich.status import Status
from rich.text import Text

from .config import SpinnerConfig


class Spinner:
    """Start/stop wrapper around a rich status spinner"""

    def __init__(self, config: SpinnerConfig, console: Optional[Console] = None):
        self.config = config
        self.console = console or Console(stderr=True)
        self._status: Optional[Status] = None

    @property
    def label(self) -> str:
        return f"{self.config.suffix.strip()}: {self.config.message}"

    @property
    def running(self) -> bool:
        return self._status is not None

    def start(self) -> None:
        if self.running:
            return
        self._status = Status(
            self.label,
            console=self.console,
            spinner=self.config.style,
            refresh_per_second=1 / self.config.frequency,
        )
        self._status.start()

    def _finish(self, character: str, color: str, message: str) -> None:
        if not self.running:
            return
        self._status.stop()
        self._status = None
        self.console.print(
            Text.assemble((character, color), " ", self.config.suffix.strip(), ": ", message)
        )

    def stop(self) -> None:
        """Stop and print the success line"""
        self._finish(self.config.stop_character, self.config.stop_color, self.config.message)

    def stop_fail(self) -> None:
        """Stop and print the failure line"""
        self._finish(
            self.config.stop_fail_character,
            self.config.stop_fail_color,
            self.config.stop_fail_message,
        )

    def __enter__(self) -> "Spinner":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.stop()
        else:
            self.stop_fail()
        return False
