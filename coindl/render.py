"""
Terminal rendering of markdown reports.
"""

import io
import sys
from typing import Optional

from loguru import logger
from rich.console import Console
from rich.markdown import Markdown

from .config import RENDER_WIDTH
from .errors import RenderError


class MarkdownRenderer:
    """Render markdown into styled text for the terminal"""

    def __init__(self, width: int = RENDER_WIDTH, color: Optional[bool] = None):
        """
        Args:
            width: Wrap width in columns
            color: Force ANSI styling on/off; None detects whether stdout is a terminal
        """
        self.width = width
        self.color = color

    def _use_color(self) -> bool:
        if self.color is not None:
            return self.color
        return sys.stdout.isatty()

    def _color_system(self) -> Optional[str]:
        if self.color is None:
            return "auto"
        return "truecolor" if self.color else None

    def render(self, markdown: str) -> str:
        """
        Render a markdown document.

        Args:
            markdown: Markdown text

        Returns:
            Rendered text, ANSI styled when color is enabled

        Raises:
            RenderError: If rendering fails
        """
        use_color = self._use_color()
        buffer = io.StringIO()
        console = Console(
            file=buffer,
            width=self.width,
            force_terminal=use_color,
            no_color=not use_color,
            color_system=self._color_system(),
            highlight=False,
            emoji=False,
        )

        try:
            console.print(Markdown(markdown))
        except Exception as e:
            logger.error(f"Markdown render failed: {str(e)}")
            raise RenderError(f"markdown render: {str(e)}") from e

        return buffer.getvalue()


def render_markdown(markdown: str, width: int = RENDER_WIDTH) -> str:
    """Render markdown with the default settings"""
    return MarkdownRenderer(width=width).render(markdown)
