from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.text import Text


class ConsoleLineSink:
    """
    LineSink backed by a rich Console.

    Lines are wrapped in Text so bracketed content such as "[1, 100]" is
    never interpreted as markup.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console if console is not None else Console(highlight=False)

    def write_line(self, text: str, *, style: Optional[str] = None) -> None:
        self._console.print(Text(text, style=style or ""), soft_wrap=True)
