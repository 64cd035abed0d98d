"""
Console output sink backed by a rich Console.
"""

from typing import Optional

from rich.console import Console
from typing_extensions import override

from termcli.ports.output.output_sink_port import OutputSinkPort


class ConsoleSink(OutputSinkPort):
    """Writes command output to the terminal verbatim."""

    def __init__(self, console: Optional[Console] = None):
        # Plain text only: no markup, highlighting, emoji codes or wrapping
        self._console = console or Console(
            markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    @override
    def write(self, text: str) -> None:
        self._console.print(text, end="")
