"""
In-memory output sink used to capture command output.
"""

import io

from typing_extensions import override

from termcli.ports.output.output_sink_port import OutputSinkPort


class BufferSink(OutputSinkPort):
    """Accumulates everything written to it in memory."""

    def __init__(self):
        self._buffer = io.StringIO()

    @override
    def write(self, text: str) -> None:
        self._buffer.write(text)

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def clear(self) -> None:
        self._buffer = io.StringIO()
