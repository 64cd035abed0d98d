"""
Session commands: exit.
"""

from typing import Sequence

from typing_extensions import override

from termcli.entities.session import Session
from termcli.ports.commands.command_handler_port import CommandHandlerPort
from termcli.ports.output.output_sink_port import OutputSinkPort

EXIT_MESSAGE = "Exiting CLI..."


class ExitCommand(CommandHandlerPort):
    """Print a closing message and end the session."""

    name = "exit"

    @override
    def execute(
        self, args: Sequence[str], session: Session, sink: OutputSinkPort
    ) -> None:
        sink.write_line(EXIT_MESSAGE)
        session.close()
