"""
Command handler port interface: one implementation per interpreter command.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from termcli.entities.session import Session
from termcli.ports.output.output_sink_port import OutputSinkPort


class CommandHandlerPort(ABC):
    """Port interface for a single interpreter command."""

    name: str = ""

    @abstractmethod
    def execute(
        self, args: Sequence[str], session: Session, sink: OutputSinkPort
    ) -> None:
        """
        Run the command.

        Args:
            args: Argument tokens, command name excluded
            session: Session whose current directory resolves relative paths
            sink: Destination of everything the command prints

        Raises:
            CommandError: If the arguments are invalid or the target does not qualify
        """
        pass
