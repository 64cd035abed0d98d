"""
Shared base for command handlers that work on the file system.
"""

import logging
from typing import Optional, Sequence

from termcli.exceptions import CommandError
from termcli.ports.commands.command_handler_port import CommandHandlerPort
from termcli.ports.files.file_system_port import FileSystemPort


class FileSystemCommand(CommandHandlerPort):
    """Command handler with an injected file system port and logger."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the command handler.

        Args:
            file_system: Port used for every file system access
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._logger = logger or logging.getLogger(__name__)


def require_args(args: Sequence[str], count: int, message: str) -> None:
    """Raise CommandError with message unless exactly count arguments were given."""
    if len(args) != count:
        raise CommandError(message)
