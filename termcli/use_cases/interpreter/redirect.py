"""
Redirection wrapper capturing a command's output into a file.
"""

import logging
from typing import Optional

from termcli.adapters.output.buffer_sink import BufferSink
from termcli.entities.command import ParsedCommand, RedirectMode
from termcli.entities.session import Session
from termcli.exceptions import FileRepositoryError
from termcli.ports.files.file_system_port import FileSystemPort
from termcli.ports.output.output_sink_port import OutputSinkPort
from termcli.use_cases.interpreter.dispatcher import CommandDispatcher


class RedirectionWrapper:
    """Runs a command into an in-memory buffer, then writes the buffer to a file."""

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._dispatcher = dispatcher
        self._fs = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self,
        command: ParsedCommand,
        target: str,
        mode: RedirectMode,
        session: Session,
        sink: OutputSinkPort,
    ) -> str:
        """
        Dispatch command with its output captured, then store it in target.

        The target is resolved against the current directory once the command
        has run. Overwrite truncates the file, append writes at its end.

        Args:
            command: Parsed command to run
            target: Redirection target as typed
            mode: Overwrite or append
            session: Session the command runs in
            sink: Real output, used only to report a failed write

        Returns:
            The captured text
        """
        if not target:
            sink.write_line("Error: Missing redirection target")
            return ""

        buffer = BufferSink()
        self._dispatcher.dispatch(command, session, buffer)
        output = buffer.getvalue()
        buffer.clear()

        path = session.resolve(target)
        try:
            self._fs.write_text(path, output, append=mode is RedirectMode.APPEND)
        except FileRepositoryError as e:
            self._logger.error(f"Redirection to {path} failed: {e}")
            sink.write_line("Error writing to file")
        return output
