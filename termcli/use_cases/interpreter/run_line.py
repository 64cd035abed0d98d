"""
Use case running one input line of an interpreter session.
"""

import logging
from typing import Optional

from termcli.entities.command import CommandLine, ParsedCommand
from termcli.entities.session import Session
from termcli.ports.output.output_sink_port import OutputSinkPort
from termcli.use_cases.interpreter.dispatcher import CommandDispatcher
from termcli.use_cases.interpreter.redirect import RedirectionWrapper

NOT_RECOGNIZED = "Error: Command not recognized."


class RunLineUseCase:
    """Use case for interpreting one line: redirection split, tokenizing, dispatch."""

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        redirection: RedirectionWrapper,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            dispatcher: Routes parsed commands to their handlers
            redirection: Captures output for '>' and '>>'
            logger: Logger instance to use for logging
        """
        self._dispatcher = dispatcher
        self._redirection = redirection
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, line: str, session: Session, sink: OutputSinkPort) -> bool:
        """
        Run a single line against a session.

        Args:
            line: Raw input line
            session: Session providing and receiving the current directory
            sink: Console or buffer receiving the output

        Returns:
            True while the session stays active, False once 'exit' ran
        """
        command_line = CommandLine.split(line)
        command = ParsedCommand.parse(command_line.command_text)
        if command is None:
            self._logger.debug(f"Unparseable line: {line!r}")
            sink.write_line(NOT_RECOGNIZED)
            return session.active

        if command_line.is_redirected:
            self._redirection.execute(
                command,
                command_line.target or "",
                command_line.mode,
                session,
                sink,
            )
        else:
            self._dispatcher.dispatch(command, session, sink)
        return session.active
