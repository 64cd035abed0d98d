"""
Dispatcher routing a parsed command to its handler.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from termcli.entities.command import ParsedCommand
from termcli.entities.session import Session
from termcli.exceptions import BaseAppError
from termcli.ports.commands.command_handler_port import CommandHandlerPort
from termcli.ports.output.output_sink_port import OutputSinkPort

RECURSIVE_COPY = "cp -r"


class CommandDispatcher:
    """Maps command names to handlers and surfaces their errors on the sink."""

    def __init__(
        self,
        handlers: Iterable[CommandHandlerPort],
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Args:
            handlers: Command handlers, registered under their 'name'
            logger: Optional logger
        """
        self._handlers: dict[str, CommandHandlerPort] = {h.name: h for h in handlers}
        self._logger = logger or logging.getLogger(__name__)

    def route(self, command: ParsedCommand) -> tuple[Optional[CommandHandlerPort], tuple[str, ...]]:
        """
        Select the handler for a command and the arguments it receives.

        'cp' with a leading '-r' goes to the recursive copy handler without the flag.
        """
        name, args = command.name, command.args
        if name == "cp" and args and args[0] == "-r":
            name, args = RECURSIVE_COPY, args[1:]
        return self._handlers.get(name), args

    def dispatch(
        self, command: ParsedCommand, session: Session, sink: OutputSinkPort
    ) -> None:
        """
        Run a command against a session.

        Errors raised by the handler are written as 'Error: <message>' and never
        propagate; unknown names print 'Command not found: <name>'.
        """
        handler, args = self.route(command)
        if handler is None:
            self._logger.info(f"Unknown command: {command.name}")
            sink.write_line(f"Command not found: {command.name}")
            return

        self._logger.debug(f"Dispatching {handler.name} with {len(args)} argument(s)")
        try:
            handler.execute(args, session, sink)
        except BaseAppError as e:
            self._logger.info(f"{handler.name} failed: {e}")
            sink.write_line(f"Error: {e}")
