"""
Navigation commands: pwd, cd and ls.
"""

from typing import Sequence

from typing_extensions import override

from termcli.entities.session import Session
from termcli.exceptions import CommandError, FileRepositoryError
from termcli.ports.commands.command_handler_port import CommandHandlerPort
from termcli.ports.output.output_sink_port import OutputSinkPort
from termcli.use_cases.commands.base import FileSystemCommand, require_args


class PwdCommand(CommandHandlerPort):
    """Print the current directory."""

    name = "pwd"

    @override
    def execute(
        self, args: Sequence[str], session: Session, sink: OutputSinkPort
    ) -> None:
        require_args(args, 0, "pwd takes no arguments")
        sink.write_line(session.current_directory)


class CdCommand(FileSystemCommand):
    """
    Change the current directory.

    'cd' goes to the home directory, 'cd ..' to the parent, anything else is
    resolved, checked and canonicalized before being adopted.
    """

    name = "cd"

    @override
    def execute(
        self, args: Sequence[str], session: Session, sink: OutputSinkPort
    ) -> None:
        if len(args) > 1:
            raise CommandError("cd takes at most one directory")

        if not args:
            session.change_directory(session.home_directory)
            return

        if args[0] == "..":
            parent = session.parent_directory()
            if parent is None:
                raise CommandError("Already at root directory")
            session.change_directory(parent)
            return

        target = session.resolve(args[0])
        if not self._fs.is_dir(target):
            raise CommandError("Directory does not exist")
        try:
            canonical = self._fs.canonicalize(target)
        except FileRepositoryError as e:
            self._logger.error(f"Cannot canonicalize {target}: {e}")
            raise CommandError("Cannot change to directory")
        self._logger.info(f"Changing directory to {canonical}")
        session.change_directory(canonical)


class LsCommand(FileSystemCommand):
    """List the current directory, sorted by name."""

    name = "ls"

    @override
    def execute(
        self, args: Sequence[str], session: Session, sink: OutputSinkPort
    ) -> None:
        require_args(args, 0, "ls takes no arguments")
        try:
            names = self._fs.list_names(session.current_directory)
        except FileRepositoryError:
            raise CommandError("Cannot read directory")
        for name in names:
            sink.write_line(name)
