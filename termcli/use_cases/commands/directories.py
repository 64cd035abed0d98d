"""
Directory commands: mkdir and rmdir.
"""

import os
from typing import Sequence

from typing_extensions import override

from termcli.entities.session import Session
from termcli.exceptions import CommandError, FileRepositoryError
from termcli.ports.output.output_sink_port import OutputSinkPort
from termcli.use_cases.commands.base import FileSystemCommand, require_args

ALL_EMPTY_DIRECTORIES = "*"


class MkdirCommand(FileSystemCommand):
    """Create one or more directories, including missing parents."""

    name = "mkdir"

    @override
    def execute(
        self, args: Sequence[str], session: Session, sink: OutputSinkPort
    ) -> None:
        if not args:
            raise CommandError("mkdir requires at least one directory name")
        for dir_name in args:
            try:
                self._fs.make_dirs(session.resolve(dir_name))
            except FileRepositoryError as e:
                # already exists or access denied; the other names still go ahead
                self._logger.warning(str(e))
                sink.write_line(f"Error: Failed to create directory {dir_name}")


class RmdirCommand(FileSystemCommand):
    """
    Remove an empty directory.

    'rmdir *' removes every empty immediate subdirectory of the current directory.
    """

    name = "rmdir"

    @override
    def execute(
        self, args: Sequence[str], session: Session, sink: OutputSinkPort
    ) -> None:
        require_args(args, 1, "rmdir requires exactly one argument")
        if args[0] == ALL_EMPTY_DIRECTORIES:
            self._remove_all_empty(session, sink)
            return

        target = session.resolve(args[0])
        if not self._fs.exists(target):
            raise CommandError("Directory does not exist")
        if not self._fs.is_dir(target):
            raise CommandError("Not a directory")
        try:
            if self._fs.list_names(target):
                raise CommandError("Directory is not empty")
            self._fs.remove_dir(target)
        except FileRepositoryError as e:
            self._logger.error(str(e))
            raise CommandError("Failed to remove directory")

    def _remove_all_empty(self, session: Session, sink: OutputSinkPort) -> None:
        try:
            names = self._fs.list_names(session.current_directory)
        except FileRepositoryError:
            raise CommandError("Cannot read current directory")

        removed = 0
        for name in names:
            path = os.path.join(session.current_directory, name)
            if not self._fs.is_dir(path):
                continue
            try:
                if self._fs.list_names(path):
                    continue
                self._fs.remove_dir(path)
                removed += 1
            except FileRepositoryError as e:
                self._logger.warning(str(e))
                sink.write_line(f"Error: Failed to remove directory {name}")
        self._logger.info(f"Removed {removed} empty directories from {session.current_directory}")
