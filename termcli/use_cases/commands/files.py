"""
File commands: touch, rm, cp, cp -r, cat, wc and echo.
"""

import logging
import os
from typing import Optional, Sequence

from typing_extensions import override

from termcli.entities.session import Session
from termcli.exceptions import CommandError, FileRepositoryError
from termcli.ports.commands.command_handler_port import CommandHandlerPort
from termcli.ports.files.file_system_port import FileSystemPort
from termcli.ports.output.output_sink_port import OutputSinkPort
from termcli.use_cases.commands.base import FileSystemCommand, require_args
from termcli.use_cases.files.copy_tree import CopyTreeUseCase


class TouchCommand(FileSystemCommand):
    """Create an empty file unless something already exists at the path."""

    name = "touch"

    @override
    def execute(
        self, args: Sequence[str], session: Session, sink: OutputSinkPort
    ) -> None:
        require_args(args, 1, "touch requires exactly one filename")
        try:
            self._fs.create_file(session.resolve(args[0]))
        except FileRepositoryError as e:
            self._logger.error(str(e))
            raise CommandError("Cannot create file")


class RmCommand(FileSystemCommand):
    """Delete a file. Directories are refused, rmdir handles those."""

    name = "rm"

    @override
    def execute(
        self, args: Sequence[str], session: Session, sink: OutputSinkPort
    ) -> None:
        require_args(args, 1, "rm requires exactly one filename")
        target = session.resolve(args[0])
        if not self._fs.exists(target):
            raise CommandError("File does not exist")
        if self._fs.is_dir(target):
            raise CommandError("Cannot remove directory with rm, use rmdir")
        try:
            self._fs.delete_file(target)
        except FileRepositoryError as e:
            self._logger.error(str(e))
            raise CommandError("Failed to delete file")


class CpCommand(FileSystemCommand):
    """Copy one file over another, overwriting the destination."""

    name = "cp"

    @override
    def execute(
        self, args: Sequence[str], session: Session, sink: OutputSinkPort
    ) -> None:
        require_args(args, 2, "cp requires source and destination files")
        source = session.resolve(args[0])
        destination = session.resolve(args[1])
        if not self._fs.exists(source) or self._fs.is_dir(source):
            raise CommandError("Source file does not exist or is a directory")
        try:
            self._fs.copy_file(source, destination)
        except FileRepositoryError as e:
            self._logger.error(str(e))
            raise CommandError("Cannot copy file")


class CopyTreeCommand(CommandHandlerPort):
    """Copy a directory recursively, as 'cp -r source destination'."""

    name = "cp -r"

    def __init__(
        self,
        file_system: FileSystemPort,
        copy_tree: CopyTreeUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        self._fs = file_system
        self._copy_tree = copy_tree
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(
        self, args: Sequence[str], session: Session, sink: OutputSinkPort
    ) -> None:
        require_args(args, 2, "cp -r requires source and destination directories")
        source = session.resolve(args[0])
        destination = session.resolve(args[1])
        if not self._fs.is_dir(source):
            raise CommandError("Source directory does not exist")
        try:
            self._fs.make_dirs(destination, exist_ok=True)
            self._copy_tree.execute(source, destination, sink)
        except FileRepositoryError as e:
            self._logger.error(str(e))
            raise CommandError("Cannot copy directory")


class CatCommand(FileSystemCommand):
    """Print one or two files, line by line. A bad file is reported and skipped."""

    name = "cat"

    @override
    def execute(
        self, args: Sequence[str], session: Session, sink: OutputSinkPort
    ) -> None:
        if not 1 <= len(args) <= 2:
            raise CommandError("cat requires one or two filenames")
        for file_name in args:
            path = session.resolve(file_name)
            if not self._fs.exists(path) or self._fs.is_dir(path):
                sink.write_line(f"Error: File {file_name} does not exist")
                continue
            try:
                for line in self._fs.read_lines(path):
                    sink.write_line(line)
            except FileRepositoryError as e:
                self._logger.error(str(e))
                sink.write_line(f"Error: Cannot read file {file_name}")


class WcCommand(FileSystemCommand):
    """Print 'lines words characters filename' for a file."""

    name = "wc"

    @override
    def execute(
        self, args: Sequence[str], session: Session, sink: OutputSinkPort
    ) -> None:
        require_args(args, 1, "wc requires exactly one filename")
        path = session.resolve(args[0])
        if not self._fs.exists(path) or self._fs.is_dir(path):
            raise CommandError("File does not exist")

        lines = words = chars = 0
        try:
            for line in self._fs.read_lines(path):
                lines += 1
                words += len(line.split())
                chars += len(line)
        except FileRepositoryError as e:
            self._logger.error(str(e))
            raise CommandError("Cannot read file")
        sink.write_line(f"{lines} {words} {chars} {os.path.basename(path)}")


class EchoCommand(CommandHandlerPort):
    """Print the arguments joined by single spaces."""

    name = "echo"

    @override
    def execute(
        self, args: Sequence[str], session: Session, sink: OutputSinkPort
    ) -> None:
        sink.write_line(" ".join(args))
