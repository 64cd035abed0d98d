"""
Archive commands: zip and unzip.
"""

import logging
from typing import Optional, Sequence

from typing_extensions import override

from termcli.entities.session import Session
from termcli.exceptions import ArchiveError, CommandError, FileRepositoryError
from termcli.ports.commands.command_handler_port import CommandHandlerPort
from termcli.ports.files.file_system_port import FileSystemPort
from termcli.ports.output.output_sink_port import OutputSinkPort
from termcli.use_cases.archive.compress import CompressUseCase
from termcli.use_cases.archive.extract import ExtractUseCase

RECURSIVE_FLAG = "-r"
DESTINATION_FLAG = "-d"


class ZipCommand(CommandHandlerPort):
    """
    Compress files into an archive: 'zip [-r] archive item...'.

    Without -r, directories among the items are skipped.
    """

    name = "zip"

    def __init__(
        self,
        compress: CompressUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        self._compress = compress
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(
        self, args: Sequence[str], session: Session, sink: OutputSinkPort
    ) -> None:
        recursive = bool(args) and args[0] == RECURSIVE_FLAG
        rest = list(args[1:] if recursive else args)
        if len(rest) < 2:
            raise CommandError("zip requires archive name and at least one file")

        archive_path = self._compress.archive_path_for(session.resolve(rest[0]))
        items = [(item, session.resolve(item)) for item in rest[1:]]
        try:
            entries = self._compress.execute(archive_path, items, recursive, sink)
        except ArchiveError as e:
            self._logger.error(str(e))
            raise CommandError("Cannot create zip file")
        self._logger.info(f"zip wrote {len(entries)} entries to {archive_path}")


class UnzipCommand(CommandHandlerPort):
    """Extract an archive: 'unzip archive [-d destination]'."""

    name = "unzip"

    def __init__(
        self,
        file_system: FileSystemPort,
        extract: ExtractUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        self._fs = file_system
        self._extract = extract
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(
        self, args: Sequence[str], session: Session, sink: OutputSinkPort
    ) -> None:
        if not args:
            raise CommandError("unzip requires zip file name")
        if len(args) > 1:
            if args[1] != DESTINATION_FLAG or len(args) > 3:
                raise CommandError("usage: unzip <archive> [-d <destination>]")
            if len(args) == 2:
                raise CommandError("unzip -d requires a destination directory")

        archive_path = session.resolve(args[0])
        if not self._fs.is_file(archive_path):
            raise CommandError("Zip file does not exist")

        destination = session.current_directory
        if len(args) == 3:
            destination = session.resolve(args[2])
            try:
                self._fs.make_dirs(destination, exist_ok=True)
            except FileRepositoryError as e:
                self._logger.error(str(e))
                raise CommandError("Cannot create destination directory")

        try:
            self._extract.execute(archive_path, destination, sink)
        except ArchiveError as e:
            self._logger.error(str(e))
            raise CommandError("Cannot extract zip file")
