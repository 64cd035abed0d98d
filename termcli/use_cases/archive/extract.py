"""
Use case for extracting an archive into a directory.
"""

import logging
import os
from typing import Optional

from termcli.entities.archive_entry import ArchiveEntry
from termcli.exceptions import ArchiveError, FileRepositoryError
from termcli.ports.archive.archive_port import ArchivePort, ArchiveReader
from termcli.ports.files.file_system_port import FileSystemPort
from termcli.ports.output.output_sink_port import OutputSinkPort
from termcli.utils.paths import join_archive_name


class ExtractUseCase:
    """Use case for reproducing the entries of an archive under a destination directory."""

    def __init__(
        self,
        archive: ArchivePort,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            archive: Archive container implementation
            file_system: Port used to create directories and files
            logger: Logger instance to use for logging
        """
        self._archive = archive
        self._fs = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self, archive_path: str, destination: str, sink: OutputSinkPort
    ) -> list[ArchiveEntry]:
        """
        Extract every entry, in stored order, under destination.

        Entry names use forward slashes and are translated to host paths.
        Entries that would land outside destination are skipped. A failing
        entry is reported and the following ones are still extracted.

        Args:
            archive_path: Absolute path of the archive to read
            destination: Existing directory receiving the entries
            sink: Where warnings and per-entry failures are reported

        Returns:
            Entries that were extracted

        Raises:
            ArchiveError: If the archive cannot be opened
        """
        extracted: list[ArchiveEntry] = []
        with self._archive.open_reader(archive_path) as reader:
            for entry in reader.entries():
                target = join_archive_name(destination, entry.parts())
                if target is None or entry.name.startswith("/"):
                    sink.write_line(f"Warning: Skipping unsafe entry {entry.name}")
                    continue
                try:
                    self._extract_entry(reader, entry, target)
                    extracted.append(entry)
                except (ArchiveError, FileRepositoryError) as e:
                    self._logger.error(f"Error extracting {entry.name}: {e}")
                    sink.write_line(f"Error: Cannot extract {entry.name}")

        self._logger.info(
            f"Extracted {len(extracted)} entries from {archive_path} to {destination}"
        )
        return extracted

    def _extract_entry(
        self, reader: ArchiveReader, entry: ArchiveEntry, target: str
    ) -> None:
        if entry.is_dir:
            self._fs.make_dirs(target, exist_ok=True)
            return
        self._fs.make_dirs(os.path.dirname(target), exist_ok=True)
        with reader.open_entry(entry) as src:
            self._fs.write_stream(target, src)
