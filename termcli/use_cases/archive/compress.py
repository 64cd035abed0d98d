"""
Use case for compressing files and directories into an archive.
"""

import logging
import os
from typing import Optional, Sequence

from termcli.entities.archive_entry import ArchiveEntry
from termcli.exceptions import ArchiveError, FileRepositoryError
from termcli.ports.archive.archive_port import ArchivePort, ArchiveWriter
from termcli.ports.files.file_system_port import FileSystemPort
from termcli.ports.output.output_sink_port import OutputSinkPort


class CompressUseCase:
    """Use case for writing files, and with recursion whole directories, into an archive."""

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
            file_system: Port used to inspect and enumerate the items
            logger: Logger instance to use for logging
        """
        self._archive = archive
        self._fs = file_system
        self._logger = logger or logging.getLogger(__name__)

    def archive_path_for(self, path: str) -> str:
        """Append the container suffix when the archive name lacks it."""
        suffix = self._archive.suffix
        if suffix and not path.endswith(suffix):
            return path + suffix
        return path

    def execute(
        self,
        archive_path: str,
        items: Sequence[tuple[str, str]],
        recursive: bool,
        sink: OutputSinkPort,
    ) -> list[ArchiveEntry]:
        """
        Write the requested items into a new archive.

        Missing items are reported and skipped. Directories are only added in
        recursive mode, under '<base name>/<relative path>'. The archive is
        closed even when some items fail.

        Args:
            archive_path: Absolute path of the archive to create
            items: (text as typed, absolute path) for each requested item
            recursive: Whether directories are descended into
            sink: Where warnings and per-item failures are reported

        Returns:
            Entries written to the archive, in order

        Raises:
            ArchiveError: If the archive cannot be created
        """
        added: list[ArchiveEntry] = []
        with self._archive.open_writer(archive_path) as writer:
            for label, path in items:
                if not self._fs.exists(path):
                    sink.write_line(f"Warning: {label} does not exist, skipping")
                    continue
                try:
                    if self._fs.is_dir(path):
                        if recursive:
                            name = os.path.basename(os.path.normpath(path))
                            self._add_directory(
                                writer, path, name, label, archive_path, added, sink
                            )
                    elif self._fs.is_file(path):
                        if self._fs.same_path(path, archive_path):
                            continue
                        added.append(writer.add_file(path, os.path.basename(path)))
                except (ArchiveError, FileRepositoryError) as e:
                    self._logger.error(f"Error adding {path} to {archive_path}: {e}")
                    sink.write_line(f"Error: Cannot add {label} to zip file")

        self._logger.info(f"Wrote {len(added)} entries to {archive_path}")
        return added

    def _add_directory(
        self,
        writer: ArchiveWriter,
        directory: str,
        name: str,
        label: str,
        archive_path: str,
        added: list[ArchiveEntry],
        sink: OutputSinkPort,
    ) -> None:
        added.append(writer.add_directory(name))
        try:
            children = self._fs.list_names(directory)
        except FileRepositoryError:
            return
        for child in children:
            child_path = os.path.join(directory, child)
            child_name = ArchiveEntry.join(name, child)
            child_label = ArchiveEntry.join(label, child)
            try:
                if self._fs.is_dir(child_path):
                    self._add_directory(
                        writer, child_path, child_name, child_label, archive_path, added, sink
                    )
                elif not self._fs.same_path(child_path, archive_path):
                    added.append(writer.add_file(child_path, child_name))
            except (ArchiveError, FileRepositoryError) as e:
                self._logger.error(f"Error adding {child_path} to {archive_path}: {e}")
                sink.write_line(f"Error: Cannot add {child_label} to zip file")
