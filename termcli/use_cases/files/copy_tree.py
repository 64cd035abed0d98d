"""
Use case for copying a directory tree.
"""

import logging
import os
from typing import Optional

from termcli.exceptions import FileRepositoryError
from termcli.ports.files.file_system_port import FileSystemPort
from termcli.ports.output.output_sink_port import OutputSinkPort


class CopyTreeUseCase:
    """Replicates a directory, nested one level inside the destination."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port used for every file system access
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source: str, destination: str, sink: OutputSinkPort) -> str:
        """
        Copy source to destination/<basename of source>, recursively.

        Copying 'a' into 'b' yields 'b/a/...'. An unreadable directory is copied
        as empty. A file that fails to copy is reported on the sink and its
        siblings are still copied.

        Args:
            source: Absolute path of the directory to copy
            destination: Absolute path of the directory receiving the copy
            sink: Where per-file failures are reported

        Returns:
            Path of the directory created for the copy

        Raises:
            FileRepositoryError: If the top-level copy directory cannot be created
        """
        target = os.path.join(destination, os.path.basename(os.path.normpath(source)))
        self._logger.info(f"Copying tree {source} to {target}")
        self._copy(source, target, sink, root=target)
        return target

    def _copy(self, source: str, target: str, sink: OutputSinkPort, root: str) -> None:
        # Listed before the target exists so a copy nested inside its own
        # source never shows up among the children being copied.
        try:
            children = self._fs.list_names(source)
        except FileRepositoryError:
            children = []

        self._fs.make_dirs(target, exist_ok=True)

        for child in children:
            child_path = os.path.join(source, child)
            if self._fs.same_path(child_path, root):
                continue
            if self._fs.is_dir(child_path):
                try:
                    self._copy(child_path, os.path.join(target, child), sink, root)
                except FileRepositoryError as e:
                    self._logger.error(f"Error copying directory {child_path}: {e}")
                    sink.write_line(f"Error copying directory: {child}")
            else:
                try:
                    self._fs.copy_file(child_path, os.path.join(target, child))
                except FileRepositoryError as e:
                    self._logger.error(f"Error copying file {child_path}: {e}")
                    sink.write_line(f"Error copying file: {child}")
