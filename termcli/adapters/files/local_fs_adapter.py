"""
Local file system adapter implementation for file operations.
"""

import logging
import os
import shutil
from typing import BinaryIO, Iterator

from typing_extensions import override

from termcli.exceptions import FileRepositoryError
from termcli.ports.files.file_system_port import FileSystemPort

DEFAULT_CHUNK_SIZE = 512


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """
        Initialize the adapter.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
            chunk_size: Number of bytes moved per read/write when copying files
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._chunk_size = chunk_size

    @override
    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    @override
    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    @override
    def list_names(self, directory: str) -> list[str]:
        """
        List the entry names of a directory, sorted ascending.

        Raises:
            FileRepositoryError: If the directory cannot be read
        """
        try:
            return sorted(os.listdir(directory))
        except Exception as e:
            self._logger.warning(f"Could not list {directory}: {e}")
            raise FileRepositoryError(f"Failed to list {directory}: {str(e)}")

    @override
    def make_dirs(self, path: str, exist_ok: bool = False) -> None:
        try:
            os.makedirs(path, exist_ok=exist_ok)
            self._logger.debug(f"Created directory {path}")
        except Exception as e:
            raise FileRepositoryError(f"Failed to create directory {path}: {str(e)}")

    @override
    def remove_dir(self, path: str) -> None:
        try:
            os.rmdir(path)
            self._logger.debug(f"Removed directory {path}")
        except Exception as e:
            raise FileRepositoryError(f"Failed to remove directory {path}: {str(e)}")

    @override
    def create_file(self, path: str) -> bool:
        if os.path.lexists(path):
            return False
        try:
            with open(path, "xb"):
                pass
        except FileExistsError:
            return False
        except Exception as e:
            raise FileRepositoryError(f"Failed to create file {path}: {str(e)}")
        self._logger.debug(f"Created file {path}")
        return True

    @override
    def delete_file(self, path: str) -> None:
        try:
            os.remove(path)
            self._logger.debug(f"Deleted file {path}")
        except Exception as e:
            raise FileRepositoryError(f"Failed to delete file {path}: {str(e)}")

    @override
    def copy_file(self, source: str, destination: str) -> None:
        """
        Stream the bytes of source into destination in fixed-size chunks.

        Raises:
            FileRepositoryError: If either stream fails
        """
        try:
            with open(source, "rb") as src, open(destination, "wb") as dst:
                shutil.copyfileobj(src, dst, self._chunk_size)
            self._logger.debug(f"Copied {source} -> {destination}")
        except Exception as e:
            raise FileRepositoryError(
                f"Failed to copy {source} to {destination}: {str(e)}"
            )

    @override
    def read_lines(self, path: str) -> Iterator[str]:
        """
        Yield the lines of a text file without their terminators.

        Universal newlines are used, so '\\n', '\\r\\n' and '\\r' all end a line.

        Raises:
            FileRepositoryError: If the file cannot be opened or read
        """
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                for line in f:
                    yield line.rstrip("\n")
        except Exception as e:
            raise FileRepositoryError(f"Failed to read {path}: {str(e)}")

    @override
    def write_text(self, path: str, content: str, append: bool = False) -> None:
        mode = "a" if append else "w"
        try:
            with open(path, mode, encoding="utf-8") as f:
                f.write(content)
            self._logger.debug(f"Wrote {len(content)} characters to {path} (mode={mode})")
        except Exception as e:
            raise FileRepositoryError(f"Failed to write {path}: {str(e)}")

    @override
    def write_stream(self, path: str, source: BinaryIO) -> None:
        try:
            with open(path, "wb") as dst:
                shutil.copyfileobj(source, dst, self._chunk_size)
        except Exception as e:
            raise FileRepositoryError(f"Failed to write {path}: {str(e)}")

    @override
    def canonicalize(self, path: str) -> str:
        try:
            return os.path.realpath(path, strict=True)
        except Exception as e:
            raise FileRepositoryError(f"Cannot canonicalize {path}: {str(e)}")

    @override
    def same_path(self, first: str, second: str) -> bool:
        return os.path.realpath(first) == os.path.realpath(second)
