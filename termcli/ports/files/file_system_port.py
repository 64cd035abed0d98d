"""
File system port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Iterator


class FileSystemPort(ABC):
    """Port interface for host file system operations on absolute paths."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if something exists at path."""
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Return True if path is an existing directory."""
        pass

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """Return True if path is an existing regular file."""
        pass

    @abstractmethod
    def list_names(self, directory: str) -> list[str]:
        """
        List the entry names of a directory, sorted ascending.

        Args:
            directory: Path to the directory to list

        Returns:
            Sorted list of entry names (not paths)

        Raises:
            FileRepositoryError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def make_dirs(self, path: str, exist_ok: bool = False) -> None:
        """
        Create a directory together with any missing parents.

        Args:
            path: Directory path to create
            exist_ok: If True, do not raise if the directory already exists

        Raises:
            FileRepositoryError: If creation fails
        """
        pass

    @abstractmethod
    def remove_dir(self, path: str) -> None:
        """
        Remove an empty directory.

        Raises:
            FileRepositoryError: If removal fails
        """
        pass

    @abstractmethod
    def create_file(self, path: str) -> bool:
        """
        Create an empty file if nothing exists at path.

        Returns:
            True if the file was created, False if the path already existed

        Raises:
            FileRepositoryError: If creation fails
        """
        pass

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """
        Delete a file.

        Raises:
            FileRepositoryError: If deletion fails
        """
        pass

    @abstractmethod
    def copy_file(self, source: str, destination: str) -> None:
        """
        Stream the bytes of source into destination, overwriting it.

        Raises:
            FileRepositoryError: If either stream fails
        """
        pass

    @abstractmethod
    def read_lines(self, path: str) -> Iterator[str]:
        """
        Yield the lines of a text file without their terminators.

        Raises:
            FileRepositoryError: If the file cannot be opened or read
        """
        pass

    @abstractmethod
    def write_text(self, path: str, content: str, append: bool = False) -> None:
        """
        Write text to a file, truncating it first unless append is True.

        Raises:
            FileRepositoryError: If the file cannot be written
        """
        pass

    @abstractmethod
    def write_stream(self, path: str, source: BinaryIO) -> None:
        """
        Stream bytes from an open binary source into a new file at path.

        Raises:
            FileRepositoryError: If reading the source or writing the file fails
        """
        pass

    @abstractmethod
    def canonicalize(self, path: str) -> str:
        """
        Resolve '.', '..' and symbolic links of an existing path.

        Raises:
            FileRepositoryError: If the path cannot be resolved
        """
        pass

    @abstractmethod
    def same_path(self, first: str, second: str) -> bool:
        """Return True if both paths designate the same location."""
        pass
