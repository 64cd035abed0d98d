"""
Archive port interfaces defining the contract for writing and reading archives.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO

from termcli.entities.archive_entry import ArchiveEntry


class ArchiveWriter(ABC):
    """An archive opened for writing. Must be closed once all entries are added."""

    @abstractmethod
    def add_directory(self, name: str) -> ArchiveEntry:
        """
        Store an explicit directory entry.

        Args:
            name: Archive-internal name using forward slashes

        Raises:
            ArchiveError: If the entry cannot be written
        """
        pass

    @abstractmethod
    def add_file(self, source: str, name: str) -> ArchiveEntry:
        """
        Stream a file from disk into the archive.

        Args:
            source: Absolute path of the file to add
            name: Archive-internal name using forward slashes

        Raises:
            ArchiveError: If the file cannot be read or the entry cannot be written
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Finalize the archive."""
        pass

    def __enter__(self) -> "ArchiveWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class ArchiveReader(ABC):
    """An archive opened for reading."""

    @abstractmethod
    def entries(self) -> list[ArchiveEntry]:
        """Return the entries in stored order."""
        pass

    @abstractmethod
    def open_entry(self, entry: ArchiveEntry) -> BinaryIO:
        """
        Open the byte content of a file entry.

        Raises:
            ArchiveError: If the entry cannot be read
        """
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    def __enter__(self) -> "ArchiveReader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class ArchivePort(ABC):
    """Port interface for archive containers."""

    #: Conventional file name suffix of the container format
    suffix: str = ""

    @abstractmethod
    def open_writer(self, archive_path: str) -> ArchiveWriter:
        """
        Create (or truncate) an archive for writing.

        Raises:
            ArchiveError: If the archive cannot be created
        """
        pass

    @abstractmethod
    def open_reader(self, archive_path: str) -> ArchiveReader:
        """
        Open an existing archive for reading.

        Raises:
            ArchiveError: If the archive cannot be opened or is corrupt
        """
        pass
