"""
Zip archive adapter: deflate-compressed archives through the standard zipfile module.
"""

import logging
import os
import shutil
import time
import zipfile
from typing import BinaryIO

from typing_extensions import override

from termcli.entities.archive_entry import ARCHIVE_SEPARATOR, ArchiveEntry
from termcli.exceptions import ArchiveError
from termcli.ports.archive.archive_port import ArchivePort, ArchiveReader, ArchiveWriter

DEFAULT_CHUNK_SIZE = 512
# drwxr-xr-x plus the MS-DOS directory flag
_DIRECTORY_ATTRIBUTES = (0o40755 << 16) | 0x10


class ZipArchiveWriter(ArchiveWriter):
    """Writes entries one by one into an open zip file."""

    def __init__(self, zip_file: zipfile.ZipFile, chunk_size: int, logger: logging.Logger):
        self._zip = zip_file
        self._chunk_size = chunk_size
        self._logger = logger
        self._closed = False

    @override
    def add_directory(self, name: str) -> ArchiveEntry:
        entry_name = name.rstrip(ARCHIVE_SEPARATOR) + ARCHIVE_SEPARATOR
        info = zipfile.ZipInfo(entry_name, date_time=time.localtime(time.time())[:6])
        info.external_attr = _DIRECTORY_ATTRIBUTES
        try:
            self._zip.writestr(info, b"")
        except Exception as e:
            raise ArchiveError(f"Failed to add directory entry {entry_name}: {str(e)}")
        self._logger.debug(f"Added directory entry {entry_name}")
        return ArchiveEntry(entry_name, is_dir=True)

    @override
    def add_file(self, source: str, name: str) -> ArchiveEntry:
        try:
            info = zipfile.ZipInfo.from_file(
                source, arcname=name, strict_timestamps=False
            )
            info.compress_type = zipfile.ZIP_DEFLATED
            with open(source, "rb") as src, self._zip.open(info, "w") as dst:
                shutil.copyfileobj(src, dst, self._chunk_size)
        except Exception as e:
            raise ArchiveError(f"Failed to add {source} as {name}: {str(e)}")
        self._logger.debug(f"Added file entry {name} ({info.file_size} bytes)")
        return ArchiveEntry(name, is_dir=False, size=info.file_size)

    @override
    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._zip.close()
        except Exception as e:
            raise ArchiveError(f"Failed to finalize archive: {str(e)}")


class ZipArchiveReader(ArchiveReader):
    """Reads the entries of an open zip file in stored order."""

    def __init__(self, zip_file: zipfile.ZipFile):
        self._zip = zip_file

    @override
    def entries(self) -> list[ArchiveEntry]:
        return [
            ArchiveEntry(info.filename, is_dir=info.is_dir(), size=info.file_size)
            for info in self._zip.infolist()
        ]

    @override
    def open_entry(self, entry: ArchiveEntry) -> BinaryIO:
        try:
            return self._zip.open(entry.name, "r")
        except Exception as e:
            raise ArchiveError(f"Failed to read entry {entry.name}: {str(e)}")

    @override
    def close(self) -> None:
        self._zip.close()


class ZipArchiveAdapter(ArchivePort):
    """Zip implementation of the archive port."""

    suffix = ".zip"

    def __init__(
        self,
        logger: logging.Logger | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """
        Initialize the adapter.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
            chunk_size: Number of bytes streamed per write when adding files
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._chunk_size = chunk_size

    @override
    def open_writer(self, archive_path: str) -> ArchiveWriter:
        try:
            zip_file = zipfile.ZipFile(archive_path, "w", compression=zipfile.ZIP_DEFLATED)
        except Exception as e:
            raise ArchiveError(f"Failed to create archive {archive_path}: {str(e)}")
        self._logger.info(f"Writing archive {archive_path}")
        return ZipArchiveWriter(zip_file, self._chunk_size, self._logger)

    @override
    def open_reader(self, archive_path: str) -> ArchiveReader:
        if not os.path.isfile(archive_path):
            raise ArchiveError(f"Archive does not exist: {archive_path}")
        try:
            zip_file = zipfile.ZipFile(archive_path, "r")
        except zipfile.BadZipFile as e:
            raise ArchiveError(f"Not a valid zip archive {archive_path}: {str(e)}")
        except Exception as e:
            raise ArchiveError(f"Failed to open archive {archive_path}: {str(e)}")
        self._logger.info(f"Reading archive {archive_path}")
        return ZipArchiveReader(zip_file)
