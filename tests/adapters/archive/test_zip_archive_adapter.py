"""
Tests for the ZipArchiveAdapter.
"""

import os
import zipfile

import pytest

from termcli.adapters.archive.zip_archive_adapter import ZipArchiveAdapter
from termcli.exceptions import ArchiveError


class TestZipArchiveAdapter:
    """Test cases for the ZipArchiveAdapter."""

    def test_writer_stores_directory_and_file_entries(self, temp_directory, mock_logger):
        adapter = ZipArchiveAdapter(mock_logger, chunk_size=4)
        archive_path = os.path.join(temp_directory, "out.zip")

        with adapter.open_writer(archive_path) as writer:
            writer.add_directory("subdir")
            entry = writer.add_file(
                os.path.join(temp_directory, "subdir", "test3.md"), "subdir/test3.md"
            )

        assert entry.size == len("# Test Markdown\n\nThis is a test.")
        with zipfile.ZipFile(archive_path) as zf:
            infos = zf.infolist()
            assert [i.filename for i in infos] == ["subdir/", "subdir/test3.md"]
            assert infos[0].is_dir()
            assert infos[1].compress_type == zipfile.ZIP_DEFLATED
            assert zf.read("subdir/test3.md") == b"# Test Markdown\n\nThis is a test."

    def test_reader_lists_entries_in_stored_order(self, temp_directory, mock_logger):
        archive_path = os.path.join(temp_directory, "in.zip")
        with zipfile.ZipFile(archive_path, "w") as zf:
            zf.writestr("b.txt", "bee")
            zf.writestr("a/", "")
            zf.writestr("a/c.txt", "sea")

        adapter = ZipArchiveAdapter(mock_logger)
        with adapter.open_reader(archive_path) as reader:
            entries = reader.entries()
            assert [(e.name, e.is_dir) for e in entries] == [
                ("b.txt", False),
                ("a/", True),
                ("a/c.txt", False),
            ]
            with reader.open_entry(entries[2]) as stream:
                assert stream.read() == b"sea"

    def test_add_missing_file(self, temp_directory, mock_logger):
        adapter = ZipArchiveAdapter(mock_logger)

        with adapter.open_writer(os.path.join(temp_directory, "out.zip")) as writer:
            with pytest.raises(ArchiveError, match="Failed to add"):
                writer.add_file(os.path.join(temp_directory, "missing.txt"), "missing.txt")

    def test_open_writer_in_missing_directory(self, temp_directory, mock_logger):
        adapter = ZipArchiveAdapter(mock_logger)

        with pytest.raises(ArchiveError, match="Failed to create archive"):
            adapter.open_writer(os.path.join(temp_directory, "missing", "out.zip"))

    def test_open_reader_missing(self, temp_directory, mock_logger):
        adapter = ZipArchiveAdapter(mock_logger)

        with pytest.raises(ArchiveError, match="does not exist"):
            adapter.open_reader(os.path.join(temp_directory, "missing.zip"))

    def test_open_reader_not_a_zip(self, temp_directory, mock_logger):
        adapter = ZipArchiveAdapter(mock_logger)

        with pytest.raises(ArchiveError, match="Not a valid zip archive"):
            adapter.open_reader(os.path.join(temp_directory, "test1.txt"))

    def test_close_twice(self, temp_directory, mock_logger):
        adapter = ZipArchiveAdapter(mock_logger)
        writer = adapter.open_writer(os.path.join(temp_directory, "out.zip"))

        writer.close()
        writer.close()
