"""
Tests for zip and unzip as typed at the prompt.
"""

import os
import zipfile


def _names(archive_path):
    with zipfile.ZipFile(archive_path) as zf:
        return zf.namelist()


class TestZip:
    def test_appends_suffix(self, run, temp_directory):
        assert run("zip bundle test1.txt test2.py") == ""

        assert _names(os.path.join(temp_directory, "bundle.zip")) == ["test1.txt", "test2.py"]

    def test_keeps_existing_suffix(self, run, temp_directory):
        assert run("zip bundle.zip test1.txt") == ""
        assert os.path.isfile(os.path.join(temp_directory, "bundle.zip"))
        assert not os.path.exists(os.path.join(temp_directory, "bundle.zip.zip"))

    def test_missing_item_warns_and_continues(self, run, temp_directory):
        output = run("zip bundle ghost.txt test1.txt")

        assert output == "Warning: ghost.txt does not exist, skipping\n"
        assert _names(os.path.join(temp_directory, "bundle.zip")) == ["test1.txt"]

    def test_directory_needs_recursive_flag(self, run, temp_directory):
        assert run("zip flat subdir test1.txt") == ""
        assert _names(os.path.join(temp_directory, "flat.zip")) == ["test1.txt"]

    def test_recursive_directory(self, run, temp_directory):
        assert run("zip -r tree subdir") == ""
        assert _names(os.path.join(temp_directory, "tree.zip")) == [
            "subdir/",
            "subdir/test3.md",
        ]

    def test_argument_count(self, run):
        message = "Error: zip requires archive name and at least one file\n"
        assert run("zip") == message
        assert run("zip bundle") == message
        assert run("zip -r bundle") == message


class TestUnzip:
    def test_into_current_directory(self, run, temp_directory):
        run("zip -r tree subdir")
        os.makedirs(os.path.join(temp_directory, "fresh"))
        run(f"cd {temp_directory}/fresh")

        assert run(f"unzip {temp_directory}/tree.zip") == ""
        extracted = os.path.join(temp_directory, "fresh", "subdir", "test3.md")
        with open(extracted) as f:
            assert f.read() == "# Test Markdown\n\nThis is a test."

    def test_into_destination(self, run, temp_directory):
        run("zip bundle test1.txt")

        assert run("unzip bundle.zip -d out/inner") == ""
        with open(os.path.join(temp_directory, "out", "inner", "test1.txt")) as f:
            assert f.read() == "This is a test file."

    def test_empty_directory_round_trip(self, run, temp_directory):
        os.makedirs(os.path.join(temp_directory, "hollow", "deeper"))
        run("zip -r hollow_archive hollow")

        assert run("unzip hollow_archive.zip -d restored") == ""
        assert os.path.isdir(os.path.join(temp_directory, "restored", "hollow", "deeper"))

    def test_missing_archive(self, run):
        assert run("unzip ghost.zip") == "Error: Zip file does not exist\n"

    def test_not_an_archive(self, run):
        assert run("unzip test1.txt") == "Error: Cannot extract zip file\n"

    def test_argument_validation(self, run):
        assert run("unzip") == "Error: unzip requires zip file name\n"
        assert run("unzip a.zip -d") == "Error: unzip -d requires a destination directory\n"
        assert run("unzip a.zip out") == "Error: usage: unzip <archive> [-d <destination>]\n"
