"""
Tests for pwd, cd and ls.
"""

import os
from unittest.mock import MagicMock

import pytest

from termcli.adapters.output.buffer_sink import BufferSink
from termcli.entities.session import Session
from termcli.exceptions import CommandError, FileRepositoryError
from termcli.ports.files.file_system_port import FileSystemPort
from termcli.use_cases.commands.navigation import CdCommand, LsCommand


class TestPwd:
    def test_prints_current_directory(self, run, temp_directory):
        assert run("pwd") == temp_directory + "\n"

    def test_rejects_arguments(self, run):
        assert run("pwd extra") == "Error: pwd takes no arguments\n"


class TestCd:
    def test_relative_directory(self, run, session, temp_directory):
        assert run("cd subdir") == ""
        assert session.current_directory == os.path.join(temp_directory, "subdir")

    def test_canonicalizes(self, run, session, temp_directory):
        run("cd subdir/../subdir/.")

        assert session.current_directory == os.path.join(temp_directory, "subdir")

    def test_absolute_directory(self, run, session, temp_directory):
        target = os.path.join(temp_directory, "subdir")

        run(f"cd {target}")

        assert session.current_directory == target

    def test_parent(self, run, session, temp_directory):
        run("cd subdir")
        run("cd ..")

        assert session.current_directory == temp_directory

    def test_parent_at_root(self, dependency_container):
        root = os.path.abspath(os.sep)
        session = Session(root)
        sink = BufferSink()

        dependency_container.get_run_line_use_case().execute("cd ..", session, sink)

        assert sink.getvalue() == "Error: Already at root directory\n"
        assert session.current_directory == root

    def test_home(self, run, session, temp_directory):
        run("cd subdir")
        run("cd")

        assert session.current_directory == temp_directory

    def test_missing_directory(self, run, session, temp_directory):
        assert run("cd nowhere") == "Error: Directory does not exist\n"
        assert session.current_directory == temp_directory

    def test_file_is_not_a_directory(self, run, session, temp_directory):
        assert run("cd test1.txt") == "Error: Directory does not exist\n"
        assert session.current_directory == temp_directory

    def test_too_many_arguments(self, run):
        assert run("cd a b") == "Error: cd takes at most one directory\n"

    def test_canonicalization_failure(self, temp_directory, mock_logger):
        fs = MagicMock(spec=FileSystemPort)
        fs.is_dir.return_value = True
        fs.canonicalize.side_effect = FileRepositoryError("loop")
        session = Session(temp_directory)
        sink = BufferSink()

        with pytest.raises(CommandError, match="Cannot change to directory"):
            CdCommand(fs, mock_logger).execute(["subdir"], session, sink)
        assert session.current_directory == temp_directory


class TestLs:
    def test_sorted_listing(self, run):
        assert run("ls") == "subdir\ntest1.txt\ntest2.py\n"

    def test_uppercase_sorts_first(self, run, temp_directory):
        open(os.path.join(temp_directory, "Zeta"), "w").close()

        assert run("ls").splitlines()[0] == "Zeta"

    def test_unreadable_directory(self, temp_directory, mock_logger):
        fs = MagicMock(spec=FileSystemPort)
        fs.list_names.side_effect = FileRepositoryError("denied")

        with pytest.raises(CommandError, match="Cannot read directory"):
            LsCommand(fs, mock_logger).execute([], Session(temp_directory), BufferSink())
