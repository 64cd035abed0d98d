"""
Tests for interpreting whole input lines.
"""

import os

from termcli.adapters.output.buffer_sink import BufferSink


def test_mkdir_cd_pwd(run, session, temp_directory):
    run("mkdir projects")
    run("cd projects")

    assert run("pwd") == os.path.join(temp_directory, "projects") + "\n"
    assert session.current_directory == os.path.join(temp_directory, "projects")


def test_cd_up_and_back(run, session, temp_directory):
    run("cd subdir")
    run("cd ..")

    assert session.current_directory == temp_directory


def test_surrounding_whitespace_ignored(run):
    assert run("   echo   spaced   out   ") == "spaced out\n"


def test_blank_line_not_recognized(run, temp_directory):
    before = sorted(os.listdir(temp_directory))

    assert run("") == "Error: Command not recognized.\n"
    assert run("   ") == "Error: Command not recognized.\n"
    assert sorted(os.listdir(temp_directory)) == before


def test_redirect_without_command_not_recognized(run, temp_directory):
    assert run("> out.txt") == "Error: Command not recognized.\n"
    assert not os.path.exists(os.path.join(temp_directory, "out.txt"))


def test_unknown_command_changes_nothing(run, session, temp_directory):
    before = sorted(os.listdir(temp_directory))

    assert run("frobnicate now") == "Command not found: frobnicate\n"
    assert sorted(os.listdir(temp_directory)) == before
    assert session.current_directory == temp_directory


def test_exit_ends_session(dependency_container, session):
    sink = BufferSink()
    run_line = dependency_container.get_run_line_use_case()

    assert run_line.execute("echo still here", session, sink) is True
    assert run_line.execute("exit", session, sink) is False
    assert sink.getvalue() == "still here\nExiting CLI...\n"
    assert not session.active
