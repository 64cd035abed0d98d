"""
Tests for the session registry.
"""

import pytest

from termcli.entities.session import Session
from termcli.exceptions import SessionNotFoundError
from termcli.use_cases.interpreter.sessions import SessionRegistry


@pytest.fixture
def registry(temp_directory, mock_logger):
    return SessionRegistry(lambda: Session(temp_directory), mock_logger)


def test_sessions_are_independent(registry, temp_directory):
    first_id, first = registry.create()
    second_id, second = registry.create()

    first.change_directory(temp_directory + "/subdir")

    assert first_id != second_id
    assert len(registry) == 2
    assert registry.get(second_id).current_directory == temp_directory


def test_get_unknown(registry):
    with pytest.raises(SessionNotFoundError, match="Unknown session: nope"):
        registry.get("nope")


def test_remove(registry):
    session_id, _ = registry.create()
    registry.remove(session_id)

    assert len(registry) == 0
    with pytest.raises(SessionNotFoundError):
        registry.remove(session_id)


def test_discard_is_quiet(registry):
    session_id, _ = registry.create()

    assert registry.discard(session_id) is True
    assert registry.discard(session_id) is False


def test_each_session_has_its_own_lock(registry):
    first_id, _ = registry.create()
    second_id, _ = registry.create()

    assert registry.lock_for(first_id) is registry.lock_for(first_id)
    assert registry.lock_for(first_id) is not registry.lock_for(second_id)
    with pytest.raises(SessionNotFoundError):
        registry.lock_for("nope")
