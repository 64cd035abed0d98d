"""
Tests for the API server entry point.
"""

from unittest.mock import patch

from termcli.cli_serve import main


@patch("termcli.cli_serve.uvicorn.run")
def test_flags_reach_uvicorn(mock_run):
    assert main(["--host", "0.0.0.0", "--port", "9001"]) == 0

    mock_run.assert_called_once()
    args, kwargs = mock_run.call_args
    assert args == ("termcli.main:app",)
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["port"] == 9001
    assert kwargs["reload"] is False


@patch("termcli.cli_serve.uvicorn.run")
def test_reload_flag(mock_run):
    main(["--reload"])

    assert mock_run.call_args.kwargs["reload"] is True
