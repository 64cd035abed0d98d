"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from termcli.container import container
from termcli.use_cases.interpreter.run_line import RunLineUseCase
from termcli.use_cases.interpreter.sessions import SessionRegistry


def get_run_line_uc() -> RunLineUseCase:
    """
    Get the run line use case from the container.

    Returns:
        RunLineUseCase: The run line use case instance
    """
    return container.get_run_line_use_case()


def get_session_registry() -> SessionRegistry:
    """
    Get the session registry from the container.

    Returns:
        SessionRegistry: The registry holding API sessions
    """
    return container.get_session_registry()
