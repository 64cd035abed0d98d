"""
FastAPI router definitions for the API endpoints.
"""

from fastapi import APIRouter, HTTPException, Response

from termcli.adapters.output.buffer_sink import BufferSink
from termcli.api.dependencies import get_run_line_uc, get_session_registry
from termcli.api.schemas import (
    CommandRequest,
    CommandResponse,
    ErrorResponse,
    SessionInfo,
)
from termcli.exceptions import SessionNotFoundError

router = APIRouter()


@router.post("/sessions", response_model=SessionInfo, status_code=201)
def create_session():
    """
    Create a new interpreter session.

    Returns:
        SessionInfo: Identifier and starting directory of the session
    """
    session_id, session = get_session_registry().create()
    return SessionInfo(
        session_id=session_id,
        current_directory=session.current_directory,
        active=session.active,
    )


@router.get(
    "/sessions/{session_id}",
    response_model=SessionInfo,
    responses={404: {"model": ErrorResponse}},
)
def get_session(session_id: str):
    """
    Get the state of a session.

    Raises:
        HTTPException: If the session does not exist
    """
    try:
        session = get_session_registry().get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return SessionInfo(
        session_id=session_id,
        current_directory=session.current_directory,
        active=session.active,
    )


@router.post(
    "/sessions/{session_id}/commands",
    response_model=CommandResponse,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def run_command(session_id: str, body: CommandRequest):
    """
    Run one command line in a session and return what it printed.

    Args:
        session_id: Session to run the line in
        body: Request body containing the command line

    Returns:
        CommandResponse: Captured output and the session state afterwards

    A session runs one command at a time; concurrent requests wait their turn.
    A session that exits is dropped from the registry.

    Raises:
        HTTPException: If the session does not exist or has exited
    """
    registry = get_session_registry()
    try:
        session = registry.get(session_id)
        lock = registry.lock_for(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    sink = BufferSink()
    with lock:
        if not session.active:
            raise HTTPException(status_code=409, detail="Session has exited")
        active = get_run_line_uc().execute(body.line, session, sink)
        if not active:
            registry.discard(session_id)
    return CommandResponse(
        output=sink.getvalue(),
        current_directory=session.current_directory,
        active=active,
    )


@router.delete(
    "/sessions/{session_id}",
    status_code=204,
    responses={404: {"model": ErrorResponse}},
)
def delete_session(session_id: str):
    """
    Forget a session.

    Raises:
        HTTPException: If the session does not exist
    """
    try:
        get_session_registry().remove(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
