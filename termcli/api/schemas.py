"""
Pydantic models for API requests and responses.
"""

from pydantic import BaseModel, Field


class SessionInfo(BaseModel):
    """Schema for the state of an interpreter session."""

    session_id: str = Field(..., description="Session identifier")
    current_directory: str = Field(..., description="Absolute current directory")
    active: bool = Field(..., description="False once 'exit' has run")


class CommandRequest(BaseModel):
    """Schema for running one command line."""

    line: str = Field(..., description="Command line, e.g. 'ls' or 'echo hi > notes.txt'")


class CommandResponse(BaseModel):
    """Schema for the result of a command line."""

    output: str = Field(..., description="Everything the command printed")
    current_directory: str = Field(..., description="Current directory after the command")
    active: bool = Field(..., description="Whether the session accepts further commands")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
