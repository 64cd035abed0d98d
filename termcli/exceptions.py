"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file system errors."""

    pass


class ArchiveError(BaseAppError):
    """Exception raised for archive reading or writing errors."""

    pass


class CommandError(BaseAppError):
    """Exception raised when a command is invoked incorrectly or its target is invalid."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class SessionNotFoundError(BaseAppError):
    """Exception raised when an unknown session id is requested."""

    pass
