"""
Session domain entity.
"""

import os
from typing import Optional


class Session:
    """
    Interpreter session owning the current directory against which paths are resolved.
    """

    def __init__(self, current_directory: str, home_directory: Optional[str] = None):
        """
        Initialize the Session entity.

        Args:
            current_directory: Absolute path of the starting directory
            home_directory: Directory adopted by a bare 'cd' (defaults to the user's home)

        Raises:
            ValueError: If current_directory is empty or not absolute
        """
        if not current_directory or not os.path.isabs(current_directory):
            raise ValueError("Session requires an absolute starting directory")

        self.current_directory = current_directory
        self.home_directory = home_directory or os.path.expanduser("~")
        self.active = True

    def resolve(self, text: str) -> str:
        """
        Turn a possibly relative path into an absolute one.

        Absolute paths are returned unchanged, anything else is appended to the
        current directory. No existence check and no canonicalization.
        """
        if os.path.isabs(text):
            return text
        return self.current_directory + os.sep + text

    def parent_directory(self) -> Optional[str]:
        """Return the parent of the current directory, or None at the filesystem root."""
        parent = os.path.dirname(self.current_directory.rstrip(os.sep) or os.sep)
        if not parent or parent == self.current_directory:
            return None
        return parent

    def change_directory(self, path: str) -> None:
        """Adopt an already canonical absolute directory path."""
        self.current_directory = path

    def close(self) -> None:
        self.active = False

    def __repr__(self) -> str:
        return f"Session(current_directory='{self.current_directory}', active={self.active})"
