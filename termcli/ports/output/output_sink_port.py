"""
Output sink port interface defining where command output is sent.
"""

from abc import ABC, abstractmethod


class OutputSinkPort(ABC):
    """Port interface for command output."""

    @abstractmethod
    def write(self, text: str) -> None:
        """
        Write text as-is.

        Args:
            text: Text to emit, no newline is added
        """
        pass

    def write_line(self, text: str = "") -> None:
        """
        Write text followed by a newline.

        Args:
            text: Text to emit
        """
        self.write(text + "\n")
