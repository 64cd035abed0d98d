"""
Command line domain entities: the tokenized command and the redirection split.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

APPEND_OPERATOR = ">>"
OVERWRITE_OPERATOR = ">"


class RedirectMode(Enum):
    """How captured output is written to the redirection target."""

    OVERWRITE = "w"
    APPEND = "a"


@dataclass(frozen=True)
class ParsedCommand:
    """A command name with its ordered argument tokens."""

    name: str
    args: tuple[str, ...] = ()

    @classmethod
    def parse(cls, line: Optional[str]) -> Optional["ParsedCommand"]:
        """
        Split a line into a command name and its arguments.

        Tokens are maximal runs of non-whitespace characters; there is no
        quoting or escaping.

        Args:
            line: Raw command text

        Returns:
            The parsed command, or None if the line is empty or only whitespace
        """
        if line is None:
            return None
        words = line.split()
        if not words:
            return None
        return cls(name=words[0], args=tuple(words[1:]))

    def __str__(self) -> str:
        return " ".join((self.name, *self.args))


@dataclass(frozen=True)
class CommandLine:
    """A raw input line split around an optional trailing redirection."""

    command_text: str
    target: Optional[str] = None
    mode: Optional[RedirectMode] = None

    @property
    def is_redirected(self) -> bool:
        return self.mode is not None

    @classmethod
    def split(cls, line: str) -> "CommandLine":
        """
        Detect a '>>' or '>' operator and split the line around its first occurrence.

        '>>' is checked first because it textually contains '>'.

        Args:
            line: Raw input line

        Returns:
            CommandLine with the command text and, if present, target and mode
        """
        line = line.strip()
        for operator, mode in (
            (APPEND_OPERATOR, RedirectMode.APPEND),
            (OVERWRITE_OPERATOR, RedirectMode.OVERWRITE),
        ):
            if operator in line:
                command_text, target = line.split(operator, 1)
                return cls(command_text.strip(), target.strip(), mode)
        return cls(line)
