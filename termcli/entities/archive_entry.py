"""
Archive entry entity.
"""

from dataclasses import dataclass

ARCHIVE_SEPARATOR = "/"


@dataclass(frozen=True)
class ArchiveEntry:
    """One named record inside an archive, either a directory or a file."""

    name: str
    is_dir: bool
    size: int = 0

    def parts(self) -> list[str]:
        """Path components of the entry name, independent of the host separator."""
        return [p for p in self.name.split(ARCHIVE_SEPARATOR) if p]

    @staticmethod
    def join(*parts: str) -> str:
        """Build an archive-internal name from path components."""
        return ARCHIVE_SEPARATOR.join(p.strip(ARCHIVE_SEPARATOR) for p in parts if p)
