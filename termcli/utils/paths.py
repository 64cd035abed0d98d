from __future__ import annotations

import os

"""Path containment helpers used to keep archive extraction inside its destination."""


def is_within(root: str, path: str) -> bool:
    """Return True if path lies inside root or is root itself.

    Both inputs are made absolute before comparison; no symbolic links are followed.
    """
    root = os.path.abspath(root)
    p = os.path.abspath(path)
    try:
        common = os.path.commonpath([root, p])
    except ValueError:
        return False
    return common == root


def join_archive_name(destination: str, parts: list[str]) -> str | None:
    """Translate forward-slash archive name parts into a host path under destination.

    Returns None when the parts are empty, contain '..', or would escape destination.
    """
    if not parts or ".." in parts:
        return None
    target = os.path.join(destination, *parts)
    if not is_within(destination, target):
        return None
    return target
