"""Absolute path string helpers.

These helpers only compose and split strings; they never touch the tree.
"""

from __future__ import annotations

from core.constants import PATH_SEPARATOR, ROOT_PATH


def is_abs_path(path: str) -> bool:
    return path.startswith(PATH_SEPARATOR)


def is_root_path(path: str) -> bool:
    return path == ROOT_PATH


def path_segments(path: str) -> list[str]:
    """Split a path into its non-empty segments."""
    return [segment for segment in path.split(PATH_SEPARATOR) if segment]


def to_abs_path(parent_path: str, local_name: str) -> str:
    """Compose a child path from a parent path and a local name.

    Args:
        parent_path: Absolute parent directory path.
        local_name: Name inside the parent, or the root path itself.

    Returns:
        Absolute child path.
    """
    if is_root_path(local_name):
        return local_name
    if parent_path.endswith(PATH_SEPARATOR):
        return parent_path + local_name
    return parent_path + PATH_SEPARATOR + local_name


def parent_of(abs_path: str) -> str:
    """Return the parent path with a trailing separator.

    ``parent_of("/docs/a.txt")`` is ``"/docs/"`` and ``parent_of("/a")`` is
    ``"/"``.
    """
    segments = path_segments(abs_path)
    return ROOT_PATH + "".join(segment + PATH_SEPARATOR for segment in segments[:-1])


def local_name_of(abs_path: str) -> str:
    """Return the last segment of a path, or the root path for ``/``."""
    segments = path_segments(abs_path)
    return segments[-1] if segments else ROOT_PATH


def join_relative(current_path: str, path: str) -> str:
    """Resolve a user-supplied path against the current directory.

    Args:
        current_path: Absolute working directory.
        path: Absolute or relative path.

    Returns:
        Absolute path.
    """
    if is_abs_path(path):
        return path
    return to_abs_path(current_path, path)


def normalize_path(abs_path: str) -> str:
    """Collapse repeated and trailing separators in an absolute path."""
    segments = path_segments(abs_path)
    return ROOT_PATH + PATH_SEPARATOR.join(segments)
