"""linkfs exception hierarchy.

This module defines recoverable domain errors with clear boundaries.
The shell catches the base class and keeps the session alive.
"""

from __future__ import annotations


class LinkFsError(Exception):
    """Base exception for all linkfs failures."""


class LinkFsConfigError(LinkFsError):
    """Raised for invalid runtime configuration."""


class LinkNotFoundError(LinkFsError):
    """Raised when a path does not resolve to a link."""


class TypeMismatchError(LinkFsError):
    """Raised when a file is found where a directory is required, or vice versa."""


class InvalidArgumentError(LinkFsError):
    """Raised for malformed inputs to graph operations."""


class InvalidPathError(InvalidArgumentError):
    """Raised when a path is not absolute."""


class EntryExistsError(InvalidArgumentError):
    """Raised when a directory already binds the requested name."""


class CommandError(LinkFsError):
    """Raised for unknown shell commands or wrong command usage."""


class ScriptError(LinkFsError):
    """Raised for invalid or unsupported YAML command scripts."""
