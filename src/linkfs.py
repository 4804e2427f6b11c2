"""Public SDK surface for linkfs.

This module provides a stable import path for library users.
It re-exports the filesystem graph, its primitives, and the shell layer.
"""

from __future__ import annotations

from core.config import LinkFsConfig
from core.errors import (
    CommandError,
    EntryExistsError,
    InvalidArgumentError,
    InvalidPathError,
    LinkFsError,
    LinkNotFoundError,
    ScriptError,
    TypeMismatchError,
)
from core.types import HistoryReport, ListingRow
from shell.repl import run_repl
from shell.script import execute_script_file
from shell.session import ShellSession
from store.directory import entries, listing_rows, size_estimate
from store.entity import (
    Entity,
    append_text,
    current_version,
    current_version_index,
    empty_directory,
    empty_file,
    new_entity,
    nil_entity,
    version_at,
    versions_from,
)
from store.link import Link, dereference_all, dereference_current, history_report, new_link
from store.memory_fs import MemoryFileSystem

__all__ = [
    "CommandError",
    "Entity",
    "EntryExistsError",
    "HistoryReport",
    "InvalidArgumentError",
    "InvalidPathError",
    "Link",
    "LinkFsConfig",
    "LinkFsError",
    "LinkNotFoundError",
    "ListingRow",
    "MemoryFileSystem",
    "ScriptError",
    "ShellSession",
    "TypeMismatchError",
    "append_text",
    "current_version",
    "current_version_index",
    "dereference_all",
    "dereference_current",
    "empty_directory",
    "empty_file",
    "entries",
    "execute_script_file",
    "history_report",
    "listing_rows",
    "new_entity",
    "new_link",
    "nil_entity",
    "run_repl",
    "size_estimate",
    "version_at",
    "versions_from",
]
