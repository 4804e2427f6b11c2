"""Pytest configuration and shared filesystem fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if str(_SRC_PATH) not in sys.path:
    sys.path.insert(0, str(_SRC_PATH))

from shell.session import ShellSession  # noqa: E402
from store.memory_fs import MemoryFileSystem  # noqa: E402


@pytest.fixture
def fs() -> MemoryFileSystem:
    """Return an empty filesystem holding only the root directory."""
    return MemoryFileSystem()


@pytest.fixture
def session(fs: MemoryFileSystem) -> ShellSession:
    """Return a shell session positioned at the root of ``fs``."""
    return ShellSession(fs=fs)
