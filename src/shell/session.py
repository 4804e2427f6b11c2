"""Session state for the command shell.

One session owns one filesystem and a working directory. Command handlers
receive the session explicitly instead of reading process-wide state.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from core.constants import ROOT_PATH
from store.link import Link
from store.memory_fs import MemoryFileSystem
from store.paths import join_relative


@dataclass
class ShellSession:
    """Mutable state scoped to one shell session.

    Attributes:
        fs: Filesystem the session operates on.
        current_path: Absolute working directory path.
    """

    fs: MemoryFileSystem = field(default_factory=MemoryFileSystem)
    current_path: str = ROOT_PATH

    def absolute(self, path: str) -> str:
        """Return ``path`` made absolute against the working directory."""
        return join_relative(self.current_path, path)

    def resolve(self, path: str) -> Link:
        """Resolve an absolute or relative path through the session filesystem.

        Raises:
            LinkNotFoundError: If the path does not resolve.
        """
        return self.fs.resolve(self.absolute(path))
