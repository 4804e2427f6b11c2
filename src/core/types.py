"""Shared typed models.

This module defines the small immutable models exchanged between the
store layer, the shell, and the public SDK surface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

EntityKind = Literal["file", "dir", "nil"]
LinkState = Literal["unattached", "attached", "detached"]


@dataclass(frozen=True)
class ListingRow:
    """One row of a directory listing.

    Attributes:
        name: Local name bound in the directory.
        is_directory: Whether the bound entity is a directory.
        size: Text length for files, size estimate for directories.
    """

    name: str
    is_directory: bool
    size: int


@dataclass(frozen=True)
class HistoryReport:
    """Versions of an entity seen since a link started pointing at it.

    Attributes:
        link_name: Name of the inspected link.
        starting_version: Entity version index when the link was created.
        versions: Snapshots from the starting version to the current one.
    """

    link_name: str
    starting_version: int
    versions: tuple[object, ...]
