"""Directory tables.

A directory entity's snapshots are name-to-link mappings. Transforms here
always return a new mapping so earlier directory versions stay intact.
"""

from __future__ import annotations

from typing import Mapping

from core.types import ListingRow
from store.entity import ContentTransform, Entity, directory_table, file_size, is_directory
from store.link import Link


def add_entry(link: Link) -> ContentTransform:
    """Build a transform binding ``link.name`` to ``link``."""

    def _add(table: object) -> object:
        return {**_as_table(table), link.name: link}

    return _add


def remove_entry(link: Link) -> ContentTransform:
    """Build a transform dropping the entry bound to this exact link.

    An entry with the same name but a different link object is kept.
    """

    def _remove(table: object) -> object:
        current = _as_table(table)
        if current.get(link.name) is not link:
            return current
        return {name: entry for name, entry in current.items() if name != link.name}

    return _remove


def entries(directory: Entity) -> list[tuple[str, Link]]:
    """Return the current directory entries sorted by name."""
    return sorted(directory_table(directory).items())


def size_estimate(directory: Entity) -> int:
    """Return the logical listing size of a directory.

    Each entry counts its name length plus one separator.
    """
    return sum(len(name) + 1 for name in directory_table(directory))


def listing_rows(directory: Entity) -> list[ListingRow]:
    """Build listing rows for every entry of a directory.

    Args:
        directory: Directory entity to list.

    Returns:
        Rows sorted by name.
    """
    rows: list[ListingRow] = []
    for name, link in entries(directory):
        target = link.target
        if is_directory(target):
            rows.append(ListingRow(name=name, is_directory=True, size=size_estimate(target)))
        else:
            rows.append(ListingRow(name=name, is_directory=False, size=file_size(target)))
    return rows


def _as_table(table: object) -> Mapping[str, Link]:
    return table  # type: ignore[return-value]
