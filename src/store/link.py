"""Named links between directories and entities.

A link binds a name to an entity and records the entity version that was
current when the link was created. Links hold their parent directory through
a weak reference so a dangling link never keeps a directory alive.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field

from core.types import HistoryReport, LinkState
from store.entity import (
    Entity,
    current_version,
    current_version_index,
    versions_from,
)


@dataclass(eq=False)
class Link:
    """Directed name binding compared by identity.

    Attributes:
        name: Local name in the parent directory table.
        target: Referenced entity, shared with other links.
        starting_version: Target version index at link creation.
        state: Attachment lifecycle state.
    """

    name: str
    target: Entity
    starting_version: int
    state: LinkState = "unattached"
    _root_ref: weakref.ReferenceType[Entity] | None = field(default=None, init=False, repr=False)

    @property
    def root(self) -> Entity | None:
        """Return the parent directory entity when it is still alive."""
        if self._root_ref is None:
            return None
        return self._root_ref()

    @root.setter
    def root(self, parent_dir: Entity | None) -> None:
        self._root_ref = None if parent_dir is None else weakref.ref(parent_dir)


def new_link(name: str, target: Entity, root: Entity | None = None) -> Link:
    """Create an unattached link over an entity.

    Args:
        name: Local name for the binding.
        target: Entity to reference.
        root: Optional parent directory entity.

    Returns:
        Link pinned at the target's current version.
    """
    link = Link(name=name, target=target, starting_version=current_version_index(target))
    link.root = root
    return link


def dereference(link: Link) -> Entity:
    return link.target


def dereference_current(link: Link) -> object:
    """Return the current snapshot of the linked entity."""
    return current_version(link.target)


def dereference_all(link: Link) -> list[object]:
    """Return snapshots created since this link started pointing here."""
    return versions_from(link.target, link.starting_version)


def history_report(link: Link) -> HistoryReport:
    """Build a typed history report for one link.

    Args:
        link: Link to inspect.

    Returns:
        Report of versions since the link's starting version.
    """
    return HistoryReport(
        link_name=link.name,
        starting_version=link.starting_version,
        versions=tuple(dereference_all(link)),
    )
