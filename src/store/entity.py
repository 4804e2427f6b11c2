"""Versioned content entities.

An entity is a file or directory managed by the filesystem. It keeps an
append-only list of content snapshots and the links currently naming it.
A new version is appended only when proposed content differs from the
current snapshot, so links can pin a starting version and read deltas.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Mapping

from core.types import EntityKind

if TYPE_CHECKING:
    from store.link import Link

ContentTransform = Callable[[object], object]


@dataclass(eq=False)
class Entity:
    """Mutable content container compared by identity.

    Attributes:
        kind: Entity kind literal.
        versions: Append-only snapshots, oldest first.
        refs: Links currently pointing at this entity.
    """

    kind: EntityKind
    versions: list[object]
    refs: list[Link] = field(default_factory=list, repr=False)

    @property
    def link_count(self) -> int:
        """Return the number of names bound to this entity."""
        return len(self.refs)


def new_entity(kind: EntityKind, initial_content: object) -> Entity:
    """Create an entity holding a single initial version.

    Args:
        kind: Entity kind literal.
        initial_content: Snapshot stored as version 0.

    Returns:
        New entity with no references.
    """
    return Entity(kind=kind, versions=[initial_content])


def empty_file() -> Entity:
    return new_entity("file", "")


def empty_directory() -> Entity:
    return new_entity("dir", {})


def nil_entity() -> Entity:
    return new_entity("nil", None)


def is_file(entity: Entity) -> bool:
    return entity.kind == "file"


def is_directory(entity: Entity) -> bool:
    return entity.kind == "dir"


def current_version_index(entity: Entity) -> int:
    return len(entity.versions) - 1


def current_version(entity: Entity) -> object:
    return entity.versions[-1]


def version_at(entity: Entity, version_num: int) -> object | None:
    """Return one snapshot, or None when the index is out of range.

    Args:
        entity: Entity to read.
        version_num: Zero-based version index.

    Returns:
        Snapshot content, or None for indexes outside 0..current.
    """
    if 0 <= version_num <= current_version_index(entity):
        return entity.versions[version_num]
    return None


def versions_from(entity: Entity, version_num: int) -> list[object]:
    """Return snapshots from ``version_num`` up to the current one."""
    return entity.versions[max(version_num, 0) :]


def update(entity: Entity, transform: ContentTransform) -> Entity:
    """Apply a transform to the current snapshot and append the result.

    Identical proposed content is a no-op, not a new version.

    Args:
        entity: Entity to update.
        transform: Function mapping current content to proposed content.

    Returns:
        The same entity, possibly with one more version.
    """
    current = current_version(entity)
    proposed = transform(current)
    if proposed != current:
        entity.versions.append(proposed)
    return entity


def replace(entity: Entity, content: object) -> Entity:
    return update(entity, lambda _current: content)


def append_text(text: str) -> ContentTransform:
    """Build a transform appending text to file content."""

    def _append(content: object) -> object:
        return f"{content}{text}"

    return _append


def file_size(entity: Entity) -> int:
    return len(str(current_version(entity)))


def directory_table(entity: Entity) -> Mapping[str, Link]:
    """Return the current name table of a directory entity."""
    return current_version(entity)  # type: ignore[return-value]
