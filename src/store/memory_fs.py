"""Memory-backed hard-link filesystem.

This module owns every graph mutation: storing links under directories,
resolving absolute paths, deleting one name, and purging every name of an
entity. Entities are reclaimed by the garbage collector once no directory
table or caller still holds them.
"""

from __future__ import annotations

from core.constants import ROOT_LINK_NAME
from core.errors import (
    EntryExistsError,
    InvalidArgumentError,
    InvalidPathError,
    LinkNotFoundError,
    TypeMismatchError,
)
from core.logging_config import get_logger
from store.directory import add_entry, remove_entry
from store.entity import (
    ContentTransform,
    Entity,
    current_version_index,
    directory_table,
    empty_directory,
    is_directory,
)
from store.entity import update as update_content
from store.link import Link, new_link
from store.paths import (
    is_abs_path,
    local_name_of,
    parent_of,
    path_segments,
    to_abs_path,
)

_LOGGER = get_logger(__name__)


class MemoryFileSystem:
    """In-memory filesystem graph rooted at a single ``/`` link.

    The root link is attached at construction and can never be deleted;
    the root directory can never be purged.
    """

    def __init__(self) -> None:
        root_directory = empty_directory()
        self._root_link = new_link(ROOT_LINK_NAME, root_directory)
        self._root_link.state = "attached"
        root_directory.refs.append(self._root_link)

    @property
    def root_link(self) -> Link:
        return self._root_link

    @property
    def root_directory(self) -> Entity:
        return self._root_link.target

    def resolve(self, path: str) -> Link:
        """Resolve an absolute path to the link bound at that path.

        Args:
            path: Absolute slash-separated path.

        Returns:
            Link named by the last path segment, or the root link for ``/``.

        Raises:
            InvalidPathError: If the path is not absolute.
            LinkNotFoundError: If a segment is missing or a non-directory is
                traversed.
        """
        if not is_abs_path(path):
            raise InvalidPathError(
                f"Path '{path}' is not absolute. Paths passed to the filesystem must start with '/'."
            )
        link = self._root_link
        walked_path = ROOT_LINK_NAME
        for segment in path_segments(path):
            if not is_directory(link.target):
                raise LinkNotFoundError(
                    f"Cannot resolve '{path}': '{walked_path}' is not a directory."
                )
            entry = directory_table(link.target).get(segment)
            if entry is None:
                raise LinkNotFoundError(
                    f"Cannot resolve '{path}': no entry '{segment}' in '{walked_path}'."
                )
            link = entry
            walked_path = to_abs_path(walked_path, segment)
        return link

    def find(self, path: str) -> Link | None:
        """Resolve a path, returning None instead of raising when missing."""
        try:
            return self.resolve(path)
        except LinkNotFoundError:
            return None

    def store(self, link: Link, parent_dir: Entity | Link) -> Link:
        """Attach an unattached link under a parent directory.

        Args:
            link: Link to attach.
            parent_dir: Parent directory entity, or the link naming it.

        Returns:
            The attached link.

        Raises:
            InvalidArgumentError: If ``link`` is not an unattached link or has
                an invalid name.
            TypeMismatchError: If the parent is not a directory.
            EntryExistsError: If the parent already binds the name.
        """
        if not isinstance(link, Link):
            raise InvalidArgumentError(f"Expected a link, got {type(link).__name__}.")
        if link.state != "unattached":
            raise InvalidArgumentError(
                f"Link '{link.name}' is already {link.state}. Create a new link to bind it again."
            )
        _validate_link_name(link.name)
        parent = parent_dir.target if isinstance(parent_dir, Link) else parent_dir
        if not isinstance(parent, Entity) or not is_directory(parent):
            raise TypeMismatchError(
                f"Cannot store '{link.name}': the parent of a link must always be a directory."
            )
        if link.name in directory_table(parent):
            raise EntryExistsError(
                f"Name '{link.name}' already exists in the target directory. "
                "Delete the existing entry first or choose another name."
            )
        update_content(parent, add_entry(link))
        link.target.refs.append(link)
        link.root = parent
        link.state = "attached"
        _LOGGER.debug(
            "link_stored",
            name=link.name,
            starting_version=link.starting_version,
            link_count=link.target.link_count,
            parent_version=current_version_index(parent),
        )
        return link

    def create_at(self, path: str, entity: Entity) -> Link:
        """Bind an entity at an absolute path.

        Passing an entity that already has names creates a hard link.

        Args:
            path: Absolute path of the new name.
            entity: New or existing entity.

        Returns:
            The attached link.

        Raises:
            InvalidPathError: If the path is not absolute.
            LinkNotFoundError: If the parent directory does not exist.
            TypeMismatchError: If the parent path names a file.
            EntryExistsError: If the name is already bound.
        """
        if not is_abs_path(path):
            raise InvalidPathError(
                f"Path '{path}' is not absolute. Paths passed to the filesystem must start with '/'."
            )
        parent_link = self.resolve(parent_of(path))
        return self.store(new_link(local_name_of(path), entity), parent_link)

    def delete(self, link: Link) -> Entity:
        """Remove one name binding, leaving the entity and its other names intact.

        Deleting an already detached link is a no-op.

        Args:
            link: Attached link to remove.

        Returns:
            The entity the link pointed at.

        Raises:
            InvalidArgumentError: If ``link`` is not a link or is the root link.
        """
        if not isinstance(link, Link):
            raise InvalidArgumentError(f"Expected a link, got {type(link).__name__}.")
        if link is self._root_link:
            raise InvalidArgumentError("The filesystem root cannot be deleted.")
        if link.state != "attached":
            return link.target
        _detach(link)
        target = link.target
        target.refs[:] = [ref for ref in target.refs if ref is not link]
        _LOGGER.debug("link_deleted", name=link.name, link_count=target.link_count)
        return target

    def purge(self, entity: Entity) -> int:
        """Remove every name bound to an entity.

        Args:
            entity: Entity to unlink from every directory.

        Returns:
            Number of links removed.

        Raises:
            InvalidArgumentError: If ``entity`` is the root directory.
        """
        if entity is self.root_directory:
            raise InvalidArgumentError("The filesystem root directory cannot be purged.")
        links = tuple(entity.refs)
        for link in links:
            _detach(link)
        entity.refs.clear()
        _LOGGER.debug("entity_purged", kind=entity.kind, removed_links=len(links))
        return len(links)

    def move(self, old_path: str, new_path: str) -> Link:
        """Rebind the entity at ``old_path`` under ``new_path``.

        The new name is created first, so a failed bind leaves the old one.

        Returns:
            The newly attached link.
        """
        old_link = self.resolve(old_path)
        moved_link = self.create_at(new_path, old_link.target)
        self.delete(old_link)
        return moved_link

    def update(self, entity: Entity, transform: ContentTransform) -> Entity:
        """Append a transformed version to an entity when content changes."""
        before = current_version_index(entity)
        update_content(entity, transform)
        if current_version_index(entity) != before:
            _LOGGER.debug(
                "entity_version_appended",
                kind=entity.kind,
                version=current_version_index(entity),
            )
        return entity

    def replace(self, entity: Entity, content: object) -> Entity:
        return self.update(entity, lambda _current: content)


def _detach(link: Link) -> None:
    parent = link.root
    if parent is not None:
        update_content(parent, remove_entry(link))
    link.root = None
    link.state = "detached"


def _validate_link_name(name: str) -> None:
    if not name or "/" in name:
        raise InvalidArgumentError(
            f"Invalid link name '{name}'. Names must be non-empty and must not contain '/'."
        )
