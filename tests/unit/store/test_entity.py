"""Unit tests for entity version history."""

from __future__ import annotations

from store.entity import (
    append_text,
    current_version,
    current_version_index,
    empty_directory,
    empty_file,
    file_size,
    new_entity,
    nil_entity,
    replace,
    update,
    version_at,
    versions_from,
)


def test_new_entity_starts_with_one_version_and_no_refs() -> None:
    """A fresh entity should hold exactly its initial content."""
    entity = new_entity("file", "seed")

    assert (entity.versions, entity.refs, current_version_index(entity)) == (["seed"], [], 0)


def test_factories_set_kind_and_initial_content() -> None:
    """Empty factories should build the expected kinds."""
    kinds = [(e.kind, current_version(e)) for e in (empty_file(), empty_directory(), nil_entity())]

    assert kinds == [("file", ""), ("dir", {}), ("nil", None)]


def test_update_appends_changed_content() -> None:
    """A differing proposed version should be appended."""
    entity = empty_file()

    update(entity, append_text("hi"))

    assert entity.versions == ["", "hi"]


def test_update_with_identical_content_is_noop() -> None:
    """Re-proposing the current content should not add a version."""
    entity = empty_file()
    update(entity, append_text("hi"))

    update(entity, lambda _current: current_version(entity))
    replace(entity, "hi")
    update(entity, append_text(""))

    assert len(entity.versions) == 2


def test_update_compares_by_value_not_identity() -> None:
    """An equal but distinct object should not create a version."""
    entity = new_entity("dir", {"a": 1})

    update(entity, lambda current: dict(current))  # type: ignore[call-overload]

    assert len(entity.versions) == 1


def test_version_count_is_monotonic_over_updates() -> None:
    """Version history should never shrink across a sequence of updates."""
    entity = empty_file()
    counts = []
    for text in ("a", "", "b", "", "c"):
        update(entity, append_text(text))
        counts.append(len(entity.versions))

    assert counts == [2, 2, 3, 3, 4]


def test_version_at_returns_none_out_of_range() -> None:
    """Out-of-range indexes, including negatives, should yield None."""
    entity = empty_file()
    replace(entity, "one")

    assert (version_at(entity, 1), version_at(entity, 2), version_at(entity, -1)) == (
        "one",
        None,
        None,
    )


def test_versions_from_slices_to_current() -> None:
    """versions_from should return the tail starting at the index."""
    entity = empty_file()
    for text in ("a", "b", "c"):
        update(entity, append_text(text))

    assert versions_from(entity, 2) == ["ab", "abc"]


def test_file_size_is_current_text_length() -> None:
    """File size should measure the current snapshot only."""
    entity = empty_file()
    replace(entity, "hello")

    assert file_size(entity) == 5
