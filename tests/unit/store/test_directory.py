"""Unit tests for directory tables."""

from __future__ import annotations

from store.directory import add_entry, entries, listing_rows, remove_entry, size_estimate
from store.entity import empty_directory, empty_file, replace, update
from store.link import new_link


def test_add_entry_does_not_mutate_previous_snapshot() -> None:
    """Directory versions should be copy-on-write."""
    directory = empty_directory()
    link = new_link("a", empty_file())

    update(directory, add_entry(link))

    assert (directory.versions[0], directory.versions[1]) == ({}, {"a": link})


def test_remove_entry_keeps_other_link_with_same_name() -> None:
    """Removing a stale link should not unbind a different link of that name."""
    directory = empty_directory()
    bound = new_link("a", empty_file())
    stale = new_link("a", empty_file())
    update(directory, add_entry(bound))

    update(directory, remove_entry(stale))

    assert len(directory.versions) == 2


def test_size_estimate_counts_name_plus_separator() -> None:
    """Size estimate should sum name lengths plus one per entry."""
    directory = empty_directory()
    update(directory, add_entry(new_link("ab", empty_file())))
    update(directory, add_entry(new_link("cde", empty_file())))

    assert size_estimate(directory) == 7


def test_entries_are_sorted_by_name() -> None:
    """Entries should be returned in name order."""
    directory = empty_directory()
    for name in ("zeta", "alpha", "mid"):
        update(directory, add_entry(new_link(name, empty_file())))

    assert [name for name, _link in entries(directory)] == ["alpha", "mid", "zeta"]


def test_listing_rows_report_kind_and_size() -> None:
    """Listing rows should flag directories and size each entry."""
    directory = empty_directory()
    text_file = empty_file()
    replace(text_file, "hello")
    child_dir = empty_directory()
    update(child_dir, add_entry(new_link("x", empty_file())))
    update(directory, add_entry(new_link("f", text_file)))
    update(directory, add_entry(new_link("d", child_dir)))

    rows = [(row.name, row.is_directory, row.size) for row in listing_rows(directory)]

    assert rows == [("d", True, 2), ("f", False, 5)]
