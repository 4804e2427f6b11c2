"""Unit tests for path string helpers."""

from __future__ import annotations

from store.paths import (
    is_abs_path,
    is_root_path,
    join_relative,
    local_name_of,
    normalize_path,
    parent_of,
    to_abs_path,
)


def test_to_abs_path_joins_under_root_and_subdirectories() -> None:
    """Joining should avoid doubled separators."""
    assert (to_abs_path("/", "a"), to_abs_path("/docs", "a"), to_abs_path("/docs/", "a")) == (
        "/a",
        "/docs/a",
        "/docs/a",
    )


def test_to_abs_path_with_root_name_returns_root() -> None:
    """A local name of '/' should return the root path."""
    assert to_abs_path("/docs", "/") == "/"


def test_parent_of_keeps_trailing_separator() -> None:
    """Parent paths should end with a separator."""
    assert (parent_of("/docs/a.txt"), parent_of("/a"), parent_of("/x/y/z")) == (
        "/docs/",
        "/",
        "/x/y/",
    )


def test_local_name_of_returns_last_segment() -> None:
    """Local name should be the trailing segment."""
    assert (local_name_of("/docs/a.txt"), local_name_of("/docs/"), local_name_of("/")) == (
        "a.txt",
        "docs",
        "/",
    )


def test_path_predicates() -> None:
    """Absolute and root predicates should match only their forms."""
    assert (is_abs_path("/a"), is_abs_path("a"), is_root_path("/"), is_root_path("/a")) == (
        True,
        False,
        True,
        False,
    )


def test_join_relative_keeps_absolute_paths() -> None:
    """Absolute paths should bypass the working directory."""
    assert (join_relative("/docs", "/etc"), join_relative("/docs", "a.txt")) == (
        "/etc",
        "/docs/a.txt",
    )


def test_normalize_path_collapses_separators() -> None:
    """Repeated and trailing separators should be dropped."""
    assert (normalize_path("//docs///sub/"), normalize_path("/")) == ("/docs/sub", "/")
