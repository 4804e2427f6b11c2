"""Unit tests for structured logging setup."""

from __future__ import annotations

import json
from typing import Iterator

import pytest
import structlog

from core.logging_config import configure_logging, get_logger
from store.entity import empty_file
from store.memory_fs import MemoryFileSystem


@pytest.fixture(autouse=True)
def _restore_default_level() -> Iterator[None]:
    yield
    configure_logging()


def test_configured_logger_writes_json_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """Events at or above the level should render as JSON on stderr."""
    configure_logging("INFO")

    get_logger("tests.logging").info("sample_event", answer=42)
    payload = json.loads(capsys.readouterr().err.strip().splitlines()[-1])

    assert (payload["event"], payload["answer"], payload["level"]) == ("sample_event", 42, "info")


def test_configured_logger_filters_below_level(capsys: pytest.CaptureFixture[str]) -> None:
    """Debug events should be dropped at the WARNING level."""
    configure_logging("WARNING")

    get_logger("tests.logging").debug("hidden_event")

    assert capsys.readouterr().err == ""


def test_graph_operations_emit_debug_events(
    capsys: pytest.CaptureFixture[str], fs: MemoryFileSystem
) -> None:
    """Storing a link should log a link_stored event at DEBUG level."""
    configure_logging("DEBUG")

    fs.create_at("/a.txt", empty_file())
    events = [json.loads(line)["event"] for line in capsys.readouterr().err.strip().splitlines()]

    assert "link_stored" in events


def test_get_logger_configures_defaults_on_first_use() -> None:
    """get_logger should install the default configuration when none exists."""
    structlog.reset_defaults()

    get_logger("tests.logging")

    assert structlog.is_configured()


def test_get_logger_keeps_existing_configuration(capsys: pytest.CaptureFixture[str]) -> None:
    """get_logger should not override a configuration set by the caller."""
    configure_logging("ERROR")

    get_logger("tests.logging").warning("quiet_event")

    assert capsys.readouterr().err == ""
