"""Unit tests for the interpreter loop."""

from __future__ import annotations

import io

from core.config import LinkFsConfig
from shell.repl import run_repl
from shell.session import ShellSession
from tests.fixture_paths import fixture_path

_QUIET_CONFIG = LinkFsConfig(prompt="Command?", show_prompt=False, log_level="WARNING")


def _run_text(session: ShellSession, text: str, config: LinkFsConfig = _QUIET_CONFIG) -> str:
    output = io.StringIO()
    run_repl(session, io.StringIO(text), output, config)
    return output.getvalue()


def test_repl_stops_at_quit(session: ShellSession) -> None:
    """Commands after quit should not run."""
    with fixture_path("session.txt").open(encoding="utf-8") as input_stream:
        output = io.StringIO()
        run_repl(session, input_stream, output, _QUIET_CONFIG)

    assert output.getvalue().splitlines() == ["making a file", "hello world"]


def test_repl_reports_errors_and_continues(session: ShellSession) -> None:
    """Errors should be printed and the loop should keep reading."""
    output = _run_text(session, "show /missing\ncreate /a\nshow /a\n")

    assert output.splitlines()[0].startswith("error: Cannot resolve '/missing'")
    assert output.splitlines()[1:] == [""]


def test_repl_returns_failed_command_count(session: ShellSession) -> None:
    """The loop should count failed commands."""
    failed = run_repl(
        session,
        io.StringIO("delete /\ncreate /a\ncreate /a\n"),
        io.StringIO(),
        _QUIET_CONFIG,
    )

    assert failed == 2


def test_repl_writes_prompt_when_enabled(session: ShellSession) -> None:
    """A visible prompt should precede every read."""
    config = LinkFsConfig(prompt="fs>", show_prompt=True, log_level="WARNING")

    output = _run_text(session, "home\n", config)

    assert output == "fs> fs> "


def test_repl_echoes_quoted_lines(session: ShellSession) -> None:
    """Lines starting with a quote should be echoed without quotes."""
    assert _run_text(session, '"hello there"\n') == "hello there\n"


def test_repl_reports_unknown_commands(session: ShellSession) -> None:
    """Unknown commands should be reported without stopping."""
    assert _run_text(session, "dance\nquit\n") == "Command not understood.\n"
