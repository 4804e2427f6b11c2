"""Line-oriented interpreter loop.

The loop reads commands from a text stream, writes their output, and keeps
going after any recoverable filesystem or usage error.
"""

from __future__ import annotations

from typing import TextIO

from core.config import LinkFsConfig
from core.constants import ECHO_PREFIX, QUIT_COMMAND
from core.errors import LinkFsError
from core.logging_config import get_logger
from shell.commands import dispatch_line
from shell.session import ShellSession

_LOGGER = get_logger(__name__)


def run_repl(
    session: ShellSession,
    input_stream: TextIO,
    output_stream: TextIO,
    config: LinkFsConfig,
) -> int:
    """Interpret commands until ``quit`` or end of input.

    Blank lines are skipped. Lines starting with a double quote are echoed
    without their surrounding quotes.

    Args:
        session: Session receiving every command.
        input_stream: Source of command lines.
        output_stream: Destination for command output.
        config: Runtime configuration controlling the prompt.

    Returns:
        Number of commands that failed.
    """
    failed_count = 0
    while True:
        if config.show_prompt:
            output_stream.write(f"{config.prompt} ")
            output_stream.flush()
        raw_line = input_stream.readline()
        if not raw_line:
            break
        line = raw_line.strip()
        if line == QUIT_COMMAND:
            break
        if not line:
            continue
        if line.startswith(ECHO_PREFIX):
            _write_lines(output_stream, [_strip_echo_quotes(line)])
            continue
        try:
            output_lines = dispatch_line(session, line)
        except LinkFsError as error:
            failed_count += 1
            _LOGGER.info("command_failed", line=line, error=str(error))
            output_lines = [f"error: {error}"]
        _write_lines(output_stream, output_lines)
    return failed_count


def _strip_echo_quotes(line: str) -> str:
    text = line[len(ECHO_PREFIX) :]
    return text[:-1] if text.endswith(ECHO_PREFIX) else text


def _write_lines(output_stream: TextIO, lines: list[str]) -> None:
    for line in lines:
        output_stream.write(line + "\n")
