"""linkfs CLI entry points.

This module exposes the interactive shell and YAML script runner.
It maps argparse commands onto the shell layer.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Any, Sequence

from core.config import LinkFsConfig, parse_log_level
from core.constants import SUPPORTED_LOG_LEVELS
from core.errors import ScriptError
from core.logging_config import configure_logging
from shell.repl import run_repl
from shell.script import execute_script_file
from shell.session import ShellSession


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="linkfs", description="Hard-link filesystem emulator")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=SUPPORTED_LOG_LEVELS,
        help="Override LINKFS_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_shell_command(subparsers)
    _add_run_script_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the linkfs CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    config = _build_config(args.log_level)
    configure_logging(config.log_level)
    if args.command == "shell":
        return _run_shell_command(config, args)
    if args.command == "run-script":
        return _run_script_command(args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(log_level: str | None) -> LinkFsConfig:
    """Build runtime config with optional log level override.

    Args:
        log_level: Optional override level name.

    Returns:
        Validated config.
    """
    config = LinkFsConfig.from_env()
    if log_level:
        config = replace(config, log_level=parse_log_level(log_level))
    return config


def _run_shell_command(config: LinkFsConfig, args: argparse.Namespace) -> int:
    """Handle shell command.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    session = ShellSession()
    if args.input:
        try:
            input_stream = open(args.input, encoding="utf-8")
        except OSError as error:
            print(f"shell_error={error}")
            return 1
        with input_stream:
            run_repl(session, input_stream, sys.stdout, config)
    else:
        run_repl(session, sys.stdin, sys.stdout, config)
    return 0


def _run_script_command(args: argparse.Namespace) -> int:
    """Handle run-script command.

    Args:
        args: Parsed CLI args.

    Returns:
        Exit code, 1 when the script is invalid or a step fails.
    """
    try:
        output_lines = execute_script_file(args.script_file)
    except ScriptError as error:
        print(f"script_error={error}")
        return 1
    for line in output_lines:
        print(line)
    return 0


def _add_shell_command(subparsers: Any) -> None:
    """Register shell subcommand."""
    parser = subparsers.add_parser("shell", help="Read filesystem commands interactively")
    parser.add_argument("--input", help="Read commands from a file instead of stdin")


def _add_run_script_command(subparsers: Any) -> None:
    """Register run-script subcommand."""
    parser = subparsers.add_parser("run-script", help="Run a YAML command script")
    parser.add_argument("script_file", help="Path to YAML script file")
