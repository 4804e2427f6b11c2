"""YAML command scripts.

A script is a declarative list of shell commands executed in one session.
Scripts are validated up front so a typo fails before anything runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence, cast

import yaml

from core.constants import SCRIPT_VERSION
from core.errors import LinkFsError, ScriptError
from shell.commands import command_names, dispatch_command
from shell.session import ShellSession
from store.entity import is_directory
from store.paths import is_abs_path, normalize_path


@dataclass(frozen=True)
class ScriptStep:
    """One command invocation from a script file."""

    command: str
    args: tuple[str, ...]


@dataclass(frozen=True)
class CommandScript:
    """Validated script root object."""

    version: int
    steps: tuple[ScriptStep, ...]
    cwd: str | None = None


def load_script(script_path: str) -> CommandScript:
    """Load and validate a YAML command script from disk.

    Args:
        script_path: File path to the YAML script.

    Returns:
        Fully validated script.

    Raises:
        ScriptError: If the file is missing, unparsable, or fails schema checks.
    """
    payload = _load_yaml_payload(script_path)
    root_mapping = _expect_mapping(payload, "script root")
    _validate_root_keys(root_mapping)
    version = _parse_version(root_mapping)
    cwd = _parse_defaults(root_mapping)
    steps = _parse_steps(root_mapping)
    return CommandScript(version=version, steps=steps, cwd=cwd)


def execute_script(script: CommandScript, session: ShellSession | None = None) -> tuple[str, ...]:
    """Run every script step in one session.

    Args:
        script: Validated script.
        session: Optional session to reuse; a fresh one is created otherwise.

    Returns:
        Output lines of all steps in order.

    Raises:
        ScriptError: If the default working directory is not a directory, or
            if any step fails; earlier steps stay applied.
    """
    active_session = session or ShellSession()
    if script.cwd is not None:
        _enter_default_cwd(active_session, script.cwd)
    output_lines: list[str] = []
    for index, step in enumerate(script.steps):
        try:
            output_lines.extend(dispatch_command(active_session, step.command, step.args))
        except LinkFsError as error:
            raise ScriptError(
                f"Script step #{index + 1} ({step.command}) failed: {error}"
            ) from error
    return tuple(output_lines)


def execute_script_file(script_path: str, session: ShellSession | None = None) -> tuple[str, ...]:
    """Load and execute a script file, returning printable output lines."""
    return execute_script(load_script(script_path), session)


def _enter_default_cwd(session: ShellSession, cwd: str) -> None:
    try:
        link = session.fs.resolve(cwd)
    except LinkFsError as error:
        raise ScriptError(f"Script default cwd '{cwd}' does not resolve: {error}") from error
    if not is_directory(link.target):
        raise ScriptError(f"Script default cwd '{cwd}' is not a directory.")
    session.current_path = cwd


def _load_yaml_payload(script_path: str) -> object:
    script_file = Path(script_path).expanduser().resolve()
    if not script_file.exists():
        raise ScriptError(
            f"Script file does not exist at {script_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(script_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise ScriptError(
            f"Failed to read script at {script_file}: {error}. Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise ScriptError(
            f"Failed to parse YAML script at {script_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise ScriptError(f"Script at {script_file} is empty. Define 'version' and 'steps'.")
    return payload


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        for key in value:
            if not isinstance(key, str):
                raise ScriptError(
                    f"Invalid {context}: expected string keys, got {type(key).__name__}."
                )
        return cast(Mapping[str, object], value)
    raise ScriptError(f"Invalid {context}: expected object mapping, got {type(value).__name__}.")


def _expect_sequence(value: object, context: str) -> Sequence[object]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    raise ScriptError(f"Invalid {context}: expected list, got {type(value).__name__}.")


def _parse_version(root_mapping: Mapping[str, object]) -> int:
    raw_version = root_mapping.get("version")
    if not isinstance(raw_version, int) or isinstance(raw_version, bool):
        raise ScriptError(f"Script field 'version' must be an integer. Set version: {SCRIPT_VERSION}.")
    if raw_version != SCRIPT_VERSION:
        raise ScriptError(f"Unsupported script version {raw_version}. Use version: {SCRIPT_VERSION}.")
    return raw_version


def _parse_defaults(root_mapping: Mapping[str, object]) -> str | None:
    raw_defaults = root_mapping.get("defaults")
    if raw_defaults is None:
        return None
    defaults_mapping = _expect_mapping(raw_defaults, "script defaults")
    unknown_keys = sorted(set(defaults_mapping) - {"cwd"})
    if unknown_keys:
        raise ScriptError(f"Script defaults contain unknown fields: {', '.join(unknown_keys)}.")
    raw_cwd = defaults_mapping.get("cwd")
    if raw_cwd is None:
        return None
    if not isinstance(raw_cwd, str) or not is_abs_path(raw_cwd.strip()):
        raise ScriptError("Script field 'defaults.cwd' must be an absolute path such as '/docs'.")
    return normalize_path(raw_cwd.strip())


def _parse_steps(root_mapping: Mapping[str, object]) -> tuple[ScriptStep, ...]:
    raw_steps = root_mapping.get("steps")
    if raw_steps is None:
        raise ScriptError("Script missing required field 'steps'. Add a non-empty list of commands.")
    step_rows = _expect_sequence(raw_steps, "script steps")
    if len(step_rows) == 0:
        raise ScriptError("Script field 'steps' must include at least one step.")
    return tuple(_parse_step(step_value, index) for index, step_value in enumerate(step_rows))


def _parse_step(step_value: object, step_index: int) -> ScriptStep:
    context = f"script step #{step_index + 1}"
    step_mapping = _expect_mapping(step_value, context)
    unknown_keys = sorted(set(step_mapping) - {"command", "args"})
    if unknown_keys:
        raise ScriptError(f"Invalid {context}: unknown fields {', '.join(unknown_keys)}.")
    raw_command = step_mapping.get("command")
    if not isinstance(raw_command, str):
        raise ScriptError(f"Invalid {context}: field 'command' must be a string.")
    if raw_command not in command_names():
        raise ScriptError(
            f"Unsupported command '{raw_command}' in {context}. "
            f"Use one of: {', '.join(command_names())}."
        )
    raw_args = step_mapping.get("args", [])
    args = tuple(_parse_arg(value, context) for value in _expect_sequence(raw_args, f"{context} args"))
    return ScriptStep(command=raw_command, args=args)


def _parse_arg(value: object, context: str) -> str:
    if isinstance(value, bool):
        raise ScriptError(f"Invalid {context}: arguments must be strings or integers.")
    if isinstance(value, (str, int)):
        return str(value)
    raise ScriptError(f"Invalid {context}: arguments must be strings or integers.")


def _validate_root_keys(root_mapping: Mapping[str, object]) -> None:
    allowed_keys = {"version", "defaults", "steps"}
    unknown_keys = sorted(set(root_mapping) - allowed_keys)
    if unknown_keys:
        raise ScriptError(f"Script contains unknown root fields: {', '.join(unknown_keys)}.")
