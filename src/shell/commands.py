"""Shell command table and handlers.

Each handler receives the session and its positional arguments and returns
printable output lines. Filesystem failures propagate as ``LinkFsError``
subclasses so the caller decides how to report them.
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

from core.constants import (
    DIRECTORY_FLAG,
    INVALID_VERSION_MESSAGE,
    LISTING_ROW_TEMPLATE,
    ROOT_PATH,
    UNKNOWN_COMMAND_MESSAGE,
)
from core.errors import CommandError, TypeMismatchError
from core.logging_config import get_logger
from core.types import HistoryReport
from shell.session import ShellSession
from store.directory import listing_rows
from store.entity import (
    Entity,
    append_text,
    empty_directory,
    empty_file,
    is_directory,
    is_file,
    version_at,
)
from store.link import Link, dereference_current, history_report
from store.paths import normalize_path

CommandHandler = Callable[[ShellSession, Sequence[str]], list[str]]

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class CommandSpec:
    """One entry of the command table.

    Attributes:
        name: Command word typed by the user.
        usage: Argument synopsis shown in help and usage errors.
        summary: One-line description.
        handler: Function executing the command.
        min_args: Minimum positional argument count.
        max_args: Maximum positional argument count, None when unbounded.
    """

    name: str
    usage: str
    summary: str
    handler: CommandHandler
    min_args: int = 0
    max_args: int | None = 0


def dispatch_line(session: ShellSession, line: str) -> list[str]:
    """Tokenize one input line and run the named command.

    Args:
        session: Active shell session.
        line: Raw input line; quoted words stay together.

    Returns:
        Output lines produced by the command.

    Raises:
        CommandError: If quoting is unbalanced or usage is wrong.
        LinkFsError: If the filesystem rejects the operation.
    """
    try:
        tokens = shlex.split(line)
    except ValueError as error:
        raise CommandError(f"Could not parse command line: {error}.") from error
    if not tokens:
        return []
    return dispatch_command(session, tokens[0], tokens[1:])


def dispatch_command(session: ShellSession, name: str, args: Sequence[str]) -> list[str]:
    """Run a command by name with pre-split arguments.

    Unknown commands produce the ``Command not understood.`` line rather
    than an error, matching the interactive contract.
    """
    spec = COMMANDS.get(name)
    if spec is None:
        return [UNKNOWN_COMMAND_MESSAGE]
    _check_arity(spec, args)
    _LOGGER.debug("command_dispatched", command=name, arg_count=len(args))
    return spec.handler(session, args)


def command_names() -> tuple[str, ...]:
    return tuple(sorted(COMMANDS))


def _check_arity(spec: CommandSpec, args: Sequence[str]) -> None:
    too_few = len(args) < spec.min_args
    too_many = spec.max_args is not None and len(args) > spec.max_args
    if too_few or too_many:
        raise CommandError(f"Usage: {spec.name} {spec.usage}".rstrip() + ".")


def _home(session: ShellSession, args: Sequence[str]) -> list[str]:
    session.current_path = ROOT_PATH
    return []


def _enter(session: ShellSession, args: Sequence[str]) -> list[str]:
    path = session.absolute(args[0])
    link = session.fs.resolve(path)
    if not is_directory(link.target):
        raise TypeMismatchError(f"Cannot enter '{path}': it is not a directory.")
    session.current_path = normalize_path(path)
    return []


def _listfiles(session: ShellSession, args: Sequence[str]) -> list[str]:
    """Render the working directory (or the given one) as a listing table."""
    path = normalize_path(session.absolute(args[0])) if args else session.current_path
    directory = _require_directory(session.fs.resolve(path), path)
    lines = [f"=== {path} ==="]
    for row in listing_rows(directory):
        flag = DIRECTORY_FLAG if row.is_directory else ""
        lines.append(LISTING_ROW_TEMPLATE % (row.name, flag, row.size))
    return lines


def _mkdir(session: ShellSession, args: Sequence[str]) -> list[str]:
    session.fs.create_at(session.absolute(args[0]), empty_directory())
    return []


def _create(session: ShellSession, args: Sequence[str]) -> list[str]:
    session.fs.create_at(session.absolute(args[0]), empty_file())
    return []


def _show(session: ShellSession, args: Sequence[str]) -> list[str]:
    link = session.resolve(args[0])
    if is_directory(link.target):
        return [name for name, _entry in _sorted_table(link)]
    return [render_content(dereference_current(link))]


def _append(session: ShellSession, args: Sequence[str]) -> list[str]:
    """Append text to a file; all arguments but the last form the text."""
    text = " ".join(args[:-1])
    path = session.absolute(args[-1])
    link = session.fs.resolve(path)
    _require_file(link, path)
    session.fs.update(link.target, append_text(text))
    return []


def _link(session: ShellSession, args: Sequence[str]) -> list[str]:
    existing = session.resolve(args[1])
    session.fs.create_at(session.absolute(args[0]), existing.target)
    return []


def _delete(session: ShellSession, args: Sequence[str]) -> list[str]:
    session.fs.delete(session.resolve(args[0]))
    return []


def _deleteall(session: ShellSession, args: Sequence[str]) -> list[str]:
    session.fs.purge(session.resolve(args[0]).target)
    return []


def _hist(session: ShellSession, args: Sequence[str]) -> list[str]:
    return format_history(history_report(session.resolve(args[0])))


def _move(session: ShellSession, args: Sequence[str]) -> list[str]:
    session.fs.move(session.absolute(args[0]), session.absolute(args[1]))
    return []


def _restore(session: ShellSession, args: Sequence[str]) -> list[str]:
    """Replace file content with an earlier version of the same file."""
    try:
        version_num = int(args[0])
    except ValueError as error:
        raise CommandError(f"Version must be an integer, got '{args[0]}'.") from error
    path = session.absolute(args[1])
    link = session.fs.resolve(path)
    _require_file(link, path)
    content = version_at(link.target, version_num)
    if content is None:
        return [INVALID_VERSION_MESSAGE]
    session.fs.replace(link.target, content)
    return []


def _help(session: ShellSession, args: Sequence[str]) -> list[str]:
    return [f"{spec.name} {spec.usage}".rstrip() + f"  - {spec.summary}" for spec in _sorted_specs()]


def format_history(report: HistoryReport) -> list[str]:
    """Render a history report as console lines.

    Args:
        report: History of one link.

    Returns:
        Header lines followed by one line per version.
    """
    lines = [
        f"History for {report.link_name}",
        f"Entity version at link creation: {report.starting_version}",
    ]
    for index, content in enumerate(report.versions):
        lines.append(f"Ver {index}: {render_content(content)}")
    return lines


def render_content(content: object) -> str:
    """Render a snapshot for display; directory tables show their names."""
    if content is None:
        return ""
    if isinstance(content, Mapping):
        return "[" + ", ".join(sorted(content)) + "]"
    return str(content)


def _require_file(link: Link, path: str) -> None:
    if not is_file(link.target):
        raise TypeMismatchError(f"'{path}' is not a file.")


def _require_directory(link: Link, path: str) -> Entity:
    if not is_directory(link.target):
        raise TypeMismatchError(f"'{path}' is not a directory.")
    return link.target


def _sorted_table(link: Link) -> list[tuple[str, Link]]:
    table = dereference_current(link)
    return sorted(table.items())  # type: ignore[attr-defined]


def _sorted_specs() -> list[CommandSpec]:
    return [COMMANDS[name] for name in command_names()]


COMMANDS: Mapping[str, CommandSpec] = {
    spec.name: spec
    for spec in (
        CommandSpec("home", "", "Return to the root directory", _home),
        CommandSpec("enter", "PATH", "Change the working directory", _enter, 1, 1),
        CommandSpec("listfiles", "[PATH]", "List a directory", _listfiles, 0, 1),
        CommandSpec("mkdir", "PATH", "Create an empty directory", _mkdir, 1, 1),
        CommandSpec("create", "PATH", "Create an empty file", _create, 1, 1),
        CommandSpec("show", "PATH", "Print current content", _show, 1, 1),
        CommandSpec("append", "TEXT PATH", "Append text to a file", _append, 2, None),
        CommandSpec("link", "NEW EXISTING", "Add a hard link to an entity", _link, 2, 2),
        CommandSpec("delete", "PATH", "Remove one name", _delete, 1, 1),
        CommandSpec("deleteall", "PATH", "Remove every name of an entity", _deleteall, 1, 1),
        CommandSpec("hist", "PATH", "Show versions since the link was made", _hist, 1, 1),
        CommandSpec("move", "OLD NEW", "Rename an entry", _move, 2, 2),
        CommandSpec("restore", "VERSION PATH", "Restore an earlier file version", _restore, 2, 2),
        CommandSpec("help", "", "List commands", _help),
    )
}
