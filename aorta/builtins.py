"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import abc
import os
import re

from aorta.envvars import EnvVarManager
from aorta.errors import (
    CommandError,
    EnvError,
    ExecutionError,
    HistoryError,
    InvalidArgumentsError,
    ShellError,
)
from aorta.history import (
    CommandEntry,
    EventEntry,
    History,
    SearchContains,
    SearchLastN,
    SearchPrefix,
)
from aorta.pathexpand import PathExpander

_EXPORT_USAGE = "Export syntax: export NAME=VALUE"
_INDEX = re.compile(r"\+?[0-9]+")


def format_timestamp(timestamp: int) -> str:
    """Show the time of day of a Unix timestamp as HH:MM:SS (UTC)."""
    secs = timestamp % 60
    mins = (timestamp // 60) % 60
    hours = (timestamp // 3600) % 24
    return f"{hours:02}:{mins:02}:{secs:02}"


def _strip_quotes(value: str, quotes: str = "\"'") -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in quotes:
        return value[1:-1]
    return value


class Command(abc.ABC):
    """A built-in command."""

    @abc.abstractmethod
    def execute(self, args) -> None:
        """Run the command with ``args``; raise CommandError on failure."""


class AliasCommand(Command):
    """``alias`` lists aliases or defines one as ``name='command'``."""

    def __init__(self, aliases: dict[str, str] | None = None) -> None:
        self.aliases = {} if aliases is None else aliases

    def execute(self, args) -> None:
        args = list(args)
        if not args:
            for alias, command in self.aliases.items():
                print(f"{alias}='{command}'")
            return
        name, sep, value = " ".join(args).partition("=")
        if not sep:
            raise InvalidArgumentsError("Usage: alias name='command'")
        self.aliases[name.strip()] = value.strip().strip("'\"")


class CdCommand(Command):
    """``cd`` changes the working directory, to the home directory by default."""

    def __init__(self) -> None:
        self.path_expander = PathExpander()

    def execute(self, args) -> None:
        args = list(args)
        target = args[0] if args else "~"
        try:
            path = self.path_expander.expand(target)
        except ShellError as exc:
            raise ExecutionError(str(exc)) from exc
        try:
            os.chdir(path)
        except OSError as exc:
            raise ExecutionError(f"Failed to change directory: {exc}") from exc


class ExitCommand(Command):
    """``exit`` ends the shell."""

    def execute(self, args) -> None:
        raise SystemExit(0)


class ExportCommand(Command):
    """``export NAME=VALUE`` sets an environment variable."""

    def __init__(self, env_vars: EnvVarManager) -> None:
        self.env_vars = env_vars

    @staticmethod
    def _parse_export(args: list[str]) -> tuple[str, str]:
        if not args:
            raise InvalidArgumentsError(_EXPORT_USAGE)
        name, sep, value = args[0].partition("=")
        if not sep:
            raise InvalidArgumentsError(_EXPORT_USAGE)
        name = name.strip()
        value = _strip_quotes(value.strip())
        if not name:
            raise InvalidArgumentsError("Variable name cannot be empty")
        return name, value

    def execute(self, args) -> None:
        name, value = self._parse_export(list(args))
        try:
            self.env_vars.set(name, value)
        except EnvError as exc:
            raise InvalidArgumentsError(
                str(exc).removeprefix("Invalid value: ")
            ) from exc


class HistoryCommand(Command):
    """``history`` shows, searches, summarises, clears or edits the history."""

    def __init__(self, history: History) -> None:
        self.history = history

    def execute(self, args) -> None:
        args = list(args)
        if not args:
            self._show_recent(10)
            return
        subcommand, rest = args[0], args[1:]
        if subcommand == "search":
            self._search(rest)
        elif subcommand == "stats":
            self._show_statistics()
        elif subcommand == "clear":
            self.history.clear()
        elif subcommand == "delete":
            self._delete_entry(rest)
        else:
            raise InvalidArgumentsError("Unknown history subcommand")

    def format_entry(self, entry) -> str:
        match entry:
            case CommandEntry(command, timestamp, exit_code, duration):
                mark = "✓" if exit_code == 0 else "✗"
                return (
                    f"{format_timestamp(timestamp)} [{mark}] ({exit_code}) "
                    f"{command} [{duration}ms]"
                )
            case EventEntry(description, timestamp):
                return f"{format_timestamp(timestamp)} [EVENT] {description}"
        raise ExecutionError(f"Unknown history entry: {entry!r}")

    def _show_recent(self, count: int) -> None:
        for entry in self.history.get_recent(count):
            print(self.format_entry(entry))

    def _search(self, args: list[str]) -> None:
        first = args[0] if args else None
        if first == "--prefix":
            mode = SearchPrefix()
        elif first == "--last":
            count = args[1] if len(args) > 1 else ""
            mode = SearchLastN(int(count) if _INDEX.fullmatch(count) else 10)
        else:
            mode = SearchContains()
        query = args[-1] if args else ""
        for entry in self.history.search(mode, query):
            print(self.format_entry(entry))

    def _show_statistics(self) -> None:
        stats = self.history.calculate_stats()
        print("History Statistics:")
        print(f"Total commands: {stats.total_commands}")
        print(f"Unique commands: {stats.unique_commands}")
        print(f"Failed commands: {stats.failed_commands}")
        print(f"Average duration: {stats.average_duration}ms")
        print("\nMost used commands:")
        for command, count in stats.most_used[:5]:
            print(f"  {command} ({count}x)")

    def _delete_entry(self, args: list[str]) -> None:
        if not args:
            raise InvalidArgumentsError("Index required")
        if not _INDEX.fullmatch(args[0]):
            raise InvalidArgumentsError("Invalid index")
        try:
            self.history.delete_at(int(args[0]))
        except HistoryError as exc:
            raise CommandError(f"History error: {exc}") from exc


class SourceCommand(Command):
    """``source FILE`` runs each command line of a file through an executor."""

    def __init__(self, executor) -> None:
        self.executor = executor
        self.path_expander = PathExpander()

    def execute(self, args) -> None:
        args = list(args)
        if not args:
            raise InvalidArgumentsError("Source command requires a file path")
        try:
            path = self.path_expander.expand(args[0])
        except ShellError as exc:
            raise ExecutionError(str(exc)) from exc
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ExecutionError(f"Failed to read file: {exc}") from exc

        for raw in content.split("\n"):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            command, *rest = line.split()
            try:
                self.executor.execute(command, rest)
            except ShellError as exc:
                raise ExecutionError(f"Failed to execute '{line}': {exc}") from exc