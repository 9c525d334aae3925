"""Dispatch of command lines to built-in commands or external programs."""

from __future__ import annotations

import copy
from pathlib import Path

from aorta.builtins import (
    AliasCommand,
    CdCommand,
    Command,
    ExitCommand,
    ExportCommand,
    HistoryCommand,
    SourceCommand,
)
from aorta.envvars import EnvVarManager
from aorta.errors import (
    CommandError,
    EnvError,
    ExecutionError,
    HistoryError,
    ProcessError,
    ShellError,
)
from aorta.flags import Flags
from aorta.history import History
from aorta.pathexpand import PathExpander
from aorta.process import ProcessExecutor

_HISTORY_FILE = ".aorta_history"
_HISTORY_SIZE = 1000


class CommandExecutor:
    """Runs a command by name, using a built-in when one is registered."""

    def __init__(self, flags: Flags | None = None, history_file=None) -> None:
        flags = flags if flags is not None else Flags()
        self.process_executor = ProcessExecutor(flags)
        try:
            self.env_vars = EnvVarManager()
        except EnvError as exc:
            raise ExecutionError(f"Failed to create env manager: {exc}") from exc

        if history_file is None:
            try:
                history_file = PathExpander().get_home_dir() / _HISTORY_FILE
            except ShellError as exc:
                raise CommandError(f"IO error: {exc}") from exc
        try:
            history = History(Path(history_file), _HISTORY_SIZE)
        except HistoryError as exc:
            raise ExecutionError(f"Failed to create history: {exc}") from exc

        self._commands: dict[str, Command] = {"cd": CdCommand()}
        # Sourced files run through a copy that knows only the commands
        # registered before ``source`` itself.
        self._commands["source"] = SourceCommand(self._snapshot())
        self._commands["exit"] = ExitCommand()
        self._commands["alias"] = AliasCommand({})
        self._commands["history"] = HistoryCommand(history)
        self._commands["export"] = ExportCommand(self.env_vars)

    def _snapshot(self) -> CommandExecutor:
        clone = copy.copy(self)
        clone._commands = dict(self._commands)
        return clone

    @property
    def builtins(self) -> list[str]:
        """Names of the registered built-in commands, sorted."""
        return sorted(self._commands)

    def execute(self, command: str, args=()) -> int | None:
        """Run ``command`` with ``args``.

        Built-ins return ``None``; external programs return their exit code,
        or ``None`` when the program does not exist.
        """
        args = list(args)
        builtin = self._commands.get(command)
        if builtin is not None:
            builtin.execute(args)
            return None
        try:
            return self.process_executor.spawn_process([command, *args])
        except ProcessError as exc:
            raise ExecutionError(str(exc)) from exc

    def is_builtin(self, command: str) -> bool:
        return command in self._commands