"""Exception hierarchy used throughout the shell."""

from __future__ import annotations


class ShellError(Exception):
    """Base class for every error the shell reports."""


class ProcessError(ShellError):
    """A child process could not be started or waited for."""


class EnvError(ShellError):
    """An environment variable or environment path could not be used."""


class ConfigError(ShellError):
    """A startup configuration file could not be processed."""


class CommandError(ShellError):
    """A built-in or external command failed."""


class CommandNotFoundError(CommandError):
    """The named command does not exist."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"command not found: {command}")


class InvalidArgumentsError(CommandError):
    """A command was called with arguments it cannot use."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"invalid arguments: {detail}")


class ExecutionError(CommandError):
    """A command started but could not complete its work."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"execution error: {detail}")


class HistoryError(ShellError):
    """The command history could not be read, written or changed."""


class InvalidIndexError(HistoryError):
    """A history position outside the stored entries was requested."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Invalid history index: {index}")


class EmptyCommandError(HistoryError):
    """An empty command was offered to the history."""

    def __init__(self) -> None:
        super().__init__("Empty command")


class PipelineError(ShellError):
    """A command line could not be parsed or run as a pipeline."""


class PipelineParseError(PipelineError):
    """The command line is not a well-formed pipeline."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Parse error: {detail}")


class PipelineExecutionError(PipelineError):
    """A stage of the pipeline failed while running."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Execution error: {detail}")