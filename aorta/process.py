"""Running external programs in the foreground."""

from __future__ import annotations

import os
import signal
import subprocess
import sys

from aorta.errors import ProcessError, ShellError
from aorta.pathexpand import PathExpander


def _ignore_sigint(signum, frame) -> None:
    """Leave the interrupt to the child process."""


def setup_signal_handlers():
    """Stop SIGINT from interrupting the shell; return the previous handler."""
    try:
        return signal.signal(signal.SIGINT, _ignore_sigint)
    except ValueError as exc:
        raise ProcessError(f"Signal error: {exc}") from exc


def _describe_status(returncode: int) -> str:
    if returncode >= 0:
        return f"exit status: {returncode}"
    number = -returncode
    try:
        return f"signal: {number} ({signal.Signals(number).name})"
    except ValueError:
        return f"signal: {number}"


class ProcessExecutor:
    """Starts external commands with the shell's terminal and environment."""

    def __init__(self, flags=None) -> None:
        self.quiet_mode = flags is not None and flags.is_set("quiet")
        self.path_expander = PathExpander()

    def _expand(self, arg: str) -> str:
        if "~" not in arg:
            return arg
        try:
            return str(self.path_expander.expand(arg))
        except ShellError:
            return arg

    def spawn_process(self, args) -> int | None:
        """Run ``args`` and wait for it.

        Returns the exit code, or ``None`` when the program does not exist.
        """
        args = list(args)
        if not args:
            raise ProcessError("Other error: no command given")
        expanded = [self._expand(arg) for arg in args]
        sys.stdout.flush()
        try:
            child = subprocess.Popen(expanded, env=dict(os.environ))
        except FileNotFoundError:
            if not self.quiet_mode:
                print(f"aorta: command not found: {args[0]}", file=sys.stderr)
            return None
        except OSError as exc:
            raise ProcessError(f"Other error: {exc}") from exc

        setup_signal_handlers()

        try:
            returncode = child.wait()
        except FileNotFoundError as exc:
            raise ProcessError(f"Command not found: {args[0]}") from exc
        except OSError as exc:
            raise ProcessError(f"Other error: {exc}") from exc

        if returncode != 0 and not self.quiet_mode:
            print(f"Process exited with status: {_describe_status(returncode)}")
        return returncode