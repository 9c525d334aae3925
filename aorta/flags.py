"""Command-line flags understood by the shell."""

from __future__ import annotations

from dataclasses import dataclass

from aorta.errors import ShellError

_VALUE_FLAGS = frozenset({"-c", "--config"})


@dataclass
class Flag:
    """One command-line option and the value it was given, if any."""

    short: str
    long: str
    description: str
    value: str | None = None


class Flags:
    """The set of options the shell accepts, with their parsed values."""

    def __init__(self) -> None:
        self.flags: dict[str, Flag] = {
            "help": Flag("-h", "--help", "Print this help message"),
            "version": Flag("-v", "--version", "Show version information"),
            "config": Flag("-c", "--config", "Specify custom config file path"),
            "quiet": Flag("-q", "--quiet", "Suppress output"),
            "debug": Flag("-d", "--debug", "Enable debug output"),
        }

    def parse(self, args) -> None:
        """Record the options found in ``args``; unknown arguments are ignored."""
        remaining = iter(args)
        for arg in remaining:
            for flag in self.flags.values():
                if arg not in (flag.short, flag.long):
                    continue
                if arg in _VALUE_FLAGS:
                    try:
                        flag.value = next(remaining)
                    except StopIteration:
                        raise ShellError(
                            f"Flag error: Flag {arg} requires a value"
                        ) from None
                else:
                    flag.value = "true"

    def is_set(self, name: str) -> bool:
        return self.get_value(name) is not None

    def get_value(self, name: str) -> str | None:
        flag = self.flags.get(name)
        return flag.value if flag is not None else None

    def format_help(self) -> str:
        lines = ["Usage: aorta [OPTIONS]", "", "Options:"]
        lines.extend(
            f"  {flag.short}, {flag.long:<15} {flag.description}"
            for flag in self.flags.values()
        )
        return "\n".join(lines)

    def print_help(self) -> None:
        print(self.format_help())