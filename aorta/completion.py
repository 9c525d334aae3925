"""Tab completion of command names and file paths."""

from __future__ import annotations

import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from aorta.errors import ShellError
from aorta.highlight import SyntaxHighlighter
from aorta.pathexpand import PathExpander

_BUILTINS = ("cd", "exit")


@dataclass(frozen=True)
class Completion:
    """One candidate: what is shown and what is inserted."""

    display: str
    replacement: str


def _path_commands() -> Iterator[str]:
    for directory in os.environ.get("PATH", "").split(os.pathsep):
        if not directory:
            continue
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    try:
                        if entry.is_symlink() or entry.is_file(follow_symlinks=False):
                            yield entry.name
                    except OSError:
                        continue
        except OSError:
            continue


class CommandCompleter:
    """Completes built-in commands, programs on PATH and aliases."""

    def __init__(self) -> None:
        self._commands: set[str] = set()
        self._aliases: dict[str, str] = {}
        self.refresh_commands()

    def refresh_commands(self) -> None:
        commands = set(_BUILTINS)
        commands.update(_path_commands())
        self._commands = commands

    def update_aliases(self, aliases: Mapping[str, str]) -> None:
        self._aliases = dict(aliases)

    def complete_command(self, line: str) -> list[Completion]:
        text = line.strip()
        matches = [
            Completion(cmd, cmd) for cmd in sorted(self._commands) if cmd.startswith(text)
        ]
        matches.extend(
            Completion(f"{alias} (alias)", alias)
            for alias in sorted(self._aliases)
            if alias.startswith(text)
        )
        return matches


def _is_current_dir(directory: str) -> bool:
    return (
        bool(directory)
        and not directory.startswith("/")
        and all(part in ("", ".") for part in directory.split("/"))
    )


class PathCompleter:
    """Completes file and directory names, keeping the path style typed."""

    def __init__(self, expander: PathExpander | None = None) -> None:
        self.path_expander = expander or PathExpander()

    def complete_path(self, incomplete: str) -> list[Completion]:
        directory, prefix, is_tilde = self._parse_path_input(incomplete)
        return self._path_matches(directory, prefix, is_tilde)

    @staticmethod
    def _parse_path_input(incomplete: str) -> tuple[str, str, bool]:
        if not incomplete:
            return ".", "", False
        is_tilde = incomplete.startswith("~")
        if incomplete.endswith("/"):
            return incomplete, "", is_tilde
        head, tail = os.path.split(incomplete)
        if tail == "..":
            tail = ""
        return head or ".", tail, is_tilde

    def _path_matches(self, directory: str, prefix: str, is_tilde: bool) -> list[Completion]:
        search_dir = directory
        if is_tilde:
            try:
                search_dir = str(self.path_expander.expand(directory))
            except ShellError:
                search_dir = directory
        matches: list[Completion] = []
        try:
            with os.scandir(search_dir) as entries:
                for entry in entries:
                    if entry.name.startswith(prefix):
                        matches.append(
                            self._completion(entry.name, entry.path, directory, is_tilde)
                        )
        except OSError:
            return []
        matches.sort(key=lambda item: item.display)
        return matches

    @staticmethod
    def _completion(name: str, path: str, directory: str, is_tilde: bool) -> Completion:
        if is_tilde:
            first, _, rest = directory.partition("/")
            remainder = rest if first == "~" else directory
            relative = "~/" + (os.path.join(remainder, name) if remainder else name)
        elif _is_current_dir(directory):
            relative = name
        else:
            relative = os.path.join(directory, name)
        if os.path.isdir(path):
            return Completion(f"{relative}/", f"{relative}/")
        return Completion(relative, f"{relative} ")


class ShellCompleter:
    """Line-editor helper: completes the word at the cursor and colours input."""

    def __init__(self, highlighter: SyntaxHighlighter | None = None) -> None:
        self.command_completer = CommandCompleter()
        self.path_completer = PathCompleter()
        self.highlighter = highlighter or SyntaxHighlighter()

    def refresh_commands(self) -> None:
        self.command_completer.refresh_commands()

    def update_aliases(self, aliases: Mapping[str, str]) -> None:
        self.command_completer.update_aliases(aliases)

    def complete(self, line: str, pos: int) -> tuple[int, list[Completion]]:
        """Return where the replaced word starts and the candidates for it."""
        before = line[:pos]
        words = before.split()
        if before.endswith(" "):
            words.append("")
        if not words:
            return 0, self.command_completer.complete_command("")
        if len(words) == 1:
            word = words[0]
            start = max(before.rfind(word), 0)
            return start, self.command_completer.complete_command(word)
        last = words[-1]
        if not last:
            start = pos
        else:
            found = before.rfind(last)
            start = found if found >= 0 else pos
        return start, self.path_completer.complete_path(last)

    def highlight(self, line: str, pos: int) -> str:
        return self.highlighter.highlight_command(line)

    def highlight_hint(self, hint: str) -> str:
        return self.highlighter.highlight_hint(hint)