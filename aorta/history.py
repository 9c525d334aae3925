"""Command history kept in memory and mirrored to a history file."""

from __future__ import annotations

import re
import time
from collections import Counter, deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from aorta.errors import EmptyCommandError, HistoryError, InvalidIndexError

_FIELD_SEP = "\x1f"
_UNSIGNED = re.compile(r"\+?[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")
_U64_MAX = 2**64 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _now() -> int:
    return int(time.time())


@dataclass(frozen=True)
class CommandEntry:
    """A command line that was run, with its outcome."""

    command: str
    timestamp: int
    exit_code: int = 0
    duration: int = 0

    @property
    def text(self) -> str:
        return self.command


@dataclass(frozen=True)
class EventEntry:
    """A note recorded in the history that is not a command."""

    description: str
    timestamp: int

    @property
    def text(self) -> str:
        return self.description


HistoryEntry = Union[CommandEntry, EventEntry]


def new_command(command: str, exit_code: int, duration: int) -> CommandEntry:
    """Create a command entry stamped with the current time."""
    return CommandEntry(command, _now(), exit_code, duration)


def new_event(description: str) -> EventEntry:
    """Create an event entry stamped with the current time."""
    return EventEntry(description, _now())


@dataclass(frozen=True)
class SearchPrefix:
    """Match entries whose text starts with the query."""


@dataclass(frozen=True)
class SearchContains:
    """Match entries whose text contains the query."""


@dataclass(frozen=True)
class SearchTimeRange:
    """Match entries stamped between ``start`` and ``end``, inclusive."""

    start: int
    end: int


@dataclass(frozen=True)
class SearchLastN:
    """The ``n`` most recent entries, newest first."""

    n: int


HistorySearchMode = Union[SearchPrefix, SearchContains, SearchTimeRange, SearchLastN]


@dataclass
class HistoryStats:
    """Summary figures over the stored history."""

    total_commands: int = 0
    unique_commands: int = 0
    failed_commands: int = 0
    average_duration: int = 0
    most_used: list[tuple[str, int]] = field(default_factory=list)


def _parse_number(text: str, pattern: re.Pattern, low: int, high: int, what: str) -> int:
    if pattern.fullmatch(text):
        value = int(text)
        if low <= value <= high:
            return value
    raise HistoryError(f"File operation error: Invalid {what}")


class HistoryFile:
    """Reads and appends history entries, one per line, fields split by US."""

    def __init__(self, path) -> None:
        self.path = Path(path)

    def load_entries(self) -> list[HistoryEntry]:
        if not self.path.exists():
            return []
        entries: list[HistoryEntry] = []
        try:
            with self.path.open(encoding="utf-8", newline="") as handle:
                for raw in handle:
                    line = raw[:-1] if raw.endswith("\n") else raw
                    if line.endswith("\r") and raw.endswith("\n"):
                        line = line[:-1]
                    if line.strip():
                        entries.append(self._parse_line(line))
        except (OSError, UnicodeDecodeError) as exc:
            raise HistoryError(f"IO error: {exc}") from exc
        return entries

    @staticmethod
    def _parse_line(line: str) -> HistoryEntry:
        parts = line.split(_FIELD_SEP)
        if len(parts) != 4:
            return new_command(line, 0, 0)
        command, timestamp, exit_code, duration = parts
        return CommandEntry(
            command,
            _parse_number(timestamp, _UNSIGNED, 0, _U64_MAX, "timestamp"),
            _parse_number(exit_code, _SIGNED, _I32_MIN, _I32_MAX, "exit code"),
            _parse_number(duration, _UNSIGNED, 0, _U64_MAX, "duration"),
        )

    def append_entry(self, entry: HistoryEntry) -> None:
        match entry:
            case CommandEntry(command, timestamp, exit_code, duration):
                fields = (command, timestamp, exit_code, duration)
            case EventEntry(description, timestamp):
                fields = (description, timestamp, 0, 0)
            case _:
                raise HistoryError(f"Unknown history entry: {entry!r}")
        try:
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(_FIELD_SEP.join(str(item) for item in fields) + "\n")
        except OSError as exc:
            raise HistoryError(f"IO error: {exc}") from exc


class History:
    """Bounded list of history entries with command usage counts."""

    def __init__(self, history_file, max_entries: int = 1000) -> None:
        self._file = HistoryFile(history_file)
        self.max_entries = max_entries
        try:
            loaded = self._file.load_entries()
        except HistoryError as exc:
            raise HistoryError(f"File operation error: {exc}") from exc
        self._entries: deque[HistoryEntry] = deque(loaded)
        self._frequencies: Counter[str] = Counter(
            entry.command for entry in loaded if isinstance(entry, CommandEntry)
        )

    @property
    def path(self) -> Path:
        return self._file.path

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(tuple(self._entries))

    def add(self, command: str) -> None:
        self.add_with_details(command, 0, 0)

    def add_with_details(self, command: str, exit_code: int, duration: int) -> None:
        """Record a command, writing it to the file before keeping it in memory."""
        if not command.strip():
            raise EmptyCommandError()
        entry = new_command(command, exit_code, duration)
        try:
            self._file.append_entry(entry)
        except HistoryError as exc:
            raise HistoryError(f"File operation error: {exc}") from exc
        self._frequencies[command] += 1
        self._entries.append(entry)
        self._trim()

    def get_recent(self, count: int) -> list[HistoryEntry]:
        """Up to ``count`` entries, newest first."""
        return list(reversed(self._entries))[:count]

    def clear(self) -> None:
        """Forget every entry held in memory."""
        self._entries.clear()
        self._frequencies.clear()

    def delete_at(self, index: int) -> None:
        """Remove the entry at ``index`` (oldest is 0) and rewrite the file."""
        if not 0 <= index < len(self._entries):
            raise InvalidIndexError(index)
        entry = self._entries[index]
        del self._entries[index]
        self._forget(entry)
        self._rewrite_file()

    def search(self, mode: HistorySearchMode, query: str) -> list[HistoryEntry]:
        match mode:
            case SearchPrefix():
                return [e for e in self._entries if e.text.startswith(query)]
            case SearchContains():
                return [e for e in self._entries if query in e.text]
            case SearchTimeRange(start, end):
                return [e for e in self._entries if start <= e.timestamp <= end]
            case SearchLastN(n):
                return self.get_recent(n)
        raise HistoryError(f"Unknown search mode: {mode!r}")

    def calculate_stats(self) -> HistoryStats:
        commands = [e for e in self._entries if isinstance(e, CommandEntry)]
        total = len(commands)
        total_duration = sum(e.duration for e in commands)
        most_used = sorted(
            ((cmd, count) for cmd, count in self._frequencies.items() if count > 0),
            key=lambda item: (-item[1], item[0]),
        )
        return HistoryStats(
            total_commands=total,
            unique_commands=len(self._frequencies),
            failed_commands=sum(1 for e in commands if e.exit_code != 0),
            average_duration=total_duration // total if total else 0,
            most_used=most_used[:10],
        )

    def _forget(self, entry: HistoryEntry) -> None:
        if isinstance(entry, CommandEntry) and entry.command in self._frequencies:
            self._frequencies[entry.command] -= 1
            if self._frequencies[entry.command] <= 0:
                del self._frequencies[entry.command]

    def _trim(self) -> None:
        while len(self._entries) > self.max_entries:
            self._forget(self._entries.popleft())

    def _rewrite_file(self) -> None:
        try:
            self._file.path.write_text("", encoding="utf-8")
            for entry in self._entries:
                self._file.append_entry(entry)
        except (OSError, HistoryError) as exc:
            raise HistoryError(f"File operation error: {exc}") from exc