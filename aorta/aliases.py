"""Storage and expansion of command aliases."""

from __future__ import annotations


class AliasManager:
    """Maps alias names to the command text they stand for."""

    def __init__(self) -> None:
        self._aliases: dict[str, str] = {}

    def add(self, name: str, command: str) -> None:
        self._aliases[name] = command

    def get(self, cmd: str) -> str | None:
        return self._aliases.get(cmd)

    def expand_command(self, command: str) -> str:
        """Replace the first word with its alias; return ``command`` unchanged otherwise."""
        parts = command.split()
        if parts:
            value = self.get(parts[0])
            if value is not None:
                parts[0] = value
                return " ".join(parts)
        return command

    def get_all(self) -> dict[str, str]:
        """All aliases, ordered by name."""
        return dict(sorted(self._aliases.items()))