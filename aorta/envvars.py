"""Management of environment variables and per-user directories."""

from __future__ import annotations

import os
import re
from pathlib import Path

from aorta.errors import EnvError

_PATH_SPLIT = re.compile(r"[:\"']")


class EnvVarManager:
    """Keeps a copy of the environment and writes changes through to it."""

    def __init__(self) -> None:
        self._vars: dict[str, str] = {}
        for name, value in list(os.environ.items()):
            self.set(name, value)

    def set(self, name: str, value: str) -> None:
        """Set a variable here and in the process environment.

        ``PATH`` is cleaned of quotes, empty parts and duplicates first.
        """
        if not name:
            raise EnvError("Invalid value: Empty variable name")
        clean = self.sanitize_path(value) if name == "PATH" else value
        self._vars[name] = clean
        os.environ[name] = clean

    def get(self, name: str) -> str:
        try:
            return self._vars[name]
        except KeyError:
            raise EnvError(f"Environment variable not found: {name}") from None

    def sanitize_path(self, path: str) -> str:
        """Drop quotes, empty parts and repeated directories from a PATH value."""
        if not path:
            raise EnvError("Invalid value: Empty PATH value")
        parts = (part for part in _PATH_SPLIT.split(path) if part)
        return ":".join(dict.fromkeys(parts))

    def expand_value(self, value: str) -> str:
        """Replace ``$HOME`` and ``$PATH`` with their current values."""
        result = value
        for var in ("HOME", "PATH"):
            token = f"${var}"
            if token in value:
                current = os.environ.get(var)
                if current is None:
                    raise EnvError("Home directory not found")
                result = result.replace(token, current)
        return result


class EnvPaths:
    """The user's home directory with its config and cache directories."""

    def __init__(self) -> None:
        home = os.environ.get("HOME")
        if home is None:
            raise EnvError("Home directory not found")
        self.home = Path(home)
        if not self.home.exists():
            raise EnvError(f"Invalid path: {self.home}")
        self.config_dir = self.home / ".config"
        self.cache_dir = self.home / ".cache"

    def ensure_dirs(self) -> None:
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise EnvError(f"IO error: {exc}") from exc

    def get_config_file(self, name: str) -> Path:
        return self.config_dir / name

    def get_cache_file(self, name: str) -> Path:
        return self.cache_dir / name