"""Expansion of a leading tilde in paths."""

from __future__ import annotations

import os
from pathlib import Path

from aorta.errors import ShellError


class PathExpander:
    """Turns ``~`` and ``~/...`` into paths under the home directory."""

    def expand(self, path: str) -> Path:
        if not path.startswith("~"):
            return Path(path)
        home = self.get_home_dir()
        if path == "~":
            return home
        if path.startswith("~/"):
            return home / path[2:]
        # Forms such as ~user are left alone.
        return Path(path)

    def is_home_path(self, path: str) -> bool:
        return path.startswith("~")

    def get_home_dir(self) -> Path:
        home = os.path.expanduser("~")
        if not home or home == "~":
            raise ShellError("Home directory not found")
        return Path(home)