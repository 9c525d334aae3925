"""Terminal colouring of command lines and messages."""

from __future__ import annotations

import enum
import os

_RESET = "\x1b[0m"


class ColorSupport(enum.Enum):
    """How many colours the terminal can show."""

    NONE = "none"
    BASIC = "basic"
    ANSI256 = "256"
    TRUECOLOR = "truecolor"


def detect_color_support() -> ColorSupport:
    """Work out the terminal's colour support from the environment."""
    if "NO_COLOR" in os.environ:
        return ColorSupport.NONE
    colorterm = os.environ.get("COLORTERM", "").lower()
    if colorterm in ("truecolor", "24bit"):
        return ColorSupport.TRUECOLOR
    term = os.environ.get("TERM", "")
    if not term or term == "dumb":
        return ColorSupport.NONE
    if "256color" in term:
        return ColorSupport.ANSI256
    return ColorSupport.BASIC


class SyntaxHighlighter:
    """Adds ANSI colours to text when the terminal supports them."""

    def __init__(self, color_support: ColorSupport | None = None) -> None:
        self.color_support = (
            detect_color_support() if color_support is None else color_support
        )

    @property
    def _enabled(self) -> bool:
        return self.color_support is not ColorSupport.NONE

    @staticmethod
    def _paint(text: str, codes: str) -> str:
        return f"\x1b[{codes}m{text}{_RESET}"

    def highlight_command(self, text: str) -> str:
        """Colour the command name and any options in a command line."""
        if not self._enabled:
            return text
        parts = text.split()
        if not parts:
            return text
        command, *rest = parts
        painted = [self._paint(command, "1;36")]
        painted.extend(
            self._paint(part, "33") if part.startswith("-") else part for part in rest
        )
        return " ".join(painted)

    def highlight_error(self, error: str) -> str:
        if not self._enabled:
            return error
        return self._paint(error, "1;31")

    def highlight_success(self, message: str) -> str:
        if not self._enabled:
            return message
        return self._paint(message, "32")

    def highlight_hint(self, hint: str) -> str:
        if not self._enabled:
            return hint
        if self.color_support is ColorSupport.TRUECOLOR:
            codes = "38;2;128;128;128"
        elif self.color_support is ColorSupport.ANSI256:
            codes = "38;5;244"
        else:
            codes = "90"
        return self._paint(hint, codes)