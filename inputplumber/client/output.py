#
# Copyright (C) 2026 InputPlumber Client Developers — LGPL-3.0-or-later
#
"""
CLI output styling with semantic design tokens.

Exposes only semantic methods (device, key, path, error), not colors.

Respects NO_COLOR env var and TTY detection.
"""

import os
import re
import sys
from enum import Enum, auto


class _Token(Enum):
    """Semantic design tokens mapping UI concepts to colors."""

    DEVICE = auto()  # Gamepad names
    KEY = auto()  # Property names, labels
    PATH = auto()  # Object paths, bus names
    ERROR = auto()  # Failures


_THEME: dict[_Token, tuple[int, int, int]] = {
    _Token.DEVICE: (128, 255, 234),  # Neon Cyan
    _Token.KEY: (128, 255, 234),  # Neon Cyan
    _Token.PATH: (128, 255, 234),  # Neon Cyan
    _Token.ERROR: (255, 99, 99),  # Red
}


CROSS = "\u2717"  # ✗
PIPE = "\u2502"  # │

ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_PATTERN.sub("", str(text))


class Output:
    """
    CLI output with semantic styling.

    All public methods use UI concepts (device, key, path), not colors.
    """

    def __init__(self, force_color: bool | None = None):
        self._color_enabled = self._detect_color(force_color)

    @property
    def color_enabled(self) -> bool:
        return self._color_enabled

    def _detect_color(self, force: bool | None) -> bool:
        """Detect if color output should be enabled."""
        if force is not None:
            return force
        # NO_COLOR standard: https://no-color.org/
        if os.environ.get("NO_COLOR"):
            return False
        if not hasattr(sys.stdout, "isatty") or not sys.stdout.isatty():
            return False
        return os.environ.get("TERM") != "dumb"

    def _rgb(self, r: int, g: int, b: int, text: str) -> str:
        if not self._color_enabled:
            return text
        return f"\x1b[38;2;{r};{g};{b}m{text}\x1b[0m"

    def _bold(self, text: str) -> str:
        if not self._color_enabled:
            return text
        return f"\x1b[1m{text}\x1b[0m"

    def _apply(self, token: _Token, text: str, bold: bool = False) -> str:
        rgb = _THEME.get(token)
        result = text
        if rgb is not None:
            result = self._rgb(*rgb, result)
        if bold:
            result = self._bold(result)
        return result

    def device(self, text: str) -> str:
        """Format a gamepad name."""
        return self._apply(_Token.DEVICE, text, bold=True)

    def key(self, text: str) -> str:
        """Format a property name or label."""
        return self._apply(_Token.KEY, text)

    def path(self, text: str) -> str:
        """Format an object path or bus name."""
        return self._apply(_Token.PATH, text)

    def error(self, message: str) -> str:
        """Format an error message with cross."""
        mark = self._apply(_Token.ERROR, CROSS)
        return f"{mark} {message}"

    def table_row(self, key_width: int, key: str, value: str) -> str:
        """Format a table row with right-justified key and vertical separator."""
        padding = key_width - len(strip_ansi(key))
        return f" {' ' * padding}{key} {PIPE} {value}"
