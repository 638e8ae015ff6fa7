"""Colored terminal logger for the showdown adapters.

Provides ANSI-coloured, module-prefixed console output for the HTTP server
and the CLI.  Falls back to plain text when stdout is not a TTY or when
``SHOWDOWN_NO_COLOR=1`` / ``NO_COLOR`` is set.  Errors and warnings go to
stderr so CLI output stays pipeable.
"""

from __future__ import annotations

import os
import sys
from typing import TextIO


# ---------------------------------------------------------------------------
# ANSI colour codes
# ---------------------------------------------------------------------------

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"

_FG_RED = "\033[31m"
_FG_GREEN = "\033[32m"
_FG_YELLOW = "\033[33m"
_FG_BLUE = "\033[34m"
_FG_MAGENTA = "\033[35m"
_FG_CYAN = "\033[36m"
_FG_WHITE = "\033[37m"


def _supports_color() -> bool:
    """Heuristic check for ANSI colour support."""
    if os.getenv("SHOWDOWN_NO_COLOR", "").strip().lower() in {"1", "true", "yes"}:
        return False
    if os.getenv("NO_COLOR"):
        return False
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


_COLOR_ENABLED = _supports_color()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class ShowdownLogger:
    """Simple coloured logger with module prefix."""

    _MODULE_COLORS: dict[str, str] = {
        "Server": _FG_CYAN,
        "Equity": _FG_YELLOW,
        "Evaluator": _FG_MAGENTA,
        "Compare": _FG_BLUE,
        "CLI": _FG_GREEN,
    }

    def __init__(self, module: str) -> None:
        self.module = module
        self._prefix_color = self._MODULE_COLORS.get(module, _FG_WHITE)

    def _format(self, level_color: str, level: str, message: str) -> str:
        if _COLOR_ENABLED:
            return (
                f"{self._prefix_color}{_BOLD}[{self.module}]{_RESET} "
                f"{level_color}{level}{_RESET} {message}"
            )
        return f"[{self.module}] {level} {message}"

    @staticmethod
    def _emit(line: str, stream: TextIO | None = None) -> None:
        print(line, file=stream if stream is not None else sys.stdout)

    def info(self, message: str) -> None:
        self._emit(self._format(_FG_GREEN, ">", message))

    def warn(self, message: str) -> None:
        self._emit(self._format(_FG_YELLOW, "!", message), sys.stderr)

    def error(self, message: str) -> None:
        self._emit(self._format(_FG_RED, "X", message), sys.stderr)

    def status(self, message: str) -> None:
        """Dimmed status line for non-critical events."""
        if _COLOR_ENABLED:
            self._emit(f"{self._prefix_color}{_BOLD}[{self.module}]{_RESET} {_DIM}{message}{_RESET}")
        else:
            self._emit(f"[{self.module}] {message}")

    def highlight(self, message: str) -> None:
        """Bold bright message (startup banners, headline results)."""
        if _COLOR_ENABLED:
            self._emit(f"{self._prefix_color}{_BOLD}[{self.module}] * {message}{_RESET}")
        else:
            self._emit(f"[{self.module}] * {message}")
