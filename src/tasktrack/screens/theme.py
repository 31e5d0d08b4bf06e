# src/tasktrack/screens/theme.py

"""ANSI style helpers for the console screens.

- Truecolor when COLORTERM says so, otherwise the xterm 256-color cube.
- Disabled when stdout is not a TTY unless FORCE_COLOR is set.
- NO_COLOR disables everything.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

RESET = "0"
BOLD = "1"
DIM = "2"
STRIKE = "9"

MUTED_HEX = "#6B7280"
FAINT_HEX = "#9CA3AF"


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""

    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))

    return f"38;5;{16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)}"


def colors_enabled() -> bool:
    force = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
    if os.environ.get("NO_COLOR") is not None:
        return False
    try:
        tty = sys.stdout.isatty()
    except (AttributeError, ValueError):
        tty = False
    return force or tty


@dataclass(frozen=True, slots=True)
class Theme:
    enabled: bool
    truecolor: bool = False
    primary_hex: str = "#2563EB"

    @classmethod
    def detect(cls, primary_hex: str = "#2563EB") -> "Theme":
        enabled = colors_enabled()
        colorterm = os.environ.get("COLORTERM", "").lower()
        truecolor = enabled and any(tok in colorterm for tok in ("truecolor", "24bit"))
        return cls(enabled=enabled, truecolor=truecolor, primary_hex=primary_hex)

    @classmethod
    def plain(cls) -> "Theme":
        return cls(enabled=False)

    def fg(self, hex_code: str) -> str:
        r, g, b = _hex_to_rgb(hex_code)
        if self.truecolor:
            return f"38;2;{r};{g};{b}"
        return _fg_256(r, g, b)

    def style(self, text: str, *parts: str) -> str:
        if not self.enabled or not parts:
            return text
        return f"\033[{';'.join(parts)}m{text}\033[{RESET}m"

    # ---- named styles used by the screens ----

    def header(self, text: str) -> str:
        return self.style(text, BOLD, self.fg(self.primary_hex))

    def accent(self, text: str) -> str:
        return self.style(text, self.fg(self.primary_hex))

    def muted(self, text: str) -> str:
        return self.style(text, self.fg(MUTED_HEX))

    def faint(self, text: str) -> str:
        return self.style(text, DIM, self.fg(FAINT_HEX))

    def struck(self, text: str) -> str:
        return self.style(text, STRIKE, self.fg(FAINT_HEX))
