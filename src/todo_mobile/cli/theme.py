# src/todo_mobile/cli/theme.py

"""Color & style helpers for the console screen.

- Two palettes, light and dark, picked per render from AppState.dark_mode.
- Truecolor preferred; falls back to the 256-color cube if unsupported.
- Disabled automatically when stdout is not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_COLORTERM = os.environ.get("COLORTERM", "").lower()


def colors_enabled() -> bool:
    return (_FORCE or sys.stdout.isatty()) and not _NO_COLOR


def _use_truecolor() -> bool:
    return any(tok in _COLORTERM for tok in ("truecolor", "24bit"))


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip("#")
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    idx = 16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)
    return f"\033[38;5;{idx}m"


def fg(hex_code: str) -> str:
    r, g, b = _hex_to_rgb(hex_code)
    if _use_truecolor():
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)


RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
STRIKE = "\033[9m"


@dataclass(frozen=True, slots=True)
class Palette:
    title: str
    text: str
    accent: str
    muted: str
    done: str


# Colors from the mobile stylesheet: pink title/accent, dark #1c1c1e screen with white text.
LIGHT = Palette(
    title="#e91e63",
    text="#333333",
    accent="#ec407a",
    muted="#999999",
    done="#aaaaaa",
)
DARK = Palette(
    title="#ffffff",
    text="#ffffff",
    accent="#ff55aa",
    muted="#aaaaaa",
    done="#777777",
)


def palette_for(dark_mode: bool) -> Palette:
    return DARK if dark_mode else LIGHT


def color(text: str, *styles: str, enabled: bool | None = None) -> str:
    """Apply ANSI styles (escape codes or '#rrggbb' hex colors) to text."""
    if enabled is None:
        enabled = colors_enabled()
    if not enabled or not styles:
        return text
    codes = "".join(fg(s) if s.startswith("#") else s for s in styles)
    return codes + text + RESET
