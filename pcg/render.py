"""
project: PCG Maps
module: render.py
License: MIT

Console rendering: one glyph per cell, padded to a fixed column width.

Bomberman maps are right-aligned (``"  X  *  -"``), cave maps left-aligned
(``"# . @"``). Colour is optional and uses colorama; it is never emitted when
stdout is not a terminal unless forced.
"""

from __future__ import annotations

import sys
from typing import Dict

from colorama import Fore, Style
from colorama import just_fix_windows_console

from .grid import Grid

just_fix_windows_console()

GLYPH_COLORS: Dict[str, str] = {
    "X": Fore.WHITE + Style.BRIGHT,
    "*": Fore.YELLOW,
    "S": Fore.CYAN + Style.BRIGHT,
    "#": Fore.GREEN,
    "$": Fore.GREEN,
    "@": Fore.MAGENTA + Style.BRIGHT,
    "&": Fore.GREEN,
    "B": Fore.RED,
    "O": Fore.RED,
    "D": Fore.RED,
    "M": Fore.RED,
    "A": Fore.MAGENTA + Style.BRIGHT,
}


def color_supported() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):  # pragma: no cover - closed / replaced stdout
        return False


def glyph_of(value) -> str:
    return getattr(value, "glyph", str(value))


def _paint(text: str, glyph: str) -> str:
    code = GLYPH_COLORS.get(glyph)
    return f"{code}{text}{Style.RESET_ALL}" if code else text


def render_grid(grid: Grid, width: int = 3, right: bool = True, color: bool = False) -> str:
    lines = []
    for row in grid:
        cells = []
        for value in row:
            g = glyph_of(value)
            text = g.rjust(width) if right else g.ljust(width)
            cells.append(_paint(text, g) if color else text)
        line = "".join(cells)
        lines.append(line if color else line.rstrip())
    return "\n".join(lines)


def banner(title: str, rows, color: bool = False) -> str:
    """Framed title block followed by ``label: value`` lines."""
    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if color else "=" * 40
    head = f"{Fore.CYAN}{Style.BRIGHT}{title}{Style.RESET_ALL}" if color else title
    lines = [divider, f"  {head}", divider]
    for label, value in rows:
        lab = f"{Fore.YELLOW}{label + ':'}{Style.RESET_ALL}" if color else f"{label}:"
        val = f"{Fore.GREEN}{value}{Style.RESET_ALL}" if color else str(value)
        lines.append(f"  {lab:18} {val}")
    lines.append(divider)
    return "\n".join(lines)


__all__ = ["GLYPH_COLORS", "color_supported", "glyph_of", "render_grid", "banner"]
