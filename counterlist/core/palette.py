"""
Color palette for counters.

Every counter carries one of ten named colors. The name is what users pick;
the hex string is what the UI paints. "Blue" is the fallback for both.
"""

from __future__ import annotations

from typing import Optional


DEFAULT_COLOR = "Blue"

# Ordered: this is the order shown in the color picker.
COLOR_MAP: dict[str, str] = {
    "Blue": "#1565C0",
    "Red": "#C62828",
    "Green": "#2E7D32",
    "Yellow": "#F9A825",
    "Purple": "#6A1B9A",
    "Orange": "#EF6C00",
    "Teal": "#00695C",
    "Pink": "#AD1457",
    "Gray": "#455A64",
    "Indigo": "#283593",
}

DEFAULT_HEX = COLOR_MAP[DEFAULT_COLOR]


def available_colors() -> list[str]:
    """Return the palette color names in display order."""
    return list(COLOR_MAP)


def is_known_color(name: Optional[str]) -> bool:
    return name in COLOR_MAP


def normalize_color_name(name: Optional[str]) -> str:
    """
    Map a user-supplied color name onto the palette.

    Blank or unrecognized names collapse to the default color. Matching is
    exact, so "blue" is not "Blue".
    """
    if name is None or not name.strip():
        return DEFAULT_COLOR
    if name not in COLOR_MAP:
        return DEFAULT_COLOR
    return name


def hex_for(name: Optional[str]) -> str:
    """Look up the hex for a color name, falling back to the default hex."""
    return COLOR_MAP.get(name or "", DEFAULT_HEX)
