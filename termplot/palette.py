from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    BRIGHT_GRAY = 7
    DARK_GRAY = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    WHITE = 15


def coerce_color(value: Color | int | str) -> Color:
    """Accept a palette member, its index or its (case-insensitive) name."""
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return Color[key]
        except KeyError as exc:
            raise ValueError(f"unknown color name: {value!r}") from exc
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"color must be an int or name, got {type(value)!r}")
    if value < 0 or value > 15:
        raise ValueError("color index must be in [0, 15]")
    return Color(value)


def sgr_for_attr(attr: int) -> str:
    # Lower nibble drives the foreground, upper nibble the background; bit 3 of each selects the bright range.
    fg = attr & 0x0F
    bg = (attr >> 4) & 0x0F
    fg_base = 9 if fg & 0x08 else 3
    bg_base = 10 if bg & 0x08 else 4
    return f"\x1b[{fg_base}{fg & 0x07};{bg_base}{bg & 0x07}m"


RESET = "\x1b[0m"
