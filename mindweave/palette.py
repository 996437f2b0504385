"""Colours and the palettes offered when picking a colour."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass


class ColorRole(enum.Enum):
    """What a picked colour is applied to."""

    NODE = "node"
    EDGE = "edge"
    GRID = "grid"
    TEXT = "text"
    BACKGROUND = "background"


@dataclass(frozen=True)
class Color:
    """An opaque RGB colour with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"colour channel {name} out of range: {value!r}")

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse ``#rgb`` or ``#rrggbb`` (case-insensitive)."""
        digits = text[1:] if text.startswith("#") else None
        if digits is None or not digits or any(c not in string.hexdigits for c in digits):
            raise ValueError(f"invalid colour: {text!r}")
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) != 6:
            raise ValueError(f"invalid colour: {text!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def to_hex(self) -> str:
        """Return the colour as lower-case ``#rrggbb``."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


# Six columns per row: three shades of a hue followed by three greys.
_STANDARD = (
    "#ef2929", "#cc0000", "#a40000", "#111111", "#111111", "#111111",  # red
    "#fcaf3e", "#f57900", "#ce5c00", "#333333", "#333333", "#333333",  # orange
    "#fce94f", "#edd400", "#c4a000", "#555555", "#555555", "#555555",  # yellow
    "#8AE234", "#73D216", "#4E9A06", "#777777", "#777777", "#777777",  # green
    "#729FCF", "#3465A4", "#204A87", "#999999", "#999999", "#999999",  # blue
    "#AD7FA8", "#75507B", "#5C3566", "#bbbbbb", "#bbbbbb", "#bbbbbb",  # purple
    "#E9B96E", "#C17D11", "#8F5902", "#dddddd", "#dddddd", "#dddddd",  # brown
    "#888A85", "#555753", "#2E3436", "#ffffff", "#ffffff", "#ffffff",  # grey
)

_CUSTOM = (
    "#ffffff", "#393457", "#6df7c1", "#1e8875",
    "#11adc1", "#5bb361", "#606c81", "#a1e55a",
    "#f7e476", "#c92464", "#f99252", "#f48cb6",
    "#cb4d68", "#f7b69e", "#6a3771", "#9b9c82",
)


def standard_palette() -> list[Color]:
    """Return the standard colours in display order."""
    return [Color.from_hex(text) for text in _STANDARD]


def custom_palette() -> list[Color]:
    """Return the preset custom colours in display order."""
    return [Color.from_hex(text) for text in _CUSTOM]