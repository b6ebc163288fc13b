"""Stroke color and opacity parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import ClassVar

from svgequations.errors import ParseError

COMPONENT_MAX = 255

_COLOR_PARTS_RE = re.compile(r"[\s,]+")
_HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]+")


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: int = COMPONENT_MAX

    BLACK: ClassVar[Color]

    @classmethod
    def hex(cls, text: str) -> Color:
        """Parse ``#rgb``, ``#argb``, ``#rrggbb`` or ``#aarrggbb``."""
        digits = text[1:] if text.startswith("#") else text
        if not _HEX_DIGITS_RE.fullmatch(digits):
            raise ValueError(f"Bad hex color {text!r}")
        value = int(digits, 16)

        if len(digits) in (3, 4):
            a = 0xF if len(digits) == 3 else value >> 12 & 0xF
            r, g, b = value >> 8 & 0xF, value >> 4 & 0xF, value & 0xF
            return cls(r * 0x11, g * 0x11, b * 0x11, a * 0x11)
        if len(digits) in (6, 8):
            a = COMPONENT_MAX if len(digits) == 6 else value >> 24 & 0xFF
            return cls(value >> 16 & 0xFF, value >> 8 & 0xFF, value & 0xFF, a)
        raise ValueError(f"Bad hex color {text!r}")

    def with_alpha(self, a: int) -> Color:
        return replace(self, a=a)

    def to_hex(self) -> str:
        """``#rrggbb``, alpha left out."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @property
    def opacity(self) -> float:
        return self.a / COMPONENT_MAX


Color.BLACK = Color(0, 0, 0)

NAMED_COLORS: dict[str, Color] = {
    "black": Color.hex("#000000"),
    "blue": Color.hex("#0000ff"),
    "brown": Color.hex("#a52a2a"),
    "cyan": Color.hex("#00ffff"),
    "darkgray": Color.hex("#a9a9a9"),
    "gray": Color.hex("#808080"),
    "green": Color.hex("#008000"),
    "lightgray": Color.hex("#d3d3d3"),
    "lime": Color.hex("#00ff00"),
    "magenta": Color.hex("#ff00ff"),
    "orange": Color.hex("#ffa500"),
    "pink": Color.hex("#ffc0cb"),
    "purple": Color.hex("#800080"),
    "red": Color.hex("#ff0000"),
    "white": Color.hex("#ffffff"),
    "yellow": Color.hex("#ffff00"),
}


# Keywords that defer to the renderer's default stroke, drawn black here.
_DEFAULT_KEYWORDS = frozenset({"none", "currentcolor", "inherit"})


class _InvalidColor(Exception):
    pass


def parse_color(color: str | None, opacity: str | None = None, lenient: bool = False) -> Color:
    """Parse an SVG stroke color and opacity.

    The color's own alpha (``#aarrggbb``, ``rgba(...)``) is ignored: only ``opacity``
    sets the alpha. Invalid input raises ParseError, or gives black when lenient.
    """
    try:
        alpha = _parse_opacity(opacity) if opacity is not None else COMPONENT_MAX
        if color is None:
            parsed = Color.BLACK
        else:
            color = color.strip()
            if color.startswith("#"):
                parsed = _parse_hex(color)
            elif color.startswith("rgb"):
                parsed = _parse_rgb(color)
            else:
                parsed = _parse_named(color)
    except _InvalidColor as e:
        if lenient:
            return Color.BLACK
        raise ParseError(f"Invalid color string {str(e)!r}") from None
    return parsed.with_alpha(alpha)


def _parse_opacity(opacity: str) -> int:
    text = opacity.strip()
    try:
        if text.endswith("%"):
            value = float(text[:-1]) / 100
        else:
            value = float(text)
    except ValueError:
        raise _InvalidColor(opacity) from None
    value = min(max(value, 0.0), 1.0)
    return int(value * COMPONENT_MAX + 0.5)


def _parse_hex(color: str) -> Color:
    try:
        return Color.hex(color)
    except ValueError:
        raise _InvalidColor(color) from None


def _parse_rgb(color: str) -> Color:
    open_pos = color.find("(")
    close_pos = color.find(")", open_pos)
    if open_pos == -1 or close_pos == -1:
        raise _InvalidColor(color)

    parts = [p for p in _COLOR_PARTS_RE.split(color[open_pos + 1 : close_pos]) if p]
    values: list[int] = []
    for part in parts:
        if part == "/":
            if len(values) != 3:
                raise _InvalidColor(color)
            continue
        try:
            if part.endswith("%"):
                value = float(part[:-1]) / 100 * COMPONENT_MAX
            else:
                value = float(part)
        except ValueError:
            raise _InvalidColor(color) from None
        if value < 0:
            raise _InvalidColor(color)
        values.append(min(int(value + 0.5), COMPONENT_MAX))

    if len(values) not in (3, 4):
        raise _InvalidColor(color)
    return Color(values[0], values[1], values[2])


def _parse_named(color: str) -> Color:
    if color.lower() in _DEFAULT_KEYWORDS:
        return Color.BLACK
    try:
        return NAMED_COLORS[color.lower()]
    except KeyError:
        raise _InvalidColor(color) from None
