"""Path interpreter: turns tokenized path data into geometric elements.

Command reference: https://www.w3.org/TR/SVG/paths.html#PathDataBNF

Drawing state (current point, subpath start, previous element) lives in local
variables of a single pass, so parsing the same tokens always yields the same Path.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

from svgequations.errors import ParseError
from svgequations.svg.elements import Arc, Curve, Element, Line, Path
from svgequations.svg.tokenizer import PathTokens, tokenize
from svgequations.utils.vec2 import Vec2

logger = logging.getLogger(__name__)


class _Values:
    """Cursor over the token values, consumed strictly in order."""

    def __init__(self, values: list[float], lenient: bool) -> None:
        self._values = values
        self._index = 0
        self.lenient = lenient

    def read(self) -> float:
        if self._index >= len(self._values):
            raise ParseError("Unexpected end of path values")
        value = self._values[self._index]
        self._index += 1
        return value

    def read_point(self, origin: Vec2 | None = None) -> Vec2:
        """Read an (x, y) pair, offset by ``origin`` for relative commands."""
        x = self.read()
        y = self.read()
        if origin is None:
            return Vec2(x, y)
        return Vec2(origin.x + x, origin.y + y)

    def read_flag(self) -> bool:
        value = self.read()
        if value == 0.0:
            return False
        if value == 1.0:
            return True
        if self.lenient:
            return False
        raise ParseError(f"Invalid boolean value '{value:g}' for arc flag")


def parse_path(tokens: PathTokens, lenient: bool = False, flatten_arcs: bool = True) -> Path:
    """Interpret path tokens as a Path.

    With ``flatten_arcs`` (the default) arc commands are approximated by cubic curves;
    otherwise they are kept as :class:`Arc` elements. Elements starting and ending at
    the same point are invisible and dropped.
    """
    values = _Values(tokens.values, lenient)
    elements: list[Element] = []

    current = Vec2()
    subpath_start = Vec2()
    # Last element appended, used for T/S reflection. M leaves it unchanged.
    previous: Element | None = None

    for command in tokens.commands:
        upper = command.upper()
        # Offset for relative coordinates.
        origin = None if command.isupper() else current
        emitted: Element | None = None

        if upper == "M":
            point = values.read_point(origin)
            subpath_start = point
        elif upper == "Z":
            point = subpath_start
            emitted = Line(current, point)
        elif upper == "L":
            point = values.read_point(origin)
            emitted = Line(current, point)
        elif upper == "H":
            x = values.read() + (0.0 if origin is None else current.x)
            point = Vec2(x, current.y)
            emitted = Line(current, point)
        elif upper == "V":
            y = values.read() + (0.0 if origin is None else current.y)
            point = Vec2(current.x, y)
            emitted = Line(current, point)
        elif upper == "Q":
            control = values.read_point(origin)
            point = values.read_point(origin)
            emitted = Curve(current, point, (control,))
        elif upper == "T":
            control = _reflected_control(previous, 1, current)
            point = values.read_point(origin)
            emitted = Curve(current, point, (control,))
        elif upper == "C":
            control1 = values.read_point(origin)
            control2 = values.read_point(origin)
            point = values.read_point(origin)
            emitted = Curve(current, point, (control1, control2))
        elif upper == "S":
            control1 = _reflected_control(previous, 2, current)
            control2 = values.read_point(origin)
            point = values.read_point(origin)
            emitted = Curve(current, point, (control1, control2))
        elif upper == "A":
            radii = values.read_point()
            rotation = math.radians(values.read())
            large_arc = values.read_flag()
            sweep = values.read_flag()
            point = values.read_point(origin)
            emitted = _arc(current, point, radii, rotation, large_arc, sweep)
        else:
            raise ParseError(f"Unknown command {command!r}")

        if upper != "M":
            if emitted is not None and emitted.start == emitted.end:
                emitted = None
            if emitted is None:
                previous = None
            elif flatten_arcs and isinstance(emitted, Arc):
                elements.extend(emitted.to_elements())
                previous = elements[-1]
            else:
                elements.append(emitted)
                previous = emitted
        current = point

    logger.debug("Parsed %d commands into %d elements", len(tokens.commands), len(elements))
    return Path(tuple(elements))


def parse_path_data(path_data: str, lenient: bool = False, flatten_arcs: bool = True) -> Path:
    """Tokenize and parse an SVG ``d`` attribute."""
    return parse_path(tokenize(path_data, lenient), lenient, flatten_arcs)


def _arc(start: Vec2, end: Vec2, radii: Vec2, rotation: float, large_arc: bool, sweep: bool) -> Element:
    """An arc with a zero radius is drawn as a straight line."""
    if radii.x == 0.0 or radii.y == 0.0:
        return Line(start, end)
    return Arc(start, end, radii, rotation, large_arc, sweep)


def _reflected_control(previous: Element | None, control_count: int, current: Vec2) -> Vec2:
    """First control point of a T/S shorthand curve.

    The reflection of the previous curve's last control point across the current point
    when the previous element is a curve of the same kind, else the current point.
    """
    if isinstance(previous, Curve) and len(previous.controls) == control_count:
        return current + (current - previous.controls[-1])
    return current


def iter_subpaths(path: Path) -> Iterator[Path]:
    """Split a path at discontinuities between consecutive elements."""
    current: list[Element] = []
    for element in path:
        if current and element.start != current[-1].end:
            yield Path(tuple(current))
            current = []
        current.append(element)
    if current:
        yield Path(tuple(current))
