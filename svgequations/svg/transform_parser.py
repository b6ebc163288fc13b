"""SVG ``transform`` attribute parser → Mat33.

Reference: https://www.w3.org/TR/SVG11/coords.html#TransformAttribute
"""

from __future__ import annotations

import math

from svgequations.errors import ParseError
from svgequations.svg.tokenizer import parse_values
from svgequations.utils.mat33 import IDENTITY, Mat33

# Accepted argument counts per transform function.
FUNCTION_ARITY: dict[str, tuple[int, ...]] = {
    "matrix": (6,),
    "translate": (1, 2),
    "scale": (1, 2),
    "rotate": (1, 3),
    "skewX": (1,),
    "skewY": (1,),
}


def parse_transform(text: str | None, lenient: bool = False) -> Mat33:
    """Parse a transform list like ``"translate(10) rotate(30, 5, 5)"``.

    Functions are composed left to right, so the rightmost one applies first to points.
    An empty or missing transform is the identity.
    """
    if not text:
        return IDENTITY

    transform = IDENTITY
    i = 0
    while i < len(text):
        c = text[i]
        if c == "," or c.isspace():
            i += 1
            continue

        open_pos = text.find("(", i)
        close_pos = text.find(")", open_pos)
        if open_pos == -1 or close_pos == -1:
            raise ParseError("Expected transform function with parenthesized arguments", i)

        name = text[i:open_pos].strip()
        arity = FUNCTION_ARITY.get(name)
        if arity is None:
            raise ParseError(f"Unknown transform function {name!r}", i)

        values = parse_values(text[open_pos + 1 : close_pos], lenient)
        if len(values) < arity[0]:
            raise ParseError(f"Not enough values for transform function {name!r}", i)
        if not lenient:
            if len(values) > arity[-1]:
                raise ParseError(f"Too many values for transform function {name!r}", i)
            if len(values) not in arity:
                raise ParseError(f"Wrong number of values for transform function {name!r}", i)

        transform = transform * _function_matrix(name, values)
        i = close_pos + 1

    return transform


def _function_matrix(name: str, v: list[float]) -> Mat33:
    if name == "matrix":
        a, b, c, d, e, f = v[:6]
        return Mat33(a, c, e, b, d, f, 0.0, 0.0, 1.0)
    if name == "translate":
        return Mat33.translate(v[0], v[1] if len(v) > 1 else 0.0)
    if name == "scale":
        return Mat33.scale(v[0], v[1] if len(v) > 1 else v[0])
    if name == "skewX":
        return Mat33.skew(math.radians(v[0]), 0.0)
    if name == "skewY":
        return Mat33.skew(0.0, math.radians(v[0]))
    # rotate
    rotation = Mat33.rotation(math.radians(v[0]))
    if len(v) >= 3:
        cx, cy = v[1], v[2]
        return Mat33.translate(cx, cy) * rotation * Mat33.translate(-cx, -cy)
    return rotation
