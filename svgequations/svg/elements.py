"""Geometric path elements and the immutable Path aggregate.

Elements form a closed set: Line, Curve and Arc. Code that needs per-kind behaviour
matches on the type instead of relying on a shared base class.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Literal, Union

from svgequations.svg.arc import arc_to_curves
from svgequations.utils.mat33 import Mat33
from svgequations.utils.vec2 import Vec2

# A curve in flattened form: control points, first = start, last = end.
# 2 points = line, 3 = quadratic, 4 = cubic.
CurvePoints = tuple[Vec2, ...]


@dataclass(frozen=True)
class Line:
    start: Vec2
    end: Vec2

    kind: Literal["line"] = field(default="line", init=False, repr=False)

    def transform(self, matrix: Mat33) -> Line:
        return Line(matrix * self.start, matrix * self.end)

    def to_curves(self) -> list[CurvePoints]:
        return [(self.start, self.end)]


@dataclass(frozen=True)
class Curve:
    """Bézier curve. Number of controls gives the degree minus one."""

    start: Vec2
    end: Vec2
    controls: tuple[Vec2, ...] = ()

    kind: Literal["curve"] = field(default="curve", init=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.controls) > 2:
            raise ValueError(f"Curve supports at most 2 control points, got {len(self.controls)}")

    @property
    def degree(self) -> int:
        return len(self.controls) + 1

    @property
    def points(self) -> CurvePoints:
        return (self.start, *self.controls, self.end)

    @classmethod
    def from_points(cls, points: CurvePoints) -> Curve:
        return cls(points[0], points[-1], tuple(points[1:-1]))

    def transform(self, matrix: Mat33) -> Curve:
        return Curve(
            matrix * self.start,
            matrix * self.end,
            tuple(matrix * c for c in self.controls),
        )

    def to_curves(self) -> list[CurvePoints]:
        return [self.points]


@dataclass(frozen=True)
class Arc:
    """Elliptical arc in SVG endpoint parameterization. ``rotation`` is in radians."""

    start: Vec2
    end: Vec2
    radii: Vec2
    rotation: float
    large_arc: bool
    sweep: bool

    kind: Literal["arc"] = field(default="arc", init=False, repr=False)

    def to_curves(self) -> list[CurvePoints]:
        return arc_to_curves(
            self.start, self.end, self.radii, self.rotation, self.large_arc, self.sweep
        )

    def to_elements(self) -> list[Line | Curve]:
        """Replace the arc with the curves approximating it."""
        elements: list[Line | Curve] = []
        for points in self.to_curves():
            if len(points) == 2:
                elements.append(Line(points[0], points[1]))
            else:
                elements.append(Curve.from_points(points))
        return elements

    def transform(self, matrix: Mat33) -> Arc:
        """Transform the arc exactly. Only similarity matrices keep an arc an arc.

        Raises ValueError for skews and non-uniform scales; flatten the arc first.
        """
        if not matrix.is_similarity():
            raise ValueError("Arc can only be transformed by a similarity matrix")
        det = matrix.determinant
        scale = math.sqrt(abs(det))
        # Angle of the transformed x axis. Mirroring reverses the sweep direction.
        angle = math.atan2(matrix.m10, matrix.m00)
        mirrored = det < 0
        rotation = angle - self.rotation if mirrored else angle + self.rotation
        return Arc(
            matrix * self.start,
            matrix * self.end,
            Vec2(abs(self.radii.x) * scale, abs(self.radii.y) * scale),
            rotation,
            self.large_arc,
            self.sweep != mirrored,
        )


Element = Union[Line, Curve, Arc]


@dataclass(frozen=True)
class Path:
    """Ordered, immutable sequence of path elements.

    No continuity is implied between consecutive elements: a move command starts a
    new subpath anywhere.
    """

    elements: tuple[Element, ...] = ()

    def __iter__(self) -> Iterator[Element]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    @property
    def is_empty(self) -> bool:
        return not self.elements

    @property
    def has_arcs(self) -> bool:
        return any(isinstance(e, Arc) for e in self.elements)

    @property
    def curves(self) -> list[CurvePoints]:
        """Curve-flattened representation: one control point tuple per curve."""
        curves: list[CurvePoints] = []
        for element in self.elements:
            curves.extend(element.to_curves())
        return curves

    def flatten(self) -> Path:
        """Return a path where every arc is replaced by its cubic approximation."""
        if not self.has_arcs:
            return self
        elements: list[Element] = []
        for element in self.elements:
            if isinstance(element, Arc):
                elements.extend(element.to_elements())
            else:
                elements.append(element)
        return Path(tuple(elements))

    def transform(self, matrix: Mat33) -> Path:
        """Return a new path with every point mapped through ``matrix``.

        Arcs are kept as arcs under similarity matrices and approximated with cubic
        curves otherwise.
        """
        keep_arcs = matrix.is_similarity()
        source = self if keep_arcs else self.flatten()
        return Path(tuple(element.transform(matrix) for element in source.elements))
