"""Elliptical arc → cubic Bézier approximation.

Endpoint-to-center conversion follows the SVG implementation notes:
https://www.w3.org/TR/SVG11/implnote.html#ArcImplementationNotes

Each cubic spans at most 90°, where the circular-arc approximation error stays
below 0.03% of the radius.
"""

from __future__ import annotations

import math

from svgequations.utils.vec2 import Vec2

_QUARTER_TURN = math.pi / 2


def arc_to_curves(
    p1: Vec2,
    p2: Vec2,
    radii: Vec2,
    rotation: float,
    large_arc: bool,
    sweep: bool,
) -> list[tuple[Vec2, ...]]:
    """Approximate an SVG arc from ``p1`` to ``p2`` as cubic Bézier curves.

    ``rotation`` is the x-axis rotation in radians. Returns a list of control point
    tuples: empty for a zero-length arc, a single 2-point line for a zero radius,
    otherwise one 4-point cubic per segment of at most 90°.
    """
    if p1 == p2:
        return []
    if radii.x == 0.0 or radii.y == 0.0:
        return [(p1, p2)]

    cos_phi = math.cos(rotation)
    sin_phi = math.sin(rotation)

    # Ellipse space: chord midpoint at the origin, ellipse axes along X/Y.
    dx = (p1.x - p2.x) / 2
    dy = (p1.y - p2.y) / 2
    x1p = cos_phi * dx + sin_phi * dy
    y1p = -sin_phi * dx + cos_phi * dy

    rx = abs(radii.x)
    ry = abs(radii.y)

    # Radii too small to reach both endpoints are scaled up uniformly.
    lam = math.sqrt(x1p**2 / rx**2 + y1p**2 / ry**2)
    if lam > 1.0:
        rx *= lam
        ry *= lam

    rx_sq = rx**2
    ry_sq = ry**2
    x1p_sq = x1p**2
    y1p_sq = y1p**2

    # Center in ellipse space. Radicand is clamped: rounding can push it below zero.
    t = rx_sq * y1p_sq + ry_sq * x1p_sq
    radicand = max((rx_sq * ry_sq - t) / t, 0.0) if t > 0 else 0.0
    coef = math.sqrt(radicand) * (-1.0 if large_arc == sweep else 1.0)
    cxp = coef * rx / ry * y1p
    cyp = coef * -ry / rx * x1p

    cx = cos_phi * cxp - sin_phi * cyp + (p1.x + p2.x) / 2
    cy = sin_phi * cxp + cos_phi * cyp + (p1.y + p2.y) / 2

    v1 = Vec2((x1p - cxp) / rx, (y1p - cyp) / ry)
    v2 = Vec2((-x1p - cxp) / rx, (-y1p - cyp) / ry)

    start_angle = _unit_vector_angle(Vec2(1.0, 0.0), v1)
    extent = _unit_vector_angle(v1, v2)
    if not sweep and extent > 0:
        extent -= 2 * math.pi
    elif sweep and extent < 0:
        extent += 2 * math.pi

    segment_count = max(math.ceil(abs(extent) / _QUARTER_TURN), 1)
    segment_extent = extent / segment_count

    curves: list[tuple[Vec2, ...]] = []
    for i in range(segment_count):
        unit_curve = _approximate_unit_arc(start_angle + i * segment_extent, segment_extent)
        curves.append(
            tuple(
                Vec2(
                    cos_phi * p.x * rx - sin_phi * p.y * ry + cx,
                    sin_phi * p.x * rx + cos_phi * p.y * ry + cy,
                )
                for p in unit_curve
            )
        )

    # Pin the ends to the exact input points so consecutive elements stay connected.
    first, last = curves[0], curves[-1]
    curves[0] = (p1, *first[1:])
    curves[-1] = (*last[:-1], p2)
    return curves


def _approximate_unit_arc(start_angle: float, extent: float) -> tuple[Vec2, Vec2, Vec2, Vec2]:
    """Cubic approximation of an arc of the unit circle (see math.stackexchange.com/q/873224)."""
    alpha = 4.0 / 3.0 * math.tan(extent / 4)
    x1, y1 = math.cos(start_angle), math.sin(start_angle)
    x2, y2 = math.cos(start_angle + extent), math.sin(start_angle + extent)
    return (
        Vec2(x1, y1),
        Vec2(x1 - y1 * alpha, y1 + x1 * alpha),
        Vec2(x2 + y2 * alpha, y2 - x2 * alpha),
        Vec2(x2, y2),
    )


def _unit_vector_angle(v1: Vec2, v2: Vec2) -> float:
    """Signed angle from unit vector ``v1`` to unit vector ``v2``."""
    sign = -1.0 if v1.cross(v2) < 0 else 1.0
    dot = min(max(v1.dot(v2), -1.0), 1.0)
    return sign * math.acos(dot)
