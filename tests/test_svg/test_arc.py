"""Tests for the arc → cubic approximation, checked against svgpathtools."""

import math

import pytest
import svgpathtools

from svgequations.svg.arc import arc_to_curves
from svgequations.utils.vec2 import Vec2


def bezier_point(curve, t: float) -> Vec2:
    p0, p1, p2, p3 = curve
    u = 1 - t
    return p0 * u**3 + p1 * (3 * u**2 * t) + p2 * (3 * u * t**2) + p3 * t**3


def reference_arc(p1: Vec2, p2: Vec2, radii: Vec2, rotation_deg: float, large_arc: bool, sweep: bool):
    return svgpathtools.Arc(
        complex(p1.x, p1.y),
        complex(radii.x, radii.y),
        rotation_deg,
        large_arc,
        sweep,
        complex(p2.x, p2.y),
    )


ARCS = [
    # p1, p2, radii, rotation (degrees), large_arc, sweep
    (Vec2(100, 100), Vec2(110, 110), Vec2(30, 50), 0.0, True, True),
    (Vec2(0, 0), Vec2(20, 0), Vec2(10, 10), 0.0, False, True),
    (Vec2(0, 0), Vec2(20, 0), Vec2(10, 10), 0.0, True, False),
    (Vec2(10, 10), Vec2(40, 25), Vec2(20, 10), 30.0, False, False),
    (Vec2(10, 10), Vec2(40, 25), Vec2(20, 10), 30.0, True, True),
    (Vec2(-5, 3), Vec2(7, -8), Vec2(4, 9), -60.0, True, False),
    # Radii too small: scaled up to reach the end point
    (Vec2(-0.5, 0), Vec2(0, 0.5), Vec2(0.09188163040671497, 0.011583783896639943), 0.0, False, True),
]


@pytest.mark.parametrize("p1,p2,radii,rotation,large_arc,sweep", ARCS)
def test_matches_reference_arc(p1, p2, radii, rotation, large_arc, sweep):
    curves = arc_to_curves(p1, p2, radii, math.radians(rotation), large_arc, sweep)
    reference = reference_arc(p1, p2, radii, rotation, large_arc, sweep)
    n = len(curves)
    # Each segment spans at most 90°
    assert n == max(math.ceil(abs(reference.delta) / 90 - 1e-9), 1)

    tolerance = 1e-3 * max(abs(reference.radius.real), abs(reference.radius.imag))
    for k, curve in enumerate(curves):
        assert len(curve) == 4
        for t in (0.0, 0.5, 1.0):
            expected = reference.point((k + t) / n)
            actual = bezier_point(curve, t)
            assert actual.x == pytest.approx(expected.real, abs=tolerance)
            assert actual.y == pytest.approx(expected.imag, abs=tolerance)


def test_endpoints_are_exact():
    p1, p2 = Vec2(10.1, 10.7), Vec2(40.3, 25.9)
    curves = arc_to_curves(p1, p2, Vec2(20, 10), 0.4, True, False)
    assert curves[0][0] == p1
    assert curves[-1][-1] == p2
    for a, b in zip(curves, curves[1:]):
        assert a[-1] == b[0]


def test_segment_count():
    # Quarter, half and 240° of a circle of radius 10 centered on the origin
    quarter = arc_to_curves(Vec2(10, 0), Vec2(0, 10), Vec2(10, 10), 0.0, False, True)
    half = arc_to_curves(Vec2(0, 0), Vec2(20, 0), Vec2(10, 10), 0.0, False, True)
    end = Vec2(10 * math.cos(math.radians(240)), 10 * math.sin(math.radians(240)))
    large = arc_to_curves(Vec2(10, 0), end, Vec2(10, 10), 0.0, True, True)
    assert [len(quarter), len(half), len(large)] == [1, 2, 3]


def test_quarter_circle_control_points():
    (curve,) = arc_to_curves(Vec2(10, 0), Vec2(0, 10), Vec2(10, 10), 0.0, False, True)
    alpha = 4 / 3 * math.tan(math.pi / 8) * 10
    assert curve[1].x == pytest.approx(10)
    assert curve[1].y == pytest.approx(alpha)
    assert curve[2].x == pytest.approx(alpha)
    assert curve[2].y == pytest.approx(10)


def test_degenerate_arcs():
    assert arc_to_curves(Vec2(5, 5), Vec2(5, 5), Vec2(10, 10), 0.0, False, True) == []
    assert arc_to_curves(Vec2(0, 0), Vec2(5, 5), Vec2(0, 10), 0.0, False, True) == [
        (Vec2(0, 0), Vec2(5, 5))
    ]


def test_negative_radii_use_absolute_values():
    positive = arc_to_curves(Vec2(0, 0), Vec2(20, 0), Vec2(10, 10), 0.0, False, True)
    negative = arc_to_curves(Vec2(0, 0), Vec2(20, 0), Vec2(-10, -10), 0.0, False, True)
    assert positive == negative
