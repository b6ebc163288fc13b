"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgequations.utils.vec2 import Vec2


# Sample SVGs

SQUARE_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20" viewBox="0 0 20 20">
  <path d="M0,0 v20 h20 v-20 Z"/>
</svg>'''

SQUARE_TRANSFORM_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="30" height="30">
  <path d="M0,0 v20 h20 v-20 Z" transform="translate(10,10)"/>
</svg>'''

SQUARES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="35" height="35">
  <path d="M0,0 h5 v5 h-5 Z"/>
  <!-- <path d="M100,100 h1"/> -->
  <g>
    <path d="M5,5 h10 v10 h-10 Z"/>
  </g>
  <path d="M15,15 h20 v20 h-20 Z"/>
</svg>'''

SQUARES_STYLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="35" height="35">
  <path d="M0,0 h5 v5 h-5 Z" stroke="red" stroke-opacity="0.12" stroke-width="4"/>
  <path d="M5,5 h10 v10 h-10 Z" style="stroke: rgba(0 0 0 / 50%); stroke-width: 4.5" stroke="blue"/>
  <path d="M15,15 h20 v20 h-20 Z" stroke="#fff" opacity="50%"/>
</svg>'''

CURVES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <path d="M10,10 Q20,20 30,10 T50,10" stroke="#00ff00" stroke-width="2px"/>
  <path d="M10,50 C20,60 30,60 40,50 S60,40 70,50"/>
  <path d="M50,80 a10,10 0 1,0 20,0"/>
</svg>'''

BAD_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <path d="M0,0 L10,10"/>
  <path d="M0,0 L10,10 Q"/>
  <path d="M0,0 L20,0"/>
</svg>'''


def assert_points_close(expected, actual, delta: float = 1e-9) -> None:
    """Compare two sequences of control point tuples coordinate by coordinate."""
    assert len(expected) == len(actual)
    for exp_curve, act_curve in zip(expected, actual):
        assert len(exp_curve) == len(act_curve)
        for exp, act in zip(exp_curve, act_curve):
            assert act.x == pytest.approx(exp.x, abs=delta)
            assert act.y == pytest.approx(exp.y, abs=delta)


def points(*coords: float) -> tuple[Vec2, ...]:
    """``points(1, 2, 3, 4)`` → ``(Vec2(1, 2), Vec2(3, 4))``."""
    return tuple(Vec2(coords[i], coords[i + 1]) for i in range(0, len(coords), 2))


@pytest.fixture
def square_svg() -> str:
    return SQUARE_SVG


@pytest.fixture
def squares_svg() -> str:
    return SQUARES_SVG


@pytest.fixture
def squares_style_svg() -> str:
    return SQUARES_STYLE_SVG


@pytest.fixture
def curves_svg() -> str:
    return CURVES_SVG


@pytest.fixture
def svg_file(tmp_path):
    """Write an SVG document to a temporary ``.svg`` file and return its path."""

    def write(text: str, name: str = "drawing.svg"):
        file = tmp_path / name
        file.write_text(text, encoding="utf-8")
        return file

    return write
