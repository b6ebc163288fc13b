"""Tests for conversion options."""

import math

import pytest

from svgequations.engine.config import ConversionConfig
from svgequations.errors import ParameterError
from svgequations.utils.mat33 import Mat33
from svgequations.utils.vec2 import Vec2


def test_defaults():
    config = ConversionConfig()
    assert config.precision == 2
    assert config.equation_type == "parametric"
    assert config.scale == (1.0, -1.0)
    assert not config.lenient
    assert not config.style


def test_default_matrix_flips_y():
    assert ConversionConfig().base_matrix() == Mat33.scale(1.0, -1.0)


def test_base_matrix_order():
    config = ConversionConfig(scale=(2.0, 2.0), rotation=90.0, translate=(10.0, 0.0))
    p = config.base_matrix() * Vec2(1.0, 0.0)
    # scale → (2, 0), rotate → (0, 2), translate → (10, 2)
    assert p.x == pytest.approx(10.0)
    assert p.y == pytest.approx(2.0)


def test_lists_become_tuples():
    config = ConversionConfig(scale=[1, 1], translate=[0, 5])
    assert config.scale == (1, 1)
    assert config.translate == (0, 5)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"precision": -1},
        {"precision": 9},
        {"equation_type": "polar"},
        {"scale": (1.0,)},
        {"translate": (1.0, 2.0, 3.0)},
        {"width_multiplier": 0.0},
        {"default_width": -1.0},
    ],
)
def test_invalid(kwargs):
    with pytest.raises(ParameterError):
        ConversionConfig(**kwargs)


def test_rotation_in_degrees():
    m = ConversionConfig(scale=(1.0, 1.0), rotation=180.0).base_matrix()
    assert m.m00 == pytest.approx(math.cos(math.pi))


def test_rotation_in_radians():
    config = ConversionConfig(scale=(1.0, 1.0), rotation=math.pi / 2, angle_units="radians")
    p = config.base_matrix() * Vec2(1.0, 0.0)
    assert p.x == pytest.approx(0.0, abs=1e-12)
    assert p.y == pytest.approx(1.0)


def test_invalid_angle_units():
    with pytest.raises(ParameterError, match="angle units"):
        ConversionConfig(angle_units="gradians")
