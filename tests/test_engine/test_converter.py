"""Tests for the conversion orchestrator."""

import pytest

from svgequations.engine.config import ConversionConfig
from svgequations.engine.converter import Converter, write_output
from svgequations.errors import ParameterError, ParseError
from svgequations.svg.color import Color
from svgequations.svg.reader import PathElement
from svgequations.utils.vec2 import Vec2
from tests.conftest import (
    BAD_PATH_SVG,
    CURVES_SVG,
    SQUARE_SVG,
    SQUARE_TRANSFORM_SVG,
    SQUARES_STYLE_SVG,
    SQUARES_SVG,
    points,
)


def test_square_default_flips_y():
    paths, errors = Converter().load_paths(SQUARE_SVG)
    assert errors == {}
    assert len(paths) == 1
    assert paths[0].path.curves == [
        points(0, 0, 0, -20),
        points(0, -20, 20, -20),
        points(20, -20, 20, 0),
        points(20, 0, 0, 0),
    ]


def test_element_transform_applied_before_global():
    config = ConversionConfig(scale=(1.0, 1.0), translate=(100.0, 0.0))
    paths, _ = Converter(config).load_paths(SQUARE_TRANSFORM_SVG)
    assert paths[0].path.curves[0] == points(110, 10, 110, 30)


def test_extra_transform_applied_before_global():
    config = ConversionConfig(scale=(2.0, 2.0), transform="translate(1, 1)")
    paths, _ = Converter(config).load_paths(SQUARE_SVG)
    assert paths[0].path.curves[0] == points(2, 2, 2, 42)


def test_load_path_style():
    converter = Converter(ConversionConfig(width_multiplier=2.0))
    styled = converter.load_path(
        PathElement("M0,0 L1,1", color="red", opacity="50%", width="3px"), index=4
    )
    assert styled.color == Color(255, 0, 0, 128)
    assert styled.width == 6.0
    assert styled.index == 4


def test_load_path_default_style():
    styled = Converter().load_path(PathElement("M0,0 L1,1"))
    assert styled.color == Color.BLACK
    assert styled.width == 2.5


def test_invalid_width():
    element = PathElement("M0,0 L1,1", width="thick")
    with pytest.raises(ParseError, match="Invalid stroke width"):
        Converter().load_path(element)
    styled = Converter(ConversionConfig(lenient=True)).load_path(element)
    assert styled.width == 2.5


def test_invalid_global_transform():
    with pytest.raises(ParseError):
        Converter(ConversionConfig(transform="spin(3)"))


# ---------------------------------------------------------------------------
# convert()
# ---------------------------------------------------------------------------


class TestConvert:
    def test_squares(self):
        result = Converter().convert(SQUARES_SVG)
        assert result.path_count == 3
        assert result.curve_count == 12
        assert result.style_script is None
        assert result.errors == {}
        assert result.processing_time_ms >= 0

    def test_first_equation(self):
        config = ConversionConfig(scale=(1.0, 1.0))
        result = Converter(config).convert(SQUARE_SVG)
        assert result.equations[0] == "(0, 20t)"

    def test_cartesian(self):
        config = ConversionConfig(equation_type="cartesian", scale=(1.0, 1.0))
        result = Converter(config).convert(SQUARE_SVG)
        assert result.equations == [
            "-20x = 0 {0 <= y <= 20}",
            "20y = 400 {0 <= x <= 20}",
            "20x = 400 {0 <= y <= 20}",
            "-20y = 0 {0 <= x <= 20}",
        ]

    def test_cartesian_rejects_curves(self):
        config = ConversionConfig(equation_type="cartesian")
        with pytest.raises(ParameterError):
            Converter(config).convert(CURVES_SVG)

    def test_style_script(self):
        result = Converter(ConversionConfig(style=True)).convert(SQUARES_STYLE_SVG)
        assert result.style_script is not None
        assert '["#ff0000",0.12,4.0]' in result.style_script
        assert '["#ffffff",0.5,2.5]' in result.style_script

    def test_curves(self):
        result = Converter().convert(CURVES_SVG)
        # 2 quadratics, 2 cubics and a 180° arc split in two
        assert result.curve_count == 6

    def test_bad_path_strict(self):
        with pytest.raises(ParseError):
            Converter().convert(BAD_PATH_SVG)

    def test_bad_path_lenient(self):
        result = Converter(ConversionConfig(lenient=True)).convert(BAD_PATH_SVG)
        assert result.path_count == 2
        assert result.curve_count == 2
        assert list(result.errors) == [1]
        assert "Not enough values" in result.errors[1]

    def test_no_svg_root(self):
        with pytest.raises(ParseError):
            Converter().convert("<html/>")
        assert Converter(ConversionConfig(lenient=True)).convert("<html/>").equations == []


def test_rotation_and_translation():
    config = ConversionConfig(scale=(1.0, 1.0), rotation=90.0, translate=(5.0, 0.0))
    paths, _ = Converter(config).load_paths('<svg><path d="M0,0 L10,0"/></svg>')
    start, end = paths[0].path.curves[0]
    assert start == Vec2(5.0, 0.0)
    assert end.x == pytest.approx(5.0)
    assert end.y == pytest.approx(10.0)


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


class TestFiles:
    def test_convert_and_write(self, svg_file):
        file = svg_file(SQUARES_STYLE_SVG, name="squares.svg")
        result = Converter(ConversionConfig(style=True)).convert_file(file)
        written = write_output(file, result)

        output = file.with_name("squares-output.txt")
        style = file.with_name("squares-style.js")
        assert written == [output, style]
        assert output.read_text(encoding="utf-8").splitlines() == result.equations
        assert style.read_text(encoding="utf-8") == result.style_script

    def test_no_style_file_without_style(self, svg_file):
        file = svg_file(SQUARE_SVG)
        written = write_output(file, Converter().convert_file(file))
        assert [p.name for p in written] == ["drawing-output.txt"]
        assert not file.with_name("drawing-style.js").exists()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ParseError):
            Converter().convert_file(tmp_path / "missing.svg")
        assert Converter(ConversionConfig(lenient=True)).convert_file(tmp_path / "missing.svg") is None
