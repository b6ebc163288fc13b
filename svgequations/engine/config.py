"""Conversion configuration: controls how paths are transformed and written out."""

from __future__ import annotations

import math
from dataclasses import dataclass

from svgequations.errors import ParameterError
from svgequations.generator.equations import EQUATION_TYPES
from svgequations.generator.formatter import MAX_PRECISION
from svgequations.utils.mat33 import Mat33

ANGLE_UNITS = ("degrees", "radians")


@dataclass
class ConversionConfig:
    """Options for one conversion run."""

    # Fractional digits in generated equations
    precision: int = 2
    equation_type: str = "parametric"
    latex: bool = False
    # Recover from malformed input instead of failing
    lenient: bool = False

    # Global transform: scale, then rotate (CCW, in angle_units), then translate.
    # SVG's y axis points down, so the default scale flips it.
    scale: tuple[float, float] = (1.0, -1.0)
    rotation: float = 0.0
    angle_units: str = "degrees"
    translate: tuple[float, float] = (0.0, 0.0)
    # Extra SVG transform list applied before the global transform
    transform: str = ""

    # Stroke width used when a path doesn't set one, and a multiplier for all widths
    default_width: float = 2.5
    width_multiplier: float = 1.0
    # Also produce a styling script
    style: bool = False

    def __post_init__(self) -> None:
        self.scale = tuple(self.scale)
        self.translate = tuple(self.translate)
        if not 0 <= self.precision <= MAX_PRECISION:
            raise ParameterError(f"Precision must be between 0 and {MAX_PRECISION}.")
        if self.equation_type not in EQUATION_TYPES:
            raise ParameterError(
                f"Invalid equation type {self.equation_type!r}, "
                f"expected one of: {', '.join(EQUATION_TYPES)}."
            )
        if self.angle_units not in ANGLE_UNITS:
            raise ParameterError(
                f"Invalid angle units {self.angle_units!r}, expected one of: {', '.join(ANGLE_UNITS)}."
            )
        if len(self.scale) != 2 or len(self.translate) != 2:
            raise ParameterError("Scale and translate take exactly two values.")
        if self.width_multiplier <= 0 or self.default_width <= 0:
            raise ParameterError("Stroke widths must be positive.")

    def base_matrix(self) -> Mat33:
        """Scale, rotation and translation, without the extra transform list."""
        sx, sy = self.scale
        dx, dy = self.translate
        angle = math.radians(self.rotation) if self.angle_units == "degrees" else self.rotation
        return (
            Mat33.translate(dx, dy)
            * Mat33.rotation(angle)
            * Mat33.scale(sx, sy)
        )
