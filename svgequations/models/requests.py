"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from svgequations.generator.formatter import MAX_PRECISION


class ConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    precision: int | None = Field(
        default=None,
        ge=0,
        le=MAX_PRECISION,
        description="Fractional digits in equations (server default when omitted)",
    )
    equation_type: Literal["parametric", "cartesian"] = Field(default="parametric")
    latex: bool = Field(default=False, description="Use LaTeX grouping symbols")
    lenient: bool | None = Field(
        default=None,
        description="Recover from malformed input (server default when omitted)",
    )
    style: bool = Field(default=False, description="Also return a styling script")
    scale: tuple[float, float] = Field(default=(1.0, -1.0), description="Global x/y scale")
    rotation: float = Field(default=0.0, description="Global rotation, CCW")
    angle_units: Literal["degrees", "radians"] = Field(default="degrees", description="Units of rotation")
    translate: tuple[float, float] = Field(default=(0.0, 0.0), description="Global offset")
    transform: str = Field(default="", description="Extra SVG transform list")
    width_multiplier: float = Field(default=1.0, gt=0, description="Stroke width multiplier")


class PathRequest(BaseModel):
    d: str = Field(..., description="SVG path data")
    lenient: bool | None = Field(default=None, description="Recover from malformed input")
    transform: str = Field(default="", description="SVG transform list applied to the path")
