"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class ConvertResponse(BaseModel):
    equations: list[str] = Field(default_factory=list)
    style_script: str | None = None
    path_count: int = 0
    curve_count: int = 0
    errors: dict[int, str] = Field(default_factory=dict)
    processing_time_ms: float = 0.0


class PathResponse(BaseModel):
    curves: list[list[tuple[float, float]]] = Field(
        default_factory=list,
        description="Control points of each flattened curve, start and end included",
    )
    element_count: int = 0
    subpath_count: int = 0
