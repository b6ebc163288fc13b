"""Data carried through a conversion run.

Per-path results → StyledPath
Run-level results → ConversionResult
"""

from __future__ import annotations

from dataclasses import dataclass, field

from svgequations.svg.color import Color
from svgequations.svg.elements import Path


@dataclass(frozen=True)
class StyledPath:
    """A parsed, transformed path with the stroke style it's drawn with."""

    path: Path
    color: Color = Color.BLACK
    width: float = 2.5
    # Index of the <path> element in document order
    index: int = 0

    @property
    def curve_count(self) -> int:
        return len(self.path.curves)


@dataclass
class ConversionResult:
    """Equations generated for one SVG document."""

    equations: list[str] = field(default_factory=list)
    # Calculator styling script, when requested
    style_script: str | None = None
    path_count: int = 0
    # Paths skipped in lenient mode: path index → error message
    errors: dict[int, str] = field(default_factory=dict)
    processing_time_ms: float = 0.0

    @property
    def curve_count(self) -> int:
        return len(self.equations)
