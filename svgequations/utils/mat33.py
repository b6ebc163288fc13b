"""3x3 affine transform matrix. No svg imports.

Row-major coefficients. Only the first two rows matter when mapping points:
the third homogeneous coordinate of a point is implicitly 1.
"""

from __future__ import annotations

import math
from dataclasses import astuple, dataclass
from typing import ClassVar, overload

import numpy as np
from numpy.typing import NDArray

from svgequations.utils.vec2 import Vec2


@dataclass(frozen=True)
class Mat33:
    m00: float
    m01: float
    m02: float
    m10: float
    m11: float
    m12: float
    m20: float
    m21: float
    m22: float

    IDENTITY: ClassVar[Mat33]

    # --- Construction -----------------------------------------------------

    @classmethod
    def identity(cls) -> Mat33:
        return cls(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)

    @classmethod
    def scale(cls, sx: float, sy: float) -> Mat33:
        return cls(sx, 0.0, 0.0, 0.0, sy, 0.0, 0.0, 0.0, 1.0)

    @classmethod
    def translate(cls, dx: float, dy: float) -> Mat33:
        return cls(1.0, 0.0, dx, 0.0, 1.0, dy, 0.0, 0.0, 1.0)

    @classmethod
    def rotation(cls, angle: float) -> Mat33:
        """Counter-clockwise rotation by ``angle`` radians."""
        cos, sin = math.cos(angle), math.sin(angle)
        return cls(cos, -sin, 0.0, sin, cos, 0.0, 0.0, 0.0, 1.0)

    @classmethod
    def skew(cls, x: float, y: float) -> Mat33:
        """Skew by ``x`` radians along the X axis and ``y`` radians along the Y axis."""
        return cls(1.0, math.tan(x), 0.0, math.tan(y), 1.0, 0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_array(cls, array: NDArray[np.float64]) -> Mat33:
        return cls(*(float(v) for v in np.asarray(array, dtype=np.float64).reshape(9)))

    def to_array(self) -> NDArray[np.float64]:
        return np.array(astuple(self), dtype=np.float64).reshape(3, 3)

    # --- Algebra ----------------------------------------------------------

    def __add__(self, other: Mat33) -> Mat33:
        return Mat33.from_array(self.to_array() + other.to_array())

    def __sub__(self, other: Mat33) -> Mat33:
        return Mat33.from_array(self.to_array() - other.to_array())

    def __neg__(self) -> Mat33:
        return Mat33(*(-v for v in astuple(self)))

    @overload
    def __mul__(self, other: Mat33) -> Mat33: ...

    @overload
    def __mul__(self, other: Vec2) -> Vec2: ...

    @overload
    def __mul__(self, other: float) -> Mat33: ...

    def __mul__(self, other):
        if isinstance(other, Mat33):
            return Mat33.from_array(self.to_array() @ other.to_array())
        if isinstance(other, Vec2):
            return Vec2(
                self.m00 * other.x + self.m01 * other.y + self.m02,
                self.m10 * other.x + self.m11 * other.y + self.m12,
            )
        if isinstance(other, (int, float)):
            return Mat33(*(v * other for v in astuple(self)))
        return NotImplemented

    def __rmul__(self, k: float) -> Mat33:
        if isinstance(k, (int, float)):
            return Mat33(*(v * k for v in astuple(self)))
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, (Mat33, Vec2)):
            return self * other
        return NotImplemented

    # --- Properties -------------------------------------------------------

    @property
    def determinant(self) -> float:
        """Determinant of the linear (upper-left 2x2) part."""
        return self.m00 * self.m11 - self.m01 * self.m10

    def is_similarity(self, tol: float = 1e-9) -> bool:
        """True if the linear part is a rotation times a uniform scale, mirrored or not.

        Such matrices map ellipses to ellipses with the same axis ratio, so arcs can be
        transformed without approximating them first.
        """
        if self.m20 != 0.0 or self.m21 != 0.0 or self.m22 != 1.0:
            return False
        scale = max(abs(self.m00), abs(self.m01), abs(self.m10), abs(self.m11), 1.0)
        eps = tol * scale
        direct = abs(self.m00 - self.m11) <= eps and abs(self.m01 + self.m10) <= eps
        mirrored = abs(self.m00 + self.m11) <= eps and abs(self.m01 - self.m10) <= eps
        return (direct or mirrored) and abs(self.determinant) > eps

    def __str__(self) -> str:
        return (
            f"Mat33([{self.m00} {self.m01} {self.m02}] "
            f"[{self.m10} {self.m11} {self.m12}] "
            f"[{self.m20} {self.m21} {self.m22}])"
        )


IDENTITY = Mat33.identity()
Mat33.IDENTITY = IDENTITY
