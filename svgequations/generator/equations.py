"""Equation generators: flattened path curves → equation strings.

Parametric equations use the Bernstein form of each Bézier curve
(https://en.wikipedia.org/wiki/B%C3%A9zier_curve#General_definition). Cartesian
equations are only produced for straight lines: a Bézier curve can be fitted by a
polynomial, but its loops can't be expressed with simple x/y bounds.
"""

from __future__ import annotations

import math

from svgequations.errors import ParameterError
from svgequations.generator.formatter import EquationFormatter
from svgequations.svg.elements import CurvePoints, Path

EQUATION_TYPES = ("parametric", "cartesian")

_LATEX_REPLACEMENTS = (
    ("(", "\\left("),
    (")", "\\right)"),
    ("{", "\\left\\{"),
    ("}", "\\right\\}"),
)


class EquationGenerator:
    """Base generator. Subclasses turn one flattened curve into one equation."""

    def __init__(self, formatter: EquationFormatter | None = None, latex: bool = False) -> None:
        self.formatter = formatter or EquationFormatter()
        self.latex = latex

    def generate(self, path: Path) -> list[str]:
        equations = []
        for curve in path.curves:
            equation = self.curve_equation(curve)
            if self.latex:
                equation = to_latex(equation)
            equations.append(equation)
        return equations

    def curve_equation(self, curve: CurvePoints) -> str:
        raise NotImplementedError


class ParametricGenerator(EquationGenerator):
    """``(X(t), Y(t))`` for 0 <= t <= 1."""

    def __init__(
        self,
        formatter: EquationFormatter | None = None,
        latex: bool = False,
        parameter: str = "t",
    ) -> None:
        super().__init__(formatter, latex)
        self.parameter = parameter

    def curve_equation(self, curve: CurvePoints) -> str:
        n = len(curve) - 1
        t = self.parameter
        x_terms: list[tuple[float, str]] = []
        y_terms: list[tuple[float, str]] = []
        for i, p in enumerate(curve):
            coeff = math.comb(n, i)
            term = _power(t, i) + _power(f"(1-{t})", n - i)
            x_terms.append((p.x * coeff, term))
            y_terms.append((p.y * coeff, term))
        return f"({self.formatter.format(x_terms)}, {self.formatter.format(y_terms)})"


class CartesianGenerator(EquationGenerator):
    """``ax + by = c`` bounded on the axis along which the segment is longest."""

    def curve_equation(self, curve: CurvePoints) -> str:
        if len(curve) != 2:
            raise ParameterError("Cartesian equation type doesn't support curves.")
        p0, p1 = curve
        a = p0.y - p1.y
        b = p1.x - p0.x
        c = p1.x * p0.y - p0.x * p1.y

        terms = [(a, "x"), (b, "y")]
        if abs(p1.x - p0.x) > abs(p1.y - p0.y):
            return self.formatter.format(terms, c, "x", min(p0.x, p1.x), max(p0.x, p1.x))
        return self.formatter.format(terms, c, "y", min(p0.y, p1.y), max(p0.y, p1.y))


def create_generator(equation_type: str, precision: int = 2, latex: bool = False) -> EquationGenerator:
    """Generator for ``"parametric"`` or ``"cartesian"`` equations."""
    formatter = EquationFormatter(precision)
    if equation_type == "parametric":
        return ParametricGenerator(formatter, latex)
    if equation_type == "cartesian":
        return CartesianGenerator(formatter, latex)
    raise ParameterError(f"Unknown equation type {equation_type!r}")


def to_latex(equation: str) -> str:
    """Replace grouping symbols with their LaTeX ``\\left``/``\\right`` forms."""
    for plain, latex in _LATEX_REPLACEMENTS:
        equation = equation.replace(plain, latex)
    return equation


def _power(term: str, exponent: int) -> str:
    if exponent == 0:
        return ""
    if exponent == 1:
        return term
    return f"{term}^{exponent}"
