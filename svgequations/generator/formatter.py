"""Equation text formatting: coefficient/term pairs → ``"2x^2 - 4 {x >= 0}"``."""

from __future__ import annotations

import math
from collections.abc import Sequence

MAX_PRECISION = 8


def format_number(value: float, precision: int) -> str:
    """At most ``precision`` fractional digits, trailing zeros dropped, never ``-0``."""
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


class EquationFormatter:
    """Formats equations with a fixed number of fractional digits."""

    def __init__(self, precision: int = 2) -> None:
        if not 0 <= precision <= MAX_PRECISION:
            raise ValueError(f"Precision must be between 0 and {MAX_PRECISION}")
        self.precision = precision

    def number(self, value: float) -> str:
        return format_number(value, self.precision)

    def format(
        self,
        terms: Sequence[tuple[float, str]],
        constant: float | None = None,
        bounds_symbol: str = "x",
        bounds_start: float = -math.inf,
        bounds_end: float = math.inf,
    ) -> str:
        """Join ``(coefficient, term)`` pairs into an expression.

        Terms whose coefficient rounds to 0 are omitted and a coefficient rounding to 1
        is not written. An empty expression is ``0``. With ``constant`` the result is an
        equation ``expr = constant``. Finite bounds are appended in braces.
        """
        if bounds_end <= bounds_start:
            raise ValueError("End bound must be greater than start bound.")

        parts: list[str] = []
        for coeff, term in terms:
            coeff_str = self.number(abs(coeff))
            if coeff_str == "0":
                continue

            if not parts:
                if coeff < 0:
                    parts.append("-")
            else:
                parts.append(" + " if coeff > 0 else " - ")

            # A bare "1" is implied, except for a constant term.
            if coeff_str != "1" or not term:
                parts.append(coeff_str)
            parts.append(term)

        text = "".join(parts) or "0"

        if constant is not None:
            text += f" = {self.number(constant)}"

        start_finite = not math.isinf(bounds_start)
        end_finite = not math.isinf(bounds_end)
        if start_finite and end_finite:
            text += (
                f" {{{self.number(bounds_start)} <= {bounds_symbol} <= {self.number(bounds_end)}}}"
            )
        elif start_finite:
            text += f" {{{bounds_symbol} >= {self.number(bounds_start)}}}"
        elif end_finite:
            text += f" {{{bounds_symbol} <= {self.number(bounds_end)}}}"

        return text
