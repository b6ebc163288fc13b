"""Styling script for graphing calculators that expose a Desmos-style ``Calc`` API.

Pasted in the browser console after the equations, it sets each expression's color,
opacity and line width to the style of the path it came from.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from svgequations.engine.context import StyledPath

_SCRIPT_TEMPLATE = """\
data = {data};

state = Calc.getState();
for (i = 0; i < data.length; i++) {{
    eq = state.expressions.list[i];
    eq.color = data[i][0];
    eq.lineOpacity = data[i][1];
    eq.lineWidth = data[i][2];
}}
Calc.setState(state);"""


def generate_style_script(paths: Sequence[StyledPath]) -> str:
    """One ``[color, opacity, width]`` entry per generated equation, in output order."""
    data: list[list[str | float]] = []
    for styled in paths:
        entry: list[str | float] = [
            styled.color.to_hex(),
            round(styled.color.opacity, 2),
            round(styled.width, 2),
        ]
        data.extend([entry] * styled.curve_count)
    return _SCRIPT_TEMPLATE.format(data=json.dumps(data, separators=(",", ":")))
