"""SVG path data to parametric / cartesian equations."""

from svgequations.errors import ParameterError, ParseError
from svgequations.svg.arc import arc_to_curves
from svgequations.svg.elements import Arc, Curve, Line, Path
from svgequations.svg.path_parser import parse_path, parse_path_data
from svgequations.svg.tokenizer import PathTokens, tokenize
from svgequations.utils.mat33 import Mat33
from svgequations.utils.vec2 import Vec2

__version__ = "0.1.0"

__all__ = [
    "Arc",
    "Curve",
    "Line",
    "Mat33",
    "ParameterError",
    "ParseError",
    "Path",
    "PathTokens",
    "Vec2",
    "arc_to_curves",
    "parse_path",
    "parse_path_data",
    "tokenize",
]
