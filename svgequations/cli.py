"""Command-line entry point: ``svg-equations [options] FILE...``.

For each input ``name.svg`` the equations are written to ``name-output.txt``, one per
line, and with ``--style`` the styling script to ``name-style.js``.
"""

from __future__ import annotations

import argparse
import logging
import sys

from svgequations import __version__
from svgequations.engine.config import ANGLE_UNITS, ConversionConfig
from svgequations.engine.converter import Converter, write_output
from svgequations.errors import ParameterError, ParseError
from svgequations.generator.equations import EQUATION_TYPES

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svg-equations",
        description="Convert SVG paths to parametric or cartesian equations.",
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="Input SVG files")
    parser.add_argument("-p", "--precision", type=int, default=2,
                        help="Fractional digits in equations (default: 2)")
    parser.add_argument("--scale", type=float, nargs=2, default=(1.0, -1.0), metavar=("SX", "SY"),
                        help="Global scale (default: 1 -1, flipping the SVG y axis)")
    parser.add_argument("--rotate", type=float, default=0.0, metavar="ANGLE",
                        help="Global rotation, counterclockwise")
    parser.add_argument("-a", "--angle-units", choices=ANGLE_UNITS, default="degrees",
                        help="Units of --rotate (default: degrees)")
    parser.add_argument("--translate", type=float, nargs=2, default=(0.0, 0.0), metavar=("DX", "DY"),
                        help="Global translation")
    parser.add_argument("--transform", default="", metavar="STR",
                        help="Extra SVG transform list applied before the global transform")
    parser.add_argument("-t", "--type", dest="equation_type", choices=EQUATION_TYPES,
                        default="parametric", help="Equation type (default: parametric)")
    parser.add_argument("-x", "--latex", action="store_true",
                        help="Use LaTeX grouping symbols")
    parser.add_argument("-l", "--lenient", action="store_true",
                        help="Recover from malformed input instead of failing")
    parser.add_argument("--style", action="store_true",
                        help="Also write a styling script")
    parser.add_argument("--width-mult", type=float, default=1.0, metavar="K",
                        help="Stroke width multiplier for the styling script")
    parser.add_argument("--log-level", default="warning",
                        help="Logging level (default: warning)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = ConversionConfig(
            precision=args.precision,
            equation_type=args.equation_type,
            latex=args.latex,
            lenient=args.lenient,
            scale=args.scale,
            rotation=args.rotate,
            angle_units=args.angle_units,
            translate=args.translate,
            transform=args.transform,
            width_multiplier=args.width_mult,
            style=args.style,
        )
        converter = Converter(config)
        for file in args.files:
            result = converter.convert_file(file)
            if result is None:
                continue
            write_output(file, result)
            logger.info("%s: %d equations", file, result.curve_count)
    except (ParseError, ParameterError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
