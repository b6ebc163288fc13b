"""Runs the SVG → equations conversion for one document at a time."""

from __future__ import annotations

import logging
import time
from pathlib import Path as FilePath

from svgequations.engine.config import ConversionConfig
from svgequations.engine.context import ConversionResult, StyledPath
from svgequations.errors import ParseError
from svgequations.generator.equations import EquationGenerator, create_generator
from svgequations.generator.style import generate_style_script
from svgequations.svg.color import parse_color
from svgequations.svg.path_parser import parse_path
from svgequations.svg.reader import PathElement, load_svg_text, read_svg
from svgequations.svg.tokenizer import tokenize
from svgequations.svg.transform_parser import parse_transform
from svgequations.utils.mat33 import Mat33

logger = logging.getLogger(__name__)


class Converter:
    """Orchestrates reading, parsing, transforming and equation generation."""

    def __init__(self, config: ConversionConfig | None = None) -> None:
        self.config = config or ConversionConfig()
        self.generator: EquationGenerator = create_generator(
            self.config.equation_type, self.config.precision, self.config.latex
        )
        self.global_matrix: Mat33 = self.config.base_matrix() * parse_transform(
            self.config.transform, self.config.lenient
        )

    def load_path(self, element: PathElement, index: int = 0) -> StyledPath:
        """Parse one path element and map it into output coordinates."""
        lenient = self.config.lenient
        tokens = tokenize(element.path, lenient)
        path = parse_path(tokens, lenient)
        color = parse_color(element.color, element.opacity, lenient)
        width = self._stroke_width(element.width)
        matrix = self.global_matrix * parse_transform(element.transform, lenient)
        return StyledPath(path.transform(matrix), color, width, index)

    def load_paths(self, svg_text: str) -> tuple[list[StyledPath], dict[int, str]]:
        """Load every path of a document.

        A path that fails to parse aborts the run, unless lenient: then it is logged,
        recorded in the returned error map and skipped.
        """
        paths: list[StyledPath] = []
        errors: dict[int, str] = {}
        for i, element in enumerate(read_svg(svg_text, self.config.lenient)):
            try:
                paths.append(self.load_path(element, i))
            except ParseError as e:
                if not self.config.lenient:
                    raise
                errors[i] = str(e)
                logger.warning("  path %d skipped: %s", i, e)
        return paths, errors

    def convert(self, svg_text: str) -> ConversionResult:
        start = time.perf_counter()

        paths, errors = self.load_paths(svg_text)
        result = ConversionResult(path_count=len(paths), errors=errors)
        for styled in paths:
            t0 = time.perf_counter()
            result.equations.extend(self.generator.generate(styled.path))
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  path %d: %d curves in %.1fms", styled.index, styled.curve_count, elapsed)

        if self.config.style:
            result.style_script = generate_style_script(paths)

        result.processing_time_ms = round((time.perf_counter() - start) * 1000, 1)
        logger.info(
            "Conversion complete: %d paths, %d equations (%d skipped) in %.0fms",
            result.path_count,
            result.curve_count,
            len(errors),
            result.processing_time_ms,
        )
        return result

    def convert_file(self, file: str | FilePath) -> ConversionResult | None:
        """Convert an ``.svg`` file. None when a missing file is skipped in lenient mode."""
        text = load_svg_text(file, self.config.lenient)
        if text is None:
            return None
        return self.convert(text)

    def _stroke_width(self, width: str | None) -> float:
        value = self.config.default_width
        if width is not None:
            try:
                value = float(width.strip().removesuffix("px"))
            except ValueError:
                if not self.config.lenient:
                    raise ParseError(f"Invalid stroke width {width!r}") from None
        return value * self.config.width_multiplier


def write_output(file: str | FilePath, result: ConversionResult) -> list[FilePath]:
    """Write ``<name>-output.txt`` (and ``<name>-style.js``) next to ``file``."""
    file = FilePath(file)
    written = [file.with_name(f"{file.stem}-output.txt")]
    written[0].write_text("\n".join(result.equations), encoding="utf-8")
    if result.style_script is not None:
        style_file = file.with_name(f"{file.stem}-style.js")
        style_file.write_text(result.style_script, encoding="utf-8")
        written.append(style_file)
    for out in written:
        logger.info("Wrote %s", out)
    return written
