"""SVG document reader: extracts ``<path>`` data and stroke attributes.

Tags are found with regexes rather than a DOM: every ``<path>`` is collected regardless
of nesting, and group transforms are not composed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from svgequations.errors import ParseError

logger = logging.getLogger(__name__)

_SVG_ROOT_RE = re.compile(r"<svg[\s>]", re.IGNORECASE)
_PATH_TAG_RE = re.compile(r"<path\b[^>]*>", re.IGNORECASE)
_ATTR_RE = re.compile(r"""([\w:][\w:.-]*)\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)


@dataclass(frozen=True)
class PathElement:
    """Raw attribute strings of one ``<path>`` element."""

    path: str
    transform: str | None = None
    color: str | None = None
    opacity: str | None = None
    width: str | None = None


def read_svg(svg_text: str, lenient: bool = False) -> list[PathElement]:
    """Collect the path elements of an SVG document, in document order.

    Paths with blank or ``none`` path data are skipped.
    """
    if not _SVG_ROOT_RE.search(svg_text):
        if lenient:
            logger.warning("No <svg> root element found, ignoring document")
            return []
        raise ParseError("Document has no <svg> root element")

    text = _COMMENT_RE.sub("", svg_text)
    elements: list[PathElement] = []
    for match in _PATH_TAG_RE.finditer(text):
        attrs = _extract_attrs(match.group(0))
        d = attrs.get("d")
        if d is None or not d.strip() or d.strip() == "none":
            continue
        elements.append(
            PathElement(
                path=d,
                transform=attrs.get("transform"),
                color=attrs.get("stroke"),
                opacity=attrs.get("stroke-opacity", attrs.get("opacity")),
                width=attrs.get("stroke-width"),
            )
        )

    logger.info("Read SVG: %d path elements", len(elements))
    return elements


def load_svg_text(path: str | Path, lenient: bool = False) -> str | None:
    """Text of an ``.svg`` file, or None for a missing file in lenient mode."""
    file = Path(path)
    if not file.exists():
        if lenient:
            logger.warning("Input file %s doesn't exist, skipping", file)
            return None
        raise ParseError(f"Input file {file} doesn't exist")
    if file.suffix.lower() != ".svg" and not lenient:
        raise ParseError(f"Input file {file} is not an SVG file")

    try:
        return file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Could not read input file {file}: {e}") from e


def read_svg_file(path: str | Path, lenient: bool = False) -> list[PathElement]:
    """Read path elements from an ``.svg`` file."""
    text = load_svg_text(path, lenient)
    if text is None:
        return []
    return read_svg(text, lenient)


def _extract_attrs(tag_text: str) -> dict[str, str]:
    """Attributes of a tag. Declarations in ``style`` override presentation attributes."""
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(tag_text):
        value = m.group(2) if m.group(2) is not None else m.group(3)
        attrs[m.group(1)] = value

    style = attrs.pop("style", None)
    if style:
        for declaration in style.split(";"):
            name, sep, value = declaration.partition(":")
            if sep:
                attrs[name.strip()] = value.strip()
    return attrs
