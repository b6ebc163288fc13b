"""Error kinds raised while reading SVG input or validating conversion options."""

from __future__ import annotations


class ParseError(ValueError):
    """Malformed SVG input: path data, transform list, color or document."""

    def __init__(self, message: str, position: int | None = None) -> None:
        self.message = message
        self.position = position
        if position is not None:
            message = f"{message} at position {position}"
        super().__init__(message)


class ParameterError(ValueError):
    """Invalid conversion option, or an output type that can't represent the input."""
