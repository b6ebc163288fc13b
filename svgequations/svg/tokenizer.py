"""Path data tokenizer: splits an SVG ``d`` string into commands and numeric values.

Grammar reference: https://www.w3.org/TR/SVG/paths.html#PathDataBNF

Commands and values are kept in two parallel sequences. Every command owns exactly
``COMMAND_ARITY[command]`` values, in order. Repeated value groups after a single
command letter (``L 1 2 3 4``) are expanded into repeated commands so the parser never
has to deal with implicit repetition.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from svgequations.errors import ParseError

logger = logging.getLogger(__name__)

COMMAND_ARITY: dict[str, int] = {
    "M": 2,
    "Z": 0,
    "L": 2,
    "H": 1,
    "V": 1,
    "Q": 4,
    "T": 2,
    "C": 6,
    "S": 4,
    "A": 7,
}

# Implicit command used when values keep coming after a full group.
_REPEAT_COMMAND = {"M": "L", "m": "l"}

# Value indices of the large-arc and sweep flags inside an arc group.
_ARC_FLAG_INDICES = (3, 4)

_SEPARATORS = frozenset(" \t\n\r\f,")


@dataclass
class PathTokens:
    """Parallel command / value sequences produced by :func:`tokenize`."""

    commands: list[str] = field(default_factory=list)
    values: list[float] = field(default_factory=list)


class _Tokenizer:
    """Single-use scanner holding the state of one :func:`tokenize` call."""

    def __init__(self, text: str, lenient: bool) -> None:
        self.text = text
        self.lenient = lenient
        self.tokens = PathTokens()
        self.values_since_command = 0

    @property
    def last_command(self) -> str | None:
        if not self.tokens.commands:
            return None
        return self.tokens.commands[-1].upper()

    @property
    def last_arity(self) -> int:
        command = self.last_command
        return COMMAND_ARITY[command] if command is not None else 0

    def run(self) -> PathTokens:
        text = self.text
        i = 0
        while i < len(text):
            c = text[i]
            if c in _SEPARATORS or c.isspace():
                i += 1
            elif c.upper() in COMMAND_ARITY:
                self._check_arity(i)
                self.tokens.commands.append(c)
                self.values_since_command = 0
                i += 1
            else:
                i = self._read_value(i)

        self._check_arity(len(text))
        return self.tokens

    def _read_value(self, start: int) -> int:
        """Read the literal at ``start`` and return the index where scanning resumes."""
        end = self._literal_end(start)
        literal = self.text[start:end]
        try:
            value = float(literal)
        except ValueError:
            if not self.lenient:
                if not literal:
                    raise ParseError(f"Invalid character {self.text[start]!r}", start) from None
                raise ParseError(f"Invalid number literal {literal!r}", start) from None
            # Skip the offending character, or the whole bad literal.
            return end + 1 if not literal else end

        self.tokens.values.append(value)
        self.values_since_command += 1

        arity = self.last_arity
        if self.values_since_command >= 2 * arity:
            if arity == 0:
                if not self.lenient:
                    raise ParseError("Trailing values", start)
                self.tokens.values.pop()
                self.values_since_command -= 1
            else:
                # A second group of values: repeat the command for it.
                last = self.tokens.commands[-1]
                self.tokens.commands.append(_REPEAT_COMMAND.get(last, last))
                self.values_since_command = arity
        return end

    def _literal_end(self, start: int) -> int:
        """Return the exclusive end index of the numeric literal starting at ``start``."""
        text = self.text
        if (
            self.last_command == "A"
            and self.values_since_command % 7 in _ARC_FLAG_INDICES
            and text[start] in "01"
        ):
            # Flags are single digits, so "A10,10 0 1110,10" means "A10,10 0 1 1 10,10".
            return start + 1
        return literal_end(text, start)

    def _check_arity(self, position: int) -> None:
        """Check that the open command received exactly its number of values."""
        arity = self.last_arity
        if self.values_since_command < arity:
            # Even lenient mode can't make up missing values.
            raise ParseError("Not enough values on command", position)
        if self.values_since_command > arity:
            if not self.lenient:
                raise ParseError("Too many values on command", position)
            extra = self.values_since_command - arity
            del self.tokens.values[-extra:]
            self.values_since_command = arity


def tokenize(path_data: str, lenient: bool = False) -> PathTokens:
    """Split SVG path data into commands and values.

    In lenient mode, invalid characters and literals are skipped and extra values are
    dropped instead of raising :class:`ParseError`. Missing values are always an error.
    """
    tokens = _Tokenizer(path_data, lenient).run()
    logger.debug(
        "Tokenized path: %d commands, %d values", len(tokens.commands), len(tokens.values)
    )
    return tokens


def parse_values(text: str, lenient: bool = False) -> list[float]:
    """Read a separator-delimited list of numeric literals, e.g. a transform's arguments."""
    values: list[float] = []
    i = 0
    while i < len(text):
        c = text[i]
        if c in _SEPARATORS or c.isspace():
            i += 1
            continue
        end = literal_end(text, i)
        literal = text[i:end]
        try:
            values.append(float(literal))
        except ValueError:
            if not lenient:
                if not literal:
                    raise ParseError(f"Invalid character {c!r}", i) from None
                raise ParseError(f"Invalid number literal {literal!r}", i) from None
            end = end + 1 if not literal else end
        i = end
    return values


def literal_end(text: str, start: int) -> int:
    """Return the exclusive end index of the numeric literal starting at ``start``.

    A literal is an optional sign, digits, at most one decimal point and at most one
    exponent marker with its own optional sign. The first character that breaks this
    shape ends the literal; it is not an error by itself.
    """
    has_point = False
    exponent_pos = -1
    i = start
    while i < len(text):
        c = text[i]
        if c == ".":
            if has_point or exponent_pos != -1:
                return i
            has_point = True
        elif c in "eE":
            if exponent_pos != -1:
                return i
            exponent_pos = i
        elif c in "+-":
            if i != start and i != exponent_pos + 1:
                return i
        elif not "0" <= c <= "9":
            return i
        i += 1
    return i
