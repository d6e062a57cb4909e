"""Exception hierarchy for unit definition parsing and decoding."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    offset: int  # 0-based character offset
    line: int
    column: int


class UnitDefError(Exception):
    """Base class for every error raised by this package."""


class ParseError(UnitDefError):
    """Error raised while reading unit definition text."""

    def __init__(self, msg: str, position: Position):
        super().__init__(f"line {position.line}, col {position.column}: {msg}")
        self.reason = msg
        self.position = position

    @property
    def offset(self) -> int:
        return self.position.offset

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column


class UnitSyntaxError(ParseError):
    """Structural error: unexpected character, missing keyword or delimiter."""


class EndOfInputError(UnitSyntaxError):
    """Input ended where more characters were required."""

    def __init__(self, position: Position, msg: str = "unexpected end of input"):
        super().__init__(msg, position)


class ValueSyntaxError(ParseError):
    """Malformed parameter value: unterminated quote or tuple, bad terminator."""


class NoUnitFoundError(ParseError):
    """The input did not contain a single unit definition."""

    def __init__(self, position: Position):
        super().__init__("unit definition not found", position)


class DecodeError(UnitDefError):
    """A parameter value could not be decoded into its typed form."""


class ValueShapeError(DecodeError):
    """A parameter value was accessed as the wrong shape."""


class ConfigError(UnitDefError):
    """Invalid configuration file."""
