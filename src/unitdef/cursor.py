"""Position-tracking input cursor shared by the unit and value grammars."""

from typing import TextIO

from .errors import EndOfInputError, Position, UnitSyntaxError

WHITESPACE = " \t\r\n\f\v"


class Cursor:
    """Read-only view over a character sequence.

    The cursor starts on the first character. ``current()`` never consumes;
    ``next()`` moves one character forward and keeps line/column in step.
    """

    def __init__(self, source: str):
        self.source = source
        self.offset = 0
        self.line = 1
        self.column = 1

    @classmethod
    def from_stream(cls, stream: TextIO) -> "Cursor":
        return cls(stream.read())

    @property
    def position(self) -> Position:
        return Position(self.offset, self.line, self.column)

    def reached_eof(self) -> bool:
        return self.offset >= len(self.source)

    def unless_eof(self) -> bool:
        return self.offset < len(self.source)

    def current(self) -> str:
        if self.reached_eof():
            raise EndOfInputError(self.position)
        return self.source[self.offset]

    def next(self) -> str | None:
        """Advance one character and return the new current character."""
        if self.reached_eof():
            raise EndOfInputError(self.position)
        if self.source[self.offset] == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.offset += 1
        return None if self.reached_eof() else self.source[self.offset]

    def rest_starts_with(self, prefix: str) -> bool:
        return self.source.startswith(prefix, self.offset)

    def peek(self, ahead: int = 1) -> str | None:
        idx = self.offset + ahead
        if idx >= len(self.source):
            return None
        return self.source[idx]

    def skip_whitespace(self) -> None:
        while self.unless_eof() and self.source[self.offset] in WHITESPACE:
            self.next()

    def skip_word(self, word: str) -> None:
        if not self.rest_starts_with(word):
            raise UnitSyntaxError(f"expected {word!r}", self.position)
        for _ in word:
            self.next()

    def check(self, expected: str) -> None:
        """Raise unless the current character is ``expected``."""
        c = self.current()
        if c != expected:
            raise UnitSyntaxError(f"expected {expected!r}, got {c!r}", self.position)

    def parse_until(self, stop: str) -> str:
        """Collect characters up to (not including) ``stop``."""
        start = self.offset
        while self.current() != stop:
            self.next()
        return self.source[start : self.offset]
