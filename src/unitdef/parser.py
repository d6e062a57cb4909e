"""Recursive descent parser for JP1/AJS unit definition text.

Grammar:
    units       = unit+
    unit        = "unit" ("=" | WS) attributes ";" "{" body "}"
    attributes  = NAME ["," PERMISSION ["," USER ["," GROUP]]]
    body        = parameter+ unit* | unit+
    parameter   = NAME "=" value ("," value)* ";"
    value       = see unitdef.values

Sub-units always follow the parameters of their parent; a parameter that
appears after a sub-unit is a syntax error.
"""

import logging
from pathlib import Path
from typing import TextIO

from .ast import Attributes, FullQualifiedName, Parameter, Unit, UnitBuilder
from .config import load_settings
from .cursor import WHITESPACE, Cursor
from .errors import NoUnitFoundError, UnitSyntaxError
from .values import expect_value_end, parse_value

logger = logging.getLogger(__name__)

KEYWORD = "unit"
MAX_ATTRIBUTES = 4


class UnitParser:
    """Parses unit definitions. Holds no state between calls."""

    def parse(self, source: str | TextIO) -> list[Unit]:
        """Parse every top-level unit in ``source``."""
        cursor = Cursor(source) if isinstance(source, str) else Cursor.from_stream(source)
        units = []
        cursor.skip_whitespace()
        while cursor.unless_eof():
            units.append(self.parse_unit(cursor))
            cursor.skip_whitespace()
        if not units:
            raise NoUnitFoundError(cursor.position)
        logger.debug("parsed %d top-level unit(s)", len(units))
        return units

    def parse_single(self, source: str | TextIO) -> Unit:
        """Parse ``source`` and require it to hold exactly one unit."""
        cursor = Cursor(source) if isinstance(source, str) else Cursor.from_stream(source)
        cursor.skip_whitespace()
        if cursor.reached_eof():
            raise NoUnitFoundError(cursor.position)
        unit = self.parse_unit(cursor)
        cursor.skip_whitespace()
        if cursor.unless_eof():
            raise UnitSyntaxError(
                "expected end of input after a single top-level unit", cursor.position
            )
        return unit

    def at_unit_keyword(self, cursor: Cursor) -> bool:
        if not cursor.rest_starts_with(KEYWORD):
            return False
        following = cursor.peek(len(KEYWORD))
        return following is not None and (following == "=" or following in WHITESPACE)

    def parse_unit(self, cursor: Cursor, parent: FullQualifiedName | None = None) -> Unit:
        """Parse one ``unit ...;{...}`` block, including its sub-units."""
        cursor.skip_whitespace()
        if not self.at_unit_keyword(cursor):
            raise UnitSyntaxError(f"expected {KEYWORD!r}", cursor.position)
        cursor.skip_word(KEYWORD)
        if cursor.current() == "=":
            cursor.next()
        else:
            cursor.skip_whitespace()

        builder = UnitBuilder(self.parse_attributes(cursor), parent=parent)

        cursor.check(";")
        cursor.next()
        cursor.skip_whitespace()
        cursor.check("{")
        cursor.next()
        cursor.skip_whitespace()

        if cursor.current() == "}":
            raise UnitSyntaxError(
                f"unit {builder.fqn} has no parameters", cursor.position
            )

        if not self.at_unit_keyword(cursor):
            while True:
                builder.parameters.append(self.parse_parameter(cursor))
                cursor.check(";")
                cursor.next()
                cursor.skip_whitespace()
                if cursor.current() == "}" or self.at_unit_keyword(cursor):
                    break

        while self.at_unit_keyword(cursor):
            builder.sub_units.append(self.parse_unit(cursor, builder.fqn))
            cursor.skip_whitespace()

        cursor.check("}")
        cursor.next()
        unit = builder.build()
        logger.debug(
            "parsed unit %s (%d parameters, %d sub-units)",
            unit.fqn,
            len(unit.parameters),
            len(unit.sub_units),
        )
        return unit

    def parse_attributes(self, cursor: Cursor) -> Attributes:
        """Read up to four comma-separated header fields, stopping at ``;``."""
        start = cursor.position
        fields = ["", "", "", ""]
        for i in range(MAX_ATTRIBUTES):
            fields[i] = self._parse_attribute(cursor)
            if cursor.current() == ";" or i == MAX_ATTRIBUTES - 1:
                break
            cursor.next()  # ","
        if not fields[0]:
            raise UnitSyntaxError("unit name is empty", start)
        name, permission_mode, user, group = fields
        return Attributes(
            name=name,
            permission_mode=permission_mode,
            jp1_user_name=user,
            resource_group_name=group,
        )

    def _parse_attribute(self, cursor: Cursor) -> str:
        chars = []
        while True:
            c = cursor.current()
            if c in ",;":
                return "".join(chars)
            chars.append(c)
            cursor.next()

    def parse_parameter(self, cursor: Cursor) -> Parameter:
        """Parse ``name=value[,value...]`` leaving the cursor on ``;``."""
        start = cursor.position
        name = cursor.parse_until("=")
        if not name:
            raise UnitSyntaxError("parameter name is empty", start)
        if any(c in WHITESPACE or c in ",;{}" for c in name):
            raise UnitSyntaxError(f"invalid parameter name {name!r}", start)
        values = []
        while cursor.current() != ";":
            cursor.next()  # "=" or ","
            if cursor.reached_eof():
                raise UnitSyntaxError("unexpected end of input", cursor.position)
            values.append(parse_value(cursor))
            expect_value_end(cursor)
        return Parameter(name=name, values=tuple(values))


def parse(source: str | TextIO) -> list[Unit]:
    """Parse unit definition text into its top-level units."""
    return UnitParser().parse(source)


def parse_unit(source: str | TextIO) -> Unit:
    """Parse text that holds exactly one top-level unit."""
    return UnitParser().parse_single(source)


def parse_file(filepath: str | Path, encoding: str | None = None) -> list[Unit]:
    """Parse a unit definition file.

    ``encoding`` defaults to the configured one (see ``unitdef.config``).
    """
    filepath = Path(filepath)
    encoding = encoding or load_settings().encoding
    logger.info("parsing %s (%s)", filepath, encoding)
    source = filepath.read_text(encoding=encoding)
    return parse(source)
