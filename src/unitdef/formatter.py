"""Serialize units back to unit definition text."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from .ast import Parameter, QuotedValue, TokenValue, TupleValue, Unit
from .config import FormatOptions, load_settings
from .values import quote

logger = logging.getLogger(__name__)


def format_value(value: TokenValue | QuotedValue | TupleValue) -> str:
    if isinstance(value, TokenValue):
        return value.raw
    if isinstance(value, QuotedValue):
        return quote(value.content)
    if isinstance(value, TupleValue):
        inner = ",".join(
            f"{e.key}={e.value}" if e.has_key else e.value for e in value.entries
        )
        return f"({inner})"
    raise TypeError(f"not a parameter value: {value!r}")


def format_parameter(parameter: Parameter) -> str:
    values = ",".join(format_value(v) for v in parameter.values)
    return f"{parameter.name}={values};"


class Formatter:
    """Writes units in the layout JP1/AJS uses for exported definitions."""

    def __init__(self, options: FormatOptions | None = None):
        self.options = options or FormatOptions()

    def format(self, unit: Unit) -> str:
        lines: list[str] = []
        self._emit(unit, 0, lines)
        nl = self.options.newline
        return nl.join(lines) + nl

    def format_all(self, units: Iterable[Unit]) -> str:
        return self.options.unit_separator.join(self.format(u) for u in units)

    def write(self, units: Unit | Iterable[Unit], sink: TextIO) -> None:
        if isinstance(units, Unit):
            units = [units]
        for i, unit in enumerate(units):
            if i:
                sink.write(self.options.unit_separator)
            sink.write(self.format(unit))

    def write_file(
        self,
        units: Unit | Iterable[Unit],
        filepath: str | Path,
        encoding: str | None = None,
    ) -> None:
        encoding = encoding or load_settings().encoding
        logger.info("writing %s (%s)", filepath, encoding)
        # newline="" so FormatOptions.newline is written as-is
        with open(filepath, "w", encoding=encoding, newline="") as f:
            self.write(units, f)

    def _emit(self, unit: Unit, depth: int, lines: list[str]) -> None:
        pad = self.options.indent * depth
        inner = self.options.indent * (depth + 1)
        lines.append(f"{pad}unit={','.join(unit.attributes.fields())};")
        lines.append(f"{pad}{{")
        for parameter in unit.parameters:
            lines.append(inner + format_parameter(parameter))
        for sub in unit.sub_units:
            self._emit(sub, depth + 1, lines)
        lines.append(f"{pad}}}")


def format(unit: Unit, options: FormatOptions | None = None) -> str:  # noqa: A001
    """Serialize one unit and its descendants."""
    return Formatter(options).format(unit)


def format_units(units: Iterable[Unit], options: FormatOptions | None = None) -> str:
    return Formatter(options).format_all(units)
