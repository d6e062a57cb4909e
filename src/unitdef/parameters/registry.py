"""Decoder registry keyed by parameter name.

A decoder is a pure function ``Parameter -> value``. Decoders never look at
the unit tree, so one failing decoder leaves every other parameter usable.
"""

import re
from collections.abc import Callable
from typing import Any

from ..ast import Parameter, Unit
from ..errors import DecodeError

Decoder = Callable[[Parameter], Any]

DECODERS: dict[str, Decoder] = {}

_DIGITS = re.compile(r"[0-9]+")


def register(*names: str) -> Callable[[Decoder], Decoder]:
    """Register the decorated function as the decoder for ``names``."""

    def wrap(func: Decoder) -> Decoder:
        for name in names:
            DECODERS[name] = func
        return func

    return wrap


def decoder_for(name: str) -> Decoder:
    try:
        return DECODERS[name]
    except KeyError:
        raise DecodeError(f"no decoder registered for parameter {name!r}") from None


def decode(parameter: Parameter, decoder: Decoder | None = None) -> Any:
    """Decode ``parameter`` with ``decoder`` or the one registered for its name."""
    if decoder is None:
        decoder = decoder_for(parameter.name)
    return decoder(parameter)


def decode_first(unit: Unit, name: str, default: Any = None) -> Any:
    """Decode the first parameter called ``name``, or return ``default``."""
    parameter = unit.parameter(name)
    if parameter is None:
        return default
    return decode(parameter)


def decode_all(unit: Unit, name: str) -> list[Any]:
    """Decode every parameter called ``name``, preserving order."""
    decoder = decoder_for(name)
    return [decoder(p) for p in unit.parameters_named(name)]


# Helpers shared by the decoders


def parse_int(text: str, what: str = "number") -> int:
    """Parse an unsigned base-10 integer."""
    if not _DIGITS.fullmatch(text):
        raise DecodeError(f"invalid {what}: {text!r}")
    return int(text)


def string_value(parameter: Parameter, index: int = 0) -> str:
    if index >= len(parameter.values):
        raise DecodeError(
            f"parameter {parameter.name!r} has no value at position {index}"
        )
    return parameter.values[index].as_string()


def split_rule_number(parameter: Parameter) -> tuple[int, str]:
    """Return ``(rule_number, value)`` for ``[N,]value`` parameters."""
    count = len(parameter.values)
    if count == 1:
        return 1, string_value(parameter, 0)
    if count == 2:
        return (
            parse_int(string_value(parameter, 0), "rule number"),
            string_value(parameter, 1),
        )
    raise DecodeError(
        f"parameter {parameter.name!r} expects 1 or 2 values, got {count}"
    )
