"""Decoders for jobnet map layout: ``el``, ``sz`` and ``ar``."""

import re

from ..ast import Parameter
from ..errors import DecodeError
from .registry import parse_int, register, string_value
from .types import ConnectionType, Element, MapSize, Relation, UnitType

EL_POSITION = re.compile(r"\+([0-9]+)\s*\+([0-9]+)")
SZ_VALUE = re.compile(r"([0-9]+)[^0-9]+([0-9]+)")


@register("el")
def decode_element(parameter: Parameter) -> Element:
    """``el=NAME,TYPE,+H +V;``"""
    if len(parameter.values) != 3:
        raise DecodeError(f"el expects 3 values, got {len(parameter.values)}")
    position = string_value(parameter, 2)
    m = EL_POSITION.fullmatch(position)
    if not m:
        raise DecodeError(f"invalid el position: {position!r}")
    return Element(
        unit_name=string_value(parameter, 0),
        unit_type=UnitType.from_code(string_value(parameter, 1)),
        h_pixel=parse_int(m.group(1)),
        v_pixel=parse_int(m.group(2)),
    )


@register("sz")
def decode_map_size(parameter: Parameter) -> MapSize:
    """``sz=WxH;``"""
    text = string_value(parameter)
    m = SZ_VALUE.fullmatch(text)
    if not m:
        raise DecodeError(f"invalid sz value: {text!r}")
    return MapSize(width=int(m.group(1)), height=int(m.group(2)))


@register("ar")
def decode_relation(parameter: Parameter) -> Relation:
    """``ar=(f=FROM,t=TO[,seq|con]);``"""
    entries = parameter.first.as_tuple()
    from_unit = entries.get("f")
    to_unit = entries.get("t")
    if from_unit is None or to_unit is None:
        raise DecodeError("ar requires both f= and t= entries")
    connection = ConnectionType.SEQUENTIAL
    if len(entries) == 3:
        connection = ConnectionType.from_code(entries[2].value)
    return Relation(from_unit=from_unit, to_unit=to_unit, connection=connection)
