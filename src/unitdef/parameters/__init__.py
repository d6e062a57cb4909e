"""Typed decoders for individual unit definition parameters.

Example:
    from unitdef import parse_unit
    from unitdef.parameters import decode, decode_all

    unit = parse_unit(text)
    start_date = decode(unit.parameter("sd"))
    elements = decode_all(unit, "el")
"""

from . import codes, layout, schedule  # noqa: F401  (registers decoders)
from .codes import connector_sync_option
from .registry import (
    DECODERS,
    Decoder,
    decode,
    decode_all,
    decode_first,
    decoder_for,
    register,
)
from .types import (
    DEFAULT_RESULT_JUDGMENT,
    AddressType,
    ConnectionType,
    CountingMethod,
    DayOfMonth,
    DayOfWeek,
    DayOfWeekRule,
    DelayTime,
    DeleteOption,
    DesignationMethod,
    Element,
    EnvironmentVariable,
    EvaluateConditionType,
    ExecutionUserType,
    HoldType,
    MailAddress,
    MapSize,
    Relation,
    ResultJudgmentType,
    StartDate,
    StartTime,
    SyncOption,
    Time,
    TimingMethod,
    UnitType,
    WriteOption,
)

__all__ = [
    # Registry
    "DECODERS",
    "Decoder",
    "decode",
    "decode_all",
    "decode_first",
    "decoder_for",
    "register",
    "connector_sync_option",
    # Values
    "DEFAULT_RESULT_JUDGMENT",
    "AddressType",
    "ConnectionType",
    "CountingMethod",
    "DayOfMonth",
    "DayOfWeek",
    "DayOfWeekRule",
    "DelayTime",
    "DeleteOption",
    "DesignationMethod",
    "Element",
    "EnvironmentVariable",
    "EvaluateConditionType",
    "ExecutionUserType",
    "HoldType",
    "MailAddress",
    "MapSize",
    "Relation",
    "ResultJudgmentType",
    "StartDate",
    "StartTime",
    "SyncOption",
    "Time",
    "TimingMethod",
    "UnitType",
    "WriteOption",
]
