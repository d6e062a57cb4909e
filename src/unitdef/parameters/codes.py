"""Decoders for single-value parameters: codes, numbers, flags, mail
addresses and environment variables."""

import re

from ..ast import Parameter, Unit
from ..errors import DecodeError
from ..values import unescape
from .registry import decode_first, parse_int, register, string_value
from .types import (
    AddressType,
    DeleteOption,
    EnvironmentVariable,
    EvaluateConditionType,
    ExecutionUserType,
    HoldType,
    MailAddress,
    ResultJudgmentType,
    SyncOption,
    UnitType,
    WriteOption,
)

ENV_ENTRY = re.compile(r"([A-Za-z_][A-Za-z0-9_]*)=(.*)", re.DOTALL)
MAIL_ADDRESS = re.compile(r'(TO|CC|BCC):"(.*)"', re.DOTALL)

TRUE_CODES = {"y", "yes", "on", "t", "true", "1"}
FALSE_CODES = {"n", "no", "off", "f", "false", "0"}


@register("ty")
def decode_unit_type(parameter: Parameter) -> UnitType:
    return UnitType.from_code(string_value(parameter))


@register("eu")
def decode_execution_user(parameter: Parameter) -> ExecutionUserType:
    return ExecutionUserType.from_code(string_value(parameter))


@register("jd")
def decode_result_judgment(parameter: Parameter) -> ResultJudgmentType:
    return ResultJudgmentType.from_code(string_value(parameter))


@register("ha")
def decode_hold(parameter: Parameter) -> HoldType:
    return HoldType.from_code(string_value(parameter))


@register("soa", "sea")
def decode_write_option(parameter: Parameter) -> WriteOption:
    return WriteOption.from_code(string_value(parameter))


@register("top1", "top2", "top3", "top4")
def decode_delete_option(parameter: Parameter) -> DeleteOption:
    return DeleteOption.from_code(string_value(parameter))


@register("ej")
def decode_evaluate_condition(parameter: Parameter) -> EvaluateConditionType:
    return EvaluateConditionType.from_code(string_value(parameter))


@register("fd", "etm", "tmitv", "tho", "wth", "ejc")
def decode_integer(parameter: Parameter) -> int:
    return parse_int(string_value(parameter), parameter.name)


@register("ncl", "ncex")
def decode_flag(parameter: Parameter) -> bool:
    code = string_value(parameter).lower()
    if code in TRUE_CODES:
        return True
    if code in FALSE_CODES:
        return False
    raise DecodeError(f"invalid {parameter.name} flag: {code!r}")


@register("ncs")
def decode_sync_option(parameter: Parameter) -> SyncOption:
    return SyncOption.SYNC if decode_flag(parameter) else SyncOption.ASYNC


def connector_sync_option(unit: Unit) -> SyncOption | None:
    """Ordering mode of a jobnet connector, or None when ``ncl`` is not set.

    With ``ncl=y`` and no ``ncs`` the connector is asynchronous.
    """
    if not decode_first(unit, "ncl", False):
        return None
    return decode_first(unit, "ncs", SyncOption.ASYNC)


@register("mladr")
def decode_mail_address(parameter: Parameter) -> MailAddress:
    """``mladr=TO:"user@example.com";`` (the address is kept escaped in the token)."""
    text = string_value(parameter)
    m = MAIL_ADDRESS.fullmatch(text)
    if not m:
        raise DecodeError(f"invalid mladr value: {text!r}")
    return MailAddress(
        address_type=AddressType.from_code(m.group(1)), address=unescape(m.group(2))
    )


@register("env")
def decode_environment(parameter: Parameter) -> list[EnvironmentVariable]:
    """``env="NAME=value<newline>NAME=value";`` one variable per line.

    Blank lines are skipped. A value wrapped in double quotes is unquoted.
    """
    variables = []
    for line in string_value(parameter).splitlines():
        if not line.strip():
            continue
        m = ENV_ENTRY.fullmatch(line.strip())
        if not m:
            raise DecodeError(f"invalid env entry: {line!r}")
        name, value = m.groups()
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = unescape(value[1:-1])
        variables.append(EnvironmentVariable(name=name, value=value))
    return variables
