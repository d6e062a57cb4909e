"""Decoders for schedule rules: ``sd``, ``st``, ``sy`` and ``ey``.

    sd = [N,]{[[yyyy/]mm/]{[+|*|@]dd | [+|*|@]b[-DD] | [+]dow[:{n|b}]} | en | ud}
    st = [N,][+]hh:mm
    sy = [N,]{hh:mm | {M|U|C}mmmm}
    ey = [N,]{hh:mm | {M|U|C}mmmm}
"""

import re

from ..ast import Parameter
from ..errors import DecodeError
from .registry import parse_int, register, split_rule_number
from .types import (
    CountingMethod,
    DayOfMonth,
    DayOfWeek,
    DayOfWeekRule,
    DelayTime,
    DesignationMethod,
    StartDate,
    StartTime,
    Time,
    TimingMethod,
)

DAY_OF_WEEK = re.compile(r"(su|mo|tu|we|th|fr|sa)(?::([0-9]|b))?")
BACKWARD_DAY = re.compile(r"b(?:-([0-9]+))?")
HH_MM = re.compile(r"([0-9]+):([0-9]+)")

COUNTING_PREFIXES = {
    "+": CountingMethod.RELATIVE,
    "*": CountingMethod.BUSINESS_DAY,
    "@": CountingMethod.NON_BUSINESS_DAY,
}

TIMING_PREFIXES = {
    "M": TimingMethod.RELATIVE_TO_ROOT_START,
    "U": TimingMethod.RELATIVE_TO_SUPERIOR_START,
    "C": TimingMethod.RELATIVE_TO_OWN_START,
}


def _parse_time(text: str) -> Time:
    m = HH_MM.fullmatch(text)
    if not m:
        raise DecodeError(f"invalid time (expected hh:mm): {text!r}")
    return Time(hours=parse_int(m.group(1)), minutes=parse_int(m.group(2)))


@register("sd")
def decode_start_date(parameter: Parameter) -> StartDate:
    rule_number, text = split_rule_number(parameter)
    if text == "en":
        return StartDate(rule_number=rule_number, designation=DesignationMethod.ENTRY_DATE)
    if text == "ud":
        return StartDate(rule_number=rule_number, designation=DesignationMethod.UNDEFINED)

    fragments = text.split("/")
    if len(fragments) > 3:
        raise DecodeError(f"invalid sd value: {text!r}")
    year = parse_int(fragments[0], "year") if len(fragments) == 3 else None
    month = parse_int(fragments[-2], "month") if len(fragments) >= 2 else None
    days = fragments[-1]

    prefix = days[:1] if days[:1] in COUNTING_PREFIXES else ""
    days = days[len(prefix) :]
    if not days:
        raise DecodeError(f"invalid sd value, day is missing: {text!r}")

    # A weekday is two letters from DAY_OF_WEEK; anything else is numeric.
    m = DAY_OF_WEEK.fullmatch(days)
    if m:
        if prefix not in ("", "+"):
            raise DecodeError(f"{prefix!r} cannot be combined with a weekday: {text!r}")
        suffix = m.group(2)
        day: DayOfMonth | DayOfWeekRule = DayOfWeekRule(
            day_of_week=DayOfWeek.from_code(m.group(1)),
            relative=prefix == "+",
            week=int(suffix) if suffix is not None and suffix.isdigit() else None,
            last_week=suffix == "b",
        )
    else:
        counting = COUNTING_PREFIXES.get(prefix, CountingMethod.ABSOLUTE)
        m = BACKWARD_DAY.fullmatch(days)
        if m:
            before = m.group(1)
            day = DayOfMonth(
                counting=counting,
                day=parse_int(before, "day") if before is not None else None,
                backward=True,
            )
        else:
            day = DayOfMonth(counting=counting, day=parse_int(days, "day"))

    return StartDate(rule_number=rule_number, year=year, month=month, day=day)


@register("st")
def decode_start_time(parameter: Parameter) -> StartTime:
    rule_number, text = split_rule_number(parameter)
    relative = text.startswith("+")
    return StartTime(
        rule_number=rule_number,
        relative=relative,
        time=_parse_time(text[1:] if relative else text),
    )


@register("sy", "ey")
def decode_delay_time(parameter: Parameter) -> DelayTime:
    rule_number, text = split_rule_number(parameter)
    timing = TIMING_PREFIXES.get(text[:1])
    if timing is None:
        return DelayTime(
            rule_number=rule_number, timing=TimingMethod.ABSOLUTE, time=_parse_time(text)
        )
    minutes = parse_int(text[1:], "minutes")
    return DelayTime(rule_number=rule_number, timing=timing, time=Time.of_minutes(minutes))
