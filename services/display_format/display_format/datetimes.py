"""Timestamp formatting on top of an injected date/time primitive."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Dict, Iterable, List, NamedTuple, Protocol

from .values import is_number, to_number

__all__ = [
    "DatePart",
    "DateTimeComponents",
    "DateTimeFormatter",
    "ZonedDateTimeFormatter",
    "HOUR_CYCLES",
    "from_timestamp_ms",
    "format_date_to_datetime",
    "format_date_to_string",
]

HOUR_CYCLES = ("h11", "h12", "h23", "h24")

_PART_FIELDS = {
    "year": "YYYY",
    "month": "MM",
    "day": "DD",
    "hour": "HH",
    "minute": "mm",
    "second": "ss",
}
_TEMPLATE_TOKENS = re.compile(r"YYYY|MM|DD|HH|mm|ss")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class DatePart(NamedTuple):
    type: str
    value: str


class DateTimeFormatter(Protocol):
    """Locale-aware primitive splitting a moment into typed text parts."""

    def format_to_parts(self, moment: datetime) -> Iterable[DatePart]:
        ...


@dataclass(frozen=True, slots=True)
class DateTimeComponents:
    """Rendered date fields, keyed the way templates refer to them."""

    YYYY: str = ""
    MM: str = ""
    DD: str = ""
    HH: str = ""
    mm: str = ""
    ss: str = ""

    def as_dict(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in _PART_FIELDS.values()}


class ZonedDateTimeFormatter:
    """
    Numeric ``YYYY-MM-DD HH:mm:ss`` parts in a fixed time zone.

    ``hour_cycle`` follows the usual h11/h12/h23/h24 naming. The 12-hour
    cycles add a ``dayPeriod`` part and h24 renders midnight as ``24``.
    """

    def __init__(self, tz: tzinfo = timezone.utc, hour_cycle: str = "h23") -> None:
        if hour_cycle not in HOUR_CYCLES:
            raise ValueError(f"hour_cycle must be one of {', '.join(HOUR_CYCLES)}")
        self.tz = tz
        self.hour_cycle = hour_cycle

    def format_to_parts(self, moment: datetime) -> List[DatePart]:
        local = moment.astimezone(self.tz)
        parts = [
            DatePart("year", f"{local.year:04d}"),
            DatePart("literal", "-"),
            DatePart("month", f"{local.month:02d}"),
            DatePart("literal", "-"),
            DatePart("day", f"{local.day:02d}"),
            DatePart("literal", " "),
            DatePart("hour", f"{self._hour(local.hour):02d}"),
            DatePart("literal", ":"),
            DatePart("minute", f"{local.minute:02d}"),
            DatePart("literal", ":"),
            DatePart("second", f"{local.second:02d}"),
        ]
        if self.hour_cycle in ("h11", "h12"):
            parts.append(DatePart("literal", " "))
            parts.append(DatePart("dayPeriod", "AM" if local.hour < 12 else "PM"))
        return parts

    def _hour(self, hour: int) -> int:
        if self.hour_cycle == "h24":
            return hour or 24
        if self.hour_cycle == "h12":
            return hour % 12 or 12
        if self.hour_cycle == "h11":
            return hour % 12
        return hour


def from_timestamp_ms(timestamp: Any) -> datetime | None:
    """UTC datetime for epoch milliseconds, None when unrepresentable.

    Fractional milliseconds are truncated toward zero.
    """
    if not is_number(timestamp):
        return None
    try:
        return _EPOCH + timedelta(milliseconds=math.trunc(to_number(timestamp)))
    except OverflowError:
        return None


def format_date_to_datetime(formatter: DateTimeFormatter, timestamp: Any) -> DateTimeComponents:
    moment = from_timestamp_ms(timestamp)
    if moment is None:
        return DateTimeComponents()

    try:
        parts = list(formatter.format_to_parts(moment))
    except OverflowError:
        return DateTimeComponents()

    fields: Dict[str, str] = {}
    for part_type, value in parts:
        name = _PART_FIELDS.get(part_type)
        if name is None:
            continue
        if name == "HH" and value == "24":
            value = "00"
        fields[name] = value
    return DateTimeComponents(**fields)


def format_date_to_string(formatter: DateTimeFormatter, timestamp: Any, template: str) -> str:
    """Fill ``YYYY``, ``MM``, ``DD``, ``HH``, ``mm`` and ``ss`` in ``template``."""
    components = format_date_to_datetime(formatter, timestamp).as_dict()
    return _TEMPLATE_TOKENS.sub(lambda match: components[match.group(0)], template)
