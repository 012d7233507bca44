"""Helpers for rendering numbers in the Indonesian display convention."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, Optional

from .values import is_number, stringify, to_decimal, to_number

__all__ = ["format_precision", "format_big_number", "format_thousands"]

_ID_SEPARATORS = str.maketrans({",": ".", ".": ","})
_GROUP_PATTERN = re.compile(r"(\d)(?=(?:\d{3})+\Z)", re.ASCII)

# Checked in order; a value must be strictly greater than the threshold.
_MAGNITUDES = (
    (1_000_000_000, "B"),
    (1_000_000, "M"),
    (1_000, "K"),
)
_MAGNITUDE_STEP = Decimal("0.001")


def _round_half_up(value: Decimal, quantizer: Decimal) -> Decimal:
    """Quantize with ROUND_HALF_UP and enough precision for any double."""
    ctx = Context(
        prec=max(28, value.adjusted() - quantizer.adjusted() + 2),
        rounding=ROUND_HALF_UP,
    )
    return value.quantize(quantizer, context=ctx)


def format_precision(value: Any, precision: Optional[int] = 2) -> str:
    """
    Format ``value`` as an id-ID number such as ``1.234,50``.

    Exactly ``precision`` fraction digits are rendered, rounding half away
    from zero. Values that are not numeric come back as their own text.
    """

    number = to_number(value)
    if not is_number(number):
        return stringify(value)

    digits = 2 if precision is None else max(0, int(precision))
    quantizer = Decimal(1).scaleb(-digits)
    rounded = _round_half_up(to_decimal(number), quantizer)
    return format(rounded, ",f").translate(_ID_SEPARATORS)


def format_big_number(value: Any) -> str:
    """Abbreviate values above a thousand with a K, M or B suffix."""
    number = to_number(value)
    if is_number(number):
        for threshold, suffix in _MAGNITUDES:
            if number > threshold:
                scaled = _round_half_up(to_decimal(number / threshold), _MAGNITUDE_STEP)
                return f"{format(scaled.normalize(), 'f')}{suffix}"
    return stringify(value)


def format_thousands(value: Any, separator: str) -> str:
    """Insert ``separator`` between every three digits of the integer part."""
    text = stringify(value)
    if not separator:
        return text

    integer, point, fraction = text.partition(".")
    grouped = _GROUP_PATTERN.sub(lambda match: match.group(1) + separator, integer)
    return f"{grouped}{point}{fraction}"

