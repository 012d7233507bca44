"""Compact rendering of long zero runs after the decimal point."""

from __future__ import annotations

import re
from typing import Any, Callable

from .values import stringify

__all__ = [
    "SUBSCRIPT_DIGITS",
    "format_fold_decimal",
    "format_fold_decimal_curly",
    "format_fold_decimal_subscript",
    "format_fold_decimal_for_curly_bracket",
    "format_fold_decimal_for_subscript",
]

SUBSCRIPT_DIGITS = {
    "0": "₀",
    "1": "₁",
    "2": "₂",
    "3": "₃",
    "4": "₄",
    "5": "₅",
    "6": "₆",
    "7": "₇",
    "8": "₈",
    "9": "₉",
}

_LEADING_ZEROS = re.compile(r"0*")


def format_fold_decimal(
    value: Any,
    threshold: int,
    render_count: Callable[[int], str],
) -> str:
    """
    Replace the zeros that lead a decimal fraction with a count marker.

    The fraction must hold at least ``threshold`` zeros followed by a
    non-zero digit and nothing but digits up to the end, otherwise the text
    of ``value`` is returned unchanged. ``0.0000000123`` becomes
    ``"0" + render_count(7) + "123"`` after the point.
    """

    text = stringify(value)
    minimum = max(0, int(threshold))
    if not re.search(rf"\.0{{{minimum},}}[1-9][0-9]*\Z", text):
        return text

    head, _, fraction = text.rpartition(".")
    count = len(_LEADING_ZEROS.match(fraction).group(0))
    return f"{head}.0{render_count(count)}{fraction[count:]}"


def _curly(count: int) -> str:
    return f"{{{count}}}"


def _subscript(count: int) -> str:
    # every digit of the count is substituted, 12 renders as ₁₂
    return "".join(SUBSCRIPT_DIGITS.get(digit, "") for digit in str(count))


def format_fold_decimal_curly(value: Any, threshold: int) -> str:
    """``0.0000000123`` -> ``0.0{7}123``"""
    return format_fold_decimal(value, threshold, _curly)


def format_fold_decimal_subscript(value: Any, threshold: int) -> str:
    """``0.0000000123`` -> ``0.0₇123``"""
    return format_fold_decimal(value, threshold, _subscript)


format_fold_decimal_for_curly_bracket = format_fold_decimal_curly
format_fold_decimal_for_subscript = format_fold_decimal_subscript
