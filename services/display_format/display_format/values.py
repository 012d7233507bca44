"""Value predicates and coercions shared by the display formatters."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

__all__ = [
    "NodeKind",
    "classify",
    "is_valid",
    "is_number",
    "to_number",
    "to_decimal",
    "stringify",
]


class NodeKind(Enum):
    ABSENT = "absent"
    MAPPING = "mapping"
    SEQUENCE = "sequence"
    OBJECT = "object"
    SCALAR = "scalar"


_NUMERIC_TEXT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, Decimal, bool)


def classify(value: Any) -> NodeKind:
    """Return the kind of container a traversed value behaves like."""
    if value is None:
        return NodeKind.ABSENT
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    if isinstance(value, _SCALAR_TYPES):
        return NodeKind.SCALAR
    return NodeKind.OBJECT


def is_valid(value: Any) -> bool:
    return value is not None


def is_number(value: Any) -> bool:
    """True for finite real numbers; booleans are not numbers here."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    return False


def to_number(value: Any) -> float:
    """Coerce a loosely typed value to a float, NaN when it is not numeric."""
    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float, Decimal)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        # plain ASCII decimals only, no underscores or other scripts
        text = value.strip()
        if not _NUMERIC_TEXT.fullmatch(text):
            return math.nan
        return float(text)
    return math.nan


def to_decimal(number: float) -> Decimal:
    """Exact decimal of the shortest repr of ``number``."""
    return Decimal(repr(float(number)))


def stringify(value: Any) -> str:
    """Render a value as text, keeping numbers out of scientific notation."""
    if isinstance(value, float):
        if not math.isfinite(value):
            return str(value)
        return format(to_decimal(value), "f")
    if isinstance(value, Decimal):
        if not value.is_finite():
            return str(value)
        return format(value, "f")
    return str(value)

