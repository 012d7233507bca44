"""Display formatting helpers for loosely typed UI data."""

from .datetimes import (
    DatePart,
    DateTimeComponents,
    DateTimeFormatter,
    ZonedDateTimeFormatter,
    format_date_to_datetime,
    format_date_to_string,
)
from .folding import (
    format_fold_decimal,
    format_fold_decimal_curly,
    format_fold_decimal_for_curly_bracket,
    format_fold_decimal_for_subscript,
    format_fold_decimal_subscript,
)
from .numeral import format_big_number, format_precision, format_thousands
from .path import format_value

__all__ = [
    "DatePart",
    "DateTimeComponents",
    "DateTimeFormatter",
    "ZonedDateTimeFormatter",
    "format_value",
    "format_date_to_datetime",
    "format_date_to_string",
    "format_precision",
    "format_big_number",
    "format_thousands",
    "format_fold_decimal",
    "format_fold_decimal_curly",
    "format_fold_decimal_subscript",
    "format_fold_decimal_for_curly_bracket",
    "format_fold_decimal_for_subscript",
]
