"""Configuration loader for the display formatters."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .datetimes import HOUR_CYCLES, ZonedDateTimeFormatter
from .logging import LOG_FORMATS


def _get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is not None:
        value = value.strip()
        if value == "":
            return default
        return value
    return default


def _get_int(key: str, default: int) -> int:
    value = _get_env(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be an integer") from exc


def _get_choice(key: str, default: str, choices: tuple[str, ...]) -> str:
    value = _get_env(key, default).lower()
    if value not in choices:
        raise ValueError(f"Environment variable {key} must be one of {', '.join(choices)}")
    return value


def load_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unable to load timezone '{name}'") from exc


@dataclass(slots=True)
class FormatConfig:
    timezone: ZoneInfo
    hour_cycle: str
    precision: int
    fold_threshold: int
    thousands_separator: str
    datetime_template: str
    placeholder: str
    log_level: str
    log_format: str

    @property
    def timezone_name(self) -> str:
        return self.timezone.key

    def datetime_formatter(
        self,
        timezone: Optional[ZoneInfo] = None,
        hour_cycle: Optional[str] = None,
    ) -> ZonedDateTimeFormatter:
        return ZonedDateTimeFormatter(timezone or self.timezone, hour_cycle or self.hour_cycle)


def load_config() -> FormatConfig:
    timezone = load_timezone(_get_env("TIMEZONE", "Asia/Jakarta"))
    hour_cycle = _get_choice("DISPLAY_HOUR_CYCLE", "h23", HOUR_CYCLES)
    precision = max(0, _get_int("DISPLAY_PRECISION", 2))
    fold_threshold = max(0, _get_int("DISPLAY_FOLD_THRESHOLD", 4))
    thousands_separator = _get_env("DISPLAY_THOUSANDS_SEPARATOR", ",")
    datetime_template = _get_env("DISPLAY_DATETIME_TEMPLATE", "YYYY-MM-DD HH:mm:ss")
    placeholder = _get_env("DISPLAY_PLACEHOLDER", "--")
    log_level = _get_env("LOG_LEVEL", "INFO").upper()
    log_format = _get_choice("LOG_FORMAT", "json", LOG_FORMATS)

    return FormatConfig(
        timezone=timezone,
        hour_cycle=hour_cycle,
        precision=precision,
        fold_threshold=fold_threshold,
        thousands_separator=thousands_separator,
        datetime_template=datetime_template,
        placeholder=placeholder,
        log_level=log_level,
        log_format=log_format,
    )
