"""Command-line interface for the display formatters."""

from __future__ import annotations

import json
import sys
from typing import Any, Optional

import typer

from .config import FormatConfig, load_config, load_timezone
from .datetimes import HOUR_CYCLES, format_date_to_string
from .folding import format_fold_decimal_curly, format_fold_decimal_subscript
from .logging import configure_logging, get_logger
from .numeral import format_big_number, format_precision, format_thousands
from .path import format_value

logger = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Display formatting helpers")

FOLD_STYLES = {
    "curly": format_fold_decimal_curly,
    "subscript": format_fold_decimal_subscript,
}


def _settings() -> FormatConfig:
    try:
        cfg = load_config()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    configure_logging(cfg.log_level, cfg.log_format)
    return cfg


@app.command("value")
def value_command(
    path: str = typer.Argument(..., help="Property path, e.g. a.b[0]['c.d']"),
    data: Optional[str] = typer.Option(None, "--data", help="JSON document; read from stdin when omitted"),
    default: Optional[str] = typer.Option(None, "--default", help="Text printed when the path is unresolved"),
) -> None:
    cfg = _settings()
    raw = data if data is not None else sys.stdin.read()
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Data is not valid JSON: {exc.msg}") from exc

    fallback = default if default is not None else cfg.placeholder
    result = format_value(document, path, fallback)
    logger.bind(command="value").debug("value_resolved", path=path, used_fallback=result is fallback)
    typer.echo(_render(result))


@app.command("precision")
def precision_command(
    value: str = typer.Argument(...),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", help="Fraction digits"),
) -> None:
    cfg = _settings()
    digits = cfg.precision if precision is None else precision
    typer.echo(format_precision(_parse_value(value), digits))


@app.command("big")
def big_command(value: str = typer.Argument(...)) -> None:
    _settings()
    typer.echo(format_big_number(_parse_value(value)))


@app.command("thousands")
def thousands_command(
    value: str = typer.Argument(...),
    separator: Optional[str] = typer.Option(None, "--separator", "-s", help="Grouping separator"),
) -> None:
    cfg = _settings()
    sep = cfg.thousands_separator if separator is None else separator
    typer.echo(format_thousands(_parse_value(value), sep))


@app.command("fold")
def fold_command(
    value: str = typer.Argument(...),
    threshold: Optional[int] = typer.Option(None, "--threshold", "-t", help="Minimum zero run"),
    style: str = typer.Option("curly", "--style", help="curly or subscript"),
) -> None:
    cfg = _settings()
    renderer = FOLD_STYLES.get(style.lower())
    if renderer is None:
        raise typer.BadParameter(f"Style must be one of {', '.join(FOLD_STYLES)}")
    limit = cfg.fold_threshold if threshold is None else threshold
    typer.echo(renderer(_parse_value(value), limit))


@app.command("datetime")
def datetime_command(
    timestamp: str = typer.Argument(..., help="Epoch milliseconds"),
    template: Optional[str] = typer.Option(None, "--template", help="Template using YYYY MM DD HH mm ss"),
    timezone_name: Optional[str] = typer.Option(None, "--timezone", help="IANA time zone"),
    hour_cycle: Optional[str] = typer.Option(None, "--hour-cycle", help="h11, h12, h23 or h24"),
) -> None:
    cfg = _settings()
    try:
        tz = load_timezone(timezone_name) if timezone_name else cfg.timezone
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    cycle = hour_cycle or cfg.hour_cycle
    if cycle not in HOUR_CYCLES:
        raise typer.BadParameter(f"Hour cycle must be one of {', '.join(HOUR_CYCLES)}")

    formatter = cfg.datetime_formatter(tz, cycle)
    typer.echo(format_date_to_string(formatter, _parse_value(timestamp), template or cfg.datetime_template))


def _parse_value(raw: str) -> Any:
    """Numbers and JSON literals become Python values, anything else stays text."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _render(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def main():
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
