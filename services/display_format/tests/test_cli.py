import json

import pytest
from typer.testing import CliRunner

from display_format.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def utc_env(monkeypatch):
    monkeypatch.setenv("TIMEZONE", "UTC")
    monkeypatch.delenv("DISPLAY_PLACEHOLDER", raising=False)
    monkeypatch.delenv("DISPLAY_THOUSANDS_SEPARATOR", raising=False)
    monkeypatch.delenv("DISPLAY_DATETIME_TEMPLATE", raising=False)
    monkeypatch.delenv("DISPLAY_HOUR_CYCLE", raising=False)
    monkeypatch.delenv("DISPLAY_FOLD_THRESHOLD", raising=False)
    monkeypatch.delenv("DISPLAY_PRECISION", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)


def test_value_command_reads_json_from_option_and_stdin():
    document = json.dumps({"a": {"b.c": [1, {"d": "ok"}]}})
    result = runner.invoke(app, ["value", 'a["b.c"][1].d', "--data", document])
    assert result.exit_code == 0
    assert result.stdout.strip() == "ok"

    result = runner.invoke(app, ["value", "a.missing"], input=document)
    assert result.exit_code == 0
    assert result.stdout.strip() == "--"

    result = runner.invoke(app, ["value", "a", "--data", document])
    assert json.loads(result.stdout) == {"b.c": [1, {"d": "ok"}]}


def test_value_command_rejects_invalid_json():
    result = runner.invoke(app, ["value", "a", "--data", "{not json"])
    assert result.exit_code != 0


def test_number_commands():
    assert runner.invoke(app, ["precision", "1234.5"]).stdout.strip() == "1.234,50"
    assert runner.invoke(app, ["precision", "1234.5", "-p", "0"]).stdout.strip() == "1.235"
    assert runner.invoke(app, ["big", "1500000000"]).stdout.strip() == "1.5B"
    assert runner.invoke(app, ["thousands", "1234567"]).stdout.strip() == "1,234,567"
    assert runner.invoke(app, ["thousands", "1234567", "-s", ""]).stdout.strip() == "1234567"


def test_fold_command_styles():
    assert runner.invoke(app, ["fold", "0.0000000123"]).stdout.strip() == "0.0{7}123"
    assert runner.invoke(app, ["fold", "1.23e-8", "--style", "subscript"]).stdout.strip() == "0.0₇123"
    assert runner.invoke(app, ["fold", "0.0012", "-t", "2"]).stdout.strip() == "0.0{2}12"
    assert runner.invoke(app, ["fold", "0.1", "--style", "round"]).exit_code != 0


def test_datetime_command():
    result = runner.invoke(app, ["datetime", "1729098309000"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "2024-10-16 17:05:09"

    result = runner.invoke(app, ["datetime", "1729098309000", "--template", "DD/MM HH", "--hour-cycle", "h12"])
    assert result.stdout.strip() == "16/10 05"

    result = runner.invoke(app, ["datetime", "0", "--timezone", "Nowhere/Atlantis"])
    assert result.exit_code != 0


def test_datetime_command_uses_configured_hour_cycle(monkeypatch):
    monkeypatch.setenv("DISPLAY_HOUR_CYCLE", "h24")
    # 2024-10-16 00:05:09 UTC
    result = runner.invoke(app, ["datetime", "1729037109000", "--template", "HH:mm"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "00:05"

    result = runner.invoke(app, ["datetime", "1729037109000", "--template", "HH", "--hour-cycle", "h12"])
    assert result.stdout.strip() == "12"
