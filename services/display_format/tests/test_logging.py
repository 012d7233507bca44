import logging

import pytest

from display_format.logging import configure_logging, get_logger


@pytest.mark.parametrize("fmt", ["json", "console"])
def test_events_reach_stdlib_logging_not_stdout(caplog, capsys, fmt):
    configure_logging("DEBUG", fmt)
    caplog.set_level(logging.DEBUG)

    get_logger("display_format.tests").debug("value_resolved", path="a.b")

    assert "value_resolved" in caplog.text
    assert "a.b" in caplog.text
    assert capsys.readouterr().out == ""
