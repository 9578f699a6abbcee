import logging

import pytest

from fini.env_utils import log_level, no_color_requested


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, logging.WARNING),
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("error", logging.ERROR),
        ("chatty", logging.WARNING),
    ],
)
def test_log_level(monkeypatch, value, expected):
    if value is None:
        monkeypatch.delenv("FINI_LOG_LEVEL", raising=False)
    else:
        monkeypatch.setenv("FINI_LOG_LEVEL", value)
    assert log_level() == expected


@pytest.mark.parametrize("value,expected", [(None, False), ("", False), ("1", True)])
def test_no_color_requested(monkeypatch, value, expected):
    if value is None:
        monkeypatch.delenv("NO_COLOR", raising=False)
    else:
        monkeypatch.setenv("NO_COLOR", value)
    assert no_color_requested() is expected
