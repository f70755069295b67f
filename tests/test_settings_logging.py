from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import pytest

from config.settings import get_settings
from utils.clock import reference_now
from utils.logging_setup import LOG_FORMAT, SafeExtraFormatter


def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "QUERY_NOW", "DEMO_CITY_LENGTH", "DEMO_DAYS_AGO"):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert s.log_level == "WARNING"
    assert s.query_now is None
    assert s.demo_city_length == 10
    assert s.demo_days_ago == 30


def test_query_now_pins_reference_clock(monkeypatch):
    monkeypatch.setenv("QUERY_NOW", "2026-10-18T09:30:00")
    assert reference_now() == datetime(2026, 10, 18, 9, 30)


def test_invalid_query_now_is_a_configuration_error(monkeypatch):
    monkeypatch.setenv("QUERY_NOW", "yesterday")
    with pytest.raises(RuntimeError):
        get_settings()


def test_formatter_tolerates_missing_extras():
    fmt = SafeExtraFormatter(fmt="%(message)s query=%(query)s matched=%(matched)s")
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "hello", None, None)
    assert fmt.format(record) == "hello query=- matched=-"


def test_query_now_with_offset_becomes_local_naive(monkeypatch):
    monkeypatch.setenv("QUERY_NOW", "2026-10-18T09:30:00+02:00")
    expected = datetime(2026, 10, 18, 9, 30, tzinfo=timezone(timedelta(hours=2))).astimezone().replace(tzinfo=None)
    now = get_settings().query_now
    assert now.tzinfo is None
    assert now == expected


def test_invalid_demo_integer_is_a_configuration_error(monkeypatch):
    monkeypatch.setenv("DEMO_CITY_LENGTH", "ten")
    with pytest.raises(RuntimeError) as exc:
        get_settings()
    assert "DEMO_CITY_LENGTH" in str(exc.value)


def test_log_format_renders_query_counts():
    fmt = SafeExtraFormatter(fmt=LOG_FORMAT.replace("%(asctime)s ", ""))
    record = logging.LogRecord("engine.query_engine", logging.DEBUG, __file__, 1, "query evaluated", None, None)
    record.query = "odd"
    record.matched = 2
    record.total = 4
    assert fmt.format(record) == (
        "[DEBUG  ] engine.query_engine: query evaluated (exercise=- query=odd 2/4)"
    )
