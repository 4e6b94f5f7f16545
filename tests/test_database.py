"""
Unit tests for configuration and the row helpers.
"""

from datetime import date, datetime, time, timedelta

import pytest

from healthhub.config import get_env
from healthhub.database import fetch_all, fetch_one, to_json_value


# ── Tests: get_env ───────────────────────────────────────────────────

def test_get_env_ok(monkeypatch):
    monkeypatch.setenv("X", "123")
    assert get_env("X") == "123"


def test_get_env_missing_exits(monkeypatch, capsys):
    monkeypatch.delenv("MISSING_ENV", raising=False)
    with pytest.raises(SystemExit) as e:
        get_env("MISSING_ENV")
    assert e.value.code == 1
    err = capsys.readouterr().err
    assert "ERROR: env var MISSING_ENV is not set" in err


# ── Tests: to_json_value ─────────────────────────────────────────────

@pytest.mark.parametrize("value, expected", [
    (date(2025, 3, 5), "2025-03-05"),
    (time(14, 30), "14:30:00"),
    (datetime(2025, 3, 5, 9, 15), "2025-03-05T09:15:00"),
    (timedelta(hours=9, minutes=15), "09:15:00"),
    ("text", "text"),
    (42, 42),
    (None, None),
])
def test_to_json_value(value, expected):
    assert to_json_value(value) == expected


# ── Tests: fetch helpers ─────────────────────────────────────────────

def test_fetch_all_binds_parameters(engine):
    rows = fetch_all(
        engine,
        "SELECT Name FROM Doctor WHERE DoctorID = :id",
        {"id": 2},
    )
    assert rows == [{"Name": "Dr. Omar Reyes"}]


def test_fetch_one_returns_none_when_empty(engine):
    assert fetch_one(engine, "SELECT Name FROM Doctor WHERE DoctorID = :id", {"id": 0}) is None


def test_parameters_are_not_interpolated(engine):
    rows = fetch_all(
        engine,
        "SELECT Email FROM UserAccount WHERE Email = :email",
        {"email": "x' OR '1'='1"},
    )
    assert rows == []
