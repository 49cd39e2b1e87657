from datetime import datetime
from types import SimpleNamespace

import pytest

from utils.datetime_formatting import (
    MONTH_ABBREVIATIONS,
    format_clock,
    month_abbreviation,
    now_local,
)


@pytest.mark.parametrize(
    "month, expected",
    [(1, "JAN"), (3, "MAR"), (9, "SEP"), (12, "DEC")],
)
def test_month_abbreviation(month, expected):
    assert month_abbreviation(datetime(2024, month, 1)) == expected


def test_month_table_is_complete():
    assert len(MONTH_ABBREVIATIONS) == 12
    assert all(name.isupper() and len(name) == 3 for name in MONTH_ABBREVIATIONS)


def test_format_clock_pads_each_field():
    assert format_clock(datetime(2024, 3, 5, 9, 7, 3)) == "09:07:03"
    assert format_clock(datetime(2024, 3, 5, 23, 59, 59)) == "23:59:59"


def test_now_local_uses_naive_local_time(monkeypatch):
    expected = datetime(2024, 12, 1, 13, 0)

    monkeypatch.setattr(
        "utils.datetime_formatting.datetime",
        SimpleNamespace(now=lambda: expected),
    )

    assert now_local() == expected
