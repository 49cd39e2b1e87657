"""Helpers for the date and time fragments used in log paths and lines."""

from __future__ import annotations

from datetime import datetime
from typing import Tuple

MONTH_ABBREVIATIONS: Tuple[str, ...] = (
    "JAN",
    "FEB",
    "MAR",
    "APR",
    "MAY",
    "JUN",
    "JUL",
    "AUG",
    "SEP",
    "OCT",
    "NOV",
    "DEC",
)

_CLOCK_FORMAT = "%H:%M:%S"


def now_local() -> datetime:
    """Return the current local wall-clock time."""

    return datetime.now()


def month_abbreviation(value: datetime) -> str:
    """Return the upper-case three letter month of *value* (``JAN``..``DEC``).

    The table is fixed so directory names do not depend on the process locale.
    """

    return MONTH_ABBREVIATIONS[value.month - 1]


def format_clock(value: datetime) -> str:
    """Return *value* formatted as zero padded ``HH:MM:SS``."""

    return value.strftime(_CLOCK_FORMAT)


CLOCK_FORMAT = _CLOCK_FORMAT


__all__ = [
    "MONTH_ABBREVIATIONS",
    "CLOCK_FORMAT",
    "now_local",
    "month_abbreviation",
    "format_clock",
]
