"""Leap-year detection for the proleptic Gregorian calendar."""

from __future__ import annotations

from datetime import date
from typing import Union


def is_leap_year(value: Union[date, int]) -> bool:
    """Return True if the year of ``value`` is a leap year.

    ``value`` may be a date, a datetime or a plain year number.

    Example:
        >>> is_leap_year(1900), is_leap_year(2000)
        (False, True)
    """

    year = value if isinstance(value, int) else value.year
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
