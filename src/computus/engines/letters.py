"""
computus.engines.letters
------------------------
Sunday (dominical) letters.

Every date of the year carries one of the letters A..G in rotation, starting
with A on January 1. The letter that falls on the year's Sundays is its
Sunday letter. In a leap year the intercalary day is counted after February 24
and repeats its letter, so Sundays from February 25 on fall one letter earlier
and the year has two Sunday letters.
"""

from __future__ import annotations

from datetime import date
from typing import Tuple

from ..core.time import day_of_year, is_leap_year, weekday

LETTERS = "ABCDEFG"

# Day-of-year (Jan 1 = 1) of February 25 in a leap year.
_BISSEXTILE_DOY = 56


def sunday_letters(year: int) -> Tuple[str, str]:
    """
    Returns (first, second). `second` is "" for common years and applies
    to dates on or after February 25 in leap years.
    """
    w = weekday(year, 1, 1)  # 0=Sun
    first = LETTERS[(7 - w) % 7]
    if not is_leap_year(year):
        return first, ""
    second = LETTERS[(7 - w - 1 + 7) % 7]
    return first, second


def date_letter(d: date) -> str:
    """Calendar letter of a single date."""
    n = day_of_year(d) - 1
    if is_leap_year(d.year) and n + 1 >= _BISSEXTILE_DOY:
        n -= 1
    return LETTERS[n % 7]
