from __future__ import annotations
from datetime import date


def jdn_from_ymd(y: int, m: int, day: int) -> int:
    """Julian Day Number of a proleptic Gregorian (y, m, day), any integer year."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

def weekday(y: int, m: int, day: int) -> int:
    """Day of week with 0=Sun..6=Sat."""
    return (jdn_from_ymd(y, m, day) + 1) % 7

def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1
