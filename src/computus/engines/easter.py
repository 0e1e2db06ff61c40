"""
computus.engines.easter
-----------------------
Date of Easter Sunday in the Gregorian calendar.

Anonymous Gregorian (Meeus/Jones/Butcher) algorithm, pure integer arithmetic.
ref: https://en.wikipedia.org/wiki/Date_of_Easter#Anonymous_Gregorian_algorithm
"""

from __future__ import annotations

from datetime import date


def easter(year: int) -> date:
    """
    Easter Sunday for a Gregorian year.

    Historically meaningful from 1583 on; results for earlier years are
    not guaranteed. Raises ValueError for years outside 1..9999, the range
    of datetime.date.
    """
    a = year % 19               # position in the Metonic cycle
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3        # lunar correction
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451

    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)
