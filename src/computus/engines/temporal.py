"""
computus.engines.temporal
-------------------------
Movable feasts: dates defined by a fixed day offset from Easter Sunday.

`resolve` is the lookup for names that come from outside (user input,
configuration) and reports a miss through its `found` flag. `must` and the
named accessors are for names fixed in code; a miss there means the table
and its callers have drifted apart and raises FeastTableError.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import List, Optional, Tuple, Union

from ..core.errors import FeastTableError
from .easter import easter
from .feasts import FEAST_TABLE, Feast

logger = logging.getLogger(__name__)

FeastName = Union[str, Feast]


def _key(name: FeastName) -> str:
    # Enum members hash by member name, so look up by value
    return name.value if isinstance(name, Feast) else name


def resolve(year: int, name: FeastName) -> Tuple[Optional[date], bool]:
    """Returns (date, True) for a known feast, (None, False) otherwise."""
    offset = FEAST_TABLE.offset(_key(name))
    if offset is None:
        logger.debug("Unknown movable feast %r (year %d)", _key(name), year)
        return None, False
    return easter(year) + timedelta(days=offset), True


def must(year: int, name: FeastName) -> date:
    d, found = resolve(year, name)
    if not found:
        logger.error("Movable feast %r missing from table", _key(name))
        raise FeastTableError(_key(name))
    return d


def feasts_in_year(year: int) -> List[Tuple[str, date]]:
    """All movable feasts of `year` in table order."""
    e = easter(year)
    return [(f.name, e + timedelta(days=f.offset)) for f in FEAST_TABLE]


# ============================================================
# Named accessors
# ============================================================

def septuagesima(year: int) -> date:
    return must(year, Feast.SEPTUAGESIMA)

def sexagesima(year: int) -> date:
    return must(year, Feast.SEXAGESIMA)

def quinquagesima(year: int) -> date:
    return must(year, Feast.QUINQUAGESIMA)

def ash_wednesday(year: int) -> date:
    """46 days before Easter Sunday."""
    return must(year, Feast.ASH_WEDNESDAY)

def first_sunday_of_lent(year: int) -> date:
    return must(year, Feast.FIRST_SUNDAY_OF_LENT)

def ember_wednesday_lent(year: int) -> date:
    return must(year, Feast.EMBER_WEDNESDAY_LENT)

def ember_friday_lent(year: int) -> date:
    return must(year, Feast.EMBER_FRIDAY_LENT)

def ember_saturday_lent(year: int) -> date:
    return must(year, Feast.EMBER_SATURDAY_LENT)

def passion_sunday(year: int) -> date:
    return must(year, Feast.PASSION_SUNDAY)

def palm_sunday(year: int) -> date:
    return must(year, Feast.PALM_SUNDAY)

def spy_wednesday(year: int) -> date:
    return must(year, Feast.SPY_WEDNESDAY)

def holy_thursday(year: int) -> date:
    return must(year, Feast.HOLY_THURSDAY)

def good_friday(year: int) -> date:
    return must(year, Feast.GOOD_FRIDAY)

def holy_saturday(year: int) -> date:
    return must(year, Feast.HOLY_SATURDAY)

def easter_monday(year: int) -> date:
    return must(year, Feast.EASTER_MONDAY)

def easter_tuesday(year: int) -> date:
    return must(year, Feast.EASTER_TUESDAY)

def low_sunday(year: int) -> date:
    """Octave day of Easter (Quasimodo)."""
    return must(year, Feast.LOW_SUNDAY)

octave_of_easter = low_sunday

def ascension(year: int) -> date:
    return must(year, Feast.ASCENSION)

def pentecost(year: int) -> date:
    return must(year, Feast.PENTECOST)

def ember_wednesday_pentecost(year: int) -> date:
    return must(year, Feast.EMBER_WEDNESDAY_PENTECOST)

def ember_friday_pentecost(year: int) -> date:
    return must(year, Feast.EMBER_FRIDAY_PENTECOST)

def ember_saturday_pentecost(year: int) -> date:
    return must(year, Feast.EMBER_SATURDAY_PENTECOST)

def trinity_sunday(year: int) -> date:
    return must(year, Feast.TRINITY_SUNDAY)

def corpus_christi(year: int) -> date:
    """Thursday after Trinity Sunday."""
    return must(year, Feast.CORPUS_CHRISTI)
