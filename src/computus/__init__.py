"""computus public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .core.time import is_leap_year, weekday
from .core.types import MovableFeast, FixedDay, Rank
from .core.errors import ComputusError, FeastTableError
from .engines.easter import easter
from .engines.letters import sunday_letters, date_letter
from .engines.feasts import Feast, MOVABLE_FEASTS, FEAST_TABLE
from .engines.temporal import (
    resolve,
    must,
    feasts_in_year,
    septuagesima,
    sexagesima,
    quinquagesima,
    ash_wednesday,
    first_sunday_of_lent,
    ember_wednesday_lent,
    ember_friday_lent,
    ember_saturday_lent,
    passion_sunday,
    palm_sunday,
    spy_wednesday,
    holy_thursday,
    good_friday,
    holy_saturday,
    easter_monday,
    easter_tuesday,
    low_sunday,
    octave_of_easter,
    ascension,
    pentecost,
    ember_wednesday_pentecost,
    ember_friday_pentecost,
    ember_saturday_pentecost,
    trinity_sunday,
    corpus_christi,
)

__all__ = [
    "easter",
    "is_leap_year",
    "weekday",
    "sunday_letters",
    "date_letter",
    "resolve",
    "must",
    "feasts_in_year",
    "Feast",
    "MOVABLE_FEASTS",
    "FEAST_TABLE",
    "MovableFeast",
    "FixedDay",
    "Rank",
    "ComputusError",
    "FeastTableError",
    "septuagesima",
    "sexagesima",
    "quinquagesima",
    "ash_wednesday",
    "first_sunday_of_lent",
    "ember_wednesday_lent",
    "ember_friday_lent",
    "ember_saturday_lent",
    "passion_sunday",
    "palm_sunday",
    "spy_wednesday",
    "holy_thursday",
    "good_friday",
    "holy_saturday",
    "easter_monday",
    "easter_tuesday",
    "low_sunday",
    "octave_of_easter",
    "ascension",
    "pentecost",
    "ember_wednesday_pentecost",
    "ember_friday_pentecost",
    "ember_saturday_pentecost",
    "trinity_sunday",
    "corpus_christi",
]
