from __future__ import annotations

from enum import Enum
from typing import Tuple

from ..core.types import MovableFeast
from ..core.table import FeastTable


class Feast(str, Enum):
    """Closed set of the feasts in MOVABLE_FEASTS; values are the table names."""
    SEPTUAGESIMA = "Septuagesima Sunday"
    SEXAGESIMA = "Sexagesima Sunday"
    QUINQUAGESIMA = "Quinquagesima Sunday"
    ASH_WEDNESDAY = "Ash Wednesday"
    FIRST_SUNDAY_OF_LENT = "First Sunday of Lent"
    EMBER_WEDNESDAY_LENT = "Ember Wednesday of Lent"
    EMBER_FRIDAY_LENT = "Ember Friday of Lent"
    EMBER_SATURDAY_LENT = "Ember Saturday of Lent"
    PASSION_SUNDAY = "Passion Sunday"
    PALM_SUNDAY = "Palm Sunday"
    SPY_WEDNESDAY = "Spy Wednesday"
    HOLY_THURSDAY = "Holy Thursday"
    GOOD_FRIDAY = "Good Friday"
    HOLY_SATURDAY = "Holy Saturday"
    EASTER_SUNDAY = "Easter Sunday"
    EASTER_MONDAY = "Easter Monday"
    EASTER_TUESDAY = "Easter Tuesday"
    LOW_SUNDAY = "Low Sunday"
    ASCENSION = "Ascension"
    PENTECOST = "Pentecost"
    EMBER_WEDNESDAY_PENTECOST = "Ember Wednesday of Pentecost"
    EMBER_FRIDAY_PENTECOST = "Ember Friday of Pentecost"
    EMBER_SATURDAY_PENTECOST = "Ember Saturday of Pentecost"
    TRINITY_SUNDAY = "Trinity Sunday"
    CORPUS_CHRISTI = "Corpus Christi"


# ============================================================
# MOVABLE FEASTS AND FASTS (days from Easter Sunday)
# ============================================================

MOVABLE_FEASTS: Tuple[MovableFeast, ...] = (
    # Pre-Lent
    MovableFeast(Feast.SEPTUAGESIMA.value, -63),
    MovableFeast(Feast.SEXAGESIMA.value, -56),
    MovableFeast(Feast.QUINQUAGESIMA.value, -49),

    # Lent; Ember days fall in the week after the first Sunday
    MovableFeast(Feast.ASH_WEDNESDAY.value, -46),
    MovableFeast(Feast.FIRST_SUNDAY_OF_LENT.value, -42),
    MovableFeast(Feast.EMBER_WEDNESDAY_LENT.value, -39),
    MovableFeast(Feast.EMBER_FRIDAY_LENT.value, -37),
    MovableFeast(Feast.EMBER_SATURDAY_LENT.value, -36),
    MovableFeast(Feast.PASSION_SUNDAY.value, -14),

    # Holy Week
    MovableFeast(Feast.PALM_SUNDAY.value, -7),
    MovableFeast(Feast.SPY_WEDNESDAY.value, -4),
    MovableFeast(Feast.HOLY_THURSDAY.value, -3),
    MovableFeast(Feast.GOOD_FRIDAY.value, -2),
    MovableFeast(Feast.HOLY_SATURDAY.value, -1),

    # Eastertide
    MovableFeast(Feast.EASTER_SUNDAY.value, 0),
    MovableFeast(Feast.EASTER_MONDAY.value, 1),
    MovableFeast(Feast.EASTER_TUESDAY.value, 2),
    MovableFeast(Feast.LOW_SUNDAY.value, 7),
    MovableFeast(Feast.ASCENSION.value, 39),
    MovableFeast(Feast.PENTECOST.value, 49),

    # Whitsun Ember days and after
    MovableFeast(Feast.EMBER_WEDNESDAY_PENTECOST.value, 52),
    MovableFeast(Feast.EMBER_FRIDAY_PENTECOST.value, 54),
    MovableFeast(Feast.EMBER_SATURDAY_PENTECOST.value, 55),
    MovableFeast(Feast.TRINITY_SUNDAY.value, 56),
    MovableFeast(Feast.CORPUS_CHRISTI.value, 60),
)

FEAST_TABLE = FeastTable(MOVABLE_FEASTS)
