# tests/test_temporal.py

import logging

import pytest
from datetime import date

import computus
from computus import (
    Feast,
    FEAST_TABLE,
    FeastTableError,
    MOVABLE_FEASTS,
    easter,
    feasts_in_year,
    must,
    resolve,
)

# Weekday (ISO, Monday=1 .. Sunday=7) every movable feast must fall on
WEEKDAYS = {
    Feast.SEPTUAGESIMA: 7,
    Feast.SEXAGESIMA: 7,
    Feast.QUINQUAGESIMA: 7,
    Feast.ASH_WEDNESDAY: 3,
    Feast.FIRST_SUNDAY_OF_LENT: 7,
    Feast.EMBER_WEDNESDAY_LENT: 3,
    Feast.EMBER_FRIDAY_LENT: 5,
    Feast.EMBER_SATURDAY_LENT: 6,
    Feast.PASSION_SUNDAY: 7,
    Feast.PALM_SUNDAY: 7,
    Feast.SPY_WEDNESDAY: 3,
    Feast.HOLY_THURSDAY: 4,
    Feast.GOOD_FRIDAY: 5,
    Feast.HOLY_SATURDAY: 6,
    Feast.EASTER_SUNDAY: 7,
    Feast.EASTER_MONDAY: 1,
    Feast.EASTER_TUESDAY: 2,
    Feast.LOW_SUNDAY: 7,
    Feast.ASCENSION: 4,
    Feast.PENTECOST: 7,
    Feast.EMBER_WEDNESDAY_PENTECOST: 3,
    Feast.EMBER_FRIDAY_PENTECOST: 5,
    Feast.EMBER_SATURDAY_PENTECOST: 6,
    Feast.TRINITY_SUNDAY: 7,
    Feast.CORPUS_CHRISTI: 4,
}

ACCESSORS = [
    (computus.septuagesima, Feast.SEPTUAGESIMA),
    (computus.sexagesima, Feast.SEXAGESIMA),
    (computus.quinquagesima, Feast.QUINQUAGESIMA),
    (computus.ash_wednesday, Feast.ASH_WEDNESDAY),
    (computus.first_sunday_of_lent, Feast.FIRST_SUNDAY_OF_LENT),
    (computus.ember_wednesday_lent, Feast.EMBER_WEDNESDAY_LENT),
    (computus.ember_friday_lent, Feast.EMBER_FRIDAY_LENT),
    (computus.ember_saturday_lent, Feast.EMBER_SATURDAY_LENT),
    (computus.passion_sunday, Feast.PASSION_SUNDAY),
    (computus.palm_sunday, Feast.PALM_SUNDAY),
    (computus.spy_wednesday, Feast.SPY_WEDNESDAY),
    (computus.holy_thursday, Feast.HOLY_THURSDAY),
    (computus.good_friday, Feast.GOOD_FRIDAY),
    (computus.holy_saturday, Feast.HOLY_SATURDAY),
    (computus.easter_monday, Feast.EASTER_MONDAY),
    (computus.easter_tuesday, Feast.EASTER_TUESDAY),
    (computus.low_sunday, Feast.LOW_SUNDAY),
    (computus.octave_of_easter, Feast.LOW_SUNDAY),
    (computus.ascension, Feast.ASCENSION),
    (computus.pentecost, Feast.PENTECOST),
    (computus.ember_wednesday_pentecost, Feast.EMBER_WEDNESDAY_PENTECOST),
    (computus.ember_friday_pentecost, Feast.EMBER_FRIDAY_PENTECOST),
    (computus.ember_saturday_pentecost, Feast.EMBER_SATURDAY_PENTECOST),
    (computus.trinity_sunday, Feast.TRINITY_SUNDAY),
    (computus.corpus_christi, Feast.CORPUS_CHRISTI),
]


def test_table_and_enum_agree():
    assert [f.value for f in Feast] == list(FEAST_TABLE.names())
    assert len(FEAST_TABLE) == len(MOVABLE_FEASTS)


def test_table_offset_span():
    offsets = [f.offset for f in MOVABLE_FEASTS]
    assert min(offsets) == -63
    assert max(offsets) == 60
    assert offsets == sorted(offsets)


def test_offsets_exact_over_range():
    for year in range(1583, 3001):
        e = easter(year)
        for f in MOVABLE_FEASTS:
            d, found = resolve(year, f.name)
            assert found
            assert (d - e).days == f.offset, (year, f.name)


@pytest.mark.parametrize("feast,iso", sorted(WEEKDAYS.items()))
def test_feast_weekday(feast, iso):
    for year in range(1583, 2200, 17):
        assert must(year, feast).isoweekday() == iso


@pytest.mark.parametrize("accessor,feast", ACCESSORS)
def test_named_accessors(accessor, feast):
    for year in (1583, 1818, 2024, 2026, 2038):
        assert accessor(year) == resolve(year, feast)[0]


@pytest.mark.parametrize(
    "accessor,expected",
    [
        (computus.ash_wednesday, ["2020-02-26", "2021-02-17", "2022-03-02", "2023-02-22",
                                  "2024-02-14", "2025-03-05", "2026-02-18"]),
        (computus.septuagesima, ["2024-01-28", "2026-02-01"]),
        (computus.palm_sunday, ["2024-03-24", "2026-03-29"]),
        (computus.good_friday, ["2024-03-29", "2026-04-03"]),
        (computus.ascension, ["2024-05-09", "2026-05-14"]),
        (computus.pentecost, ["2024-05-19", "2026-05-24"]),
        (computus.trinity_sunday, ["2026-05-31"]),
        (computus.corpus_christi, ["2024-05-30", "2026-06-04"]),
    ],
)
def test_verified_feast_dates(accessor, expected):
    for iso in expected:
        assert accessor(int(iso[:4])).isoformat() == iso


def test_offsets_cross_month_and_leap_day():
    # Easter 2000-04-23; the offset walks back across the Feb 29 boundary
    assert computus.septuagesima(2000) == date(2000, 2, 20)
    assert computus.ash_wednesday(2000) == date(2000, 3, 8)
    # Easter 1818-03-22
    assert computus.septuagesima(1818) == date(1818, 1, 18)
    assert computus.corpus_christi(1818) == date(1818, 5, 21)


def test_resolve_accepts_enum_and_string():
    assert resolve(2024, Feast.PENTECOST) == resolve(2024, "Pentecost")
    assert resolve(2024, Feast.EASTER_SUNDAY) == (easter(2024), True)


def test_resolve_unknown_feast():
    for year in (1583, 2024, 3000):
        d, found = resolve(year, "Nonexistent Feast")
        assert found is False
        assert d is None


def test_resolve_is_case_sensitive():
    assert resolve(2024, "pentecost") == (None, False)


def test_must_unknown_feast_raises():
    with pytest.raises(FeastTableError) as exc:
        must(2026, "Nonexistent Feast")
    assert exc.value.name == "Nonexistent Feast"
    assert "Nonexistent Feast" in str(exc.value)
    assert isinstance(exc.value, LookupError)


def test_must_logs_missing_feast(caplog):
    with caplog.at_level(logging.ERROR, logger="computus.engines.temporal"):
        with pytest.raises(FeastTableError):
            must(2026, "Nonexistent Feast")
    assert "Nonexistent Feast" in caplog.text


def test_feasts_in_year():
    rows = feasts_in_year(2026)
    assert [name for name, _ in rows] == list(FEAST_TABLE.names())
    assert dict(rows)["Easter Sunday"] == date(2026, 4, 5)
    assert dict(rows)["Ember Saturday of Pentecost"] == date(2026, 5, 30)


def test_resolve_is_idempotent():
    for f in MOVABLE_FEASTS:
        assert resolve(2024, f.name) == resolve(2024, f.name)
