# tests/test_relative_dates.py

import datetime as dt

import pytest
from freezegun import freeze_time

from best_effort_parser import DateParser, ParsedDate
from best_effort_parser.dates.relative import last_weekday, next_weekday

# 2025-01-15 is a Wednesday.
WEDNESDAY = dt.date(2025, 1, 15)


def parse(text, **kwargs):
    return DateParser.basic(**kwargs).parse(text)


# ---------------------------------------------------------------------------
# Calendar arithmetic
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "iso_weekday, expected",
    [(1, dt.date(2025, 1, 13)), (3, dt.date(2025, 1, 15)), (4, dt.date(2025, 1, 9)), (7, dt.date(2025, 1, 12))],
)
def test_last_weekday_is_on_or_before_today(iso_weekday, expected):
    assert last_weekday(WEDNESDAY, iso_weekday) == expected


@pytest.mark.parametrize(
    "iso_weekday, expected",
    [(2, dt.date(2025, 1, 21)), (3, dt.date(2025, 1, 22)), (5, dt.date(2025, 1, 17)), (7, dt.date(2025, 1, 19))],
)
def test_next_weekday_is_strictly_after_today(iso_weekday, expected):
    assert next_weekday(WEDNESDAY, iso_weekday) == expected


# ---------------------------------------------------------------------------
# Keywords against the system clock
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "text, expected",
    [
        ("today", ParsedDate(2025, 1, 15)),
        ("Tomorrow", ParsedDate(2025, 1, 16)),
        ("since YESTERDAY", ParsedDate(2025, 1, 14)),
        ("last monday", ParsedDate(2025, 1, 13)),
        ("last wednesday", ParsedDate(2025, 1, 15)),
        ("Next Friday", ParsedDate(2025, 1, 17)),
        ("next wednesday", ParsedDate(2025, 1, 22)),
        ("next sunday", ParsedDate(2025, 1, 19)),
    ],
)
@freeze_time("2025-01-15")
def test_relative_keywords(text, expected):
    assert parse(text) == [expected]


@freeze_time("2025-03-01")
def test_relative_keywords_cross_month_boundaries():
    assert parse("yesterday") == [ParsedDate(2025, 2, 28)]


@freeze_time("2025-01-15")
def test_keywords_must_be_whole_words():
    assert parse("todays news") == []
    assert parse("monday") == []


@freeze_time("2025-01-15")
def test_each_keyword_counts_once():
    assert parse("today and today again") == [ParsedDate(2025, 1, 15)]


@freeze_time("2025-01-15")
def test_keywords_come_before_weekday_phrases():
    assert parse("next friday or yesterday") == [ParsedDate(2025, 1, 14), ParsedDate(2025, 1, 17)]
    assert parse("next friday, not last friday") == [ParsedDate(2025, 1, 10), ParsedDate(2025, 1, 17)]


@freeze_time("2025-01-15")
def test_relative_dates_follow_absolute_ones():
    assert parse("Moved on 1/2/2000 and again yesterday") == [
        ParsedDate(2000, 1, 2),
        ParsedDate(2025, 1, 14),
    ]


@freeze_time("2025-01-15")
def test_relative_trigger_text_is_the_matched_phrase():
    detected = DateParser.basic().detect("See you Next   Friday")
    assert len(detected) == 1
    assert detected[0].trigger_texts == ("Next   Friday",)


@freeze_time("2025-01-15")
def test_relative_keywords_can_be_disabled():
    assert parse("today, next friday", relative_days=None, weekdays=None) == []


@freeze_time("2025-01-15")
def test_custom_relative_keywords():
    assert parse("hoy", relative_days={"hoy": 0}, weekdays=None) == [ParsedDate(2025, 1, 15)]
    assert parse("last lunes", relative_days=None, weekdays={"lunes": 1}) == [ParsedDate(2025, 1, 13)]


# ---------------------------------------------------------------------------
# Injected clock
# ---------------------------------------------------------------------------

def test_injected_clock():
    parser = DateParser.basic(clock=lambda: dt.date(2024, 2, 29))
    assert parser.parse("tomorrow") == [ParsedDate(2024, 3, 1)]


def test_injected_clock_may_return_datetimes():
    parser = DateParser.basic(clock=lambda: dt.datetime(2024, 12, 31, 23, 59))
    assert parser.parse("tomorrow") == [ParsedDate(2025, 1, 1)]


def test_clock_is_read_on_every_call():
    days = iter([dt.date(2020, 1, 1), dt.date(2021, 6, 1)])
    parser = DateParser.basic(clock=lambda: next(days))
    assert parser.parse("today") == [ParsedDate(2020, 1, 1)]
    assert parser.parse("today") == [ParsedDate(2021, 6, 1)]


def test_relative_dates_go_through_the_output_adapter():
    parser = DateParser(lambda *args: args, clock=lambda: WEDNESDAY)
    assert parser.parse("today") == [(2025, 1, 15)]
