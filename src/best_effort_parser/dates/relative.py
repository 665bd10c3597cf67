# src/best_effort_parser/dates/relative.py

from __future__ import annotations

import datetime as _dt
from typing import List, Tuple

from best_effort_parser.patterns import DatePatternSet


# ---------------------------------------------------------------------------
# Calendar arithmetic
# ---------------------------------------------------------------------------

def shift_days(today: _dt.date, offset: int) -> _dt.date:
    return today + _dt.timedelta(days=offset)


def last_weekday(today: _dt.date, iso_weekday: int) -> _dt.date:
    """Most recent ``iso_weekday`` on or before ``today`` (today itself if it matches)."""
    return today - _dt.timedelta(days=(today.isoweekday() - iso_weekday) % 7)


def next_weekday(today: _dt.date, iso_weekday: int) -> _dt.date:
    """Nearest ``iso_weekday`` strictly after ``today`` (a week ahead if today matches)."""
    return today + _dt.timedelta(days=(iso_weekday - today.isoweekday() - 1) % 7 + 1)


# ---------------------------------------------------------------------------
# Text scanning
# ---------------------------------------------------------------------------

def find_relative_dates(
    text: str,
    patterns: DatePatternSet,
    today: _dt.date,
) -> List[Tuple[_dt.date, str]]:
    """
    Resolve relative-day keywords ("today", "tomorrow", "yesterday") and
    "last <weekday>" / "next <weekday>" phrases against ``today``.

    Returns ``(date, trigger_text)`` pairs: keywords first in configured
    order, then weekday phrases in configured weekday order ("last" before
    "next" for each weekday). Each keyword or phrase counts once per text.
    """
    found: List[Tuple[_dt.date, str]] = []
    if not text:
        return found

    for _keyword, offset, regex in patterns.relative_days:
        match = regex.search(text)
        if match:
            found.append((shift_days(today, offset), match.group(0)))

    for _name, iso_weekday, last_regex, next_regex in patterns.weekdays:
        match = last_regex.search(text)
        if match:
            found.append((last_weekday(today, iso_weekday), match.group(0)))

        match = next_regex.search(text)
        if match:
            found.append((next_weekday(today, iso_weekday), match.group(0)))

    return found
