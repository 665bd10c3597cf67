"""
Best-effort date parser.

Parsing happens in two stages, **collection** and **assembly**.

Collection scans the text into three independent candidate lists (days,
months, years). With the defaults, "1/5/10" contributes month 1, day 5 and
year 2010; "January" contributes month 1; "20" or "20th" contribute day 20;
"2010-2015" contributes years 2010 and 2015; "spring" contributes month 3.

Assembly walks the three lists in tandem. While any list still has entries,
one record is made from the most recent value of each list, so values from an
exhausted list carry forward:

    "March 2nd, 2000"             -> 2000-03-02
    "March 2nd, 2000 to 2005"     -> 2000-03-02, 2005-03-02
    "January - March 2010"        -> 2010-01, 2010-03   (no day anywhere)
    "5-10 Sep"                    -> nothing            (no year anywhere)

Relative keywords ("today", "tomorrow", "yesterday") and "last/next <weekday>"
phrases are resolved against the current date and appended afterwards.
"""

from __future__ import annotations

import datetime as _dt
from typing import Callable, Generic, Iterator, List, Mapping, Optional, Sequence, TypeVar, Union

from best_effort_parser.classifier import DateCandidates, classify_compact, classify_word
from best_effort_parser.dates.models import DatePart, DetectedDate, ParsedDate
from best_effort_parser.dates.relative import find_relative_dates
from best_effort_parser.logger import get_logger
from best_effort_parser.patterns import (
    DEFAULT_DIGIT_SUFFIXES,
    DEFAULT_FOUR_DIGIT_OFFSETS,
    DEFAULT_MONTHS,
    DEFAULT_RELATIVE_DAYS,
    DEFAULT_SEASON_TO_MONTH,
    DEFAULT_SEASONS,
    DEFAULT_WEEKDAYS,
    CompactDateFormat,
    DatePatternSet,
    PatternLike,
)
from best_effort_parser.tokenizer import COMPACT, scan_date_tokens

log = get_logger("dates.parser")

T = TypeVar("T")

# f(year, month=None, day=None) -> T
DateOutput = Callable[..., T]


# ---------------------------------------------------------------------------
# Collection
# ---------------------------------------------------------------------------

def collect_parts(text: Optional[str], patterns: DatePatternSet) -> DateCandidates:
    """Scan ``text`` into day / month / year candidates, in left-to-right order."""
    candidates = DateCandidates()
    for token in scan_date_tokens(text):
        if token.kind == COMPACT:
            branch, found = classify_compact(token, patterns)
            log.debug("Compact token %r read as %s", token.text, branch)
        else:
            found = classify_word(token, patterns)
        candidates.extend(found)
    return candidates


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------

def _resolved(parts: Sequence[DatePart]) -> Iterator[DatePart]:
    return (p for p in parts if p is not None and p.value is not None)


def tandem(
    days: Sequence[DatePart],
    months: Sequence[DatePart],
    years: Sequence[DatePart],
) -> Iterator[List[DatePart]]:
    """
    Advance the three cursors together and yield ``[year, month?, day?]`` for
    every round in which at least one cursor moved and a year is known.
    Exhausted cursors keep their last value; never-filled ones stay unset.
    """
    cursors = (_resolved(days), _resolved(months), _resolved(years))
    current: List[Optional[DatePart]] = [None, None, None]

    while True:
        advanced = False
        for slot, cursor in enumerate(cursors):
            part = next(cursor, None)
            if part is not None:
                current[slot] = part
                advanced = True
        if not advanced:
            return

        day, month, year = current
        if year is None:
            continue
        if month is not None and day is not None:
            yield [year, month, day]
        elif month is not None:
            yield [year, month]
        else:
            yield [year]


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class DateParser(Generic[T]):
    """
    Extract every date found in an arbitrary string.

    - compact_date_format: how to read an ambiguous compact date such as
      10/10/2000 (default month-first)
    - months: ordered month patterns, January first
    - seasons: ordered season patterns, spring first; None ignores seasons
    - season_to_month: season id (1-based) -> month; None ignores seasons
    - digit_suffixes: ordinal suffixes stripped before reading numbers; None
      disables stripping ("1st January 2000" then has no day)
    - four_digit_offsets: threshold -> offset used to expand 2-3 digit years;
      None disables expansion
    - relative_days / weekdays: keywords resolved against the current date
    - clock: returns "today"; defaults to ``datetime.date.today``

    Patterns may be strings (compiled case-insensitively), compiled regexes,
    or objects with a ``matches(token)`` method.
    """

    DEFAULT_MONTHS = DEFAULT_MONTHS
    DEFAULT_SEASONS = DEFAULT_SEASONS
    DEFAULT_SEASON_TO_MONTH = DEFAULT_SEASON_TO_MONTH
    DEFAULT_DIGIT_SUFFIXES = DEFAULT_DIGIT_SUFFIXES
    DEFAULT_FOUR_DIGIT_OFFSETS = DEFAULT_FOUR_DIGIT_OFFSETS
    DEFAULT_RELATIVE_DAYS = DEFAULT_RELATIVE_DAYS
    DEFAULT_WEEKDAYS = DEFAULT_WEEKDAYS

    def __init__(
        self,
        output: DateOutput,
        compact_date_format: Union[str, CompactDateFormat] = CompactDateFormat.MONTH_FIRST,
        months: Sequence[PatternLike] = DEFAULT_MONTHS,
        seasons: Optional[Sequence[PatternLike]] = DEFAULT_SEASONS,
        season_to_month: Optional[Mapping[int, int]] = DEFAULT_SEASON_TO_MONTH,
        digit_suffixes: Optional[PatternLike] = DEFAULT_DIGIT_SUFFIXES,
        four_digit_offsets: Optional[Mapping[int, int]] = DEFAULT_FOUR_DIGIT_OFFSETS,
        relative_days: Optional[Mapping[str, int]] = DEFAULT_RELATIVE_DAYS,
        weekdays: Optional[Mapping[str, int]] = DEFAULT_WEEKDAYS,
        clock: Optional[Callable[[], _dt.date]] = None,
    ):
        self._output = output
        self._clock = clock
        self.patterns = DatePatternSet.build(
            compact_date_format=compact_date_format,
            months=months,
            seasons=seasons,
            season_to_month=season_to_month,
            digit_suffixes=digit_suffixes,
            four_digit_offsets=four_digit_offsets,
            relative_days=relative_days,
            weekdays=weekdays,
        )

    @classmethod
    def basic(cls, **kwargs) -> "DateParser[ParsedDate]":
        """A parser whose output is ``ParsedDate``; accepts the same keywords as the constructor."""
        return cls(ParsedDate.create, **kwargs)

    def _today(self) -> _dt.date:
        today = self._clock() if self._clock is not None else _dt.date.today()
        if isinstance(today, _dt.datetime):
            today = today.date()
        return today

    def detect(self, text: Optional[str]) -> List[DetectedDate[T]]:
        """Every date found in ``text`` with the source texts that produced it."""
        if not text:
            return []

        parts = collect_parts(text, self.patterns)
        log.debug(
            "Collected %d day, %d month, %d year candidates from %r",
            len(parts.days), len(parts.months), len(parts.years), text,
        )

        found: List[DetectedDate[T]] = []
        for record in tandem(parts.days, parts.months, parts.years):
            values = [p.value for p in record]
            found.append(DetectedDate(self._output(*values), tuple(p.text for p in record)))

        relative = find_relative_dates(text, self.patterns, self._today())
        for day, trigger in relative:
            found.append(DetectedDate(self._output(day.year, day.month, day.day), (trigger,)))

        log.debug("Detected %d date(s) in %r", len(found), text)
        return found

    def parse(self, text: Optional[str]) -> List[T]:
        """The outputs of ``detect``, one per date found; empty when nothing parses."""
        return [detected.date for detected in self.detect(text)]
