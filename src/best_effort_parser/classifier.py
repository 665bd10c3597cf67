"""
Token classification for both parsers.

Name side: suffix / particle detection on punctuation-stripped tokens, and the
particle case rule (any uppercase -> non-dropping).

Date side: numeric normalization (month and day wraparound, year digit
expansion), compact-date disambiguation, and word classification into the
day / month / year candidate streams.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from best_effort_parser.dates.models import DatePart
from best_effort_parser.patterns import (
    DEFAULT_SEASON_TO_MONTH,
    CompactDateFormat,
    DatePatternSet,
    NamePatternSet,
)
from best_effort_parser.tokenizer import DateToken, split_space_parts


# ---------------------------------------------------------------------------
# Name tokens
# ---------------------------------------------------------------------------

def strip_punctuation(token: str, patterns: NamePatternSet) -> str:
    return patterns.punctuation.strip(token)


def is_suffix(token: str, patterns: NamePatternSet) -> bool:
    return patterns.suffixes.matches(strip_punctuation(token, patterns))


def is_particle(token: str, patterns: NamePatternSet) -> bool:
    return patterns.particles.matches(strip_punctuation(token, patterns))


def is_suffix_group(group: str, patterns: NamePatternSet) -> bool:
    """
    A comma group is a suffix group only if every whitespace token in it is a
    suffix once punctuation is gone ("Jr. III" yes, "Jr. Smith" no).
    """
    stripped = strip_punctuation(group, patterns)
    return all(patterns.suffixes.matches(tok) for tok in split_space_parts(stripped))


def is_non_dropping(particle: str) -> bool:
    """Particles containing any uppercase character are non-dropping."""
    return particle.lower() != particle


# ---------------------------------------------------------------------------
# Numeric normalizers
# ---------------------------------------------------------------------------

def digit_count(value: int) -> int:
    return len(str(abs(value)))


def normalize_month(month: int) -> int:
    """Wrap any integer into 1..12 (13 -> 1, 0 -> 12)."""
    return ((month - 1) % 12) + 1


def normalize_day(day: int) -> int:
    """Wrap any integer into 1..31 (46 -> 15, 0 -> 31)."""
    return ((day - 1) % 31) + 1


def normalize_year(year: int, offsets: Sequence[Tuple[int, int]]) -> int:
    """
    Expand a 2-3 digit year with the offset of the smallest threshold strictly
    greater than it. ``offsets`` must be sorted by threshold.
    """
    if digit_count(year) >= 4:
        return year
    for threshold, offset in offsets:
        if threshold > year:
            return year + offset
    return year


# ---------------------------------------------------------------------------
# Date tokens
# ---------------------------------------------------------------------------

@dataclass
class DateCandidates:
    """Day / month / year candidates in scan order."""
    days: List[DatePart] = field(default_factory=list)
    months: List[DatePart] = field(default_factory=list)
    years: List[DatePart] = field(default_factory=list)

    def extend(self, other: "DateCandidates") -> None:
        self.days.extend(other.days)
        self.months.extend(other.months)
        self.years.extend(other.years)


# Names of the disambiguation branches, used for debug logging and tests.
UNAMBIGUOUS = "unambiguous"
YEAR_LAST = "year-last"
YEAR_FIRST = "year-first"
DAY_FIRST = "day-first"
MONTH_FIRST = "month-first"


def disambiguate_compact(
    numbers: Sequence[int],
    fmt: CompactDateFormat,
) -> Tuple[str, int, int, int]:
    """
    Decide which of three compact-date integers is the day, month and year.

    Returns ``(branch, day, month, year)`` with raw (unnormalized) values.

    1. Sorted ascending as {m <= 12, 12 < d <= 31, y > 31}: the configured
       format is irrelevant.
    2. DD/MM/YYYY-shaped while configured year-first: the year is obviously last.
    3. YYYY/MM/DD-shaped, or configured year-first.
    4. Otherwise the configured day-first / month-first order.
    """
    first, second, third = numbers[0], numbers[1], numbers[2]
    low, mid, high = sorted((first, second, third))

    if low <= 12 and 12 < mid <= 31 and high > 31:
        return UNAMBIGUOUS, mid, low, high

    if (
        digit_count(first) <= 2
        and digit_count(second) <= 2
        and digit_count(third) >= 4
        and fmt is CompactDateFormat.YEAR_FIRST
    ):
        return YEAR_LAST, first, second, third

    if (
        digit_count(first) >= 4 and digit_count(second) <= 2 and digit_count(third) <= 2
    ) or fmt is CompactDateFormat.YEAR_FIRST:
        return YEAR_FIRST, third, second, first

    if fmt is CompactDateFormat.DAY_FIRST:
        return DAY_FIRST, first, second, third

    return MONTH_FIRST, second, first, third


def classify_compact(token: DateToken, patterns: DatePatternSet) -> Tuple[str, DateCandidates]:
    branch, day, month, year = disambiguate_compact(token.numbers, patterns.compact_date_format)
    out = DateCandidates()
    out.days.append(DatePart(normalize_day(day), str(day)))
    out.months.append(DatePart(normalize_month(month), str(month)))
    out.years.append(DatePart(normalize_year(year, patterns.four_digit_offsets), str(year)))
    return branch, out


def _word_numeral(word: str, patterns: DatePatternSet) -> Optional[str]:
    """The decimal numeral left once ordinal suffixes are stripped, else None."""
    stripped = patterns.digit_suffixes.strip(word) if patterns.digit_suffixes else word
    if not stripped.isdecimal():
        return None
    return stripped


def classify_word(token: DateToken, patterns: DatePatternSet) -> DateCandidates:
    """
    Classify a bare word. A word may land in several streams at once, e.g. a
    month name that also parses as a number under a custom locale.
    """
    word = token.text
    out = DateCandidates()

    for index, month in enumerate(patterns.months, start=1):
        if month.matches(word):
            out.months.append(DatePart(index, word))

    if patterns.seasons_enabled:
        for season_id, season in enumerate(patterns.seasons, start=1):
            if season.matches(word):
                month_value = patterns.season_to_month.get(  # type: ignore[union-attr]
                    season_id, DEFAULT_SEASON_TO_MONTH.get(season_id)
                )
                out.months.append(DatePart(month_value, word))

    numeral = _word_numeral(word, patterns)
    if numeral is not None:
        number = int(numeral)
        # Length of the numeral as written, so zero-padded "007" is a year.
        if len(numeral) <= 2 and not token.after_apostrophe:
            out.days.append(DatePart(normalize_day(number), word))
        else:
            out.years.append(DatePart(normalize_year(number, patterns.four_digit_offsets), word))

    return out
