"""
Pattern Set: the classification patterns shared by the name and date parsers.

Every category is held as a matcher, i.e. an object exposing
``matches(token) -> bool``. Callers may supply:

- a ``str``            -> compiled case-insensitively into a ``RegexMatcher``
- a ``re.Pattern``     -> wrapped as-is (its own flags are kept)
- any matcher object   -> used directly

The defaults below are English; all of them can be replaced wholesale when a
parser is constructed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional, Protocol, Sequence, Tuple, Union, runtime_checkable

from best_effort_parser.core.exceptions import PatternCompileError


# ==========================================================
# NAME DEFAULTS
# ==========================================================

# jr, sr, roman numerals i - xiii, esq, cpa, dc, dds, vm, jd, md, phd
DEFAULT_SUFFIXES = r"^([js]r|[vx]?i{0,3}|i[vx]|esq|cpa|dc|dds|vm|[jm]d|phd)$"

# af, aw, da, das, de, den, der, des, di, dit, do, dos, du, la, le, na, of,
# ter, thoe, tot, van, von, zu
DEFAULT_PARTICLES = r"^(a[fw]|d(([ao]s?)|(e[nrs]?)|(it?)|u)|l[ea]|na|of|t(er|hoe|ot)|v[ao]n|zu)$"

# Anything that is not alphanumeric or whitespace; `_` counts as punctuation.
DEFAULT_PUNCTUATION = r"_|[^\w\s]"

WHITESPACE = re.compile(r"\s+")
COMMAS = re.compile(r"\s*,+\s*")


# ==========================================================
# DATE DEFAULTS
# ==========================================================

DEFAULT_MONTHS: Tuple[str, ...] = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)

DEFAULT_SEASONS: Tuple[str, ...] = (
    "spring",
    "summer",
    "fall|autumn",
    "winter",
)

# Seasons (1-based, spring first) map to the month in which they begin.
DEFAULT_SEASON_TO_MONTH: Dict[int, int] = {1: 3, 2: 6, 3: 9, 4: 12}

DEFAULT_DIGIT_SUFFIXES = r"st|nd|rd|th"

# Years below 30 get 2000 added, years in [30, 100) get 1900 added.
DEFAULT_FOUR_DIGIT_OFFSETS: Dict[int, int] = {30: 2000, 100: 1900}

DEFAULT_RELATIVE_DAYS: Dict[str, int] = {
    "today": 0,
    "tomorrow": 1,
    "yesterday": -1,
}

# ISO weekday numbers (Monday == 1), as returned by date.isoweekday().
DEFAULT_WEEKDAYS: Dict[str, int] = {
    "sunday": 7,
    "monday": 1,
    "tuesday": 2,
    "wednesday": 3,
    "thursday": 4,
    "friday": 5,
    "saturday": 6,
}


class CompactDateFormat(str, Enum):
    """How an ambiguous compact date such as ``10/11/12`` is read.

    ``DAY_FIRST`` and ``MONTH_FIRST`` fall back to year-first when the year is
    obviously first (``2011/12/13``); ``YEAR_FIRST`` falls back to day-first
    when the year is obviously last (``11/12/2013``).
    """

    DAY_FIRST = "day-first"
    MONTH_FIRST = "month-first"
    YEAR_FIRST = "year-first"

    @classmethod
    def from_name(cls, name: Union[str, "CompactDateFormat"]) -> "CompactDateFormat":
        if isinstance(name, CompactDateFormat):
            return name
        key = str(name).strip().lower().replace("_", "-")
        for member in cls:
            if key in (member.value, member.value.replace("-", "")):
                return member
        raise ValueError(f"Unknown compact date format: {name!r}")


# ==========================================================
# MATCHERS
# ==========================================================

@runtime_checkable
class Matcher(Protocol):
    def matches(self, token: str) -> bool:
        ...


class RegexMatcher:
    """Regular-expression matcher; ``matches`` searches anywhere in the token."""

    __slots__ = ("regex",)

    def __init__(self, regex: "re.Pattern[str]"):
        self.regex = regex

    def matches(self, token: str) -> bool:
        return self.regex.search(token) is not None

    def strip(self, token: str) -> str:
        """Remove every match from ``token``."""
        return self.regex.sub("", token)

    def __repr__(self) -> str:
        return f"RegexMatcher({self.regex.pattern!r})"


PatternLike = Union[str, "re.Pattern[str]", Matcher]


def compile_pattern(pattern: PatternLike) -> Union[RegexMatcher, Matcher]:
    """Turn a pattern-like value into a matcher, failing loudly on bad input."""
    if isinstance(pattern, RegexMatcher):
        return pattern
    if isinstance(pattern, re.Pattern):
        return RegexMatcher(pattern)
    if isinstance(pattern, str):
        try:
            return RegexMatcher(re.compile(pattern, re.IGNORECASE))
        except re.error as exc:
            raise PatternCompileError(f"Invalid pattern {pattern!r}: {exc}") from exc
    if isinstance(pattern, Matcher):
        return pattern
    raise PatternCompileError(
        f"Unsupported pattern {pattern!r}: expected str, re.Pattern or an object with matches()"
    )


def compile_strip_pattern(pattern: PatternLike) -> RegexMatcher:
    """Like ``compile_pattern`` but the result must be able to remove matches."""
    matcher = compile_pattern(pattern)
    if not hasattr(matcher, "strip"):
        raise PatternCompileError(f"Pattern {pattern!r} cannot be used to strip text")
    return matcher  # type: ignore[return-value]


def _word_regex(keyword: str, lead: Optional[str] = None) -> "re.Pattern[str]":
    """Whole-word, case-insensitive regex for ``keyword``, optionally preceded by ``lead``."""
    body = rf"{lead}\s+(?:{keyword})" if lead else rf"(?:{keyword})"
    try:
        return re.compile(rf"\b{body}\b", re.IGNORECASE)
    except re.error as exc:
        raise PatternCompileError(f"Invalid keyword pattern {keyword!r}: {exc}") from exc


def compile_patterns(patterns: Sequence[PatternLike]) -> Tuple[Union[RegexMatcher, Matcher], ...]:
    return tuple(compile_pattern(p) for p in patterns)


# ==========================================================
# PATTERN SETS
# ==========================================================

@dataclass(frozen=True)
class NamePatternSet:
    suffixes: Matcher
    particles: Matcher
    punctuation: RegexMatcher

    @classmethod
    def build(
        cls,
        suffixes: PatternLike = DEFAULT_SUFFIXES,
        particles: PatternLike = DEFAULT_PARTICLES,
        punctuation: PatternLike = DEFAULT_PUNCTUATION,
    ) -> "NamePatternSet":
        return cls(
            suffixes=compile_pattern(suffixes),
            particles=compile_pattern(particles),
            punctuation=compile_strip_pattern(punctuation),
        )


@dataclass(frozen=True)
class DatePatternSet:
    """
    Date-side patterns and tables.

    ``seasons`` is empty when season detection is disabled, ``digit_suffixes``
    is None when ordinal stripping is disabled, and ``four_digit_offsets`` is an
    empty tuple when year expansion is disabled.
    """

    compact_date_format: CompactDateFormat
    months: Tuple[Matcher, ...]
    seasons: Tuple[Matcher, ...]
    season_to_month: Optional[Mapping[int, int]]
    digit_suffixes: Optional[RegexMatcher]
    four_digit_offsets: Tuple[Tuple[int, int], ...]
    relative_days: Tuple[Tuple[str, int, "re.Pattern[str]"], ...]
    # (name, iso weekday, "last <name>" regex, "next <name>" regex)
    weekdays: Tuple[Tuple[str, int, "re.Pattern[str]", "re.Pattern[str]"], ...]

    @property
    def seasons_enabled(self) -> bool:
        return bool(self.seasons) and self.season_to_month is not None

    @classmethod
    def build(
        cls,
        compact_date_format: Union[str, CompactDateFormat] = CompactDateFormat.MONTH_FIRST,
        months: Sequence[PatternLike] = DEFAULT_MONTHS,
        seasons: Optional[Sequence[PatternLike]] = DEFAULT_SEASONS,
        season_to_month: Optional[Mapping[int, int]] = DEFAULT_SEASON_TO_MONTH,
        digit_suffixes: Optional[PatternLike] = DEFAULT_DIGIT_SUFFIXES,
        four_digit_offsets: Optional[Mapping[int, int]] = DEFAULT_FOUR_DIGIT_OFFSETS,
        relative_days: Optional[Mapping[str, int]] = DEFAULT_RELATIVE_DAYS,
        weekdays: Optional[Mapping[str, int]] = DEFAULT_WEEKDAYS,
    ) -> "DatePatternSet":
        try:
            fmt = CompactDateFormat.from_name(compact_date_format)
        except ValueError as exc:
            raise PatternCompileError(str(exc)) from exc

        relative = []
        for keyword, offset in (relative_days or {}).items():
            relative.append((keyword, int(offset), _word_regex(keyword)))

        weekday_phrases = []
        for name, iso_weekday in (weekdays or {}).items():
            weekday_phrases.append(
                (name, int(iso_weekday), _word_regex(name, "last"), _word_regex(name, "next"))
            )

        return cls(
            compact_date_format=fmt,
            months=compile_patterns(months),
            seasons=compile_patterns(seasons) if seasons is not None else (),
            season_to_month=dict(season_to_month) if season_to_month is not None else None,
            digit_suffixes=compile_strip_pattern(digit_suffixes) if digit_suffixes else None,
            four_digit_offsets=tuple(sorted((int(k), int(v)) for k, v in (four_digit_offsets or {}).items())),
            relative_days=tuple(relative),
            weekdays=tuple(weekday_phrases),
        )
