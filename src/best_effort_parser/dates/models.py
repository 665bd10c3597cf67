"""
Value types produced and consumed by the date parser.

- DatePart:     one classified token (numeric value + the text it came from)
- ParsedDate:   the built-in output record (year, optional month, optional day)
- DetectedDate: an output record plus the source texts that triggered it
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class DatePart:
    """A day, month, or year candidate; ``value`` is None when it could not be resolved."""
    value: Optional[int]
    text: str


@dataclass(frozen=True)
class ParsedDate:
    """
    Immutable year / month / day record.

    A missing year is stored as 0; month and day stay None when absent.
    """
    year: int = 0
    month: Optional[int] = None
    day: Optional[int] = None

    def __post_init__(self) -> None:
        if self.year is None:
            object.__setattr__(self, "year", 0)

    @classmethod
    def create(cls, year: Optional[int], month: Optional[int] = None, day: Optional[int] = None) -> "ParsedDate":
        """Output adapter used by ``DateParser.basic``."""
        return cls(year, month, day)

    def to_date(self) -> _dt.date:
        """
        Calendar date, using 1 for a missing month or day.

        Raises ValueError when there is no year (stored as 0), since
        ``datetime.date`` has no year 0.
        """
        if not self.year:
            raise ValueError("ParsedDate has no year and cannot be converted to a date")
        return _dt.date(self.year, self.month or 1, self.day or 1)

    def to_dict(self) -> Dict[str, Any]:
        return {"year": self.year, "month": self.month, "day": self.day}

    def diagnostic_string(
        self,
        separator: str = " ",
        day_label: str = "[Day]:",
        month_label: str = "[Month]:",
        year_label: str = "[Year]:",
    ) -> str:
        """Day, month and year (in that order) with a label before each present term."""
        parts = []
        if self.day is not None:
            parts.extend([day_label, str(self.day)])
        if self.month is not None:
            parts.extend([month_label, str(self.month)])
        parts.extend([year_label, str(self.year)])
        return separator.join(parts)

    def __str__(self) -> str:
        return self.diagnostic_string()


@dataclass(frozen=True)
class DetectedDate(Generic[T]):
    """A parser output together with the literal texts that produced it."""
    date: T
    trigger_texts: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        date = self.date
        if hasattr(date, "to_dict"):
            date = date.to_dict()
        return {"date": date, "trigger_texts": list(self.trigger_texts)}
