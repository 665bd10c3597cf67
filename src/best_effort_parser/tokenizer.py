# src/best_effort_parser/tokenizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from best_effort_parser.patterns import COMMAS, WHITESPACE


# Either a compact numeric date ("10/20/2000", "10-20-2000") or a bare word.
DATE_SCAN_RE = re.compile(r"((?:\d+\D){2}\d+)|([^\W_]+)")
_NUMBER_RE = re.compile(r"\d+")

APOSTROPHES = ("'", "‘", "’")

COMPACT = "compact"
WORD = "word"


@dataclass(frozen=True)
class DateToken:
    """
    A single unit found by the date scan.

    Attributes:
        kind: ``"compact"`` for three digit groups, ``"word"`` for a bare word.
        text: The matched substring.
        start: Offset of the match in the scanned text.
        numbers: For compact tokens, the three integers in textual order.
        after_apostrophe: True when the token directly follows an apostrophe
            (informal two-digit years such as ``'99``).
    """
    kind: str
    text: str
    start: int
    numbers: Tuple[int, ...] = ()
    after_apostrophe: bool = False


def split_comma_groups(text: str) -> List[str]:
    """Split on runs of commas, swallowing the whitespace around them."""
    return COMMAS.split(text)


def split_space_parts(text: str) -> List[str]:
    return WHITESPACE.split(text)


def _parse_int(raw: str, default: int = 1) -> int:
    try:
        return int(raw)
    except ValueError:
        return default


def _compact_numbers(text: str) -> Tuple[int, int, int]:
    numbers = [_parse_int(n) for n in _NUMBER_RE.findall(text)[:3]]
    # The scan guarantees three groups; pad anyway so callers can unpack.
    while len(numbers) < 3:
        numbers.append(1)
    return numbers[0], numbers[1], numbers[2]


def scan_date_tokens(text: Optional[str]) -> Iterator[DateToken]:
    """
    Yield compact-date and word tokens from left to right, without overlap.

    Examples:
        "10/20/2000"        -> compact (10, 20, 2000)
        "March 2nd, 2000"   -> word "March", word "2nd", word "2000"
        "2-3 January 2010"  -> word "2", word "3", word "January", word "2010"
    """
    if not text:
        return

    for match in DATE_SCAN_RE.finditer(text):
        start = match.start()
        if match.group(1) is not None:
            yield DateToken(
                kind=COMPACT,
                text=match.group(1),
                start=start,
                numbers=_compact_numbers(match.group(1)),
            )
        else:
            yield DateToken(
                kind=WORD,
                text=match.group(2),
                start=start,
                after_apostrophe=start > 0 and text[start - 1] in APOSTROPHES,
            )
