"""
Best-effort personal name parser.

Splits an arbitrary string into family name, given name, dropping and
non-dropping particles, and suffixes:

    "Jean de La Fontaine"        -> given "Jean", dropping "de", non-dropping "La", family "Fontaine"
    "Gates, Bill III"            -> given "Bill", family "Gates", suffix "III"
    "La Fontaine, Jean, de"      -> same as "Jean de La Fontaine"

Beyond "<first> <last>" and "<last>, <first>", suffixes and particles are found
in any reasonably-correct position. Whether a particle drops is locale
dependent; the generality used here is that lowercase particles drop and
particles with any uppercase character do not. Nothing is ever lost: an
unrecognized particle simply stays in the given or family name.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Generic, List, Optional, TypeVar

from best_effort_parser.classifier import (
    is_non_dropping,
    is_particle,
    is_suffix,
    is_suffix_group,
)
from best_effort_parser.logger import get_logger
from best_effort_parser.names.parsed_name import ParsedName
from best_effort_parser.patterns import (
    DEFAULT_PARTICLES,
    DEFAULT_PUNCTUATION,
    DEFAULT_SUFFIXES,
    NamePatternSet,
    PatternLike,
)
from best_effort_parser.tokenizer import split_comma_groups, split_space_parts

log = get_logger("names.parser")

Output = TypeVar("Output")

# f(family, *, given, dropping_particle, non_dropping_particle, suffix) -> Output
NameOutput = Callable[..., Output]


class NameParser(Generic[Output]):
    """
    Parse one name per call and hand the pieces to ``output``.

    ``output`` always receives strings, never None; absent components are "".
    """

    DEFAULT_SUFFIXES = DEFAULT_SUFFIXES
    DEFAULT_PARTICLES = DEFAULT_PARTICLES
    DEFAULT_PUNCTUATION = DEFAULT_PUNCTUATION

    def __init__(
        self,
        output: NameOutput,
        suffixes: PatternLike = DEFAULT_SUFFIXES,
        particles: PatternLike = DEFAULT_PARTICLES,
        punctuation: PatternLike = DEFAULT_PUNCTUATION,
    ):
        self._output = output
        self.patterns = NamePatternSet.build(
            suffixes=suffixes,
            particles=particles,
            punctuation=punctuation,
        )

    @classmethod
    def basic(
        cls,
        suffixes: PatternLike = DEFAULT_SUFFIXES,
        particles: PatternLike = DEFAULT_PARTICLES,
        punctuation: PatternLike = DEFAULT_PUNCTUATION,
    ) -> "NameParser[ParsedName]":
        """A parser whose output is ``ParsedName``."""
        return cls(ParsedName.create, suffixes=suffixes, particles=particles, punctuation=punctuation)

    def _emit(
        self,
        family: str,
        given: str = "",
        dropping: str = "",
        non_dropping: str = "",
        suffix: str = "",
    ) -> Output:
        log.debug(
            "Parsed name: family=%r given=%r dropping=%r non_dropping=%r suffix=%r",
            family, given, dropping, non_dropping, suffix,
        )
        return self._output(
            family,
            given=given,
            dropping_particle=dropping,
            non_dropping_particle=non_dropping,
            suffix=suffix,
        )

    def parse(self, text: Optional[str]) -> Output:
        raw = "" if text is None else str(text)
        source = raw.strip() or raw
        patterns = self.patterns

        # -------------------------------
        # Comma groups: suffixes vs. the rest
        # -------------------------------
        suffix_parts: Deque[str] = deque()
        other_groups: Deque[str] = deque()
        for group in split_comma_groups(source):
            if is_suffix_group(group, patterns):
                suffix_parts.append(group)
            else:
                other_groups.append(group)

        if not other_groups:
            # Empty input, or nothing but suffixes: keep it all as the family.
            return self._emit(source)

        # -------------------------------
        # "<last>, <first>" -> "<first> <last>"
        # -------------------------------
        if len(other_groups) > 1:
            last_parts = split_space_parts(other_groups[-1])
            if is_suffix(last_parts[-1], patterns):
                other_groups.pop()
                while last_parts and is_suffix(last_parts[-1], patterns):
                    suffix_parts.appendleft(last_parts.pop())
                other_groups.append(" ".join(last_parts))
            other_groups.append(other_groups.popleft())
            log.debug("Rotated family group to the end: %r", list(other_groups))

        space_parts: List[str] = [p for p in split_space_parts(" ".join(other_groups)) if p]
        if not space_parts:
            return self._emit(source)

        # -------------------------------
        # Trailing suffixes without commas
        # -------------------------------
        if any(not is_suffix(p, patterns) for p in space_parts):
            while is_suffix(space_parts[-1], patterns):
                suffix_parts.appendleft(space_parts.pop())

        # -------------------------------
        # Family: everything after the last particle, else the last token
        # -------------------------------
        family_parts: Deque[str] = deque()
        if any(is_particle(p, patterns) for p in space_parts) and not is_particle(space_parts[-1], patterns):
            while not is_particle(space_parts[-1], patterns):
                family_parts.appendleft(space_parts.pop())
        else:
            family_parts.appendleft(space_parts.pop())

        # -------------------------------
        # Particles directly before the family
        # -------------------------------
        dropping: Deque[str] = deque()
        non_dropping: Deque[str] = deque()
        while space_parts and is_particle(space_parts[-1], patterns):
            particle = space_parts.pop()
            if is_non_dropping(patterns.punctuation.strip(particle)):
                non_dropping.appendleft(particle)
            else:
                dropping.appendleft(particle)

        return self._emit(
            " ".join(family_parts),
            given=" ".join(space_parts),
            dropping=" ".join(dropping),
            non_dropping=" ".join(non_dropping),
            suffix=" ".join(suffix_parts),
        )
