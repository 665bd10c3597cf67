"""
parsed_name.py
Immutable value type for the components of a personal name.

- family:                last name(s)                 ("Fontaine" in "Jean de La Fontaine")
- given:                 first and middle name(s)     ("Jean")
- dropping_particle:     lowercase particle(s)        ("de")
- non_dropping_particle: particle(s) with uppercase   ("La")
- suffix:                trailing qualifiers          ("III" in "Bill Gates III")
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class ParsedName:
    family: str = ""
    given: str = ""
    dropping_particle: str = ""
    non_dropping_particle: str = ""
    suffix: str = ""

    def __post_init__(self) -> None:
        # None is accepted anywhere and stored as the empty string.
        for key in ("family", "given", "dropping_particle", "non_dropping_particle", "suffix"):
            if getattr(self, key) is None:
                object.__setattr__(self, key, "")

    @classmethod
    def create(
        cls,
        family: Optional[str],
        *,
        given: Optional[str] = "",
        dropping_particle: Optional[str] = "",
        non_dropping_particle: Optional[str] = "",
        suffix: Optional[str] = "",
    ) -> "ParsedName":
        """Output adapter used by ``NameParser.basic``."""
        return cls(
            family=family,
            given=given,
            dropping_particle=dropping_particle,
            non_dropping_particle=non_dropping_particle,
            suffix=suffix,
        )

    def _ordered(self):
        return (
            ("given", self.given),
            ("dropping_particle", self.dropping_particle),
            ("non_dropping_particle", self.non_dropping_particle),
            ("family", self.family),
            ("suffix", self.suffix),
        )

    def to_string(self, separator: str = " ") -> str:
        """Non-empty fields in "first last" order: given, particles, family, suffix."""
        return separator.join(value for _, value in self._ordered() if value)

    def __str__(self) -> str:
        return self.to_string()

    def diagnostic_string(
        self,
        separator: str = " ",
        given_label: str = "[Given]:",
        dropping_particle_label: str = "[Dropping Particle]:",
        non_dropping_particle_label: str = "[Non-dropping Particle]:",
        family_label: str = "[Family]:",
        suffix_label: str = "[Suffix]:",
    ) -> str:
        """Like ``to_string`` but each present field is preceded by its label; empty labels are skipped."""
        labels = {
            "given": given_label,
            "dropping_particle": dropping_particle_label,
            "non_dropping_particle": non_dropping_particle_label,
            "family": family_label,
            "suffix": suffix_label,
        }
        parts = []
        for key, value in self._ordered():
            if not value:
                continue
            if labels[key]:
                parts.append(labels[key])
            parts.append(value)
        return separator.join(parts)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
