# tests/test_name_parser.py

from __future__ import annotations

import re

import pytest

from best_effort_parser import NameParser, ParsedName, PatternCompileError


@pytest.fixture
def parser() -> NameParser:
    return NameParser.basic()


def _fields(result: ParsedName):
    return (
        result.given,
        result.family,
        result.dropping_particle,
        result.non_dropping_particle,
        result.suffix,
    )


@pytest.mark.parametrize("text", ["", None])
def test_empty_or_missing_input(parser, text) -> None:
    assert _fields(parser.parse(text)) == ("", "", "", "", "")


def test_groups_first_and_middle_names(parser) -> None:
    result = parser.parse("Jack Ramsey Warren")
    assert result == ParsedName("Warren", given="Jack Ramsey")


def test_groups_initials(parser) -> None:
    result = parser.parse("J. R. Warren")
    assert result.given == "J. R."
    assert result.family == "Warren"


def test_collapses_odd_whitespace(parser) -> None:
    result = parser.parse("Jack    Ramsey     Warren")
    assert result.given == "Jack Ramsey"
    assert result.family == "Warren"


def test_trims_surrounding_whitespace(parser) -> None:
    result = parser.parse("   Jack Warren  ")
    assert result.given == "Jack"
    assert result.family == "Warren"


def test_leaves_floating_punctuation(parser) -> None:
    result = parser.parse("Jack  -  Ramsey     Warren")
    assert result.given == "Jack - Ramsey"
    assert result.family == "Warren"


def test_rotates_last_first(parser) -> None:
    result = parser.parse("Warren, Jack Ramsey")
    assert result.given == "Jack Ramsey"
    assert result.family == "Warren"


def test_rotation_matches_pre_rotated_input(parser) -> None:
    rotated = parser.parse("Hopper, Grace")
    plain = parser.parse("Grace Hopper")
    assert (rotated.given, rotated.family) == (plain.given, plain.family)


@pytest.mark.parametrize(
    "text",
    [
        "Jean de La Fontaine",
        "de La Fontaine, Jean",
        "La Fontaine, Jean de",
        "La Fontaine, Jean, de",
        "Fontaine, Jean de La",
    ],
)
def test_particles_in_any_ordering(parser, text) -> None:
    result = parser.parse(text)
    assert result == ParsedName(
        "Fontaine",
        given="Jean",
        dropping_particle="de",
        non_dropping_particle="La",
    )


def test_lowercase_particle_is_dropping(parser) -> None:
    for text in ("Willem de Kooning", "de Kooning, Willem"):
        result = parser.parse(text)
        assert result.given == "Willem"
        assert result.family == "Kooning"
        assert result.dropping_particle == "de"
        assert result.non_dropping_particle == ""


def test_capitalized_particle_is_non_dropping(parser) -> None:
    for text in ("Willem De Kooning", "De Kooning, Willem"):
        result = parser.parse(text)
        assert result.given == "Willem"
        assert result.family == "Kooning"
        assert result.dropping_particle == ""
        assert result.non_dropping_particle == "De"


def test_all_caps_particles_are_non_dropping(parser) -> None:
    result = parser.parse("WILLEM DE KOONING")
    assert result.given == "WILLEM"
    assert result.family == "KOONING"
    assert result.non_dropping_particle == "DE"


@pytest.mark.parametrize(
    "text",
    [
        "Elizabeth Alexandra Mary II",
        "Elizabeth Alexandra Mary, II",
        "Mary II, Elizabeth Alexandra",
        "Mary, II, Elizabeth Alexandra",
        "Mary, Elizabeth Alexandra II",
        "Mary, Elizabeth Alexandra, II",
    ],
)
def test_suffix_positions(parser, text) -> None:
    result = parser.parse(text)
    assert result.given == "Elizabeth Alexandra"
    assert result.family == "Mary"
    assert result.suffix == "II"


@pytest.mark.parametrize("text", ["Gates, Bill III", "Bill Gates III", "Bill Gates, III"])
def test_suffix_round_trip_across_orderings(parser, text) -> None:
    result = parser.parse(text)
    assert result == ParsedName("Gates", given="Bill", suffix="III")


@pytest.mark.parametrize(
    "text",
    [
        "given1 given2 de van Di La family1 family2 Jr. III PhD.",
        "given1 given2 de Di van La family1 family2 Jr. III PhD.",
        "given1 given2 de van Di La family1 family2, Jr. III PhD.",
        "given1 given2 de van Di La family1 family2 Jr., III PhD.",
        "given1 given2 de van Di La family1 family2, Jr. III, PhD.",
        "family1 family2 Jr. III PhD., given1 given2 de van Di La",
        "family1 family2, Jr. III PhD., given1 given2 de van Di La",
        "family1 family2, Jr., III PhD., given1, given2, de van, Di La",
        "family1 family2 Jr., given1 given2 de van Di La III PhD.",
        "Di La family1 family2, given1 given2 de van, Jr. III PhD.",
        "de van Di La family1 family2, given1 given2, Jr. III PhD.",
        "Di La de van family1 family2, given1, given2 Jr. III PhD.",
    ],
)
def test_many_parts_in_many_orders(parser, text) -> None:
    assert parser.parse(text) == ParsedName(
        "family1 family2",
        given="given1 given2",
        dropping_particle="de van",
        non_dropping_particle="Di La",
        suffix="Jr. III PhD.",
    )


def test_only_suffixes_become_family(parser) -> None:
    result = parser.parse("I II III")
    assert result.family == "I II III"
    assert result.given == ""
    assert result.suffix == ""


def test_single_word(parser) -> None:
    assert parser.parse("Cher") == ParsedName("Cher")


def test_trailing_particle_is_family(parser) -> None:
    # The last token is a particle, so exactly one token is taken as family.
    result = parser.parse("Anna van")
    assert result.family == "van"
    assert result.given == "Anna"


@pytest.mark.parametrize("text", ["x", "!!!", "  ,  ", "Jr.", "de", "a, b, c", "42"])
def test_family_never_empty_for_non_empty_input(parser, text) -> None:
    assert parser.parse(text).family != ""


def test_custom_output_adapter() -> None:
    def as_tuple(family, *, given, dropping_particle, non_dropping_particle, suffix):
        return (given, family)

    assert NameParser(as_tuple).parse("Ada Lovelace") == ("Ada", "Lovelace")


def test_custom_suffix_pattern() -> None:
    parser = NameParser.basic(suffixes=r"^(jr|sr|obe)$")
    result = parser.parse("Tim Berners-Lee OBE")
    assert result.suffix == "OBE"
    assert result.family == "Berners-Lee"


def test_compiled_pattern_keeps_its_flags() -> None:
    # Case-sensitive particle pattern: only lowercase "van" is a particle.
    parser = NameParser.basic(particles=re.compile(r"^van$"))
    assert parser.parse("Ludwig van Beethoven").dropping_particle == "van"
    assert parser.parse("Dick Van Dyke").non_dropping_particle == ""
    assert parser.parse("Dick Van Dyke").given == "Dick Van"


def test_matcher_object_as_pattern() -> None:
    class ParticleSet:
        def __init__(self, words):
            self.words = {w.lower() for w in words}

        def matches(self, token: str) -> bool:
            return token.lower() in self.words

    parser = NameParser.basic(particles=ParticleSet(["bin"]))
    result = parser.parse("Zayed bin Sultan")
    assert result.dropping_particle == "bin"
    assert result.family == "Sultan"


def test_invalid_pattern_fails_at_construction() -> None:
    with pytest.raises(PatternCompileError):
        NameParser.basic(suffixes="(unclosed")
