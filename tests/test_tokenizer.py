# tests/test_tokenizer.py

from best_effort_parser.tokenizer import (
    COMPACT,
    WORD,
    scan_date_tokens,
    split_comma_groups,
    split_space_parts,
)


def test_compact_token_carries_three_numbers():
    tokens = list(scan_date_tokens("10/20/2000"))
    assert len(tokens) == 1
    assert tokens[0].kind == COMPACT
    assert tokens[0].text == "10/20/2000"
    assert tokens[0].start == 0
    assert tokens[0].numbers == (10, 20, 2000)


def test_compact_tokens_split_on_extra_separators():
    tokens = list(scan_date_tokens("1/3/1803-2/4/2020"))
    assert [t.kind for t in tokens] == [COMPACT, COMPACT]
    assert [t.numbers for t in tokens] == [(1, 3, 1803), (2, 4, 2020)]


def test_written_date_becomes_words():
    tokens = list(scan_date_tokens("March 2nd, 2000"))
    assert [t.kind for t in tokens] == [WORD, WORD, WORD]
    assert [t.text for t in tokens] == ["March", "2nd", "2000"]
    assert [t.start for t in tokens] == [0, 6, 11]


def test_two_number_range_is_not_compact():
    tokens = list(scan_date_tokens("2-3 January 2010"))
    assert [t.text for t in tokens] == ["2", "3", "January", "2010"]
    assert all(t.kind == WORD for t in tokens)


def test_underscore_separates_words():
    assert [t.text for t in scan_date_tokens("spring_2019")] == ["spring", "2019"]


def test_apostrophe_flag():
    tokens = list(scan_date_tokens("Summer of '99 and ’05"))
    flags = {t.text: t.after_apostrophe for t in tokens}
    assert flags == {"Summer": False, "of": False, "99": True, "and": False, "05": True}


def test_empty_input_yields_nothing():
    assert list(scan_date_tokens(None)) == []
    assert list(scan_date_tokens("")) == []
    assert list(scan_date_tokens("!!! ???")) == []


def test_comma_groups_swallow_surrounding_whitespace():
    assert split_comma_groups("Gates,  Bill , III") == ["Gates", "Bill", "III"]
    assert split_comma_groups("Gates,,Bill") == ["Gates", "Bill"]
    assert split_comma_groups("Bill Gates") == ["Bill Gates"]


def test_space_parts_split_on_whitespace_runs():
    assert split_space_parts("Jean  de\tLa Fontaine") == ["Jean", "de", "La", "Fontaine"]
