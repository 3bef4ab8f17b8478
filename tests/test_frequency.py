from __future__ import annotations

import pytest

from caesarlab import encode, frequency_analysis, guess_shift
from caesarlab.core.scoring import chi_squared_english


def test_counts_and_percentages():
    table = frequency_analysis("AAAB")
    assert table.total == 4
    assert [(e.letter, e.count, e.percentage) for e in table] == [("A", 3, 75.0), ("B", 1, 25.0)]


def test_case_folding_and_skipping_non_letters():
    table = frequency_analysis("aA b! 42 Bé")
    assert table.total == 4
    assert table["a"].count == 2
    assert table["B"].count == 2
    assert "E" not in table
    assert len(table) == 2


def test_ties_are_alphabetical():
    table = frequency_analysis("cbaCBAz")
    assert [e.letter for e in table] == ["A", "B", "C", "Z"]


@pytest.mark.parametrize("text", ["", "123!!!", "ß é 漢"])
def test_no_letters_gives_empty_table(text):
    table = frequency_analysis(text)
    assert table.total == 0
    assert len(table) == 0
    assert table.most_common() == []


def test_zero_count_letters_are_omitted():
    table = frequency_analysis("HELLO")
    assert {e.letter for e in table} == {"H", "E", "L", "O"}
    assert table.most_common(1)[0].letter == "L"
    assert sum(e.percentage for e in table) == pytest.approx(100.0)


def test_missing_letter_lookup_raises():
    with pytest.raises(KeyError):
        frequency_analysis("AB")["Q"]


def test_guess_shift_from_most_common_letter():
    assert guess_shift(encode("EEEE tea", 4)) == 4
    assert guess_shift(encode("eeee", 25)) == 25
    assert guess_shift("AAAA", reference="A") == 0


def test_guess_shift_on_english_sentence():
    text = (
        "This is a longer message to demonstrate frequency analysis. "
        "The Caesar cipher is vulnerable to statistical attacks. "
        "Notice how letter patterns can reveal information."
    )
    assert guess_shift(encode(text, 7)) == 7


def test_guess_shift_without_letters():
    assert guess_shift("123") is None


@pytest.mark.parametrize("ref", ["", "EE", "1", "é"])
def test_guess_shift_rejects_bad_reference(ref):
    with pytest.raises(ValueError):
        guess_shift("abc", reference=ref)


def test_chi_squared_prefers_english():
    english = "Notice how letter patterns can reveal information"
    assert chi_squared_english(english) < chi_squared_english(encode(english, 11))
    assert chi_squared_english("") == float("inf")
