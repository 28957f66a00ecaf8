import string

import pytest

from exercisekit.text import (
    CharacterCounts,
    ascii_value,
    char_frequency,
    concatenate,
    count_character_classes,
    is_alphabet,
    is_vowel,
    keep_alphabets,
    reverse_sentence,
    string_length,
    uppercase_alphabet,
)


def test_ascii_value_of_capital_a():
    assert ascii_value("A") == 65


def test_ascii_value_round_trip():
    for char in "zQ7 ~":
        assert chr(ascii_value(char)) == char


def test_ascii_value_rejects_longer_string():
    with pytest.raises(ValueError):
        ascii_value("ab")


@pytest.mark.parametrize("char", list("aeiouAEIOU"))
def test_vowels(char):
    assert is_vowel(char) is True


@pytest.mark.parametrize("char", list("bzBZy"))
def test_consonants(char):
    assert is_vowel(char) is False


def test_is_alphabet_letters_and_others():
    assert all(is_alphabet(c) for c in string.ascii_letters)
    assert not any(is_alphabet(c) for c in "09 !_@")


def test_is_alphabet_rejects_empty():
    with pytest.raises(ValueError):
        is_alphabet("")


def test_uppercase_alphabet():
    assert uppercase_alphabet() == string.ascii_uppercase


def test_reverse_sentence_twice_is_original():
    line = "Programming is fun"
    assert reverse_sentence(reverse_sentence(line)) == line


def test_reverse_sentence_stops_at_newline():
    assert reverse_sentence("ab\ncd") == "ba"


def test_reverse_sentence_reverses():
    assert reverse_sentence("margana") == "anagram"


def test_char_frequency_sums_to_length():
    text = "programming is awesome"
    assert sum(char_frequency(text, c) for c in set(text)) == len(text)


def test_char_frequency_absent_char():
    assert char_frequency("programming", "z") == 0


def test_char_frequency_rejects_multiple_chars():
    with pytest.raises(ValueError):
        char_frequency("text", "te")


def test_count_only_vowels():
    line = "aeiouAEIOU"
    assert count_character_classes(line) == CharacterCounts(vowels=len(line))


def test_count_only_consonants():
    line = "bcdXYZ"
    assert count_character_classes(line) == CharacterCounts(consonants=len(line))


def test_count_digits_and_spaces():
    assert count_character_classes("12 34") == CharacterCounts(digits=4, spaces=1)


def test_count_totals_match_length_for_plain_text():
    line = "Hello World 2024 again"
    counts = count_character_classes(line)
    total = counts.vowels + counts.consonants + counts.digits + counts.spaces
    assert total == len(line)


def test_count_ignores_punctuation_and_newline():
    assert count_character_classes("!?,.\n\t") == CharacterCounts()


def test_keep_alphabets_removes_others():
    assert keep_alphabets("a1b!c d") == "abcd"


def test_keep_alphabets_is_idempotent_and_letters_only():
    result = keep_alphabets("p2'r-o@gram84iz$")
    assert keep_alphabets(result) == result
    assert all(c in string.ascii_letters for c in result)


def test_string_length():
    assert string_length("Programming is fun") == len("Programming is fun")


def test_string_length_empty():
    assert string_length("") == 0


def test_concatenate():
    assert concatenate("programming ", "is awesome") == "programming is awesome"


def test_concatenate_length_adds():
    first, second = "abc", "defgh"
    assert string_length(concatenate(first, second)) == len(first) + len(second)