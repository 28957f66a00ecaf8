"""Character and string exercises."""

from __future__ import annotations

import string
from dataclasses import dataclass

_VOWELS = frozenset("aeiouAEIOU")
_LETTERS = frozenset(string.ascii_letters)


def _single(char: str) -> str:
    if len(char) != 1:
        raise ValueError("expected a single character")
    return char


@dataclass(frozen=True)
class CharacterCounts:
    """How many vowels, consonants, digits and spaces a line holds."""

    vowels: int = 0
    consonants: int = 0
    digits: int = 0
    spaces: int = 0


def ascii_value(char: str) -> int:
    """Character code of a single character."""
    return ord(_single(char))


def is_vowel(char: str) -> bool:
    """True for a, e, i, o, u in either case."""
    return _single(char) in _VOWELS


def is_alphabet(char: str) -> bool:
    """True for an ASCII letter."""
    return _single(char) in _LETTERS


def uppercase_alphabet() -> str:
    """The letters A to Z."""
    return string.ascii_uppercase


def reverse_sentence(line: str) -> str:
    """The characters before the first newline, in reverse order."""
    return line.split("\n", 1)[0][::-1]


def char_frequency(text: str, char: str) -> int:
    """How many times ``char`` occurs in ``text``."""
    return text.count(_single(char))


def count_character_classes(line: str) -> CharacterCounts:
    """Count vowels, consonants, digits and spaces, ignoring letter case."""
    vowels = consonants = digits = spaces = 0
    for char in line:
        if char in _VOWELS:
            vowels += 1
        elif char in _LETTERS:
            consonants += 1
        elif char in string.digits:
            digits += 1
        elif char == " ":
            spaces += 1
    return CharacterCounts(vowels, consonants, digits, spaces)


def keep_alphabets(text: str) -> str:
    """``text`` with everything but ASCII letters removed."""
    return "".join(char for char in text if char in _LETTERS)


def string_length(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def concatenate(first: str, second: str) -> str:
    """``second`` appended to ``first``."""
    return first + second