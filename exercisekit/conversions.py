"""Conversions between decimal, binary and octal digit forms.

Binary and octal values are written as ordinary integers whose decimal
digits are the digits of that base, so binary 101 is the integer 101.
"""

from __future__ import annotations


def _to_digits(num: int, base: int) -> int:
    if num == 0:
        return 0
    sign = -1 if num < 0 else 1
    digits: list[str] = []
    remaining = abs(num)
    while remaining:
        remaining, digit = divmod(remaining, base)
        digits.append(str(digit))
    return sign * int("".join(reversed(digits)))


def _from_digits(num: int, base: int, name: str) -> int:
    sign = -1 if num < 0 else 1
    try:
        value = int(str(abs(num)), base)
    except ValueError:
        raise ValueError(f"{num} is not a {name} number") from None
    return sign * value


def to_binary(num: int) -> int:
    """Decimal ``num`` written with binary digits."""
    return _to_digits(num, 2)


def binary_to_decimal(num: int) -> int:
    """Value of an integer written with binary digits."""
    return _from_digits(num, 2, "binary")


def to_octal(num: int) -> int:
    """Decimal ``num`` written with octal digits."""
    return _to_digits(num, 8)


def binary_to_octal(num: int) -> int:
    """Binary-digit integer rewritten with octal digits."""
    return _to_digits(_from_digits(num, 2, "binary"), 8)


def octal_to_binary(num: int) -> int:
    """Octal-digit integer rewritten with binary digits."""
    return _to_digits(_from_digits(num, 8, "octal"), 2)