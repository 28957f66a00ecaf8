"""Integer exercises: parity, divisibility, primes, digits and sequences."""

from __future__ import annotations

import math


def is_even(num: int) -> bool:
    """True when ``num`` is divisible by two."""
    return num % 2 == 0


def largest_of_three(x: float, y: float, z: float) -> float | None:
    """The strictly largest of three numbers, or None when the largest is tied."""
    if x > y and x > z:
        return x
    if x < y and y > z:
        return y
    if x < z and y < z:
        return z
    return None


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def sum_below(num: int) -> int:
    """Sum of the integers from 0 up to, but not including, ``num``."""
    return sum(range(num))


def sum_natural(num: int) -> int:
    """Sum of the natural numbers 1..num."""
    if num < 0:
        raise ValueError("num must not be negative")
    return sum(range(num + 1))


def factorial(num: int) -> int:
    """``num!``; any value below one gives 1."""
    return math.factorial(num) if num > 0 else 1


def fibonacci_terms(count: int) -> list[int]:
    """Terms 3..count of the sequence 0, 1, 1, 2, 3, 5, ..."""
    terms: list[int] = []
    previous, current = 0, 1
    for _ in range(count - 2):
        previous, current = current, previous + current
        terms.append(current)
    return terms


def gcd(n1: int, n2: int) -> int:
    """Greatest common divisor of two positive integers."""
    if n1 < 1 or n2 < 1:
        raise ValueError("both numbers must be positive")
    return math.gcd(n1, n2)


def gcd_recursive(n1: int, n2: int) -> int:
    """Greatest common divisor by repeated remainders; zero is allowed."""
    if n1 < 0 or n2 < 0:
        raise ValueError("numbers must not be negative")
    while n1 and n2:
        if n1 > n2:
            n1 %= n2
        elif n1 < n2:
            n2 %= n1
        else:
            return n1
    return n2 if n1 == 0 else n1


def lcm(n1: int, n2: int) -> int:
    """Least common multiple of two positive integers."""
    if n1 < 1 or n2 < 1:
        raise ValueError("both numbers must be positive")
    return n1 * n2 // math.gcd(n1, n2)


def count_digits(num: int) -> int:
    """Number of decimal digits; zero has none."""
    return len(str(abs(num))) if num else 0


def reverse_number(num: int) -> int:
    """Digits of ``num`` in reverse order, keeping its sign."""
    if num == 0:
        return 0
    sign = -1 if num < 0 else 1
    return sign * int(str(abs(num))[::-1])


def is_palindrome_number(num: int) -> bool:
    """True when ``num`` reads the same reversed."""
    return num == reverse_number(num)


def is_prime(num: int) -> bool:
    """Trial division up to ``num // 2``; numbers below two are not prime."""
    if num < 2:
        return False
    return all(num % divisor for divisor in range(2, num // 2 + 1))


def primes_between(low: int, high: int) -> list[int]:
    """Primes ``p`` with ``low <= p < high``."""
    return [n for n in range(max(low, 2), high) if is_prime(n)]


def _digit_cube_sum(num: int) -> int:
    return sum(int(digit) ** 3 for digit in str(abs(num)))


def is_armstrong(num: int) -> bool:
    """True when the cubes of the digits add up to the number."""
    return _digit_cube_sum(num) == abs(num)


def armstrong_between(low: int, high: int) -> list[int]:
    """Armstrong numbers in ``low..high`` inclusive, ignoring negatives."""
    return [n for n in range(max(low, 0), high + 1) if is_armstrong(n)]


def factors(num: int) -> list[int]:
    """Positive divisors of ``num`` in increasing order."""
    return [i for i in range(1, num + 1) if num % i == 0]


def prime_sum_pairs(num: int) -> list[tuple[int, int]]:
    """Pairs of primes ``(p, q)`` with ``p <= q`` and ``p + q == num``."""
    return [
        (i, num - i)
        for i in range(2, num // 2 + 1)
        if is_prime(i) and is_prime(num - i)
    ]