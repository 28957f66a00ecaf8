"""Basic arithmetic exercises: division, swapping, roots, powers and a calculator."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Sign(Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    ZERO = "zero"


@dataclass(frozen=True)
class QuadraticRoots:
    """The two roots of a quadratic; complex when the discriminant is negative."""

    root1: float | complex
    root2: float | complex

    @property
    def is_real(self) -> bool:
        return not isinstance(self.root1, complex)

    def __str__(self) -> str:
        if isinstance(self.root1, complex):
            real, imag = self.root1.real, self.root1.imag
            return f"root1 = {real:.2f}+{imag:.2f}i and root2 = {real:.2f}-{imag:.2f}i"
        if self.root1 == self.root2:
            return f"root1 = root2 = {self.root1:.2f};"
        return f"root1 = {self.root1:.2f} and root2 = {self.root2:.2f}"


def quotient_remainder(number: int, divisor: int) -> tuple[int, int]:
    """Quotient truncated toward zero and the matching remainder."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(number) // abs(divisor)
    if (number < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, number - quotient * divisor


def swap(a, b):
    """Return the two values in exchanged order."""
    return b, a


def rotate_three(x, y, z):
    """Shift three values cyclically: x takes y, y takes z, z takes x."""
    return y, z, x


def quadratic_roots(a: float, b: float, c: float) -> QuadraticRoots:
    """Roots of ``a*x**2 + b*x + c``."""
    if a == 0:
        raise ValueError("coefficient a must not be zero")
    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        root = math.sqrt(discriminant)
        return QuadraticRoots((-b + root) / (2 * a), (-b - root) / (2 * a))
    if discriminant == 0:
        root = -b / (2 * a)
        return QuadraticRoots(root, root)
    real = -b / (2 * a)
    imag = math.sqrt(-discriminant) / (2 * a)
    return QuadraticRoots(complex(real, imag), complex(real, -imag))


def sign(num: float) -> Sign:
    """Whether ``num`` is positive, negative or zero."""
    if num > 0:
        return Sign.POSITIVE
    if num == 0:
        return Sign.ZERO
    return Sign.NEGATIVE


def multiplication_table(n: int) -> list[tuple[int, int]]:
    """Pairs ``(i, n * i)`` for i from 1 to 10."""
    return [(i, n * i) for i in range(1, 11)]


def power(base: int, exponent: int) -> int:
    """``base`` raised to a non-negative integer ``exponent``."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    return base**exponent


def calculate(first: float, operator: str, second: float) -> float:
    """Apply one of ``+ - * /``; division by zero follows floating-point rules."""
    if operator == "+":
        return first + second
    if operator == "-":
        return first - second
    if operator == "*":
        return first * second
    if operator == "/":
        if second == 0:
            if first == 0 or math.isnan(first):
                return math.nan
            return math.copysign(math.inf, first) * math.copysign(1.0, second)
        return first / second
    raise ValueError("This operator is not valid")