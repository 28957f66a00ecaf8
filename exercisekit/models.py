"""Small record and inheritance models: customers, students, shapes, animals, accounts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Customer:
    """A customer with contact details and an order."""

    first_name: str
    last_name: str
    order_id: int = 0
    contact_number: str = ""
    address: str = ""

    def full_name(self) -> str:
        """First and last name separated by a space."""
        return f"{self.first_name} {self.last_name}"


@dataclass
class Student:
    """A student record."""

    name: str
    age: int = 0
    roll_no: int = 0
    semester: int = 0


@dataclass
class Shape:
    """Two integer dimensions shared by simple shapes."""

    a: int
    b: int


class Rectangle(Shape):
    """A rectangle with sides ``a`` and ``b``."""

    def area(self) -> int:
        return self.a * self.b


class Triangle(Shape):
    """A triangle with base ``a`` and height ``b``."""

    def area(self) -> int:
        """Area truncated toward zero to a whole number."""
        return int(0.5 * self.a * self.b)


class Animal:
    def eat(self) -> str:
        return "Eating..."


class Dog(Animal):
    def bark(self) -> str:
        return "Barking..."


class BabyDog(Dog):
    def weep(self) -> str:
        return "Weeping..."


@dataclass
class Account:
    """An account holder with a salary."""

    holder: str
    salary: float = 60000.0

    def name(self) -> str:
        return f"My Name Is {self.holder}"


@dataclass
class Programmer(Account):
    """An account holder who also earns a bonus."""

    bonus: float = 5000.0


@dataclass
class Pair:
    """Two values combined from separate bases."""

    a: int
    b: int

    def total(self) -> int:
        return self.a + self.b

    def describe(self) -> str:
        return (
            f"The value of a is : {self.a}\n"
            f"The value of b is : {self.b}\n"
            f"Addition of a and b is : {self.total()}"
        )


@dataclass
class Triple:
    """Three values multiplied together."""

    a: int
    b: int
    c: int

    def product(self) -> int:
        return self.a * self.b * self.c