"""Exact fractions and simple complex numbers with arithmetic operators."""

from __future__ import annotations

from functools import total_ordering
from math import gcd
from typing import Optional, Union


@total_ordering
class Fraction:
    """A fraction of two integers.

    Results of arithmetic are always normalized: lowest terms with a
    positive denominator. Comparisons are made on normalized values.
    """

    __slots__ = ("numerator", "denominator")

    def __init__(self, numerator: int, denominator: int = 1) -> None:
        if denominator == 0:
            raise ZeroDivisionError("fraction denominator must not be zero")
        self.numerator = numerator
        self.denominator = denominator

    def normalized(self) -> Fraction:
        """Return this fraction in lowest terms with a positive denominator."""
        divisor = gcd(self.numerator, self.denominator)
        numerator = self.numerator // divisor
        denominator = self.denominator // divisor
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        return Fraction(numerator, denominator)

    @staticmethod
    def _coerce(value: object) -> Optional[Fraction]:
        if isinstance(value, Fraction):
            return value
        if isinstance(value, int):
            return Fraction(value)
        return None

    def __add__(self, other: object) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Fraction(
            self.numerator * o.denominator + o.numerator * self.denominator,
            self.denominator * o.denominator,
        ).normalized()

    def __sub__(self, other: object) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Fraction(
            self.numerator * o.denominator - o.numerator * self.denominator,
            self.denominator * o.denominator,
        ).normalized()

    def __mul__(self, other: object) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Fraction(
            self.numerator * o.numerator, self.denominator * o.denominator
        ).normalized()

    def __truediv__(self, other: object) -> Fraction:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return Fraction(
            self.numerator * o.denominator, self.denominator * o.numerator
        ).normalized()

    def _key(self) -> tuple[int, int]:
        n = self.normalized()
        return n.numerator, n.denominator

    def __eq__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._key() == o._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        a, b = self.normalized(), o.normalized()
        return a.numerator * b.denominator < b.numerator * a.denominator

    def __gt__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        a, b = self.normalized(), o.normalized()
        return a.numerator * b.denominator > b.numerator * a.denominator

    def __str__(self) -> str:
        return f"({self.numerator})/({self.denominator})"

    def __repr__(self) -> str:
        return f"Fraction({self.numerator}, {self.denominator})"


Real = Union[int, float]


class ComplexNumber:
    """A complex number with real and imaginary parts."""

    __slots__ = ("real", "imag")

    def __init__(self, real: Real = 0.0, imag: Real = 0.0) -> None:
        self.real = real
        self.imag = imag

    def conjugate(self) -> ComplexNumber:
        """Return the complex conjugate."""
        return ComplexNumber(self.real, -self.imag)

    def __add__(self, other: object) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return ComplexNumber(self.real + other.real, self.imag + other.imag)

    def __sub__(self, other: object) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return ComplexNumber(self.real - other.real, self.imag - other.imag)

    def __mul__(self, other: object) -> ComplexNumber:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return ComplexNumber(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + self.imag * other.real,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.real == other.real and self.imag == other.imag

    def __hash__(self) -> int:
        return hash((self.real, self.imag))

    def __getitem__(self, index: int) -> Real:
        """Return the real part for index 0 and the imaginary part for 1."""
        if index == 0:
            return self.real
        if index == 1:
            return self.imag
        raise IndexError(f"complex number index must be 0 or 1, got {index}")

    def __str__(self) -> str:
        return f"{self.real:g} + {self.imag:g}i"

    def __repr__(self) -> str:
        return f"ComplexNumber({self.real!r}, {self.imag!r})"