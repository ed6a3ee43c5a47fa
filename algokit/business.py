"""Hotel pricing, staff salaries and a length error type."""

from __future__ import annotations


class HotelRoom:
    """A hotel room priced by its bedrooms and bathrooms."""

    def __init__(self, bedrooms: int, bathrooms: int) -> None:
        self.bedrooms = bedrooms
        self.bathrooms = bathrooms

    def price(self) -> int:
        """Return 50 per bedroom plus 100 per bathroom."""
        return 50 * self.bedrooms + 100 * self.bathrooms


class HotelApartment(HotelRoom):
    """A hotel apartment, costing 100 more than a room of the same layout."""

    def price(self) -> int:
        return super().price() + 100


class BadLengthError(Exception):
    """Raised for a value of unacceptable length; carries the length."""

    def __init__(self, length: int) -> None:
        super().__init__(length)
        self.length = length

    def __str__(self) -> str:
        return str(self.length)


def _check(basic: int, experience: int) -> None:
    if basic < 0:
        raise ValueError(f"basic salary must be non-negative, got {basic}")
    if experience < 0:
        raise ValueError(f"experience must be non-negative, got {experience}")


def faculty_salary(basic: int, experience: int) -> int:
    """Return basic pay plus 0.5% of it for every full four years of experience."""
    _check(basic, experience)
    increment = basic // 200
    return basic + increment * (experience // 4)


def dean_salary(basic: int, experience: int) -> int:
    """Return basic pay plus 2% of it for every full two years of experience."""
    _check(basic, experience)
    increment = basic // 50
    return basic + increment * (experience // 2)