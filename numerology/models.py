"""
Value objects shared by the calculator, the compatibility engine and the
catalog matchers. Everything here is immutable; regenerate rather than patch.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple, Union

from numerology.errors import InvalidInputError
from numerology.letters import clean_name

_DATE_SEPARATORS = re.compile(r"[/\-]")


@dataclass(frozen=True)
class CalculationStep:
    """One line of the audit trail produced next to every derived number."""

    label: str
    result_value: int
    explanation: str


@dataclass(frozen=True)
class CalculationResult:
    number: int
    steps: Tuple[CalculationStep, ...] = ()


@dataclass(frozen=True)
class BirthDate:
    """
    A calendar birth date. Canonical text form is MM/DD/YYYY.

    Construction validates the day against the month and year
    (02/29 only in leap years) and requires a 4-digit year.
    """

    month: int
    day: int
    year: int

    def __post_init__(self):
        if not 1000 <= self.year <= 9999:
            raise InvalidInputError(f"Year must have 4 digits, got {self.year}")
        try:
            date(self.year, self.month, self.day)
        except ValueError as e:
            raise InvalidInputError(
                f"Invalid date {self.month:02d}/{self.day:02d}/{self.year}: {e}"
            ) from e

    @classmethod
    def parse(cls, text: str) -> BirthDate:
        """
        Parse MM/DD/YYYY (MM-DD-YYYY is accepted too).

        Raises:
            InvalidInputError: wrong separator count, non-numeric component,
                non-4-digit year or an impossible calendar date.
        """
        if not isinstance(text, str):
            raise InvalidInputError(f"Birth date must be a string, got {type(text).__name__}")
        parts = _DATE_SEPARATORS.split(text.strip())
        if len(parts) != 3:
            raise InvalidInputError(f"Invalid date '{text}'. Please use MM/DD/YYYY format.")
        if not all(p.isascii() and p.isdigit() for p in parts):
            raise InvalidInputError(f"Invalid date '{text}': components must be numeric.")
        if len(parts[2]) != 4:
            raise InvalidInputError(f"Invalid date '{text}': year must have 4 digits.")
        month, day, year = (int(p) for p in parts)
        return cls(month=month, day=day, year=year)

    @classmethod
    def from_date(cls, d: date) -> BirthDate:
        return cls(month=d.month, day=d.day, year=d.year)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.month:02d}/{self.day:02d}/{self.year:04d}"


DateLike = Union[str, date, BirthDate]


def as_birth_date(value: DateLike) -> BirthDate:
    """Coerce a MM/DD/YYYY string, a datetime.date or a BirthDate."""
    if isinstance(value, BirthDate):
        return value
    if isinstance(value, date):
        return BirthDate.from_date(value)
    return BirthDate.parse(value)


@dataclass(frozen=True)
class NumerologyInput:
    """A person's name and birth date, validated once at construction."""

    full_name: str
    birth_date: BirthDate

    def __post_init__(self):
        if not isinstance(self.full_name, str) or not self.full_name.strip():
            raise InvalidInputError("Full name must not be empty.")
        if not clean_name(self.full_name):
            raise InvalidInputError(f"Full name '{self.full_name}' contains no letters.")

    @classmethod
    def create(cls, full_name: str, birth_date: DateLike) -> NumerologyInput:
        return cls(full_name=full_name, birth_date=as_birth_date(birth_date))


@dataclass(frozen=True)
class CoreNumbers:
    """
    The numbers the compatibility engine reads.

    personality is optional: catalog archetypes only define the three
    primary numbers.
    """

    life_path: int
    destiny: int
    soul_urge: int
    personality: Optional[int] = field(default=None)

    @property
    def core(self) -> CoreNumbers:
        return self
