"""
Numerology Calculator — Pythagorean system.

Every number comes in two forms:
  - calculate_<number>(...) → CalculationResult(number, steps)
  - <number>(...)           → int

Numbers:
  - Life Path     month, day and year reduced separately, summed, reduced again
  - Destiny       every letter of the full name
  - Soul Urge     vowels only (A E I O U, never Y)
  - Personality   consonants only (Y included)
  - Birthday      day of month
  - Personal Year month + day + reference year, reduced to a single digit
  - Personal Day  Life Path + the calendar month, day and year of a date

Master numbers (11, 22, 33) survive every reduction except Personal Year.
"""
from datetime import date
from typing import List

from loguru import logger

from numerology.errors import InvalidInputError
from numerology.letters import (
    CONSONANT_VALUES,
    PYTHAGOREAN_MAP,
    VOWEL_VALUES,
    clean_name,
    consonants_of,
    vowels_of,
)
from numerology.models import (
    CalculationResult,
    CalculationStep,
    DateLike,
    as_birth_date,
)
from numerology.reduction import reduce_with_steps


# ── Date numbers ──────────────────────────────────────────────────────────────

def calculate_life_path(birth_date: DateLike) -> CalculationResult:
    """
    Life Path from a birth date.

    Example — 03/15/1990:
      month 3 → 3, day 15 → 6, year 1990 → 19 → 10 → 1
      3 + 6 + 1 = 10 → 1
    """
    bd = as_birth_date(birth_date)
    steps: List[CalculationStep] = []

    month, month_steps = reduce_with_steps(bd.month, "Month")
    day, day_steps = reduce_with_steps(bd.day, "Day")
    year, year_steps = reduce_with_steps(bd.year, "Year")
    steps += month_steps + day_steps + year_steps

    total = month + day + year
    steps.append(CalculationStep(
        label="Sum",
        result_value=total,
        explanation=f"{month} + {day} + {year} = {total}",
    ))
    number, final_steps = reduce_with_steps(total, "Life Path")
    steps += final_steps

    logger.debug(f"Life Path {bd} → {number}")
    return CalculationResult(number=number, steps=tuple(steps))


def calculate_birthday(birth_date: DateLike) -> CalculationResult:
    """Birthday number: the day of month, 11 and 22 kept as masters."""
    bd = as_birth_date(birth_date)
    number, steps = reduce_with_steps(bd.day, "Birthday")
    return CalculationResult(number=number, steps=tuple(steps))


def calculate_personal_year(birth_date: DateLike, reference_year: int) -> CalculationResult:
    """
    Personal Year for reference_year.

    The birth month and day are added unreduced and the total is reduced
    straight to 1–9: a master-number sum does not survive here.

    Example — 03/15/1990 in 2025: 3 + 15 + 2025 = 2043 → 9
    """
    bd = as_birth_date(birth_date)
    total = bd.month + bd.day + reference_year
    steps = [CalculationStep(
        label="Sum",
        result_value=total,
        explanation=f"{bd.month} + {bd.day} + {reference_year} = {total}",
    )]
    number, reduce_steps = reduce_with_steps(total, "Personal Year", preserve_masters=False)
    steps += reduce_steps
    return CalculationResult(number=number, steps=tuple(steps))


def calculate_personal_day(birth_date: DateLike, on_date: date) -> CalculationResult:
    """Personal Day: Life Path + month + day + year of on_date, masters kept."""
    lp = calculate_life_path(birth_date).number
    total = lp + on_date.month + on_date.day + on_date.year
    steps = [CalculationStep(
        label="Sum",
        result_value=total,
        explanation=f"{lp} + {on_date.month} + {on_date.day} + {on_date.year} = {total}",
    )]
    number, reduce_steps = reduce_with_steps(total, "Personal Day")
    steps += reduce_steps
    return CalculationResult(number=number, steps=tuple(steps))


# ── Name numbers ──────────────────────────────────────────────────────────────

def _letters_result(letters: str, label: str, table=PYTHAGOREAN_MAP) -> CalculationResult:
    values = [table[ch] for ch in letters]
    total = sum(values)
    steps = [CalculationStep(
        label="Letters",
        result_value=total,
        explanation=" + ".join(f"{ch}={v}" for ch, v in zip(letters, values)) + f" = {total}",
    )]
    number, reduce_steps = reduce_with_steps(total, label)
    steps += reduce_steps
    return CalculationResult(number=number, steps=tuple(steps))


def _clean_or_raise(full_name: str) -> str:
    if not isinstance(full_name, str) or not full_name.strip():
        raise InvalidInputError("Full name must not be empty.")
    clean = clean_name(full_name)
    if not clean:
        raise InvalidInputError(f"Full name '{full_name}' contains no letters.")
    return clean


def calculate_destiny(full_name: str) -> CalculationResult:
    """
    Destiny (Expression) number from every letter of the name.

    Example — John Smith:
      J1 O6 H8 N5 S1 M4 I9 T2 H8 = 44 → 8
    """
    return _letters_result(_clean_or_raise(full_name), "Destiny")


def calculate_soul_urge(full_name: str) -> CalculationResult:
    """Soul Urge from the vowels. Alice: A1 I9 E5 = 15 → 6."""
    vowels = vowels_of(_clean_or_raise(full_name))
    if not vowels:
        raise InvalidInputError(f"Name '{full_name}' has no vowels for a Soul Urge number.")
    return _letters_result(vowels, "Soul Urge", VOWEL_VALUES)


def calculate_personality(full_name: str) -> CalculationResult:
    """Personality from the consonants. Alice: L3 C3 = 6."""
    consonants = consonants_of(_clean_or_raise(full_name))
    if not consonants:
        raise InvalidInputError(f"Name '{full_name}' has no consonants for a Personality number.")
    return _letters_result(consonants, "Personality", CONSONANT_VALUES)


# ── Plain accessors ───────────────────────────────────────────────────────────

def life_path(birth_date: DateLike) -> int:
    return calculate_life_path(birth_date).number


def destiny(full_name: str) -> int:
    return calculate_destiny(full_name).number


def soul_urge(full_name: str) -> int:
    return calculate_soul_urge(full_name).number


def personality(full_name: str) -> int:
    return calculate_personality(full_name).number


def birthday(birth_date: DateLike) -> int:
    return calculate_birthday(birth_date).number


def personal_year(birth_date: DateLike, reference_year: int) -> int:
    return calculate_personal_year(birth_date, reference_year).number


def personal_day(birth_date: DateLike, on_date: date) -> int:
    return calculate_personal_day(birth_date, on_date).number
