"""
Digit reduction — the one primitive every numerology number is built on.

Provides:
  - reduce_number     repeated digit summation, stopping on 11 / 22 / 33
  - reduce_to_digit   repeated digit summation down to 1–9, no exceptions
  - reduce_with_steps either of the above plus the human-readable trail
"""
from typing import List, Tuple

from config import MASTER_NUMBERS
from numerology.models import CalculationStep


def is_master_number(n: int) -> bool:
    return n in MASTER_NUMBERS


def _digit_sum(n: int) -> int:
    return sum(int(d) for d in str(n))


def reduce_number(n: int) -> int:
    """
    Reduce to 1–9, stopping early on a master number.

    Example: 29 → 2+9 = 11 (kept), 1990 → 19 → 10 → 1.
    Zero and negative values are returned unchanged; callers only pass sums
    of positive components.
    """
    while n > 9 and n not in MASTER_NUMBERS:
        n = _digit_sum(n)
    return n


def reduce_to_digit(n: int) -> int:
    """Reduce to 1–9 with no master-number exception (29 → 11 → 2)."""
    while n > 9:
        n = _digit_sum(n)
    return n


def reduce_with_steps(
    n: int,
    label: str,
    preserve_masters: bool = True,
) -> Tuple[int, List[CalculationStep]]:
    """
    Reduce n and record one step per digit summation.

    Example — reduce_with_steps(1990, "Year"):
      "1990 → 1 + 9 + 9 + 0 = 19"
      "19 → 1 + 9 = 10"
      "10 → 1 + 0 = 1"
    """
    steps: List[CalculationStep] = []
    while n > 9 and not (preserve_masters and n in MASTER_NUMBERS):
        digits = str(n)
        reduced = _digit_sum(n)
        steps.append(CalculationStep(
            label=label,
            result_value=reduced,
            explanation=f"{n} → {' + '.join(digits)} = {reduced}",
        ))
        n = reduced
    if preserve_masters and n in MASTER_NUMBERS:
        steps.append(CalculationStep(
            label=label,
            result_value=n,
            explanation=f"{n} is a master number, not reduced",
        ))
    return n, steps


def root_digit(n: int) -> int:
    """Single digit a master number is compared through (11→2, 22→4, 33→6)."""
    return reduce_to_digit(n)
