"""
Tests for digit reduction.

Checked invariants:
1. Results are 1–9 or a master number (11, 22, 33)
2. Master numbers stop reduction; reduce_to_digit ignores them
3. Step trail records every summation
"""

import pytest

from numerology.reduction import (
    is_master_number,
    reduce_number,
    reduce_to_digit,
    reduce_with_steps,
    root_digit,
)


# =============================================================================
# reduce_number
# =============================================================================


class TestReduceNumber:
    """Reduction with master-number preservation."""

    def test_single_digits_unchanged(self):
        for n in range(1, 10):
            assert reduce_number(n) == n

    def test_multi_step_reduction(self):
        """1990 → 19 → 10 → 1."""
        assert reduce_number(1990) == 1

    @pytest.mark.parametrize("n,expected", [(11, 11), (22, 22), (33, 33), (29, 11), (38, 11), (2009, 11)])
    def test_master_numbers_preserved(self, n, expected):
        assert reduce_number(n) == expected

    def test_non_positive_returned_unchanged(self):
        assert reduce_number(0) == 0
        assert reduce_number(-5) == -5

    def test_range_invariant(self):
        for n in range(1, 5000):
            result = reduce_number(n)
            assert 1 <= result <= 9 or result in (11, 22, 33)


class TestReduceToDigit:
    """Reduction without master numbers."""

    @pytest.mark.parametrize("n,expected", [(11, 2), (22, 4), (33, 6), (29, 2), (2043, 9)])
    def test_masters_collapse(self, n, expected):
        assert reduce_to_digit(n) == expected

    def test_root_digit_matches(self):
        assert root_digit(11) == 2
        assert root_digit(7) == 7

    def test_is_master_number(self):
        assert is_master_number(11)
        assert is_master_number(33)
        assert not is_master_number(44)
        assert not is_master_number(9)


# =============================================================================
# reduce_with_steps
# =============================================================================


class TestReduceWithSteps:
    """Step trail produced alongside the number."""

    def test_year_trail(self):
        value, steps = reduce_with_steps(1990, "Year")
        assert value == 1
        assert [s.result_value for s in steps] == [19, 10, 1]
        assert steps[0].explanation == "1990 → 1 + 9 + 9 + 0 = 19"
        assert all(s.label == "Year" for s in steps)

    def test_single_digit_has_no_steps(self):
        value, steps = reduce_with_steps(7, "Day")
        assert value == 7
        assert steps == []

    def test_master_number_noted(self):
        value, steps = reduce_with_steps(29, "Day")
        assert value == 11
        assert steps[0].explanation == "29 → 2 + 9 = 11"
        assert "master number" in steps[-1].explanation

    def test_without_master_preservation(self):
        value, steps = reduce_with_steps(29, "Personal Year", preserve_masters=False)
        assert value == 2
        assert [s.result_value for s in steps] == [11, 2]
