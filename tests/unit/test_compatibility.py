"""
Tests for the compatibility engine.

Checked invariants:
1. Scores are integers in [0, 100]
2. score(a, b) == score(b, a) in both modes
3. Identical inputs score at least as high as any other pairing
4. Matrix mode floors incompatible Life Paths to 30
"""

import itertools

import pytest

from numerology.compatibility import (
    ALL_NUMBERS,
    ScoringMode,
    compatibility,
    compatible_life_paths,
    is_compatible_pair,
    life_path_pair_score,
    matrix_score,
    weighted_score,
)
from numerology.models import CoreNumbers

SAMPLE = [
    CoreNumbers(lp, d, su, p)
    for lp, d, su, p in [
        (1, 1, 1, 1), (5, 5, 5, 5), (9, 9, 9, 9), (11, 2, 7, 4),
        (22, 8, 6, 3), (33, 33, 33, 9), (3, 6, 9, 1), (7, 11, 22, 5),
    ]
]


# =============================================================================
# Weighted mode
# =============================================================================


class TestWeightedScore:
    """Weighted-difference score on root digits."""

    def test_identical_is_100(self):
        for core in SAMPLE:
            assert weighted_score(core, core) == 100

    def test_four_apart(self):
        """Every axis 4 apart: 50 + 10 = 60."""
        assert weighted_score(CoreNumbers(1, 1, 1), CoreNumbers(5, 5, 5)) == 60

    def test_eight_apart(self):
        """Every axis 8 apart: 50 − 30 = 20."""
        assert weighted_score(CoreNumbers(1, 1, 1), CoreNumbers(9, 9, 9)) == 20

    def test_master_compared_by_root(self):
        assert weighted_score(CoreNumbers(11, 11, 11), CoreNumbers(2, 2, 2)) == 100

    def test_match_and_master_bonuses(self):
        """52 base + Life Path match 10 + master pair 5."""
        result = compatibility(CoreNumbers(11, 1, 1), CoreNumbers(11, 9, 9))
        assert result.score == 67
        labels = [b.label for b in result.bonuses]
        assert labels == ["Life Path match", "Master pair (life path)"]


# =============================================================================
# Matrix mode
# =============================================================================


class TestMatrixScore:
    """Pair-matrix score with Destiny / Soul Urge adjustments."""

    def test_incompatible_floor(self):
        result = compatibility(CoreNumbers(1, 1, 1), CoreNumbers(2, 2, 2), ScoringMode.MATRIX)
        assert result.score == 30
        assert result.bonuses == ()

    def test_far_destiny_and_soul_urge(self):
        """(1, 5) = 95, Destiny −2, Soul Urge −1."""
        assert matrix_score(CoreNumbers(1, 1, 1), CoreNumbers(5, 9, 9)) == 92

    def test_near_destiny_far_soul_urge(self):
        """(3, 6) = 95, Destiny +3, Soul Urge −1."""
        assert matrix_score(CoreNumbers(3, 3, 3), CoreNumbers(6, 4, 8)) == 97

    def test_clamped_to_100(self):
        assert matrix_score(CoreNumbers(1, 1, 1), CoreNumbers(5, 2, 2)) == 100

    def test_identical_is_100(self):
        for core in SAMPLE:
            assert matrix_score(core, core) == 100

    def test_pair_score_uses_roots(self):
        assert life_path_pair_score(11, 4) == life_path_pair_score(2, 4) == 95
        assert life_path_pair_score(5, 1) == life_path_pair_score(1, 5)

    def test_mode_accepts_string(self):
        assert compatibility(SAMPLE[0], SAMPLE[1], "matrix").mode == ScoringMode.MATRIX


# =============================================================================
# Shared invariants
# =============================================================================


class TestInvariants:
    """Range, symmetry and reflexive maximality in both modes."""

    @pytest.mark.parametrize("mode", list(ScoringMode))
    def test_range_and_symmetry(self, mode):
        for a, b in itertools.product(SAMPLE, repeat=2):
            ab = compatibility(a, b, mode).score
            assert 0 <= ab <= 100
            assert ab == compatibility(b, a, mode).score

    @pytest.mark.parametrize("mode", list(ScoringMode))
    def test_self_is_maximal(self, mode):
        for a, b in itertools.product(SAMPLE, repeat=2):
            assert compatibility(a, a, mode).score >= compatibility(a, b, mode).score

    def test_trust_indicators_attached(self):
        result = compatibility(SAMPLE[0], SAMPLE[3])
        assert [i.category for i in result.indicators] == [
            "Communication", "Reliability", "Emotional Stability", "Loyalty",
        ]


class TestCompatibleRelation:
    """Symmetric compatible Life Path relation."""

    def test_symmetric(self):
        for x, y in itertools.product(ALL_NUMBERS, repeat=2):
            assert is_compatible_pair(x, y) == is_compatible_pair(y, x)

    def test_compatible_set_for_one(self):
        assert compatible_life_paths(1) == {1, 3, 5, 7, 9}

    def test_compatible_set_includes_reverse_entries(self):
        assert compatible_life_paths(2) == {2, 4, 6, 8, 11}
