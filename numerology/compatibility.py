"""
Compatibility Engine — 0–100 score between two sets of numbers.

Two scoring modes:

  WEIGHTED (two-person matcher)
    50 + Σ w × clamp(50 − 10 × |Δroot|, ±50) over Life Path (0.40),
    Destiny (0.35) and Soul Urge (0.25), plus exact-match and master-pair
    bonuses. Masters are compared through their root digit (11→2, 22→4, 33→6).

  MATRIX (catalog matchers)
    Life Path pair matrix (unlisted pairs 70) adjusted by Destiny / Soul Urge
    distance, plus the same bonuses. Pairs outside the compatible relation
    are floored to 30.

Both modes are symmetric, deterministic and clamped to [0, 100]. Every
result also carries the trust indicators, warnings and strengths of the pair.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, List, Tuple

from loguru import logger

from config import (
    AXIS_SPAN,
    AXIS_WEIGHTS,
    BASE_SCORE,
    DESTINY_FAR_ADJUST,
    DESTINY_MATCH_BONUS,
    DESTINY_NEAR_ADJUST,
    INCOMPATIBLE_SCORE,
    LIFE_PATH_MATCH_BONUS,
    MASTER_PAIR_BONUS,
    NEAR_DISTANCE,
    NEUTRAL_PAIR_SCORE,
    PENALTY_PER_UNIT,
    SOUL_URGE_FAR_ADJUST,
    SOUL_URGE_MATCH_BONUS,
    SOUL_URGE_NEAR_ADJUST,
)
from numerology.reduction import is_master_number, root_digit
from numerology.trust import (
    TrustIndicator,
    round_half_up,
    trust_indicators,
    trust_profile,
    trust_strengths,
    trust_warnings,
)

ALL_NUMBERS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 11, 22, 33)


class ScoringMode(str, Enum):
    WEIGHTED = "weighted"
    MATRIX = "matrix"


@dataclass(frozen=True)
class ScoreBonus:
    label: str
    points: int


@dataclass(frozen=True)
class CompatibilityResult:
    score: int
    mode: ScoringMode
    bonuses: Tuple[ScoreBonus, ...]
    indicators: Tuple[TrustIndicator, ...]
    warnings: Tuple[str, ...]
    strengths: Tuple[str, ...]


# ── Static tables ─────────────────────────────────────────────────────────────

# Life Path pair scores on root digits, keyed (low, high).
LIFE_PATH_PAIR_MATRIX = MappingProxyType({
    (1, 1): 85, (1, 2): 75, (1, 3): 90, (1, 4): 70, (1, 5): 95, (1, 6): 70, (1, 7): 85, (1, 8): 80, (1, 9): 90,
    (2, 2): 90, (2, 3): 75, (2, 4): 95, (2, 5): 70, (2, 6): 90, (2, 7): 80, (2, 8): 85, (2, 9): 85,
    (3, 3): 80, (3, 4): 65, (3, 5): 85, (3, 6): 95, (3, 7): 75, (3, 8): 70, (3, 9): 90,
    (4, 4): 85, (4, 5): 60, (4, 6): 80, (4, 7): 75, (4, 8): 90, (4, 9): 70,
    (5, 5): 75, (5, 6): 70, (5, 7): 90, (5, 8): 75, (5, 9): 80,
    (6, 6): 85, (6, 7): 75, (6, 8): 80, (6, 9): 95,
    (7, 7): 90, (7, 8): 70, (7, 9): 85,
    (8, 8): 80, (8, 9): 75,
    (9, 9): 85,
})

# Directed "works well with" lists; is_compatible_pair reads them symmetrically.
COMPATIBLE_LIFE_PATHS = MappingProxyType({
    1: (1, 3, 5, 7, 9),
    2: (2, 4, 6, 8),
    3: (1, 3, 5, 6, 9),
    4: (2, 4, 6, 8),
    5: (1, 3, 5, 7, 9),
    6: (2, 3, 4, 6, 8, 9),
    7: (1, 5, 7, 9),
    8: (2, 4, 6, 8),
    9: (1, 3, 5, 6, 7, 9),
    11: (2, 6, 11),
    22: (4, 8, 22),
    33: (6, 9, 33),
})


# ── Pair helpers ──────────────────────────────────────────────────────────────

def life_path_pair_score(x: int, y: int) -> int:
    """Matrix score for two Life Paths (roots compared, unlisted pairs NEUTRAL_PAIR_SCORE)."""
    rx, ry = root_digit(x), root_digit(y)
    return LIFE_PATH_PAIR_MATRIX.get((min(rx, ry), max(rx, ry)), NEUTRAL_PAIR_SCORE)


def is_compatible_pair(x: int, y: int) -> bool:
    return y in COMPATIBLE_LIFE_PATHS.get(x, ()) or x in COMPATIBLE_LIFE_PATHS.get(y, ())


def compatible_life_paths(n: int) -> FrozenSet[int]:
    """Every Life Path that forms a compatible pair with n."""
    return frozenset(m for m in ALL_NUMBERS if is_compatible_pair(n, m))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _match_bonuses(a, b) -> List[ScoreBonus]:
    bonuses = []
    if a.life_path == b.life_path:
        bonuses.append(ScoreBonus("Life Path match", LIFE_PATH_MATCH_BONUS))
    if a.destiny == b.destiny:
        bonuses.append(ScoreBonus("Destiny match", DESTINY_MATCH_BONUS))
    if a.soul_urge == b.soul_urge:
        bonuses.append(ScoreBonus("Soul Urge match", SOUL_URGE_MATCH_BONUS))
    for axis in ("life_path", "destiny", "soul_urge"):
        if is_master_number(getattr(a, axis)) and is_master_number(getattr(b, axis)):
            bonuses.append(ScoreBonus(f"Master pair ({axis.replace('_', ' ')})", MASTER_PAIR_BONUS))
    return bonuses


# ── Scoring modes ─────────────────────────────────────────────────────────────

def _weighted(a, b) -> Tuple[int, List[ScoreBonus]]:
    total = BASE_SCORE
    for axis, weight in AXIS_WEIGHTS.items():
        distance = abs(root_digit(getattr(a, axis)) - root_digit(getattr(b, axis)))
        term = _clamp(AXIS_SPAN - PENALTY_PER_UNIT * distance, -AXIS_SPAN, AXIS_SPAN)
        total += weight * term
    bonuses = _match_bonuses(a, b)
    total += sum(bonus.points for bonus in bonuses)
    return round_half_up(_clamp(total, 0, 100)), bonuses


def _matrix(a, b) -> Tuple[int, List[ScoreBonus]]:
    if not is_compatible_pair(a.life_path, b.life_path):
        return INCOMPATIBLE_SCORE, []

    total = life_path_pair_score(a.life_path, b.life_path)
    bonuses = []

    if abs(root_digit(a.destiny) - root_digit(b.destiny)) <= NEAR_DISTANCE:
        bonuses.append(ScoreBonus("Destiny harmony", DESTINY_NEAR_ADJUST))
    else:
        bonuses.append(ScoreBonus("Destiny distance", DESTINY_FAR_ADJUST))
    if abs(root_digit(a.soul_urge) - root_digit(b.soul_urge)) <= NEAR_DISTANCE:
        bonuses.append(ScoreBonus("Soul Urge harmony", SOUL_URGE_NEAR_ADJUST))
    else:
        bonuses.append(ScoreBonus("Soul Urge distance", SOUL_URGE_FAR_ADJUST))

    bonuses += _match_bonuses(a, b)
    total += sum(bonus.points for bonus in bonuses)
    return round_half_up(_clamp(total, 0, 100)), bonuses


def weighted_score(a, b) -> int:
    """Weighted-difference score of two objects exposing .core."""
    return _weighted(a.core, b.core)[0]


def matrix_score(a, b) -> int:
    """Matrix score of two objects exposing .core."""
    return _matrix(a.core, b.core)[0]


def compatibility(a, b, mode: ScoringMode = ScoringMode.WEIGHTED) -> CompatibilityResult:
    """
    Score a against b.

    a and b are anything exposing .core: NumerologyProfile, Archetype or
    CoreNumbers. A missing Personality rates the default trust score.
    """
    mode = ScoringMode(mode)
    na, nb = a.core, b.core
    score, bonuses = (_weighted if mode == ScoringMode.WEIGHTED else _matrix)(na, nb)

    pa, pb = trust_profile(na), trust_profile(nb)
    logger.debug(
        f"{mode.value} compatibility LP {na.life_path}/{nb.life_path} "
        f"D {na.destiny}/{nb.destiny} SU {na.soul_urge}/{nb.soul_urge} → {score}"
    )
    return CompatibilityResult(
        score=score,
        mode=mode,
        bonuses=tuple(bonuses),
        indicators=trust_indicators(pa, pb),
        warnings=trust_warnings(pa, pb),
        strengths=trust_strengths(pa, pb),
    )
