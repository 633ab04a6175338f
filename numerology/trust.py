"""
Trust Assessment — how much two people can rely on each other.

Each person gets a TrustProfile from fixed per-number ratings:

  trustworthiness = mean(rating[LP], rating[Destiny], rating[Soul Urge])
  reliability     = mean(reliability[LP], reliability[Personality])
  loyalty         = mean(loyalty[Soul Urge], loyalty[Destiny])
  overall         = mean of the three

Numbers missing from a table (or a missing Personality) rate DEFAULT_TRUST_RATING.

A pair gets four TrustIndicators (Communication, Reliability, Emotional
Stability, Loyalty), warnings, strengths and, via assess_trust, a trust
compatibility score with recommendations.
"""
import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional, Tuple, Union

from config import (
    COMPLEMENTARY_BONUS_CAP,
    DEFAULT_TRUST_RATING,
    FOCUS_AREA_THRESHOLD,
    HIGH_LEVEL_THRESHOLD,
    LOW_OVERALL_TRUST,
    LOW_RELIABILITY,
    MEDIUM_LEVEL_THRESHOLD,
    STRENGTH_THRESHOLD,
    TRUST_ASYMMETRY_LIMIT,
)
from numerology.models import CoreNumbers


class RelationshipType(str, Enum):
    ROMANTIC = "romantic"
    FRIENDSHIP = "friendship"
    FAMILY = "family"
    BUSINESS = "business"
    POTENTIAL = "potential"


# ── Per-number ratings ────────────────────────────────────────────────────────

TRUST_RATINGS = MappingProxyType({
    1: 85, 2: 95, 3: 75, 4: 90, 5: 70, 6: 95, 7: 80, 8: 85, 9: 90, 11: 85, 22: 90, 33: 95,
})

RELIABILITY_RATINGS = MappingProxyType({
    1: 80, 2: 95, 3: 70, 4: 100, 5: 65, 6: 90, 7: 75, 8: 85, 9: 85, 11: 80, 22: 95, 33: 90,
})

LOYALTY_RATINGS = MappingProxyType({
    1: 75, 2: 95, 3: 80, 4: 90, 5: 70, 6: 100, 7: 85, 8: 80, 9: 90, 11: 90, 22: 85, 33: 95,
})

EMOTIONAL_STABILITY_RATINGS = MappingProxyType({
    1: 80, 2: 95, 3: 75, 4: 90, 5: 70, 6: 95, 7: 85, 8: 85, 9: 90, 11: 80, 22: 90, 33: 95,
})

# ── Pair matrices, keyed (low, high) ──────────────────────────────────────────

TRUST_PAIR_MATRIX = MappingProxyType({
    (1, 1): 85, (1, 2): 90, (1, 3): 85, (1, 4): 80, (1, 5): 85, (1, 6): 75, (1, 7): 80, (1, 8): 90, (1, 9): 85,
    (2, 2): 95, (2, 3): 80, (2, 4): 90, (2, 5): 75, (2, 6): 95, (2, 7): 85, (2, 8): 85, (2, 9): 90,
    (3, 3): 85, (3, 4): 70, (3, 5): 90, (3, 6): 85, (3, 7): 75, (3, 8): 80, (3, 9): 85,
    (4, 4): 90, (4, 5): 65, (4, 6): 85, (4, 7): 80, (4, 8): 95, (4, 9): 80,
    (5, 5): 80, (5, 6): 75, (5, 7): 85, (5, 8): 80, (5, 9): 85,
    (6, 6): 95, (6, 7): 80, (6, 8): 85, (6, 9): 90,
    (7, 7): 85, (7, 8): 80, (7, 9): 85,
    (8, 8): 90, (8, 9): 85,
    (9, 9): 90,
})

COMMUNICATION_MATRIX = MappingProxyType({
    (1, 2): 85, (1, 3): 90, (1, 5): 80, (2, 6): 95, (2, 9): 90,
    (3, 5): 95, (3, 7): 85, (4, 8): 90, (6, 9): 95, (7, 11): 90,
})

# ── Indicator descriptions: (High, Medium, Low) ───────────────────────────────

_DESCRIPTIONS = {
    "Communication": (
        "Excellent communication potential with natural understanding",
        "Good communication with some effort required",
        "Communication challenges that require patience and understanding",
    ),
    "Reliability": (
        "Both individuals demonstrate high reliability and consistency",
        "Generally reliable with room for improvement",
        "Reliability concerns that should be addressed",
    ),
    "Emotional Stability": (
        "Strong emotional foundation for trust",
        "Moderate emotional stability with occasional challenges",
        "Emotional volatility may impact trust development",
    ),
    "Loyalty": (
        "Strong foundation of mutual loyalty and commitment",
        "Generally loyal with some conditions or limitations",
        "Loyalty concerns that require attention and discussion",
    ),
}

_CONTEXT_RECOMMENDATIONS = {
    RelationshipType.ROMANTIC: (
        "Focus on emotional intimacy and regular communication about feelings and expectations",
    ),
    RelationshipType.FRIENDSHIP: (
        "Build trust through shared experiences and consistent support during challenges",
        "Respect each other's boundaries while maintaining open communication",
    ),
    RelationshipType.FAMILY: (
        "Family bonds require understanding each other's different perspectives and life stages",
        "Focus on unconditional support while respecting individual choices",
    ),
    RelationshipType.BUSINESS: (
        "Establish clear communication protocols and define roles and responsibilities",
        "Regular check-ins and transparent decision-making will strengthen your partnership",
    ),
    RelationshipType.POTENTIAL: (
        "Take time to observe consistency in actions and words before deepening the connection",
        "Pay attention to how they handle stress and interact with others",
    ),
}

# Added only when the trust compatibility score is below MEDIUM_LEVEL_THRESHOLD.
# Family has no low-score warning.
_CONTEXT_WARNINGS = {
    RelationshipType.ROMANTIC: "Consider couples counseling or relationship coaching to address compatibility challenges",
    RelationshipType.FRIENDSHIP: "Be mindful of potential conflicts and establish healthy boundaries",
    RelationshipType.BUSINESS: "Consider creating detailed agreements and having regular performance reviews",
    RelationshipType.POTENTIAL: "Take extra time to evaluate this relationship before making significant commitments",
}


@dataclass(frozen=True)
class TrustProfile:
    name: str
    life_path: int
    destiny: int
    soul_urge: int
    trustworthiness: int
    reliability: int
    loyalty: int
    overall: int


@dataclass(frozen=True)
class TrustIndicator:
    category: str
    score: int
    level: str
    description: str


@dataclass(frozen=True)
class TrustAssessment:
    person1: TrustProfile
    person2: TrustProfile
    compatibility_score: int
    indicators: Tuple[TrustIndicator, ...]
    recommendations: Tuple[str, ...]
    warnings: Tuple[str, ...]
    strengths: Tuple[str, ...]


def round_half_up(x: float) -> int:
    """2.5 → 3, unlike the built-in round()."""
    return int(math.floor(x + 0.5))


def _rating(table, number: Optional[int]) -> int:
    return table.get(number, DEFAULT_TRUST_RATING)


def _pair_key(x: int, y: int) -> Tuple[int, int]:
    return (min(x, y), max(x, y))


def level_for(score: int) -> str:
    if score >= HIGH_LEVEL_THRESHOLD:
        return "High"
    if score >= MEDIUM_LEVEL_THRESHOLD:
        return "Medium"
    return "Low"


def trust_profile(person: Union[CoreNumbers, object]) -> TrustProfile:
    """TrustProfile for anything exposing .core (a NumerologyProfile, an Archetype, CoreNumbers)."""
    n = person.core
    trustworthiness = round_half_up(
        (_rating(TRUST_RATINGS, n.life_path)
         + _rating(TRUST_RATINGS, n.destiny)
         + _rating(TRUST_RATINGS, n.soul_urge)) / 3
    )
    reliability = round_half_up(
        (_rating(RELIABILITY_RATINGS, n.life_path) + _rating(RELIABILITY_RATINGS, n.personality)) / 2
    )
    loyalty = round_half_up(
        (_rating(LOYALTY_RATINGS, n.soul_urge) + _rating(LOYALTY_RATINGS, n.destiny)) / 2
    )
    return TrustProfile(
        name=getattr(person, "full_name", ""),
        life_path=n.life_path,
        destiny=n.destiny,
        soul_urge=n.soul_urge,
        trustworthiness=trustworthiness,
        reliability=reliability,
        loyalty=loyalty,
        overall=round_half_up((trustworthiness + reliability + loyalty) / 3),
    )


def communication_score(lp1: int, lp2: int) -> int:
    return COMMUNICATION_MATRIX.get(_pair_key(lp1, lp2), DEFAULT_TRUST_RATING)


def emotional_stability_score(su1: int, su2: int) -> int:
    return round_half_up(
        (_rating(EMOTIONAL_STABILITY_RATINGS, su1) + _rating(EMOTIONAL_STABILITY_RATINGS, su2)) / 2
    )


def _indicator(category: str, score: int) -> TrustIndicator:
    level = level_for(score)
    high, medium, low = _DESCRIPTIONS[category]
    description = {"High": high, "Medium": medium, "Low": low}[level]
    return TrustIndicator(category=category, score=score, level=level, description=description)


def trust_indicators(p1: TrustProfile, p2: TrustProfile) -> Tuple[TrustIndicator, ...]:
    return (
        _indicator("Communication", communication_score(p1.life_path, p2.life_path)),
        _indicator("Reliability", round_half_up((p1.reliability + p2.reliability) / 2)),
        _indicator("Emotional Stability", emotional_stability_score(p1.soul_urge, p2.soul_urge)),
        _indicator("Loyalty", round_half_up((p1.loyalty + p2.loyalty) / 2)),
    )


def trust_warnings(p1: TrustProfile, p2: TrustProfile) -> Tuple[str, ...]:
    warnings = []
    if p1.overall < LOW_OVERALL_TRUST or p2.overall < LOW_OVERALL_TRUST:
        warnings.append("Low overall trust scores indicate potential challenges")
    if abs(p1.overall - p2.overall) > TRUST_ASYMMETRY_LIMIT:
        warnings.append("Significant difference in trust levels may cause imbalance")
    if p1.reliability < LOW_RELIABILITY or p2.reliability < LOW_RELIABILITY:
        warnings.append("Reliability concerns may affect the relationship foundation")
    return tuple(warnings)


def trust_strengths(p1: TrustProfile, p2: TrustProfile) -> Tuple[str, ...]:
    strengths = []
    if p1.loyalty >= STRENGTH_THRESHOLD and p2.loyalty >= STRENGTH_THRESHOLD:
        strengths.append("Both individuals show strong loyalty potential")
    if p1.reliability >= STRENGTH_THRESHOLD and p2.reliability >= STRENGTH_THRESHOLD:
        strengths.append("High reliability scores indicate dependable partnership")
    if p1.trustworthiness >= STRENGTH_THRESHOLD and p2.trustworthiness >= STRENGTH_THRESHOLD:
        strengths.append("Both individuals demonstrate high trustworthiness")
    return tuple(strengths)


def complementary_bonus(p1: TrustProfile, p2: TrustProfile) -> int:
    """Reliable + loyal pairings and mutual trustworthiness, capped at COMPLEMENTARY_BONUS_CAP."""
    bonus = 0
    if p1.reliability >= STRENGTH_THRESHOLD and p2.loyalty >= STRENGTH_THRESHOLD:
        bonus += 10
    if p2.reliability >= STRENGTH_THRESHOLD and p1.loyalty >= STRENGTH_THRESHOLD:
        bonus += 10
    if p1.trustworthiness >= STRENGTH_THRESHOLD and p2.trustworthiness >= STRENGTH_THRESHOLD:
        bonus += 15
    return min(COMPLEMENTARY_BONUS_CAP, bonus)


def trust_compatibility_score(p1: TrustProfile, p2: TrustProfile) -> int:
    """
    mean(Life Path trust pair score, 100 − |overall₁ − overall₂|, complementary bonus),
    capped at 100.
    """
    pair = TRUST_PAIR_MATRIX.get(_pair_key(p1.life_path, p2.life_path), DEFAULT_TRUST_RATING)
    balance = 100 - abs(p1.overall - p2.overall)
    return min(100, round_half_up((pair + balance + complementary_bonus(p1, p2)) / 3))


def _recommendations(p1: TrustProfile, p2: TrustProfile, score: int) -> list:
    if score >= HIGH_LEVEL_THRESHOLD:
        recs = [
            "Your numerology indicates strong trust potential, focus on open communication",
            "Build on your natural compatibility by establishing clear expectations",
        ]
    elif score >= MEDIUM_LEVEL_THRESHOLD:
        recs = [
            "Work on understanding each other's communication styles",
            "Take time to build trust gradually through consistent actions",
        ]
    else:
        recs = [
            "Proceed with caution and take time to really get to know each other",
            "Focus on small commitments first before making larger ones",
        ]
    if p1.reliability < FOCUS_AREA_THRESHOLD or p2.reliability < FOCUS_AREA_THRESHOLD:
        recs.append("Work on keeping promises and being consistent in your actions")
    if p1.loyalty < FOCUS_AREA_THRESHOLD or p2.loyalty < FOCUS_AREA_THRESHOLD:
        recs.append("Discuss your values and what loyalty means to each of you")
    return recs


def assess_trust(a, b, relationship_type: Optional[RelationshipType] = None) -> TrustAssessment:
    """
    Full trust assessment between a and b (anything exposing .core).

    relationship_type adds contextual recommendations, and contextual warnings
    when the score is below MEDIUM_LEVEL_THRESHOLD.
    """
    p1, p2 = trust_profile(a), trust_profile(b)
    score = trust_compatibility_score(p1, p2)
    recommendations = _recommendations(p1, p2, score)
    warnings = list(trust_warnings(p1, p2))

    if relationship_type is not None:
        rel = RelationshipType(relationship_type)
        recommendations += _CONTEXT_RECOMMENDATIONS[rel]
        if rel == RelationshipType.ROMANTIC and score > HIGH_LEVEL_THRESHOLD:
            recommendations.append("Your high compatibility suggests potential for deep romantic connection")
        if score < MEDIUM_LEVEL_THRESHOLD and rel in _CONTEXT_WARNINGS:
            warnings.append(_CONTEXT_WARNINGS[rel])

    return TrustAssessment(
        person1=p1,
        person2=p2,
        compatibility_score=score,
        indicators=trust_indicators(p1, p2),
        recommendations=tuple(recommendations),
        warnings=tuple(warnings),
        strengths=trust_strengths(p1, p2),
    )
