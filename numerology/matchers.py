"""
Candidate Catalog Matchers — rank fixed catalogs against one profile.

  rank_archetypes       matrix-mode score against every archetype, with
                        sample birth dates and famous-couple examples
  rank_celebrities      celebrity-mode score against the compatible part of
                        the roster, with a match reason per celebrity
  incompatible_numbers  numbers that tend to clash with the profile

All rankings are deterministic: same profile, same reference year, same
VARIETY_SEED → same list in the same order.
"""
import hashlib
from datetime import date
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Iterator, List, Optional, Set, Tuple

from loguru import logger

import config
from enrichment.base import EnrichmentContext, EnrichmentKind, TextEnricher
from enrichment.service import enrich_text
from enrichment.templates import LIFE_PATH_TRAITS
from numerology import calculator
from numerology.catalog import (
    ARCHETYPES,
    CELEBRITIES,
    DEFAULT_IDEAL_TRAITS,
    DEFAULT_MATCH_CHALLENGES,
    DEFAULT_MATCH_STRENGTHS,
    DEFAULT_RELATIONSHIP_STYLE,
    DESTINY_CONFLICTS,
    FAMOUS_COUPLES,
    IDEAL_TRAITS,
    INCOMPATIBLE_LIFE_PATHS,
    MATCH_CHALLENGES,
    MATCH_STRENGTHS,
    RELATIONSHIP_STYLES,
    SOUL_URGE_CONFLICTS,
    Archetype,
    Celebrity,
    FamousCouple,
)
from numerology.compatibility import compatible_life_paths, matrix_score
from numerology.models import BirthDate, CoreNumbers
from numerology.profile import NumerologyProfile, build_profile
from numerology.reduction import root_digit


@dataclass(frozen=True)
class ArchetypeMatch:
    archetype: Archetype
    score: int
    sample_birth_dates: Tuple[str, ...]
    description: str
    strengths: Tuple[str, ...]
    challenges: Tuple[str, ...]
    ideal_traits: Tuple[str, ...]
    relationship_style: str
    famous_couples: Tuple[FamousCouple, ...]


@dataclass(frozen=True)
class CelebrityMatch:
    celebrity: Celebrity
    profile: NumerologyProfile
    score: int
    match_text: str


@dataclass(frozen=True)
class IncompatibleNumbers:
    life_path_numbers: Tuple[int, ...]
    destiny_numbers: Tuple[int, ...]
    soul_urge_numbers: Tuple[int, ...]
    reasons: Tuple[str, ...]


# Celebrity-mode pair bonus, keyed (low, high) Life Path.
CELEBRITY_PAIR_BONUS = MappingProxyType({
    (1, 3): 35, (1, 5): 40, (1, 7): 30, (1, 9): 35,
    (2, 4): 35, (2, 6): 40, (2, 8): 30,
    (3, 5): 35, (3, 6): 30, (3, 9): 40,
    (4, 6): 35, (4, 8): 40,
    (5, 7): 35, (5, 9): 30,
    (6, 8): 25, (6, 9): 35,
    (7, 9): 35,
})


# ── Archetypes ────────────────────────────────────────────────────────────────

@lru_cache(maxsize=None)
def _life_path_of(month: int, day: int, year: int) -> int:
    return calculator.life_path(BirthDate(month, day, year))


def _candidate_dates(years) -> Iterator[Tuple[int, int, int]]:
    for year in years:
        for month in range(1, 13):
            for day in config.SAMPLE_PREFERRED_DAYS:
                yield month, day, year


def sample_birth_dates(
    life_path: int,
    reference_year: int,
    limit: Optional[int] = None,
) -> Tuple[str, ...]:
    """
    Up to `limit` MM/DD/YYYY dates whose Life Path is `life_path`.

    One date per age band first (youngest band first, latest year first),
    then the rest of the 20–45 range fills the remaining slots. Best effort:
    rare Life Paths may return fewer dates.
    """
    limit = config.SAMPLE_DATES_PER_MATCH if limit is None else limit
    found: List[Tuple[int, int, int]] = []

    for min_age, max_age in config.SAMPLE_AGE_BANDS:
        if len(found) >= limit:
            break
        years = range(reference_year - min_age, reference_year - max_age - 1, -1)
        for candidate in _candidate_dates(years):
            if candidate not in found and _life_path_of(*candidate) == life_path:
                found.append(candidate)
                break

    youngest = config.SAMPLE_AGE_BANDS[0][0]
    oldest = config.SAMPLE_AGE_BANDS[-1][1]
    if len(found) < limit:
        for candidate in _candidate_dates(range(reference_year - youngest, reference_year - oldest - 1, -1)):
            if len(found) >= limit:
                break
            if candidate not in found and _life_path_of(*candidate) == life_path:
                found.append(candidate)

    return tuple(str(BirthDate(m, d, y)) for m, d, y in found)


def _archetype_description(life_path: int, score: int) -> str:
    trait = LIFE_PATH_TRAITS.get(root_digit(life_path), "unique")
    if score >= 90:
        return (f"Perfect match! A partner who is {trait} would complement your energy beautifully. "
                f"This combination creates harmony and mutual growth.")
    if score >= 80:
        return (f"Excellent compatibility! Someone {trait} would understand your nature and support "
                f"your goals. This partnership has great potential.")
    return (f"Good compatibility! A {trait} partner could bring balance to your relationship "
            f"with understanding and patience.")


def _famous_couples_for(life_path: int, used: Set[Tuple[str, str]]) -> Tuple[FamousCouple, ...]:
    """Couples where either partner has this Life Path; each couple used once per ranking."""
    picked = []
    for couple in FAMOUS_COUPLES:
        if len(picked) >= config.FAMOUS_COUPLES_PER_MATCH:
            break
        key = (couple.person1, couple.person2)
        if key in used:
            continue
        if life_path in (_life_path_of(*_split(couple.birth_date1)), _life_path_of(*_split(couple.birth_date2))):
            picked.append(couple)
            used.add(key)
    return tuple(picked)


def _split(text: str) -> Tuple[int, int, int]:
    bd = BirthDate.parse(text)
    return bd.month, bd.day, bd.year


def rank_archetypes(
    profile,
    top_k: Optional[int] = None,
    reference_year: Optional[int] = None,
) -> Tuple[ArchetypeMatch, ...]:
    """
    Archetypes sorted by matrix-mode score, best first.
    Ties keep catalog order. reference_year defaults to the profile's.
    """
    top_k = config.ARCHETYPE_TOP_K if top_k is None else top_k
    if reference_year is None:
        reference_year = getattr(profile, "reference_year", date.today().year)

    scored = sorted(
        ((matrix_score(profile, a), a) for a in ARCHETYPES),
        key=lambda pair: -pair[0],
    )[:max(top_k, 0)]

    used: Set[Tuple[str, str]] = set()
    matches = []
    for score, archetype in scored:
        root = root_digit(archetype.life_path)
        matches.append(ArchetypeMatch(
            archetype=archetype,
            score=score,
            sample_birth_dates=sample_birth_dates(archetype.life_path, reference_year),
            description=_archetype_description(archetype.life_path, score),
            strengths=MATCH_STRENGTHS.get(root, DEFAULT_MATCH_STRENGTHS),
            challenges=MATCH_CHALLENGES.get(root, DEFAULT_MATCH_CHALLENGES),
            ideal_traits=IDEAL_TRAITS.get(root, DEFAULT_IDEAL_TRAITS),
            relationship_style=RELATIONSHIP_STYLES.get(root, DEFAULT_RELATIONSHIP_STYLE),
            famous_couples=_famous_couples_for(archetype.life_path, used),
        ))

    if matches:
        logger.info(
            f"Ranked {len(ARCHETYPES)} archetypes for LP {profile.core.life_path}: "
            f"top {matches[0].archetype.title} ({matches[0].score})"
        )
    return tuple(matches)


# ── Celebrities ───────────────────────────────────────────────────────────────

@lru_cache(maxsize=None)
def celebrity_profile(celebrity: Celebrity, reference_year: int) -> NumerologyProfile:
    """Computed profile of a roster entry (static character analysis)."""
    return build_profile(celebrity.name, celebrity.birth_date, reference_year=reference_year)


def variety_bonus(user: CoreNumbers, celebrity_name: str) -> int:
    """Deterministic VARIETY_BONUS_MIN..VARIETY_BONUS_MAX from a SHA-256 of the inputs."""
    key = f"{config.VARIETY_SEED}|{user.life_path}|{user.destiny}|{user.soul_urge}|{celebrity_name}"
    digest = int(hashlib.sha256(key.encode("utf-8")).hexdigest(), 16)
    span = config.VARIETY_BONUS_MAX - config.VARIETY_BONUS_MIN + 1
    return config.VARIETY_BONUS_MIN + digest % span


def celebrity_score(user: CoreNumbers, celebrity_life_path: int, celebrity_name: str) -> int:
    """
    Celebrity-mode score.

      incompatible Life Paths → INCOMPATIBLE_SCORE
      otherwise 50 + (40 if same Life Path else pair bonus, default 25) + variety,
      clamped to [CELEBRITY_MIN_SCORE, 100]
    """
    if celebrity_life_path not in compatible_life_paths(user.life_path):
        return config.INCOMPATIBLE_SCORE
    if celebrity_life_path == user.life_path:
        pair = config.CELEBRITY_SAME_PATH_BONUS
    else:
        key = (min(user.life_path, celebrity_life_path), max(user.life_path, celebrity_life_path))
        pair = CELEBRITY_PAIR_BONUS.get(key, config.CELEBRITY_DEFAULT_PAIR_BONUS)
    score = config.CELEBRITY_BASE_SCORE + pair + variety_bonus(user, celebrity_name)
    return max(config.CELEBRITY_MIN_SCORE, min(100, score))


def rank_celebrities(
    profile,
    top_k: Optional[int] = None,
    enricher: Optional[TextEnricher] = None,
) -> Tuple[CelebrityMatch, ...]:
    """
    Compatible celebrities sorted by celebrity-mode score, best first.
    Ties are broken by name. The match text comes from the enricher, with
    the static template as fallback.
    """
    top_k = config.CELEBRITY_TOP_K if top_k is None else top_k
    user = profile.core
    compatible = compatible_life_paths(user.life_path)
    year = getattr(profile, "reference_year", date.today().year)

    scored = []
    for celebrity in CELEBRITIES:
        celeb = celebrity_profile(celebrity, year)
        if celeb.life_path_number not in compatible:
            continue
        scored.append((celebrity_score(user, celeb.life_path_number, celebrity.name), celebrity, celeb))
    scored.sort(key=lambda row: (-row[0], row[1].name))

    matches = []
    for score, celebrity, celeb in scored[:max(top_k, 0)]:
        text = enrich_text(
            EnrichmentContext(EnrichmentKind.CELEBRITY_MATCH_REASON, {
                "user_name": getattr(profile, "full_name", ""),
                "user_life_path": user.life_path,
                "celebrity_name": celebrity.name,
                "celebrity_life_path": celeb.life_path_number,
                "profession": celebrity.profession,
                "score": score,
            }),
            enricher,
        )
        matches.append(CelebrityMatch(celebrity=celebrity, profile=celeb, score=score, match_text=text))

    logger.info(f"{len(scored)}/{len(CELEBRITIES)} celebrities compatible with LP {user.life_path}")
    return tuple(matches)


# ── Incompatible numbers ──────────────────────────────────────────────────────

def _conflicts(table, number: int) -> Tuple[int, ...]:
    if number in table:
        return table[number]
    return table.get(root_digit(number), ())


def incompatible_numbers(profile) -> IncompatibleNumbers:
    """Life Path, Destiny and Soul Urge numbers that tend to clash with profile."""
    n = profile.core
    life_paths = INCOMPATIBLE_LIFE_PATHS.get(n.life_path, ())
    destinies = _conflicts(DESTINY_CONFLICTS, n.destiny)
    soul_urges = _conflicts(SOUL_URGE_CONFLICTS, n.soul_urge)

    reasons = []
    if life_paths:
        reasons.append(
            f"Life Path {', '.join(map(str, life_paths))}: These numbers may create friction "
            f"with your natural Life Path {n.life_path} energy."
        )
    if destinies:
        reasons.append(
            f"Destiny {', '.join(map(str, destinies))}: Could conflict with your "
            f"Destiny {n.destiny} purpose and goals."
        )
    if soul_urges:
        reasons.append(
            f"Soul Urge {', '.join(map(str, soul_urges))}: May not align with your "
            f"Soul Urge {n.soul_urge} inner desires."
        )
    reasons.append("While these combinations aren't impossible, they require extra understanding and compromise.")
    reasons.append("Remember: Love can overcome any numerical challenges with effort and communication!")

    return IncompatibleNumbers(
        life_path_numbers=life_paths,
        destiny_numbers=destinies,
        soul_urge_numbers=soul_urges,
        reasons=tuple(reasons),
    )
