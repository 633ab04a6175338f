"""
Profile Builder — name + birth date → complete NumerologyProfile.

Runs every calculator, attaches the meaning of each number, keeps the
calculation traces and asks the enrichment boundary for the character
analysis. Also derives the supplementary predictions and planetary symbols.
"""
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from loguru import logger

from enrichment.base import EnrichmentContext, EnrichmentKind, TextEnricher
from enrichment.service import enrich_text
from enrichment.templates import character_analysis_text
from numerology import calculator
from numerology.meanings import (
    BirthdayInfo,
    DestinyInfo,
    LifePathInfo,
    PersonalityInfo,
    SoulUrgeInfo,
    birthday_info,
    destiny_info,
    life_path_info,
    personality_info,
    soul_urge_info,
)
from numerology.models import CalculationStep, CoreNumbers, DateLike, NumerologyInput


@dataclass(frozen=True)
class NumerologyProfile:
    full_name: str
    birth_date: str
    life_path_number: int
    destiny_number: int
    soul_urge_number: int
    personality_number: int
    birthday_number: int
    personal_year_number: int
    reference_year: int
    life_path_info: LifePathInfo
    destiny_info: DestinyInfo
    soul_urge_info: SoulUrgeInfo
    personality_info: PersonalityInfo
    birthday_info: BirthdayInfo
    character_analysis: str
    calculations: Dict[str, Tuple[CalculationStep, ...]]

    @property
    def core(self) -> CoreNumbers:
        return CoreNumbers(
            life_path=self.life_path_number,
            destiny=self.destiny_number,
            soul_urge=self.soul_urge_number,
            personality=self.personality_number,
        )


@dataclass(frozen=True)
class PredictionCategory:
    category: str
    icon: str
    timeframe: str
    predictions: Tuple[str, ...]
    strength: str


@dataclass(frozen=True)
class NumerologySymbol:
    number: int
    symbol: str
    element: str
    color: str
    planet: str
    meaning: str


def character_analysis(life_path: int, destiny: int, soul_urge: int) -> str:
    """Static character analysis built from the three primary titles."""
    return character_analysis_text(life_path, destiny, soul_urge)


def build_profile(
    full_name: str,
    birth_date: DateLike,
    reference_year: Optional[int] = None,
    enricher: Optional[TextEnricher] = None,
) -> NumerologyProfile:
    """
    Build a full profile.

    Raises InvalidInputError for a malformed date or an unusable name.
    reference_year (for the Personal Year) defaults to the current year.
    """
    person = NumerologyInput.create(full_name, birth_date)
    year = reference_year if reference_year is not None else date.today().year

    lp = calculator.calculate_life_path(person.birth_date)
    dn = calculator.calculate_destiny(person.full_name)
    su = calculator.calculate_soul_urge(person.full_name)
    pn = calculator.calculate_personality(person.full_name)
    bd = calculator.calculate_birthday(person.birth_date)
    py = calculator.calculate_personal_year(person.birth_date, year)

    analysis = enrich_text(
        EnrichmentContext(EnrichmentKind.CHARACTER_ANALYSIS, {
            "full_name": person.full_name,
            "life_path": lp.number,
            "destiny": dn.number,
            "soul_urge": su.number,
            "personality": pn.number,
        }),
        enricher,
    )

    logger.debug(
        f"Profile {person.full_name} ({person.birth_date}): LP={lp.number} D={dn.number} "
        f"SU={su.number} P={pn.number} B={bd.number} PY={py.number}"
    )

    return NumerologyProfile(
        full_name=person.full_name,
        birth_date=str(person.birth_date),
        life_path_number=lp.number,
        destiny_number=dn.number,
        soul_urge_number=su.number,
        personality_number=pn.number,
        birthday_number=bd.number,
        personal_year_number=py.number,
        reference_year=year,
        life_path_info=life_path_info(lp.number),
        destiny_info=destiny_info(dn.number),
        soul_urge_info=soul_urge_info(su.number),
        personality_info=personality_info(pn.number),
        birthday_info=birthday_info(bd.number),
        character_analysis=analysis,
        calculations={
            "life_path": lp.steps,
            "destiny": dn.steps,
            "soul_urge": su.steps,
            "personality": pn.steps,
            "birthday": bd.steps,
            "personal_year": py.steps,
        },
    )


# ── Predictions ───────────────────────────────────────────────────────────────

def predictions(profile: NumerologyProfile) -> Tuple[PredictionCategory, ...]:
    """Four forecast cards: love, career, health, spiritual growth."""
    lp = profile.life_path_info
    dn = profile.destiny_info
    su = profile.soul_urge_info
    return (
        PredictionCategory(
            category="Love & Relationships",
            icon="heart",
            timeframe="Next 3 months",
            predictions=(
                f"Your Life Path {profile.life_path_number} brings {lp.title.lower()} energy to your relationships.",
                "Deep emotional connections are highlighted in your cosmic blueprint.",
                "Focus on authentic communication with your partner or future love.",
                "Your heart chakra is opening to receive and give unconditional love.",
            ),
            strength="high",
        ),
        PredictionCategory(
            category="Career & Finance",
            icon="briefcase",
            timeframe="Next 6 months",
            predictions=(
                f"Your Destiny Number {profile.destiny_number} ({dn.title}) reveals your true calling.",
                "Professional opportunities aligned with your soul purpose are emerging.",
                "Financial abundance flows when you follow your authentic path.",
                "Trust your intuition in career decisions this season.",
            ),
            strength="medium",
        ),
        PredictionCategory(
            category="Health & Wellness",
            icon="fitness",
            timeframe="Ongoing",
            predictions=(
                "Your body is your temple, honor it with mindful practices.",
                "Balance physical activity with spiritual wellness for optimal energy.",
                "Listen to your body's wisdom and trust its healing capabilities.",
                "Meditation and breathwork will enhance your vitality.",
            ),
            strength="medium",
        ),
        PredictionCategory(
            category="Spiritual Growth",
            icon="leaf",
            timeframe="This year",
            predictions=(
                f"Your Soul Urge {profile.soul_urge_number} ({su.title}) guides your spiritual evolution.",
                "A period of profound spiritual awakening is beginning.",
                "Trust your inner wisdom and embrace your psychic abilities.",
                "Ancient knowledge and mystical practices will call to you.",
            ),
            strength="high",
        ),
    )


# ── Planetary symbols ─────────────────────────────────────────────────────────

_SYMBOLS = MappingProxyType({
    1: ("☉", "Fire", "Red", "Sun", "Leadership, independence, new beginnings, pioneer spirit"),
    2: ("☽", "Water", "Orange", "Moon", "Cooperation, diplomacy, partnership, sensitivity"),
    3: ("♃", "Fire", "Yellow", "Jupiter", "Creativity, communication, artistic expression, optimism"),
    4: ("♅", "Earth", "Green", "Uranus", "Stability, hard work, organization, practicality"),
    5: ("☿", "Air", "Blue", "Mercury", "Freedom, adventure, curiosity, dynamic energy"),
    6: ("♀", "Earth", "Indigo", "Venus", "Nurturing, responsibility, family, unconditional love"),
    7: ("♆", "Water", "Violet", "Neptune", "Spirituality, introspection, mystery, analytical mind"),
    8: ("♄", "Earth", "Pink", "Saturn", "Material success, authority, business acumen, achievement"),
    9: ("♂", "Fire", "Gold", "Mars", "Humanitarianism, wisdom, completion, universal love"),
})

_UNIVERSAL_SYMBOL = ("✨", "Universal", "White", "Cosmic", "Unique spiritual path")


def numerology_symbol(number: int) -> NumerologySymbol:
    """Planet, element and color of a number. Masters get the Universal symbol."""
    symbol, element, color, planet, meaning = _SYMBOLS.get(number, _UNIVERSAL_SYMBOL)
    return NumerologySymbol(number, symbol, element, color, planet, meaning)


def personal_symbols(profile: NumerologyProfile) -> Mapping[str, NumerologySymbol]:
    return MappingProxyType({
        "life_path": numerology_symbol(profile.life_path_number),
        "destiny": numerology_symbol(profile.destiny_number),
        "personality": numerology_symbol(profile.personality_number),
    })
