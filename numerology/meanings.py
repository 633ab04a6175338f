"""
Profile Enrichment Store — what each number means.

Five read-only tables, one per number kind, each keyed by 1–9, 11, 22, 33.
Any other key resolves to the kind's default entry ("Unique Path",
"Unique Destiny", ...) and is logged at debug level, never raised.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from loguru import logger


class NumberKind(str, Enum):
    LIFE_PATH = "life_path"
    DESTINY = "destiny"
    SOUL_URGE = "soul_urge"
    PERSONALITY = "personality"
    BIRTHDAY = "birthday"


@dataclass(frozen=True)
class LifePathInfo:
    title: str
    description: str
    strengths: Tuple[str, ...]
    challenges: Tuple[str, ...]
    career_paths: Tuple[str, ...]
    relationships: str
    life_approach: str
    hidden_depth: str
    love_compatibility: Tuple[str, ...]
    lucky_numbers: Tuple[str, ...]
    lucky_colors: Tuple[str, ...]


@dataclass(frozen=True)
class DestinyInfo:
    title: str
    description: str
    purpose: str
    talents: Tuple[str, ...]
    mission: str


@dataclass(frozen=True)
class SoulUrgeInfo:
    title: str
    description: str
    desires: Tuple[str, ...]
    motivation: str
    fulfillment: str


@dataclass(frozen=True)
class PersonalityInfo:
    title: str
    description: str
    traits: Tuple[str, ...]
    impression: str
    attraction: str


@dataclass(frozen=True)
class BirthdayInfo:
    title: str
    description: str
    gifts: Tuple[str, ...]
    special_talents: str


MeaningEntry = Union[LifePathInfo, DestinyInfo, SoulUrgeInfo, PersonalityInfo, BirthdayInfo]


def _freeze(cls, rows: dict) -> Mapping[int, MeaningEntry]:
    """Build a read-only {number: entry} table; list values become tuples."""
    return MappingProxyType({
        number: cls(**{k: tuple(v) if isinstance(v, list) else v for k, v in row.items()})
        for number, row in rows.items()
    })


# ── Life Path ─────────────────────────────────────────────────────────────────

LIFE_PATH_MEANINGS = _freeze(LifePathInfo, {
    1: dict(
        title="The Leader",
        description="Natural born leaders with strong independence and pioneering spirit.",
        strengths=["Leadership", "Independence", "Innovation", "Determination"],
        challenges=["Impatience", "Stubbornness", "Ego conflicts"],
        career_paths=["Entrepreneur", "CEO", "Manager", "Inventor"],
        relationships="You need a partner who respects your independence.",
        life_approach="Direct and action-oriented, you prefer to lead.",
        hidden_depth="Beneath your confidence lies a deep need for recognition.",
        love_compatibility=["2", "8", "9"],
        lucky_numbers=["1", "10", "19", "28"],
        lucky_colors=["Red", "Orange", "Yellow"],
    ),
    2: dict(
        title="The Peacemaker",
        description="Natural diplomats with exceptional ability to work with others.",
        strengths=["Cooperation", "Diplomacy", "Sensitivity", "Teamwork"],
        challenges=["Over-sensitivity", "Indecisiveness", "Dependency"],
        career_paths=["Counselor", "Mediator", "Teacher", "Social Worker"],
        relationships="You thrive in partnerships and seek deep connections.",
        life_approach="Gentle and collaborative, you prefer harmony.",
        hidden_depth="Your sensitivity is both strength and vulnerability.",
        love_compatibility=["1", "6", "8"],
        lucky_numbers=["2", "11", "20", "29"],
        lucky_colors=["Blue", "Green", "Silver"],
    ),
    3: dict(
        title="The Creative Communicator",
        description="Naturally creative and expressive with exceptional communication skills.",
        strengths=["Creativity", "Communication", "Optimism", "Artistic talent"],
        challenges=["Scattered energy", "Superficiality", "Mood swings"],
        career_paths=["Artist", "Writer", "Performer", "Designer"],
        relationships="You need partners who appreciate your creativity.",
        life_approach="Expressive and optimistic, life is your canvas.",
        hidden_depth="Behind cheerfulness, you may struggle with self-doubt.",
        love_compatibility=["1", "5", "7"],
        lucky_numbers=["3", "12", "21", "30"],
        lucky_colors=["Yellow", "Orange", "Pink"],
    ),
    4: dict(
        title="The Builder",
        description="Practical, reliable, and hardworking with exceptional organizational skills.",
        strengths=["Reliability", "Organization", "Hard work", "Practicality"],
        challenges=["Rigidity", "Resistance to change", "Workaholic tendencies"],
        career_paths=["Engineer", "Architect", "Accountant", "Manager"],
        relationships="You seek stable, long-term partnerships.",
        life_approach="Methodical and steady, you build to last.",
        hidden_depth="You fear chaos and find security in routine.",
        love_compatibility=["2", "6", "8"],
        lucky_numbers=["4", "13", "22", "31"],
        lucky_colors=["Green", "Brown", "Gray"],
    ),
    5: dict(
        title="The Freedom Seeker",
        description="Adventurous and versatile with insatiable curiosity about life.",
        strengths=["Adaptability", "Curiosity", "Freedom", "Versatility"],
        challenges=["Restlessness", "Inconsistency", "Commitment issues"],
        career_paths=["Travel Writer", "Sales", "Marketing", "Journalist"],
        relationships="You need partners who share your love of adventure.",
        life_approach="Dynamic and exploratory, life is an adventure.",
        hidden_depth="Your need for freedom stems from fear of being trapped.",
        love_compatibility=["1", "3", "7"],
        lucky_numbers=["5", "14", "23", "32"],
        lucky_colors=["Blue", "Turquoise", "Silver"],
    ),
    6: dict(
        title="The Nurturer",
        description="Naturally caring and responsible with desire to help others.",
        strengths=["Nurturing", "Responsibility", "Compassion", "Healing"],
        challenges=["Over-responsibility", "Martyrdom", "Perfectionism"],
        career_paths=["Healthcare", "Teaching", "Counseling", "Social Work"],
        relationships="You're devoted to family and seek commitment.",
        life_approach="Service-oriented, you find fulfillment helping others.",
        hidden_depth="You may sacrifice your needs for others.",
        love_compatibility=["2", "4", "9"],
        lucky_numbers=["6", "15", "24", "33"],
        lucky_colors=["Pink", "Rose", "Lavender"],
    ),
    7: dict(
        title="The Seeker",
        description="Deeply spiritual and analytical with quest for truth.",
        strengths=["Intuition", "Analysis", "Spirituality", "Research"],
        challenges=["Isolation", "Overthinking", "Skepticism"],
        career_paths=["Researcher", "Scientist", "Philosopher", "Spiritual Teacher"],
        relationships="You need intellectual and spiritual connection.",
        life_approach="Contemplative, you seek deeper meaning.",
        hidden_depth="Your analytical nature masks spiritual longing.",
        love_compatibility=["3", "5", "9"],
        lucky_numbers=["7", "16", "25", "34"],
        lucky_colors=["Purple", "Violet", "Indigo"],
    ),
    8: dict(
        title="The Achiever",
        description="Naturally ambitious and business-minded with ability to manifest success.",
        strengths=["Ambition", "Business acumen", "Leadership", "Material success"],
        challenges=["Materialism", "Workaholism", "Power struggles"],
        career_paths=["Business Executive", "Entrepreneur", "Finance", "Real Estate"],
        relationships="You're attracted to successful, ambitious partners.",
        life_approach="Goal-oriented, you measure success tangibly.",
        hidden_depth="Your drive for success may mask insecurities.",
        love_compatibility=["1", "2", "4"],
        lucky_numbers=["8", "17", "26", "35"],
        lucky_colors=["Black", "Navy", "Maroon"],
    ),
    9: dict(
        title="The Humanitarian",
        description="Naturally compassionate and idealistic with desire to serve humanity.",
        strengths=["Compassion", "Wisdom", "Generosity", "Idealism"],
        challenges=["Impracticality", "Emotional extremes", "Disappointment"],
        career_paths=["Non-profit", "Teaching", "Healing Arts", "Social Justice"],
        relationships="You seek partners who share humanitarian values.",
        life_approach="Idealistic, you want to make the world better.",
        hidden_depth="Universal love conflicts with personal needs.",
        love_compatibility=["1", "6", "7"],
        lucky_numbers=["9", "18", "27", "36"],
        lucky_colors=["Gold", "Crimson", "Bronze"],
    ),
    11: dict(
        title="The Intuitive Illuminator",
        description="Master number with heightened intuition and spiritual awareness.",
        strengths=["Intuition", "Inspiration", "Spiritual awareness", "Vision"],
        challenges=["Nervous energy", "Impracticality", "Emotional intensity"],
        career_paths=["Spiritual Teacher", "Counselor", "Artist", "Healer"],
        relationships="You need spiritually aware partners.",
        life_approach="Intuitive and inspirational, you light the way.",
        hidden_depth="Spiritual gifts can feel overwhelming.",
        love_compatibility=["2", "6", "9"],
        lucky_numbers=["11", "29", "38", "47"],
        lucky_colors=["White", "Silver", "Pearl"],
    ),
    22: dict(
        title="The Master Builder",
        description="Master number with ability to turn dreams into reality.",
        strengths=["Vision", "Practical application", "Leadership", "Building"],
        challenges=["Pressure", "Perfectionism", "Overwhelm"],
        career_paths=["Architect", "Large-scale Entrepreneur", "Political Leader"],
        relationships="You need partners who understand your big dreams.",
        life_approach="Visionary yet practical, you build meaningfully.",
        hidden_depth="Pressure to achieve greatness can be overwhelming.",
        love_compatibility=["4", "6", "8"],
        lucky_numbers=["22", "31", "40", "49"],
        lucky_colors=["Royal Blue", "Gold", "Platinum"],
    ),
    33: dict(
        title="The Master Teacher",
        description="Master number representing highest level of spiritual teaching.",
        strengths=["Healing", "Teaching", "Compassion", "Spiritual wisdom"],
        challenges=["Emotional burden", "Sacrifice", "Overwhelm"],
        career_paths=["Spiritual Teacher", "Healer", "Humanitarian Leader"],
        relationships="You attract people who need healing and guidance.",
        life_approach="Devoted to service, you're a beacon of love.",
        hidden_depth="Your calling to serve can be emotionally demanding.",
        love_compatibility=["6", "9", "11"],
        lucky_numbers=["33", "42", "51", "60"],
        lucky_colors=["Emerald", "Rose Gold", "Crystal"],
    ),
})

# ── Destiny ───────────────────────────────────────────────────────────────────

DESTINY_MEANINGS = _freeze(DestinyInfo, {
    1: dict(title="Destined to Lead", description="Your purpose is to develop leadership.",
            purpose="To lead and inspire.", talents=["Leadership", "Innovation"],
            mission="Break new ground."),
    2: dict(title="Destined to Unite", description="Your purpose is to bring harmony.",
            purpose="To create peace.", talents=["Diplomacy", "Cooperation"],
            mission="Build bridges."),
    3: dict(title="Destined to Inspire", description="Your purpose is to bring joy.",
            purpose="To inspire through creativity.", talents=["Creativity", "Communication"],
            mission="Share your gifts."),
    4: dict(title="Destined to Build", description="Your purpose is to create foundations.",
            purpose="To build lasting systems.", talents=["Organization", "Reliability"],
            mission="Create stability."),
    5: dict(title="Destined to Explore", description="Your purpose is to experience diversity.",
            purpose="To explore and teach freedom.", talents=["Adaptability", "Communication"],
            mission="Show life's possibilities."),
    6: dict(title="Destined to Heal", description="Your purpose is to nurture.",
            purpose="To care and heal.", talents=["Nurturing", "Healing"],
            mission="Create harmony."),
    7: dict(title="Destined to Seek Truth", description="Your purpose is to uncover wisdom.",
            purpose="To seek and share truth.", talents=["Analysis", "Intuition"],
            mission="Share wisdom."),
    8: dict(title="Destined to Achieve", description="Your purpose is to master material world.",
            purpose="To create abundance.", talents=["Business acumen", "Leadership"],
            mission="Create opportunities."),
    9: dict(title="Destined to Serve", description="Your purpose is to serve humanity.",
            purpose="To serve the greater good.", talents=["Compassion", "Wisdom"],
            mission="Serve humanity."),
    11: dict(title="Destined to Illuminate", description="Your purpose is to inspire spiritually.",
             purpose="To inspire awakening.", talents=["Intuition", "Inspiration"],
             mission="Be a spiritual beacon."),
    22: dict(title="Destined to Master Build", description="Your purpose is to manifest visions.",
             purpose="To build lasting significance.", talents=["Vision", "Manifestation"],
             mission="Turn visions to reality."),
    33: dict(title="Destined to Master Teach", description="Your purpose is to be a master teacher.",
             purpose="To teach through love.", talents=["Teaching", "Healing"],
             mission="Example of love."),
})

# ── Soul Urge ─────────────────────────────────────────────────────────────────

SOUL_URGE_MEANINGS = _freeze(SoulUrgeInfo, {
    1: dict(title="Soul Urge for Leadership", description="Your heart desires to lead.",
            desires=["Recognition", "Leadership"], motivation="To be first.",
            fulfillment="Leading others."),
    2: dict(title="Soul Urge for Harmony", description="Your heart desires peace.",
            desires=["Peace", "Love"], motivation="To create harmony.",
            fulfillment="Creating peace."),
    3: dict(title="Soul Urge for Expression", description="Your heart desires creativity.",
            desires=["Expression", "Joy"], motivation="To create beauty.",
            fulfillment="Creative expression."),
    4: dict(title="Soul Urge for Security", description="Your heart desires stability.",
            desires=["Security", "Order"], motivation="To build lasting things.",
            fulfillment="Creating stability."),
    5: dict(title="Soul Urge for Freedom", description="Your heart desires adventure.",
            desires=["Freedom", "Adventure"], motivation="To experience life fully.",
            fulfillment="Exploring freely."),
    6: dict(title="Soul Urge for Service", description="Your heart desires to care.",
            desires=["Service", "Family"], motivation="To nurture others.",
            fulfillment="Helping others."),
    7: dict(title="Soul Urge for Understanding", description="Your heart desires truth.",
            desires=["Truth", "Wisdom"], motivation="To understand mysteries.",
            fulfillment="Gaining wisdom."),
    8: dict(title="Soul Urge for Success", description="Your heart desires achievement.",
            desires=["Success", "Recognition"], motivation="To achieve greatness.",
            fulfillment="Material success."),
    9: dict(title="Soul Urge for Service to Humanity", description="Your heart desires to serve all.",
            desires=["Service", "Compassion"], motivation="To serve humanity.",
            fulfillment="Helping the world."),
    11: dict(title="Soul Urge for Spiritual Inspiration", description="Your heart desires to inspire.",
             desires=["Inspiration", "Teaching"], motivation="To inspire spiritually.",
             fulfillment="Inspiring others."),
    22: dict(title="Soul Urge for Master Building", description="Your heart desires grand visions.",
             desires=["Vision", "Building"], motivation="To manifest greatness.",
             fulfillment="Building significance."),
    33: dict(title="Soul Urge for Master Teaching", description="Your heart desires to teach love.",
             desires=["Teaching", "Healing"], motivation="To teach through love.",
             fulfillment="Healing others."),
})

# ── Personality ───────────────────────────────────────────────────────────────

PERSONALITY_MEANINGS = _freeze(PersonalityInfo, {
    1: dict(title="The Leader Personality", description="You appear confident and capable.",
            traits=["Confident", "Independent"], impression="Natural leader.",
            attraction="Confidence and initiative."),
    2: dict(title="The Cooperative Personality", description="You appear gentle and diplomatic.",
            traits=["Gentle", "Diplomatic"], impression="Brings harmony.",
            attraction="Calming presence."),
    3: dict(title="The Creative Personality", description="You appear artistic and expressive.",
            traits=["Creative", "Expressive"], impression="Brings joy.",
            attraction="Creativity and energy."),
    4: dict(title="The Reliable Personality", description="You appear stable and dependable.",
            traits=["Reliable", "Practical"], impression="Can be counted on.",
            attraction="Stability and trust."),
    5: dict(title="The Dynamic Personality", description="You appear energetic and adventurous.",
            traits=["Dynamic", "Adventurous"], impression="Makes life interesting.",
            attraction="Energy and adventure."),
    6: dict(title="The Caring Personality", description="You appear nurturing and responsible.",
            traits=["Nurturing", "Caring"], impression="Cares about family.",
            attraction="Warmth and caring."),
    7: dict(title="The Mysterious Personality", description="You appear thoughtful and wise.",
            traits=["Thoughtful", "Mysterious"], impression="Has deep insights.",
            attraction="Depth and mystery."),
    8: dict(title="The Successful Personality", description="You appear ambitious and successful.",
            traits=["Ambitious", "Successful"], impression="Knows success.",
            attraction="Success and authority."),
    9: dict(title="The Compassionate Personality", description="You appear wise and generous.",
            traits=["Wise", "Generous"], impression="Cares about humanity.",
            attraction="Wisdom and compassion."),
    11: dict(title="The Inspirational Personality", description="You appear intuitive and inspiring.",
             traits=["Intuitive", "Inspiring"], impression="Has spiritual insights.",
             attraction="Inspiration and awareness."),
    22: dict(title="The Master Builder Personality", description="You appear visionary and capable.",
             traits=["Visionary", "Capable"], impression="Can manifest dreams.",
             attraction="Vision and capability."),
    33: dict(title="The Master Teacher Personality", description="You appear wise and loving.",
             traits=["Wise", "Loving"], impression="Natural teacher.",
             attraction="Love and wisdom."),
})

# ── Birthday ──────────────────────────────────────────────────────────────────

BIRTHDAY_MEANINGS = _freeze(BirthdayInfo, {
    1: dict(title="Born Leader", description="Natural leadership abilities.",
            gifts=["Leadership", "Independence"],
            special_talents="Inspiring others to follow your vision."),
    2: dict(title="Born Peacemaker", description="Natural diplomatic abilities.",
            gifts=["Diplomacy", "Cooperation"], special_talents="Bringing people together."),
    3: dict(title="Born Communicator", description="Natural creative abilities.",
            gifts=["Creativity", "Communication"], special_talents="Expressing yourself creatively."),
    4: dict(title="Born Builder", description="Natural organizational abilities.",
            gifts=["Organization", "Building"], special_talents="Creating lasting structures."),
    5: dict(title="Born Explorer", description="Natural adaptability.",
            gifts=["Adaptability", "Freedom"], special_talents="Adapting to any situation."),
    6: dict(title="Born Nurturer", description="Natural healing abilities.",
            gifts=["Nurturing", "Healing"], special_talents="Healing and creating harmony."),
    7: dict(title="Born Seeker", description="Natural analytical abilities.",
            gifts=["Analysis", "Intuition"], special_talents="Seeing beyond the surface."),
    8: dict(title="Born Achiever", description="Natural business abilities.",
            gifts=["Business acumen", "Leadership"], special_talents="Creating material success."),
    9: dict(title="Born Humanitarian", description="Natural compassion.",
            gifts=["Compassion", "Service"], special_talents="Understanding human nature."),
    11: dict(title="Born Illuminator", description="Natural intuitive abilities.",
             gifts=["Intuition", "Inspiration"], special_talents="Inspiring others spiritually."),
    22: dict(title="Born Master Builder", description="Natural visionary abilities.",
             gifts=["Vision", "Manifestation"], special_talents="Turning visions into reality."),
    33: dict(title="Born Master Teacher", description="Natural teaching abilities.",
             gifts=["Teaching", "Healing"], special_talents="Teaching through example."),
})

# ── Defaults for numbers outside the tables ───────────────────────────────────

DEFAULT_LIFE_PATH = LifePathInfo(
    title="Unique Path",
    description="Your path is unique and special.",
    strengths=("Individuality",),
    challenges=("Finding your way",),
    career_paths=("Various paths available",),
    relationships="Seek authentic connections.",
    life_approach="Follow your intuition.",
    hidden_depth="Trust your inner wisdom.",
    love_compatibility=("All numbers",),
    lucky_numbers=("Personal numbers",),
    lucky_colors=("Personal colors",),
)

DEFAULT_DESTINY = DestinyInfo(
    title="Unique Destiny",
    description="Your destiny is unfolding perfectly.",
    purpose="To fulfill your unique mission.",
    talents=("Special gifts",),
    mission="Follow your heart's calling.",
)

DEFAULT_SOUL_URGE = SoulUrgeInfo(
    title="Unique Desires",
    description="Your soul seeks authentic expression.",
    desires=("Authenticity", "Purpose"),
    motivation="To be true to yourself.",
    fulfillment="Living authentically brings joy.",
)

DEFAULT_PERSONALITY = PersonalityInfo(
    title="Unique Personality",
    description="You have a distinctive presence.",
    traits=("Authentic", "Unique"),
    impression="Others see your authenticity.",
    attraction="People are drawn to your genuineness.",
)

DEFAULT_BIRTHDAY = BirthdayInfo(
    title="Special Day",
    description="Your birthday holds special significance.",
    gifts=("Unique talents",),
    special_talents="You have special gifts to share with the world.",
)

_TABLES = {
    NumberKind.LIFE_PATH: (LIFE_PATH_MEANINGS, DEFAULT_LIFE_PATH),
    NumberKind.DESTINY: (DESTINY_MEANINGS, DEFAULT_DESTINY),
    NumberKind.SOUL_URGE: (SOUL_URGE_MEANINGS, DEFAULT_SOUL_URGE),
    NumberKind.PERSONALITY: (PERSONALITY_MEANINGS, DEFAULT_PERSONALITY),
    NumberKind.BIRTHDAY: (BIRTHDAY_MEANINGS, DEFAULT_BIRTHDAY),
}


def lookup(number: int, kind: NumberKind) -> MeaningEntry:
    """Meaning of `number` for `kind`, or the kind's default entry."""
    table, default = _TABLES[NumberKind(kind)]
    entry = table.get(number)
    if entry is None:
        logger.debug(f"No {NumberKind(kind).value} meaning for {number}, using default entry")
        return default
    return entry


def life_path_info(number: int) -> LifePathInfo:
    return lookup(number, NumberKind.LIFE_PATH)


def destiny_info(number: int) -> DestinyInfo:
    return lookup(number, NumberKind.DESTINY)


def soul_urge_info(number: int) -> SoulUrgeInfo:
    return lookup(number, NumberKind.SOUL_URGE)


def personality_info(number: int) -> PersonalityInfo:
    return lookup(number, NumberKind.PERSONALITY)


def birthday_info(number: int) -> BirthdayInfo:
    return lookup(number, NumberKind.BIRTHDAY)
