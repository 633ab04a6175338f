"""
Static Template Enricher — deterministic, offline prose for every
EnrichmentKind. This is the default enricher and the fallback for every
other one.
"""
from types import MappingProxyType

from enrichment.base import EnrichmentContext, EnrichmentKind
from numerology.meanings import destiny_info, life_path_info, soul_urge_info

# Per-Life-Path trait phrase used in match reasons.
LIFE_PATH_TRAITS = MappingProxyType({
    1: "independent and ambitious",
    2: "cooperative and diplomatic",
    3: "creative and expressive",
    4: "practical and reliable",
    5: "adventurous and free-spirited",
    6: "nurturing and responsible",
    7: "analytical and spiritual",
    8: "successful and achievement-focused",
    9: "humanitarian and wise",
})

# ── Spiritual warnings ("deadly sin" card), keyed by Life Path ───────────────
# {name} is filled with the person's full name.
SPIRITUAL_WARNINGS = MappingProxyType({
    1: ("Pride",
        "{name}, your leadership nature may lead to pride. Stay humble and open to others' perspectives.",
        "Pride can isolate you and damage relationships."),
    2: ("Envy",
        "{name}, your sensitive nature may lead to comparison with others. Focus on your own journey.",
        "Envy can poison your peace and relationships."),
    3: ("Gluttony",
        "{name}, your love for life's pleasures may lead to excess. Practice moderation.",
        "Overindulgence can harm your health and relationships."),
    4: ("Sloth",
        "{name}, your methodical nature may sometimes lead to procrastination. Take action when needed.",
        "Inaction can prevent you from achieving your goals."),
    5: ("Wrath",
        "{name}, your passionate nature may lead to anger when restricted. Channel this energy positively.",
        "Anger can destroy relationships and opportunities."),
    6: ("Greed",
        "{name}, your nurturing nature may become possessive. Allow others their freedom.",
        "Possessiveness can suffocate relationships."),
    7: ("Lust",
        "{name}, your seeking nature may lead to spiritual or material obsessions. Find balance.",
        "Obsession can blind you to true fulfillment."),
    8: ("Greed",
        "{name}, your ambitious nature may lead to material greed. Remember what truly matters.",
        "Greed can corrupt your values and relationships."),
    9: ("Pride",
        "{name}, your wise nature may lead to spiritual pride. Stay humble in your wisdom.",
        "Spiritual pride can separate you from others."),
    11: ("Pride",
         "{name}, your intuitive gifts may lead to spiritual superiority. Use your gifts to serve others.",
         "Spiritual pride can isolate you from humanity."),
    22: ("Pride",
         "{name}, your master builder energy may lead to ego inflation. Stay grounded and humble.",
         "Ego can prevent you from achieving your highest purpose."),
    33: ("Pride",
         "{name}, your master teacher energy may lead to spiritual arrogance. Teach with compassion.",
         "Arrogance can block your ability to truly help others."),
})


def character_analysis_text(life_path: int, destiny: int, soul_urge: int) -> str:
    return (
        f"Your Life Path {life_path} ({life_path_info(life_path).title}) reveals your natural "
        f"journey through life, while your Destiny {destiny} ({destiny_info(destiny).title}) "
        f"shows your ultimate purpose. Your Soul Urge {soul_urge} ({soul_urge_info(soul_urge).title}) "
        f"represents your heart's deepest desires. Together, these numbers create a unique cosmic "
        f"blueprint that guides your spiritual evolution and personal growth."
    )


def celebrity_match_reason_text(
    user_life_path: int,
    celebrity_name: str,
    celebrity_life_path: int,
    profession: str,
) -> str:
    user_trait = LIFE_PATH_TRAITS.get(user_life_path, "unique")
    celebrity_trait = LIFE_PATH_TRAITS.get(celebrity_life_path, "special")
    if user_life_path == celebrity_life_path:
        return (
            f"Your Life Path {user_life_path} energy perfectly mirrors {celebrity_name}'s "
            f"{profession.lower()} spirit. As fellow {user_trait} souls, you share the same "
            f"cosmic frequency and natural understanding."
        )
    return (
        f"Your {user_trait} Life Path {user_life_path} energy creates a magnetic resonance with "
        f"{celebrity_name}'s {celebrity_trait} Life Path {celebrity_life_path} vibration. This "
        f"cosmic alignment suggests deep compatibility and mutual inspiration in your shared journey."
    )


def spiritual_warning_text(full_name: str, life_path: int) -> str:
    """SIN:/WARNING:/CONSEQUENCES: block; Life Paths outside the table use the 1 entry."""
    sin, warning, consequences = SPIRITUAL_WARNINGS.get(life_path, SPIRITUAL_WARNINGS[1])
    return (
        f"SIN: {sin}\n"
        f"WARNING: {warning.format(name=full_name)}\n"
        f"CONSEQUENCES: {consequences}"
    )


class StaticTemplateEnricher:
    """Never fails, never touches the network."""

    def enrich(self, context: EnrichmentContext) -> str:
        v = context.values
        if context.kind == EnrichmentKind.CHARACTER_ANALYSIS:
            return character_analysis_text(v["life_path"], v["destiny"], v["soul_urge"])
        if context.kind == EnrichmentKind.CELEBRITY_MATCH_REASON:
            return celebrity_match_reason_text(
                v["user_life_path"], v["celebrity_name"], v["celebrity_life_path"], v["profession"],
            )
        if context.kind == EnrichmentKind.SPIRITUAL_WARNING:
            return spiritual_warning_text(v["full_name"], v["life_path"])
        raise ValueError(f"Unsupported enrichment kind: {context.kind}")
