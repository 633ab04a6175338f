"""
Text enrichment boundary — types shared by every enricher.

An enricher turns an EnrichmentContext (what kind of text, plus the numbers
and names it is about) into prose. The engine never depends on an enricher
succeeding: see enrichment.service.enrich_text.
"""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Protocol


class EnrichmentKind(str, Enum):
    CHARACTER_ANALYSIS = "character_analysis"
    CELEBRITY_MATCH_REASON = "celebrity_match_reason"
    SPIRITUAL_WARNING = "spiritual_warning"


@dataclass(frozen=True)
class EnrichmentContext:
    """
    kind + the values the text is about.

    Expected keys per kind:
      CHARACTER_ANALYSIS      full_name, life_path, destiny, soul_urge, personality
      CELEBRITY_MATCH_REASON  user_name, user_life_path, celebrity_name,
                              celebrity_life_path, profession, score
      SPIRITUAL_WARNING       full_name, life_path, destiny
    """

    kind: EnrichmentKind
    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))


class TextEnricher(Protocol):
    """Anything with enrich(context) -> str. Raise CollaboratorUnavailable on failure."""

    def enrich(self, context: EnrichmentContext) -> str:
        ...
