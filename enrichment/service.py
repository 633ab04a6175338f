"""
Enrichment entry points used by the engine.

enrich_text never raises because of an enricher: a failing enricher is
logged and replaced by the static template for the same context.
"""
import re
from dataclasses import dataclass
from typing import Optional

from loguru import logger

import config
from enrichment.base import EnrichmentContext, EnrichmentKind, TextEnricher
from enrichment.templates import StaticTemplateEnricher
from numerology.errors import CollaboratorUnavailable

_STATIC = StaticTemplateEnricher()

_SIN_RE = re.compile(r"SIN:\s*([^\n]+)", re.IGNORECASE)
_WARNING_RE = re.compile(r"WARNING:\s*([^\n]+)", re.IGNORECASE)
_CONSEQUENCES_RE = re.compile(r"CONSEQUENCES:\s*([^\n]+)", re.IGNORECASE)


@dataclass(frozen=True)
class SpiritualWarning:
    sin: str
    warning: str
    consequences: str


def default_enricher() -> TextEnricher:
    """Enricher selected by ENRICHER in .env ("static" or "openai")."""
    if config.ENRICHER == "openai":
        from enrichment.openai_client import OpenAIChatEnricher
        return OpenAIChatEnricher()
    if config.ENRICHER != "static":
        logger.warning(f"Unknown ENRICHER '{config.ENRICHER}', using static templates")
    return _STATIC


def enrich_text(context: EnrichmentContext, enricher: Optional[TextEnricher] = None) -> str:
    """Prose for context from enricher, or from the static templates if it fails."""
    if enricher is None or isinstance(enricher, StaticTemplateEnricher):
        return _STATIC.enrich(context)
    try:
        return enricher.enrich(context)
    except CollaboratorUnavailable as e:
        logger.warning(f"Enrichment unavailable for {context.kind.value}, using template: {e}")
    except Exception:
        logger.opt(exception=True).warning(f"Enricher {type(enricher).__name__} failed for {context.kind.value}, using template")
    return _STATIC.enrich(context)


def parse_spiritual_warning(text: str, fallback: SpiritualWarning) -> SpiritualWarning:
    """
    Pull SIN / WARNING / CONSEQUENCES lines out of text.
    Missing sections take the fallback's value.
    """
    sin = _SIN_RE.search(text)
    warning = _WARNING_RE.search(text)
    consequences = _CONSEQUENCES_RE.search(text)
    return SpiritualWarning(
        sin=sin.group(1).strip() if sin else fallback.sin,
        warning=warning.group(1).strip() if warning else fallback.warning,
        consequences=consequences.group(1).strip() if consequences else fallback.consequences,
    )


def spiritual_warning(profile, enricher: Optional[TextEnricher] = None) -> SpiritualWarning:
    """The "deadly sin" card for a NumerologyProfile."""
    context = EnrichmentContext(EnrichmentKind.SPIRITUAL_WARNING, {
        "full_name": profile.full_name,
        "life_path": profile.life_path_number,
        "destiny": profile.destiny_number,
    })
    fallback = parse_spiritual_warning(_STATIC.enrich(context), SpiritualWarning("", "", ""))
    return parse_spiritual_warning(enrich_text(context, enricher), fallback)
