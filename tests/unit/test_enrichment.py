"""
Tests for the text enrichment boundary.

Checked invariants:
1. Static templates never fail and never touch the network
2. CollaboratorUnavailable from any enricher falls back to the template
3. The chat-completions client maps every failure to CollaboratorUnavailable
"""

import pytest
import requests
from loguru import logger

import config
from enrichment import openai_client
from enrichment.base import EnrichmentContext, EnrichmentKind
from enrichment.openai_client import OpenAIChatEnricher, build_prompt
from enrichment.service import (
    SpiritualWarning,
    default_enricher,
    enrich_text,
    parse_spiritual_warning,
    spiritual_warning,
)
from enrichment.templates import StaticTemplateEnricher, spiritual_warning_text
from numerology.errors import CollaboratorUnavailable
from numerology.profile import build_profile

ANALYSIS = EnrichmentContext(EnrichmentKind.CHARACTER_ANALYSIS, {
    "full_name": "John Smith", "life_path": 1, "destiny": 8, "soul_urge": 6, "personality": 11,
})

SAME_PATH_REASON = EnrichmentContext(EnrichmentKind.CELEBRITY_MATCH_REASON, {
    "user_name": "John Smith", "user_life_path": 7, "celebrity_name": "Taylor Swift",
    "celebrity_life_path": 7, "profession": "Singer-Songwriter", "score": 97,
})


class _FakeResponse:
    def __init__(self, payload=None, status_error=None, json_error=None):
        self.payload = payload
        self.status_error = status_error
        self.json_error = json_error

    def raise_for_status(self):
        if self.status_error:
            raise self.status_error

    def json(self):
        if self.json_error:
            raise self.json_error
        return self.payload


def _reply(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class _RaisingEnricher:
    def __init__(self, exc):
        self.exc = exc

    def enrich(self, context):
        raise self.exc


# =============================================================================
# Static templates
# =============================================================================


class TestStaticTemplates:
    """Deterministic offline prose."""

    def test_character_analysis(self):
        text = StaticTemplateEnricher().enrich(ANALYSIS)
        assert "Life Path 1 (The Leader)" in text
        assert "Destiny 8" in text

    def test_same_path_reason(self):
        text = StaticTemplateEnricher().enrich(SAME_PATH_REASON)
        assert "perfectly mirrors Taylor Swift's singer-songwriter spirit" in text

    def test_different_path_reason(self):
        context = EnrichmentContext(EnrichmentKind.CELEBRITY_MATCH_REASON, {
            "user_life_path": 1, "celebrity_name": "Zendaya", "celebrity_life_path": 11,
            "profession": "Actress",
        })
        text = StaticTemplateEnricher().enrich(context)
        assert "independent and ambitious Life Path 1" in text
        assert "Zendaya's special Life Path 11" in text

    def test_spiritual_warning(self):
        text = spiritual_warning_text("Ada", 4)
        assert text.splitlines()[0] == "SIN: Sloth"
        assert "Ada, your methodical nature" in text

    def test_spiritual_warning_unknown_life_path(self):
        assert spiritual_warning_text("Ada", 13).startswith("SIN: Pride")

    def test_context_values_read_only(self):
        with pytest.raises(TypeError):
            ANALYSIS.values["life_path"] = 2


# =============================================================================
# enrich_text / fallback
# =============================================================================


class TestEnrichText:
    """Fallback behaviour of the enrichment service."""

    def test_none_uses_static(self):
        assert enrich_text(ANALYSIS) == StaticTemplateEnricher().enrich(ANALYSIS)

    def test_unavailable_falls_back_and_logs(self):
        messages = []
        handler_id = logger.add(messages.append, level="WARNING")
        try:
            text = enrich_text(ANALYSIS, _RaisingEnricher(CollaboratorUnavailable("rate limited")))
        finally:
            logger.remove(handler_id)
        assert text == StaticTemplateEnricher().enrich(ANALYSIS)
        assert any("rate limited" in m for m in messages)

    def test_unexpected_error_falls_back_and_logs(self):
        messages = []
        handler_id = logger.add(messages.append, level="WARNING")
        try:
            text = enrich_text(ANALYSIS, _RaisingEnricher(ConnectionError("LLM endpoint unreachable")))
        finally:
            logger.remove(handler_id)
        assert text == StaticTemplateEnricher().enrich(ANALYSIS)
        assert any("_RaisingEnricher failed" in m for m in messages)
        assert any("ConnectionError" in m for m in messages)

    def test_timeout_error_falls_back(self):
        text = enrich_text(SAME_PATH_REASON, _RaisingEnricher(TimeoutError("slow")))
        assert text == StaticTemplateEnricher().enrich(SAME_PATH_REASON)

    def test_default_enricher_static(self, monkeypatch):
        monkeypatch.setattr(config, "ENRICHER", "static")
        assert isinstance(default_enricher(), StaticTemplateEnricher)

    def test_default_enricher_unknown(self, monkeypatch):
        monkeypatch.setattr(config, "ENRICHER", "carrier-pigeon")
        assert isinstance(default_enricher(), StaticTemplateEnricher)

    def test_default_enricher_openai(self, monkeypatch):
        monkeypatch.setattr(config, "ENRICHER", "openai")
        assert isinstance(default_enricher(), OpenAIChatEnricher)


class TestSpiritualWarning:
    """Parsing of the SIN / WARNING / CONSEQUENCES card."""

    def test_parse_full(self):
        parsed = parse_spiritual_warning(
            "SIN: Envy\nWARNING: Watch comparisons\nCONSEQUENCES: Lost peace",
            SpiritualWarning("x", "y", "z"),
        )
        assert parsed == SpiritualWarning("Envy", "Watch comparisons", "Lost peace")

    def test_parse_partial(self):
        parsed = parse_spiritual_warning("sin: Wrath", SpiritualWarning("x", "y", "z"))
        assert parsed == SpiritualWarning("Wrath", "y", "z")

    def test_static_card(self):
        profile = build_profile("John Smith", "07/04/1988", reference_year=2025)
        card = spiritual_warning(profile)
        assert card.sin == "Pride"
        assert card.warning.startswith("John Smith, your leadership nature")

    def test_partial_enricher_reply(self):
        class Partial:
            def enrich(self, context):
                return "SIN: Wrath"

        profile = build_profile("John Smith", "07/04/1988", reference_year=2025)
        card = spiritual_warning(profile, Partial())
        assert card.sin == "Wrath"
        assert card.consequences == "Pride can isolate you and damage relationships."


# =============================================================================
# OpenAI-compatible client
# =============================================================================


class TestOpenAIChatEnricher:
    """HTTP client failure mapping."""

    @pytest.fixture
    def enricher(self):
        return OpenAIChatEnricher(api_key="sk-test", base_url="https://llm.example/v1/", model="test-model")

    def test_success(self, enricher, monkeypatch):
        calls = []

        def fake_post(url, json=None, headers=None, timeout=None):
            calls.append((url, json, headers, timeout))
            return _FakeResponse(_reply("  The stars align.  "))

        monkeypatch.setattr(openai_client.requests, "post", fake_post)
        assert enricher.enrich(ANALYSIS) == "The stars align."

        url, payload, headers, timeout = calls[0]
        assert url == "https://llm.example/v1/chat/completions"
        assert payload["model"] == "test-model"
        assert payload["messages"][0]["role"] == "system"
        assert "Life Path: 1" in payload["messages"][1]["content"]
        assert headers["Authorization"] == "Bearer sk-test"
        assert timeout == config.ENRICHMENT_TIMEOUT_SECONDS

    def test_missing_key(self):
        with pytest.raises(CollaboratorUnavailable):
            OpenAIChatEnricher(api_key="").enrich(ANALYSIS)

    def test_timeout(self, enricher, monkeypatch):
        def fake_post(*args, **kwargs):
            raise requests.Timeout("slow")

        monkeypatch.setattr(openai_client.requests, "post", fake_post)
        with pytest.raises(CollaboratorUnavailable):
            enricher.enrich(ANALYSIS)

    def test_rate_limited(self, enricher, monkeypatch):
        error = requests.HTTPError("429 Too Many Requests")
        monkeypatch.setattr(openai_client.requests, "post",
                            lambda *a, **k: _FakeResponse(status_error=error))
        with pytest.raises(CollaboratorUnavailable):
            enricher.enrich(ANALYSIS)

    def test_invalid_json(self, enricher, monkeypatch):
        monkeypatch.setattr(openai_client.requests, "post",
                            lambda *a, **k: _FakeResponse(json_error=ValueError("not json")))
        with pytest.raises(CollaboratorUnavailable):
            enricher.enrich(ANALYSIS)

    @pytest.mark.parametrize("payload", [{}, {"choices": []}, _reply(""), _reply(None)])
    def test_unusable_payload(self, enricher, monkeypatch, payload):
        monkeypatch.setattr(openai_client.requests, "post", lambda *a, **k: _FakeResponse(payload))
        with pytest.raises(CollaboratorUnavailable):
            enricher.enrich(ANALYSIS)

    def test_spiritual_warning_prompt_format(self):
        context = EnrichmentContext(EnrichmentKind.SPIRITUAL_WARNING, {
            "full_name": "Ada", "life_path": 7, "destiny": 3,
        })
        prompt = build_prompt(context)
        assert "SIN: [specific sin]" in prompt
        assert "Life Path: 7" in prompt
