"""
OpenAI Chat Enricher — prose from an OpenAI-compatible chat-completions API.

Requires OPENAI_API_KEY (and optionally OPENAI_BASE_URL / OPENAI_MODEL) in .env.
Every failure surfaces as CollaboratorUnavailable; the caller falls back to
the static templates. No retries.
"""
from typing import Optional

import requests
from loguru import logger

import config
from enrichment.base import EnrichmentContext, EnrichmentKind
from numerology.errors import CollaboratorUnavailable

SYSTEM_PROMPT = (
    "You are Oracle, a wise astrology and numerology guide providing personalized insights.\n"
    "Guidelines:\n"
    "- Respond with warmth, wisdom, and encouragement\n"
    "- Keep responses under 200 words and be specific to the person's numbers\n"
    "- Focus on actionable insights and positive guidance\n"
    "- Use mystical but grounded language"
)

TEMPERATURE = 0.7


def build_prompt(context: EnrichmentContext) -> str:
    v = context.values
    if context.kind == EnrichmentKind.CHARACTER_ANALYSIS:
        return (
            f"Generate a detailed character analysis for {v.get('full_name', 'this person')} "
            f"based on their numerology profile:\n\n"
            f"Life Path: {v['life_path']}\n"
            f"Destiny: {v['destiny']}\n"
            f"Soul Urge: {v['soul_urge']}\n"
            f"Personality: {v.get('personality', '-')}\n\n"
            "Cover core personality traits, natural talents, life purpose, how others perceive "
            "them and areas for growth. Keep it encouraging and limit it to 150 words."
        )
    if context.kind == EnrichmentKind.CELEBRITY_MATCH_REASON:
        return (
            f"Explain why Life Path {v['user_life_path']} is {v.get('score', '')}% compatible with "
            f"{v['celebrity_name']} (Life Path {v['celebrity_life_path']}). "
            "Keep it romantic and under 50 words."
        )
    if context.kind == EnrichmentKind.SPIRITUAL_WARNING:
        return (
            f"Based on {v['full_name']}'s numerology profile (Life Path: {v['life_path']}, "
            f"Destiny: {v.get('destiny', '-')}), identify their primary spiritual challenge from "
            "the deadly sins (Pride, Envy, Wrath, Sloth, Greed, Gluttony, Lust).\n\n"
            "Respond in this exact format:\n"
            "SIN: [specific sin]\n"
            "WARNING: [brief spiritual warning about this tendency]\n"
            "CONSEQUENCES: [how this could impact relationships and trust]\n\n"
            "Keep each section under 30 words."
        )
    raise ValueError(f"Unsupported enrichment kind: {context.kind}")


class OpenAIChatEnricher:
    """
    Blocking chat-completions client.

    Raises CollaboratorUnavailable on missing key, transport error, HTTP error
    (429 included), malformed JSON or an empty reply.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ):
        self.api_key = api_key if api_key is not None else config.OPENAI_API_KEY
        self.base_url = (base_url or config.OPENAI_BASE_URL).rstrip("/")
        self.model = model or config.OPENAI_MODEL
        self.timeout = timeout or config.ENRICHMENT_TIMEOUT_SECONDS
        self.max_tokens = max_tokens or config.ENRICHMENT_MAX_TOKENS

    def enrich(self, context: EnrichmentContext) -> str:
        if not self.api_key:
            raise CollaboratorUnavailable("OPENAI_API_KEY is not set")

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(context)},
            ],
            "max_tokens": self.max_tokens,
            "temperature": TEMPERATURE,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            resp = requests.post(
                f"{self.base_url}/chat/completions",
                json=payload,
                headers=headers,
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as e:
            raise CollaboratorUnavailable(f"Chat completion request failed: {e}") from e
        except ValueError as e:
            raise CollaboratorUnavailable(f"Chat completion returned invalid JSON: {e}") from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise CollaboratorUnavailable(f"Unexpected chat completion payload: {e}") from e

        content = (content or "").strip()
        if not content:
            raise CollaboratorUnavailable("Chat completion returned no content")

        logger.debug(f"{context.kind.value} enriched by {self.model} ({len(content)} chars)")
        return content
