"""
Central configuration for the Numerology Match engine.
All tunable parameters live here. Loaded from environment where applicable.
"""
import os
from dotenv import load_dotenv

load_dotenv()

# ── Master numbers ────────────────────────────────────────────────────────────
# Digit reduction stops on these (except for the Personal Year number).
MASTER_NUMBERS = frozenset({11, 22, 33})

# ── Weighted-difference scoring (two-person matcher) ─────────────────────────
#
#   score = BASE_SCORE
#         + Σ weight_axis × clamp(AXIS_SPAN − PENALTY_PER_UNIT × |Δroot|, ±AXIS_SPAN)
#         + exact-match bonuses + master-pair bonuses
#
# Identical profiles land at 100 before bonuses, so the clamp keeps them at 100.
BASE_SCORE = 50
AXIS_SPAN = 50
PENALTY_PER_UNIT = 10

AXIS_WEIGHTS = {
    "life_path": 0.40,
    "destiny":   0.35,
    "soul_urge": 0.25,
}

# ── Bonuses (both scoring modes) ──────────────────────────────────────────────
LIFE_PATH_MATCH_BONUS = 10
DESTINY_MATCH_BONUS = 5
SOUL_URGE_MATCH_BONUS = 5
MASTER_PAIR_BONUS = 5      # per axis where both numbers are masters

# ── Matrix scoring (catalog matchers) ─────────────────────────────────────────
NEUTRAL_PAIR_SCORE = 70    # unlisted Life Path pairs
INCOMPATIBLE_SCORE = 30    # floor for pairs outside the compatible set
DESTINY_NEAR_ADJUST = 3
DESTINY_FAR_ADJUST = -2
SOUL_URGE_NEAR_ADJUST = 2
SOUL_URGE_FAR_ADJUST = -1
NEAR_DISTANCE = 2

# ── Celebrity scoring ─────────────────────────────────────────────────────────
CELEBRITY_BASE_SCORE = 50
CELEBRITY_SAME_PATH_BONUS = 40
CELEBRITY_DEFAULT_PAIR_BONUS = 25
CELEBRITY_MIN_SCORE = 50
VARIETY_BONUS_MIN = 5
VARIETY_BONUS_MAX = 19
# Mixed into the variety hash. Change it to reshuffle ties without losing determinism.
VARIETY_SEED = os.getenv("VARIETY_SEED", "")

# ── Trust thresholds ──────────────────────────────────────────────────────────
DEFAULT_TRUST_RATING = 75
HIGH_LEVEL_THRESHOLD = 80
MEDIUM_LEVEL_THRESHOLD = 60
LOW_OVERALL_TRUST = 70
TRUST_ASYMMETRY_LIMIT = 25
LOW_RELIABILITY = 60
STRENGTH_THRESHOLD = 85
COMPLEMENTARY_BONUS_CAP = 20
FOCUS_AREA_THRESHOLD = 75  # reliability / loyalty below this adds a recommendation

# ── Catalog matchers ──────────────────────────────────────────────────────────
ARCHETYPE_TOP_K = int(os.getenv("ARCHETYPE_TOP_K", "12"))
CELEBRITY_TOP_K = int(os.getenv("CELEBRITY_TOP_K", "2"))
SAMPLE_DATES_PER_MATCH = int(os.getenv("SAMPLE_DATES_PER_MATCH", "6"))
FAMOUS_COUPLES_PER_MATCH = 2

# Age bands (years before the reference year) searched for sample birth dates.
SAMPLE_AGE_BANDS = [
    (20, 25),   # young adults
    (26, 30),
    (31, 35),
    (36, 40),
    (41, 45),
]

# Days some cultures avoid (4, 6, 9, 14, 19, 24, 29+) are left out.
SAMPLE_PREFERRED_DAYS = [
    1, 2, 3, 5, 7, 8, 10, 11, 12, 13, 15, 16, 17, 18, 20, 21, 22, 23, 25, 26, 27, 28,
]

# ── Text enrichment ───────────────────────────────────────────────────────────
# "static" keeps everything offline. "openai" calls an OpenAI-compatible
# chat-completions endpoint and falls back to templates on any failure.
ENRICHER = os.getenv("ENRICHER", "static").lower()
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
ENRICHMENT_TIMEOUT_SECONDS = float(os.getenv("ENRICHMENT_TIMEOUT_SECONDS", "15"))
ENRICHMENT_MAX_TOKENS = int(os.getenv("ENRICHMENT_MAX_TOKENS", "300"))

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")
