"""
Tests for the meaning tables and the letter helpers.

Checked invariants:
1. Every table covers exactly 1–9, 11, 22, 33
2. Unknown numbers resolve to the documented default, never raise
3. Tables and entries are read-only
"""

from dataclasses import FrozenInstanceError

import pytest

from numerology.letters import (
    CONSONANT_VALUES,
    PYTHAGOREAN_MAP,
    VOWEL_VALUES,
    clean_name,
    consonants_of,
    letter_value,
    vowels_of,
)
from numerology.meanings import (
    BIRTHDAY_MEANINGS,
    DEFAULT_BIRTHDAY,
    DEFAULT_LIFE_PATH,
    DESTINY_MEANINGS,
    LIFE_PATH_MEANINGS,
    PERSONALITY_MEANINGS,
    SOUL_URGE_MEANINGS,
    NumberKind,
    life_path_info,
    lookup,
)

DOMAIN = {1, 2, 3, 4, 5, 6, 7, 8, 9, 11, 22, 33}


# =============================================================================
# Letters
# =============================================================================


class TestLetters:
    """Pythagorean letter values and name cleaning."""

    def test_map_covers_alphabet(self):
        assert len(PYTHAGOREAN_MAP) == 26
        assert letter_value("a") == 1
        assert letter_value("I") == 9
        assert letter_value("Z") == 8

    def test_clean_name(self):
        assert clean_name("  Zoë O'Neil-Smith ") == "ZOEONEILSMITH"

    def test_vowels_and_consonants(self):
        assert vowels_of("MARY") == "A"
        assert consonants_of("MARY") == "MRY"

    def test_subset_tables_partition_alphabet(self):
        assert set(VOWEL_VALUES) == {"A", "E", "I", "O", "U"}
        assert "Y" in CONSONANT_VALUES
        assert {**VOWEL_VALUES, **CONSONANT_VALUES} == dict(PYTHAGOREAN_MAP)


# =============================================================================
# Meaning tables
# =============================================================================


class TestMeaningTables:
    """Coverage and defaults of the five meaning tables."""

    @pytest.mark.parametrize("table", [
        LIFE_PATH_MEANINGS,
        DESTINY_MEANINGS,
        SOUL_URGE_MEANINGS,
        PERSONALITY_MEANINGS,
        BIRTHDAY_MEANINGS,
    ])
    def test_domain_coverage(self, table):
        assert set(table) == DOMAIN

    def test_known_titles(self):
        assert lookup(1, NumberKind.LIFE_PATH).title == "The Leader"
        assert life_path_info(11).title == "The Intuitive Illuminator"

    def test_unknown_number_uses_default(self):
        assert lookup(13, NumberKind.LIFE_PATH) is DEFAULT_LIFE_PATH
        assert DEFAULT_LIFE_PATH.title == "Unique Path"
        assert lookup(0, NumberKind.BIRTHDAY) is DEFAULT_BIRTHDAY

    def test_kind_accepts_plain_string(self):
        assert lookup(1, "life_path") is LIFE_PATH_MEANINGS[1]

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            LIFE_PATH_MEANINGS[1] = DEFAULT_LIFE_PATH

    def test_entries_are_frozen(self):
        with pytest.raises(FrozenInstanceError):
            LIFE_PATH_MEANINGS[1].title = "Changed"

    def test_lists_are_tuples(self):
        assert isinstance(LIFE_PATH_MEANINGS[7].strengths, tuple)
        assert LIFE_PATH_MEANINGS[7].strengths
