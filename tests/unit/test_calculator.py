"""
Tests for the numerology calculator.

Checked invariants:
1. Known values: Life Path 03/15/1990 = 1, Destiny "John Smith" = 8,
   Soul Urge "Alice" = 6
2. Master numbers survive every stage except Personal Year
3. Y is a consonant; accents and punctuation are ignored
4. Malformed input raises InvalidInputError
"""

from datetime import date

import pytest

from numerology import calculator
from numerology.errors import InvalidInputError
from numerology.models import BirthDate


# =============================================================================
# Life Path
# =============================================================================


class TestLifePath:
    """Life Path from a birth date."""

    def test_reference_date(self):
        assert calculator.life_path("03/15/1990") == 1

    def test_accepts_date_and_birth_date(self):
        assert calculator.life_path(date(1990, 3, 15)) == 1
        assert calculator.life_path(BirthDate(3, 15, 1990)) == 1

    def test_dash_separator(self):
        assert calculator.life_path("03-15-1990") == 1

    @pytest.mark.parametrize("text,expected", [
        ("01/01/1980", 11),
        ("11/02/1980", 22),
        ("09/22/1991", 33),
        ("07/04/1988", 1),
    ])
    def test_master_life_paths(self, text, expected):
        assert calculator.life_path(text) == expected

    def test_steps_end_on_result(self):
        result = calculator.calculate_life_path("03/15/1990")
        assert result.number == 1
        labels = [s.label for s in result.steps]
        assert "Sum" in labels
        assert result.steps[-1].result_value == 1
        assert any(s.explanation == "3 + 6 + 1 = 10" for s in result.steps)

    def test_deterministic(self):
        assert calculator.calculate_life_path("12/13/1989") == calculator.calculate_life_path("12/13/1989")


# =============================================================================
# Name numbers
# =============================================================================


class TestNameNumbers:
    """Destiny, Soul Urge and Personality."""

    def test_destiny_john_smith(self):
        assert calculator.destiny("John Smith") == 8

    def test_soul_urge_alice(self):
        assert calculator.soul_urge("Alice") == 6

    def test_personality_alice(self):
        assert calculator.personality("Alice") == 6

    def test_personality_master_number(self):
        """J1 H8 N5 S1 M4 T2 H8 = 29 → 11."""
        assert calculator.personality("John Smith") == 11

    def test_y_counts_as_consonant(self):
        """Ayo: vowels A1 O6 = 7, consonant Y7 = 7."""
        assert calculator.soul_urge("Ayo") == 7
        assert calculator.personality("Ayo") == 7

    def test_case_and_punctuation_ignored(self):
        assert calculator.destiny("john  smith!") == calculator.destiny("JOHN SMITH")

    def test_accents_folded(self):
        assert calculator.destiny("Zoë") == calculator.destiny("Zoe") == 1

    def test_letter_trail(self):
        result = calculator.calculate_destiny("John Smith")
        assert result.steps[0].result_value == 44
        assert result.steps[0].explanation.startswith("J=1 + O=6")

    def test_name_number_trails_use_letter_values(self):
        """Soul Urge and Personality trails list only their own letters."""
        assert calculator.calculate_soul_urge("Alice").steps[0].explanation == "A=1 + I=9 + E=5 = 15"
        assert calculator.calculate_personality("Alice").steps[0].explanation == "L=3 + C=3 = 6"

    @pytest.mark.parametrize("name", ["", "   ", "1234", "!!"])
    def test_letterless_name_rejected(self, name):
        with pytest.raises(InvalidInputError):
            calculator.destiny(name)

    def test_no_vowels_rejected(self):
        with pytest.raises(InvalidInputError):
            calculator.soul_urge("Lynn")

    def test_no_consonants_rejected(self):
        with pytest.raises(InvalidInputError):
            calculator.personality("Aeiou")


# =============================================================================
# Birthday, Personal Year, Personal Day
# =============================================================================


class TestDateNumbers:
    """Birthday, Personal Year and Personal Day."""

    @pytest.mark.parametrize("text,expected", [
        ("03/07/1990", 7),
        ("03/15/1990", 6),
        ("03/11/1990", 11),
        ("03/22/1990", 22),
        ("03/29/1990", 11),
    ])
    def test_birthday(self, text, expected):
        assert calculator.birthday(text) == expected

    def test_personal_year(self):
        """3 + 15 + 2025 = 2043 → 9."""
        assert calculator.personal_year("03/15/1990", 2025) == 9

    def test_personal_year_drops_masters(self):
        """1 + 1 + 2016 = 2018 → 11 → 2."""
        assert calculator.personal_year("01/01/1990", 2016) == 2

    def test_personal_day(self):
        """LP 1 + 10 + 18 + 2026 = 2055 → 12 → 3."""
        assert calculator.personal_day("03/15/1990", date(2026, 10, 18)) == 3


# =============================================================================
# Date validation
# =============================================================================


class TestDateValidation:
    """BirthDate parsing."""

    @pytest.mark.parametrize("text", [
        "13/01/1990",
        "02/30/1990",
        "02/29/2023",
        "1990/03/15",
        "03/15/90",
        "03.15.1990",
        "ab/cd/efgh",
        "03/15",
        "",
    ])
    def test_invalid_dates(self, text):
        with pytest.raises(InvalidInputError):
            calculator.life_path(text)

    def test_leap_day(self):
        assert str(BirthDate.parse("02/29/2024")) == "02/29/2024"

    def test_canonical_format(self):
        assert str(BirthDate.parse("3-5-1990")) == "03/05/1990"

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            BirthDate.parse("nope")
