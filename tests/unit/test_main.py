"""
Tests for the command-line entry point.
"""

import pytest

import config
import main
from numerology.errors import InvalidInputError


@pytest.fixture(autouse=True)
def offline(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "ENRICHER", "static")
    monkeypatch.setattr(config, "LOG_DIR", str(tmp_path / "logs"))


# =============================================================================
# Date normalization
# =============================================================================


class TestNormalizeDate:
    """Command-line date input."""

    @pytest.mark.parametrize("text,expected", [
        ("03/15/1990", "03/15/1990"),
        ("3-5-1990", "03/05/1990"),
        ("1990-03-15", "03/15/1990"),
        ("March 15, 1990", "03/15/1990"),
        (" 12/13/1989 ", "12/13/1989"),
    ])
    def test_accepted(self, text, expected):
        assert main.normalize_date(text) == expected

    @pytest.mark.parametrize("text", ["02/30/1990", "1990/03/15", "Marchish", "03/15/90"])
    def test_rejected(self, text):
        with pytest.raises(InvalidInputError):
            main.normalize_date(text)


# =============================================================================
# Sub-commands
# =============================================================================


class TestCommands:
    """End-to-end runs of each sub-command."""

    def test_profile(self, capsys):
        assert main.main(["profile", "John Smith", "07/04/1988", "--year", "2025"]) == 0
        assert "The Leader" in capsys.readouterr().out

    def test_profile_details(self, capsys):
        assert main.main(["profile", "John Smith", "07/04/1988", "--year", "2025", "--details"]) == 0
        out = capsys.readouterr().out
        assert "Spiritual Growth" in out
        assert "Pride" in out

    def test_profile_json(self, capsys):
        assert main.main(["profile", "John Smith", "07/04/1988", "--year", "2025", "--json"]) == 0
        out = capsys.readouterr().out
        assert '"life_path_number": 1' in out
        assert '"personal_year_number": 2' in out

    @pytest.mark.parametrize("mode", ["weighted", "matrix"])
    def test_match(self, mode):
        argv = ["match", "John Smith", "07/04/1988", "Alice Brown", "1990-03-15", "--mode", mode]
        assert main.main(argv) == 0

    def test_trust(self):
        argv = ["trust", "John Smith", "07/04/1988", "Alice Brown", "03/15/1990",
                "--relationship", "business"]
        assert main.main(argv) == 0

    def test_archetypes(self, capsys):
        assert main.main(["archetypes", "John Smith", "07/04/1988", "--top", "3", "--year", "2025"]) == 0
        assert capsys.readouterr().out

    def test_celebrities_json(self, capsys):
        assert main.main(["celebrities", "John Smith", "07/04/1988", "--top", "2", "--json"]) == 0
        assert '"match_text"' in capsys.readouterr().out

    def test_invalid_date_exit_code(self, capsys):
        assert main.main(["profile", "John Smith", "02/30/1988"]) == 2
        assert "Invalid input" in capsys.readouterr().out

    def test_invalid_name_exit_code(self):
        assert main.main(["profile", "1234", "07/04/1988"]) == 2

    def test_log_file_written(self, tmp_path):
        main.main(["profile", "John Smith", "07/04/1988", "--year", "2025"])
        assert list((tmp_path / "logs").glob("numerology_*.log"))
