"""
Tests for the celebrity roster script.
"""

from numerology.catalog import CELEBRITIES
from scripts.celebrity_roster import compute_roster


class TestComputeRoster:
    """Roster rows derived from birth dates and names."""

    def test_every_celebrity(self):
        rows = compute_roster(2025)
        assert len(rows) == len(CELEBRITIES)
        assert rows[0]["name"] == CELEBRITIES[0].name

    def test_taylor_swift(self):
        """12/13/1989: 3 + 4 + 9 = 16 → 7."""
        row = next(r for r in compute_roster(2025) if r["name"] == "Taylor Swift")
        assert row["life_path"] == 7

    def test_life_path_filter(self):
        rows = compute_roster(2025, life_path=7)
        assert rows
        assert all(r["life_path"] == 7 for r in rows)

    def test_no_filter_when_life_path_is_none(self):
        rows = compute_roster(2025, life_path=None)
        assert [r["name"] for r in rows] == [c.name for c in CELEBRITIES]
