"""
Compute the numerology numbers of every celebrity in the roster.

Usage:
    python scripts/celebrity_roster.py                    # Print the table
    python scripts/celebrity_roster.py --life-path 7      # Only Life Path 7
    python scripts/celebrity_roster.py --out roster.json  # Also write JSON

Numbers are always derived from the birth date and stage name, so this is
the place to check what the celebrity matcher will see.
"""
import argparse
import json
import sys
from datetime import date
from pathlib import Path
from typing import Optional

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rich import box
from rich.console import Console
from rich.table import Table

from numerology.catalog import CELEBRITIES
from numerology.matchers import celebrity_profile


def compute_roster(reference_year: int, life_path: Optional[int] = None) -> list[dict]:
    rows = []
    for celebrity in CELEBRITIES:
        p = celebrity_profile(celebrity, reference_year)
        if life_path is not None and p.life_path_number != life_path:
            continue
        rows.append({
            "name": celebrity.name,
            "birth_date": celebrity.birth_date,
            "profession": celebrity.profession,
            "life_path": p.life_path_number,
            "destiny": p.destiny_number,
            "soul_urge": p.soul_urge_number,
            "personality": p.personality_number,
            "personal_year": p.personal_year_number,
        })
    return rows


def main():
    parser = argparse.ArgumentParser(description="Compute numerology numbers for the celebrity roster")
    parser.add_argument("--life-path", type=int, default=None, help="Only show this Life Path")
    parser.add_argument("--year", type=int, default=date.today().year, help="Reference year for Personal Year")
    parser.add_argument("--out", type=str, default=None, help="Write the roster as JSON to this path")
    args = parser.parse_args()

    rows = compute_roster(args.year, args.life_path)

    table = Table(box=box.ROUNDED, title=f"Celebrity roster ({len(rows)}/{len(CELEBRITIES)})")
    for col in ("Name", "Born", "Profession", "LP", "D", "SU", "P", f"PY {args.year}"):
        table.add_column(col, justify="left" if col in ("Name", "Born", "Profession") else "right")
    for r in rows:
        table.add_row(
            r["name"], r["birth_date"], r["profession"],
            str(r["life_path"]), str(r["destiny"]), str(r["soul_urge"]),
            str(r["personality"]), str(r["personal_year"]),
        )
    Console().print(table)

    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            json.dump(rows, f, indent=2, ensure_ascii=False)
        print(f"✓ Wrote {len(rows)} celebrities to {args.out}")


if __name__ == "__main__":
    main()
