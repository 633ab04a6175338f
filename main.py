"""
Numerology Match — command-line entry point.
Builds profiles, scores pairs and ranks catalog matches, rendered with rich.

Run:
    python main.py profile "Jane Doe" 03/15/1990 --details
    python main.py match "Jane Doe" 03/15/1990 "John Smith" 07/04/1988 --mode matrix
    python main.py trust "Jane Doe" 03/15/1990 "John Smith" 07/04/1988 --relationship romantic
    python main.py archetypes "Jane Doe" 03/15/1990 --top 5
    python main.py celebrities "Jane Doe" 03/15/1990
"""
import argparse
import json
import os
import re
import sys
from dataclasses import asdict

from dateutil.parser import ParserError
from dateutil.parser import parse as parse_date
from loguru import logger
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

import config
from enrichment.service import default_enricher, spiritual_warning
from numerology.compatibility import ScoringMode, compatibility
from numerology.errors import InvalidInputError
from numerology.matchers import incompatible_numbers, rank_archetypes, rank_celebrities
from numerology.models import BirthDate
from numerology.profile import build_profile, personal_symbols, predictions
from numerology.trust import RelationshipType, assess_trust

console = Console()

_ISO_DATE = re.compile(r"\d{4}-\d{1,2}-\d{1,2}")

LEVEL_COLORS = {"High": "green", "Medium": "yellow", "Low": "red"}


# ── Input normalization ────────────────────────────────────────────────────────

def normalize_date(text: str) -> str:
    """
    Canonical MM/DD/YYYY for a command-line date.

    MM/DD/YYYY and MM-DD-YYYY are validated strictly. ISO dates (1990-03-15)
    and spelled-out months ("March 15, 1990") go through dateutil first.
    """
    text = text.strip()
    if _ISO_DATE.fullmatch(text) or re.search(r"[A-Za-z]", text):
        try:
            return str(BirthDate.from_date(parse_date(text).date()))
        except (ParserError, ValueError, OverflowError) as e:
            raise InvalidInputError(f"Could not read date '{text}': {e}") from e
    return str(BirthDate.parse(text))


def score_color(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 60:
        return "yellow"
    return "red"


# ── Console display ────────────────────────────────────────────────────────────

def display_profile(profile, details: bool = False):
    table = Table(box=box.ROUNDED, show_header=False, padding=(0, 1))
    table.add_column("Key", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Birth date", profile.birth_date)
    table.add_row("Life Path", f"{profile.life_path_number} · {profile.life_path_info.title}")
    table.add_row("Destiny", f"{profile.destiny_number} · {profile.destiny_info.title}")
    table.add_row("Soul Urge", f"{profile.soul_urge_number} · {profile.soul_urge_info.title}")
    table.add_row("Personality", f"{profile.personality_number} · {profile.personality_info.title}")
    table.add_row("Birthday", f"{profile.birthday_number} · {profile.birthday_info.title}")
    table.add_row(f"Personal Year {profile.reference_year}", str(profile.personal_year_number))
    table.add_row("Strengths", ", ".join(profile.life_path_info.strengths))
    table.add_row("Challenges", ", ".join(profile.life_path_info.challenges))
    table.add_row("Lucky colors", ", ".join(profile.life_path_info.lucky_colors))

    console.print(Panel(
        table,
        title=f"[bold]{profile.full_name}[/bold]",
        border_style="cyan",
        expand=False,
    ))
    console.print(Panel(profile.character_analysis, title="Character analysis", border_style="dim"))

    if not details:
        return

    steps = Table(box=box.SIMPLE, title="Calculations")
    steps.add_column("Number", style="dim")
    steps.add_column("Step")
    steps.add_column("Value", justify="right")
    for name, trail in profile.calculations.items():
        for step in trail:
            steps.add_row(name.replace("_", " ").title(), step.explanation, str(step.result_value))
    console.print(steps)

    symbols = Table(box=box.SIMPLE, title="Symbols")
    for col in ("Number", "Glyph", "Planet", "Element", "Color", "Meaning"):
        symbols.add_column(col)
    for name, sym in personal_symbols(profile).items():
        symbols.add_row(
            f"{name.replace('_', ' ').title()} {sym.number}",
            sym.symbol, sym.planet, sym.element, sym.color, sym.meaning,
        )
    console.print(symbols)

    for card in predictions(profile):
        console.print(Panel(
            "\n".join(f"• {line}" for line in card.predictions),
            title=f"{card.category} · {card.timeframe}",
            border_style="magenta" if card.strength == "high" else "blue",
            expand=False,
        ))

    warning = spiritual_warning(profile, default_enricher())
    console.print(Panel(
        f"[bold]{warning.sin}[/bold]\n{warning.warning}\n[dim]{warning.consequences}[/dim]",
        title="Spiritual warning",
        border_style="red",
        expand=False,
    ))

    avoid = incompatible_numbers(profile)
    console.print(Panel("\n".join(avoid.reasons), title="Numbers to watch", border_style="yellow"))


def display_indicators(indicators, warnings, strengths):
    table = Table(box=box.ROUNDED, title="Trust indicators")
    table.add_column("Category", style="dim")
    table.add_column("Score", justify="right")
    table.add_column("Level")
    table.add_column("Description")
    for ind in indicators:
        color = LEVEL_COLORS[ind.level]
        table.add_row(ind.category, str(ind.score), f"[{color}]{ind.level}[/{color}]", ind.description)
    console.print(table)
    for line in strengths:
        console.print(f"[green]✓[/green] {line}")
    for line in warnings:
        console.print(f"[yellow]![/yellow] {line}")


def display_match(a, b, result):
    color = score_color(result.score)
    lines = [f"[bold {color}]{result.score}/100[/bold {color}]  ({result.mode.value} mode)"]
    lines += [f"{bonus.label}: {bonus.points:+d}" for bonus in result.bonuses]
    console.print(Panel(
        "\n".join(lines),
        title=f"[bold]{a.full_name} ♥ {b.full_name}[/bold]",
        border_style=color,
        expand=False,
    ))
    display_indicators(result.indicators, result.warnings, result.strengths)


def display_trust(assessment):
    table = Table(box=box.ROUNDED, title="Trust profiles")
    for col in ("Person", "Trustworthiness", "Reliability", "Loyalty", "Overall"):
        table.add_column(col, justify="right" if col != "Person" else "left")
    for p in (assessment.person1, assessment.person2):
        table.add_row(p.name, str(p.trustworthiness), str(p.reliability), str(p.loyalty), str(p.overall))
    console.print(table)

    color = score_color(assessment.compatibility_score)
    console.print(Panel(
        "\n".join(f"• {r}" for r in assessment.recommendations),
        title=f"Trust compatibility [bold {color}]{assessment.compatibility_score}/100[/bold {color}]",
        border_style=color,
        expand=False,
    ))
    display_indicators(assessment.indicators, assessment.warnings, assessment.strengths)


def display_archetypes(profile, matches):
    table = Table(box=box.ROUNDED, title=f"Archetype matches for {profile.full_name}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Archetype")
    table.add_column("LP/D/SU", justify="center")
    table.add_column("Score", justify="right")
    table.add_column("Ideal traits")
    table.add_column("Sample birth dates")
    table.add_column("Famous couples")
    for i, m in enumerate(matches, 1):
        a = m.archetype
        color = score_color(m.score)
        table.add_row(
            str(i),
            a.title,
            f"{a.life_path}/{a.destiny}/{a.soul_urge}",
            f"[{color}]{m.score}[/{color}]",
            ", ".join(m.ideal_traits),
            ", ".join(m.sample_birth_dates) or "-",
            "; ".join(f"{c.person1} & {c.person2}" for c in m.famous_couples) or "-",
        )
    console.print(table)


def display_celebrities(profile, matches):
    if not matches:
        console.print("[yellow]No compatible celebrities found.[/yellow]")
        return
    for m in matches:
        color = score_color(m.score)
        console.print(Panel(
            f"{m.match_text}\n\n[dim]{m.celebrity.profession} · born {m.celebrity.birth_date} · "
            f"Life Path {m.profile.life_path_number}[/dim]",
            title=f"[bold]{m.celebrity.name}[/bold]  [{color}]{m.score}%[/{color}]",
            border_style=color,
            expand=False,
        ))


def print_json(obj):
    console.print_json(json.dumps(obj, default=str, ensure_ascii=False))


# ── Sub-commands ───────────────────────────────────────────────────────────────

def cmd_profile(args) -> int:
    profile = build_profile(args.name, normalize_date(args.date), args.year, default_enricher())
    if args.json:
        print_json(asdict(profile))
    else:
        display_profile(profile, details=args.details)
    return 0


def _pair(args):
    enricher = default_enricher()
    a = build_profile(args.name1, normalize_date(args.date1), enricher=enricher)
    b = build_profile(args.name2, normalize_date(args.date2), enricher=enricher)
    return a, b


def cmd_match(args) -> int:
    a, b = _pair(args)
    result = compatibility(a, b, ScoringMode(args.mode))
    if args.json:
        print_json(asdict(result))
    else:
        display_match(a, b, result)
    return 0


def cmd_trust(args) -> int:
    a, b = _pair(args)
    assessment = assess_trust(a, b, RelationshipType(args.relationship) if args.relationship else None)
    if args.json:
        print_json(asdict(assessment))
    else:
        display_trust(assessment)
    return 0


def cmd_archetypes(args) -> int:
    profile = build_profile(args.name, normalize_date(args.date), args.year)
    matches = rank_archetypes(profile, top_k=args.top)
    if args.json:
        print_json([asdict(m) for m in matches])
    else:
        display_archetypes(profile, matches)
    return 0


def cmd_celebrities(args) -> int:
    profile = build_profile(args.name, normalize_date(args.date))
    matches = rank_celebrities(profile, top_k=args.top, enricher=default_enricher())
    if args.json:
        print_json([
            {"name": m.celebrity.name, "score": m.score, "life_path": m.profile.life_path_number,
             "profession": m.celebrity.profession, "match_text": m.match_text}
            for m in matches
        ])
    else:
        display_celebrities(profile, matches)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Numerology profiles and compatibility matching")
    sub = parser.add_subparsers(dest="command", required=True)

    def person(p, suffix=""):
        p.add_argument(f"name{suffix}", help="Full name")
        p.add_argument(f"date{suffix}", help="Birth date, MM/DD/YYYY")

    p = sub.add_parser("profile", help="Full numerology profile")
    person(p)
    p.add_argument("--year", type=int, default=None, help="Reference year for the Personal Year")
    p.add_argument("--details", action="store_true", help="Calculations, symbols, predictions, warnings")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_profile)

    p = sub.add_parser("match", help="Compatibility between two people")
    person(p, "1")
    person(p, "2")
    p.add_argument("--mode", choices=[m.value for m in ScoringMode], default=ScoringMode.WEIGHTED.value)
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_match)

    p = sub.add_parser("trust", help="Trust assessment between two people")
    person(p, "1")
    person(p, "2")
    p.add_argument("--relationship", choices=[r.value for r in RelationshipType], default=None)
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_trust)

    p = sub.add_parser("archetypes", help="Rank partner archetypes")
    person(p)
    p.add_argument("--top", type=int, default=config.ARCHETYPE_TOP_K)
    p.add_argument("--year", type=int, default=None, help="Reference year for sample birth dates")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_archetypes)

    p = sub.add_parser("celebrities", help="Rank compatible celebrities")
    person(p)
    p.add_argument("--top", type=int, default=config.CELEBRITY_TOP_K)
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_celebrities)

    return parser


def configure_logging():
    logger.remove()
    logger.add(
        sys.stderr,
        level=config.LOG_LEVEL,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    os.makedirs(config.LOG_DIR, exist_ok=True)
    logger.add(
        os.path.join(config.LOG_DIR, "numerology_{time:YYYY-MM-DD}.log"),
        rotation="1 day",
        retention="30 days",
        level="DEBUG",
    )


# ── Entry point ────────────────────────────────────────────────────────────────

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    try:
        return args.func(args)
    except InvalidInputError as e:
        logger.error(f"Invalid input: {e}")
        console.print(f"[bold red]Invalid input:[/bold red] {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
