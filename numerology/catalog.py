"""
Candidate catalogs — fixed data the matchers rank against.

  ARCHETYPES       hand-authored numerological partner archetypes
  CELEBRITIES      celebrity roster; numbers are always computed from the
                   birth date and stage name, never typed in
  FAMOUS_COUPLES   real couples used as examples for an archetype's Life Path
  conflict tables  Life Path / Destiny / Soul Urge numbers that tend to clash
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Tuple

from numerology.models import CoreNumbers


@dataclass(frozen=True)
class Archetype:
    code: str
    title: str
    life_path: int
    destiny: int
    soul_urge: int

    @property
    def core(self) -> CoreNumbers:
        return CoreNumbers(life_path=self.life_path, destiny=self.destiny, soul_urge=self.soul_urge)


@dataclass(frozen=True)
class Celebrity:
    name: str
    birth_date: str
    profession: str


@dataclass(frozen=True)
class FamousCouple:
    person1: str
    person2: str
    birth_date1: str
    birth_date2: str
    relationship: str
    story: str


# ── Archetypes ────────────────────────────────────────────────────────────────
# (code, title, life path, destiny, soul urge). Every Life Path has at least three.

ARCHETYPES: Tuple[Archetype, ...] = tuple(Archetype(*row) for row in (
    ("trailblazer",             "The Trailblazer",             1, 1, 5),
    ("bold-visionary",          "The Bold Visionary",          1, 3, 9),
    ("independent-strategist",  "The Independent Strategist",  1, 8, 7),
    ("pioneer-spirit",          "The Pioneer Spirit",          1, 5, 3),
    ("gentle-diplomat",         "The Gentle Diplomat",         2, 6, 2),
    ("devoted-partner",         "The Devoted Partner",         2, 4, 6),
    ("empathic-listener",       "The Empathic Listener",       2, 9, 2),
    ("supportive-strategist",   "The Supportive Strategist",   2, 8, 4),
    ("joyful-storyteller",      "The Joyful Storyteller",      3, 3, 5),
    ("warm-entertainer",        "The Warm Entertainer",        3, 6, 9),
    ("charismatic-muse",        "The Charismatic Muse",        3, 1, 3),
    ("steady-architect",        "The Steady Architect",        4, 4, 8),
    ("loyal-builder",           "The Loyal Builder",           4, 2, 6),
    ("careful-planner",         "The Careful Planner",         4, 8, 4),
    ("free-spirit",             "The Free Spirit",             5, 5, 1),
    ("curious-wanderer",        "The Curious Wanderer",        5, 3, 7),
    ("restless-adventurer",     "The Restless Adventurer",     5, 9, 5),
    ("home-maker",              "The Home Maker",              6, 6, 2),
    ("compassionate-healer",    "The Compassionate Healer",    6, 9, 6),
    ("creative-nurturer",       "The Creative Nurturer",       6, 3, 4),
    ("family-anchor",           "The Family Anchor",           6, 2, 8),
    ("quiet-mystic",            "The Quiet Mystic",            7, 7, 9),
    ("deep-thinker",            "The Deep Thinker",            7, 1, 7),
    ("truth-seeker",            "The Seeker of Truth",         7, 5, 3),
    ("power-partner",           "The Power Partner",           8, 8, 4),
    ("grounded-executive",      "The Grounded Executive",      8, 4, 2),
    ("ambitious-achiever",      "The Ambitious Achiever",      8, 1, 8),
    ("old-soul",                "The Old Soul",                9, 9, 6),
    ("generous-idealist",       "The Generous Idealist",       9, 6, 3),
    ("artistic-humanitarian",   "The Artistic Humanitarian",   9, 3, 9),
    ("wise-wanderer",           "The Wise Wanderer",           9, 1, 5),
    ("intuitive-illuminator",   "The Intuitive Illuminator",  11, 2, 6),
    ("spiritual-messenger",     "The Spiritual Messenger",    11, 11, 2),
    ("inspired-dreamer",        "The Inspired Dreamer",       11, 6, 11),
    ("master-builder",          "The Master Builder",         22, 4, 8),
    ("visionary-architect",     "The Visionary Architect",    22, 22, 4),
    ("practical-idealist",      "The Practical Idealist",     22, 8, 6),
    ("master-teacher",          "The Master Teacher",         33, 6, 9),
    ("loving-guide",            "The Loving Guide",           33, 33, 6),
    ("healer-of-hearts",        "The Healer of Hearts",       33, 9, 33),
))

# ── Archetype prose, keyed by Life Path root ──────────────────────────────────

MATCH_STRENGTHS = MappingProxyType({
    1: ("Leadership balance", "Mutual independence", "Shared ambition"),
    2: ("Emotional harmony", "Great communication", "Supportive partnership"),
    3: ("Creative synergy", "Fun and laughter", "Artistic collaboration"),
    4: ("Stable foundation", "Practical planning", "Long-term commitment"),
    5: ("Adventure together", "Freedom respect", "Exciting experiences"),
    6: ("Nurturing love", "Family focus", "Caring support"),
    7: ("Deep connection", "Spiritual growth", "Intellectual bond"),
    8: ("Success partnership", "Material stability", "Achievement focus"),
    9: ("Humanitarian goals", "Wisdom sharing", "Compassionate love"),
})
DEFAULT_MATCH_STRENGTHS = ("Understanding", "Growth", "Balance")

MATCH_CHALLENGES = MappingProxyType({
    1: ("Power struggles", "Independence vs togetherness", "Ego conflicts"),
    2: ("Over-sensitivity", "Indecision making", "Avoiding confrontation"),
    3: ("Scattered energy", "Inconsistent focus", "Superficial tendencies"),
    4: ("Rigid thinking", "Resistance to change", "Workaholism"),
    5: ("Commitment issues", "Restlessness", "Need for variety"),
    6: ("Over-responsibility", "Perfectionism", "Martyrdom"),
    7: ("Emotional distance", "Over-analysis", "Social withdrawal"),
    8: ("Materialism focus", "Work-life balance", "Status competition"),
    9: ("Idealistic expectations", "Giving too much", "Emotional overwhelm"),
})
DEFAULT_MATCH_CHALLENGES = ("Communication", "Balance", "Understanding")

IDEAL_TRAITS = MappingProxyType({
    1: ("Confident", "Independent", "Supportive", "Ambitious"),
    2: ("Patient", "Understanding", "Harmonious", "Gentle"),
    3: ("Creative", "Optimistic", "Social", "Expressive"),
    4: ("Reliable", "Practical", "Loyal", "Hardworking"),
    5: ("Adventurous", "Open-minded", "Fun-loving", "Flexible"),
    6: ("Caring", "Responsible", "Family-oriented", "Nurturing"),
    7: ("Intellectual", "Spiritual", "Intuitive", "Deep"),
    8: ("Successful", "Organized", "Determined", "Materially stable"),
    9: ("Compassionate", "Wise", "Humanitarian", "Understanding"),
})
DEFAULT_IDEAL_TRAITS = ("Understanding", "Kind", "Loyal", "Supportive")

RELATIONSHIP_STYLES = MappingProxyType({
    1: "You prefer to take the lead in relationships and need a partner who appreciates your independence while providing steady support.",
    2: "You're naturally cooperative and seek harmony. You thrive with a partner who values communication and emotional connection.",
    3: "You bring joy and creativity to relationships. You need someone who appreciates your expressiveness and shares your zest for life.",
    4: "You value stability and loyalty. You work best with someone who shares your practical approach and long-term vision.",
    5: "You need freedom and variety in love. Your ideal partner gives you space while joining you on life's adventures.",
    6: "You're naturally nurturing and family-focused. You need someone who appreciates your caring nature and shares your values.",
    7: "You prefer deep, meaningful connections over surface-level romance. You need someone who respects your need for solitude and spiritual growth.",
    8: "You approach love with the same determination as your career. You need a partner who supports your ambitions and shares your drive for success.",
    9: "You love with your whole heart and need someone who shares your compassionate nature and idealistic worldview.",
})
DEFAULT_RELATIONSHIP_STYLE = (
    "You value deep, meaningful connections and seek a partner who understands and supports your unique nature."
)

# ── Celebrities ───────────────────────────────────────────────────────────────

CELEBRITIES: Tuple[Celebrity, ...] = tuple(Celebrity(*row) for row in (
    ("Taylor Swift",        "12/13/1989", "Singer-Songwriter"),
    ("Leonardo DiCaprio",   "11/11/1974", "Actor"),
    ("Oprah Winfrey",       "01/29/1954", "Media Mogul"),
    ("Brad Pitt",           "12/18/1963", "Actor"),
    ("Angelina Jolie",      "06/04/1975", "Actress"),
    ("Jennifer Aniston",    "02/11/1969", "Actress"),
    ("George Clooney",      "05/06/1961", "Actor"),
    ("Scarlett Johansson",  "11/22/1984", "Actress"),
    ("Ryan Gosling",        "11/12/1980", "Actor"),
    ("Emma Stone",          "11/06/1988", "Actress"),
    ("Chris Hemsworth",     "08/11/1983", "Actor"),
    ("Zendaya",             "09/01/1996", "Actress"),
    ("Tom Holland",         "06/01/1996", "Actor"),
    ("Margot Robbie",       "07/02/1990", "Actress"),
    ("Timothée Chalamet",   "12/27/1995", "Actor"),
    ("Ariana Grande",       "06/26/1993", "Singer"),
    ("Selena Gomez",        "07/22/1992", "Singer-Actress"),
    ("Justin Bieber",       "03/01/1994", "Singer"),
    ("Dua Lipa",            "08/22/1995", "Singer"),
    ("Shawn Mendes",        "08/08/1998", "Singer"),
    ("Billie Eilish",       "12/18/2001", "Singer"),
    ("Harry Styles",        "02/01/1994", "Singer-Actor"),
    ("Dwayne Johnson",      "05/02/1972", "Actor"),
    ("Gal Gadot",           "04/30/1985", "Actress"),
    ("Michael B. Jordan",   "02/09/1987", "Actor"),
    ("Zac Efron",           "10/18/1987", "Actor"),
    ("Anne Hathaway",       "11/12/1982", "Actress"),
    ("Ryan Reynolds",       "10/23/1976", "Actor"),
    ("Blake Lively",        "08/25/1987", "Actress"),
    ("Chris Evans",         "06/13/1981", "Actor"),
    ("Jennifer Lawrence",   "08/15/1990", "Actress"),
    ("Natalie Portman",     "06/09/1981", "Actress"),
    ("Emma Watson",         "04/15/1990", "Actress"),
    ("Robert Downey Jr.",   "04/04/1965", "Actor"),
    ("Priyanka Chopra",     "07/18/1982", "Actress"),
    ("Rihanna",             "02/20/1988", "Singer"),
    ("Beyoncé",             "09/04/1981", "Singer"),
    ("Drake",               "10/24/1986", "Rapper"),
    ("The Weeknd",          "02/16/1990", "Singer"),
    ("Lady Gaga",           "03/28/1986", "Singer-Actress"),
))

# ── Famous couples ────────────────────────────────────────────────────────────

FAMOUS_COUPLES: Tuple[FamousCouple, ...] = tuple(FamousCouple(*row) for row in (
    ("Will Smith", "Jada Pinkett Smith", "09/25/1968", "09/18/1971", "Married 1997-2016",
     "Strong individual personalities that supported each other's careers"),
    ("Beyoncé", "Jay-Z", "09/04/1981", "12/04/1969", "Married since 2008",
     "Practical foundation with spiritual depth. Both born on the 4th!"),
    ("Barack Obama", "Michelle Obama", "08/04/1961", "01/17/1964", "Married since 1992",
     "Perfect balance of leadership and cooperation"),
    ("Victoria Beckham", "David Beckham", "04/17/1974", "05/02/1975", "Married since 1999",
     "Nurturing love meets adventurous spirit"),
    ("Johnny Depp", "Vanessa Paradis", "06/09/1963", "12/22/1972", "Together 1998-2012",
     "Artistic depth with material success"),
    ("Ryan Reynolds", "Blake Lively", "10/23/1976", "08/25/1987", "Married since 2012",
     "Creativity balanced with stability"),
    ("Kim Kardashian", "Kanye West", "10/21/1980", "06/08/1977", "Married 2014-2022",
     "Practical business sense with creative genius"),
    ("Prince William", "Kate Middleton", "06/21/1982", "01/09/1982", "Married since 2011",
     "Diplomatic leadership with graceful communication. Born the same year!"),
    ("John Legend", "Chrissy Teigen", "12/28/1978", "11/30/1985", "Married since 2013",
     "Artistic leadership with entrepreneurial spirit"),
    ("Justin Timberlake", "Jessica Biel", "01/31/1981", "03/03/1982", "Married since 2012",
     "Grounded creativity with spiritual seeking"),
    ("Ashton Kutcher", "Mila Kunis", "02/07/1978", "08/14/1983", "Married since 2015",
     "Twin souls, both analytical and intuitive"),
    ("Blake Shelton", "Gwen Stefani", "06/18/1976", "10/03/1969", "Married since 2021",
     "Harmony of cooperation and leadership"),
    ("George Clooney", "Amal Clooney", "05/06/1961", "02/03/1978", "Married since 2014",
     "Leadership meets brilliant communication"),
    ("Tom Hanks", "Rita Wilson", "07/09/1956", "10/26/1956", "Married since 1988",
     "Creativity with business acumen. Born the same year!"),
    ("Matthew McConaughey", "Camila Alves", "11/04/1969", "01/28/1982", "Married since 2012",
     "Stability meets independence"),
    ("Ellen DeGeneres", "Portia de Rossi", "01/26/1958", "01/31/1973", "Married since 2008",
     "Freedom balanced with stability. Both born in January!"),
    ("Chris Hemsworth", "Elsa Pataky", "08/11/1983", "07/18/1976", "Married since 2010",
     "Practical love with nurturing devotion"),
    ("Kristen Bell", "Dax Shepard", "07/18/1980", "01/02/1975", "Married since 2013",
     "Spiritual depth meets leadership"),
))

# ── Conflict tables ───────────────────────────────────────────────────────────
# Masters missing from the Destiny / Soul Urge tables resolve through their root.

INCOMPATIBLE_LIFE_PATHS = MappingProxyType({
    1: (2, 4, 6, 8),
    2: (1, 3, 5, 7, 9),
    3: (2, 4, 7, 8),
    4: (1, 3, 5, 7, 9),
    5: (2, 4, 6, 8),
    6: (1, 5, 7),
    7: (2, 3, 4, 6, 8),
    8: (1, 3, 5, 7, 9),
    9: (2, 4, 8),
    11: (1, 3, 4, 5, 7, 8, 9),
    22: (1, 2, 3, 5, 6, 7, 9),
    33: (1, 2, 3, 4, 5, 7, 8),
})

DESTINY_CONFLICTS = MappingProxyType({
    1: (2, 4),
    2: (1, 8),
    3: (4, 8),
    4: (1, 3, 5),
    5: (4, 6),
    6: (5, 8),
    7: (3, 8),
    8: (2, 3, 6, 7),
    9: (1, 8),
})

SOUL_URGE_CONFLICTS = MappingProxyType({
    1: (2, 6),
    2: (1, 5),
    3: (4, 7),
    4: (3, 5),
    5: (2, 4, 6),
    6: (1, 5),
    7: (3, 8),
    8: (2, 7, 9),
    9: (1, 8),
})
