"""
Letter-value tables — Pythagorean system.

The full alphabet cycles 1–9:

    1  2  3  4  5  6  7  8  9
    A  B  C  D  E  F  G  H  I
    J  K  L  M  N  O  P  Q  R
    S  T  U  V  W  X  Y  Z

i.e. value(letter) = ((ord(letter) − ord('A')) mod 9) + 1.
Vowels are A, E, I, O, U. Y always counts as a consonant.
"""
import re
import unicodedata
from types import MappingProxyType

PYTHAGOREAN_MAP = MappingProxyType({
    'A': 1, 'B': 2, 'C': 3, 'D': 4, 'E': 5, 'F': 6, 'G': 7, 'H': 8, 'I': 9,
    'J': 1, 'K': 2, 'L': 3, 'M': 4, 'N': 5, 'O': 6, 'P': 7, 'Q': 8, 'R': 9,
    'S': 1, 'T': 2, 'U': 3, 'V': 4, 'W': 5, 'X': 6, 'Y': 7, 'Z': 8,
})

VOWELS = frozenset("AEIOU")

VOWEL_VALUES = MappingProxyType({
    letter: value for letter, value in PYTHAGOREAN_MAP.items() if letter in VOWELS
})

CONSONANT_VALUES = MappingProxyType({
    letter: value for letter, value in PYTHAGOREAN_MAP.items() if letter not in VOWELS
})

_NON_LETTERS = re.compile(r"[^A-Z]")


def letter_value(letter: str) -> int:
    """Pythagorean value of a single A–Z letter (case-insensitive)."""
    return ((ord(letter.upper()) - ord('A')) % 9) + 1


def clean_name(full_name: str) -> str:
    """
    Uppercase A–Z letters of a name, everything else dropped.

    Accented letters are folded to their base letter first, so
    "Zoë" → "ZOE" and "Beyoncé" → "BEYONCE".
    """
    folded = unicodedata.normalize("NFKD", full_name)
    ascii_only = folded.encode("ascii", "ignore").decode("ascii")
    return _NON_LETTERS.sub("", ascii_only.upper())


def vowels_of(clean: str) -> str:
    return "".join(ch for ch in clean if ch in VOWELS)


def consonants_of(clean: str) -> str:
    return "".join(ch for ch in clean if ch not in VOWELS)
