"""
AlphabetTables: The reduced, visually unambiguous character set.

Excluded glyphs: o O 0 Q 1 i j l I z Z y Y g q 9
"z" and "y" are also dropped because they swap places on QWERTY/QWERTZ layouts.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple


MIN_LENGTH = 4

EXCLUDED_CHARS = "oO0Q1ijlIzZyYgq9"

LOWER_CHARS = "abcdefhkmnprstuvwx"
UPPER_CHARS = "ABCDEFGHJKLMNPRSTUVWX"
DIGIT_CHARS = "2345678"
VOWEL_CHARS = "aeu"
CONSONANT_CHARS = "bcdfhkmnprstvwx"

# Consonant pairs allowed to run together besides identical letters
CONSONANT_DIGRAPHS = frozenset(["ch", "kh", "ph", "sh", "th"])


@dataclass(frozen=True)
class AlphabetSet:
    """
    Partition of the safe alphabet used by both generators.

    Character groups are tuples so that a draw of index ``k`` always maps to
    the same character.
    """
    lower: Tuple[str, ...]
    upper: Tuple[str, ...]
    digit: Tuple[str, ...]
    vowel: Tuple[str, ...]
    consonant: Tuple[str, ...]
    consonant_digraphs: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        """Validate the partition."""
        lower = set(self.lower)
        if not set(self.vowel) <= lower:
            raise ValueError("vowels must be lowercase letters of the alphabet")
        if not set(self.consonant) <= lower:
            raise ValueError("consonants must be lowercase letters of the alphabet")
        if set(self.vowel) & set(self.consonant):
            raise ValueError("vowels and consonants must not overlap")
        # The pronounceable generator uppercases one vowel or consonant
        missing = {ch.upper() for ch in self.vowel + self.consonant} - set(self.upper)
        if missing:
            raise ValueError(f"uppercase forms missing from alphabet: {''.join(sorted(missing))}")
        for digraph in self.consonant_digraphs:
            if len(digraph) != 2 or not set(digraph) <= set(self.consonant):
                raise ValueError(f"invalid consonant digraph: {digraph!r}")
        excluded = set(EXCLUDED_CHARS) & set(self.safe_all)
        if excluded:
            raise ValueError(f"ambiguous characters in alphabet: {''.join(sorted(excluded))}")

    @property
    def safe_all(self) -> Tuple[str, ...]:
        """All safe characters: lower + upper + digit."""
        return self.lower + self.upper + self.digit

    def is_safe(self, text: str) -> bool:
        """True if every character of text belongs to the safe alphabet."""
        allowed = set(self.safe_all)
        return all(ch in allowed for ch in text)

    def is_vowel(self, ch: str) -> bool:
        return ch.lower() in self.vowel

    def is_consonant(self, ch: str) -> bool:
        return ch.lower() in self.consonant

    def is_digit(self, ch: str) -> bool:
        return ch in self.digit


SAFE_ALPHABET = AlphabetSet(
    lower=tuple(LOWER_CHARS),
    upper=tuple(UPPER_CHARS),
    digit=tuple(DIGIT_CHARS),
    vowel=tuple(VOWEL_CHARS),
    consonant=tuple(CONSONANT_CHARS),
    consonant_digraphs=CONSONANT_DIGRAPHS,
)
