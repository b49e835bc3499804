"""
Data models for password generation.

The pronounceable generator builds a draft out of clusters; these models keep
the cluster state explicit instead of tracking it in loose local variables.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .alphabet import MIN_LENGTH


class LengthError(ValueError):
    """Raised when a requested password length is below the minimum."""

    def __init__(self, length: int, minimum: int = MIN_LENGTH):
        self.length = length
        self.minimum = minimum
        super().__init__(f"password length must be at least {minimum}, got {length}")


class CharClass(Enum):
    """Character class of a cluster."""
    VOWEL = "vowel"
    CONSONANT = "consonant"
    DIGIT = "digit"

    def opposite(self) -> "CharClass":
        """The other letter class."""
        if self is CharClass.VOWEL:
            return CharClass.CONSONANT
        if self is CharClass.CONSONANT:
            return CharClass.VOWEL
        raise ValueError("digits have no opposite class")


# Order matters: a draw of 0 picks a vowel, 1 a consonant
LETTER_CLASSES = (CharClass.VOWEL, CharClass.CONSONANT)


@dataclass
class Cluster:
    """One or two adjacent characters of the same class."""
    char_class: CharClass
    chars: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(self.chars)

    def __len__(self) -> int:
        return len(self.chars)


@dataclass
class RunState:
    """
    State of the pronounceable state machine after a letter is placed.

    last_char is always lowercase so the uppercased first letter still
    compares against the lowercase alphabet.
    """
    char_class: CharClass
    run_length: int
    last_char: str


@dataclass
class PasswordDraft:
    """
    Pre-shuffle pronounceable password: one digit plus alternating clusters.
    """
    digit: Cluster
    clusters: List[Cluster] = field(default_factory=list)
    state: Optional[RunState] = None
    retries: int = 0

    @property
    def length(self) -> int:
        return len(self.digit) + sum(len(c) for c in self.clusters)

    @property
    def letters(self) -> str:
        return "".join(c.text for c in self.clusters)

    def is_alternating(self) -> bool:
        """True if no two neighbouring clusters share a class."""
        return all(
            a.char_class != b.char_class
            for a, b in zip(self.clusters, self.clusters[1:])
        )
