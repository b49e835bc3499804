"""
PronounceableGenerator: Passwords built from alternating vowel/consonant clusters.

Rules:
- exactly 1 digit and exactly 1 forced uppercase letter (the first one placed)
- at most 2 vowels in a row, and they must differ unless both are "e"
- at most 2 consonants in a row, and they must be identical or a known digraph
  (ch, kh, ph, sh, th)

Generation happens in three steps:
1. build_draft: a small state machine places letters one position at a time
2. shuffle_clusters: clusters are shuffled within their parity slots, which
   keeps vowel and consonant clusters alternating
3. insert_digit: the digit is dropped in between two clusters
"""

import logging
from typing import Any, List, Optional, Tuple

from .alphabet import MIN_LENGTH, SAFE_ALPHABET, AlphabetSet
from .models import (
    LETTER_CLASSES,
    CharClass,
    Cluster,
    LengthError,
    PasswordDraft,
    RunState,
)
from .random_source import as_random_source, draw, shuffle_in_place

logger = logging.getLogger(__name__)


# A rejected extension flips the class, and a new cluster of the other
# class is always accepted, so every position settles within two attempts.
MAX_ATTEMPTS = 2


class PronounceableGenerator:
    """Generates pronounceable passwords from the safe alphabet."""

    def __init__(self, alphabet: AlphabetSet = SAFE_ALPHABET, rng: Any = None):
        self.alphabet = alphabet
        self.rng = as_random_source(rng)

    def generate(self, length: int) -> str:
        """Generate one password of exactly length characters."""
        draft = self.build_draft(length)
        clusters = self.shuffle_clusters(draft.clusters)
        ordered = self.insert_digit(clusters, draft.digit)
        password = "".join(cluster.text for cluster in ordered)
        logger.debug(
            "Generated pronounceable password of length %d (%d clusters, %d retries)",
            length, len(draft.clusters), draft.retries,
        )
        return password

    def build_draft(self, length: int) -> PasswordDraft:
        """
        Run the cluster state machine for length - 1 letters.

        Args:
            length: Requested password length, digit included

        Returns:
            Unshuffled PasswordDraft; clusters alternate in class
        """
        if length < MIN_LENGTH:
            raise LengthError(length)

        digit = Cluster(CharClass.DIGIT, [draw(self.rng, self.alphabet.digit)])
        draft = PasswordDraft(digit=digit)

        for _ in range(length - 1):
            self._place_letter(draft)

        return draft

    def _place_letter(self, draft: PasswordDraft) -> None:
        """Place exactly one letter, flipping class once if needed."""
        pick = LETTER_CLASSES[self.rng.randbelow(len(LETTER_CLASSES))]

        for _ in range(MAX_ATTEMPTS):
            if self._try_place(draft, pick):
                return
            pick = pick.opposite()
            draft.retries += 1

        raise RuntimeError(f"could not place letter after {MAX_ATTEMPTS} attempts")

    def _try_place(self, draft: PasswordDraft, pick: CharClass) -> bool:
        """Try to place a letter of class pick. Returns False if rejected."""
        ch = draw(self.rng, self._letters_of(pick))
        state = draft.state

        if state is None:
            draft.clusters.append(Cluster(pick, [ch.upper()]))
            draft.state = RunState(char_class=pick, run_length=1, last_char=ch)
            return True

        if pick == state.char_class:
            if not self._can_extend(state, ch):
                return False
            draft.clusters[-1].chars.append(ch)
            draft.state = RunState(
                char_class=pick,
                run_length=state.run_length + 1,
                last_char=ch,
            )
            return True

        draft.clusters.append(Cluster(pick, [ch]))
        draft.state = RunState(char_class=pick, run_length=1, last_char=ch)
        return True

    def _can_extend(self, state: RunState, ch: str) -> bool:
        """Check whether ch may join the open cluster."""
        if state.run_length >= 2:
            return False
        if state.char_class is CharClass.VOWEL:
            return ch != state.last_char or ch == "e"
        return ch == state.last_char or state.last_char + ch in self.alphabet.consonant_digraphs

    def _letters_of(self, char_class: CharClass) -> Tuple[str, ...]:
        if char_class is CharClass.VOWEL:
            return self.alphabet.vowel
        if char_class is CharClass.CONSONANT:
            return self.alphabet.consonant
        raise ValueError(f"not a letter class: {char_class}")

    def shuffle_clusters(self, clusters: List[Cluster]) -> List[Cluster]:
        """
        Shuffle clusters without breaking the vowel/consonant alternation.

        Even-indexed and odd-indexed clusters are shuffled separately and put
        back into slots of the same parity.
        """
        even = clusters[0::2]
        odd = clusters[1::2]
        shuffle_in_place(self.rng, even)
        shuffle_in_place(self.rng, odd)

        shuffled: List[Cluster] = list(clusters)
        shuffled[0::2] = even
        shuffled[1::2] = odd
        return shuffled

    def insert_digit(self, clusters: List[Cluster], digit: Cluster) -> List[Cluster]:
        """Insert the digit cluster at a random cluster boundary."""
        index = self.rng.randbelow(len(clusters) + 1)
        return clusters[:index] + [digit] + clusters[index:]


def generate_pronounceable(
    length: int,
    rng: Any = None,
    alphabet: Optional[AlphabetSet] = None,
) -> str:
    """Convenience wrapper around PronounceableGenerator.generate()."""
    generator = PronounceableGenerator(alphabet=alphabet or SAFE_ALPHABET, rng=rng)
    return generator.generate(length)
