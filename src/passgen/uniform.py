"""
UniformGenerator: Passwords with at least one lower, upper and digit.
"""

import logging
from typing import Any, List, Optional

from .alphabet import MIN_LENGTH, SAFE_ALPHABET, AlphabetSet
from .models import LengthError
from .random_source import as_random_source, draw, shuffle_in_place

logger = logging.getLogger(__name__)


class UniformGenerator:
    """
    Generates passwords drawn uniformly from the safe alphabet.

    One lowercase letter, one uppercase letter and one digit are always
    present; every other character may come from any group. The result is
    shuffled character by character, so no positional structure remains.
    """

    def __init__(self, alphabet: AlphabetSet = SAFE_ALPHABET, rng: Any = None):
        self.alphabet = alphabet
        self.rng = as_random_source(rng)

    def generate(self, length: int) -> str:
        """Generate one password of exactly length characters."""
        if length < MIN_LENGTH:
            raise LengthError(length)

        chars: List[str] = [
            draw(self.rng, self.alphabet.lower),
            draw(self.rng, self.alphabet.upper),
            draw(self.rng, self.alphabet.digit),
        ]
        safe_all = self.alphabet.safe_all
        for _ in range(length - 3):
            chars.append(draw(self.rng, safe_all))

        shuffle_in_place(self.rng, chars)
        logger.debug("Generated uniform password of length %d", length)
        return "".join(chars)


def generate(length: int, rng: Any = None, alphabet: Optional[AlphabetSet] = None) -> str:
    """Convenience wrapper around UniformGenerator.generate()."""
    generator = UniformGenerator(alphabet=alphabet or SAFE_ALPHABET, rng=rng)
    return generator.generate(length)
