"""
Structural checks for generated passwords.

Each check returns a list of violated rules; an empty list means the password
satisfies its policy.
"""

from typing import List, Optional

from .alphabet import SAFE_ALPHABET, AlphabetSet
from .models import CharClass, Cluster


def _classify(ch: str, alphabet: AlphabetSet) -> Optional[CharClass]:
    if alphabet.is_digit(ch):
        return CharClass.DIGIT
    if alphabet.is_vowel(ch):
        return CharClass.VOWEL
    if alphabet.is_consonant(ch):
        return CharClass.CONSONANT
    return None


def split_clusters(password: str, alphabet: AlphabetSet = SAFE_ALPHABET) -> List[Cluster]:
    """
    Split a password into maximal runs of one class.

    Letters are classified case-insensitively. Characters outside the
    alphabet raise ValueError.
    """
    clusters: List[Cluster] = []
    for ch in password:
        char_class = _classify(ch, alphabet)
        if char_class is None:
            raise ValueError(f"character {ch!r} is not in the alphabet")
        if clusters and clusters[-1].char_class == char_class:
            clusters[-1].chars.append(ch)
        else:
            clusters.append(Cluster(char_class, [ch]))
    return clusters


def check_uniform(
    password: str,
    length: Optional[int] = None,
    alphabet: AlphabetSet = SAFE_ALPHABET,
) -> List[str]:
    """Check a password against the uniform policy."""
    errors: List[str] = []
    if length is not None and len(password) != length:
        errors.append(f"length {len(password)} != {length}")
    if not alphabet.is_safe(password):
        errors.append("contains characters outside the safe alphabet")
    if not any(ch in alphabet.lower for ch in password):
        errors.append("no lowercase letter")
    if not any(ch in alphabet.upper for ch in password):
        errors.append("no uppercase letter")
    if not any(ch in alphabet.digit for ch in password):
        errors.append("no digit")
    return errors


def check_pronounceable(
    password: str,
    length: Optional[int] = None,
    alphabet: AlphabetSet = SAFE_ALPHABET,
) -> List[str]:
    """Check a password against the pronounceable policy."""
    errors: List[str] = []
    if length is not None and len(password) != length:
        errors.append(f"length {len(password)} != {length}")
    if not alphabet.is_safe(password):
        errors.append("contains characters outside the safe alphabet")
        return errors
    if any(_classify(ch, alphabet) is None for ch in password):
        errors.append("letters outside the vowel and consonant sets")
        return errors

    digit_count = sum(1 for ch in password if alphabet.is_digit(ch))
    if digit_count != 1:
        errors.append(f"expected exactly 1 digit, found {digit_count}")

    upper_count = sum(1 for ch in password if ch.isupper())
    if upper_count != 1:
        errors.append(f"expected exactly 1 uppercase letter, found {upper_count}")

    # The digit sits between two clusters of different class.
    clusters = split_clusters(password, alphabet)
    for i, cluster in enumerate(clusters[1:-1], start=1):
        before, after = clusters[i - 1], clusters[i + 1]
        if cluster.char_class is CharClass.DIGIT and before.char_class is after.char_class:
            errors.append(
                f"digit splits a {before.char_class.value} run: "
                f"{before.text}{cluster.text}{after.text}"
            )

    letters = "".join(ch for ch in password if not alphabet.is_digit(ch))
    for cluster in split_clusters(letters, alphabet):
        run = cluster.text.lower()
        if len(run) > 2:
            errors.append(f"{cluster.char_class.value} run too long: {run}")
        elif len(run) == 2:
            if cluster.char_class is CharClass.VOWEL and run[0] == run[1] and run != "ee":
                errors.append(f"repeated vowel: {run}")
            if (
                cluster.char_class is CharClass.CONSONANT
                and run[0] != run[1]
                and run not in alphabet.consonant_digraphs
            ):
                errors.append(f"consonant pair not allowed: {run}")
    return errors


def is_valid_uniform(password: str, length: Optional[int] = None) -> bool:
    return not check_uniform(password, length)


def is_valid_pronounceable(password: str, length: Optional[int] = None) -> bool:
    return not check_pronounceable(password, length)
