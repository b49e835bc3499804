"""
Random sources: the single capability both generators draw from.

A source only has to return uniform integers in [0, n). Adapters wrap the
usual generators (random.Random, numpy Generator, secrets) and a replaying
source makes generation reproducible in tests.
"""

import random
import secrets
from typing import Any, List, MutableSequence, Optional, Protocol, Sequence, TypeVar, runtime_checkable

import numpy as np


T = TypeVar("T")

BACKENDS = ("stdlib", "numpy", "secure")


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can draw a uniform integer in [0, n)."""

    def randbelow(self, n: int) -> int:
        ...


def _check_bound(n: int) -> None:
    if n <= 0:
        raise ValueError(f"cannot draw from an empty range (n={n})")


class StdlibRandomSource:
    """Draws from a random.Random instance."""

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def randbelow(self, n: int) -> int:
        _check_bound(n)
        return self.rng.randrange(n)


class NumpyRandomSource:
    """Draws from a numpy Generator (np.random.default_rng)."""

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def randbelow(self, n: int) -> int:
        _check_bound(n)
        return int(self.rng.integers(n))


class SecureRandomSource:
    """Draws from the operating system CSPRNG. Cannot be seeded."""

    def randbelow(self, n: int) -> int:
        _check_bound(n)
        return secrets.randbelow(n)


class ReplayRandomSource:
    """
    Replays a fixed sequence of draws.

    Each stored value is reduced modulo the requested bound, and the sequence
    starts over when exhausted, so any sequence drives any password length.
    """

    def __init__(self, values: Sequence[int]):
        if not values:
            raise ValueError("replay sequence must not be empty")
        self.values: List[int] = [int(v) for v in values]
        self.position = 0

    def randbelow(self, n: int) -> int:
        _check_bound(n)
        value = self.values[self.position % len(self.values)]
        self.position += 1
        return value % n

    def reset(self) -> None:
        self.position = 0


def make_random_source(seed: Optional[int] = None, backend: str = "stdlib") -> RandomSource:
    """Create a random source by backend name."""
    if backend == "stdlib":
        return StdlibRandomSource(seed=seed)
    if backend == "numpy":
        return NumpyRandomSource(seed=seed)
    if backend == "secure":
        return SecureRandomSource()
    raise ValueError(f"Unknown random backend: {backend}. Available: {', '.join(BACKENDS)}")


def as_random_source(rng: Any = None) -> RandomSource:
    """
    Coerce rng into a RandomSource.

    Args:
        rng: None (fresh unseeded source), an int seed, a random.Random,
            a numpy Generator, or an object with randbelow()

    Returns:
        A RandomSource
    """
    if rng is None:
        return StdlibRandomSource()
    # bool is an int subclass; a seed of True is almost certainly a mistake
    if isinstance(rng, bool):
        raise TypeError("a bool is not a valid random seed")
    if isinstance(rng, int):
        return StdlibRandomSource(seed=rng)
    if isinstance(rng, random.Random):
        return StdlibRandomSource(rng=rng)
    if isinstance(rng, np.random.Generator):
        return NumpyRandomSource(rng=rng)
    if isinstance(rng, RandomSource):
        return rng
    raise TypeError(f"Cannot use {type(rng).__name__} as a random source")


def draw(rng: RandomSource, choices: Sequence[T]) -> T:
    """Pick one element of choices uniformly."""
    return choices[rng.randbelow(len(choices))]


def shuffle_in_place(rng: RandomSource, items: MutableSequence[T]) -> None:
    """Uniform Fisher-Yates shuffle driven by the random source."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randbelow(i + 1)
        items[i], items[j] = items[j], items[i]
