"""Tests for random source adapters and draw helpers."""

import random

import numpy as np
import pytest

from src.passgen.random_source import (
    NumpyRandomSource,
    RandomSource,
    ReplayRandomSource,
    SecureRandomSource,
    StdlibRandomSource,
    as_random_source,
    draw,
    make_random_source,
    shuffle_in_place,
)


class _MaxRng:
    """Always returns the largest allowed value."""

    def randbelow(self, n):
        return n - 1


@pytest.mark.parametrize(
    "source",
    [
        StdlibRandomSource(seed=1),
        NumpyRandomSource(seed=1),
        SecureRandomSource(),
        ReplayRandomSource([5, 17, 3]),
    ],
)
def test_adapters_stay_in_range(source):
    assert isinstance(source, RandomSource)
    for n in (1, 2, 7, 46):
        for _ in range(50):
            value = source.randbelow(n)
            assert isinstance(value, int)
            assert 0 <= value < n


@pytest.mark.parametrize("source", [StdlibRandomSource(seed=1), SecureRandomSource()])
def test_empty_range_rejected(source):
    with pytest.raises(ValueError):
        source.randbelow(0)


def test_seeded_sources_repeat():
    a = StdlibRandomSource(seed=42)
    b = StdlibRandomSource(seed=42)
    assert [a.randbelow(100) for _ in range(20)] == [b.randbelow(100) for _ in range(20)]

    c = NumpyRandomSource(seed=42)
    d = NumpyRandomSource(seed=42)
    assert [c.randbelow(100) for _ in range(20)] == [d.randbelow(100) for _ in range(20)]


def test_replay_reduces_and_cycles():
    source = ReplayRandomSource([9, 1])

    assert source.randbelow(7) == 2
    assert source.randbelow(7) == 1
    assert source.randbelow(4) == 1  # cycles back to 9
    source.reset()
    assert source.randbelow(10) == 9


def test_replay_requires_values():
    with pytest.raises(ValueError):
        ReplayRandomSource([])


def test_make_random_source_backends():
    assert isinstance(make_random_source(1, "stdlib"), StdlibRandomSource)
    assert isinstance(make_random_source(1, "numpy"), NumpyRandomSource)
    assert isinstance(make_random_source(None, "secure"), SecureRandomSource)
    with pytest.raises(ValueError):
        make_random_source(1, "mersenne")


def test_as_random_source_coercion():
    rng = random.Random(3)
    wrapped = as_random_source(rng)
    assert isinstance(wrapped, StdlibRandomSource)
    assert wrapped.rng is rng

    np_rng = np.random.default_rng(3)
    np_wrapped = as_random_source(np_rng)
    assert isinstance(np_wrapped, NumpyRandomSource)
    assert np_wrapped.rng is np_rng

    custom = _MaxRng()
    assert as_random_source(custom) is custom

    assert isinstance(as_random_source(None), StdlibRandomSource)

    seeded_a = as_random_source(11)
    seeded_b = as_random_source(11)
    assert seeded_a.randbelow(1000) == seeded_b.randbelow(1000)


@pytest.mark.parametrize("bad", ["seed", 1.5, True, object()])
def test_as_random_source_rejects_unknown(bad):
    with pytest.raises(TypeError):
        as_random_source(bad)


def test_draw_uses_index():
    assert draw(_MaxRng(), ("a", "b", "c")) == "c"
    assert draw(ReplayRandomSource([1]), ("a", "b", "c")) == "b"


def test_shuffle_in_place_is_permutation():
    items = list("abcdefgh")
    shuffle_in_place(StdlibRandomSource(seed=5), items)
    assert sorted(items) == list("abcdefgh")


def test_shuffle_with_max_source_keeps_order():
    items = [1, 2, 3, 4]
    shuffle_in_place(_MaxRng(), items)
    assert items == [1, 2, 3, 4]


def test_shuffle_with_zero_source_rotates():
    items = [1, 2, 3, 4]
    shuffle_in_place(ReplayRandomSource([0]), items)
    assert items == [2, 3, 4, 1]
