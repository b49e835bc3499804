"""
Demonstration of the password generators.

Shows both policies, reproducible generation with a seeded or replayed
random source, the unshuffled pronounceable draft, and a small batch table.
"""

import numpy as np

from src.passgen import (
    BatchConfig,
    PronounceableGenerator,
    ReplayRandomSource,
    check_pronounceable,
    format_batch,
    generate,
    generate_batch,
    generate_pronounceable,
    summarize_batch,
)


def demo_single_passwords():
    print("=== Single passwords ===")
    print(f"Uniform (8):        {generate(8)}")
    print(f"Pronounceable (8):  {generate_pronounceable(8)}")

    rng = np.random.default_rng(42)
    print(f"Uniform, numpy rng: {generate(10, rng=rng)}")


def demo_reproducible():
    print("\n=== Reproducible output ===")
    draws = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5]
    first = generate_pronounceable(8, rng=ReplayRandomSource(draws))
    second = generate_pronounceable(8, rng=ReplayRandomSource(draws))
    print(f"Replayed twice: {first} / {second}")


def demo_draft():
    print("\n=== Pronounceable draft ===")
    generator = PronounceableGenerator(rng=7)
    draft = generator.build_draft(10)
    print(f"Digit:    {draft.digit.text}")
    print(f"Clusters: {[c.text for c in draft.clusters]}")
    print(f"Retries:  {draft.retries}")

    password = generator.generate(10)
    problems = check_pronounceable(password, 10)
    print(f"Password: {password} ({'valid' if not problems else problems})")


def demo_batch():
    print("\n=== Batch table ===")
    df = generate_batch(BatchConfig(rows=5, seed=1))
    print(format_batch(df))
    print()
    print(summarize_batch(df).to_string(index=False))


if __name__ == "__main__":
    demo_single_passwords()
    demo_reproducible()
    demo_draft()
    demo_batch()
