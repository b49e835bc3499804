"""
Password generation without visually ambiguous characters.

Two policies share one reduced alphabet:
- uniform: at least one lowercase, uppercase and digit, the rest uniform
- pronounceable: alternating vowel/consonant clusters with one digit
"""

from .alphabet import MIN_LENGTH, SAFE_ALPHABET, AlphabetSet
from .models import (
    CharClass,
    Cluster,
    LengthError,
    PasswordDraft,
    RunState,
)
from .random_source import (
    NumpyRandomSource,
    RandomSource,
    ReplayRandomSource,
    SecureRandomSource,
    StdlibRandomSource,
    as_random_source,
    make_random_source,
)
from .uniform import UniformGenerator, generate
from .pronounceable import PronounceableGenerator, generate_pronounceable
from .validation import (
    check_pronounceable,
    check_uniform,
    is_valid_pronounceable,
    is_valid_uniform,
    split_clusters,
)
from .config import BatchConfig, load_batch_config
from .batch import export_batch, format_batch, generate_batch, summarize_batch

__all__ = [
    # Alphabet
    "MIN_LENGTH",
    "SAFE_ALPHABET",
    "AlphabetSet",
    # Models
    "CharClass",
    "Cluster",
    "LengthError",
    "PasswordDraft",
    "RunState",
    # Random sources
    "RandomSource",
    "StdlibRandomSource",
    "NumpyRandomSource",
    "SecureRandomSource",
    "ReplayRandomSource",
    "as_random_source",
    "make_random_source",
    # Generators
    "UniformGenerator",
    "PronounceableGenerator",
    "generate",
    "generate_pronounceable",
    # Validation
    "check_uniform",
    "check_pronounceable",
    "is_valid_uniform",
    "is_valid_pronounceable",
    "split_clusters",
    # Batch
    "BatchConfig",
    "load_batch_config",
    "generate_batch",
    "format_batch",
    "summarize_batch",
    "export_batch",
]
