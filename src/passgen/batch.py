"""
Batch generation: a table of passwords across several lengths.

Each row holds, for every configured length, a pronounceable password followed
by a uniform one, e.g. ``pron_6 uniform_6 pron_8 uniform_8 pron_10 uniform_10``.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from .config import BatchConfig
from .pronounceable import PronounceableGenerator
from .random_source import as_random_source, make_random_source
from .uniform import UniformGenerator
from .validation import is_valid_pronounceable, is_valid_uniform

logger = logging.getLogger(__name__)

PRONOUNCEABLE_PREFIX = "pron"
UNIFORM_PREFIX = "uniform"


def batch_columns(config: BatchConfig) -> List[str]:
    """Column names in output order."""
    columns: List[str] = []
    for length in config.lengths:
        if config.include_pronounceable:
            columns.append(f"{PRONOUNCEABLE_PREFIX}_{length}")
        columns.append(f"{UNIFORM_PREFIX}_{length}")
    return columns


def generate_batch(config: Optional[BatchConfig] = None, rng: Any = None) -> pd.DataFrame:
    """
    Generate a table of passwords.

    Args:
        config: Batch configuration (uses defaults if None)
        rng: Random source; if None one is built from config.seed/backend

    Returns:
        DataFrame with config.rows rows and one column per (policy, length)
    """
    config = config or BatchConfig()
    if rng is None:
        source = make_random_source(seed=config.seed, backend=config.backend)
    else:
        source = as_random_source(rng)

    pronounceable = PronounceableGenerator(rng=source)
    uniform = UniformGenerator(rng=source)

    records: List[Dict[str, str]] = []
    for _ in range(config.rows):
        record: Dict[str, str] = {}
        for length in config.lengths:
            if config.include_pronounceable:
                record[f"{PRONOUNCEABLE_PREFIX}_{length}"] = pronounceable.generate(length)
            record[f"{UNIFORM_PREFIX}_{length}"] = uniform.generate(length)
        records.append(record)

    logger.info(
        "Generated %d rows x %d columns (lengths: %s)",
        config.rows, len(batch_columns(config)), config.lengths,
    )
    return pd.DataFrame(records, columns=batch_columns(config))


def format_batch(df: pd.DataFrame) -> str:
    """Render the table as plain text, one space-separated row per line."""
    lines = [" ".join(str(value) for value in row) for row in df.itertuples(index=False)]
    return "\n".join(lines)


def _parse_column(column: str) -> Dict[str, Any]:
    policy, _, length = column.rpartition("_")
    return {"policy": policy, "length": int(length)}


def summarize_batch(df: pd.DataFrame) -> pd.DataFrame:
    """Count structurally valid passwords per column."""
    records = []
    for column in df.columns:
        info = _parse_column(column)
        if info["policy"] == PRONOUNCEABLE_PREFIX:
            check = is_valid_pronounceable
        else:
            check = is_valid_uniform
        valid = sum(1 for value in df[column] if check(value, info["length"]))
        records.append({
            "column": column,
            "policy": info["policy"],
            "length": info["length"],
            "count": len(df),
            "valid": valid,
        })
    return pd.DataFrame(records, columns=["column", "policy", "length", "count", "valid"])


def export_batch(df: pd.DataFrame, output_path: Path) -> Path:
    """Export the table to .csv or .parquet, chosen by file suffix."""
    output_path = Path(output_path)
    suffix = output_path.suffix.lower()
    if suffix not in (".csv", ".parquet"):
        raise ValueError(f"Unsupported export format: {output_path.suffix or '(none)'}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".parquet":
        df.to_parquet(output_path, index=False)
    else:
        df.to_csv(output_path, index=False)

    logger.info("Wrote %d rows to %s", len(df), output_path)
    return output_path
