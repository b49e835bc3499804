"""
Batch configuration: which passwords to generate and where to write them.

Configuration lives in YAML under a top-level ``batch`` key:

    batch:
      rows: 10
      lengths: [6, 8, 10]
      include_pronounceable: true
      seed: null
      backend: stdlib
      output: null
"""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .alphabet import MIN_LENGTH
from .models import LengthError
from .random_source import BACKENDS

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/passgen.yaml")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class BatchConfig:
    """Configuration for a batch of passwords."""
    rows: int = 10
    lengths: List[int] = field(default_factory=lambda: [6, 8, 10])
    include_pronounceable: bool = True
    seed: Optional[int] = None
    backend: str = "stdlib"
    output: Optional[Path] = None

    def __post_init__(self):
        """Validate configuration."""
        if not _is_int(self.rows):
            raise ValueError(f"rows must be an integer, got {self.rows!r}")
        if not isinstance(self.lengths, list) or not all(_is_int(n) for n in self.lengths):
            raise ValueError(f"lengths must be a list of integers, got {self.lengths!r}")
        if self.seed is not None and not _is_int(self.seed):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")
        if self.rows <= 0:
            raise ValueError("rows must be positive")
        if not self.lengths:
            raise ValueError("lengths must not be empty")
        for length in self.lengths:
            if length < MIN_LENGTH:
                raise LengthError(length)
        if len(set(self.lengths)) != len(self.lengths):
            logger.warning("Duplicate lengths in batch config: %s", self.lengths)
            self.lengths = list(dict.fromkeys(self.lengths))
        if self.backend not in BACKENDS:
            raise ValueError(
                f"Unknown random backend: {self.backend}. Available: {', '.join(BACKENDS)}"
            )
        if self.backend == "secure" and self.seed is not None:
            logger.warning("Seed %s ignored by the secure backend", self.seed)
        if self.output is not None:
            self.output = Path(self.output)

    def with_overrides(self, **overrides: Any) -> "BatchConfig":
        """Return a copy with non-None overrides applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return BatchConfig(**values)


def parse_batch_config(data: Optional[Dict[str, Any]]) -> BatchConfig:
    """Build a BatchConfig from a parsed mapping (missing keys use defaults)."""
    data = data or {}
    if not isinstance(data, dict):
        raise ValueError("batch config must be a mapping")
    known = {f.name for f in fields(BatchConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown batch config keys: {', '.join(sorted(unknown))}")
    return BatchConfig(**data)


def load_batch_config(config_path: Path) -> BatchConfig:
    """Load a BatchConfig from YAML."""
    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: expected a mapping at the top level")

    config = parse_batch_config(data.get("batch", {}))
    logger.info("Loaded batch config from %s", config_path)
    return config
