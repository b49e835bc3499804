"""
Command line entry point: print a table of generated passwords.

Odd columns hold pronounceable passwords, even columns uniform ones.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .batch import export_batch, format_batch, generate_batch, summarize_batch
from .config import DEFAULT_CONFIG_PATH, BatchConfig, load_batch_config
from .models import LengthError
from .random_source import BACKENDS

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate passwords without easily confused characters."
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help=f"YAML batch config (default: {DEFAULT_CONFIG_PATH} if present)",
    )
    parser.add_argument(
        "--rows", "-n",
        type=int,
        default=None,
        help="Number of rows to print",
    )
    parser.add_argument(
        "--lengths", "-l",
        type=int,
        nargs="+",
        default=None,
        help="Password lengths, one column pair per length",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--backend", "-b",
        choices=BACKENDS,
        default=None,
        help="Random source backend",
    )
    parser.add_argument(
        "--no-pronounceable",
        action="store_true",
        help="Only print uniform passwords",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Also export the table (.csv or .parquet)",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a per-column validity summary after the table",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable info logging",
    )
    return parser.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> BatchConfig:
    if args.config is not None:
        config = load_batch_config(args.config)
    elif DEFAULT_CONFIG_PATH.exists():
        config = load_batch_config(DEFAULT_CONFIG_PATH)
    else:
        config = BatchConfig()

    return config.with_overrides(
        rows=args.rows,
        lengths=args.lengths,
        seed=args.seed,
        backend=args.backend,
        output=args.output,
        include_pronounceable=False if args.no_pronounceable else None,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = _resolve_config(args)
        df = generate_batch(config)
        print(format_batch(df))

        if args.summary:
            print()
            print(summarize_batch(df).to_string(index=False))

        if config.output is not None:
            export_batch(df, config.output)
    except (LengthError, ValueError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
