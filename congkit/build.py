#!/usr/bin/env python3
"""
Table Builder for congkit.

Parses the text table and writes two binary tables:
- the full table, every category
- the trimmed table, Big5 and HKSCS characters only

Usage:
    python -m congkit.build [--table PATH] [--full PATH] [--trimmed PATH]
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from congkit.entry import CongkitFilter, Entry
from congkit.errors import CongkitError
from congkit.table import encode_entries, to_entries

logger = logging.getLogger(__name__)


# ============================================================================
# Paths
# ============================================================================

DEFAULT_TABLE = Path("data") / "table.txt"
DEFAULT_FULL = Path("data") / "full_table.dat"
DEFAULT_TRIMMED = Path("data") / "trimmed_table.dat"

TRIMMED_FILTER = CongkitFilter(chinese=False, big5=True, hkscs=True, taiwanese=False)


# ============================================================================
# Building
# ============================================================================

def save_table(entries: List[Entry], output_path: Path):
    """Encode entries and save them as a binary table."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(encode_entries(entries))

    file_size = output_path.stat().st_size / 1024
    logger.info(f"Saved {len(entries)} entries to {output_path} ({file_size:.1f} KB)")


def build_tables(table_path: Path, full_path: Path, trimmed_path: Path):
    """Build the full and trimmed binary tables from a text table."""
    logger.info(f"Parsing {table_path}...")
    text = table_path.read_text(encoding='utf-8')

    full = to_entries(text, CongkitFilter.for_all())
    save_table(full, full_path)

    trimmed = to_entries(text, TRIMMED_FILTER)
    save_table(trimmed, trimmed_path)

    return full, trimmed


# ============================================================================
# Main
# ============================================================================

def main(argv: Optional[List[str]] = None):
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    parser = argparse.ArgumentParser(
        description="Build congkit binary tables from the text table"
    )
    parser.add_argument(
        '--table', '-t',
        type=Path,
        default=DEFAULT_TABLE,
        help=f"Path to the text table (default: {DEFAULT_TABLE})"
    )
    parser.add_argument(
        '--full', '-f',
        type=Path,
        default=DEFAULT_FULL,
        help=f"Output full table path (default: {DEFAULT_FULL})"
    )
    parser.add_argument(
        '--trimmed', '-r',
        type=Path,
        default=DEFAULT_TRIMMED,
        help=f"Output trimmed table path (default: {DEFAULT_TRIMMED})"
    )

    args = parser.parse_args(argv)

    if not args.table.exists():
        logger.error(f"Text table not found: {args.table}")
        sys.exit(1)

    start_time = time.time()
    try:
        build_tables(args.table, args.full, args.trimmed)
    except CongkitError as e:
        logger.error(f"Build failed: {e}")
        sys.exit(1)

    elapsed = time.time() - start_time
    logger.info(f"Build completed in {elapsed:.1f} seconds")


if __name__ == '__main__':
    main()
