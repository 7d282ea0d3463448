#!/usr/bin/env python3
"""
Stress Dictionary Builder

Builds the offline LMDB stress dictionary used by LMDBStressDictionary
from a UTF-8 word list. Every line holds one or more words with a
combining accent after each stressed vowel, e.g. "черѐша".

Usage:
    python scripts/build_stress_dictionary.py words.txt --output data/stress_bg.lmdb
"""

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

# Add repository root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.bg_nlp.stress_service import LMDBStressDictionary, LMDBStressDictionaryExporter, read_accented_words


def main():
    parser = argparse.ArgumentParser(
        description="Build the LMDB stress dictionary from a stress-marked word list"
    )
    parser.add_argument(
        'input',
        type=Path,
        help="Word list with combining accents marking stressed vowels"
    )
    parser.add_argument(
        '--output',
        type=Path,
        default=Path(__file__).parent.parent / "data" / "stress_bg.lmdb",
        help="Path to output LMDB directory (default: data/stress_bg.lmdb)"
    )
    parser.add_argument(
        '--check',
        nargs='*',
        default=[],
        help="Words to look up in the finished dictionary"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    logger = logging.getLogger("StressDictionaryBuilder")

    if not args.input.exists():
        logger.error(f"Word list not found: {args.input}")
        return 1

    with open(args.input, encoding="utf-8") as f:
        entries = read_accented_words(f)
    logger.info(f"Read {len(entries):,} stressed words from {args.input}")

    if not entries:
        logger.error("No stress-marked words found, nothing to export")
        return 1

    pbar = tqdm(total=len(entries), desc="Exporting entries", ncols=100)

    def on_progress(current, total):
        pbar.update(current - pbar.n)

    try:
        written = LMDBStressDictionaryExporter(args.output).export(entries, progress_callback=on_progress)
    except Exception as e:
        logger.error(f"✗ Export failed: {e}", exc_info=True)
        return 1
    finally:
        pbar.close()

    logger.info(f"✓ Wrote {written:,} entries to {args.output}")

    if args.check:
        with LMDBStressDictionary(args.output) as dictionary:
            for word in args.check:
                logger.info(f"  {word}: {dictionary.lookup(word)}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
