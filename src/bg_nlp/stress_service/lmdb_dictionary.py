#!/usr/bin/env python3
"""
Offline Bulgarian stress dictionary backed by LMDB.

Each key is a lowercase word, each value a MsgPack-encoded StressEntryDict
with the character indices of its stressed vowels. The dictionary is built
once from a list of accented words and opened read-only afterwards.

Uses MsgPack serialization and LMDB append mode for fast exports, and
zero-copy memory-mapped reads for lookups.
"""

import shutil
from pathlib import Path
from logging import getLogger
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence

import lmdb
import msgpack

from src.bg_nlp.stress_service.types import StressEntryDict
from src.bg_nlp.utils.stress_marks import (
    add_stress_marks,
    find_stress_marks,
    has_stress_mark,
    split_punctuation,
)

logger = getLogger(__name__)

# LMDB needs a handful of pages even for a tiny dictionary
MIN_MAP_SIZE = 4 * 1024 * 1024


def read_accented_words(lines: Iterable[str]) -> Dict[str, List[int]]:
    """
    Collect stress positions from lines of accented words.

    Every whitespace-separated token carrying a stress mark becomes one
    entry; unmarked tokens are skipped. Later lines win for repeated words.

    Example:
        >>> read_accented_words(["черѐша", "свѐтлосѝн град"])
        {'череша': [3], 'светлосин': [2, 7]}
    """
    entries: Dict[str, List[int]] = {}
    for line in lines:
        for token in line.split():
            if not has_stress_mark(token):
                continue
            bare, positions = find_stress_marks(token.lower())
            entries[bare] = positions
    return entries


class LMDBStressDictionaryExporter:
    """
    Write a stress dictionary to LMDB format optimized for read-only access.

    Usage:
        exporter = LMDBStressDictionaryExporter("data/stress_bg.lmdb")
        exporter.export({"череша": [3], "град": [2]})
    """

    def __init__(self, db_path: Path):
        """
        Initialize LMDB exporter.

        Args:
            db_path: Path to LMDB database directory
        """
        self.db_path = Path(db_path)

    def _estimate_map_size(self, entries: Mapping[str, Sequence[int]]) -> int:
        """
        Estimate the map size needed for ``entries``.

        Samples up to 1000 entries, extrapolates, and adds room for the
        B+ tree pages and a safety margin.
        """
        sample_size = 0
        sample_count = 0
        for word, positions in entries.items():
            if sample_count >= 1000:
                break
            sample_size += len(word.encode("utf-8"))
            sample_size += len(msgpack.packb({"stress": list(positions)}, use_bin_type=True))
            sample_count += 1

        estimated_data = int(sample_size / sample_count * len(entries)) if sample_count else 0
        overhead_factor = 1.15
        safety_margin = 1.10
        map_size = max(MIN_MAP_SIZE, int(estimated_data * overhead_factor * safety_margin))

        logger.info(f"Map size with overhead: {map_size / (1024*1024):.2f} MB")
        return map_size

    def export(
        self,
        entries: Mapping[str, Sequence[int]],
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ) -> int:
        """
        Export word -> stress positions to a fresh LMDB database.

        Deletes an existing database at the same path first. Keys are
        lowercased and written in sorted order with MDB_APPEND.

        Args:
            entries: Mapping of words to stressed vowel indices
            progress_callback: Optional callback(current, total)

        Returns:
            Number of entries written
        """
        records = {word.lower(): list(positions) for word, positions in entries.items()}
        logger.info(f"Exporting {len(records):,} words to LMDB at {self.db_path}")

        map_size = self._estimate_map_size(records)

        if self.db_path.exists():
            logger.info(f"Removing existing database at {self.db_path}")
            shutil.rmtree(self.db_path)
        self.db_path.mkdir(parents=True, exist_ok=True)

        env = lmdb.open(
            str(self.db_path),
            map_size=map_size,
            max_dbs=0,
            readonly=False,
            sync=True,
            metasync=True,
        )

        try:
            total = len(records)
            with env.begin(write=True) as txn:
                for idx, word in enumerate(sorted(records), 1):
                    entry: StressEntryDict = {"stress": records[word]}
                    value = msgpack.packb(entry, use_bin_type=True)
                    # UTF-8 byte order equals code point order, so sorted keys append cleanly
                    txn.put(word.encode("utf-8"), value, append=True)

                    if progress_callback and (idx % 10000 == 0 or idx == total):
                        progress_callback(idx, total)

            with env.begin() as txn:
                written = txn.stat()["entries"]
            logger.info(f"✓ Export complete: {written:,} entries")
            return written
        finally:
            env.close()


class LMDBStressDictionary:
    """
    Stress lookup backed by an exported LMDB dictionary.

    Usage:
        with LMDBStressDictionary("data/stress_bg.lmdb") as dictionary:
            dictionary.lookup("черешата е сладка")
    """

    def __init__(self, db_path: Path):
        """
        Open the dictionary read-only.

        Args:
            db_path: Path to LMDB database directory

        Raises:
            FileNotFoundError: If the database directory does not exist
        """
        self.db_path = Path(db_path)
        self.env = None

        if not self.db_path.exists():
            raise FileNotFoundError(
                f"Stress dictionary not found at {self.db_path}. "
                f"Run scripts/build_stress_dictionary.py to create it."
            )

        self.env = lmdb.open(
            str(self.db_path),
            readonly=True,
            lock=False,
            readahead=True,
            max_dbs=0,
        )
        logger.info(f"Stress dictionary opened: {self.db_path}")

    def stress_positions(self, word: str) -> Optional[List[int]]:
        """
        Stressed vowel indices of ``word``, or None if it is not in the dictionary.

        Raises:
            RuntimeError: If the dictionary has been closed
        """
        if not self.env:
            raise RuntimeError("Stress dictionary is closed")

        with self.env.begin(buffers=True) as txn:
            value = txn.get(word.lower().encode("utf-8"))
            if value is None:
                return None
            entry: StressEntryDict = msgpack.unpackb(value, raw=False)
            return list(entry["stress"])

    def lookup(self, text: str) -> str:
        """
        Mark the stressed vowels of every word of ``text`` found in the dictionary.

        Punctuation around a word is kept; words the dictionary does not
        know are left as they are. Already marked text is returned unchanged.
        """
        if has_stress_mark(text):
            return text

        tokens = []
        for token in text.split(" "):
            prefix, word, suffix = split_punctuation(token)
            positions = self.stress_positions(word) if word else None
            if positions:
                word = add_stress_marks(word, positions)
            else:
                logger.debug(f"Word not found: {word}")
            tokens.append(prefix + word + suffix)
        return " ".join(tokens)

    def close(self):
        """Close database connection."""
        if self.env:
            self.env.close()
            self.env = None
            logger.info("Stress dictionary closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

