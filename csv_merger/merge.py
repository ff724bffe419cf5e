"""
Normalize, merge, deduplicate and chunk phone-number records.

Pipeline (left to right, no feedback):
- each file's text is split on newlines, blank lines and the header dropped
- every data line gets one leading zero stripped and the country prefix added
- all records go into one insertion-ordered set shared by every file
- the unique sequence is cut into contiguous chunks of CHUNK_SIZE
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .rules import (
    CHUNK_SIZE,
    COUNTRY_PREFIX,
    LINE_SEPARATOR,
    OUTPUT_ENCODING,
    STRIPPED_LEADING_CHAR,
)
from .types import Chunk, MergeResult, ProcessingStats, SourceFile

logger = logging.getLogger(__name__)


def normalize_value(value: str) -> str:
    """
    Apply the fixed phone rule to one trimmed value.

    Only a single leading zero is removed and the prefix is always added, so
    the rule is not idempotent: "971501234567" becomes "971971501234567".
    """
    if value.startswith(STRIPPED_LEADING_CHAR):
        value = value[1:]
    return COUNTRY_PREFIX + value


def data_lines(text: str) -> list[str]:
    """Non-blank, trimmed lines of one file with the header line removed."""
    rows = [row.strip() for row in text.split("\n")]
    rows = [row for row in rows if row != ""]
    # first surviving line is the header
    return rows[1:]


def normalize_text(text: str) -> list[str]:
    return [normalize_value(line) for line in data_lines(text)]


class Corpus:
    """Unique records across all files, kept in first-seen order."""

    def __init__(self) -> None:
        self._records: dict[str, None] = {}
        self.total_records = 0

    def add_all(self, records: Iterable[str]) -> None:
        for record in records:
            self.total_records += 1
            self._records.setdefault(record, None)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record: object) -> bool:
        return record in self._records

    @property
    def records(self) -> list[str]:
        return list(self._records)

    @property
    def duplicates_removed(self) -> int:
        return self.total_records - len(self._records)


def serialize_records(records: Sequence[str]) -> str:
    return LINE_SEPARATOR.join(records)


def serialized_size(records: Sequence[str]) -> int:
    return len(serialize_records(records).encode(OUTPUT_ENCODING))


def chunk_records(records: Sequence[str], chunk_size: int = CHUNK_SIZE) -> list[Chunk]:
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")

    chunks: list[Chunk] = []
    for start in range(0, len(records), chunk_size):
        part = tuple(records[start : start + chunk_size])
        chunks.append(
            Chunk(
                index=len(chunks) + 1,
                records=part,
                size=serialized_size(part),
            )
        )
    return chunks


def merge_sources(sources: Sequence[SourceFile]) -> MergeResult:
    """
    Build the full result for one batch of decoded files.

    Sources are consumed in the order given, which fixes the record order of
    the corpus regardless of the order in which the reads finished.
    """
    corpus = Corpus()
    for source in sources:
        records = normalize_text(source.text)
        logger.debug("file %s contributed %d records", source.name, len(records))
        corpus.add_all(records)

    unique = corpus.records
    chunks = chunk_records(unique)
    stats = ProcessingStats(
        total_files=len(sources),
        total_records=corpus.total_records,
        duplicates_removed=corpus.duplicates_removed,
    )
    logger.info(
        "merged %d files: %d records, %d unique, %d duplicates removed, %d chunks",
        stats.total_files,
        stats.total_records,
        len(unique),
        stats.duplicates_removed,
        len(chunks),
    )
    return MergeResult(
        files=tuple(source.name for source in sources),
        stats=stats,
        chunks=tuple(chunks),
    )
