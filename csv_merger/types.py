from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SourceFile:
    name: str
    text: str


@dataclass(frozen=True)
class Chunk:
    index: int
    records: tuple[str, ...]
    size: int


@dataclass(frozen=True)
class ProcessingStats:
    total_files: int
    total_records: int
    duplicates_removed: int


@dataclass(frozen=True)
class MergeResult:
    files: tuple[str, ...]
    stats: ProcessingStats
    chunks: tuple[Chunk, ...] = field(default_factory=tuple)
