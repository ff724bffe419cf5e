from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field

from .types import Chunk, MergeResult


class Stats(BaseModel):
    total_files: int = 0
    total_records: int = 0
    duplicates_removed: int = 0


class ChunkSummary(BaseModel):
    index: int = Field(ge=1)
    records: int
    size: int = Field(description="Serialized size in bytes")
    size_kb: float
    download_url: str

    @classmethod
    def from_chunk(cls, chunk: Chunk) -> "ChunkSummary":
        return cls(
            index=chunk.index,
            records=len(chunk.records),
            size=chunk.size,
            size_kb=round(chunk.size / 1024, 2),
            download_url=f"/chunks/{chunk.index}/download",
        )


class ProcessResponse(BaseModel):
    files: List[str] = Field(default_factory=list)
    stats: Stats
    chunks: List[ChunkSummary] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: MergeResult) -> "ProcessResponse":
        return cls(
            files=list(result.files),
            stats=Stats(
                total_files=result.stats.total_files,
                total_records=result.stats.total_records,
                duplicates_removed=result.stats.duplicates_removed,
            ),
            chunks=[ChunkSummary.from_chunk(chunk) for chunk in result.chunks],
        )


class ChunkListResponse(BaseModel):
    chunks: List[ChunkSummary] = Field(default_factory=list)


class BackgroundResponse(BaseModel):
    url: Optional[str] = None


class HealthResponse(BaseModel):
    ok: bool = True
