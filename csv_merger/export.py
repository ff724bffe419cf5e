from __future__ import annotations

from datetime import date
from typing import Optional

from .merge import serialize_records
from .rules import EXPORT_DATE_FORMAT, EXPORT_FILENAME, OUTPUT_ENCODING
from .types import Chunk


def export_filename(index: int, today: Optional[date] = None) -> str:
    # the date is taken when the chunk is exported, not when it was built
    today = today or date.today()
    return EXPORT_FILENAME.format(date=today.strftime(EXPORT_DATE_FORMAT), index=index)


def export_chunk(chunk: Chunk, today: Optional[date] = None) -> tuple[str, bytes]:
    """Return (filename, content) for one chunk; no header row is written."""
    content = serialize_records(chunk.records).encode(OUTPUT_ENCODING)
    return export_filename(chunk.index, today), content
