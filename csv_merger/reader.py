"""
Concurrent reading and decoding of uploaded files.

All reads are started together and joined; the first failure fails the
whole batch and nothing read so far is kept.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from charset_normalizer import from_bytes
from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from .types import SourceFile

logger = logging.getLogger(__name__)


class FileReadError(Exception):
    """Raised when any file of a batch cannot be read or decoded."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"{name}: {reason}")
        self.name = name


def decode_text(raw: bytes, name: str = "<input>") -> str:
    """
    Decode raw bytes to text.

    Rules:
    - Strict UTF-8 first; a UTF-8 BOM is dropped.
    - Otherwise detect the encoding best-effort via charset-normalizer.
    - If neither works, the file is unreadable.
    """
    if not raw:
        return ""

    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        utf8_error = exc

    # only consulted for non-UTF-8 input; short UTF-8 text can be misread as utf_16
    match = from_bytes(raw).best()
    if match is not None:
        try:
            return raw.decode(match.encoding)
        except (UnicodeDecodeError, LookupError):
            pass

    raise FileReadError(name, f"cannot decode content ({utf8_error.reason})") from utf8_error


async def read_upload(upload: UploadFile) -> SourceFile:
    name = upload.filename or "<unnamed>"
    if not name.lower().endswith(".csv"):
        logger.warning("file %s does not have a .csv extension, reading it anyway", name)

    try:
        raw = await upload.read()
    except OSError as exc:
        raise FileReadError(name, str(exc)) from exc

    # encoding detection is CPU bound
    text = await run_in_threadpool(decode_text, raw, name)
    return SourceFile(name=name, text=text)


async def read_uploads(uploads: Sequence[UploadFile]) -> list[SourceFile]:
    """
    Read every upload concurrently; results keep the order of `uploads`.

    On the first failure the remaining reads are cancelled and awaited before
    the error propagates.
    """
    tasks = [asyncio.ensure_future(read_upload(upload)) for upload in uploads]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
