import logging
from typing import List, Optional

from fastapi import FastAPI, UploadFile, File, HTTPException, Query, Response

from .background import random_background
from .config import get_settings
from .export import export_chunk
from .merge import merge_sources
from .models import BackgroundResponse, ChunkListResponse, ChunkSummary, HealthResponse, ProcessResponse
from .reader import FileReadError, read_uploads
from .rules import EXPORT_MEDIA_TYPE

logger = logging.getLogger(__name__)

NO_INPUT_MESSAGE = "Please select at least one CSV file."
READ_FAILURE_MESSAGE = "Error processing files. Please try again."

app = FastAPI(
    title="csv-merger",
    description="Merge, normalize and deduplicate phone number CSV files into fixed-size parts",
    version="0.1.0",
)
# result of the last successful run; a failed run leaves it as it was
app.state.last_result = None


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/process", response_model=ProcessResponse)
async def process_files(files: Optional[List[UploadFile]] = File(None)):
    if not files:
        raise HTTPException(status_code=400, detail=NO_INPUT_MESSAGE)

    try:
        sources = await read_uploads(files)
    except FileReadError as exc:
        logger.error("Error reading files: %s", exc)
        raise HTTPException(status_code=422, detail=READ_FAILURE_MESSAGE) from exc

    result = merge_sources(sources)
    app.state.last_result = result
    return ProcessResponse.from_result(result)


@app.get("/result", response_model=ProcessResponse)
def last_result():
    result = app.state.last_result
    if result is None:
        raise HTTPException(status_code=404, detail="No files processed yet")
    return ProcessResponse.from_result(result)


@app.get("/chunks", response_model=ChunkListResponse)
def list_chunks():
    result = app.state.last_result
    if result is None:
        return ChunkListResponse()
    return ChunkListResponse(chunks=[ChunkSummary.from_chunk(chunk) for chunk in result.chunks])


@app.get("/chunks/{index}/download")
def download_chunk(index: int):
    result = app.state.last_result
    if result is None or not 1 <= index <= len(result.chunks):
        raise HTTPException(status_code=404, detail=f"No chunk {index}")

    filename, content = export_chunk(result.chunks[index - 1])
    return Response(
        content=content,
        media_type=EXPORT_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.get("/background", response_model=BackgroundResponse)
def background(width: int = Query(1920, ge=1)):
    return {"url": random_background(get_settings(), width)}
