"""Refile endpoints for the API."""

import asyncio

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from norgrefile.config import NORGREFILE_WORKSPACE
from norgrefile.documents import FileDocumentStore
from norgrefile.exceptions import DocumentAccessError
from norgrefile.headings import extract_headings
from server.models import HeadingEntry, HeadingsResponse, RefileErrorResponse, RefileRequest
from server.refile_processor import process_refile

router = APIRouter()

COMMON_REFILE_RESPONSES = {
    status.HTTP_403_FORBIDDEN: {"model": RefileErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": RefileErrorResponse},
    status.HTTP_409_CONFLICT: {"model": RefileErrorResponse},
    422: {"model": RefileErrorResponse},
}


def get_document_store() -> FileDocumentStore:
    """Open a fresh store per request; documents may change between calls."""
    return FileDocumentStore(NORGREFILE_WORKSPACE)


@router.post("/api/refile", responses=COMMON_REFILE_RESPONSES)
async def api_refile(
    refile_request: RefileRequest,
    store: FileDocumentStore = Depends(get_document_store),
) -> JSONResponse:
    """Refile the heading or list item at a position under a target heading.

    **The node enclosing ``line``/``column`` of ``source`` is moved under the
    target heading of ``target_document``,** with its heading levels
    renumbered. The source is only modified once the insertion succeeded.

    **Returns**

    - **JSONResponse**: Success response with the inserted line range, or an
      error response with the matching HTTP status code

    """
    status_code, response = await process_refile(refile_request, store)
    return JSONResponse(status_code=status_code, content=response.model_dump())


@router.get("/api/headings", response_model=HeadingsResponse)
async def api_headings(
    document: str,
    store: FileDocumentStore = Depends(get_document_store),
) -> HeadingsResponse:
    """List the headings of a workspace document.

    **Raises**

    - **HTTPException**: **403** - the path points outside the workspace
    - **HTTPException**: **404** - the document does not exist

    """
    try:
        path = store.path_for(document)
    except DocumentAccessError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc

    if not path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Document {document!r} not found")

    opened = await asyncio.to_thread(store.open, document)
    headings = [
        HeadingEntry(title=record.title, level=record.depth, line=record.node.range.start_row + 1)
        for record in extract_headings(opened.parse(), opened.lines)
    ]
    return HeadingsResponse(document=opened.document_id, headings=headings)
