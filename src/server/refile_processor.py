"""Run refile requests against a workspace document store."""

from __future__ import annotations

import asyncio

from fastapi import status

from norgrefile.documents import FileDocumentStore
from norgrefile.exceptions import (
    AmbiguousTargetError,
    DocumentAccessError,
    HeadingDepthError,
    NoRefilableNodeError,
    RefileError,
    SelfRefileError,
    TargetNotFoundError,
)
from norgrefile.refile import Refiler
from norgrefile.schemas import RefileResult, RefileTarget
from norgrefile.utils.logging_config import get_logger
from server.models import RefileErrorResponse, RefileRequest, RefileSuccessResponse

# Initialize logger for this module
logger = get_logger(__name__)

# Checked in order, so subclasses come before their bases.
_ERROR_STATUS: tuple[tuple[type[RefileError], int], ...] = (
    (NoRefilableNodeError, 422),
    (AmbiguousTargetError, status.HTTP_409_CONFLICT),
    (TargetNotFoundError, status.HTTP_404_NOT_FOUND),
    (SelfRefileError, status.HTTP_409_CONFLICT),
    (HeadingDepthError, 422),
    (DocumentAccessError, status.HTTP_403_FORBIDDEN),
)


def error_status(exc: RefileError) -> int:
    """Map a refile error to the HTTP status reported to the client."""
    for error_type, code in _ERROR_STATUS:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def process_refile(
    request: RefileRequest,
    store: FileDocumentStore,
) -> tuple[int, RefileSuccessResponse | RefileErrorResponse]:
    """Refile the node a request points at and write both documents back.

    Parameters
    ----------
    request : RefileRequest
        The validated API request.
    store : FileDocumentStore
        Store rooted at the served workspace.

    Returns
    -------
    tuple[int, RefileSuccessResponse | RefileErrorResponse]
        HTTP status code and response body.

    """
    try:
        result = await asyncio.to_thread(_refile_and_save, request, store)
    except RefileError as exc:
        _print_error(request, exc)
        return error_status(exc), RefileErrorResponse(error=str(exc), kind=type(exc).__name__)

    _print_success(request)
    return status.HTTP_200_OK, RefileSuccessResponse(
        source_document=result.source_document,
        target_document=result.target_document,
        heading_title=result.heading_title,
        heading_level=result.heading_depth,
        inserted_start=result.inserted_start + 1,
        inserted_end=result.inserted_end,
        reindented=result.reindented,
    )


def _refile_and_save(request: RefileRequest, store: FileDocumentStore) -> RefileResult:
    """Blocking part of :func:`process_refile`; every file read and write happens here."""
    refiler = Refiler(store, strict_targets=request.strict)
    target = RefileTarget(
        document_id=store.document_id_for(request.target_document),
        heading_title=request.heading_title,
        heading_depth=request.heading_level,
    )
    node = refiler.node_at_position(
        store.document_id_for(request.source),
        request.line - 1,
        request.column - 1,
    )
    result = refiler.refile(node, target)
    store.save_all()
    return result


def _print_error(request: RefileRequest, exc: Exception) -> None:
    logger.error(
        "Refile failed",
        extra={
            "source": request.source,
            "line": request.line,
            "target": request.target_document,
            "heading": request.heading_title,
            "error": str(exc),
        },
    )


def _print_success(request: RefileRequest) -> None:
    logger.info(
        "Refile completed successfully",
        extra={
            "source": request.source,
            "line": request.line,
            "target": request.target_document,
            "heading": request.heading_title,
        },
    )
