"""Pydantic models for the refile API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class RefileRequest(BaseModel):
    """Request model for the /api/refile endpoint.

    Attributes
    ----------
    source : str
        Workspace-relative path of the document holding the node.
    line : int
        1-based line inside the node to refile.
    column : int
        1-based column inside the node.
    target_document : str
        Workspace-relative path of the document receiving the node.
    heading_title : str
        Exact title of the target heading.
    heading_level : int
        Level of the target heading.
    strict : bool
        Fail when several headings match the target.

    """

    source: str = Field(..., description="Document holding the node to move")
    line: int = Field(..., ge=1, description="1-based line inside the node")
    column: int = Field(default=1, ge=1, description="1-based column inside the node")
    target_document: str = Field(..., description="Document receiving the node")
    heading_title: str = Field(..., description="Exact title of the target heading")
    heading_level: int = Field(..., ge=1, le=7, description="Level of the target heading")
    strict: bool = Field(default=False, description="Reject ambiguous targets")

    @field_validator("source", "target_document")
    @classmethod
    def validate_document(cls, v: str) -> str:
        """Validate that document paths are not empty."""
        if not v.strip():
            err = "document path cannot be empty"
            raise ValueError(err)
        return v.strip()


class RefileSuccessResponse(BaseModel):
    """Success response model for the /api/refile endpoint.

    Attributes
    ----------
    source_document : str
        Document the node was removed from.
    target_document : str
        Document that received the node.
    heading_title : str
        Heading the node was placed under.
    heading_level : int
        Level of that heading.
    inserted_start : int
        First inserted line (1-based).
    inserted_end : int
        Last inserted line (1-based).
    reindented : bool
        Whether the reindentation pass succeeded.

    """

    source_document: str
    target_document: str
    heading_title: str
    heading_level: int
    inserted_start: int
    inserted_end: int
    reindented: bool


class RefileErrorResponse(BaseModel):
    """Error response model for the refile API.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.
    kind : str
        Name of the error condition.

    """

    error: str = Field(..., description="Error message")
    kind: str = Field(..., description="Error condition")


class HeadingEntry(BaseModel):
    """A heading of a workspace document."""

    title: str
    level: int
    line: int


class HeadingsResponse(BaseModel):
    """Headings of a document, in document order."""

    document: str
    headings: list[HeadingEntry]
