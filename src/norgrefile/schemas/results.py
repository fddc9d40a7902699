"""Refile outcome models."""

from __future__ import annotations

from pydantic import BaseModel


class InsertionResult(BaseModel):
    """Outcome of inserting text under a target heading.

    Attributes:
        target_document: Document that received the text.
        heading_title: Title of the heading the text was placed under.
        heading_depth: Depth of that heading.
        inserted_start: First inserted row (zero-based).
        inserted_end: Row after the last inserted row.
        reindented: False when the reindentation pass failed.
    """

    target_document: str
    heading_title: str
    heading_depth: int
    inserted_start: int
    inserted_end: int
    reindented: bool = True


class RefileResult(InsertionResult):
    """Outcome of a full refile, including the removal from the source.

    Attributes:
        source_document: Document the node was taken from.
        removed_start: First removed row of the source, before insertion shifts.
        removed_end: Row after the last removed row.
    """

    source_document: str
    removed_start: int
    removed_end: int
