"""Resolve a refile target to a heading of the target document."""

from __future__ import annotations

from typing import Sequence

from norgrefile.exceptions import AmbiguousTargetError
from norgrefile.schemas import HeadingRecord, RefileTarget


def find_target_heading(
    headings: Sequence[HeadingRecord],
    target: RefileTarget,
    *,
    strict: bool = False,
) -> HeadingRecord | None:
    """Find the heading matching the target title and depth.

    Titles are compared exactly. When several headings match, the first one
    in document order wins; with ``strict=True`` the duplicate is an error
    instead.

    Raises:
        AmbiguousTargetError: In strict mode, if more than one heading matches.
    """
    matches = (
        record
        for record in headings
        if record.title == target.heading_title and record.depth == target.heading_depth
    )
    first = next(matches, None)
    if strict and first is not None and next(matches, None) is not None:
        raise AmbiguousTargetError(
            f"More than one level {target.heading_depth} heading is titled "
            f"'{target.heading_title}' in {target.document_id}"
        )
    return first
