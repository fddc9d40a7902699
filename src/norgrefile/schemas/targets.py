"""Refile target models."""

from __future__ import annotations

import re
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from norgrefile.schemas.nodes import OutlineNode

_SELECTION_PREFIX_RE = re.compile(r"^\s*(\**)")
_SELECTION_TITLE_RE = re.compile(r"^\s*\**\s+(.*)$")


class RefileTarget(BaseModel):
    """Where refiled content must land.

    Attributes:
        document_id: Identifier of the target document.
        heading_title: Exact title text of the target heading.
        heading_depth: Depth of the target heading (number of ``*`` markers).
    """

    model_config = ConfigDict(frozen=True)

    document_id: str
    heading_title: str
    heading_depth: int = Field(..., ge=1, le=7)

    @classmethod
    def from_selection(cls, text: str, document_id: str) -> RefileTarget:
        """Build a target from a raw heading line picked by the user.

        Raises:
            ValueError: If the line is not a heading line.
        """
        level = len(_SELECTION_PREFIX_RE.match(text).group(1))
        title_match = _SELECTION_TITLE_RE.match(text)
        if level == 0 or title_match is None:
            raise ValueError(f"Selection is not a heading line: {text!r}")
        return cls(
            document_id=document_id,
            heading_title=title_match.group(1),
            heading_depth=level,
        )


@dataclass(frozen=True)
class HeadingRecord:
    """A heading found in a document.

    ``node`` is the heading's title node; its parent is the heading itself.
    """

    node: OutlineNode
    depth: int
    title: str

    @property
    def heading(self) -> OutlineNode | None:
        return self.node.parent
