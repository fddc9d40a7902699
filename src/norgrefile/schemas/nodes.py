"""Outline tree models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class NodeKind(str, Enum):
    """Kinds of nodes produced by the outline parser."""

    DOCUMENT = "document"
    HEADING = "heading"
    ORDERED_LIST_ITEM = "ordered_list"
    UNORDERED_LIST_ITEM = "unordered_list"
    PARAGRAPH_SEGMENT = "paragraph_segment"
    PARAGRAPH = "paragraph"


# Kinds that can be picked up and moved to another heading.
STRUCTURAL_KINDS = frozenset(
    {NodeKind.HEADING, NodeKind.ORDERED_LIST_ITEM, NodeKind.UNORDERED_LIST_ITEM}
)


@dataclass(frozen=True)
class TextRange:
    """Zero-based, end-exclusive span of a node inside its document.

    Attributes:
        start_row: First row covered by the node.
        start_col: Column of the first character on ``start_row``.
        end_row: Row holding the end position.
        end_col: Column of the end position. A value of 0 means the node
            stops right before ``end_row`` and covers none of it.
    """

    start_row: int
    start_col: int
    end_row: int
    end_col: int

    def contains(self, row: int, col: int) -> bool:
        """Return True if ``(row, col)`` falls inside the range."""
        position = (row, col)
        return (self.start_row, self.start_col) <= position < (self.end_row, self.end_col)


@dataclass(eq=False)
class OutlineNode:
    """A node of a parsed outline document.

    Nodes compare by identity. ``depth`` is set for headings and list items
    only; ``document_id`` names the document the range points into.
    """

    kind: NodeKind
    range: TextRange
    depth: int | None = None
    document_id: str | None = None
    parent: OutlineNode | None = field(default=None, repr=False)
    children: list[OutlineNode] = field(default_factory=list, repr=False)

    @property
    def type(self) -> str:
        """Legacy type tag such as ``heading2``, used in log messages."""
        if self.depth is None:
            return self.kind.value
        return f"{self.kind.value}{self.depth}"

    @property
    def is_structural(self) -> bool:
        return self.kind in STRUCTURAL_KINDS

    def add_child(self, child: OutlineNode) -> None:
        child.parent = self
        self.children.append(child)

    def walk(self) -> Iterator[OutlineNode]:
        """Yield this node and all descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()
