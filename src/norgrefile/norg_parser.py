"""Parse Norg documents into an outline tree of headings and list items."""

from __future__ import annotations

import re
from typing import Sequence

from norgrefile.schemas import NodeKind, OutlineNode, TextRange

HEADING_LINE_RE = re.compile(r"^\s*(\*{1,7})\s+(\S.*)$")
_LIST_LINE_RE = re.compile(r"^\s*(~{1,7}|-{1,7})\s+\S")
VERBATIM_START_RE = re.compile(r"^\s*@(?!end\b)[A-Za-z]")
VERBATIM_END_RE = re.compile(r"^\s*@end\s*$")

_LIST_KINDS = {
    "~": NodeKind.ORDERED_LIST_ITEM,
    "-": NodeKind.UNORDERED_LIST_ITEM,
}


def parse_document(lines: Sequence[str], document_id: str | None = None) -> OutlineNode:
    """Build the outline tree for a document given as a list of lines.

    Headings run until the next heading of the same or lower depth. List
    items run until a blank line, a heading, or a list item that is not
    nested deeper. Lines inside ``@tag`` ... ``@end`` blocks never open
    headings or list items.

    Structural nodes cover whole lines: a node spanning rows 2-4 has the
    range ``(2, 0)`` to ``(5, 0)``.
    """
    total = len(lines)
    root = OutlineNode(
        kind=NodeKind.DOCUMENT,
        range=TextRange(0, 0, total, 0),
        document_id=document_id,
    )
    stack: list[OutlineNode] = [root]
    paragraph: OutlineNode | None = None
    in_verbatim = False

    def close_paragraph(row: int) -> None:
        nonlocal paragraph
        if paragraph is not None:
            _close(paragraph, row)
            paragraph = None

    def close_while(row: int, predicate) -> None:
        while len(stack) > 1 and predicate(stack[-1]):
            _close(stack.pop(), row)

    for row, line in enumerate(lines):
        if in_verbatim:
            if VERBATIM_END_RE.match(line):
                in_verbatim = False
            continue

        heading_match = HEADING_LINE_RE.match(line)
        if heading_match:
            depth = len(heading_match.group(1))
            close_paragraph(row)
            close_while(row, lambda node: node.kind is not NodeKind.HEADING)
            close_while(row, lambda node: node.depth >= depth)
            heading = _open(NodeKind.HEADING, row, depth, document_id)
            title_start = heading_match.start(2)
            title_end = len(line.rstrip())
            heading.add_child(
                OutlineNode(
                    kind=NodeKind.PARAGRAPH_SEGMENT,
                    range=TextRange(row, title_start, row, title_end),
                    document_id=document_id,
                )
            )
            stack[-1].add_child(heading)
            stack.append(heading)
            continue

        list_match = _LIST_LINE_RE.match(line)
        if list_match:
            marker = list_match.group(1)
            depth = len(marker)
            close_paragraph(row)
            close_while(
                row,
                lambda node: node.kind is not NodeKind.HEADING and node.depth >= depth,
            )
            item = _open(_LIST_KINDS[marker[0]], row, depth, document_id)
            stack[-1].add_child(item)
            stack.append(item)
            continue

        if not line.strip():
            close_paragraph(row)
            close_while(row, lambda node: node.kind is not NodeKind.HEADING)
            continue

        if paragraph is None:
            paragraph = _open(NodeKind.PARAGRAPH, row, None, document_id)
            stack[-1].add_child(paragraph)
        if VERBATIM_START_RE.match(line):
            in_verbatim = True

    close_paragraph(total)
    close_while(total, lambda node: True)
    return root


def node_at(root: OutlineNode, row: int, col: int = 0) -> OutlineNode | None:
    """Return the deepest node whose range contains ``(row, col)``."""
    if not root.range.contains(row, col):
        return None
    node = root
    while True:
        for child in node.children:
            if child.range.contains(row, col):
                node = child
                break
        else:
            return node


def node_text(node: OutlineNode, lines: Sequence[str]) -> str:
    """Render the text covered by a node's range."""
    span = node.range
    if span.start_row == span.end_row:
        return _line(lines, span.start_row)[span.start_col : span.end_col]
    parts = [_line(lines, span.start_row)[span.start_col :]]
    parts.extend(lines[span.start_row + 1 : span.end_row])
    parts.append(_line(lines, span.end_row)[: span.end_col])
    return "\n".join(parts)


def _open(kind: NodeKind, row: int, depth: int | None, document_id: str | None) -> OutlineNode:
    return OutlineNode(
        kind=kind,
        range=TextRange(row, 0, row + 1, 0),
        depth=depth,
        document_id=document_id,
    )


def _close(node: OutlineNode, row: int) -> None:
    node.range = TextRange(node.range.start_row, node.range.start_col, row, 0)


def _line(lines: Sequence[str], row: int) -> str:
    return lines[row] if row < len(lines) else ""
