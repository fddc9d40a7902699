"""Reindentation passes applied to freshly inserted lines."""

from __future__ import annotations

from typing import Protocol

from norgrefile.config import NORGREFILE_INDENT_WIDTH
from norgrefile.documents import Document
from norgrefile.exceptions import DocumentAccessError, ReindentError
from norgrefile.norg_parser import HEADING_LINE_RE, VERBATIM_END_RE, VERBATIM_START_RE


class Reindenter(Protocol):
    """Normalizes indentation of ``document`` rows ``start_row`` to ``end_row``."""

    def reindent_range(self, document: Document, start_row: int, end_row: int) -> None: ...


class NullReindenter:
    """Leaves the inserted lines exactly as they are."""

    def reindent_range(self, document: Document, start_row: int, end_row: int) -> None:
        return None


class HeadingIndentReindenter:
    """Indent body lines according to the heading they belong to.

    Heading lines are moved to column 0. The body below each heading is
    shifted as a block: its common leading whitespace is replaced by
    ``indent_width`` spaces per level of the heading, so relative indentation
    inside the body (list continuation lines, nested items) is kept. With a
    width of 0 the least indented body line lands at column 0. Content of
    ``@tag`` ... ``@end`` blocks keeps its indentation; the tag lines themselves
    are shifted with the body.
    """

    def __init__(self, indent_width: int = NORGREFILE_INDENT_WIDTH) -> None:
        if indent_width < 0:
            raise ValueError("indent_width must not be negative")
        self.indent_width = indent_width

    def reindent_range(self, document: Document, start_row: int, end_row: int) -> None:
        try:
            lines = document.get_lines(0, end_row)
        except DocumentAccessError as exc:
            raise ReindentError(str(exc)) from exc
        if start_row < 0 or start_row > end_row:
            raise ReindentError(f"Invalid reindent range {start_row}:{end_row}")

        depth = self._depth_before(lines, start_row)
        reindented: list[str] = []
        # Body lines as (line, shifted); verbatim content is not shifted.
        body: list[tuple[str, bool]] = []
        in_verbatim = False
        for line in lines[start_row:end_row]:
            if in_verbatim:
                if VERBATIM_END_RE.match(line):
                    in_verbatim = False
                    body.append((line, True))
                else:
                    body.append((line, False))
                continue

            heading_match = HEADING_LINE_RE.match(line)
            if heading_match:
                reindented.extend(self._shift_body(body, depth))
                body = []
                depth = len(heading_match.group(1))
                reindented.append(line.lstrip())
                continue

            if VERBATIM_START_RE.match(line):
                in_verbatim = True
            body.append((line, True))
        reindented.extend(self._shift_body(body, depth))

        document.set_lines(start_row, end_row, reindented)

    def _shift_body(self, body: list[tuple[str, bool]], depth: int) -> list[str]:
        common = min(
            (len(line) - len(line.lstrip()) for line, shifted in body if shifted and line.strip()),
            default=0,
        )
        prefix = " " * (self.indent_width * depth)
        result = []
        for line, shifted in body:
            if not shifted:
                result.append(line)
            elif not line.strip():
                result.append("")
            else:
                result.append(prefix + line[common:])
        return result

    @staticmethod
    def _depth_before(lines: list[str], row: int) -> int:
        for previous in reversed(lines[:row]):
            heading_match = HEADING_LINE_RE.match(previous)
            if heading_match:
                return len(heading_match.group(1))
        return 0
