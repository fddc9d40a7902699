"""Heading level renumbering for moved text."""

from __future__ import annotations

import re
from typing import Iterator, Sequence

from norgrefile.norg_parser import VERBATIM_END_RE, VERBATIM_START_RE

# Marker run at the start of a line, after optional indentation.
HEADING_PREFIX_RE = re.compile(r"^\s*(\*+)(?=\s)")

_NO_HEADING_LEVEL = 100


def heading_level_from_string(line: str) -> int:
    """Return the number of heading markers a line starts with (0 if none)."""
    match = HEADING_PREFIX_RE.match(line)
    return len(match.group(1)) if match else 0


def normalize_heading_levels(base_depth: int, text: str) -> str:
    """Re-anchor the headings of ``text`` one level below ``base_depth``.

    The shallowest heading in the text becomes ``base_depth + 1`` and every
    other heading keeps its offset from it, so sub-headings stay nested the
    same way. Only the leading marker run (and any indentation before it) is
    rewritten. Lines inside ``@tag`` ... ``@end`` blocks are never headings,
    so a code comment line starting with ``*`` is left alone. Text without heading
    lines is returned unchanged.
    """
    lines = text.split("\n")
    heading_indexes = list(_heading_lines(lines))
    min_level = min((level for _, level in heading_indexes), default=_NO_HEADING_LEVEL)

    for index, level in heading_indexes:
        markers = "*" * (base_depth + (level - min_level + 1))
        lines[index] = HEADING_PREFIX_RE.sub(markers, lines[index], count=1)

    return "\n".join(lines)


def deepest_heading_level(text: str) -> int:
    """Return the largest heading marker run found in ``text`` (0 if none)."""
    return max((level for _, level in _heading_lines(text.split("\n"))), default=0)


def split_lines(text: str) -> list[str]:
    """Split text into buffer lines on ``\\n`` only, dropping one trailing newline.

    Form feeds and Unicode line separators stay inside their line, so text
    written back with ``\\n`` joins round-trips unchanged.
    """
    if not text:
        return []
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")


def _heading_lines(lines: Sequence[str]) -> Iterator[tuple[int, int]]:
    in_verbatim = False
    for index, line in enumerate(lines):
        if in_verbatim:
            if VERBATIM_END_RE.match(line):
                in_verbatim = False
            continue
        level = heading_level_from_string(line)
        if level:
            yield index, level
        elif VERBATIM_START_RE.match(line):
            in_verbatim = True
