"""Tests for target resolution and target models."""

from __future__ import annotations

import pytest

from norgrefile.exceptions import AmbiguousTargetError, TargetNotFoundError
from norgrefile.headings import extract_headings
from norgrefile.norg_parser import parse_document
from norgrefile.schemas import RefileTarget
from norgrefile.targets import find_target_heading

TASKS_DOCUMENT = ["* Tasks", "** Done", "** Tasks", "** Tasks"]


@pytest.fixture
def headings():
    return extract_headings(parse_document(TASKS_DOCUMENT), TASKS_DOCUMENT)


def _target(title: str, depth: int) -> RefileTarget:
    return RefileTarget(document_id="tasks.norg", heading_title=title, heading_depth=depth)


class TestFindTargetHeading:
    """Tests for find_target_heading function."""

    def test_depth_must_match(self, headings) -> None:
        """Tasks at depth 2 never resolves to the depth 1 Tasks."""
        record = find_target_heading(headings[:3], _target("Tasks", 2))

        assert record is headings[2]

    def test_first_match_wins(self, headings) -> None:
        """Duplicates resolve to the first occurrence."""
        record = find_target_heading(headings, _target("Tasks", 2))

        assert record is headings[2]
        assert record.heading.range.start_row == 2

    def test_no_match(self, headings) -> None:
        assert find_target_heading(headings, _target("Missing", 1)) is None
        assert find_target_heading(headings, _target("Done", 1)) is None

    def test_titles_compare_exactly(self, headings) -> None:
        assert find_target_heading(headings, _target("tasks", 1)) is None
        assert find_target_heading(headings, _target("Tasks ", 1)) is None

    def test_strict_mode_rejects_duplicates(self, headings) -> None:
        with pytest.raises(AmbiguousTargetError, match="More than one"):
            find_target_heading(headings, _target("Tasks", 2), strict=True)

    def test_ambiguous_is_a_not_found_error(self) -> None:
        assert issubclass(AmbiguousTargetError, TargetNotFoundError)

    def test_strict_mode_accepts_unique_match(self, headings) -> None:
        record = find_target_heading(headings, _target("Tasks", 1), strict=True)

        assert record is headings[0]


class TestRefileTarget:
    """Tests for RefileTarget model."""

    @pytest.mark.parametrize(
        ("line", "title", "depth"),
        [
            ("*** Some Title", "Some Title", 3),
            ("  ** Indented", "Indented", 2),
            ("* Title with * star", "Title with * star", 1),
        ],
    )
    def test_from_selection(self, line: str, title: str, depth: int) -> None:
        target = RefileTarget.from_selection(line, "notes/work.norg")

        assert target.document_id == "notes/work.norg"
        assert target.heading_title == title
        assert target.heading_depth == depth

    @pytest.mark.parametrize("line", ["plain text", "*bold*", "", "******** eight"])
    def test_from_selection_rejects_non_headings(self, line: str) -> None:
        with pytest.raises(ValueError):
            RefileTarget.from_selection(line, "work.norg")

    def test_depth_is_bounded(self) -> None:
        with pytest.raises(ValueError):
            _target("Tasks", 0)
        with pytest.raises(ValueError):
            _target("Tasks", 8)

    def test_is_immutable(self) -> None:
        target = _target("Tasks", 1)

        with pytest.raises(ValueError):
            target.heading_depth = 2
