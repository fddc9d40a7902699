"""Tests for heading level renumbering."""

from __future__ import annotations

import pytest

from norgrefile.levels import (
    deepest_heading_level,
    heading_level_from_string,
    normalize_heading_levels,
    split_lines,
)


def _levels(text: str) -> list[int]:
    return [heading_level_from_string(line) for line in text.split("\n") if heading_level_from_string(line)]


class TestNormalizeHeadingLevels:
    """Tests for normalize_heading_levels function."""

    def test_keeps_levels_when_already_anchored(self) -> None:
        """Levels {2,3,2} under base depth 1 stay {2,3,2}."""
        text = "** A\n*** B\n** C"

        result = normalize_heading_levels(1, text)

        assert _levels(result) == [2, 3, 2]
        assert result == text

    def test_reanchors_under_deeper_base(self) -> None:
        """The shallowest heading becomes base + 1, offsets are kept."""
        result = normalize_heading_levels(3, "** A\nbody\n*** B\n** C\n")

        assert result == "**** A\nbody\n***** B\n**** C\n"

    def test_promotes_deep_headings(self) -> None:
        """Deep headings move up when the base is shallow."""
        result = normalize_heading_levels(1, "**** Deep\n***** Deeper")

        assert result == "** Deep\n*** Deeper"

    @pytest.mark.parametrize("base_depth", [0, 1, 4, 7])
    def test_text_without_headings_is_unchanged(self, base_depth: int) -> None:
        """List items and prose pass through untouched."""
        text = "- item\n  continued\n\n~ ordered *bold*\n"

        assert normalize_heading_levels(base_depth, text) == text

    def test_leading_indentation_is_replaced(self) -> None:
        """The whole prefix before the title is rewritten."""
        result = normalize_heading_levels(1, "   ** Indented title")

        assert result == "** Indented title"

    def test_only_leading_marker_run_changes(self) -> None:
        """Markers later in the line are left alone."""
        result = normalize_heading_levels(2, "* Title with * star")

        assert result == "*** Title with * star"

    def test_bold_text_is_not_a_heading(self) -> None:
        """A marker run glued to text is not a heading marker."""
        text = "** A\n*bold* line"

        assert normalize_heading_levels(2, text) == "*** A\n*bold* line"

    def test_blank_lines_are_preserved(self) -> None:
        """Empty lines between headings survive the round trip."""
        result = normalize_heading_levels(1, "*** A\n\n\n**** B")

        assert result == "** A\n\n\n*** B"


class TestHelpers:
    """Tests for level helper functions."""

    @pytest.mark.parametrize(
        ("line", "level"),
        [("* a", 1), ("  *** a", 3), ("text", 0), ("*bold*", 0), ("", 0)],
    )
    def test_heading_level_from_string(self, line: str, level: int) -> None:
        assert heading_level_from_string(line) == level

    def test_deepest_heading_level(self) -> None:
        assert deepest_heading_level("** a\n**** b\n*** c") == 4
        assert deepest_heading_level("no headings") == 0

    def test_split_lines_drops_single_trailing_newline(self) -> None:
        assert split_lines("a\n\nb\n") == ["a", "", "b"]
        assert split_lines("a\n\n") == ["a", ""]
        assert split_lines("") == []

    def test_split_lines_only_breaks_on_newline(self) -> None:
        """Form feeds and Unicode separators stay inside their line."""
        assert split_lines("see this\x0cpage\nnext\u2028same\n") == ["see this\x0cpage", "next\u2028same"]


class TestVerbatimBlocks:
    """Tests for heading-like lines inside ranged tags."""

    def test_code_lines_are_not_renumbered(self) -> None:
        text = "** A\n@code c\n/*\n * note\n */\n@end\n*** B"

        result = normalize_heading_levels(2, text)

        assert result == "*** A\n@code c\n/*\n * note\n */\n@end\n**** B"

    def test_code_lines_do_not_count_as_deepest(self) -> None:
        assert deepest_heading_level("* A\n@code\n****** not a heading\n@end") == 1

    def test_code_lines_do_not_set_the_anchor(self) -> None:
        """Only real headings decide which level becomes base + 1."""
        result = normalize_heading_levels(1, "@code\n* x\n@end\n*** Real")

        assert result == "@code\n* x\n@end\n** Real"
