"""Tests for placeholder detection."""

from __future__ import annotations

import pytest

from mdbook_compile_output.markers import extract_step_name


class TestExtractStepName:
    """Tests for extract_step_name function."""

    def test_extracts_simple_step(self) -> None:
        """A bare marker yields its step name."""
        assert extract_step_name("{{#compile_output: step1}}") == "step1"

    @pytest.mark.parametrize(
        "line",
        [
            "    {{#compile_output: step1}}",
            "\t{{#compile_output: step1}}",
            "{{#compile_output:step1}}",
            "{{#compile_output:   step1   }}",
            "  \t {{#compile_output:\tstep1\t}}",
        ],
    )
    def test_trims_indentation_and_name(self, line: str) -> None:
        """Leading indentation and whitespace around the name are ignored."""
        assert extract_step_name(line) == "step1"

    def test_keeps_inner_characters_verbatim(self) -> None:
        """Names are not validated; path separators pass through."""
        assert extract_step_name("{{#compile_output: part 2/step-3}}") == "part 2/step-3"

    def test_empty_name(self) -> None:
        """A marker without a name yields the empty string, not None."""
        assert extract_step_name("{{#compile_output:}}") == ""

    def test_missing_suffix_is_not_a_marker(self) -> None:
        """The prefix alone does not make a placeholder."""
        assert extract_step_name("{{#compile_output: step1") is None
        assert extract_step_name("{{#compile_output: step1}") is None

    def test_trailing_text_is_not_a_marker(self) -> None:
        """Only leading whitespace is trimmed."""
        assert extract_step_name("{{#compile_output: step1}} ") is None
        assert extract_step_name("{{#compile_output: step1}} and more") is None

    def test_prefix_not_at_line_start(self) -> None:
        """Markers embedded in prose are left alone."""
        assert extract_step_name("See {{#compile_output: step1}}") is None

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "# Heading",
            "{{#include file.rs}}",
            "{{#compile_output step1}}",
            "{{ #compile_output: step1}}",
        ],
    )
    def test_regular_lines(self, line: str) -> None:
        """Ordinary Markdown and other mdBook directives are not markers."""
        assert extract_step_name(line) is None
