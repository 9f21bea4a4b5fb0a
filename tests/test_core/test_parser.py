from __future__ import annotations

import pytest

from podreport.core.parser import (
    is_outdated_line,
    parse_outdated_line,
    parse_outdated_output,
    tokenize_line,
)
from podreport.exceptions import ParseError
from podreport.models import OutdatedPod


SAMPLE_OUTPUT = (
    "Updating spec repo `master`\n"
    "Analyzing dependencies\n"
    "The following pod updates are available:\n"
    "- 1PasswordExtension 1.6.4 -> 1.6.4 (latest version 1.8)\n"
    "- AFNetworking 2.6.3 -> 2.6.3 (latest version 3.0.4)\n"
    "- AMPopTip 0.10.1 -> 0.10.2 (latest version 0.10.2)\n"
)


@pytest.mark.unit
class TestTokenizeLine:
    """Tests for tokenize_line."""

    def test_splits_on_spaces_and_parentheses(self) -> None:
        """Test separators produce the positional token layout."""
        tokens = tokenize_line("- AFNetworking 2.6.3 -> 2.6.3 (latest version 3.0.4)")

        assert tokens == [
            "-",
            "AFNetworking",
            "2.6.3",
            "->",
            "2.6.3",
            "",
            "latest",
            "version",
            "3.0.4",
            "",
        ]

    def test_line_without_separators(self) -> None:
        """Test a line with no separators is a single token."""
        assert tokenize_line("-") == ["-"]


@pytest.mark.unit
class TestIsOutdatedLine:
    """Tests for is_outdated_line."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("- AFNetworking 2.6.3 -> 2.6.3 (latest version 3.0.4)", True),
            ("-", True),
            ("Analyzing dependencies", False),
            ("", False),
            (" - indented", False),
        ],
        ids=["pod-line", "marker-only", "header", "blank", "indented"],
    )
    def test_marker_detection(self, line: str, expected: bool) -> None:
        """Test only lines starting with the marker are candidates."""
        assert is_outdated_line(line) is expected


@pytest.mark.unit
class TestParseOutdatedLine:
    """Tests for parse_outdated_line."""

    def test_well_formed_line(self) -> None:
        """Test name, current and available versions are extracted."""
        pod = parse_outdated_line("- NAME A -> A (latest version B)")

        assert pod == OutdatedPod("NAME", "A", "B")

    def test_current_differs_from_resolvable(self) -> None:
        """Test the current version comes from token 2, not token 4."""
        pod = parse_outdated_line("- AMPopTip 0.10.1 -> 0.10.2 (latest version 0.10.2)")

        assert pod.name == "AMPopTip"
        assert pod.current_version == "0.10.1"
        assert pod.available_version == "0.10.2"

    def test_versions_are_not_validated(self) -> None:
        """Test arbitrary version strings pass through unchanged."""
        pod = parse_outdated_line("- Foo abc -> abc (latest version 2.0-beta.1)")

        assert pod.current_version == "abc"
        assert pod.available_version == "2.0-beta.1"

    def test_too_few_tokens_raises(self) -> None:
        """Test a truncated line raises ParseError with context."""
        with pytest.raises(ParseError) as exc_info:
            parse_outdated_line("- Foo 1.0 -> 1.0", line_number=4)

        assert exc_info.value.line_number == 4
        assert exc_info.value.line_content == "- Foo 1.0 -> 1.0"
        assert "line=4" in str(exc_info.value)

    def test_empty_name_raises(self) -> None:
        """Test a doubled separator that empties the name raises ParseError."""
        with pytest.raises(ParseError):
            parse_outdated_line("-  Foo 1.0 -> 1.0 (latest version 2.0)")


@pytest.mark.unit
class TestParseOutdatedOutput:
    """Tests for parse_outdated_output."""

    def test_sample_output(self) -> None:
        """Test all pod lines are parsed in order and headers ignored."""
        pods = parse_outdated_output(SAMPLE_OUTPUT)

        assert pods == [
            OutdatedPod("1PasswordExtension", "1.6.4", "1.8"),
            OutdatedPod("AFNetworking", "2.6.3", "3.0.4"),
            OutdatedPod("AMPopTip", "0.10.1", "0.10.2"),
        ]

    @pytest.mark.parametrize(
        "raw_text",
        ["", "\n\n", "Analyzing dependencies\nNo pod updates are available.\n"],
        ids=["empty", "blank-lines", "no-updates"],
    )
    def test_no_candidate_lines(self, raw_text: str) -> None:
        """Test output without pod lines yields an empty list."""
        assert parse_outdated_output(raw_text) == []

    def test_one_bad_line_aborts_everything(self) -> None:
        """Test a malformed line raises instead of returning partial data."""
        raw_text = (
            "- AFNetworking 2.6.3 -> 2.6.3 (latest version 3.0.4)\n"
            "- Broken 1.0\n"
            "- AMPopTip 0.10.1 -> 0.10.2 (latest version 0.10.2)\n"
        )

        with pytest.raises(ParseError) as exc_info:
            parse_outdated_output(raw_text)

        assert exc_info.value.line_number == 2

    def test_crlf_line_endings(self) -> None:
        """Test Windows line endings do not leak into versions."""
        raw_text = "- AFNetworking 2.6.3 -> 2.6.3 (latest version 3.0.4)\r\n"

        assert parse_outdated_output(raw_text) == [
            OutdatedPod("AFNetworking", "2.6.3", "3.0.4")
        ]

    def test_duplicate_pod_keeps_first(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test a pod listed twice is reported once with a warning."""
        raw_text = (
            "- Foo 1.0 -> 1.0 (latest version 2.0)\n"
            "- Foo 1.0 -> 1.0 (latest version 3.0)\n"
        )

        with caplog.at_level("WARNING", logger="podreport.parser"):
            pods = parse_outdated_output(raw_text)

        assert pods == [OutdatedPod("Foo", "1.0", "2.0")]
        assert "more than once" in caplog.text
