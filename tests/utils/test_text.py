# topmark:header:start
#
#   project      : Bashful
#   file         : test_text.py
#   file_relpath : tests/utils/test_text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the text helpers (`bashful.utils.text`)."""

from __future__ import annotations

from bashful.utils.text import (
    abbreviate_home,
    expand_echo_escapes,
    indent_lines,
    is_truthy,
    split_lines,
    squeeze_lines,
    squeeze_text,
)
from tests.conftest import parametrize


def test_squeeze_lines_collapses_runs() -> None:
    """Runs of blank lines become one empty line; others are untouched."""
    assert squeeze_lines(["a", "", "", " ", "b", "", "c"]) == ["a", "", "b", "", "c"]


def test_squeeze_lines_keeps_single_edges() -> None:
    """Leading and trailing blank runs are kept as one blank line."""
    assert squeeze_lines(["", "", "a", "", ""]) == ["", "a", ""]


def test_squeeze_text() -> None:
    """Text form keeps a final newline and maps empty to empty."""
    assert squeeze_text("a\n\n\n\nb") == "a\n\nb\n"
    assert squeeze_text("") == ""


@parametrize(
    ("text", "home", "expected"),
    [
        ("/home/ada/x", "/home/ada", "~/x"),
        ("a /home/ada b /home/ada", "/home/ada", "a ~ b ~"),
        ("/home/ada/x", None, "/home/ada/x"),
        ("/home/ada/x", "", "/home/ada/x"),
    ],
)
def test_abbreviate_home(text: str, home: str | None, expected: str) -> None:
    """Every occurrence of the home directory is shortened."""
    assert abbreviate_home(text, home) == expected


def test_indent_lines() -> None:
    """Every line, blank ones included, gets the prefix."""
    assert indent_lines("a\n\nb", "  ") == "  a\n  \n  b"


@parametrize(
    ("value", "expected"),
    [(None, None), ("", None), ("  ", None), ("TRUE", True), ("t", True), ("off", False)],
)
def test_is_truthy(value: str | None, expected: bool | None) -> None:
    """Boolean-like values parse to a tri-state."""
    assert is_truthy(value) is expected


@parametrize(
    ("text", "expected"),
    [
        ("a\\nb", "a\nb"),
        ("col\\tcol", "col\tcol"),
        ("back\\\\n", "back\\n"),
        ("keep \\q and \\x41", "keep \\q and \\x41"),
        ("plain", "plain"),
    ],
)
def test_expand_echo_escapes(text: str, expected: str) -> None:
    """``echo -e`` escapes are interpreted; unknown ones are kept."""
    assert expand_echo_escapes(text) == expected


@parametrize(
    ("text", "expected"),
    [
        ("", []),
        ("a\nb\n", ["a", "b"]),
        ("a\n\n", ["a", ""]),
        ("page\x0cbreak same", ["page\x0cbreak same"]),
    ],
)
def test_split_lines_uses_newline_only(text: str, expected: list[str]) -> None:
    """Only ``\\n`` ends a line, and one trailing newline is ignored."""
    assert split_lines(text) == expected
