# topmark:header:start
#
#   project      : Bashful
#   file         : strategies_bashful.py
#   file_relpath : tests/strategies_bashful.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating doc tags, doc bodies and script code.

Generated text never contains ``#``, so body and code lines cannot be mistaken
for markers or comment decoration.
"""

from __future__ import annotations

from hypothesis import strategies as st

_LETTERS: str = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_TEXT_CHARS: str = _LETTERS + "0123456789 .,:;-_()[]=$'\""


def s_tag() -> st.SearchStrategy[str]:
    """Doc tag names such as ``greet``, ``doc_help`` or ``bashful-doc``."""
    return st.from_regex(r"[a-z][a-z0-9_-]{0,12}", fullmatch=True)


def s_text_line() -> st.SearchStrategy[str]:
    """A non-blank line of prose starting with a letter."""
    return st.builds(
        lambda head, tail: head + tail,
        st.sampled_from(_LETTERS),
        st.text(alphabet=_TEXT_CHARS, max_size=40),
    )


def s_body_lines() -> st.SearchStrategy[list[str]]:
    """Documentation body lines, with frequent blank lines."""
    return st.lists(st.one_of(st.just(""), s_text_line()), max_size=20)


def s_code_lines() -> st.SearchStrategy[list[str]]:
    """Shell-ish code lines surrounding a doc block."""
    return st.lists(
        st.one_of(
            st.just(""),
            st.sampled_from(["greet() {", "}", 'echo "hi"', "local x=1", "    return 0"]),
            s_text_line(),
        ),
        max_size=8,
    )


def s_indent() -> st.SearchStrategy[str]:
    """Indentation applied to markers and decorated lines."""
    return st.sampled_from(["", "  ", "    ", "\t"])
