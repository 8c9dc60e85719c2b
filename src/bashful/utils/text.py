# topmark:header:start
#
#   project      : Bashful
#   file         : text.py
#   file_relpath : src/bashful/utils/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-oriented text helpers shared by the doc extractor and the messenger.

All helpers are pure: they take text (or a sequence of lines without line
terminators) and return new values.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

TRUTHY_VALUES: frozenset[str] = frozenset({"1", "y", "yes", "t", "true", "on"})


def is_blank(line: str) -> bool:
    """Return True if ``line`` is empty or whitespace-only."""
    return not line.strip()


def squeeze_lines(lines: Iterable[str]) -> list[str]:
    """Collapse runs of consecutive blank lines into a single empty line.

    Args:
        lines (Iterable[str]): Lines without line terminators.

    Returns:
        list[str]: The squeezed lines. Blank lines are normalized to ``""``;
            non-blank lines are returned unchanged.
    """
    out: list[str] = []
    previous_blank: bool = False
    for line in lines:
        if is_blank(line):
            if not previous_blank:
                out.append("")
            previous_blank = True
        else:
            out.append(line)
            previous_blank = False
    return out


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n`` only, ignoring one trailing newline.

    Unlike `str.splitlines`, form feeds and other Unicode line boundaries stay
    inside their line.
    """
    if not text:
        return []
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")


def squeeze_text(text: str) -> str:
    """Text counterpart of [`squeeze_lines`][bashful.utils.text.squeeze_lines].

    A non-empty result always ends with a newline.
    """
    lines: list[str] = squeeze_lines(split_lines(text))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def abbreviate_home(text: str, home: str | None) -> str:
    """Replace every occurrence of the home directory in ``text`` with ``~``."""
    if not home:
        return text
    return text.replace(home, "~")


_ECHO_ESCAPES: dict[str, str] = {
    "\\": "\\",
    "a": "\a",
    "b": "\b",
    "e": "\x1b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}

_ECHO_ESCAPE_RE: re.Pattern[str] = re.compile(r"\\([\\abefnrtv])")


def expand_echo_escapes(text: str) -> str:
    r"""Interpret the backslash escapes of ``echo -e`` (``\n``, ``\t``, ``\\``, ...).

    Unknown escapes are left untouched.
    """
    return _ECHO_ESCAPE_RE.sub(lambda m: _ECHO_ESCAPES[m.group(1)], text)


def indent_lines(text: str, prefix: str = "    ") -> str:
    """Prefix every line of ``text`` (including blank ones) with ``prefix``."""
    return "\n".join(f"{prefix}{line}" for line in text.split("\n"))


def is_truthy(value: str | None) -> bool | None:
    """Parse a boolean-like environment value.

    Returns:
        bool | None: ``None`` when the value is unset or empty (mode not
            configured), ``True`` for one of ``1 y yes t true on`` (any case),
            ``False`` otherwise.
    """
    if value is None:
        return None
    v: str = value.strip().lower()
    if not v:
        return None
    return v in TRUTHY_VALUES
