# topmark:header:start
#
#   project      : Bashful
#   file         : console.py
#   file_relpath : src/bashful/messages/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

Program output (doc text, messages, banners) goes through a console; the
`logging` module is reserved for diagnostics.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO, TypedDict

import click


# This TypedDict is for documentation and type-checking on the *caller* side.
class StyleKwargs(TypedDict, total=False):
    """Keyword arguments accepted by click.style()."""

    fg: str
    bg: str
    bold: bool
    dim: bool
    underline: bool
    reverse: bool


class ConsoleLike(Protocol):
    """Minimal interface used by the messenger and the CLI commands."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write text to stdout."""
        ...

    def message(self, text: str = "", *, nl: bool = True) -> None:
        """Write already-styled text to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to stderr in the error style."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...


class ClickConsole:
    """Click-backed console.

    Args:
        enable_color (bool): If True, ANSI styles are emitted; otherwise all
            output is plain text.
        out (TextIO | None): Stream for standard output. Defaults to `sys.stdout`.
        err (TextIO | None): Stream for messages. Defaults to `sys.stderr`.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write text to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def message(self, text: str = "", *, nl: bool = True) -> None:
        """Write already-styled text to stderr."""
        click.echo(text, nl=nl, file=self.err, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to stderr in bright red."""
        click.echo(self.styled(text, fg="bright_red"), nl=nl, file=self.err, color=self.enable_color)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged without color.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Keyword arguments as described by `StyleKwargs`.
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
