# topmark:header:start
#
#   project      : Bashful
#   file         : extractor.py
#   file_relpath : src/bashful/doc/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Extraction of embedded documentation blocks.

A doc block is a run of comment lines delimited by two marker lines:

    # doc NAME
    #
    # DOCUMENTATION TEXT GOES HERE
    #
    # doc-end NAME

Markers may carry trailing text (for instance editor fold marks such as
``{{{``) and may be indented; ``NAME`` is matched as a whole token, so
``# doc bashful`` does not open ``# doc bashful-doc``.

The extractor is a two-state line scanner. While *outside* a block it looks
for a start marker; while *inside* it emits every line until the matching end
marker. Emitted lines lose their leading comment decoration, and runs of
blank lines in the result are squeezed to one. A name with no block yields an
empty result: that is not an error.
"""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Union

from bashful.config.logging import get_logger
from bashful.constants import DOC_END_KEYWORD, DOC_START_KEYWORD
from bashful.utils.text import split_lines, squeeze_lines

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from bashful.config.logging import BashfulLogger

logger: BashfulLogger = get_logger(__name__)

DocSource = Union[str, "os.PathLike[str]"]

STDIN_SOURCE: str = "-"

# Leading whitespace, one comment marker and at most one following space
COMMENT_PREFIX_RE: re.Pattern[str] = re.compile(r"^\s*# ?")


class ScanState(Enum):
    """Position of the scanner relative to a doc block."""

    OUTSIDE = "outside"
    INSIDE = "inside"


def marker_pattern(keyword: str, name: str) -> re.Pattern[str]:
    """Compile the pattern for a ``# KEYWORD NAME`` marker line.

    ``NAME`` must be followed by whitespace or the end of the line.
    """
    return re.compile(rf"# {re.escape(keyword)} {re.escape(name)}(?=\s|$)")


def strip_comment_prefix(line: str) -> str:
    """Remove leading whitespace, a ``#`` and an optional single space."""
    return COMMENT_PREFIX_RE.sub("", line, count=1)


@dataclass
class DocBlockScanner:
    """Line-by-line scanner selecting the bodies of all blocks named ``name``.

    Attributes:
        name (str): The doc tag to select.
        state (ScanState): Current scanner state.
        blocks_opened (int): Number of start markers seen so far.
    """

    name: str
    state: ScanState = ScanState.OUTSIDE
    blocks_opened: int = 0
    _start_re: re.Pattern[str] = field(init=False, repr=False)
    _end_re: re.Pattern[str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._start_re = marker_pattern(DOC_START_KEYWORD, self.name)
        self._end_re = marker_pattern(DOC_END_KEYWORD, self.name)

    def feed(self, line: str) -> str | None:
        """Consume one line and return its cleaned body text, if any.

        Marker lines and lines outside a block return None.
        """
        if self.state is ScanState.OUTSIDE:
            if self._start_re.search(line):
                self.state = ScanState.INSIDE
                self.blocks_opened += 1
                logger.trace("Opened doc block %r (#%d)", self.name, self.blocks_opened)
            return None

        # The end marker is only looked for after the start line.
        if self._end_re.search(line):
            self.state = ScanState.OUTSIDE
            logger.trace("Closed doc block %r", self.name)
            return None
        return strip_comment_prefix(line)

    def scan(self, lines: Iterable[str]) -> Iterator[str]:
        """Yield the cleaned body lines of every matching block in ``lines``."""
        for line in lines:
            body = self.feed(line)
            if body is not None:
                yield body
        if self.state is ScanState.INSIDE:
            logger.debug("Doc block %r is not terminated; read to end of input", self.name)


def extract_lines(name: str, lines: Iterable[str]) -> list[str]:
    """Return the squeezed body lines of all ``name`` blocks found in ``lines``.

    Args:
        name (str): The doc tag.
        lines (Iterable[str]): Source lines without line terminators.

    Returns:
        list[str]: Cleaned lines; empty when no block matches.
    """
    scanner = DocBlockScanner(name)
    body: list[str] = squeeze_lines(scanner.scan(lines))
    logger.debug("Extracted %d line(s) from %d %r block(s)", len(body), scanner.blocks_opened, name)
    return body


def render_lines(lines: list[str]) -> str:
    """Join ``lines`` into newline-terminated text (empty list gives ``""``)."""
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def extract_text(name: str, text: str) -> str:
    """Extract the ``name`` documentation from an in-memory text."""
    return render_lines(extract_lines(name, split_lines(text)))


def read_source_lines(source: DocSource) -> list[str]:
    """Read the lines of a single source; ``-`` reads standard input.

    Files are decoded as UTF-8 with undecodable bytes replaced, so a stray
    Latin-1 byte never hides the documentation. A leading BOM is dropped.

    Raises:
        OSError: If the file cannot be read.
    """
    if os.fspath(source) == STDIN_SOURCE:
        logger.debug("Reading doc source from stdin")
        text: str = sys.stdin.read()
    else:
        path = Path(source)
        logger.debug("Reading doc source %s", path)
        text = path.read_text(encoding="utf-8", errors="replace")
    return split_lines(text.lstrip("\ufeff"))


def iter_source_lines(sources: Iterable[DocSource]) -> Iterator[str]:
    """Yield the lines of all ``sources`` as one concatenated stream."""
    for source in sources:
        yield from read_source_lines(source)


def extract(name: str, sources: Iterable[DocSource]) -> str:
    """Extract the ``name`` documentation from one or more source files.

    Sources are read in order and treated as one concatenated stream, so
    same-named blocks spread over several files are all returned, in order.
    No sources means no input and yields ``""``.

    Args:
        name (str): The doc tag.
        sources (Iterable[DocSource]): File paths; ``-`` stands for stdin.

    Returns:
        str: The cleaned documentation text.
    """
    return render_lines(extract_lines(name, iter_source_lines(sources)))
