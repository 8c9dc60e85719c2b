# topmark:header:start
#
#   project      : Bashful
#   file         : tags.py
#   file_relpath : src/bashful/doc/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Discovery of doc tags.

A script or library documents itself under a tag equal to its *library name*
(its file name without a ``.sh`` suffix) and documents each of its commands
under the command's own name. `list_tags` returns the command tags only.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import TYPE_CHECKING

from bashful.config.logging import get_logger
from bashful.constants import DOC_START_KEYWORD, LIBRARY_SUFFIX
from bashful.doc.extractor import STDIN_SOURCE, read_source_lines

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bashful.config.logging import BashfulLogger
    from bashful.doc.extractor import DocSource

logger: BashfulLogger = get_logger(__name__)

TAG_LINE_RE: re.Pattern[str] = re.compile(rf"^\s*#\s+{DOC_START_KEYWORD}\s+(\S+)")


def library_name(source: DocSource) -> str:
    """Return the base name of ``source`` without a trailing ``.sh``."""
    name: str = Path(source).name
    if name.endswith(LIBRARY_SUFFIX) and name != LIBRARY_SUFFIX:
        return name[: -len(LIBRARY_SUFFIX)]
    return name


def find_tags(lines: Iterable[str]) -> set[str]:
    """Return every tag named by a ``# doc TAG`` line in ``lines``."""
    tags: set[str] = set()
    for line in lines:
        match = TAG_LINE_RE.match(line)
        if match:
            tags.add(match.group(1))
    return tags


def list_tags(sources: Iterable[DocSource]) -> list[str]:
    """List the command tags documented in ``sources``.

    Args:
        sources (Iterable[DocSource]): Files to scan; ``-`` reads stdin.

    Returns:
        list[str]: Sorted, duplicate-free tag names, excluding any tag equal to
            the library name of one of the sources.
    """
    tags: set[str] = set()
    libraries: set[str] = set()
    for source in sources:
        if os.fspath(source) != STDIN_SOURCE:
            libraries.add(library_name(source))
        tags |= find_tags(read_source_lines(source))

    logger.debug("Found tags %s; excluding library names %s", sorted(tags), sorted(libraries))
    return sorted(tags - libraries)
