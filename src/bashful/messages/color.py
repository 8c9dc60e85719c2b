# topmark:header:start
#
#   project      : Bashful
#   file         : color.py
#   file_relpath : src/bashful/messages/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color-mode resolution.

Messages are written to stderr, so the automatic mode looks at whether
*stderr* is a terminal.
"""

from __future__ import annotations

import os
import sys
from enum import Enum

from bashful.config.logging import get_logger

logger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when the target stream is a TTY.
        ALWAYS: Force-enable color.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stream_isatty: bool | None = None,
) -> bool:
    """Determine whether ANSI styling should be emitted.

    Decision precedence:
        1. **CLI override**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**: ``FORCE_COLOR`` (set and not ``"0"``) → True;
           ``NO_COLOR`` (set to any value) → False.
        3. **Auto**: whether the target stream (stderr by default) is a TTY.

    Args:
        color_mode_override: Parsed ``--color`` value; ``None`` means not provided.
        stream_isatty: Optional override for TTY detection. When ``None``,
            ``sys.stderr.isatty()`` is used and errors count as "not a TTY".

    Returns:
        True if ANSI styling should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stream_isatty is None:
        try:
            stream_isatty = sys.stderr.isatty()
        except (OSError, ValueError):
            stream_isatty = False
    logger.trace("Color auto-detection: stderr isatty=%s", stream_isatty)
    return bool(stream_isatty)
