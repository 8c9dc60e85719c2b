# topmark:header:start
#
#   project      : Bashful
#   file         : keys.py
#   file_relpath : src/bashful/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML keys and environment variable names for Bashful configuration.

Keys defined here are external configuration API: renaming or removing one
is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys (``bashful.toml`` / ``[tool.bashful]``)."""

    SECTION_TOOL: Final[str] = "tool"
    SECTION_BASHFUL: Final[str] = "bashful"

    # [usage]
    SECTION_USAGE: Final[str] = "usage"

    KEY_NAME: Final[str] = "name"
    KEY_ARGS: Final[str] = "args"
    KEY_USAGE: Final[str] = "usage"
    KEY_DESCRIPTION: Final[str] = "description"
    KEY_EXAMPLES: Final[str] = "examples"
    KEY_OPTIONS: Final[str] = "options"

    # [modes]
    SECTION_MODES: Final[str] = "modes"

    KEY_VERBOSE: Final[str] = "verbose"
    KEY_INTERACTIVE: Final[str] = "interactive"


class Env:
    """Environment variables read by `MessagesConfig.from_env`."""

    SCRIPT_NAME: Final[str] = "SCRIPT_NAME"
    SCRIPT_ARGS: Final[str] = "SCRIPT_ARGS"
    SCRIPT_USAGE: Final[str] = "SCRIPT_USAGE"
    SCRIPT_DESCRIPTION: Final[str] = "SCRIPT_DESCRIPTION"
    SCRIPT_EXAMPLES: Final[str] = "SCRIPT_EXAMPLES"
    SCRIPT_OPTIONS: Final[str] = "SCRIPT_OPTIONS"
    VERBOSE: Final[str] = "VERBOSE"
    INTERACTIVE: Final[str] = "INTERACTIVE"
    HOME: Final[str] = "HOME"
