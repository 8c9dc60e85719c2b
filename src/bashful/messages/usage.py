# topmark:header:start
#
#   project      : Bashful
#   file         : usage.py
#   file_relpath : src/bashful/messages/usage.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Usage banner composition.

The banner is assembled from a `MessagesConfig`:

    Usage: NAME [OPTIONS] ARGS
    USAGE TEXT

    DESCRIPTION

    EXAMPLES

    EXAMPLES TEXT

    GENERAL OPTIONS

        -h    Display this help message.

        -i    Interactive. Prompt for certain actions.
        -f    Don't prompt.

        -v    Be verbose.
        -q    Be quiet.

    APPLICATION OPTIONS

        OPTIONS TEXT

Optional sections are left out when their value is unset; the mode flags are
listed whenever the mode is configured, whether it is on or off.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bashful.constants import INDENT
from bashful.utils.text import indent_lines, squeeze_text

if TYPE_CHECKING:
    from bashful.config.model import MessagesConfig

HELP_FLAG_LINES: tuple[str, ...] = (f"{INDENT}-h    Display this help message.",)
INTERACTIVE_FLAG_LINES: tuple[str, ...] = (
    f"{INDENT}-i    Interactive. Prompt for certain actions.",
    f"{INDENT}-f    Don't prompt.",
)
VERBOSE_FLAG_LINES: tuple[str, ...] = (
    f"{INDENT}-v    Be verbose.",
    f"{INDENT}-q    Be quiet.",
)


def render_usage(config: MessagesConfig) -> str:
    """Compose the usage banner for ``config``.

    Returns:
        str: The squeezed banner text, or ``""`` when no script name is set.
    """
    if not config.script_name:
        return ""

    usage_line: str = f"Usage: {config.script_name} [OPTIONS] {config.script_args or ''}"
    lines: list[str] = [usage_line.rstrip()]
    if config.script_usage:
        lines.append(config.script_usage)

    if config.script_description:
        lines += ["", config.script_description]

    if config.script_examples:
        lines += ["", "EXAMPLES", "", config.script_examples]

    lines += ["", "GENERAL OPTIONS", "", *HELP_FLAG_LINES]

    if config.interactive is not None:
        lines += ["", *INTERACTIVE_FLAG_LINES]

    if config.verbose is not None:
        lines += ["", *VERBOSE_FLAG_LINES]

    if config.script_options:
        lines += ["", "APPLICATION OPTIONS", "", indent_lines(config.script_options, INDENT)]

    return squeeze_text("\n".join(lines))
