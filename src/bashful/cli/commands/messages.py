# topmark:header:start
#
#   project      : Bashful
#   file         : messages.py
#   file_relpath : src/bashful/cli/commands/messages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bashful message commands: `info`, `warn`, `error`, `die` and `usage`.

All of them write to stderr. With ``-c`` a message is only shown when verbose
mode is on (``VERBOSE``, the config file, or the group's ``-v``). `die` and
`usage` exit with the given code, which defaults to 1 and 0 respectively.
"""

from __future__ import annotations

import click

from bashful.cli.cmd_common import get_messenger
from bashful.cli.options import check_verbose_option
from bashful.constants import (
    DEFAULT_DIE_EXIT_CODE,
    DEFAULT_INFO_MESSAGE,
    DEFAULT_USAGE_EXIT_CODE,
)


@click.command(name="info", help=f"Show a bold message (default: '{DEFAULT_INFO_MESSAGE}').")
@check_verbose_option
@click.argument("message", required=False, default=None)
def info_command(*, check_verbose: bool, message: str | None = None) -> None:
    """Show an informational message."""
    get_messenger(click.get_current_context()).info(message, check_verbose=check_verbose)


@click.command(name="warn", help="Show a yellow 'WARNING:' message.")
@check_verbose_option
@click.argument("message", required=False, default=None)
def warn_command(*, check_verbose: bool, message: str | None = None) -> None:
    """Show a warning message."""
    get_messenger(click.get_current_context()).warn(message, check_verbose=check_verbose)


@click.command(name="error", help="Show a red 'ERROR:' message.")
@check_verbose_option
@click.argument("message", required=False, default=None)
def error_command(*, check_verbose: bool, message: str | None = None) -> None:
    """Show an error message."""
    get_messenger(click.get_current_context()).error(message, check_verbose=check_verbose)


@click.command(name="die", help="Show an error message and exit with CODE (default: 1).")
@check_verbose_option
@click.argument("message", required=False, default=None)
@click.argument("code", required=False, type=int, default=DEFAULT_DIE_EXIT_CODE)
def die_command(*, check_verbose: bool, code: int, message: str | None = None) -> None:
    """Show an error message and exit with ``code``.

    Args:
        check_verbose (bool): Only show the message in verbose mode.
        code (int): Exit code.
        message (str | None): Message text; a default text is used when omitted.
    """
    get_messenger(click.get_current_context()).die(message, code, check_verbose=check_verbose)


@click.command(
    name="usage",
    help="Show the usage banner of the calling script and exit with CODE (default: 0).",
    epilog="""
The banner is built from SCRIPT_NAME, SCRIPT_ARGS, SCRIPT_USAGE,
SCRIPT_DESCRIPTION, SCRIPT_EXAMPLES and SCRIPT_OPTIONS (or the [usage] table
of the config file). Nothing is shown when no script name is set.
""",
)
@click.argument("code", required=False, type=int, default=DEFAULT_USAGE_EXIT_CODE)
def usage_command(*, code: int) -> None:
    """Show the usage banner and exit with ``code``."""
    get_messenger(click.get_current_context()).usage(code)
