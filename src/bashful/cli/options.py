# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/bashful/cli/options.py
#   project      : Bashful
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and their resolution logic.

The group-level options decide the color mode and override the messaging
modes (verbose, interactive) that otherwise come from the environment or a
config file. The helpers here are Click-aware.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from bashful.cli.errors import BashfulUsageError
from bashful.messages.color import ColorMode

P = ParamSpec("P")
R = TypeVar("R")

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}

#: Commands that forward their arguments untouched (e.g. to a script).
PASSTHROUGH_CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
}


def resolve_mode(on: bool, off: bool, *, on_flag: str, off_flag: str) -> bool | None:
    """Resolve an on/off flag pair into a tri-state mode override.

    Returns:
        bool | None: True if ``on``, False if ``off``, None if neither was given.

    Raises:
        BashfulUsageError: If both flags were given.
    """
    if on and off:
        raise BashfulUsageError(f"The '{on_flag}' and '{off_flag}' options are mutually exclusive.")
    if on:
        return True
    if off:
        return False
    return None


def common_mode_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose``, ``-q/--quiet``, ``-i/--interactive`` and ``-f/--force``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "-v",
        "--verbose",
        is_flag=True,
        help="Turn verbose mode on (show messages sent with -c).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        is_flag=True,
        help="Turn verbose mode off.",
    )(f)
    f = click.option(
        "-i",
        "--interactive",
        is_flag=True,
        help="Turn interactive mode on.",
    )(f)
    f = click.option(
        "-f",
        "--force",
        is_flag=True,
        help="Turn interactive mode off (don't prompt).",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config`` options.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read usage texts and modes from this TOML file "
        "(bashful.toml, or pyproject.toml with [tool.bashful]).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Do not look for a config file in the current directory or its parents.",
    )(f)
    return f


def check_verbose_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``-c/--check`` option of the message commands."""
    return click.option(
        "-c",
        "--check",
        "check_verbose",
        is_flag=True,
        help="Only show the message when verbose mode is on.",
    )(f)
