# topmark:header:start
#
#   project      : Bashful
#   file         : version.py
#   file_relpath : src/bashful/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bashful `version` command."""

from __future__ import annotations

import click

from bashful.cli.cmd_common import get_console
from bashful.constants import BASHFUL_VERSION


@click.command(
    name="version",
    help="Show the current version of Bashful.",
)
def version_command() -> None:
    """Print the installed Bashful version."""
    console = get_console(click.get_current_context())
    console.print(BASHFUL_VERSION)
