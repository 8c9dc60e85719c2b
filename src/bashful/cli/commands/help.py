# topmark:header:start
#
#   project      : Bashful
#   file         : help.py
#   file_relpath : src/bashful/cli/commands/help.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bashful `help` and `exec` commands.

`help` renders a script's documentation. `exec` is the entry point a
self-documenting script delegates to: it shows help when asked (or when no
command is given) and otherwise runs the requested command from the script.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bashful.cli.cmd_common import get_console
from bashful.cli.errors import reraise_as_cli_error
from bashful.cli.options import PASSTHROUGH_CONTEXT_SETTINGS
from bashful.config.logging import get_logger
from bashful.constants import DEFAULT_SHELL
from bashful.doc.execute import ShellRunner, execute
from bashful.doc.help import render_help

if TYPE_CHECKING:
    from bashful.messages.console import ConsoleLike

logger = get_logger(__name__)


@click.command(
    name="help",
    help="Show the documentation of SCRIPT, or of one of its COMMANDs.",
)
@click.argument("script")
@click.argument("command", required=False, default=None)
def help_command(*, script: str, command: str | None = None) -> None:
    """Print the help text of ``script`` (or ``command``).

    Args:
        script (str): Script path, or a name looked up on ``PATH``.
        command (str | None): Optional command tag.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    with reraise_as_cli_error():
        text: str = render_help(script, command)
    console.print(text, nl=False)


@click.command(
    name="exec",
    help="Show help for SCRIPT or run one of its commands.",
    epilog="""
\b
  bashful exec SCRIPT                    show the script documentation
  bashful exec SCRIPT help [COMMAND]     show script or command documentation
  bashful exec SCRIPT COMMAND [ARGS...]  source SCRIPT and run COMMAND

The command's exit status is passed through unchanged.
""",
    context_settings=PASSTHROUGH_CONTEXT_SETTINGS,
)
@click.option(
    "--shell",
    default=DEFAULT_SHELL,
    show_default=True,
    help="Shell used to source SCRIPT.",
)
@click.argument("script")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def exec_command(*, shell: str, script: str, args: tuple[str, ...]) -> None:
    """Dispatch ``args`` against ``script`` and exit with the resulting status.

    Args:
        shell (str): Shell executable used to run commands.
        script (str): Script path, or a name looked up on ``PATH``.
        args (tuple[str, ...]): ``help [COMMAND]`` or ``COMMAND [ARGS...]``.
    """
    ctx = click.get_current_context()

    with reraise_as_cli_error():
        status: int = execute(script, args, runner=ShellRunner(shell))
    logger.debug("exec %s %s -> %d", script, list(args), status)
    ctx.exit(status)
