# topmark:header:start
#
#   project      : Bashful
#   file         : execute.py
#   file_relpath : src/bashful/doc/execute.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry-point dispatch for self-documenting scripts.

`execute` gives any script library a uniform command line:

    SCRIPT                         show the script documentation
    SCRIPT help [COMMAND]          show the script (or COMMAND) documentation
    SCRIPT COMMAND [ARGS...]       source SCRIPT and run COMMAND with ARGS

Help requests never execute anything. Commands run in a shell that has
sourced the script; their exit status is passed through unchanged.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

import click

from bashful.config.logging import get_logger
from bashful.constants import DEFAULT_SHELL, HELP_COMMAND
from bashful.doc.help import render_help, resolve_script

if TYPE_CHECKING:
    import os
    from collections.abc import Sequence
    from pathlib import Path

    from bashful.config.logging import BashfulLogger

logger: BashfulLogger = get_logger(__name__)

# `$0` is the sourced script, `$@` the command and its arguments.
SOURCE_AND_RUN: str = '. "$0"; "$@"'


@dataclass(frozen=True)
class ShellRunner:
    """Run a command defined by a sourced shell script.

    Attributes:
        shell (str): Shell executable used to source the script.
    """

    shell: str = DEFAULT_SHELL

    def command_line(self, src: Path, command: str, args: Sequence[str]) -> list[str]:
        """Return the argv that sources ``src`` and runs ``command``.

        ``src`` is made absolute: the shell's ``.`` searches ``PATH`` for a
        name without a slash.
        """
        return [self.shell, "-c", SOURCE_AND_RUN, str(src.absolute()), command, *args]

    def run(self, src: Path, command: str, args: Sequence[str]) -> int:
        """Run ``command`` from ``src`` and return its exit status.

        Raises:
            FileNotFoundError: If the shell executable does not exist.
        """
        argv: list[str] = self.command_line(src, command, args)
        logger.debug("Running %s", argv)
        completed = subprocess.run(argv, check=False)
        logger.debug("%s exited with %d", command, completed.returncode)
        return completed.returncode


def is_help_request(args: Sequence[str]) -> bool:
    """Return True for no arguments, an empty first argument, or ``help``."""
    return not args or not args[0] or args[0] == HELP_COMMAND


def execute(
    script: str | os.PathLike[str],
    args: Sequence[str],
    *,
    runner: ShellRunner | None = None,
    out: TextIO | None = None,
) -> int:
    """Show documentation for ``script`` or run one of its commands.

    Args:
        script (str | os.PathLike[str]): Script path or name on ``PATH``.
        args (Sequence[str]): Remaining command-line arguments.
        runner (ShellRunner | None): Command runner; defaults to a bash runner.
        out (TextIO | None): Stream receiving help text; defaults to stdout.

    Returns:
        int: ``0`` after showing help, otherwise the command's exit status.

    Raises:
        ScriptNotFoundError: If ``script`` cannot be resolved.
    """
    src: Path = resolve_script(script)

    if is_help_request(args):
        command: str | None = args[1] if len(args) > 1 else None
        click.echo(render_help(src, command), nl=False, file=out)
        return 0

    runner = runner or ShellRunner()
    return runner.run(src, args[0], list(args[1:]))
