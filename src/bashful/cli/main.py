# topmark:header:start
#
#   project      : Bashful
#   file         : main.py
#   file_relpath : src/bashful/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the Bashful CLI.

Group-level options are resolved once and stored in ``ctx.obj``:

- ``console``: the `ClickConsole` used for all program output;
- ``color_enabled``: the resolved color decision;
- ``mode_overrides``: a `MessagesConfig` holding only the verbose and
  interactive modes given on the command line;
- ``config_file`` / ``no_config``: config file selection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bashful.cli.commands.doc import doc_command, tags_command
from bashful.cli.commands.help import exec_command, help_command
from bashful.cli.commands.messages import (
    die_command,
    error_command,
    info_command,
    usage_command,
    warn_command,
)
from bashful.cli.commands.version import version_command
from bashful.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_config_options,
    common_mode_options,
    resolve_mode,
)
from bashful.config.logging import get_logger, resolve_env_log_level, setup_logging
from bashful.config.model import MessagesConfig
from bashful.messages.color import ColorMode, resolve_color_mode
from bashful.messages.console import ClickConsole

if TYPE_CHECKING:
    from pathlib import Path

    from bashful.messages.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    color_mode: str | None,
    no_color: bool,
    verbose: bool,
    quiet: bool,
    interactive: bool,
    force: bool,
    config_file: Path | None,
    no_config: bool,
) -> None:
    """Initialize shared state (logging, color, modes, config) on the Click context."""
    ctx.ensure_object(dict)

    setup_logging(level=resolve_env_log_level())

    effective_color_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or "auto")
    enable_color: bool = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    ctx.obj["mode_overrides"] = MessagesConfig(
        verbose=resolve_mode(verbose, quiet, on_flag="--verbose", off_flag="--quiet"),
        interactive=resolve_mode(interactive, force, on_flag="--interactive", off_flag="--force"),
    )
    ctx.obj["config_file"] = config_file
    ctx.obj["no_config"] = no_config
    logger.debug("CLI state: color=%s overrides=%s", enable_color, ctx.obj["mode_overrides"])


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Bashful: embedded script documentation and user messages.",
)
@common_mode_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    interactive: bool,
    force: bool,
    color_mode: str | None,
    no_color: bool,
    config_file: Path | None,
    no_config: bool,
) -> None:
    """Entry point for the Bashful CLI."""
    init_common_state(
        ctx,
        color_mode=color_mode,
        no_color=no_color,
        verbose=verbose,
        quiet=quiet,
        interactive=interactive,
        force=force,
        config_file=config_file,
        no_config=no_config,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(doc_command)

cli.add_command(tags_command)

cli.add_command(help_command)

cli.add_command(exec_command)

cli.add_command(info_command)

cli.add_command(warn_command)

cli.add_command(error_command)

cli.add_command(die_command)

cli.add_command(usage_command)

if __name__ == "__main__":
    cli()
