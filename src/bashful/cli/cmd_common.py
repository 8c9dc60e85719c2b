# topmark:header:start
#
#   project      : Bashful
#   file         : cmd_common.py
#   file_relpath : src/bashful/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Small helpers shared by the Click commands.

They only encapsulate plumbing: reaching the console stored on the context
and building the messenger from the layered configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from bashful.cli.errors import reraise_as_cli_error
from bashful.config.loaders import discover_config_file, resolve_messages_config
from bashful.config.logging import get_logger
from bashful.messages.console import ClickConsole
from bashful.messages.messenger import Messenger

if TYPE_CHECKING:
    from bashful.config.model import MessagesConfig
    from bashful.messages.console import ConsoleLike

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context (plain console as a fallback)."""
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_messages_config(ctx: click.Context) -> MessagesConfig:
    """Resolve the messaging config: environment < config file < CLI flags.

    Raises:
        BashfulConfigError: If the config file is unreadable or malformed.
    """
    ctx.ensure_object(dict)
    config_file: Path | None = ctx.obj.get("config_file")
    if config_file is None and not ctx.obj.get("no_config", False):
        config_file = discover_config_file(Path.cwd())
        if config_file is not None:
            logger.debug("Using discovered config file %s", config_file)

    with reraise_as_cli_error():
        return resolve_messages_config(
            config_file=config_file,
            overrides=ctx.obj.get("mode_overrides"),
        )


def get_messenger(ctx: click.Context) -> Messenger:
    """Return a messenger bound to the context's console and resolved config."""
    return Messenger(get_messages_config(ctx), get_console(ctx))
