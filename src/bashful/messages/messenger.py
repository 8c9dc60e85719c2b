# topmark:header:start
#
#   project      : Bashful
#   file         : messenger.py
#   file_relpath : src/bashful/messages/messenger.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Leveled user messages and the usage banner.

All output goes to stderr. Every message operation accepts
``check_verbose``: when set, the message is only emitted if the configured
verbose mode is on. `die` and `usage` are the only operations that end the
process; they do so by raising `SystemExit` with the caller's code.

Example:
    ```python
    messenger = Messenger(MessagesConfig.from_env())
    messenger.warn("Disk almost full")  # stderr: "WARNING: Disk almost full"
    messenger.info("Copied files", check_verbose=True)  # only with VERBOSE=1
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

from bashful.config.logging import get_logger
from bashful.constants import (
    DEFAULT_DIE_EXIT_CODE,
    DEFAULT_ERROR_MESSAGE,
    DEFAULT_INFO_MESSAGE,
    DEFAULT_USAGE_EXIT_CODE,
    DEFAULT_WARN_MESSAGE,
    ERROR_PREFIX,
    WARN_PREFIX,
)
from bashful.messages.console import ClickConsole
from bashful.messages.usage import render_usage
from bashful.utils.text import abbreviate_home, expand_echo_escapes

if TYPE_CHECKING:
    from bashful.config.logging import BashfulLogger
    from bashful.config.model import MessagesConfig
    from bashful.messages.console import ConsoleLike

logger: BashfulLogger = get_logger(__name__)


class Messenger:
    """Emit info/warn/error messages and usage banners for a script.

    Args:
        config (MessagesConfig): Modes and usage texts, read at call time.
        console (ConsoleLike | None): Output console; defaults to a
            `ClickConsole` writing to the process streams.
    """

    def __init__(self, config: MessagesConfig, console: ConsoleLike | None = None) -> None:
        self.config = config
        self.console: ConsoleLike = console or ClickConsole()

    def _suppressed(self, check_verbose: bool) -> bool:
        if check_verbose and not self.config.is_verbose:
            logger.trace("Checked message suppressed (verbose=%s)", self.config.verbose)
            return True
        return False

    def info(self, message: str | None = None, *, check_verbose: bool = False) -> None:
        """Display a bold informational message.

        Backslash escapes are interpreted as by ``echo -e`` and occurrences of
        the home directory are shortened to ``~``.
        """
        if self._suppressed(check_verbose):
            return
        msg: str = abbreviate_home(
            expand_echo_escapes(message or DEFAULT_INFO_MESSAGE), self.config.home
        )
        self.console.message(self.console.styled(msg, bold=True))

    def warn(self, message: str | None = None, *, check_verbose: bool = False) -> None:
        """Display a yellow ``WARNING:`` message."""
        if self._suppressed(check_verbose):
            return
        msg: str = message or DEFAULT_WARN_MESSAGE
        self.info(self.console.styled(f"{WARN_PREFIX}{msg}", fg="yellow"))

    def error(self, message: str | None = None, *, check_verbose: bool = False) -> None:
        """Display a red, bold ``ERROR:`` message."""
        if self._suppressed(check_verbose):
            return
        msg: str = message or DEFAULT_ERROR_MESSAGE
        self.info(self.console.styled(f"{ERROR_PREFIX}{msg}", fg="red", bold=True))

    def die(
        self,
        message: str | None = None,
        exit_code: int = DEFAULT_DIE_EXIT_CODE,
        *,
        check_verbose: bool = False,
    ) -> NoReturn:
        """Display an error message and exit with ``exit_code``.

        Raises:
            SystemExit: Always, with ``exit_code``.
        """
        self.error(message, check_verbose=check_verbose)
        logger.debug("die: exiting with %d", exit_code)
        raise SystemExit(exit_code)

    def usage(self, exit_code: int = DEFAULT_USAGE_EXIT_CODE) -> NoReturn:
        """Display the usage banner (if a script name is set) and exit.

        Raises:
            SystemExit: Always, with ``exit_code``.
        """
        banner: str = render_usage(self.config)
        if banner:
            self.console.message(banner, nl=False)
        else:
            logger.debug("usage: no script name configured; nothing to show")
        raise SystemExit(exit_code)
