# topmark:header:start
#
#   project      : Bashful
#   file         : errors.py
#   file_relpath : src/bashful/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Bashful CLI.

Library code raises plain exceptions (`OSError`, `UnicodeDecodeError`,
`ScriptNotFoundError`, `ConfigError`); commands translate them into the
classes below with [`reraise_as_cli_error`][bashful.cli.errors.reraise_as_cli_error]
so each failure maps to a stable exit code.

Styling:
    Errors are shown through the project console when one is present in the
    Click context, and with Click's default styling otherwise.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Any

import click

from bashful.cli.exit_codes import ExitCode
from bashful.config.model import ConfigError
from bashful.doc.help import ScriptNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterator


class BashfulError(click.ClickException):
    """Base class for all Bashful CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class BashfulUsageError(BashfulError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BashfulConfigError(BashfulError):
    """Error for missing, unreadable or malformed config files."""

    exit_code = ExitCode.CONFIG_ERROR


class BashfulFileNotFoundError(BashfulError):
    """Error when a source file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class BashfulScriptNotFoundError(BashfulFileNotFoundError):
    """Error when a script cannot be found on disk or on ``PATH``."""


class BashfulIOError(BashfulError):
    """Error for I/O errors reading sources or starting a shell."""

    exit_code = ExitCode.IO_ERROR


class BashfulEncodingError(BashfulError):
    """Error for sources that are not valid UTF-8."""

    exit_code = ExitCode.ENCODING_ERROR


@contextmanager
def reraise_as_cli_error() -> Iterator[None]:
    """Translate library exceptions raised in the block into `BashfulError`s."""
    try:
        yield
    except ScriptNotFoundError as exc:
        raise BashfulScriptNotFoundError(str(exc)) from exc
    except ConfigError as exc:
        raise BashfulConfigError(str(exc)) from exc
    except FileNotFoundError as exc:
        raise BashfulFileNotFoundError(f"File not found: {exc.filename}") from exc
    except UnicodeDecodeError as exc:
        raise BashfulEncodingError(f"Cannot decode source as UTF-8: {exc}") from exc
    except OSError as exc:
        raise BashfulIOError(f"I/O error: {exc}") from exc
