# topmark:header:start
#
#   project      : Bashful
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Bashful test suite.

This file sets up global fixtures (sample script libraries, a capturing
messenger) and customizes the logging configuration for test runs.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from bashful.config import logging
from bashful.config.model import MessagesConfig
from bashful.messages.console import ClickConsole
from bashful.messages.messenger import Messenger

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_doc: DecoratorType[Any] = as_typed_mark(pytest.mark.doc)
mark_messages: DecoratorType[Any] = as_typed_mark(pytest.mark.messages)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


# A small self-documenting library, shaped like the bashful shell libraries.
DEMO_LIBRARY: str = """\
#!/usr/bin/env bash

# doc demo {{{
#
# The demo library shows embedded docs.
#
#
# Usage: demo COMMAND
#
# doc-end demo }}}

greet() #{{{1
{
    # doc greet {{{
    #
    # Print a greeting.
    #
    # Usage: greet [NAME]
    #
    # doc-end greet }}}

    echo "Hello, ${1:-world}!"
}

fail_with() #{{{1
{
    # doc fail_with {{{
    #
    # Return the given status.
    #
    # doc-end fail_with }}}

    return "$1"
}
"""

DEMO_LIBRARY_DOC: str = "\nThe demo library shows embedded docs.\n\nUsage: demo COMMAND\n\n"
DEMO_GREET_DOC: str = "\nPrint a greeting.\n\nUsage: greet [NAME]\n\n"


@pytest.fixture(autouse=True)
def silence_bashful_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove ``BASHFUL_LOG_LEVEL``.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so diagnostics are captured by pytest."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def demo_library(tmp_path: Path) -> Path:
    """Write the demo library to ``tmp_path/demo.sh`` and return its path."""
    path: Path = tmp_path / "demo.sh"
    path.write_text(DEMO_LIBRARY, encoding="utf-8")
    return path


class CapturedMessenger:
    """A messenger whose stdout/stderr are in-memory buffers."""

    def __init__(self, config: MessagesConfig, *, enable_color: bool = False) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.console = ClickConsole(enable_color=enable_color, out=self.out, err=self.err)
        self.messenger = Messenger(config, self.console)

    @property
    def stderr(self) -> str:
        return self.err.getvalue()

    @property
    def stdout(self) -> str:
        return self.out.getvalue()


def make_messenger(*, enable_color: bool = False, **config: Any) -> CapturedMessenger:
    """Return a `CapturedMessenger` for a `MessagesConfig` built from ``config``.

    Args:
        enable_color (bool): Whether the console emits ANSI styles.
        **config (Any): `MessagesConfig` fields.

    Returns:
        CapturedMessenger: The messenger and its captured streams.
    """
    return CapturedMessenger(MessagesConfig(**config), enable_color=enable_color)
