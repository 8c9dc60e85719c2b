# topmark:header:start
#
#   project      : Bashful
#   file         : __init__.py
#   file_relpath : src/bashful/messages/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colorized, verbosity-gated user messages and usage banners."""

from __future__ import annotations

from bashful.messages.color import ColorMode, resolve_color_mode
from bashful.messages.console import ClickConsole, ConsoleLike
from bashful.messages.messenger import Messenger
from bashful.messages.usage import render_usage

__all__ = [
    "ClickConsole",
    "ColorMode",
    "ConsoleLike",
    "Messenger",
    "render_usage",
    "resolve_color_mode",
]
