# topmark:header:start
#
#   project      : Bashful
#   file         : __init__.py
#   file_relpath : src/bashful/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bashful package.

Bashful helps scripts document and explain themselves: it extracts
``# doc NAME`` comment blocks to serve as inline help, dispatches help and
commands for self-documenting script libraries, and prints colorized,
verbosity-gated messages and usage banners. It exposes both a CLI and a
small typed API.
"""

from __future__ import annotations
