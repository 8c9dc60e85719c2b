# topmark:header:start
#
#   project      : Bashful
#   file         : __init__.py
#   file_relpath : src/bashful/doc/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Embedded documentation: extraction, tag discovery, help and dispatch."""

from __future__ import annotations

from bashful.doc.execute import ShellRunner, execute
from bashful.doc.extractor import extract, extract_lines, extract_text
from bashful.doc.help import ScriptNotFoundError, render_help, resolve_script
from bashful.doc.tags import library_name, list_tags

__all__ = [
    "ScriptNotFoundError",
    "ShellRunner",
    "execute",
    "extract",
    "extract_lines",
    "extract_text",
    "library_name",
    "list_tags",
    "render_help",
    "resolve_script",
]
