# topmark:header:start
#
#   project      : Bashful
#   file         : __init__.py
#   file_relpath : src/bashful/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bashful command-line interface (Click)."""
