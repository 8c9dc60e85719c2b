# topmark:header:start
#
#   project      : Bashful
#   file         : constants.py
#   file_relpath : src/bashful/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bashful Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

BASHFUL_VERSION: str = get_version("bashful")

# Doc block markers: `# doc NAME` ... `# doc-end NAME`
DOC_START_KEYWORD: str = "doc"
DOC_END_KEYWORD: str = "doc-end"

# Suffix removed from a source file name to obtain its library name
LIBRARY_SUFFIX: str = ".sh"

HELP_COMMAND: str = "help"
AVAILABLE_COMMANDS_TITLE: str = "Available commands:"
DEFAULT_SHELL: str = "bash"

DEFAULT_INFO_MESSAGE: str = "All updates are complete."
DEFAULT_WARN_MESSAGE: str = "A warning has occurred."
DEFAULT_ERROR_MESSAGE: str = "An error has occurred."

WARN_PREFIX: str = "WARNING: "
ERROR_PREFIX: str = "ERROR: "

DEFAULT_DIE_EXIT_CODE: int = 1
DEFAULT_USAGE_EXIT_CODE: int = 0

# Indentation used for option blocks and command listings
INDENT: str = "    "

# Config file names searched by `bashful.config.loaders`
BASHFUL_TOML_NAME: str = "bashful.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
