# topmark:header:start
#
#   project      : Bashful
#   file         : __init__.py
#   file_relpath : src/bashful/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for Bashful: messaging settings, TOML loading and logging."""

from __future__ import annotations

from bashful.config.loaders import (
    discover_config_file,
    load_config_file,
    resolve_messages_config,
)
from bashful.config.model import ConfigError, MessagesConfig

__all__ = [
    "ConfigError",
    "MessagesConfig",
    "discover_config_file",
    "load_config_file",
    "resolve_messages_config",
]
