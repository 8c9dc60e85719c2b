# topmark:header:start
#
#   project      : Bashful
#   file         : loaders.py
#   file_relpath : src/bashful/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load messaging configuration from TOML files.

Two file shapes are supported:

- ``bashful.toml`` with top-level ``[usage]`` and ``[modes]`` tables;
- ``pyproject.toml`` with the same tables nested under ``[tool.bashful]``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from bashful.config.keys import Toml
from bashful.config.logging import get_logger
from bashful.config.model import ConfigError, MessagesConfig
from bashful.constants import BASHFUL_TOML_NAME, PYPROJECT_TOML_NAME

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from bashful.config.logging import BashfulLogger

logger: BashfulLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file.

    Args:
        path (Path): Path to the TOML document.

    Returns:
        dict[str, Any]: The parsed content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    data: Any = doc.unwrap()
    return cast("dict[str, Any]", data) if isinstance(data, dict) else {}


def bashful_section(path: Path, data: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the part of ``data`` holding Bashful settings for ``path``.

    For ``pyproject.toml`` this is ``[tool.bashful]`` (empty if absent);
    for any other file it is the whole document.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    section: Any = tool.get(Toml.SECTION_BASHFUL, {}) if isinstance(tool, dict) else {}
    if not section:
        logger.debug("No [tool.bashful] section in %s", path)
    return section if isinstance(section, dict) else {}


def load_config_file(path: Path) -> MessagesConfig:
    """Load a `MessagesConfig` from ``path``.

    Raises:
        ConfigError: If the file is unreadable, malformed or ill-typed.
    """
    logger.debug("Loading messages config from %s", path)
    return MessagesConfig.from_toml_dict(bashful_section(path, load_toml_dict(path)))


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest config file walking upward from ``start``.

    In each directory ``bashful.toml`` wins over a ``pyproject.toml`` that
    has a ``[tool.bashful]`` table.
    """
    directory: Path = start if start.is_dir() else start.parent
    for candidate_dir in (directory, *directory.parents):
        candidate: Path = candidate_dir / BASHFUL_TOML_NAME
        if candidate.is_file():
            return candidate
        pyproject: Path = candidate_dir / PYPROJECT_TOML_NAME
        if pyproject.is_file():
            try:
                if bashful_section(pyproject, load_toml_dict(pyproject)):
                    return pyproject
            except ConfigError as exc:
                logger.warning("Skipping %s: %s", pyproject, exc)
    return None


def resolve_messages_config(
    *,
    environ: Mapping[str, str] | None = None,
    config_file: Path | None = None,
    overrides: MessagesConfig | None = None,
) -> MessagesConfig:
    """Layer environment, config file and explicit overrides (last wins)."""
    config: MessagesConfig = MessagesConfig.from_env(environ)
    if config_file is not None:
        config = config.merge_with(load_config_file(config_file))
    if overrides is not None:
        config = config.merge_with(overrides)
    logger.debug("Resolved messages config: %s", config)
    return config
