# topmark:header:start
#
#   project      : Bashful
#   file         : model.py
#   file_relpath : src/bashful/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Messaging configuration model.

`MessagesConfig` carries everything the messenger reads at call time: the
usage-banner texts and the verbose/interactive modes. It is immutable; build
variants with [`merge_with`][bashful.config.model.MessagesConfig.merge_with]
or [`dataclasses.replace`][dataclasses.replace].

Modes are tri-state:

- ``None``: the mode is not configured for this script (its flags are not
  advertised in the usage banner);
- ``False``: the mode is available but currently off;
- ``True``: the mode is on. Only ``verbose is True`` opens the verbosity gate.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from bashful.config.keys import Env, Toml
from bashful.config.logging import get_logger
from bashful.utils.text import expand_echo_escapes, is_truthy

if TYPE_CHECKING:
    from collections.abc import Mapping

    from bashful.config.logging import BashfulLogger

logger: BashfulLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised for unreadable, malformed or ill-typed configuration."""


@dataclass(frozen=True, slots=True)
class MessagesConfig:
    """Immutable configuration consumed by the messenger.

    Attributes:
        script_name (str | None): Script name shown in the usage line; when
            unset, `usage` prints nothing.
        script_args (str | None): Argument synopsis following ``[OPTIONS]``.
        script_usage (str | None): Free-form text printed after the usage line.
        script_description (str | None): Description paragraph.
        script_examples (str | None): Examples section body.
        script_options (str | None): Application options, one per line.
        verbose (bool | None): Verbose mode (tri-state, see module docs).
        interactive (bool | None): Interactive mode (tri-state).
        home (str | None): Home directory abbreviated to ``~`` in messages.
    """

    script_name: str | None = None
    script_args: str | None = None
    script_usage: str | None = None
    script_description: str | None = None
    script_examples: str | None = None
    script_options: str | None = None
    verbose: bool | None = None
    interactive: bool | None = None
    home: str | None = None

    @property
    def is_verbose(self) -> bool:
        """Whether checked messages should be emitted."""
        return self.verbose is True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MessagesConfig:
        """Build a config from the conventional environment variables.

        Empty values count as unset. Backslash escapes in the description,
        examples and options are interpreted as by ``echo -e``.

        Args:
            environ (Mapping[str, str] | None): Environment to read; defaults to
                `os.environ`.

        Returns:
            MessagesConfig: The resulting configuration.
        """
        env: Mapping[str, str] = os.environ if environ is None else environ

        def _text(key: str) -> str | None:
            return env.get(key) or None

        def _echo_text(key: str) -> str | None:
            value: str | None = _text(key)
            return expand_echo_escapes(value) if value else None

        return cls(
            script_name=_text(Env.SCRIPT_NAME),
            script_args=_text(Env.SCRIPT_ARGS),
            script_usage=_text(Env.SCRIPT_USAGE),
            script_description=_echo_text(Env.SCRIPT_DESCRIPTION),
            script_examples=_echo_text(Env.SCRIPT_EXAMPLES),
            script_options=_echo_text(Env.SCRIPT_OPTIONS),
            verbose=is_truthy(env.get(Env.VERBOSE)),
            interactive=is_truthy(env.get(Env.INTERACTIVE)),
            home=_text(Env.HOME),
        )

    @classmethod
    def from_toml_dict(cls, data: Mapping[str, Any]) -> MessagesConfig:
        """Build a config from a parsed ``bashful.toml`` document.

        Recognized tables are ``[usage]`` and ``[modes]``; other tables are
        ignored with a debug log.

        Raises:
            ConfigError: If a table or value has the wrong type.
        """
        usage: Mapping[str, Any] = _table(data, Toml.SECTION_USAGE)
        modes: Mapping[str, Any] = _table(data, Toml.SECTION_MODES)

        for key in data:
            if key not in (Toml.SECTION_USAGE, Toml.SECTION_MODES):
                logger.debug("Ignoring unknown config table [%s]", key)

        return cls(
            script_name=_str_value(usage, Toml.KEY_NAME),
            script_args=_str_value(usage, Toml.KEY_ARGS),
            script_usage=_str_value(usage, Toml.KEY_USAGE),
            script_description=_str_value(usage, Toml.KEY_DESCRIPTION),
            script_examples=_str_value(usage, Toml.KEY_EXAMPLES),
            script_options=_str_value(usage, Toml.KEY_OPTIONS),
            verbose=_bool_value(modes, Toml.KEY_VERBOSE),
            interactive=_bool_value(modes, Toml.KEY_INTERACTIVE),
        )

    def merge_with(self, other: MessagesConfig) -> MessagesConfig:
        """Return a new config where values set in ``other`` win (last-wins)."""
        values: dict[str, Any] = {}
        for f in fields(self):
            theirs: Any = getattr(other, f.name)
            values[f.name] = theirs if theirs is not None else getattr(self, f.name)
        return MessagesConfig(**values)


def _table(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value: Any = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table, got {type(value).__name__}")
    return value


def _str_value(table: Mapping[str, Any], key: str) -> str | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string, got {type(value).__name__}")
    return value or None


def _bool_value(table: Mapping[str, Any], key: str) -> bool | None:
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        return is_truthy(value)
    raise ConfigError(f"'{key}' must be a boolean, got {type(value).__name__}")
