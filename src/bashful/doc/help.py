# topmark:header:start
#
#   project      : Bashful
#   file         : help.py
#   file_relpath : src/bashful/doc/help.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Help screens assembled from a script's embedded documentation."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from bashful.config.logging import get_logger
from bashful.constants import AVAILABLE_COMMANDS_TITLE, INDENT
from bashful.doc.extractor import extract
from bashful.doc.tags import library_name, list_tags

logger = get_logger(__name__)


class ScriptNotFoundError(LookupError):
    """Raised when a script cannot be found on disk or on ``PATH``."""

    def __init__(self, script: str) -> None:
        super().__init__(f"Script not found: {script}")
        self.script = script


def resolve_script(script: str | os.PathLike[str]) -> Path:
    """Resolve ``script`` to a file path.

    An existing file is used as is. Otherwise the name is looked up on
    ``PATH``, like the shell's ``type -p``.

    Raises:
        ScriptNotFoundError: If neither lookup succeeds.
    """
    path = Path(script)
    if path.is_file():
        return path
    found: str | None = shutil.which(os.fspath(script))
    if found is None:
        raise ScriptNotFoundError(os.fspath(script))
    logger.debug("Resolved %s to %s via PATH", script, found)
    return Path(found)


def render_help(script: str | os.PathLike[str], command: str | None = None) -> str:
    """Render the help text for ``script`` or one of its commands.

    Without ``command``, the result is the script-level documentation (the
    block named after the script's library name) followed by the list of
    available command tags, if there are any. With ``command``, only that
    command's block is returned.

    Raises:
        ScriptNotFoundError: If ``script`` cannot be resolved.
        OSError: If the script cannot be read.
    """
    src: Path = resolve_script(script)

    if command:
        return extract(command, [src])

    text: str = extract(library_name(src), [src])
    commands: list[str] = list_tags([src])
    if commands:
        listing: str = "\n".join(f"{INDENT}{cmd}" for cmd in commands)
        text += f"\n{AVAILABLE_COMMANDS_TITLE}\n\n{listing}\n"
    return text
