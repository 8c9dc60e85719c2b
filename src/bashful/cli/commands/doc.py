# topmark:header:start
#
#   project      : Bashful
#   file         : doc.py
#   file_relpath : src/bashful/cli/commands/doc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bashful `doc` and `tags` commands.

`doc` prints one embedded documentation block; `tags` lists the command tags
documented in a set of files.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bashful.cli.cmd_common import get_console
from bashful.cli.errors import reraise_as_cli_error
from bashful.doc.extractor import extract
from bashful.doc.tags import list_tags

if TYPE_CHECKING:
    from bashful.messages.console import ConsoleLike


@click.command(
    name="doc",
    help="Print the documentation block NAME found in FILES ('-' reads stdin).",
    epilog="""
A block starts at a line containing '# doc NAME' and ends at the next line
containing '# doc-end NAME'. Nothing is printed when no block matches.
""",
)
@click.argument("name")
@click.argument("files", nargs=-1, type=str)
def doc_command(*, name: str, files: tuple[str, ...]) -> None:
    """Print the documentation block ``name``.

    Args:
        name (str): The doc tag to extract.
        files (tuple[str, ...]): Source files; ``-`` reads stdin.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    with reraise_as_cli_error():
        text: str = extract(name, files)
    console.print(text, nl=False)


@click.command(
    name="tags",
    help="List the command tags documented in FILES.",
    epilog="""
Tags equal to a file's own name (without '.sh') document the file itself and
are not listed.
""",
)
@click.argument("files", nargs=-1, type=str)
def tags_command(*, files: tuple[str, ...]) -> None:
    """List documented command tags, one per line.

    Args:
        files (tuple[str, ...]): Source files; ``-`` reads stdin.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    with reraise_as_cli_error():
        tags: list[str] = list_tags(files)
    for tag in tags:
        console.print(tag)
