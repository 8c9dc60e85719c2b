# topmark:header:start
#
#   project      : Bashful
#   file         : __main__.py
#   file_relpath : src/bashful/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Bashful via ``python -m bashful``.

Delegates to :func:`bashful.cli.main.cli`, the same entry point as the
``bashful`` console script.

Examples:
    Show the documentation of a script library::

        python -m bashful help ./bashful-doc.sh
"""

from __future__ import annotations

from bashful.cli.main import cli

if __name__ == "__main__":
    cli()
