# pylp:header:start
#
#   project      : pylp
#   file         : __main__.py
#   file_relpath : src/pylp/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Module entry point for running pylp via ``python -m pylp``.

It delegates directly to :func:`pylp.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how pylp is launched.

Examples:
    Upper-case every line::

        printf 'a\\nb\\n' | python -m pylp -c '_!.upper()'
"""

from __future__ import annotations

from pylp.cli.main import cli

if __name__ == "__main__":
    cli()
