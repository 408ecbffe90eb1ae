# pylp:header:start
#
#   project      : pylp
#   file         : options.py
#   file_relpath : src/pylp/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Common CLI option utilities for the pylp command.

This module centralizes the option decorators and their resolution logic, so
the command itself can stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

import click

from pylp.cli.errors import PylpUsageError

if TYPE_CHECKING:
    from collections.abc import Sequence

P = ParamSpec("P")
R = TypeVar("R")

CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


class ColorMode(str, Enum):
    """Color mode for diagnostics written to STDERR."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stderr_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stderr_isatty: Whether stderr is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stderr is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stderr_isatty is None:
        try:
            stderr_isatty = sys.stderr.isatty()
        except (AttributeError, ValueError):
            stderr_isatty = False
    return bool(stderr_isatty)


def single_value(values: Sequence[str], option_name: str) -> str | None:
    """Return the only value of a repeatable option, or None when absent.

    Args:
        values: Values collected by a ``multiple=True`` option.
        option_name: Option name used in the error message.

    Returns:
        The single value, or None.

    Raises:
        PylpUsageError: If the option was given more than once.
    """
    if len(values) > 1:
        raise PylpUsageError(f"Option '{option_name}' may be given at most once.")
    return values[0] if values else None


def fragment_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the code fragment options ``-c``, ``-b``, ``-e`` and ``--config``.

    ``--begin`` and ``--end`` are collected as repeatable options so that a
    duplicate can be reported as a usage error instead of silently overriding.
    """
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read fragments and flags from a TOML file (command-line values take precedence).",
    )(f)
    f = click.option(
        "-e",
        "--end",
        "end",
        multiple=True,
        metavar="CODE",
        help=(
            "Code to execute after all lines have been processed "
            "(S is the store, c the number of processed lines)."
        ),
    )(f)
    f = click.option(
        "-b",
        "--begin",
        "begin",
        multiple=True,
        metavar="CODE",
        help="Code to execute before processing lines (S is the store).",
    )(f)
    f = click.option(
        "-c",
        "--code",
        "code",
        multiple=True,
        metavar="CODE",
        help=(
            "Code to execute for each line (_ is the current line, S the store, "
            "i the 0-based line index). Can be specified multiple times."
        ),
    )(f)
    return f


def output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--quiet``, ``--debug`` and ``--debug-store``."""
    f = click.option(
        "--debug-store",
        "debug_store",
        is_flag=True,
        default=False,
        help="Print the store whenever a line fragment changed it (ignored without --debug).",
    )(f)
    f = click.option(
        "-d",
        "--debug",
        is_flag=True,
        default=False,
        help="Print debug information during processing on STDERR (implies --quiet).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        is_flag=True,
        default=False,
        help="Never print processed lines.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` (diagnostics only; data is never styled)."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode], case_sensitive=False),
        default=None,
        help="Color diagnostics: auto (default), always, or never.",
    )(f)
    return f
