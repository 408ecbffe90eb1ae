# pylp:header:start
#
#   project      : pylp
#   file         : errors.py
#   file_relpath : src/pylp/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Exceptions for the pylp CLI.

Usage:
    Raise these exceptions in the command body to signal errors with
    standardized messages and exit codes. Click catches them, calls `show()`
    and exits with ``exit_code``.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from pylp.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from pylp.cli.console import ConsoleLike
    from pylp.pipeline.errors import StageError


def _console_of(ctx: click.Context | None) -> ConsoleLike | None:
    if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
        return ctx.obj.get("console")
    return None


class PylpError(click.ClickException):
    """Base class for all pylp CLI errors."""

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str, ctx: click.Context | None = None) -> None:
        super().__init__(message)
        # Click pops the context before calling `show()`; keep a reference.
        self.ctx = ctx or click.get_current_context(silent=True)

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        console = _console_of(self.ctx)
        if console is None:
            super().show(file)
            return
        console.error(self.format_message())


class PylpUsageError(PylpError):
    """Error for command-line invocation errors (invalid flags/args, bad fragments).

    The usage line and a ``--help`` hint follow the message, like Click's own
    usage errors.
    """

    exit_code = ExitCode.USAGE_ERROR

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error followed by the command usage."""
        super().show(file)
        ctx = self.ctx
        console = _console_of(ctx)
        if ctx is None:
            return
        hint: str = f"Try '{ctx.command_path} {ctx.help_option_names[0]}' for help."
        if console is None:
            click.echo(ctx.get_usage(), file=file, err=True)
            click.echo(hint, file=file, err=True)
        else:
            console.diag(ctx.get_usage())
            console.diag(hint)


class PylpConfigError(PylpError):
    """Error for fragment file errors (missing/unreadable/malformed)."""

    exit_code = ExitCode.CONFIG_ERROR


class PylpIOError(PylpError):
    """Error for I/O errors reading STDIN or writing STDOUT."""

    exit_code = ExitCode.IO_ERROR


class PylpUnexpectedError(PylpError):
    """Last-resort error for failures outside the user's code (e.g. encoding STDOUT)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


class PylpStageError(PylpError):
    """A user stage raised at runtime; shows the full multi-line report."""

    exit_code = ExitCode.FAILURE

    def __init__(self, error: StageError) -> None:
        super().__init__(str(error))
        self.error = error

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the stage report: headline in error style, context lines plain."""
        console = _console_of(self.ctx)
        headline, *details = self.error.report()
        if console is None:
            click.echo(headline, file=file, err=True)
            for detail in details:
                click.echo(detail, file=file, err=True)
            return
        console.error(headline)
        for detail in details:
            console.diag(detail)
