# pylp:header:start
#
#   project      : pylp
#   file         : main.py
#   file_relpath : src/pylp/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""The pylp command.

Key ideas:
- Shared state (console, color) is initialized once and placed into ``ctx.obj``.
- Configuration is merged (fragment file, then command line) and frozen
  before the pipeline is compiled; compilation happens before STDIN is read.
- The engine never prints or exits: this module maps its errors to Click
  exceptions and exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pylp.cli.console import ClickConsole
from pylp.cli.errors import (
    PylpConfigError,
    PylpIOError,
    PylpStageError,
    PylpUnexpectedError,
    PylpUsageError,
)
from pylp.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    fragment_options,
    output_options,
    resolve_color_mode,
    single_value,
)
from pylp.config import MutableRunConfig, RunConfig
from pylp.config.loaders import ConfigFileError, load_config_file
from pylp.config.logging import get_logger, resolve_env_log_level, setup_logging
from pylp.constants import PYLP_VERSION
from pylp.pipeline import (
    FragmentCompileError,
    StageError,
    Tracer,
    build_pipeline_from_config,
    run_lines,
)

if TYPE_CHECKING:
    from pathlib import Path

    from pylp.cli.console import ConsoleLike
    from pylp.pipeline import Pipeline, RunSummary

logger = get_logger(__name__)

HELP = """Line processing utility using Python.

Reads lines from STDIN, runs each one through the --code fragments in the
order they were given and prints the result on STDOUT.

\b
In line code:
  _   current line (str, or the value returned by the previous fragment)
  S   store dict shared by all code for the whole run
  i   0-based index of the current line

\b
Result of a line fragment:
  str or number    becomes the current line
  None or False    line is dropped, remaining fragments are skipped
  anything else    current line is kept unchanged
Falling off the end of a fragment returns _.

\b
Shorthand: _!.upper() is rewritten to _ = _.upper()
In end code, c is the number of processed lines.
In all code, p(...) prints to STDOUT and e(...) prints to STDERR.
"""


def init_common_state(
    ctx: click.Context,
    *,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    # Configure internal logging via env:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


def resolve_run_config(
    *,
    config_path: Path | None,
    code: tuple[str, ...],
    begin: tuple[str, ...],
    end: tuple[str, ...],
    quiet: bool,
    debug: bool,
    debug_store: bool,
) -> RunConfig:
    """Merge the fragment file (if any) and command-line options into a `RunConfig`.

    Raises:
        PylpUsageError: If ``--begin`` or ``--end`` was repeated.
        PylpConfigError: If the fragment file is unreadable or invalid.
    """
    begin_code: str | None = single_value(begin, "--begin")
    end_code: str | None = single_value(end, "--end")

    draft = MutableRunConfig()
    if config_path is not None:
        try:
            load_config_file(config_path, draft)
        except ConfigFileError as exc:
            raise PylpConfigError(str(exc)) from exc

    draft.merge_with(
        begin=begin_code,
        code=code,
        end=end_code,
        quiet=quiet,
        debug=debug,
        debug_store=debug_store,
    )
    return draft.freeze()


@click.command(
    name="pylp",
    context_settings=CONTEXT_SETTINGS,
    help=HELP,
)
@fragment_options
@output_options
@common_color_options
@click.version_option(PYLP_VERSION, "-V", "--version", prog_name="pylp")
@click.pass_context
def cli(
    ctx: click.Context,
    *,
    code: tuple[str, ...],
    begin: tuple[str, ...],
    end: tuple[str, ...],
    config_path: Path | None,
    quiet: bool,
    debug: bool,
    debug_store: bool,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the pylp CLI."""
    init_common_state(
        ctx,
        color_mode=ColorMode(color_mode.lower()) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    config: RunConfig = resolve_run_config(
        config_path=config_path,
        code=code,
        begin=begin,
        end=end,
        quiet=quiet,
        debug=debug,
        debug_store=debug_store,
    )

    # Every fragment is compiled before the first line is read.
    try:
        pipeline: Pipeline = build_pipeline_from_config(config)
    except FragmentCompileError as exc:
        raise PylpUsageError(str(exc)) from exc

    tracer = Tracer(console.diag, enabled=config.debug, store_deltas=config.debug_store)
    stdin = click.get_text_stream("stdin")

    try:
        summary: RunSummary = run_lines(
            pipeline,
            stdin,
            emit=console.emit,
            quiet=config.quiet,
            tracer=tracer,
        )
    except StageError as exc:
        raise PylpStageError(exc) from exc
    except UnicodeDecodeError as exc:
        raise PylpIOError(f"Cannot decode input: {exc}") from exc
    except OSError as exc:
        raise PylpIOError(f"I/O error: {exc}") from exc
    except Exception as exc:
        logger.debug("Unexpected error during run", exc_info=True)
        raise PylpUnexpectedError(f"Unexpected error: {type(exc).__name__}: {exc}") from exc

    logger.info(
        "Done: %d line(s) processed, %d emitted, %d suppressed",
        summary.processed,
        summary.emitted,
        summary.suppressed,
    )


if __name__ == "__main__":
    cli()
