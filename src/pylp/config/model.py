# pylp:header:start
#
#   project      : pylp
#   file         : model.py
#   file_relpath : src/pylp/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Run configuration model for pylp.

Configuration is collected in a mutable builder (`MutableRunConfig`) from an
optional TOML fragment file and the command line, then frozen into an
immutable `RunConfig` that the CLI hands to the pipeline layer.

Merge precedence (lowest to highest):
    1. TOML fragment file (``--config``)
    2. Command-line options

Per-line fragments accumulate in that order; begin/end code from a higher
layer replaces a lower one; boolean flags are OR-ed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pylp.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from pylp.config.logging import PylpLogger

logger: PylpLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Immutable runtime configuration for one pylp run.

    Attributes:
        begin (str | None): Code executed once before the first line.
        code (tuple[str, ...]): Per-line code fragments, in execution order.
        end (str | None): Code executed once after the last line.
        quiet (bool): Never print processed lines (forced on by ``debug``).
        debug (bool): Trace every stage invocation on STDERR.
        debug_store (bool): Also print the store whenever a per-line fragment
            changed it (only ever True together with ``debug``).
        config_files (tuple[Path, ...]): TOML files merged into this config.
    """

    begin: str | None = None
    code: tuple[str, ...] = ()
    end: str | None = None
    quiet: bool = False
    debug: bool = False
    debug_store: bool = False
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableRunConfig:
        """Return a mutable copy of this frozen configuration."""
        return MutableRunConfig(
            begin=self.begin,
            code=list(self.code),
            end=self.end,
            quiet=self.quiet,
            debug=self.debug,
            debug_store=self.debug_store,
            config_files=list(self.config_files),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableRunConfig:
    """Mutable configuration used while merging config sources.

    Attributes:
        begin (str | None): Begin code, or None when not set.
        code (list[str]): Per-line code fragments collected so far.
        end (str | None): End code, or None when not set.
        quiet (bool): Quiet flag.
        debug (bool): Debug flag.
        debug_store (bool): Store tracing flag.
        config_files (list[Path]): Provenance of merged TOML files.
    """

    begin: str | None = None
    code: list[str] = field(default_factory=lambda: [])
    end: str | None = None
    quiet: bool = False
    debug: bool = False
    debug_store: bool = False
    config_files: list[Path] = field(default_factory=lambda: [])

    def merge_with(
        self,
        *,
        begin: str | None = None,
        code: Iterable[str] = (),
        end: str | None = None,
        quiet: bool = False,
        debug: bool = False,
        debug_store: bool = False,
    ) -> MutableRunConfig:
        """Layer a higher-precedence source on top of this builder.

        Args:
            begin (str | None): Begin code replacing the current one when not None.
            code (Iterable[str]): Per-line fragments appended after the current ones.
            end (str | None): End code replacing the current one when not None.
            quiet (bool): OR-ed into the quiet flag.
            debug (bool): OR-ed into the debug flag.
            debug_store (bool): OR-ed into the store tracing flag.

        Returns:
            MutableRunConfig: ``self``, for chaining.
        """
        if begin is not None:
            if self.begin is not None:
                logger.debug("begin code overridden by higher-precedence source")
            self.begin = begin
        self.code.extend(code)
        if end is not None:
            if self.end is not None:
                logger.debug("end code overridden by higher-precedence source")
            self.end = end
        self.quiet = self.quiet or quiet
        self.debug = self.debug or debug
        self.debug_store = self.debug_store or debug_store
        return self

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> RunConfig:
        """Freeze this mutable builder into an immutable RunConfig.

        Applies the flag rules: ``debug`` implies ``quiet``, and
        ``debug_store`` is dropped unless ``debug`` is set.
        """
        quiet: bool = self.quiet or self.debug
        debug_store: bool = self.debug_store and self.debug
        if self.debug_store and not self.debug:
            logger.info("--debug-store ignored: --debug is not set")
        return RunConfig(
            begin=self.begin,
            code=tuple(self.code),
            end=self.end,
            quiet=quiet,
            debug=self.debug,
            debug_store=debug_store,
            config_files=tuple(self.config_files),
        )
