# pylp:header:start
#
#   project      : pylp
#   file         : tracer.py
#   file_relpath : src/pylp/pipeline/tracer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Diagnostic tracing of stage execution.

The tracer observes the pipeline and writes a structured trace through a
``write`` callable (the CLI points it at STDERR). It never alters the value a
stage receives or returns, and a disabled tracer writes nothing, so enabling
or disabling it cannot change the processed output.

Store tracing (``store_deltas``) snapshots the store by value before every
per-line fragment and prints it again afterwards only if the serialized
snapshot differs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pylp.pipeline.outcomes import ResultKind
from pylp.pipeline.store import render, snapshot, to_json

if TYPE_CHECKING:
    from collections.abc import Callable

    from pylp.pipeline.fragments import CodeFragment
    from pylp.pipeline.outcomes import Line, LineOutcome
    from pylp.pipeline.store import Store

IGNORED: str = "IGNORED"


class Tracer:
    """Structured trace writer.

    Args:
        write (Callable[[str], None]): Sink receiving one line of trace text per call.
        enabled (bool): Master switch; when False every hook is a no-op.
        store_deltas (bool): Also print the store after each per-line fragment
            that changed it. Ignored unless ``enabled``.
    """

    def __init__(
        self,
        write: Callable[[str], None],
        *,
        enabled: bool = True,
        store_deltas: bool = False,
    ) -> None:
        self._write = write
        self.enabled = enabled
        self.store_deltas = enabled and store_deltas
        self._before: str | None = None

    def _emit(self, text: str) -> None:
        for line in text.split("\n"):
            self._write(line)

    # --- lifecycle stages ---

    def stage_started(self, fragment: CodeFragment) -> None:
        """Hook called before the begin or end stage runs."""
        if self.enabled:
            self._emit(f"[{fragment.role.value}]")

    def stage_finished(self, fragment: CodeFragment, store: Store) -> None:
        """Hook called after the begin or end stage returned."""
        if self.enabled:
            self._emit(f"[/{fragment.role.value}]")
            self._emit(render(store))

    # --- per-line ---

    def line_started(self, line: Line) -> None:
        """Hook called when a line enters the executor."""
        if self.enabled:
            self._emit(f"[line #{line.number}]")
            self._emit(f"  in: {to_json(line.raw)}")

    def fragment_started(self, fragment: CodeFragment, value: Any, store: Store) -> None:
        """Hook called before a per-line fragment is invoked."""
        if not self.enabled:
            return
        self._emit(f"  [func #{fragment.ordinal}]")
        self._emit(f"    in:  {to_json(value)}")
        if self.store_deltas:
            self._before = snapshot(store)

    def fragment_finished(
        self, fragment: CodeFragment, kind: ResultKind, value: Any, store: Store
    ) -> None:
        """Hook called after a per-line fragment returned.

        Args:
            fragment (CodeFragment): The fragment that ran.
            kind (ResultKind): Classification of its result.
            value (Any): The current value after the fragment (unused when suppressed).
            store (Store): The shared store.
        """
        if not self.enabled:
            return
        if kind is ResultKind.SUPPRESS:
            self._emit(f"    out: {IGNORED}")
        elif kind is ResultKind.UNCHANGED:
            self._emit(f"    out: {to_json(value)} (unchanged)")
        else:
            self._emit(f"    out: {to_json(value)}")
        self._emit(f"  [/func #{fragment.ordinal}]")
        if self.store_deltas:
            if snapshot(store) != self._before:
                self._emit(render(store))
            self._before = None

    def line_finished(self, outcome: LineOutcome) -> None:
        """Hook called with the outcome of a line."""
        if not self.enabled:
            return
        if outcome.emitted:
            self._emit(f"  out: {to_json(outcome.value)}")
        else:
            self._emit(f"  out: {IGNORED}")
        self._emit(f"[/line #{outcome.line.number}]")


def null_tracer() -> Tracer:
    """Return a disabled tracer."""
    return Tracer(lambda _text: None, enabled=False)
