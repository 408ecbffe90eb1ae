# pylp:header:start
#
#   project      : pylp
#   file         : engine.py
#   file_relpath : src/pylp/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Execution helpers for running a pipeline over a stream of lines (engine layer).

This module drives a whole run: begin stage, every input line through the
executor, end stage. It exists so that the CLI and tests share the same
engine logic.

Design goals:
  - No CLI dependencies: Do not import Click or anything under ``pylp.cli.*``
    from here. Output goes through the ``emit`` callable supplied by the caller.
  - Strictly one line at a time: a line is pulled from the input, processed
    and emitted before the next one is pulled. Nothing is buffered.
  - Fail fast: stage errors propagate unchanged. The remaining input is left
    unconsumed and the end stage is skipped when the failure happened earlier.

Typical usage:

    pipeline = build_pipeline(code=["return _.upper()"])
    summary = run_lines(pipeline, sys.stdin, emit=print)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pylp.config.logging import get_logger
from pylp.pipeline.executor import process_line
from pylp.pipeline.lifecycle import run_begin, run_end
from pylp.pipeline.outcomes import Line
from pylp.pipeline.store import new_store
from pylp.pipeline.tracer import null_tracer

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from pylp.config.logging import PylpLogger
    from pylp.pipeline.model import Pipeline
    from pylp.pipeline.outcomes import LineOutcome
    from pylp.pipeline.store import Store
    from pylp.pipeline.tracer import Tracer

logger: PylpLogger = get_logger(__name__)


@dataclass(frozen=True)
class RunSummary:
    """Counters of a completed run.

    Attributes:
        processed (int): Lines that reached the executor (passed to the end stage).
        emitted (int): Lines that produced output (counted even when quiet).
        suppressed (int): Lines dropped by a suppression result.
        store (Store): The run's store, in its final state.
    """

    processed: int
    emitted: int
    suppressed: int
    store: Store


def strip_line_terminator(text: str) -> str:
    """Remove a single trailing newline, as read from a text stream."""
    return text[:-1] if text.endswith("\n") else text


def run_lines(
    pipeline: Pipeline,
    lines: Iterable[str],
    *,
    emit: Callable[[str], None],
    quiet: bool = False,
    store: Store | None = None,
    tracer: Tracer | None = None,
) -> RunSummary:
    """Run ``pipeline`` over ``lines``.

    Args:
        pipeline (Pipeline): The compiled pipeline.
        lines (Iterable[str]): Input lines, consumed lazily. A trailing newline
            on each item is stripped.
        emit (Callable[[str], None]): Receives the text of each emitted line
            (without newline). Never called when ``quiet``.
        quiet (bool): Suppress all output; stages still run identically.
        store (Store | None): Store to use; a fresh one when None.
        tracer (Tracer | None): Optional tracer.

    Returns:
        RunSummary: Counters and the final store.

    Raises:
        BeginStageError: If the begin stage raised (no line was read).
        LineStageError: If a per-line fragment raised (later lines not read).
        EndStageError: If the end stage raised (all output already emitted).
    """
    store = new_store() if store is None else store
    tracer = tracer or null_tracer()

    run_begin(pipeline, store, tracer)

    processed: int = 0
    emitted: int = 0
    for index, text in enumerate(lines):
        line = Line(raw=strip_line_terminator(text), index=index)
        outcome: LineOutcome = process_line(pipeline, line, store, tracer)
        processed += 1
        if outcome.emitted:
            emitted += 1
            if not quiet:
                emit(str(outcome.render()))

    logger.debug("Input exhausted: %d line(s) processed, %d emitted", processed, emitted)
    run_end(pipeline, store, processed, tracer)

    return RunSummary(
        processed=processed,
        emitted=emitted,
        suppressed=processed - emitted,
        store=store,
    )
