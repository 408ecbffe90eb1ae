# pylp:header:start
#
#   project      : pylp
#   file         : executor.py
#   file_relpath : src/pylp/pipeline/executor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Run the per-line stages over a single line.

For each line, the current value starts as the raw input text. Fragments are
invoked in declaration order with ``(current, store, index)`` and their result
is classified (see `pylp.pipeline.outcomes`):

- VALUE: becomes the new current value, next fragment runs.
- SUPPRESS: the line is dropped; remaining fragments are skipped.
- UNCHANGED: current value is kept, next fragment runs.

With no fragments the line is emitted unchanged. An exception raised by a
fragment is wrapped in `LineStageError` and propagates: the run is over.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pylp.config.logging import get_logger
from pylp.pipeline.errors import LineStageError
from pylp.pipeline.outcomes import LineOutcome, ResultKind, classify_result
from pylp.pipeline.tracer import null_tracer

if TYPE_CHECKING:
    from pylp.config.logging import PylpLogger
    from pylp.pipeline.model import Pipeline
    from pylp.pipeline.outcomes import Line
    from pylp.pipeline.store import Store
    from pylp.pipeline.tracer import Tracer

logger: PylpLogger = get_logger(__name__)


def process_line(
    pipeline: Pipeline,
    line: Line,
    store: Store,
    tracer: Tracer | None = None,
) -> LineOutcome:
    """Push one line through every per-line stage.

    Args:
        pipeline (Pipeline): The compiled pipeline.
        line (Line): The line to process.
        store (Store): The run's shared store (mutated by fragments).
        tracer (Tracer | None): Optional tracer.

    Returns:
        LineOutcome: Whether the line is emitted, and with which value.

    Raises:
        LineStageError: If a fragment raised.
    """
    tracer = tracer or null_tracer()
    tracer.line_started(line)

    current: Any = line.raw
    outcome: LineOutcome | None = None
    for fragment in pipeline.steps:
        tracer.fragment_started(fragment, current, store)
        try:
            result: Any = fragment(current, store, line.index)
        except Exception as exc:
            logger.debug("%s raised on line #%d: %r", fragment.label, line.number, exc)
            raise LineStageError(fragment, exc, current, line) from exc

        kind: ResultKind = classify_result(result)
        if kind is ResultKind.VALUE:
            current = result
        tracer.fragment_finished(fragment, kind, current, store)
        if kind is ResultKind.SUPPRESS:
            logger.trace("Line #%d suppressed by %s", line.number, fragment.label)
            outcome = LineOutcome.suppress(line)
            break

    if outcome is None:
        outcome = LineOutcome.emit(line, current)
    tracer.line_finished(outcome)
    return outcome
