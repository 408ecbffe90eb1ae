# pylp:header:start
#
#   project      : pylp
#   file         : lifecycle.py
#   file_relpath : src/pylp/pipeline/lifecycle.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Begin and end stages.

The begin stage runs exactly once before the first line is read; the end
stage runs exactly once after input is exhausted (also when no line was
read) and receives the number of processed lines. Exceptions are wrapped in
`BeginStageError` / `EndStageError` and are fatal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylp.config.logging import get_logger
from pylp.pipeline.errors import BeginStageError, EndStageError
from pylp.pipeline.tracer import null_tracer

if TYPE_CHECKING:
    from pylp.config.logging import PylpLogger
    from pylp.pipeline.model import Pipeline
    from pylp.pipeline.store import Store
    from pylp.pipeline.tracer import Tracer

logger: PylpLogger = get_logger(__name__)


def run_begin(pipeline: Pipeline, store: Store, tracer: Tracer | None = None) -> None:
    """Run the begin stage, if any.

    Raises:
        BeginStageError: If the begin code raised.
    """
    fragment = pipeline.begin
    if fragment is None:
        return
    tracer = tracer or null_tracer()
    tracer.stage_started(fragment)
    try:
        fragment(store)
    except Exception as exc:
        raise BeginStageError(fragment, exc) from exc
    tracer.stage_finished(fragment, store)


def run_end(pipeline: Pipeline, store: Store, count: int, tracer: Tracer | None = None) -> None:
    """Run the end stage, if any, with the processed line count.

    Raises:
        EndStageError: If the end code raised.
    """
    fragment = pipeline.end
    if fragment is None:
        return
    tracer = tracer or null_tracer()
    tracer.stage_started(fragment)
    try:
        fragment(store, count)
    except Exception as exc:
        raise EndStageError(fragment, exc) from exc
    tracer.stage_finished(fragment, store)
    logger.debug("End stage done after %d line(s)", count)
