# pylp:header:start
#
#   project      : pylp
#   file         : __init__.py
#   file_relpath : src/pylp/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""The pylp pipeline: fragment compilation, per-line execution and tracing.

Public entry points are re-exported here; the CLI is the only consumer that
maps pipeline errors to exit codes.
"""

from __future__ import annotations

from pylp.pipeline.engine import RunSummary, run_lines
from pylp.pipeline.errors import (
    BeginStageError,
    EndStageError,
    FragmentCompileError,
    LineStageError,
    PylpPipelineError,
    StageError,
)
from pylp.pipeline.executor import process_line
from pylp.pipeline.fragments import CodeFragment, Role, compile_fragment
from pylp.pipeline.model import Pipeline, build_pipeline, build_pipeline_from_config
from pylp.pipeline.outcomes import Line, LineOutcome, ResultKind, classify_result
from pylp.pipeline.tracer import Tracer

__all__ = [
    "BeginStageError",
    "CodeFragment",
    "EndStageError",
    "FragmentCompileError",
    "Line",
    "LineOutcome",
    "LineStageError",
    "Pipeline",
    "PylpPipelineError",
    "ResultKind",
    "Role",
    "RunSummary",
    "StageError",
    "Tracer",
    "build_pipeline",
    "build_pipeline_from_config",
    "classify_result",
    "compile_fragment",
    "process_line",
    "run_lines",
]
