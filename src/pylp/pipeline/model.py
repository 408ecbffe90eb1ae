# pylp:header:start
#
#   project      : pylp
#   file         : model.py
#   file_relpath : src/pylp/pipeline/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""The compiled pipeline.

A `Pipeline` is built once at startup from the run configuration and then
passed explicitly to the executor and lifecycle runner. Building it compiles
every fragment, so a malformed fragment is reported before any input is read.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pylp.config.logging import get_logger
from pylp.pipeline.fragments import CodeFragment, Role, compile_fragment, make_namespace

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pylp.config import RunConfig
    from pylp.config.logging import PylpLogger

logger: PylpLogger = get_logger(__name__)


@dataclass(frozen=True)
class Pipeline:
    """Compiled stages of one run.

    Attributes:
        begin (CodeFragment | None): Stage run once before the first line.
        steps (tuple[CodeFragment, ...]): Per-line stages in declaration order.
        end (CodeFragment | None): Stage run once after the last line.
    """

    begin: CodeFragment | None = None
    steps: tuple[CodeFragment, ...] = ()
    end: CodeFragment | None = None


def build_pipeline(
    *,
    code: Iterable[str] = (),
    begin: str | None = None,
    end: str | None = None,
) -> Pipeline:
    """Compile all fragments into a `Pipeline`.

    Blank fragments are skipped, but per-line ordinals still count them so
    messages refer to the position the user declared.

    Args:
        code (Iterable[str]): Per-line fragments, in execution order.
        begin (str | None): Begin fragment.
        end (str | None): End fragment.

    Returns:
        Pipeline: The compiled pipeline.

    Raises:
        FragmentCompileError: On the first fragment that fails to compile.
    """
    namespace: dict[str, Any] = make_namespace()

    begin_fragment: CodeFragment | None = None
    if begin is not None:
        begin_fragment = compile_fragment(begin, Role.BEGIN, namespace=namespace)

    steps: list[CodeFragment] = []
    for ordinal, text in enumerate(code, start=1):
        fragment: CodeFragment | None = compile_fragment(
            text, Role.LINE, ordinal=ordinal, namespace=namespace
        )
        if fragment is not None:
            steps.append(fragment)

    end_fragment: CodeFragment | None = None
    if end is not None:
        end_fragment = compile_fragment(end, Role.END, namespace=namespace)

    logger.debug(
        "Pipeline built: begin=%s, %d line stage(s), end=%s",
        begin_fragment is not None,
        len(steps),
        end_fragment is not None,
    )
    return Pipeline(begin=begin_fragment, steps=tuple(steps), end=end_fragment)


def build_pipeline_from_config(config: RunConfig) -> Pipeline:
    """Compile the fragments held by a frozen `RunConfig`."""
    return build_pipeline(code=config.code, begin=config.begin, end=config.end)
