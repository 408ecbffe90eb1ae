# pylp:header:start
#
#   project      : pylp
#   file         : test_executor.py
#   file_relpath : tests/pipeline/test_executor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Unit tests for the per-line executor."""

from __future__ import annotations

from typing import Any

import pytest

from pylp.pipeline.errors import LineStageError
from pylp.pipeline.executor import process_line
from pylp.pipeline.model import build_pipeline
from pylp.pipeline.outcomes import Line, LineOutcome

pytestmark = pytest.mark.pipeline


def _run(
    code: list[str],
    raw: str = "abc",
    index: int = 0,
    store: dict[str, Any] | None = None,
) -> LineOutcome:
    line = Line(raw=raw, index=index)
    return process_line(build_pipeline(code=code), line, {} if store is None else store)


def test_no_fragments_is_identity() -> None:
    """Without per-line fragments the raw text is emitted unchanged."""
    outcome = _run([], raw="  keep me  ")
    assert outcome.emitted
    assert outcome.value == "  keep me  "


def test_fragments_run_in_declared_order() -> None:
    """Each fragment receives the value produced by the previous one."""
    outcome = _run(["return _ + '1'", "return _ + '2'", "return _ + '3'"], raw="x")
    assert outcome.value == "x123"


def test_second_fragment_never_sees_raw_input() -> None:
    """B receives A's value, not the raw line."""
    store: dict[str, Any] = {}
    _run(["return 'from A'", "S['seen'] = _"], raw="raw", store=store)
    assert store["seen"] == "from A"


@pytest.mark.parametrize("suppressing", ["return None", "return False", "return", "_ = None"])
def test_suppression_short_circuits(suppressing: str) -> None:
    """A suppression result drops the line and skips later fragments."""
    store: dict[str, Any] = {"calls": []}
    code = [
        "S['calls'].append(1)",
        f"S['calls'].append(2)\n{suppressing}",
        "S['calls'].append(3)",
    ]
    outcome = _run(code, store=store)
    assert not outcome.emitted
    assert outcome.value is None
    assert store["calls"] == [1, 2]


@pytest.mark.parametrize("result", ["True", "{'a': 1}", "[1]", "object()"])
def test_non_value_results_keep_current_value(result: str) -> None:
    """True and other non-value results leave the current value untouched."""
    outcome = _run(["return _.upper()", f"return {result}", "return _ + '!'"], raw="ab")
    assert outcome.emitted
    assert outcome.value == "AB!"


def test_numeric_values_are_preserved() -> None:
    """Numbers flow between fragments without being stringified."""
    outcome = _run(["return int(_)", "return _ * 2", "return _ + 0.5"], raw="20")
    assert outcome.value == 40.5
    assert isinstance(outcome.value, float)


def test_last_value_wins() -> None:
    """With value results only, the output is the last fragment's return value."""
    outcome = _run(["return 'a'", "return 7"])
    assert outcome.value == 7


def test_fragments_receive_zero_based_index() -> None:
    """`i` is the 0-based index of the line."""
    outcome = _run(["return i"], index=4)
    assert outcome.value == 4


def test_fragment_exception_is_wrapped_with_context() -> None:
    """A raising fragment produces a LineStageError carrying current and raw values."""
    pipeline = build_pipeline(code=["return _.upper()", "return int(_)"])
    line = Line(raw="abc", index=2)

    with pytest.raises(LineStageError) as excinfo:
        process_line(pipeline, line, {})

    err = excinfo.value
    assert err.fragment.ordinal == 2
    assert err.value == "ABC"
    assert err.line is line
    assert isinstance(err.__cause__, ValueError)

    report = err.report()
    assert report[0].startswith(
        "Line code #2 (return int(_)) failed when processing line #3 "
        "(line will be printed below): ValueError: "
    )
    assert report[1:] == ['  "ABC"', "Initial line will be printed below", '  "abc"']


def test_store_is_shared_by_reference() -> None:
    """Fragments mutate the caller's store object."""
    store: dict[str, Any] = {}
    _run(["S['n'] = S.get('n', 0) + 1", "S['n'] += 1"], store=store)
    assert store == {"n": 2}
