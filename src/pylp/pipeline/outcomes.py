# pylp:header:start
#
#   project      : pylp
#   file         : outcomes.py
#   file_relpath : src/pylp/pipeline/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Per-line values and outcome classification.

A per-line fragment's return value is classified as follows:

- ``None`` or ``False``: `ResultKind.SUPPRESS`. The line is dropped and the
  remaining fragments are skipped.
- ``str`` or any number (``bool`` excluded): `ResultKind.VALUE`. It becomes
  the current value handed to the next fragment, type preserved.
- anything else, notably ``True``, dicts and lists: `ResultKind.UNCHANGED`.
  The current value is kept as it was before the fragment ran.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

LineValue = Union[str, numbers.Number]


class ResultKind(Enum):
    """Classification of a per-line fragment result."""

    VALUE = "value"
    SUPPRESS = "suppress"
    UNCHANGED = "unchanged"


def classify_result(result: Any) -> ResultKind:
    """Classify a per-line fragment return value.

    Args:
        result (Any): Whatever the fragment returned.

    Returns:
        ResultKind: How the executor must treat ``result``.
    """
    if result is None or result is False:
        return ResultKind.SUPPRESS
    if isinstance(result, bool):
        return ResultKind.UNCHANGED
    if isinstance(result, (str, numbers.Number)):
        return ResultKind.VALUE
    return ResultKind.UNCHANGED


@dataclass(frozen=True)
class Line:
    """One input line.

    Attributes:
        raw (str): The text read from input, without its line terminator.
        index (int): 0-based position in the input stream.
    """

    raw: str
    index: int

    @property
    def number(self) -> int:
        """1-based line number, for display."""
        return self.index + 1


@dataclass(frozen=True)
class LineOutcome:
    """Result of running the per-line pipeline on one line.

    Attributes:
        line (Line): The processed line.
        emitted (bool): False when the line was suppressed.
        value (LineValue | None): Final current value (None when suppressed).
    """

    line: Line
    emitted: bool
    value: LineValue | None = None

    @classmethod
    def emit(cls, line: Line, value: LineValue) -> LineOutcome:
        """Outcome for a line that produces output."""
        return cls(line=line, emitted=True, value=value)

    @classmethod
    def suppress(cls, line: Line) -> LineOutcome:
        """Outcome for a line that produces no output."""
        return cls(line=line, emitted=False)

    def render(self) -> str | None:
        """Return the output text (without newline), or None when suppressed."""
        if not self.emitted:
            return None
        return str(self.value)
