# pylp:header:start
#
#   project      : pylp
#   file         : errors.py
#   file_relpath : src/pylp/pipeline/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Errors raised by the pipeline layer.

Two tiers exist:

- `FragmentCompileError`: raised while the pipeline is built, before any
  input is read. The CLI reports it as a usage error.
- `StageError` subclasses: raised while a stage runs. Always fatal; the CLI
  prints `StageError.report()` and exits with a failure status.

The original exception is chained via ``__cause__``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pylp.pipeline.store import to_json

if TYPE_CHECKING:
    from pylp.pipeline.fragments import CodeFragment, Role
    from pylp.pipeline.outcomes import Line


def describe_exception(exc: BaseException) -> str:
    """Return ``"ExcType: message"`` (just the type name when the message is empty)."""
    message: str = str(exc).strip()
    name: str = type(exc).__name__
    return f"{name}: {message}" if message else name


class PylpPipelineError(Exception):
    """Base class for errors raised by the pipeline layer."""


class FragmentCompileError(PylpPipelineError):
    """A fragment could not be compiled.

    Attributes:
        role (Role): Lifecycle role of the fragment.
        ordinal (int | None): 1-based position for per-line fragments.
        text (str): Fragment text after rewrites.
        message (str): The compiler's message.
    """

    def __init__(self, role: Role, ordinal: int | None, text: str, message: str) -> None:
        self.role = role
        self.ordinal = ordinal
        self.text = text
        self.message = message
        super().__init__(f"{role.label(ordinal)} ({text}) cannot be compiled: {message}")


class StageError(PylpPipelineError):
    """A stage raised while running. Fatal for the whole run.

    Attributes:
        fragment (CodeFragment): The failing fragment.
        cause (Exception): The exception raised by user code.
    """

    def __init__(self, fragment: CodeFragment, cause: Exception) -> None:
        self.fragment = fragment
        self.cause = cause
        super().__init__(self.headline())

    def headline(self) -> str:
        """Return the first diagnostic line."""
        return f"{self.fragment.label.capitalize()} failed: {describe_exception(self.cause)}"

    def report(self) -> list[str]:
        """Return the diagnostic lines printed on STDERR."""
        return [self.headline()]


class BeginStageError(StageError):
    """The begin stage raised; no line was processed."""


class EndStageError(StageError):
    """The end stage raised; all processed lines were already written."""


class LineStageError(StageError):
    """A per-line fragment raised.

    Attributes:
        value (Any): The line's current value when the fragment was invoked.
        line (Line): The line being processed (holds the original input).
    """

    def __init__(self, fragment: CodeFragment, cause: Exception, value: Any, line: Line) -> None:
        self.value = value
        self.line = line
        super().__init__(fragment, cause)

    def headline(self) -> str:
        """Return the first diagnostic line."""
        return (
            f"{self.fragment.label.capitalize()} ({self.fragment.text}) failed when processing "
            f"line #{self.line.number} (line will be printed below): "
            f"{describe_exception(self.cause)}"
        )

    def report(self) -> list[str]:
        """Return the diagnostic lines, including current and original line values."""
        return [
            self.headline(),
            f"  {to_json(self.value)}",
            "Initial line will be printed below",
            f"  {to_json(self.line.raw)}",
        ]
