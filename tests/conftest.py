# pylp:header:start
#
#   project      : pylp
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Pytest configuration for the pylp test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, plus small typed wrappers around pytest marks and a tracer that
records its output.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from pylp.config import logging
from pylp.pipeline.tracer import Tracer

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


@pytest.fixture(autouse=True)
def silence_pylp_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure pylp's runtime log level and color are not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("PYLP_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE so internal diagnostics are exercised by the suite.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


class RecordingTracer(Tracer):
    """Tracer collecting its output lines in memory."""

    def __init__(self, *, enabled: bool = True, store_deltas: bool = False) -> None:
        self.lines: list[str] = []
        super().__init__(self.lines.append, enabled=enabled, store_deltas=store_deltas)

    @property
    def text(self) -> str:
        """The trace as a single string."""
        return "\n".join(self.lines)


@pytest.fixture
def recording_tracer() -> RecordingTracer:
    """Return an enabled tracer that records its output."""
    return RecordingTracer()
