# pylp:header:start
#
#   project      : pylp
#   file         : test_rewrite.py
#   file_relpath : tests/pipeline/test_rewrite.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Unit tests for the ``_!.member`` shorthand rewrite."""

from __future__ import annotations

import pytest

from pylp.pipeline.rewrite import expand_bang_shorthand
from tests.conftest import mark_pipeline


@mark_pipeline
@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("_!.upper()", "_ = _.upper()"),
        ('_!.replace("a", "b")', '_ = _.replace("a", "b")'),
        ("_!.strip(); _!.lower()", "_ = _.strip(); _ = _.lower()"),
        ("x = 1\n_!.title()", "x = 1\n_ = _.title()"),
    ],
)
def test_bang_shorthand_is_expanded(text: str, expected: str) -> None:
    """`_!.member` becomes an assignment back to `_`."""
    assert expand_bang_shorthand(text) == expected


@mark_pipeline
@pytest.mark.parametrize(
    "text",
    [
        "return _.upper()",
        "if _!='x': return None",
        "foo_!.bar()",
        "obj._!.bar()",
        "_! .upper()",
    ],
)
def test_text_without_shorthand_is_untouched(text: str) -> None:
    """Inequality, longer identifiers and spaced forms are not rewritten."""
    assert expand_bang_shorthand(text) == text


@mark_pipeline
def test_rewrite_is_textual() -> None:
    """The rewrite also applies inside string literals: it is a plain text macro."""
    assert expand_bang_shorthand("p('_!.x')") == "p('_ = _.x')"
