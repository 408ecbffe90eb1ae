# pylp:header:start
#
#   project      : pylp
#   file         : rewrite.py
#   file_relpath : src/pylp/pipeline/rewrite.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Text rewrites applied to per-line fragments before compilation.

The only rewrite is the in-place update shorthand::

    _!.upper()          ->  _ = _.upper()
    _!.replace("a", "b") ->  _ = _.replace("a", "b")

This is a textual macro: it runs on the raw fragment text (string literals
included) and never looks at runtime values. The compiler knows nothing
about it.
"""

from __future__ import annotations

import re
from typing import Final

from pylp.constants import VALUE_NAME

# `_!` immediately followed by a member access; `foo_!.x` and `_!=` do not match.
BANG_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"(?<![\w.]){re.escape(VALUE_NAME)}!(?=\.)"
)


def expand_bang_shorthand(text: str) -> str:
    """Rewrite every ``_!.member`` into ``_ = _.member``.

    Args:
        text (str): Raw per-line fragment text.

    Returns:
        str: The rewritten text (unchanged when the shorthand is absent).
    """
    return BANG_PATTERN.sub(f"{VALUE_NAME} = {VALUE_NAME}", text)
