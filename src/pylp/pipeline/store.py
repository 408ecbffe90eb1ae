# pylp:header:start
#
#   project      : pylp
#   file         : store.py
#   file_relpath : src/pylp/pipeline/store.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""The shared store.

One plain ``dict`` is created per run and passed by reference to the begin
stage, every per-line fragment and the end stage. Any stage may read or write
any key; writes are visible immediately to every later stage and line.

Snapshots serialize the store to JSON so that changes can be detected by
value even though the store object itself never changes identity.
"""

from __future__ import annotations

import json
from typing import Any

Store = dict[str, Any]


def new_store() -> Store:
    """Return the (empty) store for a new run."""
    return {}


def to_json(value: Any, *, indent: int | None = None) -> str:
    """Render ``value`` as JSON for diagnostics.

    Values that JSON cannot represent are rendered with ``repr``; a value
    holding a reference cycle (or non-string mapping keys) falls back to
    ``repr(value)``.
    """
    try:
        return json.dumps(value, ensure_ascii=False, indent=indent, default=repr)
    except (TypeError, ValueError):
        return repr(value)


def snapshot(store: Store) -> str:
    """Serialize ``store`` into a compact string suitable for equality checks."""
    return to_json(store)


def render(store: Store) -> str:
    """Serialize ``store`` as indented JSON for diagnostics."""
    return to_json(store, indent=2)
