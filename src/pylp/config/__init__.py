# pylp:header:start
#
#   project      : pylp
#   file         : __init__.py
#   file_relpath : src/pylp/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""pylp configuration: run options, fragment files and logging."""

from __future__ import annotations

from pylp.config.model import MutableRunConfig, RunConfig

__all__ = [
    "MutableRunConfig",
    "RunConfig",
]
