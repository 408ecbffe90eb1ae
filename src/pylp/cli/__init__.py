# pylp:header:start
#
#   project      : pylp
#   file         : __init__.py
#   file_relpath : src/pylp/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""pylp command-line interface (Click)."""

from __future__ import annotations
