# pylp:header:start
#
#   project      : pylp
#   file         : __init__.py
#   file_relpath : src/pylp/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""pylp package.

pylp is a streaming line processor for shell pipelines. It reads lines from
STDIN, runs each one through a sequence of user-supplied Python code fragments
and writes the result to STDOUT, with optional begin/end stages and tracing.
"""

from __future__ import annotations
