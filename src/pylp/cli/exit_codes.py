# pylp:header:start
#
#   project      : pylp
#   file         : exit_codes.py
#   file_relpath : src/pylp/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Exit codes for the pylp CLI.

pylp keeps the two codes of the classic line-processor contract (``1`` for a
failing stage, ``2`` for an unusable invocation, the same value Click uses for
its own usage errors) and aligns the remaining ones with the BSD `sysexits`
convention.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the pylp CLI.

    Attributes:
        SUCCESS: All input consumed, every stage succeeded.
        FAILURE: A begin, per-line or end stage raised at runtime.
        USAGE_ERROR: Invalid invocation, including fragments that do not compile.
            Matches Click's own ``UsageError`` exit code.
        IO_ERROR: Reading STDIN or writing STDOUT failed. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Unreadable or invalid fragment file. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2

    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
