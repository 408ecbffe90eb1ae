# pylp:header:start
#
#   project      : pylp
#   file         : constants.py
#   file_relpath : src/pylp/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""pylp Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PYLP_VERSION: str = get_version("pylp")

# Names bound inside user code fragments.
VALUE_NAME: str = "_"
STORE_NAME: str = "S"
INDEX_NAME: str = "i"
COUNT_NAME: str = "c"

# Helpers available in every fragment's globals.
PRINT_HELPER_NAME: str = "p"
ERROR_HELPER_NAME: str = "e"

# Name of the generated function wrapping a fragment body.
FRAGMENT_FUNC_NAME: str = "_pylp_fragment"

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "PYLP_LOG_LEVEL"
