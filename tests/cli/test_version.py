# pylp:header:start
#
#   project      : pylp
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""CLI test: ``--version`` and ``--help`` output."""

from __future__ import annotations

import pytest

from pylp.constants import PYLP_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli

pytestmark = pytest.mark.cli


@pytest.mark.parametrize("flag", ["-V", "--version"])
def test_version_outputs_project_version(flag: str) -> None:
    """It prints the installed version and does not read STDIN."""
    result = run_cli([flag], input_text="ignored\n")
    assert_SUCCESS(result)
    assert result.stdout.strip() == f"pylp, version {PYLP_VERSION}"


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help_lists_fragment_options(flag: str) -> None:
    """Help documents the fragment options and the bound names."""
    result = run_cli([flag])
    assert_SUCCESS(result)
    for option in ("--code", "--begin", "--end", "--quiet", "--debug", "--config"):
        assert option in result.stdout
    assert "_!.upper()" in result.stdout
