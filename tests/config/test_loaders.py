# pylp:header:start
#
#   project      : pylp
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Tests for TOML fragment files (tomlkit)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from pylp.config import MutableRunConfig
from pylp.config.loaders import ConfigFileError, load_config_file, load_toml_dict

if TYPE_CHECKING:
    from pathlib import Path


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "pylp.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_full_file(tmp_path: Path) -> None:
    """All known keys are merged into the builder."""
    path = _write(
        tmp_path,
        """
begin = "S['n'] = 0"
code = ["S['n'] += 1", '''
if not _:
    return None
''']
end = "p(S['n'])"
quiet = true
debug = false
debug_store = true
""",
    )
    draft = load_config_file(path)
    assert draft.begin == "S['n'] = 0"
    assert draft.code[0] == "S['n'] += 1"
    assert "return None" in draft.code[1]
    assert draft.end == "p(S['n'])"
    assert draft.quiet is True
    assert draft.debug_store is True
    assert draft.config_files == [path]


def test_code_may_be_a_single_string(tmp_path: Path) -> None:
    """A scalar `code` value is one fragment."""
    draft = load_config_file(_write(tmp_path, 'code = "_!.upper()"\n'))
    assert draft.code == ["_!.upper()"]


def test_file_merges_into_existing_draft(tmp_path: Path) -> None:
    """File fragments are appended to what the draft already holds."""
    draft = MutableRunConfig(code=["first"])
    load_config_file(_write(tmp_path, 'code = ["second"]\n'), draft)
    assert draft.code == ["first", "second"]


@pytest.mark.parametrize(
    ("text", "needle"),
    [
        ("begin = 1\n", "'begin' must be a string"),
        ("quiet = 'yes'\n", "'quiet' must be a boolean"),
        ("code = [1, 2]\n", "'code' must be a string or an array of strings"),
    ],
)
def test_wrong_value_types_are_rejected(tmp_path: Path, text: str, needle: str) -> None:
    """Known keys with the wrong type raise ConfigFileError."""
    with pytest.raises(ConfigFileError, match=needle):
        load_config_file(_write(tmp_path, text))


def test_unknown_keys_are_ignored_with_warning(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Unknown keys only produce a warning."""
    with caplog.at_level(logging.WARNING):
        draft = load_config_file(_write(tmp_path, 'colour = "red"\ncode = "_"\n'))
    assert draft.code == ["_"]
    assert "ignoring unknown key 'colour'" in caplog.text


def test_invalid_toml(tmp_path: Path) -> None:
    """Parse errors are reported as ConfigFileError."""
    with pytest.raises(ConfigFileError, match="invalid TOML"):
        load_toml_dict(_write(tmp_path, "code = [\n"))


def test_missing_file(tmp_path: Path) -> None:
    """An unreadable file is reported as ConfigFileError."""
    with pytest.raises(ConfigFileError, match="cannot read file"):
        load_toml_dict(tmp_path / "nope.toml")
