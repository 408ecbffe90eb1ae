# pylp:header:start
#
#   project      : pylp
#   file         : loaders.py
#   file_relpath : src/pylp/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# pylp:header:end

"""Load TOML fragment files.

A fragment file lets users keep longer programs out of the shell command
line. It is a flat TOML document::

    begin = "S['total'] = 0"
    code = [
        "S['total'] += int(_)",
        "return None",
    ]
    end = "p(S['total'])"
    quiet = false

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from pylp.config.logging import get_logger
from pylp.config.model import MutableRunConfig

if TYPE_CHECKING:
    from pathlib import Path

    from pylp.config.logging import PylpLogger

logger: PylpLogger = get_logger(__name__)

TomlTable = dict[str, Any]

STRING_KEYS: Final[tuple[str, ...]] = ("begin", "end")
BOOL_KEYS: Final[tuple[str, ...]] = ("quiet", "debug", "debug_store")
CODE_KEY: Final[str] = "code"


class ConfigFileError(ValueError):
    """Raised when a fragment file cannot be read, parsed, or has invalid values."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content.

    Raises:
        ConfigFileError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigFileError(path, f"cannot read file: {e.strerror or e}") from e
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigFileError(path, f"invalid TOML: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def _code_list(path: Path, value: Any) -> list[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in cast("list[Any]", value)):
        return cast("list[str]", value)
    raise ConfigFileError(path, f"'{CODE_KEY}' must be a string or an array of strings")


def apply_toml_dict(draft: MutableRunConfig, data: TomlTable, path: Path) -> MutableRunConfig:
    """Merge a parsed fragment file into ``draft``.

    Args:
        draft (MutableRunConfig): The builder to merge into.
        data (TomlTable): Parsed TOML document.
        path (Path): Source path, used for provenance and messages.

    Returns:
        MutableRunConfig: ``draft``, for chaining.

    Raises:
        ConfigFileError: If a known key holds a value of the wrong type.
    """
    for key in STRING_KEYS:
        if key in data and not isinstance(data[key], str):
            raise ConfigFileError(path, f"'{key}' must be a string")
    for key in BOOL_KEYS:
        if key in data and not isinstance(data[key], bool):
            raise ConfigFileError(path, f"'{key}' must be a boolean")

    known: set[str] = {*STRING_KEYS, *BOOL_KEYS, CODE_KEY}
    for key in data:
        if key not in known:
            logger.warning("%s: ignoring unknown key '%s'", path, key)

    draft.merge_with(
        begin=data.get("begin"),
        code=_code_list(path, data[CODE_KEY]) if CODE_KEY in data else (),
        end=data.get("end"),
        quiet=data.get("quiet", False),
        debug=data.get("debug", False),
        debug_store=data.get("debug_store", False),
    )
    draft.config_files.append(path)
    logger.debug("Merged fragment file %s", path)
    return draft


def load_config_file(path: Path, draft: MutableRunConfig | None = None) -> MutableRunConfig:
    """Read ``path`` and merge it into ``draft`` (or a fresh builder).

    Args:
        path (Path): TOML fragment file.
        draft (MutableRunConfig | None): Existing builder, if any.

    Returns:
        MutableRunConfig: The updated builder.
    """
    return apply_toml_dict(draft or MutableRunConfig(), load_toml_dict(path), path)
