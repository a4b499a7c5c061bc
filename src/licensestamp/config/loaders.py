# topmark:header:start
#
#   project      : LicenseStamp
#   file         : loaders.py
#   file_relpath : src/licensestamp/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module reads LicenseStamp configuration from on-disk TOML files
(``licensestamp.toml`` or the ``[tool.licensestamp]`` table of
``pyproject.toml``). Parsing is done with `tomlkit` and returned as plain
`dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from licensestamp.config.logging import get_logger
from licensestamp.constants import (
    LOCAL_CONFIG_NAME,
    PYPROJECT_CONFIG_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from pathlib import Path

    from licensestamp.config.logging import LicensestampLogger

TomlTable = dict[str, Any]

logger: LicensestampLogger = get_logger(__name__)


class TomlLoadError(ValueError):
    """Raised when a TOML document cannot be read or parsed."""


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        TomlLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise TomlLoadError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise TomlLoadError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_section(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the LicenseStamp table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.licensestamp]``; any other file is
    a dedicated config file and is returned unchanged.

    Returns:
        TomlTable | None: The table, or ``None`` when a ``pyproject.toml``
        has no LicenseStamp section.
    """
    if path.name != PYPROJECT_CONFIG_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
        return None
    return cast("TomlTable", section)


def discover_config_file(start: Path) -> Path | None:
    """Return the config file to use for a run started in ``start``.

    ``licensestamp.toml`` wins over ``pyproject.toml``; the latter only counts
    when it has a ``[tool.licensestamp]`` table.
    """
    local: Path = start / LOCAL_CONFIG_NAME
    if local.is_file():
        return local
    pyproject: Path = start / PYPROJECT_CONFIG_NAME
    if pyproject.is_file():
        try:
            data: TomlTable = load_toml_dict(pyproject)
        except TomlLoadError:
            return None
        if extract_tool_section(data, pyproject) is not None:
            return pyproject
    return None
