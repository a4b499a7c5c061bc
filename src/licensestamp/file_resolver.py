# topmark:header:start
#
#   project      : LicenseStamp
#   file         : file_resolver.py
#   file_relpath : src/licensestamp/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the files LicenseStamp processes below a root directory.

Hidden entries (names starting with a dot) are skipped; a hidden directory
hides everything below it. An optional single-extension filter narrows the
set further. The result is sorted for deterministic output.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from licensestamp.config.logging import LicensestampLogger, get_logger

logger: LicensestampLogger = get_logger(__name__)

HIDDEN_PATTERN: Final[str] = ".*"

_HIDDEN_SPEC: Final[PathSpec] = PathSpec.from_lines(GitWildMatchPattern, [HIDDEN_PATTERN])


def is_hidden(name: str) -> bool:
    """Return True if ``name`` (a single path component) is a hidden entry."""
    return _HIDDEN_SPEC.match_file(name)


def file_extension(path: Path) -> str:
    """Return the final extension of ``path`` without the leading dot ("" if none)."""
    return path.suffix[1:]


def resolve_file_list(root: Path, extension: str | None = None) -> list[Path]:
    """Return the files below ``root`` to process.

    Args:
        root (Path): Directory to walk recursively.
        extension (str | None): Keep only files with this final extension
            (leading dot optional); ``None`` keeps all files.

    Returns:
        list[Path]: Sorted list of regular, non-hidden files.

    Raises:
        FileNotFoundError: If ``root`` does not exist.
        NotADirectoryError: If ``root`` is not a directory.
    """
    if not root.exists():
        raise FileNotFoundError(f"No such directory: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")

    wanted: str | None = extension.lstrip(".") if extension else None
    files: list[Path] = []
    for path in root.rglob("*"):
        rel: Path = path.relative_to(root)
        if any(is_hidden(part) for part in rel.parts):
            continue
        if not path.is_file():
            continue
        if wanted is not None and file_extension(path) != wanted:
            continue
        files.append(path)

    logger.debug("Resolved %d file(s) below %s (extension=%s)", len(files), root, wanted)
    return sorted(files)
