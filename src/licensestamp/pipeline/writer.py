# topmark:header:start
#
#   project      : LicenseStamp
#   file         : writer.py
#   file_relpath : src/licensestamp/pipeline/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File I/O for the header updater.

Content is decoded as UTF-8 with ``surrogateescape`` so that undecodable
bytes survive a read/write round trip unchanged. Writes replace the whole
file while holding an exclusive advisory lock (``fcntl.flock``), which keeps
another cooperating writer from interleaving with ours. On platforms without
``fcntl`` the write proceeds unlocked.

All functions raise `OSError` subclasses on failure; the runner turns them
into per-file faults.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final

from licensestamp.config.logging import LicensestampLogger, get_logger
from licensestamp.constants import BINARY_PROBE_SIZE

if TYPE_CHECKING:
    from pathlib import Path

if os.name == "posix":
    import fcntl
else:  # pragma: no cover - platform specific
    fcntl = None

logger: LicensestampLogger = get_logger(__name__)

ENCODING: Final[str] = "utf-8"
ERRORS: Final[str] = "surrogateescape"


def decode(data: bytes) -> str:
    """Decode raw file bytes into text, preserving undecodable bytes."""
    return data.decode(ENCODING, errors=ERRORS)


def encode(text: str) -> bytes:
    """Encode text produced by `decode` back into the original bytes."""
    return text.encode(ENCODING, errors=ERRORS)


def is_binary(data: bytes) -> bool:
    """Return True when the leading bytes contain a NUL byte."""
    return b"\x00" in data[:BINARY_PROBE_SIZE]


def read_file(path: Path) -> bytes:
    """Read the raw content of ``path``.

    Raises:
        OSError: When the file cannot be read.
    """
    data: bytes = path.read_bytes()
    logger.trace("Read %d bytes from %s", len(data), path)
    return data


def write_file(path: Path, data: bytes) -> int:
    """Replace the content of ``path`` with ``data`` under an exclusive lock.

    The file is opened for update (not truncated on open), locked, rewritten
    from offset 0 and truncated to the new length before the lock is
    released, so readers holding a shared lock never observe a partial file.

    Args:
        path (Path): File to overwrite; it must already exist.
        data (bytes): New file content.

    Returns:
        int: Number of bytes written.

    Raises:
        OSError: When the file cannot be opened, locked or written.
    """
    with open(path, "r+b") as f:
        if fcntl is not None:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
        try:
            f.seek(0)
            f.write(data)
            f.truncate()
            f.flush()
        finally:
            if fcntl is not None:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return len(data)
