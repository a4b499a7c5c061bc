# topmark:header:start
#
#   project      : LicenseStamp
#   file         : runner.py
#   file_relpath : src/licensestamp/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the header update for files, one file at a time.

Each file is read, planned and (when its content changed) written before the
next file is considered. I/O failures are per-file faults: they are logged
and returned as a `FileResult` with `WriteStatus.FAILED`, and never abort the
remaining files.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from licensestamp.config.logging import LicensestampLogger, get_logger
from licensestamp.file_resolver import file_extension
from licensestamp.filetypes.registry import resolve_rule
from licensestamp.pipeline.planner import UpdateDecision, plan_update
from licensestamp.pipeline.status import WriteStatus
from licensestamp.pipeline.writer import decode, encode, is_binary, read_file, write_file

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from licensestamp.config import Config
    from licensestamp.filetypes.base import FileTypeRule

logger: LicensestampLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FileResult:
    """Outcome of processing a single file.

    Attributes:
        path (Path): The processed file.
        status (WriteStatus): What happened to the file.
        decision (UpdateDecision | None): The plan, when the file could be read.
        written (bool): Whether the file was rewritten on disk.
        message (str | None): Fault or skip reason.
    """

    path: Path
    status: WriteStatus
    decision: UpdateDecision | None = None
    written: bool = False
    message: str | None = None

    @property
    def would_change(self) -> bool:
        """Whether the plan changes the file content."""
        return self.decision is not None and self.decision.changed


def process_file(path: Path, config: Config) -> FileResult:
    """Read, plan and persist the header update for ``path``.

    Args:
        path (Path): File to process.
        config (Config): Resolved configuration.

    Returns:
        FileResult: The outcome; I/O failures are reported, not raised.
    """
    rule: FileTypeRule = resolve_rule(file_extension(path))
    logger.debug("Processing %s with rule %r", path, rule.type_id)

    try:
        data: bytes = read_file(path)
    except OSError as e:
        logger.error("Cannot read %s: %s", path, e)
        return FileResult(path=path, status=WriteStatus.FAILED, message=f"read error: {e}")

    if is_binary(data):
        logger.info("Skipping binary file %s", path)
        return FileResult(path=path, status=WriteStatus.SKIPPED, message="binary file")

    decision: UpdateDecision = plan_update(
        decode(data),
        rule,
        config.header_text,
        marker=config.marker,
    )
    logger.debug("%s: state=%s status=%s", path, decision.state.name, decision.status.name)

    if not decision.changed or config.dry_run:
        return FileResult(
            path=path,
            status=decision.status,
            decision=decision,
            message=decision.reason,
        )

    try:
        write_file(path, encode(decision.updated))
    except OSError as e:
        logger.error("Cannot write %s: %s", path, e)
        return FileResult(
            path=path,
            status=WriteStatus.FAILED,
            decision=decision,
            message=f"write error: {e}",
        )
    return FileResult(path=path, status=decision.status, decision=decision, written=True)


def run(files: Iterable[Path], config: Config) -> Iterator[FileResult]:
    """Process ``files`` sequentially, yielding one result per file.

    Args:
        files (Iterable[Path]): Files to process, in order.
        config (Config): Resolved configuration.

    Yields:
        FileResult: The outcome for each file.
    """
    for path in files:
        yield process_file(path, config)
