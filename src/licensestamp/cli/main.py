# topmark:header:start
#
#   project      : LicenseStamp
#   file         : main.py
#   file_relpath : src/licensestamp/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LicenseStamp command-line entry point.

The command resolves configuration (defaults, config file, CLI options),
walks the target directory and updates each file's license header, printing
one status line per file.

Exit codes are listed in `licensestamp.cli.exit_codes.ExitCode`. Per-file
faults never stop the run; they only turn the final exit code into
``IO_ERROR``. Failing to enumerate the target directory is fatal.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import TYPE_CHECKING

import click

from licensestamp.cli.console import ClickConsole
from licensestamp.cli.errors import LicensestampConfigError, LicensestampFileNotFoundError
from licensestamp.cli.exit_codes import ExitCode
from licensestamp.cli.options import (
    CONTEXT_SETTINGS,
    common_file_options,
    common_header_options,
    common_verbose_options,
    resolve_verbosity,
)
from licensestamp.config import Config, ConfigError, MutableConfig
from licensestamp.config.logging import get_logger, resolve_env_log_level, setup_logging
from licensestamp.constants import LICENSESTAMP_VERSION
from licensestamp.file_resolver import resolve_file_list
from licensestamp.filetypes.registry import list_rules
from licensestamp.pipeline import runner
from licensestamp.pipeline.status import HeaderState, WriteStatus

if TYPE_CHECKING:
    from licensestamp.pipeline.runner import FileResult

logger = get_logger(__name__)

DRY_RUN_PREFIX: str = "[dry-run] "


def format_status_line(result: FileResult) -> str:
    """Return the human-readable status line for a processed file."""
    file: Path = result.path
    if result.status == WriteStatus.UNCHANGED:
        return f"License header up to date in {file}"
    if result.status == WriteStatus.REPLACED:
        return f"{file} ✓"
    if result.status == WriteStatus.INSERTED:
        decision = result.decision
        if decision is not None and decision.state == HeaderState.SPAN_FOUND_DIFFERS_NOT_LICENSE:
            return (
                f"Comment found. No license headers found in {file}, "
                "inserting new license header"
            )
        return f"No license headers found in {file}, inserting new license header"
    if result.status == WriteStatus.SKIPPED:
        return f"Skipping {file}: {result.message}"
    return f"Error processing {file}: {result.message}"


def emit_result(
    console: ClickConsole,
    result: FileResult,
    *,
    verbosity: int,
    dry_run: bool,
) -> None:
    """Print the status line for ``result`` honoring verbosity."""
    if result.status == WriteStatus.FAILED:
        console.error(format_status_line(result))
        return
    if verbosity <= -2:
        return
    if verbosity == -1 and result.status == WriteStatus.UNCHANGED:
        return
    line: str = format_status_line(result)
    if dry_run and result.would_change:
        line = DRY_RUN_PREFIX + line
    if verbosity >= 1 and result.decision is not None and result.decision.matched_pair:
        line = f"{line} (matched {result.decision.matched_pair})"
    console.print(console.styled(line, result.status))


def emit_summary(console: ClickConsole, counts: Counter[WriteStatus]) -> None:
    """Print a one-line summary of all outcomes."""
    total: int = sum(counts.values())
    parts: list[str] = [f"{counts[s]} {s.value}" for s in WriteStatus if counts[s]]
    console.print(f"{total} file(s) processed: {', '.join(parts) if parts else 'nothing to do'}")


def emit_type_table(console: ClickConsole) -> None:
    """Print the built-in file type rules."""
    for rule in list_rules():
        flags: list[str] = []
        if rule.alternate_pairs:
            flags.append("also " + ", ".join(str(p) for p in rule.alternate_pairs))
        if rule.prepend_token:
            flags.append(f"after {rule.prepend_token}")
        if not rule.insertable:
            flags.append("no insertion")
        extra: str = f" [{'; '.join(flags)}]" if flags else ""
        console.print(f"{rule.type_id:<10} {rule.default_pair}{extra}  {rule.description}")


def build_config(
    *,
    config_file: Path | None,
    directory: Path | None,
    extension: str | None,
    header_file: Path | None,
    marker: str | None,
    dry_run: bool,
    verbosity: int,
) -> Config:
    """Merge defaults, the config file and CLI options into a `Config`.

    Raises:
        LicensestampConfigError: If the configuration is invalid.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(config_file=config_file)
        draft.apply_overrides(
            directory=directory,
            extension=extension,
            header_file=header_file,
            marker=marker,
            dry_run=dry_run or None,
            verbosity_level=verbosity,
        )
        return draft.freeze()
    except ConfigError as e:
        raise LicensestampConfigError(str(e)) from e


def exclude_run_inputs(files: list[Path], config: Config) -> list[Path]:
    """Drop the config file(s) and header file that configure this run.

    A header inserted into ``licensestamp.toml`` or ``pyproject.toml`` would
    make it invalid TOML and break the next run.
    """
    inputs: set[Path] = {p.resolve() for p in config.config_files}
    if config.header_file is not None:
        inputs.add(config.header_file.resolve())
    kept: list[Path] = [f for f in files if f.resolve() not in inputs]
    if len(kept) != len(files):
        logger.debug("Excluded %d run input file(s) from processing", len(files) - len(kept))
    return kept


@click.command(
    context_settings=CONTEXT_SETTINGS,
    help="Insert or update the canonical license header in every file of a directory tree.",
)
@common_file_options
@common_header_options
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this TOML file instead of discovering one.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Report what would change without writing files (exit code 2 if anything would).",
)
@click.option(
    "--list-types",
    is_flag=True,
    default=False,
    help="List the built-in file type rules and exit.",
)
@click.option("--no-color", is_flag=True, default=False, help="Disable colored output.")
@common_verbose_options
@click.version_option(LICENSESTAMP_VERSION, "--version", prog_name="licensestamp")
@click.pass_context
def cli(
    ctx: click.Context,
    directory: Path | None,
    extension: str | None,
    header_file: Path | None,
    marker: str | None,
    config_file: Path | None,
    dry_run: bool,
    list_types: bool,
    no_color: bool,
    verbose: int,
    quiet: int,
) -> None:
    """Entry point for the LicenseStamp CLI."""
    ctx.obj = ctx.obj or {}
    setup_logging(level=resolve_env_log_level())

    console = ClickConsole(enable_color=not no_color)
    ctx.obj["console"] = console

    if list_types:
        emit_type_table(console)
        ctx.exit(ExitCode.SUCCESS)

    verbosity: int = resolve_verbosity(verbose, quiet)
    config: Config = build_config(
        config_file=config_file,
        directory=directory,
        extension=extension,
        header_file=header_file,
        marker=marker,
        dry_run=dry_run,
        verbosity=verbosity,
    )
    logger.debug("Resolved config: %s", config)

    try:
        files: list[Path] = resolve_file_list(config.directory, config.extension)
    except OSError as e:
        raise LicensestampFileNotFoundError(f"Cannot read directory {config.directory}: {e}") from e
    files = exclude_run_inputs(files, config)

    counts: Counter[WriteStatus] = Counter()
    would_change: bool = False
    for result in runner.run(files, config):
        counts[result.status] += 1
        would_change = would_change or result.would_change
        emit_result(console, result, verbosity=config.verbosity_level, dry_run=config.dry_run)

    if config.verbosity_level >= 1:
        emit_summary(console, counts)

    if counts[WriteStatus.FAILED]:
        ctx.exit(ExitCode.IO_ERROR)
    if config.dry_run and would_change:
        ctx.exit(ExitCode.WOULD_CHANGE)
    ctx.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    cli()
