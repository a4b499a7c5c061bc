# topmark:header:start
#
#   project      : LicenseStamp
#   file         : model.py
#   file_relpath : src/licensestamp/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for LicenseStamp.

`MutableConfig` is the builder used while layering configuration sources
(built-in defaults, a TOML file, CLI overrides); `MutableConfig.freeze`
resolves it into an immutable `Config` snapshot consumed by the runner.

TOML layout:

```toml
[header]
file = "LICENSE_HEADER.txt"   # relative to the config file
marker = "all rights reserved"

[files]
directory = "src"             # relative to the config file
extension = "php"             # or "all"
```
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from licensestamp.config.loaders import (
    TomlLoadError,
    discover_config_file,
    extract_tool_section,
    load_toml_dict,
)
from licensestamp.config.logging import LicensestampLogger, get_logger
from licensestamp.constants import DEFAULT_HEADER_TEXT, DEFAULT_LICENSE_MARKER
from licensestamp.filetypes import registry
from licensestamp.pipeline import renderer, scanner

if TYPE_CHECKING:
    from licensestamp.config.loaders import TomlTable
    from licensestamp.filetypes.base import DelimiterPair

logger: LicensestampLogger = get_logger(__name__)

ALL_EXTENSIONS: str = "all"


class ConfigError(ValueError):
    """Raised for missing, invalid or malformed configuration."""


def normalize_extension(value: str | None) -> str | None:
    """Return ``value`` without a leading dot, or None for "no filter"."""
    if value is None:
        return None
    ext: str = value.strip().lstrip(".")
    if not ext or ext == ALL_EXTENSIONS:
        return None
    return ext


def read_header_file(path: Path) -> str:
    """Read canonical header text from ``path``.

    A single trailing newline is dropped so that the rendered wrapping does
    not gain an empty line. Line endings are normalized on read.

    Raises:
        ConfigError: If the file cannot be read.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read header file {path}: {e}") from e
    if text.endswith("\n"):
        text = text[:-1]
    if not text.strip():
        raise ConfigError(f"Header file {path} is empty")
    return text


def check_header_text(text: str) -> str:
    """Return ``text`` if every file type can find its rendered header again.

    For the standard pair the text is written as-is, so it must be exactly one
    balanced ``/* ... */`` block; for the other pairs the wrapped header must
    not close early. Otherwise each run would insert another copy.

    Raises:
        ConfigError: If a rendered header is not located as one whole block.
    """
    pairs: dict[DelimiterPair, None] = dict.fromkeys(
        [registry.STANDARD_PAIR, *(rule.default_pair for rule in registry.list_rules())]
    )
    for pair in pairs:
        rendered: str = renderer.synthesize(text, pair)
        span: scanner.HeaderSpan | None = scanner.locate(rendered, pair)
        if span is None or span.start != 0 or span.stop(pair) != len(rendered):
            raise ConfigError(
                f"Header text must be a single {registry.STANDARD_PAIR} comment block "
                f"that is found again when wrapped in {pair}"
            )
    return text


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        directory (Path): Root directory to walk.
        extension (str | None): Only process files with this extension
            (without leading dot); None processes all files.
        header_text (str): Canonical header text.
        header_file (Path | None): File the header text was read from, if any.
        marker (str): Phrase identifying a comment block as a license header.
        dry_run (bool): Plan changes without writing them.
        verbosity_level (int): 0 = normal, negative = quieter.
        config_files (tuple[Path, ...]): Config files that contributed values.
    """

    directory: Path
    extension: str | None
    header_text: str
    header_file: Path | None
    marker: str
    dry_run: bool
    verbosity_level: int
    config_files: tuple[Path, ...]

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            directory=self.directory,
            extension=self.extension,
            header_text=self.header_text,
            header_file=self.header_file,
            marker=self.marker,
            dry_run=self.dry_run,
            verbosity_level=self.verbosity_level,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration used while merging configuration sources.

    ``None`` means "not set by this layer"; `merge_with` lets set values of
    the other layer win and `freeze` fills in defaults.
    """

    directory: Path | None = None
    extension: str | None = None
    header_text: str | None = None
    header_file: Path | None = None
    marker: str | None = None
    dry_run: bool | None = None
    verbosity_level: int | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Resolve defaults and the header file into an immutable `Config`.

        Raises:
            ConfigError: If the header file cannot be read, the header text is
                not a single comment block or the marker is empty.
        """
        header_text: str | None = self.header_text
        if self.header_file is not None:
            header_text = read_header_file(self.header_file)
        marker: str = self.marker if self.marker is not None else DEFAULT_LICENSE_MARKER
        if not marker.strip():
            raise ConfigError("The license marker must not be empty")
        return Config(
            directory=self.directory if self.directory is not None else Path.cwd(),
            extension=normalize_extension(self.extension),
            header_text=check_header_text(
                header_text if header_text is not None else DEFAULT_HEADER_TEXT
            ),
            header_file=self.header_file,
            marker=marker,
            dry_run=bool(self.dry_run),
            verbosity_level=self.verbosity_level or 0,
            config_files=tuple(self.config_files),
        )

    # ---------------------------- Sources ----------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls(
            header_text=DEFAULT_HEADER_TEXT,
            marker=DEFAULT_LICENSE_MARKER,
            dry_run=False,
            verbosity_level=0,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a layer from a parsed TOML table.

        Relative paths are resolved against the directory of ``config_file``
        (or the current working directory when there is none).

        Raises:
            ConfigError: For unknown sections or values of the wrong type.
        """
        base: Path = config_file.parent if config_file is not None else Path.cwd()
        draft = cls()

        unknown: list[str] = sorted(set(data) - {"header", "files"})
        if unknown:
            raise ConfigError(f"Unknown config section(s): {', '.join(unknown)}")

        header: dict[str, Any] = _get_table(data, "header")
        files: dict[str, Any] = _get_table(data, "files")

        header_file: str | None = _get_str(header, "header", "file")
        if header_file is not None:
            draft.header_file = (base / header_file).resolve()
        draft.marker = _get_str(header, "header", "marker")

        directory: str | None = _get_str(files, "files", "directory")
        if directory is not None:
            draft.directory = (base / directory).resolve()
        draft.extension = _get_str(files, "files", "extension")

        if config_file is not None:
            draft.config_files = [config_file]
        logger.debug("Config layer from %s: %s", config_file or "<dict>", draft)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a layer from a TOML file.

        Returns:
            MutableConfig | None: The layer, or ``None`` for a ``pyproject.toml``
            without a ``[tool.licensestamp]`` table.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        try:
            data: TomlTable = load_toml_dict(path)
        except TomlLoadError as e:
            raise ConfigError(str(e)) from e
        section: TomlTable | None = extract_tool_section(data, path)
        if section is None:
            return None
        return cls.from_toml_dict(section, config_file=path)

    @classmethod
    def load_merged(
        cls,
        *,
        config_file: Path | None = None,
        cwd: Path | None = None,
    ) -> MutableConfig:
        """Return defaults merged with an explicit or discovered config file.

        Args:
            config_file (Path | None): Explicit config file; skips discovery.
            cwd (Path | None): Directory searched for a config file; defaults
                to the current working directory.

        Raises:
            ConfigError: If the config file is invalid.
        """
        merged: MutableConfig = cls.from_defaults()
        path: Path | None = config_file or discover_config_file(cwd or Path.cwd())
        if path is None:
            return merged
        layer: MutableConfig | None = cls.from_toml_file(path)
        if layer is None:
            if config_file is not None:
                raise ConfigError(f"No [tool.licensestamp] section in {path}")
            return merged
        return merged.merge_with(layer)

    # ---------------------------- Merging ----------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` take precedence."""
        merged: MutableConfig = replace(self, config_files=[*self.config_files])
        for name in (
            "directory",
            "extension",
            "header_file",
            "marker",
            "dry_run",
            "verbosity_level",
        ):
            value: Any = getattr(other, name)
            if value is not None:
                setattr(merged, name, value)
        if other.header_text is not None:
            merged.header_text = other.header_text
        for path in other.config_files:
            if path not in merged.config_files:
                merged.config_files.append(path)
        return merged

    def apply_overrides(self, **overrides: Any) -> MutableConfig:
        """Apply CLI overrides; ``None`` values leave the current value alone.

        Raises:
            ConfigError: For unknown option names.
        """
        for name, value in overrides.items():
            if name not in self.__dataclass_fields__ or name == "config_files":
                raise ConfigError(f"Unknown config option: {name}")
            if value is not None:
                setattr(self, name, value)
        return self


def _get_table(data: TomlTable, key: str) -> dict[str, Any]:
    value: Any = data.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table")
    return value


def _get_str(table: dict[str, Any], section: str, key: str) -> str | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"[{section}] {key} must be a string, got {type(value).__name__}")
    return value
