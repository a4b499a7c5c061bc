# topmark:header:start
#
#   project      : LicenseStamp
#   file         : __init__.py
#   file_relpath : src/licensestamp/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for LicenseStamp: the immutable `Config` and its builder."""

from __future__ import annotations

from licensestamp.config.model import Config, ConfigError, MutableConfig

__all__ = [
    "Config",
    "ConfigError",
    "MutableConfig",
]
