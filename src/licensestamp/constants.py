# topmark:header:start
#
#   project      : LicenseStamp
#   file         : constants.py
#   file_relpath : src/licensestamp/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LicenseStamp Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

LICENSESTAMP_VERSION: str = get_version("licensestamp")

# Config file names looked up in the current working directory:
LOCAL_CONFIG_NAME: str = "licensestamp.toml"
PYPROJECT_CONFIG_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "licensestamp"

# Environment variable controlling the internal log level:
LOG_LEVEL_ENV_VAR: str = "LICENSESTAMP_LOG_LEVEL"

# Phrase identifying a comment block as a license header (case-insensitive):
DEFAULT_LICENSE_MARKER: str = "all rights reserved"

# Number of leading bytes probed for NUL bytes by the binary guard:
BINARY_PROBE_SIZE: int = 8192

# Canonical license header. It already carries its own ``/* ... */`` markers;
# file types with other comment delimiters wrap it once more.
DEFAULT_HEADER_TEXT: str = """\
/*
 * This file is part of a project distributed under a proprietary license.
 *
 * By installing or using this file, you are confirming on behalf of the
 * entity that licensed the product ("Company") that Company is bound by the
 * applicable Master Subscription Agreement ("MSA").
 *
 * If Company is not bound by the MSA, then by installing or using this file
 * you are agreeing unconditionally that Company will be bound by the MSA and
 * certifying that you have authority to bind Company accordingly.
 *
 * Copyright (C) 2025 The Project Authors. All rights reserved.
 */"""
