# topmark:header:start
#
#   project      : LicenseStamp
#   file         : __init__.py
#   file_relpath : src/licensestamp/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header processing pipeline.

The pipeline is split into small, independently testable pieces:

- `scanner`: locate the first balanced comment block for a delimiter pair.
- `renderer`: synthesize the expected header for a delimiter pair.
- `planner`: decide (purely) whether to keep, replace or insert a header.
- `writer`: read files and persist updated content under an exclusive lock.
- `runner`: glue the above together per file, isolating per-file faults.
"""
