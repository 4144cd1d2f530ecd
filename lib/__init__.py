# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - utils.py: Filename helpers and atomic file writes
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.utils import (
    atomic_write_bytes,
    atomic_write_json,
    is_safe_filename,
    is_subpath,
    split_basename,
)

__all__ = [
    "atomic_write_bytes",
    "atomic_write_json",
    "is_safe_filename",
    "is_subpath",
    "split_basename",
]
