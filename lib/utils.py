# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common filesystem and filename utilities used across the application.
# =============================================================================

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path
from typing import Any


# =============================================================================
# Filename Utilities
# =============================================================================

def split_basename(filename: str) -> str:
    """
    Strip the extension from a filename.

    Only the last extension is removed, so dotted names keep their inner dots.

    Example:
        split_basename("sunset.png")      # "sunset"
        split_basename("beach.day1.jpg")  # "beach.day1"
        split_basename("README")          # "README"
    """
    return os.path.splitext(filename)[0]


def is_safe_filename(filename: str) -> bool:
    """
    Check that a filename names a single entry inside a directory.

    Rejects empty names, path separators, NUL bytes, and names starting
    with a dot (hidden files, "." and "..").
    """
    if not filename or filename.startswith("."):
        return False
    return not any(sep in filename for sep in ("/", "\\", "\x00"))


def is_subpath(child: Path, base: Path) -> bool:
    """Return True when child resolves to a location inside base."""
    try:
        return os.path.commonpath([child.resolve(), base.resolve()]) == str(base.resolve())
    except ValueError:
        return False


# =============================================================================
# Atomic Writes
# =============================================================================

def atomic_write_bytes(path: Path, data: bytes) -> None:
    """
    Write bytes to path via a temporary file and a rename.

    Readers see either the previous content (or no file) or the complete
    new content, never a partial write. The temporary file is a dotfile in
    the same directory so directory listings that skip dotfiles never
    expose it.

    Raises:
        OSError: If the temporary file cannot be written or renamed
    """
    fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        with suppress(OSError):
            os.unlink(tmp_name)
        raise


def atomic_write_json(path: Path, data: Any) -> None:
    """Serialize data as JSON and write it atomically."""
    text = json.dumps(data, ensure_ascii=False)
    atomic_write_bytes(path, text.encode("utf-8"))
