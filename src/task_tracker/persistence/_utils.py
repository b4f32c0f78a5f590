"""Shared persistence utilities."""

import json
from pathlib import Path
from typing import Any


def dump_json(data: Any, indent: int = 2) -> str:
    """Serialize data the way it is stored on disk."""
    return json.dumps(data, indent=indent, ensure_ascii=False)


def atomic_write_json(path: Path, data: Any, indent: int = 2) -> None:
    """Write JSON data to a file atomically.

    Writes to a temporary file first, then renames to the target path.
    This prevents data corruption if the process crashes mid-write.

    Raises:
        OSError: If the directory cannot be created or the write fails.
    """
    atomic_write_text(path, dump_json(data, indent=indent))


def atomic_write_text(path: Path, content: str) -> None:
    """Write text to a file atomically."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp_path.write_text(content, encoding="utf-8")
        tmp_path.replace(path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
