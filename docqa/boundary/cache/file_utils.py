"""
Atomic JSON file helpers.

Dependencies: json, os, tempfile, pathlib
System role: Crash-safe writes shared by the file-backed caches
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any


def write_json_atomic(path: Path, data: dict[str, Any]) -> None:
    """
    Write JSON so readers see either the old file or the complete new one.

    Content goes to a temp file in the target directory, is fsynced, then
    moved over the target with os.replace.

    Args:
        path: Destination file
        data: JSON-serializable payload

    Raises:
        OSError: When writing or replacing fails
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def read_json(path: Path) -> Any:
    """Read and decode a JSON file."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)
