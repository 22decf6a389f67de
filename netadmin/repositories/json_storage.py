"""
Whole-file JSON persistence helpers for the VLAN store.

The file holds a single JSON array. Every write replaces the entire file via
a sibling temporary file and os.replace, so readers never see a half-written
array.
"""

from __future__ import annotations

from contextlib import suppress
from pathlib import Path
from typing import Iterable, List
import json
import os

from netadmin.domain.errors import PersistenceError


def read_records(path: Path) -> List[dict]:
    """Decode the JSON array stored at ``path``.

    Raises PersistenceError when the file cannot be opened, is not valid
    UTF-8 JSON, or does not hold an array of objects.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise PersistenceError(f"failed to open {path}: {exc}") from exc
    except ValueError as exc:
        raise PersistenceError(f"failed to decode {path}: {exc}") from exc

    if not isinstance(data, list):
        raise PersistenceError(f"failed to decode {path}: expected a JSON array")
    for item in data:
        if not isinstance(item, dict):
            raise PersistenceError(f"failed to decode {path}: expected an array of objects")
    return data


def write_records(path: Path, records: Iterable[dict]) -> None:
    """Rewrite ``path`` with ``records`` as a JSON array, fsynced before it replaces the old file."""
    payload = json.dumps(list(records), ensure_ascii=False, indent=2)
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        with tmp.open("w", encoding="utf-8") as f:
            f.write(payload + "\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except OSError as exc:
        with suppress(OSError):
            tmp.unlink()
        raise PersistenceError(f"failed to write {path}: {exc}") from exc
