"""Snapshot service — load election records from JSON snapshots."""

import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from election_lifecycle.lib.lifecycle import Election

_elections_adapter = TypeAdapter(list[Election])


class SnapshotError(ValueError):
    """Raised when a snapshot cannot be read or validated."""


def parse_snapshot(raw: Any) -> list[Election]:
    """Validate raw JSON data into election records.

    Accepts either a list of records or an object with an ``elections`` list.

    Args:
        raw: Decoded JSON.

    Returns:
        Validated Election records in input order.

    Raises:
        SnapshotError: If the structure or any record is invalid.
    """
    if isinstance(raw, dict):
        raw = raw.get("elections")
    if not isinstance(raw, list):
        msg = "Snapshot must be a list of elections or an object with an 'elections' list"
        raise SnapshotError(msg)
    try:
        return _elections_adapter.validate_python(raw)
    except ValidationError as e:
        msg = f"Invalid election record in snapshot: {e.error_count()} error(s)"
        raise SnapshotError(msg) from e


def load_snapshot(path: str | Path) -> list[Election]:
    """Read and validate an election snapshot file.

    Args:
        path: Path to a JSON snapshot.

    Returns:
        Validated Election records.

    Raises:
        SnapshotError: If the file is missing, not JSON, or invalid.
    """
    snapshot_path = Path(path)
    try:
        raw = json.loads(snapshot_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        msg = f"Snapshot file not found: {snapshot_path}"
        raise SnapshotError(msg) from e
    except json.JSONDecodeError as e:
        msg = f"Snapshot is not valid JSON: {snapshot_path} ({e.msg} at line {e.lineno})"
        raise SnapshotError(msg) from e

    elections = parse_snapshot(raw)
    logger.info("Loaded {} election(s) from {}", len(elections), snapshot_path)
    return elections
