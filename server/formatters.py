"""JSON formatting utilities for decoded NMEA data."""

import dataclasses
import json
from typing import Any

from navnmea import NMEASnapshot
from navnmea.nmea.errors import ChecksumError, NMEAError

__all__ = ["error_kind", "format_error_message", "format_snapshot_message", "snapshot_to_dict"]


def snapshot_to_dict(snapshot: NMEASnapshot) -> dict[str, Any]:
    """Convert a snapshot to plain JSON-compatible types."""
    return dataclasses.asdict(snapshot)


def error_kind(error: NMEAError) -> str:
    """Short machine-readable name of a parser error: "checksum" or "format"."""
    if isinstance(error, ChecksumError):
        return "checksum"
    return "format"


def format_snapshot_message(snapshot: NMEASnapshot) -> str:
    """Serialize a snapshot into a JSON string for WebSocket transmission."""
    return json.dumps({"type": "snapshot", "snapshot": snapshot_to_dict(snapshot)})


def format_error_message(error: NMEAError) -> str:
    """Serialize a rejected sentence into a JSON string for WebSocket transmission."""
    return json.dumps({
        "type": "error",
        "error": error_kind(error),
        "message": str(error),
    })
