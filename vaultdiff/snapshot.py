"""Point-in-time captures of secrets saved as JSON files."""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

Secrets = dict[str, dict[str, str]]

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_TIME_PATTERN = re.compile(
    r"(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)


class SnapshotError(Exception):
    """Raised when a snapshot cannot be saved or loaded."""


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Snapshot:
    """The secrets found under a path at a moment in time."""

    path: str
    namespace: str = ""
    captured_at: datetime = field(default_factory=_utc_now)
    secrets: Secrets = field(default_factory=dict)

    def secret_count(self) -> int:
        """Return the total number of key/value pairs across all paths."""
        return sum(len(kv) for kv in self.secrets.values())


def new_snapshot(path: str, namespace: str, secrets: Secrets) -> Snapshot:
    """Create a snapshot of ``secrets`` captured now, in UTC."""
    return Snapshot(path=path, namespace=namespace, captured_at=_utc_now(), secrets=secrets)


def _format_time(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += "." + f"{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset() or timedelta(0)
    if not offset:
        return text + "Z"
    sign = "+" if offset > timedelta(0) else "-"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _parse_time(text: Any) -> datetime:
    match = _TIME_PATTERN.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        raise SnapshotError(f"snapshot: decode: invalid captured_at {text!r}")
    base, fraction, zone = match.groups()
    micro = int((fraction or "0")[:6].ljust(6, "0"))
    try:
        moment = datetime.fromisoformat(base + ("+00:00" if zone == "Z" else zone))
    except ValueError as err:
        raise SnapshotError(f"snapshot: decode: {err}") from err
    return moment.replace(microsecond=micro)


def _to_json(snapshot: Snapshot) -> dict[str, Any]:
    data: dict[str, Any] = {"path": snapshot.path}
    if snapshot.namespace:
        data["namespace"] = snapshot.namespace
    data["captured_at"] = _format_time(snapshot.captured_at)
    data["secrets"] = snapshot.secrets
    return data


def _decode_secrets(raw: Any) -> Secrets:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise SnapshotError("snapshot: decode: secrets must be an object")
    secrets: Secrets = {}
    for path, kv in raw.items():
        if kv is None:
            secrets[path] = {}
            continue
        if not isinstance(kv, dict) or not all(isinstance(v, str) for v in kv.values()):
            raise SnapshotError(
                f'snapshot: decode: secrets at "{path}" must map keys to strings'
            )
        secrets[path] = dict(kv)
    return secrets


def _from_json(data: Any) -> Snapshot:
    if not isinstance(data, dict):
        raise SnapshotError("snapshot: decode: expected a JSON object")
    path = data.get("path") or ""
    namespace = data.get("namespace") or ""
    if not isinstance(path, str) or not isinstance(namespace, str):
        raise SnapshotError("snapshot: decode: path and namespace must be strings")
    raw_time = data.get("captured_at")
    captured_at = _ZERO_TIME if raw_time is None else _parse_time(raw_time)
    return Snapshot(
        path=path,
        namespace=namespace,
        captured_at=captured_at,
        secrets=_decode_secrets(data.get("secrets")),
    )


def save_snapshot(snapshot: Snapshot, filepath: str | os.PathLike[str]) -> None:
    """Write ``snapshot`` to ``filepath`` as indented JSON."""
    try:
        with open(filepath, "w", encoding="utf-8") as handle:
            json.dump(_to_json(snapshot), handle, indent=2, ensure_ascii=False)
            handle.write("\n")
    except OSError as err:
        raise SnapshotError(f'snapshot: create file "{filepath}": {err}') from err


def load_snapshot(filepath: str | os.PathLike[str]) -> Snapshot:
    """Read a snapshot from the JSON file at ``filepath``."""
    try:
        with open(filepath, encoding="utf-8") as handle:
            data = json.load(handle)
    except OSError as err:
        raise SnapshotError(f'snapshot: open file "{filepath}": {err}') from err
    except ValueError as err:
        raise SnapshotError(f"snapshot: decode: {err}") from err
    return _from_json(data)