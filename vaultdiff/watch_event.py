"""Change events detected between two reads of a secret path."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class WatchEventKind(str, Enum):
    """What happened to a key."""

    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class WatchEvent:
    """A single detected change to a key at a secret path."""

    path: str
    key: str
    kind: WatchEventKind
    old_value: str = ""
    new_value: str = ""
    detected_at: datetime = field(default_factory=_utc_now)


def diff_to_events(
    path: str,
    prev: Mapping[str, str] | None,
    curr: Mapping[str, str] | None,
) -> list[WatchEvent]:
    """Describe how the key/value pairs at ``path`` changed from ``prev`` to ``curr``.

    Added and modified keys come first, removed keys after them.
    """
    prev = prev or {}
    curr = curr or {}
    now = _utc_now()
    events: list[WatchEvent] = []

    for key, new_value in curr.items():
        if key not in prev:
            events.append(
                WatchEvent(path, key, WatchEventKind.ADDED, new_value=new_value, detected_at=now)
            )
        elif prev[key] != new_value:
            events.append(
                WatchEvent(
                    path,
                    key,
                    WatchEventKind.MODIFIED,
                    old_value=prev[key],
                    new_value=new_value,
                    detected_at=now,
                )
            )

    for key, old_value in prev.items():
        if key not in curr:
            events.append(
                WatchEvent(path, key, WatchEventKind.REMOVED, old_value=old_value, detected_at=now)
            )
    return events