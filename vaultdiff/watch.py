"""Polling of secret paths and reporting of changes."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

Secrets = dict[str, dict[str, str]]
FetchFunc = Callable[[str], dict[str, str]]
ChangeFunc = Callable[[str, Secrets, Secrets], None]


@dataclass
class WatchOptions:
    """Watcher settings; ``interval`` is in seconds."""

    enabled: bool = False
    interval: float = 30.0
    on_change: ChangeFunc | None = None


def maps_equal(a: Mapping[str, str] | None, b: Mapping[str, str] | None) -> bool:
    """Return whether two key/value maps hold the same entries.

    ``None`` counts as empty, and a key missing from ``b`` reads as ``""``.
    """
    a = a or {}
    b = b or {}
    if len(a) != len(b):
        return False
    return all(b.get(k, "") == v for k, v in a.items())


class Watcher:
    """Polls paths at a fixed interval and reports when their secrets change."""

    def __init__(self, options: WatchOptions | None, fetch: FetchFunc | None) -> None:
        self.options = options or WatchOptions()
        self.fetch = fetch
        self.previous: Secrets = {}

    def watch(self, paths: Iterable[str], stop: threading.Event) -> None:
        """Poll ``paths`` every interval until ``stop`` is set."""
        paths = list(paths)
        while not stop.wait(self.options.interval):
            self.poll(paths)

    def poll(self, paths: Iterable[str]) -> None:
        """Fetch each path once and report changes; failed fetches are skipped."""
        if self.fetch is None:
            raise ValueError("watcher has no fetch function")
        for path in paths:
            try:
                current = self.fetch(path)
            except Exception:
                continue
            prev = self.previous.get(path)
            if maps_equal(prev, current):
                continue
            if self.options.on_change is not None:
                before = {path: prev} if prev is not None else {}
                self.options.on_change(path, before, {path: current})
            self.previous[path] = current