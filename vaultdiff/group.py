"""Partitioning of secrets into named groups."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Secrets = dict[str, dict[str, str]]


class GroupBy(str, Enum):
    """How a path is mapped to its group name."""

    MOUNT = "mount"
    PREFIX = "prefix"
    DEPTH = "depth"


@dataclass
class GroupOptions:
    """Controls how secrets are grouped."""

    enabled: bool = False
    group_by: GroupBy | str = GroupBy.MOUNT
    depth: int = 1


@dataclass
class SecretGroup:
    """A named collection of secrets."""

    name: str
    secrets: Secrets


def path_segment(path: str, count: int) -> str:
    """Return the first ``count`` slash-delimited segments of ``path``."""
    parts = path.split("/")
    if count > 0 and len(parts) > count:
        return "/".join(parts[:count])
    return path


def _group_key(path: str, options: GroupOptions) -> str:
    if options.group_by == GroupBy.PREFIX:
        return path_segment(path, 1)
    if options.group_by == GroupBy.DEPTH:
        return path_segment(path, options.depth)
    return path_segment(path, 2)


def group_secrets(secrets: Secrets, options: GroupOptions | None = None) -> list[SecretGroup]:
    """Partition ``secrets`` into groups sorted by name.

    When grouping is disabled or there are no secrets, a single unnamed
    group holding everything is returned.
    """
    options = options or GroupOptions()
    if not options.enabled or not secrets:
        return [SecretGroup(name="", secrets=secrets)]

    buckets: dict[str, Secrets] = {}
    for path, kv in secrets.items():
        buckets.setdefault(_group_key(path, options), {})[path] = kv

    return [SecretGroup(name=name, secrets=buckets[name]) for name in sorted(buckets)]