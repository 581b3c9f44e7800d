"""Ordering of secret paths and their key/value pairs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Secrets = dict[str, dict[str, str]]


class SortOrder(str, Enum):
    """Ordering direction."""

    ASC = "asc"
    DESC = "desc"


class SortField(str, Enum):
    """What the key/value pairs within a path are ordered by."""

    PATH = "path"
    KEY = "key"
    VALUE = "value"


@dataclass
class SortOptions:
    """Controls how secrets are ordered before diffing or rendering."""

    enabled: bool = False
    field: SortField | str = SortField.PATH
    order: SortOrder | str = SortOrder.ASC


def sort_secrets(secrets: Secrets, options: SortOptions | None = None) -> Secrets:
    """Return a copy of ``secrets`` with paths, and possibly pairs, in order.

    Paths are always ordered; pairs within each path are ordered by key or
    by value when ``field`` asks for it. Returns ``secrets`` itself when
    sorting is disabled or there is nothing to sort.
    """
    options = options or SortOptions()
    if not options.enabled or not secrets:
        return secrets

    reverse = options.order == SortOrder.DESC
    result: Secrets = {}
    for path in sorted(secrets, reverse=reverse):
        kv = secrets[path]
        if options.field == SortField.KEY:
            keys = sorted(kv, reverse=reverse)
        elif options.field == SortField.VALUE:
            keys = sorted(kv, key=kv.__getitem__, reverse=reverse)
        else:
            keys = list(kv)
        result[path] = {k: kv[k] for k in keys}
    return result