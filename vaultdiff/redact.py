"""Full redaction of secrets by path prefix or key name."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

Secrets = dict[str, dict[str, str]]

REDACTED_PLACEHOLDER = "[REDACTED]"


@dataclass
class RedactOptions:
    """Path prefixes and key names whose values are redacted."""

    paths: list[str] = field(default_factory=list)
    keys: list[str] = field(default_factory=list)


def matches_any_prefix(path: str, prefixes: Iterable[str] | None) -> bool:
    """Return whether ``path`` starts with any of ``prefixes``."""
    return any(path.startswith(prefix) for prefix in prefixes or ())


def redact_secrets(secrets: Secrets, options: RedactOptions | None = None) -> Secrets:
    """Return a copy of ``secrets`` with matching paths or keys redacted.

    A matching path redacts every key under it.
    """
    options = options or RedactOptions()
    redacted_keys = set(options.keys)
    result: Secrets = {}
    for path, kv in secrets.items():
        if matches_any_prefix(path, options.paths):
            result[path] = dict.fromkeys(kv, REDACTED_PLACEHOLDER)
        else:
            result[path] = {
                k: REDACTED_PLACEHOLDER if k in redacted_keys else v for k, v in kv.items()
            }
    return result