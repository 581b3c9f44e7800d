"""Truncation of long secret values for display."""

from __future__ import annotations

from dataclasses import dataclass, field

Secrets = dict[str, dict[str, str]]

DEFAULT_ELLIPSIS = "..."


@dataclass
class TruncateOptions:
    """Controls how secret values are truncated before display."""

    enabled: bool = False
    max_length: int = 64
    ellipsis: str = DEFAULT_ELLIPSIS
    skip_keys: list[str] = field(default_factory=list)


def truncate_value(text: str, max_length: int, ellipsis: str = DEFAULT_ELLIPSIS) -> str:
    """Cut ``text`` to ``max_length`` characters and append ``ellipsis`` if it was longer.

    Trailing spaces left at the cut are removed. Raises ``ValueError`` if a
    longer text is cut to a negative length.
    """
    if len(text) <= max_length:
        return text
    if max_length < 0:
        raise ValueError(f"max length must be >= 0, got {max_length}")
    return text[:max_length].rstrip(" ") + ellipsis


def truncate_secrets(secrets: Secrets, options: TruncateOptions | None = None) -> Secrets:
    """Return a copy of ``secrets`` with long values truncated.

    Returns ``secrets`` itself when truncation is disabled.
    """
    options = options or TruncateOptions()
    if not options.enabled:
        return secrets
    ellipsis = options.ellipsis or DEFAULT_ELLIPSIS
    skipped = set(options.skip_keys)
    return {
        path: {
            k: v if k in skipped else truncate_value(v, options.max_length, ellipsis)
            for k, v in kv.items()
        }
        for path, kv in secrets.items()
    }