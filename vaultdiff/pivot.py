"""Transposing secret maps so keys become paths."""

from __future__ import annotations

from dataclasses import dataclass

Secrets = dict[str, dict[str, str]]


@dataclass
class PivotOptions:
    """Controls how secrets are pivoted."""

    enabled: bool = False
    key_field: str = ""
    path_prefix: str = ""


def pivot_secrets(secrets: Secrets, options: PivotOptions | None = None) -> Secrets:
    """Transpose ``path -> key -> value`` into ``key -> path -> value``.

    With ``key_field`` set only that key is kept. Returns ``secrets``
    unchanged when pivoting is disabled.
    """
    options = options or PivotOptions()
    if not options.enabled:
        return secrets

    result: Secrets = {}
    for path, kv in secrets.items():
        for key, value in kv.items():
            if options.key_field and key != options.key_field:
                continue
            pivot_path = f"{options.path_prefix}/{key}" if options.path_prefix else key
            result.setdefault(pivot_path, {})[path] = value
    return result