"""Masking of secret values for display."""

from __future__ import annotations

from dataclasses import dataclass, field

Secrets = dict[str, dict[str, str]]


@dataclass
class MaskOptions:
    """Controls how secret values are masked in output."""

    enabled: bool = False
    mask_string: str = "***"
    reveal_keys: list[str] = field(default_factory=list)


def mask_secrets(secrets: Secrets, options: MaskOptions | None = None) -> Secrets:
    """Return a copy of ``secrets`` with values masked unless their key is revealed."""
    options = options or MaskOptions()
    if not options.enabled:
        return secrets
    revealed = set(options.reveal_keys)
    return {
        path: {k: v if k in revealed else options.mask_string for k, v in kv.items()}
        for path, kv in secrets.items()
    }


def mask_value(key: str, value: str, options: MaskOptions | None = None) -> str:
    """Mask a single value unless ``key`` is revealed (case-insensitively)."""
    options = options or MaskOptions()
    if not options.enabled:
        return value
    folded = key.casefold()
    if any(r.casefold() == folded for r in options.reveal_keys):
        return value
    return options.mask_string