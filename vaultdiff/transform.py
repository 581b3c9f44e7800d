"""Transformation of secret keys and values before comparison."""

from __future__ import annotations

from dataclasses import dataclass, field

Secrets = dict[str, dict[str, str]]


@dataclass
class TransformOptions:
    """Controls how secrets are transformed. Defaults are no-ops."""

    trim_space: bool = False
    lowercase_keys: bool = False
    ignore_keys: list[str] = field(default_factory=list)


def _transform_kv(kv: dict[str, str], options: TransformOptions, ignored: set[str]) -> dict[str, str]:
    result: dict[str, str] = {}
    for original, value in kv.items():
        key = original.lower() if options.lowercase_keys else original
        if options.trim_space:
            value = value.strip()
        if original in ignored or key in ignored:
            value = ""
        result[key] = value
    return result


def transform_secrets(secrets: Secrets, options: TransformOptions | None = None) -> Secrets:
    """Return a transformed copy of ``secrets``; the input is not modified.

    Ignored keys, matched before or after lowercasing, have their values emptied.
    """
    options = options or TransformOptions()
    ignored = set(options.ignore_keys)
    return {path: _transform_kv(kv, options, ignored) for path, kv in secrets.items()}