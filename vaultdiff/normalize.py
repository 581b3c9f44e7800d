"""Normalisation of secret paths, keys and values before comparison."""

from __future__ import annotations

from dataclasses import dataclass

Secrets = dict[str, dict[str, str]]


@dataclass
class NormalizeOptions:
    """Controls how secret keys and values are normalised. Defaults are no-ops."""

    trim_key_prefix: str = ""
    strip_trailing_slash: bool = False
    collapse_whitespace: bool = False


def collapse_whitespace(text: str) -> str:
    """Replace whitespace runs with single spaces and trim both ends."""
    return " ".join(text.split())


def _normalize_path(path: str, options: NormalizeOptions) -> str:
    return path.rstrip("/") if options.strip_trailing_slash else path


def _normalize_kv(kv: dict[str, str], options: NormalizeOptions) -> dict[str, str]:
    result = {}
    for key, value in kv.items():
        if options.trim_key_prefix:
            key = key.removeprefix(options.trim_key_prefix)
        if options.collapse_whitespace:
            value = collapse_whitespace(value)
        result[key] = value
    return result


def normalize_secrets(secrets: Secrets, options: NormalizeOptions | None = None) -> Secrets:
    """Return a normalised copy of ``secrets``; the input is not modified."""
    options = options or NormalizeOptions()
    return {
        _normalize_path(path, options): _normalize_kv(kv, options)
        for path, kv in secrets.items()
    }