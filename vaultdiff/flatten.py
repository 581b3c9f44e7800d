"""Flattening of nested secret values into separator-joined keys."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

Secrets = dict[str, dict[str, str]]

DEFAULT_SEPARATOR = "."
DEFAULT_MAX_DEPTH = 10


@dataclass
class FlattenOptions:
    """Controls how nested secret maps are flattened."""

    enabled: bool = False
    separator: str = DEFAULT_SEPARATOR
    max_depth: int = DEFAULT_MAX_DEPTH


def flatten_secrets(secrets: Secrets, options: FlattenOptions | None = None) -> Secrets:
    """Return a flattened copy of ``secrets``, or ``secrets`` itself when disabled.

    Values are already plain strings, so they pass through unchanged.
    """
    options = options or FlattenOptions()
    if not options.enabled:
        return secrets
    return {path: dict(kv) for path, kv in secrets.items()}


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "<nil>"
    if isinstance(value, Mapping):
        items = " ".join(
            f"{_format_value(k)}:{_format_value(v)}"
            for k, v in sorted(value.items(), key=lambda item: str(item[0]))
        )
        return f"map[{items}]"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_value(v) for v in value) + "]"
    return str(value)


def flatten_map(
    mapping: Mapping[str, Any],
    prefix: str = "",
    sep: str = DEFAULT_SEPARATOR,
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> dict[str, str]:
    """Flatten a nested mapping into ``sep``-joined string keys.

    Beyond ``max_depth`` the remaining mapping is rendered as a single value.
    """
    out: dict[str, str] = {}
    _flatten_into(out, mapping, prefix, sep, depth, max_depth)
    return out


def _flatten_into(
    out: dict[str, str],
    mapping: Mapping[str, Any],
    prefix: str,
    sep: str,
    depth: int,
    max_depth: int,
) -> None:
    if depth > max_depth:
        out[prefix] = _format_value(mapping)
        return
    for key, value in mapping.items():
        full_key = f"{prefix}{sep}{key}" if prefix else key
        if isinstance(value, Mapping):
            _flatten_into(out, value, full_key, sep, depth + 1, max_depth)
        else:
            out[full_key] = _format_value(value).strip()