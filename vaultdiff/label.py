"""Relabelling of secret paths for display."""

from __future__ import annotations

from dataclasses import dataclass, field

Secrets = dict[str, dict[str, str]]


@dataclass
class LabelOptions:
    """Controls how secret paths are labelled in output."""

    prefix: str = ""
    strip_prefix: str = ""
    alias: dict[str, str] = field(default_factory=dict)


def _apply_label(path: str, options: LabelOptions) -> str:
    if path in options.alias:
        return options.alias[path]
    label = path
    if options.strip_prefix:
        label = label.removeprefix(options.strip_prefix)
    if options.prefix:
        label = options.prefix + label
    return label


def label_secrets(secrets: Secrets, options: LabelOptions | None = None) -> Secrets:
    """Return ``secrets`` with paths relabelled; values are copied unchanged."""
    options = options or LabelOptions()
    if not options.prefix and not options.strip_prefix and not options.alias:
        return secrets
    return {_apply_label(path, options): dict(kv) for path, kv in secrets.items()}