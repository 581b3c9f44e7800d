"""Merging of two secret maps."""

from __future__ import annotations

from dataclasses import dataclass

Secrets = dict[str, dict[str, str]]


@dataclass
class MergeOptions:
    """Controls how two secret maps are merged.

    By default the right side wins on conflict and empty values are kept.
    """

    prefer_left: bool = False
    skip_empty: bool = False


def _copy_kv(src: dict[str, str], skip_empty: bool) -> dict[str, str]:
    return {k: v for k, v in src.items() if not (skip_empty and v == "")}


def merge_secrets(left: Secrets, right: Secrets, options: MergeOptions | None = None) -> Secrets:
    """Merge ``right`` into a copy of ``left``, resolving conflicts per ``options``."""
    options = options or MergeOptions()
    result = {path: _copy_kv(kv, options.skip_empty) for path, kv in left.items()}

    for path, kv in right.items():
        if path not in result:
            result[path] = _copy_kv(kv, options.skip_empty)
            continue
        target = result[path]
        for k, v in kv.items():
            if options.skip_empty and v == "":
                continue
            if options.prefer_left and k in target:
                continue
            target[k] = v

    return result