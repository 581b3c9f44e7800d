"""Promotion of secrets from one set of paths into another."""

from __future__ import annotations

from dataclasses import dataclass

Secrets = dict[str, dict[str, str]]

_CONFLICT_REASON = "key already exists in destination (overwrite=false)"


@dataclass
class PromoteOptions:
    """Controls how secrets are promoted. The defaults are safe: disabled, dry run."""

    enabled: bool = False
    dry_run: bool = True
    overwrite: bool = False
    path_prefix: str = ""


@dataclass
class PromoteResult:
    """The outcome of promoting a single key."""

    path: str
    key: str
    skipped: bool = False
    reason: str = ""


def promote_secrets(
    src: Secrets, dst: Secrets, options: PromoteOptions | None = None
) -> tuple[Secrets, list[PromoteResult]]:
    """Copy ``src`` into a copy of ``dst`` and report what happened to each key.

    Existing keys are only overwritten when ``overwrite`` is set, and a dry
    run leaves the returned copy of ``dst`` untouched. When promotion is
    disabled ``dst`` itself is returned with no results.
    """
    options = options or PromoteOptions()
    if not options.enabled:
        return dst, []

    output = {path: dict(kv) for path, kv in dst.items()}
    results: list[PromoteResult] = []

    for path, kv in src.items():
        target_path = f"{options.path_prefix}/{path}" if options.path_prefix else path
        target = output.get(target_path)
        if target is None:
            target = {}
            if not options.dry_run:
                output[target_path] = target

        for key, value in kv.items():
            if key in target and not options.overwrite:
                results.append(
                    PromoteResult(
                        path=target_path, key=key, skipped=True, reason=_CONFLICT_REASON
                    )
                )
                continue
            results.append(PromoteResult(path=target_path, key=key))
            if not options.dry_run:
                target[key] = value

    return output, results