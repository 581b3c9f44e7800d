"""Applying set, delete and rename operations to secret maps."""

from __future__ import annotations

from dataclasses import dataclass, field

Secrets = dict[str, dict[str, str]]


class PatchError(Exception):
    """Raised when a patch operation cannot be applied."""


@dataclass
class PatchOperation:
    """A single patch action: ``set``, ``delete`` or ``rename``."""

    op: str
    path: str
    key: str = ""
    value: str = ""
    new_key: str = ""


@dataclass
class PatchOptions:
    """The operations to apply and whether to only describe them."""

    operations: list[PatchOperation] = field(default_factory=list)
    dry_run: bool = False


def patch_secrets(
    secrets: Secrets, options: PatchOptions | None = None
) -> tuple[Secrets, list[str]]:
    """Apply the patch operations to a copy of ``secrets``.

    Returns the patched copy and a description of each operation.
    Raises ``PatchError`` for unknown paths or operations.
    """
    options = options or PatchOptions()
    result = {path: dict(kv) for path, kv in secrets.items()}
    applied: list[str] = []

    for op in options.operations:
        try:
            kv = result[op.path]
        except KeyError:
            raise PatchError(f'patch: path "{op.path}" not found') from None

        if op.op == "set":
            if not options.dry_run:
                kv[op.key] = op.value
            applied.append(f"set {op.path}/{op.key}")
        elif op.op == "delete":
            if not options.dry_run:
                kv.pop(op.key, None)
            applied.append(f"delete {op.path}/{op.key}")
        elif op.op == "rename":
            if not options.dry_run and op.key in kv:
                kv[op.new_key] = kv.pop(op.key)
            applied.append(f"rename {op.path}/{op.key} -> {op.new_key}")
        else:
            raise PatchError(f'patch: unknown operation "{op.op}"')

    return result, applied