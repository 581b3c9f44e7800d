"""Parsing of vault paths into namespace, mount and secret path."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ParsedPath:
    """The components of a vault path."""

    namespace: str = ""
    mount: str = ""
    secret_path: str = ""

    def full_kv2_path(self) -> str:
        """Return the KV v2 data path for this secret."""
        if self.secret_path.startswith("data/"):
            return f"{self.mount}/{self.secret_path}"
        return f"{self.mount}/data/{self.secret_path}"


def parse_vault_path(raw: str, default_namespace: str = "") -> ParsedPath:
    """Split ``raw`` into namespace, mount and secret path.

    A path of three or more segments whose second segment is neither
    ``data`` nor ``metadata`` has its first segment taken as the namespace.
    Raises ``ValueError`` for empty or single-segment paths.
    """
    raw = raw.strip("/")
    if not raw:
        raise ValueError("vault path must not be empty")

    parts = raw.split("/", 2)
    if len(parts) < 2:
        raise ValueError(
            f'vault path "{raw}" is too short: expected at least mount/secret-path'
        )

    if len(parts) == 3 and parts[1] not in ("data", "metadata"):
        namespace, mount, secret_path = parts
        return ParsedPath(namespace=namespace, mount=mount, secret_path=secret_path)

    return ParsedPath(
        namespace=default_namespace,
        mount=parts[0],
        secret_path="/".join(parts[1:]),
    )