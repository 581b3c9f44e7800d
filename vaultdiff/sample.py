"""Random sampling of secret paths."""

from __future__ import annotations

import random
from dataclasses import dataclass

Secrets = dict[str, dict[str, str]]


@dataclass
class SampleOptions:
    """Controls random sampling of paths; ``max_paths`` of 0 means unlimited."""

    enabled: bool = False
    max_paths: int = 0
    seed: int = 0


def sample_secrets(secrets: Secrets, options: SampleOptions | None = None) -> Secrets:
    """Return a copy of at most ``max_paths`` randomly chosen paths.

    The choice depends only on the seed and the set of paths. When sampling
    is disabled, unlimited or unnecessary, ``secrets`` itself is returned.
    """
    options = options or SampleOptions()
    if not options.enabled or options.max_paths <= 0 or len(secrets) <= options.max_paths:
        return secrets

    paths = sorted(secrets)
    random.Random(options.seed).shuffle(paths)
    return {path: dict(secrets[path]) for path in paths[: options.max_paths]}