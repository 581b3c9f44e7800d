"""Validation of secrets against simple rules."""

from __future__ import annotations

from dataclasses import dataclass, field

Secrets = dict[str, dict[str, str]]


@dataclass
class ValidationOptions:
    """Validation rules; validation is disabled by default."""

    enabled: bool = False
    require_non_empty: bool = False
    forbidden_keys: list[str] = field(default_factory=list)
    max_value_length: int = 0


class ValidationError(Exception):
    """Raised with every violation found during validation."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = list(violations)
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"validation failed with {len(self.violations)} violation(s): "
            + "; ".join(self.violations)
        )


def _violations(secrets: Secrets, options: ValidationOptions):
    forbidden = [k.casefold() for k in options.forbidden_keys]
    for path, kv in secrets.items():
        for key, value in kv.items():
            if options.require_non_empty and not value.strip():
                yield f"{path}/{key}: value must not be empty"
            length = len(value.encode("utf-8"))
            if options.max_value_length > 0 and length > options.max_value_length:
                yield (
                    f"{path}/{key}: value length {length} exceeds max "
                    f"{options.max_value_length}"
                )
            folded = key.casefold()
            for name in forbidden:
                if folded == name:
                    yield f"{path}/{key}: key is forbidden"


def validate_secrets(secrets: Secrets, options: ValidationOptions | None = None) -> None:
    """Raise ``ValidationError`` if ``secrets`` break any enabled rule."""
    options = options or ValidationOptions()
    if not options.enabled:
        return
    violations = list(_violations(secrets, options))
    if violations:
        raise ValidationError(violations)


def violation_count(error: BaseException | None) -> int:
    """Return the number of violations in ``error`` or the errors it was raised from."""
    seen: set[int] = set()
    current = error
    while current is not None and id(current) not in seen:
        if isinstance(current, ValidationError):
            return len(current.violations)
        seen.add(id(current))
        current = current.__cause__
    return 0