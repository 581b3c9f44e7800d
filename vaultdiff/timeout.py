"""Per-operation timeouts for vault requests."""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass(frozen=True)
class Deadline:
    """A point on the monotonic clock after which an operation should stop.

    A deadline whose ``at`` is ``None`` never expires.
    """

    at: float | None = None

    def remaining(self) -> float | None:
        """Return the seconds left, never below zero, or ``None`` if unbounded."""
        if self.at is None:
            return None
        return max(0.0, self.at - time.monotonic())

    def expired(self) -> bool:
        """Return whether the deadline has passed."""
        return self.at is not None and time.monotonic() >= self.at


def _deadline(seconds: float) -> Deadline:
    if seconds == 0:
        return Deadline()
    return Deadline(at=time.monotonic() + seconds)


@dataclass
class TimeoutOptions:
    """Timeouts in seconds; zero disables the respective timeout."""

    list_timeout: float = 15.0
    read_timeout: float = 10.0
    total_timeout: float = 0.0

    def validate(self) -> None:
        """Raise ``ValueError`` if any timeout is negative."""
        for name, value in (
            ("list-timeout", self.list_timeout),
            ("read-timeout", self.read_timeout),
            ("total-timeout", self.total_timeout),
        ):
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}s")

    def list_deadline(self) -> Deadline:
        """Return the deadline for a list operation started now."""
        return _deadline(self.list_timeout)

    def read_deadline(self) -> Deadline:
        """Return the deadline for a read operation started now."""
        return _deadline(self.read_timeout)

    def total_deadline(self) -> Deadline:
        """Return the deadline for a whole run started now."""
        return _deadline(self.total_timeout)

    def is_zero(self) -> bool:
        """Return whether no timeouts are configured."""
        return self.list_timeout == 0 and self.read_timeout == 0 and self.total_timeout == 0