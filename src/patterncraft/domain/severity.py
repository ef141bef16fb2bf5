"""Journal severities and the ordinal gate between them.

INVARIANT: INFO < WARNING < ERROR. A message is recorded only when its
severity is at least the configured minimum.
"""

from __future__ import annotations

from enum import StrEnum


class Severity(StrEnum):
    """Severity levels for journal entries, in ascending order."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

    @property
    def rank(self) -> int:
        """Ordinal position (INFO is 0)."""
        return _ORDER.index(self)

    def is_at_least(self, minimum: Severity) -> bool:
        """Return True when this severity passes a *minimum* gate."""
        return self.rank >= minimum.rank


_ORDER: list[Severity] = [Severity.INFO, Severity.WARNING, Severity.ERROR]


def parse_severity(value: str) -> Severity:
    """Parse a case-insensitive severity name.

    Raises:
        ValueError: *value* does not name a severity.
    """
    try:
        return Severity(value.strip().upper())
    except ValueError:
        names = ", ".join(s.value for s in Severity)
        msg = f"Unknown severity {value!r} (expected one of: {names})"
        raise ValueError(msg) from None
