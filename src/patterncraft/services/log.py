"""LogService — write to and read back the journal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from patterncraft.domain.errors import ReadFailedError, WriteFailedError
from patterncraft.domain.severity import Severity
from patterncraft.services.base import BaseService
from patterncraft.services.result import ServiceResult

if TYPE_CHECKING:
    from patterncraft.infrastructure.journal import Journal


class LogService(BaseService):
    """Journal operations. Requires a journal, unlike the other services."""

    def __init__(self, journal: Journal) -> None:
        super().__init__(journal)
        self._log = journal

    def write(self, message: str, severity: Severity = Severity.INFO) -> ServiceResult:
        """Log *message*; ``recorded`` is False when the severity was gated out."""
        op = "log_write"
        try:
            entry = self._log.log(message, severity)
        except WriteFailedError as exc:
            return ServiceResult.failure(op, "WRITE_FAILED", str(exc), path=str(self._log.path))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "recorded": entry is not None,
                "severity": str(severity),
                "min_severity": str(self._log.min_severity),
                "path": str(self._log.path),
            },
        )

    def read(self, severity: Severity | None = None) -> ServiceResult:
        """Return journal entries, filtered to one severity when given."""
        op = "log_read"
        try:
            entries = self._log.read(severity)
        except ReadFailedError as exc:
            return ServiceResult.failure(op, "READ_FAILED", str(exc), path=str(self._log.path))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "entries": [{"severity": str(e.severity), "message": e.message} for e in entries],
                "count": len(entries),
                "path": str(self._log.path),
            },
        )
