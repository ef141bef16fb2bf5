"""BaseService — abstract foundation for all patterncraft services.

Every service may receive the process-wide :class:`Journal` at construction
time. Services never look the journal up through a global accessor.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from patterncraft.domain.errors import WriteFailedError
from patterncraft.domain.severity import Severity

if TYPE_CHECKING:
    from patterncraft.infrastructure.journal import Journal

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class ReportService(BaseService):
            def build_report(self, ...) -> ServiceResult:
                ...
                self._record("Report built", warnings)
    """

    def __init__(self, journal: Journal | None = None) -> None:
        self._journal = journal

    def _record(
        self,
        message: str,
        warnings: list[str],
        severity: Severity = Severity.INFO,
    ) -> None:
        """Record a side-channel journal entry. No-op without a journal.

        INVARIANT: Journal failures here are warnings, never errors of the
        operation being recorded.
        """
        if self._journal is None:
            return
        try:
            self._journal.log(message, severity)
        except WriteFailedError as exc:
            logger.debug("Journal write failed for %r", message, exc_info=True)
            warnings.append(str(exc))
