"""DemoService — the end-to-end walkthrough behind ``patterncraft demo``.

Steps:
  1. Log one message at each severity.
  2. Read back the ERROR entries.
  3. Build and render the sample monthly report.
  4. Clone the sample knight and check the copy owns its own equipment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from patterncraft.domain.prototype import Armor, Character, Weapon
from patterncraft.domain.report import ReportStyle
from patterncraft.domain.severity import Severity
from patterncraft.services.base import BaseService
from patterncraft.services.character import CharacterService
from patterncraft.services.log import LogService
from patterncraft.services.report import ReportService
from patterncraft.services.result import ServiceResult

if TYPE_CHECKING:
    from patterncraft.infrastructure.journal import Journal

SAMPLE_MESSAGES: list[tuple[str, Severity]] = [
    ("Application started", Severity.INFO),
    ("A warning occurred", Severity.WARNING),
    ("An error occurred", Severity.ERROR),
]


def sample_style() -> ReportStyle:
    return ReportStyle(background_color="white", font_color="black", font_size=12)


def sample_knight() -> Character:
    return Character(
        name="Knight",
        health=100,
        strength=20,
        agility=15,
        intelligence=10,
        weapon=Weapon(name="Sword", damage=50),
        armor=Armor(name="Shield", defense=30),
    )


class DemoService(BaseService):
    """Run every subsystem once against the injected journal."""

    def __init__(self, journal: Journal) -> None:
        super().__init__(journal)
        self._log_service = LogService(journal)
        self._report_service = ReportService(journal)
        self._character_service = CharacterService(journal)

    def run(self) -> ServiceResult:
        """Run the walkthrough, stopping at the first failed step."""
        op = "demo"
        steps: dict[str, Any] = {}
        warnings: list[str] = []

        recorded = 0
        for message, severity in SAMPLE_MESSAGES:
            result = self._log_service.write(message, severity)
            if not result.ok:
                return _failed_step(op, "log_write", result)
            recorded += int(result.data["recorded"])
        steps["logged"] = recorded

        errors = self._log_service.read(Severity.ERROR)
        if not errors.ok:
            return _failed_step(op, "log_read", errors)
        steps["error_entries"] = errors.data["entries"]

        report = self._report_service.build_report(
            header="Monthly report",
            content="This is the main content of the report.",
            sections=[("Section 1", "Content for section 1")],
            footer="End of report",
            style=sample_style(),
        )
        if not report.ok:
            return _failed_step(op, "build_report", report)
        steps["report_lines"] = report.data["lines"]
        warnings.extend(report.warnings)

        cloned = self._character_service.clone_character(sample_knight())
        if not cloned.ok:
            return _failed_step(op, "clone_character", cloned)
        steps["clone"] = cloned.data["clone"]
        steps["aliasing"] = cloned.data["aliasing"]
        warnings.extend(cloned.warnings)

        return ServiceResult(ok=True, op=op, data=steps, warnings=warnings)


def _failed_step(op: str, step: str, result: ServiceResult) -> ServiceResult:
    err = result.error
    code = err.code if err else "STEP_FAILED"
    message = err.message if err else f"{step} failed"
    return ServiceResult.failure(op, code, message, step=step)
