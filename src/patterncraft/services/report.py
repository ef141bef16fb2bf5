"""ReportService — drive a report builder and export the result.

The service owns one builder per call: fields are applied in the order
header, content, sections, footer, style, then the built report is exported
into an in-memory sink (and into the caller's sink, if given).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from patterncraft.domain.builders import ReportBuilder, TextReportBuilder
from patterncraft.domain.errors import InvalidArgumentError, WriteFailedError
from patterncraft.output.sinks import ListSink
from patterncraft.services.base import BaseService
from patterncraft.services.result import ServiceResult

if TYPE_CHECKING:
    from patterncraft.domain.report import RenderSink, ReportStyle
    from patterncraft.infrastructure.journal import Journal


class ReportService(BaseService):
    """Build and export reports."""

    def __init__(
        self,
        journal: Journal | None = None,
        *,
        builder_factory: Callable[[], ReportBuilder] = TextReportBuilder,
    ) -> None:
        super().__init__(journal)
        self._builder_factory = builder_factory

    def build_report(
        self,
        *,
        header: str = "",
        content: str = "",
        footer: str = "",
        sections: Sequence[tuple[str, str]] = (),
        style: ReportStyle | None = None,
        sink: RenderSink | None = None,
    ) -> ServiceResult:
        """Assemble a report and render it.

        Returns:
            ``build_report`` result with ``lines`` (rendered output),
            ``section_count`` and ``styled``. An empty section name fails
            with ``INVALID_ARGUMENT``; a failing *sink* with ``WRITE_FAILED``.
        """
        op = "build_report"
        warnings: list[str] = []

        builder = self._builder_factory()
        builder.set_header(header)
        builder.set_content(content)
        for index, (name, body) in enumerate(sections):
            try:
                builder.add_section(name, body)
            except InvalidArgumentError as exc:
                return ServiceResult.failure(op, "INVALID_ARGUMENT", str(exc), index=index)
        builder.set_footer(footer)
        if style is not None:
            builder.set_style(style)

        report = builder.build()
        buffer = ListSink()
        report.export(buffer)
        if sink is not None:
            try:
                report.export(sink)
            except WriteFailedError as exc:
                return ServiceResult.failure(op, "WRITE_FAILED", str(exc))

        self._record(f"Report built: {header or '(untitled)'}", warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "lines": buffer.lines,
                "section_count": len(report.sections),
                "styled": report.style is not None,
            },
            warnings=warnings,
        )
