"""Report builders.

``ReportBuilder`` is the capability every output format implements. Only the
plain-text variant exists today; a markup variant would be another subclass
producing the same :class:`Report` without changes to callers.

Usage::

    builder = TextReportBuilder()
    builder.set_header("Monthly report")
    builder.add_section("Sales", "Up 4%")
    report = builder.build()
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from patterncraft.domain.errors import InvalidArgumentError
from patterncraft.domain.report import Report, ReportStyle, Section


class ReportBuilder(ABC):
    """Abstract builder accumulating fields into a :class:`Report`."""

    @abstractmethod
    def set_header(self, text: str) -> None: ...

    @abstractmethod
    def set_content(self, text: str) -> None: ...

    @abstractmethod
    def set_footer(self, text: str) -> None: ...

    @abstractmethod
    def add_section(self, name: str, content: str) -> None:
        """Append a section.

        Raises:
            InvalidArgumentError: *name* is empty.
        """

    @abstractmethod
    def set_style(self, style: ReportStyle) -> None: ...

    @abstractmethod
    def build(self) -> Report:
        """Return the accumulated report."""


class TextReportBuilder(ReportBuilder):
    """Plain-text builder. Setters overwrite; the last write wins."""

    def __init__(self) -> None:
        self._report = Report()

    def set_header(self, text: str) -> None:
        self._report.header = text

    def set_content(self, text: str) -> None:
        self._report.content = text

    def set_footer(self, text: str) -> None:
        self._report.footer = text

    def add_section(self, name: str, content: str) -> None:
        if not name:
            raise InvalidArgumentError("Section name must not be empty")
        self._report.sections.append(Section(name=name, content=content))

    def set_style(self, style: ReportStyle) -> None:
        self._report.style = style

    def build(self) -> Report:
        return self._report

    def reset(self) -> None:
        """Discard the current report and start an empty one."""
        self._report = Report()
