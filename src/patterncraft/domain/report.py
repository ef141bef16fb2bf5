"""Report aggregate and its value types.

A :class:`Report` is populated field by field through a
:class:`~patterncraft.domain.builders.ReportBuilder` and rendered line by line
into any :class:`RenderSink`.

Rendering order is fixed:
  header, content, one ``"<name>: <content>"`` line per section (insertion
  order), footer, then the style summary when a style is set.

INVARIANT: ``export()`` is a pure function of current state. Two calls with no
mutation in between write identical line sequences.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field


@runtime_checkable
class RenderSink(Protocol):
    """Destination for rendered report lines (console, buffer, file)."""

    def write(self, line: str) -> None: ...


class ReportStyle(BaseModel):
    """Visual style of a report. Immutable; equal when all fields are equal."""

    model_config = {"frozen": True}

    background_color: str
    font_color: str
    font_size: int = Field(gt=0)

    def summary(self) -> str:
        """Return the style line written at the end of an export."""
        return (
            f"backgroundColor={self.background_color}, "
            f"fontColor={self.font_color}, "
            f"fontSize={self.font_size}"
        )


class Section(BaseModel):
    """A named block of report content."""

    model_config = {"frozen": True}

    name: str = Field(min_length=1)
    content: str = ""

    def line(self) -> str:
        return f"{self.name}: {self.content}"


class Report(BaseModel):
    """Aggregate assembled by a report builder.

    Attributes:
        header: First line of the export.
        content: Free-text body, written after the header.
        footer: Written after all sections.
        sections: Named sections in insertion order. Duplicates are kept.
        style: Optional style; when absent no style line is written.
    """

    header: str = ""
    content: str = ""
    footer: str = ""
    sections: list[Section] = Field(default_factory=list)
    style: ReportStyle | None = None

    def lines(self) -> list[str]:
        """Return the rendered lines in export order."""
        out = [self.header, self.content]
        out.extend(section.line() for section in self.sections)
        out.append(self.footer)
        if self.style is not None:
            out.append(self.style.summary())
        return out

    def export(self, sink: RenderSink) -> None:
        """Write every rendered line to *sink*, one ``write`` call per line."""
        for line in self.lines():
            sink.write(line)
