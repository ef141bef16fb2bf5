"""Command group: report building and rendering."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from patterncraft.commands._base import PcGroup
from patterncraft.services.result import ServiceResult

if TYPE_CHECKING:
    from patterncraft.commands._context import AppContext

_REPORT_EXAMPLES = """\
  patterncraft report build --header "Monthly report" --section "Sales=Up 4%"
  patterncraft report build --header H --font-size 14 --output report.txt
  patterncraft -q report build --header H --content C | less"""


def _parse_section(raw: str) -> tuple[str, str]:
    """Split a ``NAME=CONTENT`` option value on its first ``=``."""
    name, sep, content = raw.partition("=")
    if not sep:
        msg = f"Expected NAME=CONTENT, got {raw!r}"
        raise click.BadParameter(msg, param_hint="--section")
    return name, content


@click.group(cls=PcGroup, examples=_REPORT_EXAMPLES)
@click.pass_obj
def report(app: AppContext) -> None:
    """Build and render structured reports."""


@report.command(
    examples="""\
  patterncraft report build --header H --content C --section S1=a --section S2=b --footer F
  patterncraft report build --header H --background white --font-color black --font-size 12
  patterncraft report build --header H --output /tmp/report.txt"""
)
@click.option("--header", default="", help="Header line.")
@click.option("--content", default="", help="Body text.")
@click.option("--footer", default="", help="Footer line.")
@click.option(
    "--section",
    "sections",
    multiple=True,
    metavar="NAME=CONTENT",
    help="Append a section (repeatable, order preserved).",
)
@click.option("--background", default=None, help="Style background color.")
@click.option("--font-color", default=None, help="Style font color.")
@click.option("--font-size", type=click.IntRange(min=1), default=None, help="Style font size.")
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write the rendered report to this file.",
)
@click.pass_obj
def build(
    app: AppContext,
    header: str,
    content: str,
    footer: str,
    sections: tuple[str, ...],
    background: str | None,
    font_color: str | None,
    font_size: int | None,
    output: str | None,
) -> None:
    """Assemble a report and render it.

    Style options are optional; when any is given, the others fall back to
    the ``[report.style]`` configuration.
    """
    from patterncraft.services.report import ReportService

    parsed = [_parse_section(raw) for raw in sections]
    style = None
    if any(value is not None for value in (background, font_color, font_size)):
        style = app.settings.report.style.to_style(
            background_color=background,
            font_color=font_color,
            font_size=font_size,
        )

    result = ReportService(app.journal).build_report(
        header=header,
        content=content,
        footer=footer,
        sections=parsed,
        style=style,
    )
    if output is not None and result.ok:
        result = _write_lines(result, output)
    app.emit(result)


def _write_lines(result: ServiceResult, output: str) -> ServiceResult:
    """Write a built report to *output*; the file is only opened once the build succeeded."""
    from patterncraft.output.sinks import StreamSink

    try:
        with Path(output).open("w", encoding="utf-8") as fh:
            sink = StreamSink(fh)
            for line in result.data["lines"]:
                sink.write(line)
    except OSError as exc:
        return ServiceResult.failure(
            result.op, "WRITE_FAILED", f"Cannot write {output}: {exc}", path=output
        )
    return result
