"""Command group: journal write and read."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patterncraft.commands._base import PcGroup
from patterncraft.domain.severity import Severity

if TYPE_CHECKING:
    from patterncraft.commands._context import AppContext

_LOG_EXAMPLES = """\
  patterncraft log write "Application started"
  patterncraft log write "Disk almost full" --level warning
  patterncraft log read --level ERROR"""

_LEVEL_CHOICE = click.Choice([s.value for s in Severity], case_sensitive=False)


@click.group(cls=PcGroup, examples=_LOG_EXAMPLES)
@click.pass_obj
def log(app: AppContext) -> None:
    """Write to and read from the journal."""


@log.command(
    examples="""\
  patterncraft log write "Application started"
  patterncraft log write "An error occurred" --level ERROR"""
)
@click.argument("message")
@click.option("--level", type=_LEVEL_CHOICE, default="INFO", show_default=True)
@click.pass_obj
def write(app: AppContext, message: str, level: str) -> None:
    """Record MESSAGE if LEVEL passes the configured minimum severity."""
    from patterncraft.services.log import LogService

    app.emit(LogService(app.journal).write(message, Severity(level.upper())))


@log.command(
    examples="""\
  patterncraft log read
  patterncraft -q log read --level ERROR"""
)
@click.option("--level", type=_LEVEL_CHOICE, default=None, help="Only entries of this severity.")
@click.pass_obj
def read(app: AppContext, level: str | None) -> None:
    """List journal entries."""
    from patterncraft.services.log import LogService

    severity = Severity(level.upper()) if level else None
    app.emit(LogService(app.journal).read(severity))
