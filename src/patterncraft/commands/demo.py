"""Standalone command: end-to-end walkthrough of every subsystem."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from patterncraft.commands._base import PcCommand

if TYPE_CHECKING:
    from patterncraft.commands._context import AppContext


@click.command(
    cls=PcCommand,
    examples="""\
  patterncraft demo
  patterncraft --json demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Log, read back errors, build a sample report, and clone a knight."""
    from patterncraft.services.demo import DemoService

    app.emit(DemoService(app.journal).run())
