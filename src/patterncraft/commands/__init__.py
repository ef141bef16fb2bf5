"""Subcommand modules for patterncraft.

Provides register_commands() which uses deferred imports to keep
``patterncraft --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    3 groups (have subcommands) + 1 standalone command.
    """
    # --- Groups ---
    from patterncraft.commands.character import character
    from patterncraft.commands.log import log
    from patterncraft.commands.report import report

    cli.add_command(report)
    cli.add_command(character)
    cli.add_command(log)

    # --- Standalone commands ---
    from patterncraft.commands.demo import demo

    cli.add_command(demo)
