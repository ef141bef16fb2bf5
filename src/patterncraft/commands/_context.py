"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the single process-wide Journal and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from patterncraft.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from patterncraft.config.settings import PcSettings
    from patterncraft.infrastructure.journal import Journal
    from patterncraft.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The journal is lazily
    created on first use so ``--help`` and ``--version`` never touch the
    filesystem.
    """

    def __init__(self, settings: PcSettings) -> None:
        self.settings = settings
        self._journal: Journal | None = None

        # Configure structured logging
        from patterncraft.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        structlog.get_logger(__name__).debug(
            "settings_resolved",
            config_path=str(settings.config_path) if settings.config_path else None,
            workspace_root=str(settings.workspace_root),
        )

    @property
    def journal(self) -> Journal:
        """The process-wide journal (created lazily on first access)."""
        if self._journal is None:
            from patterncraft.infrastructure.journal import Journal

            self._journal = Journal(
                self.settings.journal_path,
                min_severity=self.settings.journal.min_severity,
            )
        return self._journal

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
