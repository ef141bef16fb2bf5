"""Click base classes for patterncraft commands.

Commands and groups accept an ``examples`` string. It is kept out of
``--help`` (which only gains a one-line pointer) and printed by an eager
``--examples`` flag instead.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click

_EXAMPLES_HINT = "Run with --examples for sample invocations."


class _ExamplesMixin:
    """Shared ``examples`` handling for :class:`PcCommand` and :class:`PcGroup`."""

    params: list[click.Parameter]
    epilog: str | None

    def _init_examples(self, examples: str | None) -> None:
        self.examples = textwrap.indent(textwrap.dedent(examples), "  ") if examples else None
        if self.examples is None:
            return
        self.epilog = f"{self.epilog}\n\n{_EXAMPLES_HINT}" if self.epilog else _EXAMPLES_HINT
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=self._show_examples,
                help="Show usage examples and exit.",
            )
        )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class PcCommand(_ExamplesMixin, click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)


class PcGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands are :class:`PcCommand` by default."""

    command_class = PcCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_examples(examples)
