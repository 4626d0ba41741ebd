"""NotifyCommand: click command class that can show sample invocations.

Every notifyctl command passes ``examples=`` with a few ready-to-paste
command lines (broker flags, targets, JSON output). ``--examples`` prints
them and exits before any producer is built.
"""

from __future__ import annotations

from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    """Build the eager ``--examples`` option that prints *examples*."""

    def print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=print_examples,
        help="Show sample invocations and exit.",
    )


class NotifyCommand(click.Command):
    """Command that accepts an ``examples`` string and exposes ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))
