"""Subcommand modules for notifyctl.

Provides register_commands() which uses deferred imports to keep
``notifyctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from notifyctl.commands.announce import announce
    from notifyctl.commands.demo import demo
    from notifyctl.commands.ping import ping
    from notifyctl.commands.send import send

    cli.add_command(announce)
    cli.add_command(send)
    cli.add_command(demo)
    cli.add_command(ping)
