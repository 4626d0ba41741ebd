"""Command: broadcast a system announcement to all users."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notifyctl.commands._base import NotifyCommand
from notifyctl.errors import TransportError

if TYPE_CHECKING:
    from notifyctl.commands._context import AppContext


@click.command(
    cls=NotifyCommand,
    examples="""\
  notifyctl announce "System Update" "Maintenance starts at 22:00 UTC."
  notifyctl --broker kinesis announce "Outage" "Logins are degraded."
  notifyctl --json announce Hello World""",
)
@click.argument("title")
@click.argument("message")
@click.pass_obj
def announce(app: AppContext, title: str, message: str) -> None:
    """Send a system-wide announcement (type "system", target "all_users")."""
    op = "broadcast_system_announcement"
    try:
        sent = app.service.broadcast_system_announcement(title, message)
    except TransportError as exc:
        app.emit(app.failed_result(op, exc))
        return
    app.emit(app.sent_result(op, sent))
