"""Command: send a notification of any type to specific targets."""

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
  notifyctl send --type marketing -t premium_users -t active_users "Special Offer!" "50% off"
  notifyctl send --type billing -t user_42 "Invoice ready" "Your invoice is available."
  notifyctl --json send --type digest Digest Weekly-digest-is-out""",
)
@click.argument("title")
@click.argument("message")
@click.option(
    "--type",
    "notification_type",
    required=True,
    help="Notification category (e.g. marketing, billing).",
)
@click.option(
    "-t",
    "--target",
    "targets",
    multiple=True,
    help="Audience identifier. Repeatable; order is preserved.",
)
@click.pass_obj
def send(
    app: AppContext,
    title: str,
    message: str,
    notification_type: str,
    targets: tuple[str, ...],
) -> None:
    """Send a targeted notification."""
    op = "send_targeted_notification"
    try:
        sent = app.service.send_targeted_notification(
            notification_type, title, message, list(targets)
        )
    except TransportError as exc:
        app.emit(app.failed_result(op, exc))
        return
    app.emit(app.sent_result(op, sent))
