"""Command: send the two example notifications.

Send failures are logged and reported as warnings; they never abort the
run, and the second notification is attempted regardless of the first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from notifyctl.commands._base import NotifyCommand
from notifyctl.domain.types import NotificationType
from notifyctl.errors import TransportError
from notifyctl.services.result import ServiceResult

if TYPE_CHECKING:
    from notifyctl.commands._context import AppContext

log = structlog.get_logger(__name__)

ANNOUNCEMENT_TITLE = "System Update"
ANNOUNCEMENT_MESSAGE = "Our app is undergoing maintenance. Expected downtime: 30 minutes."
OFFER_TITLE = "Special Offer!"
OFFER_MESSAGE = "50% off all premium features this weekend!"
OFFER_TARGETS = ["premium_users", "active_users"]

SUCCESS_MESSAGE = "Notifications sent successfully!"


@click.command(
    cls=NotifyCommand,
    examples="""\
  notifyctl demo
  notifyctl --broker kinesis --kinesis-stream notifications demo
  notifyctl --kafka-brokers localhost:9092 --kafka-topic alerts demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Send a sample system announcement and a sample marketing notification."""
    service = app.service
    sent: dict[str, str] = {}
    warnings: list[str] = []

    try:
        notification = service.broadcast_system_announcement(
            ANNOUNCEMENT_TITLE, ANNOUNCEMENT_MESSAGE
        )
        sent["system_announcement"] = notification.id
    except TransportError as exc:
        log.warning("demo.send_failed", step="system_announcement", error=str(exc))
        warnings.append(f"Failed to send system announcement: {exc}")

    try:
        notification = service.send_targeted_notification(
            NotificationType.MARKETING.value, OFFER_TITLE, OFFER_MESSAGE, OFFER_TARGETS
        )
        sent["targeted_notification"] = notification.id
    except TransportError as exc:
        log.warning("demo.send_failed", step="targeted_notification", error=str(exc))
        warnings.append(f"Failed to send targeted notification: {exc}")

    data: dict[str, object] = {
        "broker": app.producer.backend,
        "destination": app.producer.destination,
        "sent": sent,
        "failed": len(warnings),
    }
    if not warnings:
        data["status"] = SUCCESS_MESSAGE
    app.emit(ServiceResult(ok=True, op="demo", data=data, warnings=warnings))
