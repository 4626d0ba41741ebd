"""NotificationService: canned notification builders over one producer.

Pure pass-through: whatever the producer raises reaches the caller
untouched. No retry, no batching.
"""

from __future__ import annotations

from collections.abc import Sequence

from notifyctl.domain.notification import Notification
from notifyctl.domain.types import ALL_USERS, NotificationType
from notifyctl.producers.base import NotificationProducer


class NotificationService:
    """Builds notifications and forwards them to the injected producer."""

    def __init__(self, producer: NotificationProducer) -> None:
        self._producer = producer

    @property
    def producer(self) -> NotificationProducer:
        return self._producer

    def broadcast_system_announcement(self, title: str, message: str) -> Notification:
        """Send a ``system`` notification addressed to every user."""
        notification = Notification(
            type=NotificationType.SYSTEM.value,
            title=title,
            message=message,
            targets=[ALL_USERS],
        )
        return self._producer.send(notification)

    def send_targeted_notification(
        self,
        notification_type: str,
        title: str,
        message: str,
        targets: Sequence[str],
    ) -> Notification:
        """Send a notification of *notification_type* to the given *targets*.

        Target identifiers are passed through without validation; an empty
        sequence means no specific targeting.
        """
        notification = Notification(
            type=notification_type,
            title=title,
            message=message,
            targets=list(targets),
        )
        return self._producer.send(notification)
