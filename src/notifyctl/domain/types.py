"""Broker and notification classification enums."""

from __future__ import annotations

from enum import StrEnum


class BrokerType(StrEnum):
    """Supported message transports."""

    KAFKA = "kafka"
    KINESIS = "kinesis"


class NotificationType(StrEnum):
    """Well-known notification categories.

    ``Notification.type`` is a free-form string; these are the values the
    built-in commands use.
    """

    SYSTEM = "system"
    MARKETING = "marketing"


ALL_USERS = "all_users"
