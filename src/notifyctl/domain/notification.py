"""Notification: the broadcast payload and its JSON wire codec.

Wire shape (identical for every transport)::

    {"id": str, "type": str, "title": str, "message": str,
     "timestamp": RFC 3339 string, "targets": [str, ...]}

INVARIANT: a Notification is never mutated. Pre-send defaulting of ``id``
and ``timestamp`` produces a new instance via :func:`prepare_for_send`.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from notifyctl.domain.ids import Clock, IdFactory, time_ns_id, utc_now


class Notification(BaseModel):
    """A structured broadcast message.

    Attributes:
        id: Unique identifier. Empty means "assign one before sending".
        type: Category tag such as ``"system"`` or ``"marketing"``.
        title: Short headline.
        message: Body text.
        timestamp: Creation/send time. None means "stamp before sending".
        targets: Audience identifiers. Empty means no specific targeting.
    """

    model_config = {"frozen": True}

    id: str = ""
    type: str = ""
    title: str = ""
    message: str = ""
    timestamp: datetime | None = None
    targets: list[str] = Field(default_factory=list)

    @property
    def has_id(self) -> bool:
        return bool(self.id)

    @property
    def has_timestamp(self) -> bool:
        return self.timestamp is not None

    def to_wire(self) -> bytes:
        """Serialize to the on-wire JSON body."""
        return self.model_dump_json().encode("utf-8")

    @classmethod
    def from_wire(cls, data: bytes | str) -> Notification:
        """Parse an on-wire JSON body."""
        return cls.model_validate_json(data)


def prepare_for_send(
    notification: Notification,
    *,
    clock: Clock = utc_now,
    id_factory: IdFactory = time_ns_id,
) -> Notification:
    """Fill in a missing ``id`` and ``timestamp``.

    Values the caller already set are kept as-is. Returns the input
    unchanged when nothing is missing.
    """
    updates: dict[str, object] = {}
    if not notification.has_id:
        updates["id"] = id_factory()
    if not notification.has_timestamp:
        updates["timestamp"] = clock()
    if not updates:
        return notification
    return notification.model_copy(update=updates)
