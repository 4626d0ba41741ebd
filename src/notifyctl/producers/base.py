"""NotificationProducer protocol and the shared send pipeline.

Pipeline: NORMALIZE → SERIALIZE → TRANSMIT

Backends subclass :class:`BaseProducer` and implement ``_transmit`` and
``_release``. Nothing here retries, buffers, or locks; thread-safety of
concurrent ``send`` calls is whatever the wrapped client provides.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from pydantic_core import PydanticSerializationError

from notifyctl.domain.ids import Clock, IdFactory, time_ns_id, utc_now
from notifyctl.domain.notification import Notification, prepare_for_send
from notifyctl.errors import TransportError

logger = logging.getLogger(__name__)


@runtime_checkable
class NotificationProducer(Protocol):
    """Anything that can transmit a Notification and be closed."""

    def send(self, notification: Notification) -> Notification:
        """Transmit *notification*; return the normalized copy that was sent."""
        ...

    def close(self) -> None:
        """Release transport resources."""
        ...


class BaseProducer:
    """Common normalize/serialize/transmit flow for concrete producers.

    Subclasses set ``backend`` and implement :meth:`_transmit` and
    :meth:`_release`.
    """

    backend: str = ""

    def __init__(
        self,
        *,
        clock: Clock = utc_now,
        id_factory: IdFactory = time_ns_id,
    ) -> None:
        self._clock = clock
        self._id_factory = id_factory
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def destination(self) -> str:
        """Human-readable name of the topic or stream being written to."""
        raise NotImplementedError

    def send(self, notification: Notification) -> Notification:
        """Normalize, serialize, and transmit a notification.

        Raises:
            TransportError: The producer is closed, serialization failed,
                or the underlying transport call failed.
        """
        if self._closed:
            raise TransportError(
                f"{self.backend} producer is closed", backend=self.backend
            )

        prepared = prepare_for_send(
            notification, clock=self._clock, id_factory=self._id_factory
        )
        try:
            payload = prepared.to_wire()
        except (PydanticSerializationError, ValueError) as exc:
            raise TransportError(
                f"failed to marshal notification: {exc}", backend=self.backend
            ) from exc

        self._transmit(prepared, payload)
        logger.debug(
            "Sent notification %s to %s %s (%d bytes)",
            prepared.id,
            self.backend,
            self.destination,
            len(payload),
        )
        return prepared

    def close(self) -> None:
        """Release transport resources. Subsequent calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        self._release()

    def _transmit(self, notification: Notification, payload: bytes) -> None:
        raise NotImplementedError

    def _release(self) -> None:
        raise NotImplementedError
