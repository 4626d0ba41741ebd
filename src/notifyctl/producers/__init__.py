"""Producer layer: transports that carry a Notification to a broker.

Vendor client modules are imported lazily inside :func:`create_producer`
so selecting one backend never requires the other's client library at
import time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from notifyctl.domain.types import BrokerType
from notifyctl.producers.base import BaseProducer, NotificationProducer

if TYPE_CHECKING:
    from notifyctl.config.settings import NotifySettings

__all__ = ["BaseProducer", "NotificationProducer", "create_producer"]


def create_producer(settings: NotifySettings) -> BaseProducer:
    """Construct the producer selected by ``settings.broker``.

    Raises:
        BrokerConnectionError: The selected transport could not be reached.
        ValueError: ``settings.broker`` names an unknown backend.
    """
    broker = BrokerType(settings.broker)
    if broker is BrokerType.KAFKA:
        from notifyctl.producers.kafka import KafkaProducer

        cfg = settings.kafka
        return KafkaProducer(
            cfg.brokers,
            cfg.topic,
            acks=cfg.acks,
            connect_timeout=cfg.connect_timeout,
            delivery_timeout=cfg.delivery_timeout,
        )
    if broker is BrokerType.KINESIS:
        from notifyctl.producers.kinesis import KinesisProducer

        return KinesisProducer(settings.kinesis.region, settings.kinesis.stream)
    msg = f"Unknown broker type: {broker}"
    raise ValueError(msg)
