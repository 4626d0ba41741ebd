"""KafkaProducer: synchronous notification producer over confluent-kafka.

Each ``send`` produces one message to the configured topic and blocks on
``flush()`` until the broker acknowledges it (or the delivery timeout
expires). Messages carry no key, so the client's default partitioner
decides placement.
"""

from __future__ import annotations

import logging
from typing import Any

from confluent_kafka import KafkaError, KafkaException, Message, Producer

from notifyctl.domain.ids import Clock, IdFactory, time_ns_id, utc_now
from notifyctl.domain.notification import Notification
from notifyctl.domain.types import BrokerType
from notifyctl.errors import BrokerConnectionError, TransportError
from notifyctl.producers.base import BaseProducer

logger = logging.getLogger(__name__)


def _create_client(conf: dict[str, Any]) -> Producer:
    """Build the underlying confluent-kafka producer."""
    return Producer(conf)


class KafkaProducer(BaseProducer):
    """Sends notifications to a Kafka topic and waits for the broker ack."""

    backend = BrokerType.KAFKA.value

    def __init__(
        self,
        brokers: list[str],
        topic: str,
        *,
        acks: str = "1",
        connect_timeout: float = 10.0,
        delivery_timeout: float = 30.0,
        clock: Clock = utc_now,
        id_factory: IdFactory = time_ns_id,
    ) -> None:
        super().__init__(clock=clock, id_factory=id_factory)
        brokers = [b.strip() for b in brokers if b.strip()]
        if not brokers:
            raise BrokerConnectionError(
                "failed to create Kafka producer: no broker addresses given",
                backend=self.backend,
            )
        self._brokers = brokers
        self._topic = topic
        self._delivery_timeout = delivery_timeout

        conf = {
            "bootstrap.servers": ",".join(brokers),
            "acks": acks,
        }
        try:
            client = _create_client(conf)
            # Metadata round-trip proves at least one broker is reachable.
            client.list_topics(timeout=connect_timeout)
        except KafkaException as exc:
            # Nothing has been produced yet, so an unreachable client has
            # no queued messages to flush; it is simply discarded.
            raise BrokerConnectionError(
                f"failed to create Kafka producer: {exc}", backend=self.backend
            ) from exc
        self._client = client
        logger.debug(
            "Connected to Kafka brokers %s (topic=%s)", conf["bootstrap.servers"], topic
        )

    @property
    def destination(self) -> str:
        return self._topic

    @property
    def brokers(self) -> list[str]:
        return list(self._brokers)

    def _transmit(self, notification: Notification, payload: bytes) -> None:
        failures: list[KafkaError] = []

        def on_delivery(err: KafkaError | None, _msg: Message) -> None:
            if err is not None:
                failures.append(err)

        try:
            self._client.produce(self._topic, value=payload, on_delivery=on_delivery)
            remaining = self._client.flush(self._delivery_timeout)
        except (KafkaException, BufferError) as exc:
            raise TransportError(f"failed to send message: {exc}", backend=self.backend) from exc

        if failures:
            err = failures[0]
            raise TransportError(
                f"failed to send message: {err}", backend=self.backend
            ) from KafkaException(err)
        if remaining:
            raise TransportError(
                f"failed to send message: no broker ack within {self._delivery_timeout}s",
                backend=self.backend,
            )

    def _release(self) -> None:
        remaining = self._client.flush(self._delivery_timeout)
        if remaining:
            logger.warning("Kafka producer closed with %d undelivered message(s)", remaining)
