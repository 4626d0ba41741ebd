"""Tests for KafkaProducer: confluent-kafka client is mocked."""

from __future__ import annotations

import json
from collections.abc import Generator
from datetime import UTC, datetime
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from confluent_kafka import KafkaError, KafkaException

from notifyctl.domain.notification import Notification
from notifyctl.errors import BrokerConnectionError, TransportError
from notifyctl.producers.base import NotificationProducer
from notifyctl.producers.kafka import KafkaProducer
from tests.conftest import FIXED_ID, FIXED_TIME, fixed_clock, fixed_id


def _acking_client() -> MagicMock:
    """A mock client whose produce() immediately reports successful delivery."""
    client = MagicMock()

    def produce(topic: str, value: bytes | None = None, on_delivery: Any = None, **_: Any) -> None:
        if on_delivery is not None:
            on_delivery(None, MagicMock())

    client.produce.side_effect = produce
    client.flush.return_value = 0
    return client


@pytest.fixture
def client() -> MagicMock:
    return _acking_client()


@pytest.fixture
def create_client(client: MagicMock) -> Generator[MagicMock]:
    with patch("notifyctl.producers.kafka._create_client", return_value=client) as mock_create:
        yield mock_create


@pytest.fixture
def producer(create_client: MagicMock) -> KafkaProducer:
    return KafkaProducer(
        ["k1:9092", "k2:9092"],
        "notifications",
        clock=fixed_clock,
        id_factory=fixed_id,
    )


def _sent_payload(client: MagicMock) -> dict[str, Any]:
    kwargs = client.produce.call_args.kwargs
    return json.loads(kwargs["value"])


class TestConstruction:
    def test_client_config(self, create_client: MagicMock, producer: KafkaProducer) -> None:
        conf = create_client.call_args.args[0]
        assert conf["bootstrap.servers"] == "k1:9092,k2:9092"
        assert conf["acks"] == "1"

    def test_connectivity_probed(self, client: MagicMock, producer: KafkaProducer) -> None:
        client.list_topics.assert_called_once_with(timeout=10.0)

    def test_satisfies_protocol(self, producer: KafkaProducer) -> None:
        assert isinstance(producer, NotificationProducer)
        assert producer.backend == "kafka"
        assert producer.destination == "notifications"
        assert producer.brokers == ["k1:9092", "k2:9092"]

    def test_empty_broker_list(self, create_client: MagicMock) -> None:
        with pytest.raises(BrokerConnectionError) as excinfo:
            KafkaProducer([], "notifications")
        assert excinfo.value.backend == "kafka"
        create_client.assert_not_called()

    def test_blank_broker_entries_ignored(self, create_client: MagicMock) -> None:
        KafkaProducer([" k1:9092 ", ""], "t")
        assert create_client.call_args.args[0]["bootstrap.servers"] == "k1:9092"

    def test_unreachable_brokers(self, client: MagicMock, create_client: MagicMock) -> None:
        cause = KafkaException(KafkaError(KafkaError._TRANSPORT))
        client.list_topics.side_effect = cause
        with pytest.raises(BrokerConnectionError) as excinfo:
            KafkaProducer(["nowhere:9092"], "notifications")
        assert excinfo.value.__cause__ is cause
        assert "failed to create Kafka producer" in str(excinfo.value)

    def test_unreachable_client_discarded_unused(
        self, client: MagicMock, create_client: MagicMock
    ) -> None:
        client.list_topics.side_effect = KafkaException(KafkaError(KafkaError._TRANSPORT))
        with pytest.raises(BrokerConnectionError):
            KafkaProducer(["nowhere:9092"], "notifications")
        client.produce.assert_not_called()
        client.flush.assert_not_called()

    def test_client_construction_failure(self) -> None:
        cause = KafkaException(KafkaError(KafkaError._INVALID_ARG))
        with patch("notifyctl.producers.kafka._create_client", side_effect=cause):
            with pytest.raises(BrokerConnectionError) as excinfo:
                KafkaProducer(["k1:9092"], "notifications")
        assert excinfo.value.__cause__ is cause


class TestSend:
    def test_sends_to_topic_without_key(self, client: MagicMock, producer: KafkaProducer) -> None:
        producer.send(Notification(type="system", title="T", message="M"))
        args, kwargs = client.produce.call_args
        assert args == ("notifications",)
        assert "key" not in kwargs

    def test_blocks_for_ack(self, client: MagicMock, producer: KafkaProducer) -> None:
        producer.send(Notification(title="T"))
        client.flush.assert_called_once_with(30.0)

    def test_defaults_filled_before_serialization(
        self, client: MagicMock, producer: KafkaProducer
    ) -> None:
        sent = producer.send(Notification(type="system", title="T", message="M"))
        payload = _sent_payload(client)
        assert payload["id"] == FIXED_ID
        assert payload["timestamp"] == "2024-06-01T12:30:00Z"
        assert sent.id == FIXED_ID
        assert sent.timestamp == FIXED_TIME

    def test_preset_values_preserved(self, client: MagicMock, producer: KafkaProducer) -> None:
        preset = datetime(2021, 5, 4, 3, 2, 1, tzinfo=UTC)
        producer.send(Notification(id="caller-id", timestamp=preset))
        payload = _sent_payload(client)
        assert payload["id"] == "caller-id"
        assert datetime.fromisoformat(payload["timestamp"]) == preset

    def test_payload_round_trips(self, client: MagicMock, producer: KafkaProducer) -> None:
        sent = producer.send(Notification(type="marketing", title="T", targets=["a", "b"]))
        raw = client.produce.call_args.kwargs["value"]
        assert Notification.from_wire(raw) == sent

    def test_delivery_error(self, client: MagicMock, producer: KafkaProducer) -> None:
        def produce(topic: str, value: bytes | None = None, on_delivery: Any = None) -> None:
            on_delivery(KafkaError(KafkaError._MSG_TIMED_OUT), MagicMock())

        client.produce.side_effect = produce
        with pytest.raises(TransportError) as excinfo:
            producer.send(Notification(title="T"))
        assert excinfo.value.backend == "kafka"
        assert isinstance(excinfo.value.__cause__, KafkaException)

    def test_produce_raises(self, client: MagicMock, producer: KafkaProducer) -> None:
        cause = BufferError("Local: Queue full")
        client.produce.side_effect = cause
        with pytest.raises(TransportError) as excinfo:
            producer.send(Notification(title="T"))
        assert excinfo.value.__cause__ is cause

    def test_no_ack_within_timeout(self, client: MagicMock, producer: KafkaProducer) -> None:
        client.produce.side_effect = None
        client.flush.return_value = 1
        with pytest.raises(TransportError, match="no broker ack"):
            producer.send(Notification(title="T"))

    def test_send_after_close(self, client: MagicMock, producer: KafkaProducer) -> None:
        producer.close()
        with pytest.raises(TransportError, match="closed"):
            producer.send(Notification(title="T"))
        client.produce.assert_not_called()


class TestClose:
    def test_flushes(self, client: MagicMock, producer: KafkaProducer) -> None:
        producer.close()
        client.flush.assert_called_once_with(30.0)
        assert producer.closed is True

    def test_second_close_is_noop(self, client: MagicMock, producer: KafkaProducer) -> None:
        producer.close()
        producer.close()
        assert client.flush.call_count == 1

    def test_undelivered_on_close_does_not_raise(
        self, client: MagicMock, producer: KafkaProducer
    ) -> None:
        client.flush.return_value = 3
        producer.close()
