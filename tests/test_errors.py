"""Tests for the notifyctl exception hierarchy."""

import pytest

from notifyctl.errors import BrokerConnectionError, NotifyError, TransportError


@pytest.mark.parametrize("error_cls", [BrokerConnectionError, TransportError])
def test_subclasses_notify_error(error_cls: type[NotifyError]) -> None:
    assert issubclass(error_cls, NotifyError)


def test_message_and_backend() -> None:
    exc = TransportError("failed to send message: broker down", backend="kafka")
    assert str(exc) == "failed to send message: broker down"
    assert exc.backend == "kafka"


def test_backend_optional() -> None:
    assert BrokerConnectionError("no credentials").backend is None
