"""KinesisProducer: notification producer over a boto3 Kinesis client.

The notification ID doubles as the partition key, so successive
notifications spread across shards with no ordering guarantee.
"""

from __future__ import annotations

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from notifyctl.domain.ids import Clock, IdFactory, time_ns_id, utc_now
from notifyctl.domain.notification import Notification
from notifyctl.domain.types import BrokerType
from notifyctl.errors import BrokerConnectionError, TransportError
from notifyctl.producers.base import BaseProducer

logger = logging.getLogger(__name__)


def _create_session(region: str) -> boto3.session.Session:
    """Build a boto3 session pinned to *region*."""
    return boto3.session.Session(region_name=region)


class KinesisProducer(BaseProducer):
    """Puts notifications onto a Kinesis data stream, one record per send."""

    backend = BrokerType.KINESIS.value

    def __init__(
        self,
        region: str,
        stream_name: str,
        *,
        clock: Clock = utc_now,
        id_factory: IdFactory = time_ns_id,
    ) -> None:
        super().__init__(clock=clock, id_factory=id_factory)
        self._region = region
        self._stream_name = stream_name
        try:
            session = _create_session(region)
            if session.get_credentials() is None:
                raise BrokerConnectionError(
                    "failed to create AWS session: no credentials found",
                    backend=self.backend,
                )
            self._client: Any = session.client("kinesis")
        except BotoCoreError as exc:
            raise BrokerConnectionError(
                f"failed to create AWS session: {exc}", backend=self.backend
            ) from exc
        logger.debug("Created Kinesis client (region=%s, stream=%s)", region, stream_name)

    @property
    def destination(self) -> str:
        return self._stream_name

    @property
    def region(self) -> str:
        return self._region

    def _transmit(self, notification: Notification, payload: bytes) -> None:
        try:
            self._client.put_record(
                StreamName=self._stream_name,
                Data=payload,
                PartitionKey=notification.id,
            )
        except (ClientError, BotoCoreError) as exc:
            raise TransportError(
                f"failed to put record to Kinesis: {exc}", backend=self.backend
            ) from exc

    def _release(self) -> None:
        # boto3 pools its own connections; nothing to tear down.
        return None
