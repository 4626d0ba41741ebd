"""Command: verify the selected broker is reachable."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notifyctl.commands._base import NotifyCommand
from notifyctl.services.result import ServiceResult

if TYPE_CHECKING:
    from notifyctl.commands._context import AppContext


@click.command(
    cls=NotifyCommand,
    examples="""\
  notifyctl ping
  notifyctl --broker kinesis --aws-region eu-west-1 ping
  notifyctl --kafka-brokers k1:9092,k2:9092 ping""",
)
@click.pass_obj
def ping(app: AppContext) -> None:
    """Create the producer for the selected broker and report where it writes."""
    producer = app.producer
    app.emit(
        ServiceResult(
            ok=True,
            op="ping",
            data={"broker": producer.backend, "destination": producer.destination},
        )
    )
