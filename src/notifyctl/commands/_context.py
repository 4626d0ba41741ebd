"""AppContext: shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy producer construction, a single
close at shutdown, and centralized result emission (stdout/stderr
routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click
import structlog

from notifyctl.errors import BrokerConnectionError, TransportError
from notifyctl.output.formatters import OutputSettings, format_result
from notifyctl.producers import create_producer
from notifyctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from notifyctl.config.settings import NotifySettings
    from notifyctl.domain.notification import Notification
    from notifyctl.producers.base import BaseProducer
    from notifyctl.services.notification import NotificationService

log = structlog.get_logger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The producer is created lazily on first use so ``--help`` and
    ``--version`` never touch the network.
    """

    def __init__(self, settings: NotifySettings) -> None:
        self.settings = settings
        self._producer: BaseProducer | None = None

        from notifyctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def producer(self) -> BaseProducer:
        """The selected producer (created on first access).

        A construction failure is fatal: it is logged, reported on stderr,
        and the process exits with status 1.
        """
        if self._producer is None:
            try:
                self._producer = create_producer(self.settings)
            except BrokerConnectionError as exc:
                log.error(
                    "producer.create_failed",
                    broker=self.settings.broker.value,
                    error=str(exc),
                )
                self.emit(
                    ServiceResult(
                        ok=False,
                        op="connect",
                        error=ServiceError(
                            code="CONNECTION_ERROR",
                            message=str(exc),
                            detail={"broker": self.settings.broker.value},
                        ),
                    )
                )
        assert self._producer is not None
        return self._producer

    @property
    def service(self) -> NotificationService:
        from notifyctl.services.notification import NotificationService

        return NotificationService(self.producer)

    def close(self) -> None:
        """Close the producer if one was created. Safe to call repeatedly."""
        producer, self._producer = self._producer, None
        if producer is not None:
            producer.close()

    def sent_result(self, op: str, notification: Notification) -> ServiceResult:
        """Build the success result for one delivered notification."""
        producer = self.producer
        data: dict[str, Any] = {
            "broker": producer.backend,
            "destination": producer.destination,
            **notification.model_dump(mode="json"),
        }
        return ServiceResult(ok=True, op=op, data=data)

    def failed_result(self, op: str, exc: TransportError) -> ServiceResult:
        """Build the failure result for one send, logging the cause."""
        log.error(
            "notification.send_failed",
            op=op,
            broker=exc.backend,
            error=str(exc),
        )
        detail: dict[str, Any] = {"broker": exc.backend}
        if exc.__cause__ is not None:
            detail["cause"] = repr(exc.__cause__)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code="TRANSPORT_ERROR", message=str(exc), detail=detail),
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
