"""Command outcomes handed to the output layer.

NotificationService raises on failure. Each command turns the sent
notification, a TransportError, or a BrokerConnectionError into one
ServiceResult, which ``AppContext.emit`` renders and maps to an exit code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why a command failed.

    ``code`` is ``CONNECTION_ERROR`` or ``TRANSPORT_ERROR``; ``detail``
    names the broker and, for send failures, the underlying client error.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one command.

    Attributes:
        ok: False means the command exits with status 1.
        op: Operation name, e.g. ``"broadcast_system_announcement"``.
        data: Broker, destination, and the notification(s) that went out.
        warnings: Sends that failed without aborting the command (``demo``).
        error: Set when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
