"""Exception hierarchy for notifyctl.

Two failure kinds cross the producer boundary:

- :class:`BrokerConnectionError`: a producer could not be constructed.
- :class:`TransportError`: a single send failed (serialization or the
  transport call itself).

Both are always raised ``from`` the underlying client exception so the
original cause stays available on ``__cause__``.
"""

from __future__ import annotations


class NotifyError(Exception):
    """Base class for all notifyctl errors."""

    def __init__(self, message: str, *, backend: str | None = None) -> None:
        super().__init__(message)
        self.backend = backend


class BrokerConnectionError(NotifyError):
    """The producer could not establish contact with its transport."""


class TransportError(NotifyError):
    """An individual send failed."""
