"""Default clock and ID generator for outgoing notifications.

Producers take both as injected callables so tests can pin them.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def time_ns_id() -> str:
    """Return a nanosecond-resolution timestamp as a decimal string."""
    return str(time.time_ns())
