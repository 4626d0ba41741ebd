"""Shared pytest fixtures and test helpers for notifyctl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from datetime import UTC, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from notifyctl.domain.notification import Notification, prepare_for_send

FIXED_TIME = datetime(2024, 6, 1, 12, 30, 0, tzinfo=UTC)
FIXED_ID = "1717245000000000000"


def fixed_clock() -> datetime:
    return FIXED_TIME


def fixed_id() -> str:
    return FIXED_ID


class RecordingProducer:
    """In-memory producer that records what it was asked to send.

    Normalizes with the fixed clock/ID so assertions are deterministic.
    Set ``error`` to make every ``send`` raise it.
    """

    backend = "fake"
    destination = "fake-topic"

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.sent: list[Notification] = []
        self.close_calls = 0

    def send(self, notification: Notification) -> Notification:
        if self.error is not None:
            raise self.error
        prepared = prepare_for_send(notification, clock=fixed_clock, id_factory=fixed_id)
        self.sent.append(prepared)
        return prepared

    def close(self) -> None:
        self.close_calls += 1


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def recording_producer() -> RecordingProducer:
    return RecordingProducer()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no NOTIFYCTL_* env vars.

    Keeps a developer's own notifyctl.toml or environment from leaking
    into settings resolution.
    """
    for key in list(os.environ):
        if key.startswith("NOTIFYCTL_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    notify = logging.getLogger("notifyctl")
    notify_level = notify.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    notify.setLevel(notify_level)
