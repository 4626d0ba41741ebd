"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs (CLI flags passed by Click)
  2. Env vars (``NOTIFYCTL_*`` prefix, ``__`` for nested sections)
  3. TOML file (``notifyctl.toml`` discovered via walk-up)
  4. Code defaults baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`notifyctl.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsError

from notifyctl.config.discovery import find_config
from notifyctl.config.models import KafkaConfig, KinesisConfig, split_brokers
from notifyctl.domain.types import BrokerType


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``notifyctl.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class NotifySettings(BaseSettings):
    """Unified settings for the notifyctl CLI.

    Stored on the :class:`~notifyctl.commands._context.AppContext` created
    by the root CLI group.

    Attributes:
        broker: Which transport the producer talks to.
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "NOTIFYCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    broker: BrokerType = BrokerType.KAFKA

    # --- Output flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    kafka: KafkaConfig = Field(default_factory=KafkaConfig)
    kinesis: KinesisConfig = Field(default_factory=KinesisConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start_dir: Path | None = None,
        broker: str | None = None,
        kafka_brokers: str | None = None,
        kafka_topic: str | None = None,
        aws_region: str | None = None,
        kinesis_stream: str | None = None,
        **cli_flags: Any,
    ) -> NotifySettings:
        """Construct settings from a CLI invocation.

        Discovers ``notifyctl.toml`` via walk-up from *start_dir* (or uses
        an explicit *config_path*). Broker flags left as None fall through
        to env vars, TOML, and defaults; those that are set only override
        their own key inside the ``kafka`` / ``kinesis`` sections.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start_dir)

        overrides: dict[str, Any] = dict(cli_flags)
        if broker is not None:
            overrides["broker"] = broker

        kafka: dict[str, Any] = {}
        if kafka_brokers is not None:
            kafka["brokers"] = split_brokers(kafka_brokers)
        if kafka_topic is not None:
            kafka["topic"] = kafka_topic
        if kafka:
            overrides["kafka"] = kafka

        kinesis: dict[str, Any] = {}
        if aws_region is not None:
            kinesis["region"] = aws_region
        if kinesis_stream is not None:
            kinesis["stream"] = kinesis_stream
        if kinesis:
            overrides["kinesis"] = kinesis

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        except SettingsError as exc:
            raise click.ClickException(f"Invalid settings: {exc}") from exc
        finally:
            _tls.toml_path = None
