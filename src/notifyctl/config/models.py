"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, notifyctl.toml only contains
overrides. A Kafka setup on localhost needs no config file at all.
"""

from __future__ import annotations

import json
from typing import Annotated, Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import NoDecode


def split_brokers(value: str) -> list[str]:
    """Split a comma-separated broker list, dropping blanks."""
    return [part.strip() for part in value.split(",") if part.strip()]


class KafkaConfig(BaseModel):
    """[kafka] section."""

    model_config = {"frozen": True}

    # Env values arrive undecoded so the validator sees comma lists too.
    brokers: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["localhost:9092"])
    topic: str = "notifications"
    acks: str = "1"
    connect_timeout: float = 10.0
    delivery_timeout: float = 30.0

    @field_validator("brokers", mode="before")
    @classmethod
    def _split_comma_list(cls, value: Any) -> Any:
        if isinstance(value, str):
            if value.lstrip().startswith("["):
                return json.loads(value)
            return split_brokers(value)
        return value


class KinesisConfig(BaseModel):
    """[kinesis] section."""

    model_config = {"frozen": True}

    region: str = "us-east-1"
    stream: str = "notifications"
