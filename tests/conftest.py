"""Pytest configuration and fixtures for admission tests."""

from typing import Any, Dict, Optional

import pytest

from admission_library import (
    Account,
    AdmissionEngine,
    SchedulabilityGate,
    load_admission_config,
)
from admission_library.core.timestamps import format_timestamp

NOW = 1_760_000_000.0
MINUTE = 60.0


def rfc3339(offset_seconds: float) -> str:
    """RFC 3339 timestamp relative to NOW, as the gateway persists it."""
    return format_timestamp(NOW + offset_seconds)


def make_account(
    platform: str = "anthropic",
    limits: Optional[Dict[str, Any]] = None,
    mapping: Optional[Dict[str, str]] = None,
    **fields: Any,
) -> Account:
    """
    Build an account from the persisted record shape.

    ``limits`` maps state keys to an offset from NOW in seconds, or to a
    raw ``rate_limit_reset_at`` value when given as a string.
    """
    record: Dict[str, Any] = {"id": 1, "name": "test", "platform": platform}
    record.update(fields)
    if mapping is not None:
        record["credentials"] = {"model_mapping": mapping}
    if limits is not None:
        record["extra"] = {
            "model_rate_limits": {
                key: {
                    "rate_limit_reset_at": (
                        value if isinstance(value, str) else rfc3339(value)
                    )
                }
                for key, value in limits.items()
            }
        }
    return Account.from_dict(record)


@pytest.fixture
def config(monkeypatch):
    """Default config, isolated from the host environment."""
    monkeypatch.delenv("ADMISSION_POOLED_PLATFORMS", raising=False)
    monkeypatch.delenv("ADMISSION_MODEL_NAMESPACE_PREFIX", raising=False)
    return load_admission_config()


@pytest.fixture
def engine(config):
    return AdmissionEngine(config)


@pytest.fixture
def gate(engine):
    return SchedulabilityGate(engine)
