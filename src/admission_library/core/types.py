# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Type definitions for the admission library.

The account record is owned by the gateway; only the fields that matter
for admission are modelled here. Rate-limit state is read, never
written.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from .constants import (
    ACCOUNT_STATUS_ACTIVE,
    LIB_LOGGER_NAME,
    MODEL_MAPPING_KEY,
    MODEL_RATE_LIMITS_KEY,
    PLATFORM_ANTHROPIC,
    PLATFORM_ANTIGRAVITY,
    PLATFORM_GEMINI,
    PLATFORM_OPENAI,
    RATE_LIMIT_RESET_AT_KEY,
    RATE_LIMITED_AT_KEY,
    SCOPE_CLAUDE,
    SCOPE_GEMINI_IMAGE,
    SCOPE_GEMINI_TEXT,
)
from .errors import mask_account
from .timestamps import format_timestamp, parse_timestamp_lenient

lib_logger = logging.getLogger(LIB_LOGGER_NAME)

TimestampValue = Union[str, float, int, datetime, None]


# =============================================================================
# ENUMS
# =============================================================================


class Platform(str, Enum):
    """Upstream provider integration style of an account."""

    ANTHROPIC = PLATFORM_ANTHROPIC
    OPENAI = PLATFORM_OPENAI
    GEMINI = PLATFORM_GEMINI
    ANTIGRAVITY = PLATFORM_ANTIGRAVITY  # Pools quota per model family


class QuotaScope(str, Enum):
    """Pooled quota bucket shared by a model family."""

    CLAUDE = SCOPE_CLAUDE
    GEMINI_TEXT = SCOPE_GEMINI_TEXT
    GEMINI_IMAGE = SCOPE_GEMINI_IMAGE


class AdmissionVerdict(str, Enum):
    """Outcome of an admission check."""

    ALLOWED = "allowed"
    BLOCKED_MODEL = "blocked_model"  # Per-model (alias-resolved) key hit
    BLOCKED_SCOPE = "blocked_scope"  # Pooled quota scope key hit


# =============================================================================
# RATE LIMIT STATE
# =============================================================================


@dataclass(frozen=True)
class RateLimitEntry:
    """
    A single model or scope rate limit.

    Only ``reset_at`` takes part in admission. A reset time in the past
    is the same as no entry at all.
    """

    reset_at: TimestampValue = None
    rate_limited_at: TimestampValue = None  # Informational only

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RateLimitEntry":
        """Create from the persisted ``{"rate_limit_reset_at": ...}`` shape."""
        return cls(
            reset_at=data.get(RATE_LIMIT_RESET_AT_KEY),
            rate_limited_at=data.get(RATE_LIMITED_AT_KEY),
        )

    def reset_epoch(
        self, key: Optional[str] = None, account: Optional["Account"] = None
    ) -> Optional[float]:
        """
        Reset time as epoch seconds.

        Unparseable values are logged and reported as None (fail open).
        """
        return parse_timestamp_lenient(self.reset_at, key=key, account=account)


# =============================================================================
# ACCOUNT
# =============================================================================


@dataclass
class Account:
    """
    The subset of a gateway account used for admission.

    ``model_mapping`` is the alias table (requested -> canonical model),
    ``model_rate_limits`` the rate-limit state keyed by canonical model
    id or quota scope name.
    """

    id: Optional[int] = None
    name: str = ""
    platform: Union[Platform, str] = Platform.ANTHROPIC
    status: str = ACCOUNT_STATUS_ACTIVE
    schedulable: bool = True

    model_mapping: Optional[Dict[str, str]] = None
    model_rate_limits: Dict[str, RateLimitEntry] = field(default_factory=dict)

    # Account-wide health windows
    overload_until: TimestampValue = None
    temp_unschedulable_until: TimestampValue = None

    @property
    def platform_name(self) -> str:
        """Platform tag as a plain string."""
        if isinstance(self.platform, Platform):
            return self.platform.value
        return str(self.platform or "")

    def get_rate_limit_entry(self, key: str) -> Optional[RateLimitEntry]:
        """Exact-key lookup in the rate-limit state."""
        if not self.model_rate_limits:
            return None
        return self.model_rate_limits.get(key)

    def is_schedulable(self, now: Optional[float] = None) -> bool:
        """
        General health predicate, independent of model rate limits.

        An account is healthy when it is active, flagged schedulable and
        not inside an overload or temporary-unschedulable window.
        """
        if self.status != ACCOUNT_STATUS_ACTIVE or not self.schedulable:
            return False

        if now is None:
            now = time.time()

        for label, value in (
            ("overload_until", self.overload_until),
            ("temp_unschedulable_until", self.temp_unschedulable_until),
        ):
            until = parse_timestamp_lenient(value, key=label, account=self)
            if until is not None and until > now:
                return False

        return True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Account":
        """
        Build an account from the gateway's persisted record.

        Alias table comes from ``credentials.model_mapping`` and the
        rate-limit state from ``extra.model_rate_limits``. Sections with
        the wrong shape are skipped with a warning.
        """
        raw_platform = data.get("platform") or ""
        try:
            platform: Union[Platform, str] = Platform(str(raw_platform).lower())
        except ValueError:
            platform = str(raw_platform)

        account = cls(
            id=data.get("id"),
            name=str(data.get("name") or ""),
            platform=platform,
            status=data.get("status") or ACCOUNT_STATUS_ACTIVE,
            schedulable=_flag(data.get("schedulable"), default=True),
            overload_until=data.get("overload_until"),
            temp_unschedulable_until=data.get("temp_unschedulable_until"),
        )

        credentials = data.get("credentials") or {}
        raw_mapping = (
            credentials.get(MODEL_MAPPING_KEY) if isinstance(credentials, Mapping) else None
        )
        if raw_mapping is not None:
            if isinstance(raw_mapping, Mapping):
                account.model_mapping = {
                    str(k): v for k, v in raw_mapping.items() if isinstance(v, str)
                }
            else:
                lib_logger.warning(
                    f"Ignoring non-mapping {MODEL_MAPPING_KEY} on {mask_account(account)}"
                )

        extra = data.get("extra") or {}
        raw_limits = extra.get(MODEL_RATE_LIMITS_KEY) if isinstance(extra, Mapping) else None
        if raw_limits is not None:
            if isinstance(raw_limits, Mapping):
                for key, raw_entry in raw_limits.items():
                    if not isinstance(raw_entry, Mapping):
                        lib_logger.warning(
                            f"Ignoring malformed rate limit entry '{key}' on {mask_account(account)}"
                        )
                        continue
                    account.model_rate_limits[str(key)] = RateLimitEntry.from_dict(
                        raw_entry
                    )
            else:
                lib_logger.warning(
                    f"Ignoring non-mapping {MODEL_RATE_LIMITS_KEY} on {mask_account(account)}"
                )

        return account


def _flag(value: Any, default: bool) -> bool:
    """Persisted boolean flag; null or missing means the default."""
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


# =============================================================================
# ADMISSION RESULT
# =============================================================================


@dataclass
class AdmissionResult:
    """
    Result of evaluating one account for one model.

    Used by AdmissionEngine to report why an account was blocked.
    """

    allowed: bool
    verdict: AdmissionVerdict = AdmissionVerdict.ALLOWED
    strategy: Optional[str] = None  # Name of the lookup strategy that hit
    matched_key: Optional[str] = None  # Rate-limit state key that hit
    blocked_until: Optional[float] = None
    remaining_seconds: float = 0.0

    @property
    def reason(self) -> Optional[str]:
        """Human readable block reason, rendered on access."""
        if self.allowed:
            return None
        return (
            f"Rate limit on '{self.matched_key}' until {format_timestamp(self.blocked_until)} "
            f"(expires in {self.remaining_seconds:.0f}s)"
        )

    @classmethod
    def ok(cls) -> "AdmissionResult":
        """Create an allowed result."""
        return cls(allowed=True)

    @classmethod
    def blocked(
        cls,
        verdict: AdmissionVerdict,
        strategy: str,
        matched_key: str,
        blocked_until: float,
        now: float,
    ) -> "AdmissionResult":
        """Create a blocked result."""
        return cls(
            allowed=False,
            verdict=verdict,
            strategy=strategy,
            matched_key=matched_key,
            blocked_until=blocked_until,
            remaining_seconds=max(0.0, blocked_until - now),
        )
