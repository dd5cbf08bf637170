# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Core package for the admission library.

Provides shared infrastructure used by the evaluator and the gate:
- types: Account, rate-limit entries and admission results
- errors: Custom exceptions and log helpers
- config: AdmissionConfig and its loader
- constants: Platform tags, scope names and persisted key names
- timestamps: Reset timestamp parsing (fail open)
"""

from .types import (
    Account,
    AdmissionResult,
    AdmissionVerdict,
    Platform,
    QuotaScope,
    RateLimitEntry,
)

from .errors import (
    AdmissionError,
    InvalidTimestampError,
    mask_account,
)

from .config import AdmissionConfig, load_admission_config

from .timestamps import format_timestamp, parse_timestamp, parse_timestamp_lenient

__all__ = [
    # Types
    "Account",
    "AdmissionResult",
    "AdmissionVerdict",
    "Platform",
    "QuotaScope",
    "RateLimitEntry",
    # Errors
    "AdmissionError",
    "InvalidTimestampError",
    "mask_account",
    # Config
    "AdmissionConfig",
    "load_admission_config",
    # Timestamps
    "format_timestamp",
    "parse_timestamp",
    "parse_timestamp_lenient",
]
