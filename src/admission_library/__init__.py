# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Admission control for multi-account model gateways.

Decides whether a credentialed account may currently serve a request
for a given model, based on the account's per-model and pooled quota
rate-limit state.

Public API:
    SchedulabilityGate: Health + rate-limit go/no-go decision
    AdmissionEngine: Model-level rate-limit evaluation
    resolve_quota_scope: Model name -> pooled quota scope
"""

import logging

from .core import (
    Account,
    AdmissionConfig,
    AdmissionError,
    AdmissionResult,
    AdmissionVerdict,
    InvalidTimestampError,
    Platform,
    QuotaScope,
    RateLimitEntry,
    load_admission_config,
)
from .admission import (
    AdmissionEngine,
    LookupHit,
    LookupStrategy,
    ModelKeyStrategy,
    QuotaScopeStrategy,
    SchedulabilityGate,
    normalize_model_name,
    resolve_mapped_model,
    resolve_model_key,
    resolve_quota_scope,
)

# Library logger stays silent unless the host application configures it
logging.getLogger("admission_library").addHandler(logging.NullHandler())

__all__ = [
    "Account",
    "AdmissionConfig",
    "AdmissionError",
    "AdmissionResult",
    "AdmissionVerdict",
    "InvalidTimestampError",
    "Platform",
    "QuotaScope",
    "RateLimitEntry",
    "load_admission_config",
    "AdmissionEngine",
    "LookupHit",
    "LookupStrategy",
    "ModelKeyStrategy",
    "QuotaScopeStrategy",
    "SchedulabilityGate",
    "normalize_model_name",
    "resolve_mapped_model",
    "resolve_model_key",
    "resolve_quota_scope",
]
