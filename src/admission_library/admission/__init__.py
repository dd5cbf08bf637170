# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""Model-level rate-limit admission."""

from .scope import (
    is_image_generation_model,
    normalize_model_name,
    resolve_model_key,
    resolve_quota_scope,
)
from .aliases import resolve_mapped_model
from .strategies import LookupHit, LookupStrategy, ModelKeyStrategy, QuotaScopeStrategy
from .engine import AdmissionEngine
from .gate import SchedulabilityGate, default_health_predicate

__all__ = [
    "is_image_generation_model",
    "normalize_model_name",
    "resolve_model_key",
    "resolve_quota_scope",
    "resolve_mapped_model",
    "LookupHit",
    "LookupStrategy",
    "ModelKeyStrategy",
    "QuotaScopeStrategy",
    "AdmissionEngine",
    "SchedulabilityGate",
    "default_health_predicate",
]
