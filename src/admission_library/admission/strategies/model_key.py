# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Per-model lookup.

Probes the rate-limit state by the alias-resolved model id. Applies to
every platform.
"""

from typing import Optional

from ...core.types import Account, AdmissionVerdict
from ..aliases import resolve_mapped_model
from .base import LookupStrategy


class ModelKeyStrategy(LookupStrategy):
    """Looks up the canonical (alias-resolved) model id."""

    @property
    def name(self) -> str:
        return "model_key"

    @property
    def verdict(self) -> AdmissionVerdict:
        return AdmissionVerdict.BLOCKED_MODEL

    def resolve_key(self, account: Account, requested_model: str) -> Optional[str]:
        return resolve_mapped_model(account, requested_model) or None
