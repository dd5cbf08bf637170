# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Pooled quota scope lookup.

Only accounts on pooling platforms consult this strategy. The scope is
always derived from the requested model as given, without alias
resolution.
"""

from typing import Optional

from ...core.config import AdmissionConfig
from ...core.types import Account, AdmissionVerdict
from ..scope import resolve_model_key
from .base import LookupStrategy


class QuotaScopeStrategy(LookupStrategy):
    """Looks up the quota scope shared by the requested model's family."""

    def __init__(self, config: AdmissionConfig):
        self._config = config

    @property
    def name(self) -> str:
        return "quota_scope"

    @property
    def verdict(self) -> AdmissionVerdict:
        return AdmissionVerdict.BLOCKED_SCOPE

    def resolve_key(self, account: Account, requested_model: str) -> Optional[str]:
        if not self._config.is_pooled_platform(account.platform_name):
            return None
        return (
            resolve_model_key(requested_model, self._config.model_namespace_prefix)
            or None
        )
