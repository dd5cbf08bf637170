# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

from .base import LookupHit, LookupStrategy
from .model_key import ModelKeyStrategy
from .quota_scope import QuotaScopeStrategy

__all__ = [
    "LookupHit",
    "LookupStrategy",
    "ModelKeyStrategy",
    "QuotaScopeStrategy",
]
