# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Account model alias resolution.

An account may map the model a caller asks for to the model id the
upstream actually serves (and that its per-model rate limits are keyed
by). The alias table itself is maintained elsewhere.
"""

from typing import Optional

from ..core.types import Account


def resolve_mapped_model(account: Optional[Account], requested_model: str) -> str:
    """
    Resolve the canonical model id for a requested model.

    Surrounding whitespace is stripped; case is preserved because
    per-model state keys are stored exactly as the upstream reports
    them. Identity when the account has no mapping or no entry.

    Args:
        account: Account whose alias table to consult
        requested_model: Caller-facing model id

    Returns:
        Canonical model id
    """
    model = (requested_model or "").strip()
    if account is None or not account.model_mapping or not model:
        return model

    mapped = account.model_mapping.get(model)
    if isinstance(mapped, str) and mapped.strip():
        return mapped.strip()
    return model
