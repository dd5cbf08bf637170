# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Error types and logging helpers for the admission library.

Nothing defined here is allowed to escape the admission path: callers
of the evaluator and the gate always get a boolean or a duration back.
The exceptions exist so the strict helpers underneath can report what
went wrong before the admission path logs it and carries on.
"""

from typing import Any, Optional


class AdmissionError(Exception):
    """Base class for admission library errors."""


class InvalidTimestampError(AdmissionError, ValueError):
    """
    Raised when a persisted reset timestamp cannot be parsed.

    Attributes:
        value: The raw value that failed to parse
        key: Rate-limit state key the value was stored under, if known
    """

    def __init__(self, message: str, value: Any = None, key: Optional[str] = None):
        super().__init__(message)
        self.value = value
        self.key = key


def mask_account(account: Any) -> str:
    """
    Render an account for log lines without leaking credentials.

    Uses the numeric id and a truncated display name. Credentials and
    alias tables are never included.

    Args:
        account: Account instance (or None)

    Returns:
        Short identifier such as "#7 (team-a...)"
    """
    if account is None:
        return "<none>"

    account_id = getattr(account, "id", None)
    name = str(getattr(account, "name", None) or "")
    label = f"#{account_id}" if account_id is not None else "#?"
    if not name:
        return label
    if len(name) > 12:
        name = f"{name[:9]}..."
    return f"{label} ({name})"


__all__ = [
    "AdmissionError",
    "InvalidTimestampError",
    "mask_account",
]
