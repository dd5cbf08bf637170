# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Base interface for rate-limit lookup strategies.

A strategy turns (account, requested model) into at most one key in the
account's rate-limit state. The engine runs strategies in priority order
and stops at the first key whose entry has not expired.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.types import Account, AdmissionVerdict, RateLimitEntry


@dataclass(frozen=True)
class LookupHit:
    """A rate-limit state entry found by a strategy."""

    key: str
    entry: RateLimitEntry


class LookupStrategy(ABC):
    """
    Abstract base class for lookup strategies.

    Implementations must be pure: no writes to the account, no caching
    of its state between calls.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this strategy."""
        ...

    @property
    @abstractmethod
    def verdict(self) -> AdmissionVerdict:
        """Verdict reported when this strategy blocks an account."""
        ...

    @abstractmethod
    def resolve_key(self, account: Account, requested_model: str) -> Optional[str]:
        """
        Compute the rate-limit state key to probe.

        Args:
            account: Account being evaluated
            requested_model: Model as requested by the caller

        Returns:
            Key to probe, or None if this strategy does not apply
        """
        ...

    def lookup(self, account: Account, requested_model: str) -> Optional[LookupHit]:
        """
        Probe the account's rate-limit state by exact key.

        Expiry is not checked here; the engine owns the clock.

        Args:
            account: Account being evaluated
            requested_model: Model as requested by the caller

        Returns:
            LookupHit if an entry exists under the resolved key
        """
        key = self.resolve_key(account, requested_model)
        if not key:
            return None
        entry = account.get_rate_limit_entry(key)
        if entry is None:
            return None
        return LookupHit(key=key, entry=entry)
