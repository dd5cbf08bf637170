# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Schedulability gate.

Combines the account's general health with model-level admission into
the single go/no-go answer consumed by the account selection loop.
"""

import logging
import time
from typing import Callable, Iterable, List, Optional

from ..core.constants import LIB_LOGGER_NAME
from ..core.errors import mask_account
from ..core.types import Account
from .engine import AdmissionEngine

lib_logger = logging.getLogger(LIB_LOGGER_NAME)

HealthPredicate = Callable[[Account, float], bool]


def default_health_predicate(account: Account, now: float) -> bool:
    """Account-wide health as recorded on the account itself."""
    return account.is_schedulable(now)


class SchedulabilityGate:
    """
    Go/no-go decision for one account and one model.

    Health is checked first; rate-limit admission runs only for healthy
    accounts.
    """

    def __init__(
        self,
        engine: Optional[AdmissionEngine] = None,
        health_predicate: Optional[HealthPredicate] = None,
    ):
        """
        Initialize the gate.

        Args:
            engine: AdmissionEngine to use (a default one is created if None)
            health_predicate: Callable (account, now) -> bool for general
                account health. Defaults to Account.is_schedulable.
        """
        self._engine = engine if engine is not None else AdmissionEngine()
        self._health = health_predicate or default_health_predicate

    @property
    def engine(self) -> AdmissionEngine:
        return self._engine

    def is_schedulable(
        self,
        account: Optional[Account],
        requested_model: str,
        now: Optional[float] = None,
    ) -> bool:
        """
        True if the account is healthy and not rate limited for the model.

        Args:
            account: Candidate account (None is never schedulable)
            requested_model: Model as requested by the caller
            now: Current epoch seconds (defaults to time.time())

        Returns:
            True if the account may serve the request
        """
        if account is None:
            return False

        if now is None:
            now = time.time()

        if not self._health(account, now):
            lib_logger.debug(f"Account {mask_account(account)} is not schedulable")
            return False

        if self._engine.is_rate_limited(account, requested_model, now):
            return False

        return True

    def get_rate_limit_remaining_time(
        self,
        account: Optional[Account],
        requested_model: str,
        now: Optional[float] = None,
    ) -> float:
        """Seconds until the model-level rate limit lifts, 0.0 if none."""
        if account is None:
            return 0.0
        return self._engine.get_remaining_time(account, requested_model, now)

    def filter_schedulable(
        self,
        accounts: Iterable[Optional[Account]],
        requested_model: str,
        now: Optional[float] = None,
    ) -> List[Account]:
        """
        Filter candidates to those passing the gate.

        Input order is preserved; choosing among the survivors is left
        to the caller.
        """
        if now is None:
            now = time.time()
        return [
            account
            for account in accounts
            if self.is_schedulable(account, requested_model, now)
        ]
