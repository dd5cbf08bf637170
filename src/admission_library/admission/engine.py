# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Admission engine for model-level rate limits.

Central component that runs the lookup strategies against an account's
rate-limit state and decides whether the account may serve a model.
"""

import logging
import time
from typing import Dict, List, Optional

from ..core.config import AdmissionConfig, load_admission_config
from ..core.constants import LIB_LOGGER_NAME
from ..core.errors import mask_account
from ..core.types import Account, AdmissionResult
from .strategies import LookupStrategy, ModelKeyStrategy, QuotaScopeStrategy

lib_logger = logging.getLogger(LIB_LOGGER_NAME)


class AdmissionEngine:
    """
    Decides whether an account is rate limited for a model.

    Stateless apart from its configuration and strategy list, so one
    engine can be shared by every thread evaluating candidates. The
    account's rate-limit state is read at call time and never cached.
    """

    def __init__(self, config: Optional[AdmissionConfig] = None):
        """
        Initialize admission engine.

        Args:
            config: Admission configuration. Loaded from defaults and
                environment when omitted.
        """
        self._config = config if config is not None else load_admission_config()

        # Order matters: the per-model key is probed before the pooled scope
        self._strategies: List[LookupStrategy] = [
            ModelKeyStrategy(),
            QuotaScopeStrategy(self._config),
        ]

    @property
    def config(self) -> AdmissionConfig:
        return self._config

    @property
    def strategies(self) -> List[LookupStrategy]:
        """Strategies in evaluation order (copy)."""
        return list(self._strategies)

    def evaluate(
        self,
        account: Optional[Account],
        requested_model: str,
        now: Optional[float] = None,
    ) -> AdmissionResult:
        """
        Evaluate an account for a requested model.

        Runs strategies in order and returns the first unexpired hit.
        Missing accounts, empty models, missing entries and unparseable
        reset times all evaluate as allowed.

        Args:
            account: Account to check (may be None)
            requested_model: Model as requested by the caller
            now: Current epoch seconds (defaults to time.time())

        Returns:
            AdmissionResult describing the decision
        """
        if account is None or not requested_model:
            return AdmissionResult.ok()

        if now is None:
            now = time.time()

        for strategy in self._strategies:
            result = self._check_strategy(strategy, account, requested_model, now)
            if not result.allowed:
                if lib_logger.isEnabledFor(logging.DEBUG):
                    lib_logger.debug(
                        f"Account {mask_account(account)} blocked for '{requested_model}' "
                        f"by {strategy.name}: {result.reason}"
                    )
                return result

        return AdmissionResult.ok()

    def is_rate_limited(
        self,
        account: Optional[Account],
        requested_model: str,
        now: Optional[float] = None,
    ) -> bool:
        """True if the account is currently rate limited for the model."""
        return not self.evaluate(account, requested_model, now).allowed

    def get_remaining_time(
        self,
        account: Optional[Account],
        requested_model: str,
        now: Optional[float] = None,
    ) -> float:
        """
        Seconds until the account is no longer rate limited for the model.

        Returns:
            Remaining seconds, 0.0 if not limited
        """
        return self.evaluate(account, requested_model, now).remaining_seconds

    def get_blocking_info(
        self,
        account: Optional[Account],
        requested_model: str,
        now: Optional[float] = None,
    ) -> Dict[str, AdmissionResult]:
        """
        Get the result of every strategy, without short-circuiting.

        Useful for debugging and status reporting.

        Returns:
            Dict mapping strategy name to its result
        """
        results: Dict[str, AdmissionResult] = {}
        if account is None or not requested_model:
            for strategy in self._strategies:
                results[strategy.name] = AdmissionResult.ok()
            return results

        if now is None:
            now = time.time()

        for strategy in self._strategies:
            results[strategy.name] = self._check_strategy(
                strategy, account, requested_model, now
            )
        return results

    def _check_strategy(
        self,
        strategy: LookupStrategy,
        account: Account,
        requested_model: str,
        now: float,
    ) -> AdmissionResult:
        hit = strategy.lookup(account, requested_model)
        if hit is None:
            return AdmissionResult.ok()

        reset_at = hit.entry.reset_epoch(key=hit.key, account=account)
        if reset_at is None or reset_at <= now:
            return AdmissionResult.ok()

        return AdmissionResult.blocked(
            verdict=strategy.verdict,
            strategy=strategy.name,
            matched_key=hit.key,
            blocked_until=reset_at,
            now=now,
        )

    def add_strategy(self, strategy: LookupStrategy) -> None:
        """
        Append a lookup strategy.

        Appended strategies run after the built-in ones.

        Args:
            strategy: LookupStrategy implementation to add
        """
        self._strategies.append(strategy)

    def remove_strategy(self, name: str) -> bool:
        """
        Remove a lookup strategy by name.

        Args:
            name: Name of the strategy to remove

        Returns:
            True if removed, False if not found
        """
        for i, strategy in enumerate(self._strategies):
            if strategy.name == name:
                del self._strategies[i]
                return True
        return False
