# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Configuration for the admission library.

Configuration is merged from:
1. System defaults (core/constants.py)
2. Explicit overrides passed by the caller
3. Environment variables (ALWAYS win)
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional

from .constants import (
    DEFAULT_MODEL_NAMESPACE_PREFIX,
    DEFAULT_POOLED_PLATFORMS,
    ENV_MODEL_NAMESPACE_PREFIX,
    ENV_POOLED_PLATFORMS,
    LIB_LOGGER_NAME,
)

lib_logger = logging.getLogger(LIB_LOGGER_NAME)


@dataclass(frozen=True)
class AdmissionConfig:
    """
    Admission settings shared by the evaluator and the gate.

    Frozen so one instance can be shared across threads.
    """

    # Platform tags that additionally probe pooled quota scopes
    pooled_platforms: frozenset = field(
        default_factory=lambda: DEFAULT_POOLED_PLATFORMS
    )
    # Leading namespace segment stripped before scope resolution
    model_namespace_prefix: str = DEFAULT_MODEL_NAMESPACE_PREFIX

    def is_pooled_platform(self, platform: str) -> bool:
        """True if accounts on this platform pool quota by scope."""
        return bool(platform) and platform.lower() in self.pooled_platforms


def _parse_platform_list(value: str) -> Optional[frozenset]:
    """Parse a comma separated platform list. Returns None if empty."""
    platforms = frozenset(
        part.strip().lower() for part in value.split(",") if part.strip()
    )
    return platforms or None


def load_admission_config(
    pooled_platforms: Optional[Iterable[str]] = None,
    model_namespace_prefix: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AdmissionConfig:
    """
    Load admission configuration.

    Args:
        pooled_platforms: Override for the pooled platform set
        model_namespace_prefix: Override for the namespace prefix
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Complete AdmissionConfig
    """
    env = os.environ if environ is None else environ

    platforms = DEFAULT_POOLED_PLATFORMS
    prefix = DEFAULT_MODEL_NAMESPACE_PREFIX

    if pooled_platforms is not None:
        platforms = frozenset(p.strip().lower() for p in pooled_platforms if p.strip())
    if model_namespace_prefix is not None:
        prefix = model_namespace_prefix.strip().lower()

    # Environment overrides
    env_platforms = env.get(ENV_POOLED_PLATFORMS)
    if env_platforms:
        parsed = _parse_platform_list(env_platforms)
        if parsed is not None:
            platforms = parsed
        else:
            lib_logger.warning(
                f"Ignoring empty {ENV_POOLED_PLATFORMS}={env_platforms!r}"
            )

    env_prefix = env.get(ENV_MODEL_NAMESPACE_PREFIX)
    if env_prefix is not None and env_prefix.strip():
        prefix = env_prefix.strip().lower()

    config = AdmissionConfig(
        pooled_platforms=platforms,
        model_namespace_prefix=prefix,
    )
    lib_logger.debug(
        f"Admission config: pooled_platforms={sorted(config.pooled_platforms)}, "
        f"model_namespace_prefix={config.model_namespace_prefix!r}"
    )
    return config


__all__ = [
    "AdmissionConfig",
    "load_admission_config",
]
