# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Constants and default values for the admission library.

Platform tags, quota scope names and the key names used by the
gateway's persisted account records live here so that every module
agrees on the exact spelling.
"""

# =============================================================================
# PLATFORMS
# =============================================================================

PLATFORM_ANTHROPIC = "anthropic"
PLATFORM_OPENAI = "openai"
PLATFORM_GEMINI = "gemini"
PLATFORM_ANTIGRAVITY = "antigravity"

# Platforms whose upstream pools quota across a model family
DEFAULT_POOLED_PLATFORMS = frozenset({PLATFORM_ANTIGRAVITY})

# =============================================================================
# QUOTA SCOPES
# =============================================================================

SCOPE_CLAUDE = "claude"
SCOPE_GEMINI_TEXT = "gemini_text"
SCOPE_GEMINI_IMAGE = "gemini_image"

# Family prefixes, checked in this order
CLAUDE_MODEL_PREFIX = "claude-"
GEMINI_MODEL_PREFIX = "gemini-"

# Model component marking an image-generation variant
IMAGE_MODEL_COMPONENT = "image"

# Leading namespace segment stripped during normalization
DEFAULT_MODEL_NAMESPACE_PREFIX = "models/"

# =============================================================================
# PERSISTED ACCOUNT RECORD KEYS
# =============================================================================

MODEL_MAPPING_KEY = "model_mapping"  # credentials.model_mapping
MODEL_RATE_LIMITS_KEY = "model_rate_limits"  # extra.model_rate_limits
RATE_LIMIT_RESET_AT_KEY = "rate_limit_reset_at"
RATE_LIMITED_AT_KEY = "rate_limited_at"

ACCOUNT_STATUS_ACTIVE = "active"

# =============================================================================
# ENVIRONMENT
# =============================================================================

ENV_POOLED_PLATFORMS = "ADMISSION_POOLED_PLATFORMS"
ENV_MODEL_NAMESPACE_PREFIX = "ADMISSION_MODEL_NAMESPACE_PREFIX"

# Logging
LIB_LOGGER_NAME = "admission_library"

__all__ = [
    "PLATFORM_ANTHROPIC",
    "PLATFORM_OPENAI",
    "PLATFORM_GEMINI",
    "PLATFORM_ANTIGRAVITY",
    "DEFAULT_POOLED_PLATFORMS",
    "SCOPE_CLAUDE",
    "SCOPE_GEMINI_TEXT",
    "SCOPE_GEMINI_IMAGE",
    "CLAUDE_MODEL_PREFIX",
    "GEMINI_MODEL_PREFIX",
    "IMAGE_MODEL_COMPONENT",
    "DEFAULT_MODEL_NAMESPACE_PREFIX",
    "MODEL_MAPPING_KEY",
    "MODEL_RATE_LIMITS_KEY",
    "RATE_LIMIT_RESET_AT_KEY",
    "RATE_LIMITED_AT_KEY",
    "ACCOUNT_STATUS_ACTIVE",
    "ENV_POOLED_PLATFORMS",
    "ENV_MODEL_NAMESPACE_PREFIX",
    "LIB_LOGGER_NAME",
]
