# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Quota scope resolution.

On pooling platforms every claude-* model shares the "claude" quota,
gemini-* text models share "gemini_text" and gemini-* image models share
"gemini_image". Resolution depends only on the model name, never on
account state.
"""

from typing import Optional, Tuple

from ..core.constants import (
    CLAUDE_MODEL_PREFIX,
    DEFAULT_MODEL_NAMESPACE_PREFIX,
    GEMINI_MODEL_PREFIX,
    IMAGE_MODEL_COMPONENT,
)
from ..core.types import QuotaScope


def normalize_model_name(
    model: str, namespace_prefix: str = DEFAULT_MODEL_NAMESPACE_PREFIX
) -> str:
    """
    Normalize a requested model name for scope resolution.

    Strips surrounding whitespace, lower-cases and removes a leading
    namespace segment such as "models/". Idempotent.

    Args:
        model: Raw requested model name
        namespace_prefix: Namespace segment to strip

    Returns:
        Normalized model name (may be empty)
    """
    normalized = (model or "").strip().lower()
    if namespace_prefix:
        while normalized.startswith(namespace_prefix):
            normalized = normalized[len(namespace_prefix) :].strip()
    return normalized


def is_image_generation_model(model: str) -> bool:
    """
    True if a normalized model name is an image-generation variant.

    Matches "image" as a whole "-"-separated component, so
    "gemini-3-pro-image" and "gemini-2.5-flash-image-preview" match but
    "gemini-imagen-x" does not.
    """
    return IMAGE_MODEL_COMPONENT in model.split("-")


def resolve_quota_scope(
    requested_model: str,
    namespace_prefix: str = DEFAULT_MODEL_NAMESPACE_PREFIX,
) -> Tuple[Optional[QuotaScope], bool]:
    """
    Resolve the pooled quota scope for a model.

    Family prefixes are checked in a fixed order and include the
    trailing "-", so a bare "claude" or "gemini" does not resolve.

    Args:
        requested_model: Raw requested model name
        namespace_prefix: Namespace segment to strip during normalization

    Returns:
        Tuple of (scope, ok). scope is None when ok is False.
    """
    model = normalize_model_name(requested_model, namespace_prefix)
    if not model:
        return None, False

    if model.startswith(CLAUDE_MODEL_PREFIX):
        return QuotaScope.CLAUDE, True

    if model.startswith(GEMINI_MODEL_PREFIX):
        if is_image_generation_model(model):
            return QuotaScope.GEMINI_IMAGE, True
        return QuotaScope.GEMINI_TEXT, True

    return None, False


def resolve_model_key(
    requested_model: str,
    namespace_prefix: str = DEFAULT_MODEL_NAMESPACE_PREFIX,
) -> str:
    """
    Rate-limit state key (scope name) for a model.

    Returns:
        Scope name, or "" if the model has no pooled scope
    """
    scope, ok = resolve_quota_scope(requested_model, namespace_prefix)
    if not ok:
        return ""
    return scope.value
