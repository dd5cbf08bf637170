# SPDX-License-Identifier: LGPL-3.0-only
# Copyright (c) 2026 Mirrowel

"""
Reset timestamp parsing.

Persisted reset times arrive as RFC 3339 text (the gateway writes
``time.RFC3339``), but in-process callers may also hand over
``datetime`` objects or epoch numbers. Everything is converted to a
float epoch so the evaluator can compare against ``time.time()``.

Parse failures follow a fail-open policy: the admission path treats an
unparseable reset time as "not limited" and logs a warning. A corrupt
timestamp must never wedge an account out of rotation forever, at the
cost of possibly sending one request into an upstream limit that will
be re-recorded on the next 429.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Optional

from .constants import LIB_LOGGER_NAME
from .errors import InvalidTimestampError, mask_account

lib_logger = logging.getLogger(LIB_LOGGER_NAME)


def parse_timestamp(value: Any) -> Optional[float]:
    """
    Convert a reset timestamp to epoch seconds.

    Accepts:
    - None or "" -> None (no timestamp recorded)
    - int / float -> epoch seconds
    - datetime -> naive values are taken as UTC
    - str -> RFC 3339 / ISO 8601, with "Z" or an explicit offset

    Args:
        value: Raw timestamp value

    Returns:
        Epoch seconds, or None when no timestamp is recorded

    Raises:
        InvalidTimestampError: If the value is present but unparseable
    """
    if value is None:
        return None

    # bool is an int subclass; a flag is never a timestamp
    if isinstance(value, bool):
        raise InvalidTimestampError(
            f"Expected a timestamp, got boolean {value!r}", value=value
        )

    if isinstance(value, (int, float)):
        epoch = float(value)
        if not math.isfinite(epoch):
            raise InvalidTimestampError(
                f"Non-finite timestamp {value!r}", value=value
            )
        return epoch

    if isinstance(value, datetime):
        return _datetime_to_epoch(value)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidTimestampError(
                f"Unparseable timestamp {value!r}: {e}", value=value
            ) from e
        return _datetime_to_epoch(parsed)

    raise InvalidTimestampError(
        f"Unsupported timestamp type {type(value).__name__}", value=value
    )


def parse_timestamp_lenient(
    value: Any, key: Optional[str] = None, account: Any = None
) -> Optional[float]:
    """
    Parse a timestamp, logging and returning None on failure.

    This is the fail-open entry point used by the admission path. The
    account is only rendered for the log line when parsing fails.

    Args:
        value: Raw timestamp value
        key: State key the value was stored under (for the log line)
        account: Account the value belongs to (for the log line)

    Returns:
        Epoch seconds, or None if absent or unparseable
    """
    try:
        return parse_timestamp(value)
    except InvalidTimestampError as e:
        e.key = key
        where = f" for key '{key}'" if key is not None else ""
        suffix = f" on {mask_account(account)}" if account is not None else ""
        lib_logger.warning(
            f"Ignoring invalid reset timestamp{where}{suffix}: {e}. "
            f"Treating as not limited."
        )
        return None


def _datetime_to_epoch(value: datetime) -> float:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.timestamp()


def format_timestamp(epoch: float) -> str:
    """
    Format epoch seconds as RFC 3339 in UTC.

    Values outside the datetime range (far-future sentinels, epochs in
    milliseconds) are rendered as the raw number.
    """
    try:
        moment = datetime.fromtimestamp(epoch, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return str(epoch)
    return moment.isoformat(timespec="seconds").replace("+00:00", "Z")


__all__ = [
    "parse_timestamp",
    "parse_timestamp_lenient",
    "format_timestamp",
]
