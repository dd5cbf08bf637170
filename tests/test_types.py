"""Tests for the account model and its persisted record shape."""

import logging

import pytest

from admission_library import Account, Platform, RateLimitEntry
from admission_library.core.errors import mask_account

from conftest import MINUTE, NOW, rfc3339


def test_from_dict_reads_mapping_and_limits():
    account = Account.from_dict(
        {
            "id": 7,
            "name": "team-a",
            "platform": "antigravity",
            "credentials": {
                "api_key": "secret",
                "model_mapping": {"claude-3-5-sonnet": "claude-sonnet-4-5"},
            },
            "extra": {
                "model_rate_limits": {
                    "claude": {
                        "rate_limit_reset_at": rfc3339(MINUTE),
                        "rate_limited_at": rfc3339(-MINUTE),
                    }
                }
            },
        }
    )

    assert account.platform == Platform.ANTIGRAVITY
    assert account.platform_name == "antigravity"
    assert account.model_mapping == {"claude-3-5-sonnet": "claude-sonnet-4-5"}
    entry = account.get_rate_limit_entry("claude")
    assert entry == RateLimitEntry(reset_at=rfc3339(MINUTE), rate_limited_at=rfc3339(-MINUTE))
    assert entry.reset_epoch() == NOW + MINUTE


def test_from_dict_keeps_unknown_platform_as_string():
    account = Account.from_dict({"platform": "bedrock"})
    assert account.platform == "bedrock"
    assert account.platform_name == "bedrock"


def test_from_dict_skips_malformed_sections(caplog):
    with caplog.at_level(logging.WARNING, logger="admission_library"):
        account = Account.from_dict(
            {
                "id": 3,
                "platform": "antigravity",
                "credentials": {"model_mapping": ["not", "a", "dict"]},
                "extra": {
                    "model_rate_limits": {
                        "claude": "2030-01-01T00:00:00Z",
                        "gemini_text": {"rate_limit_reset_at": rfc3339(MINUTE)},
                    }
                },
            }
        )

    assert account.model_mapping is None
    assert list(account.model_rate_limits) == ["gemini_text"]
    assert "Ignoring non-mapping model_mapping on #3" in caplog.text
    assert "Ignoring malformed rate limit entry 'claude' on #3" in caplog.text


def test_from_dict_empty_record():
    account = Account.from_dict({})
    assert account.model_mapping is None
    assert account.model_rate_limits == {}
    assert account.get_rate_limit_entry("claude") is None
    assert account.is_schedulable(NOW)


def test_health_ignores_unparseable_windows():
    account = Account(overload_until="garbage")
    assert account.is_schedulable(NOW)


def test_mask_account():
    assert mask_account(None) == "<none>"
    assert mask_account(Account(id=7)) == "#7"
    assert mask_account(Account(id=7, name="team-a")) == "#7 (team-a)"
    assert mask_account(Account(id=7, name="a-very-long-account-name")) == "#7 (a-very-lo...)"


def test_from_dict_coerces_non_string_name():
    account = Account.from_dict(
        {
            "id": 1,
            "name": 1234567890123456,
            "platform": "antigravity",
            "credentials": {"model_mapping": "broken"},
        }
    )
    assert account.name == "1234567890123456"
    assert mask_account(account) == "#1 (123456789...)"


def test_mask_account_tolerates_non_string_name():
    class Record:
        id = 2
        name = 42

    assert mask_account(Record()) == "#2 (42)"


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, True),
        (True, True),
        (False, False),
        ("false", False),
        ("true", True),
        (0, False),
    ],
)
def test_from_dict_schedulable_flag(raw, expected):
    assert Account.from_dict({"schedulable": raw}).schedulable is expected
    assert Account.from_dict({}).schedulable is True
