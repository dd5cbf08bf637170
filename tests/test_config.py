"""Tests for admission configuration loading."""

from admission_library import AdmissionConfig, load_admission_config


def test_defaults():
    config = load_admission_config(environ={})
    assert config.pooled_platforms == frozenset({"antigravity"})
    assert config.model_namespace_prefix == "models/"
    assert config.is_pooled_platform("antigravity")
    assert config.is_pooled_platform("ANTIGRAVITY")
    assert not config.is_pooled_platform("gemini")
    assert not config.is_pooled_platform("")


def test_explicit_overrides():
    config = load_admission_config(
        pooled_platforms=["Antigravity", " gemini "],
        model_namespace_prefix="Publishers/",
        environ={},
    )
    assert config.pooled_platforms == frozenset({"antigravity", "gemini"})
    assert config.model_namespace_prefix == "publishers/"


def test_environment_wins_over_explicit_overrides():
    config = load_admission_config(
        pooled_platforms=["gemini"],
        environ={
            "ADMISSION_POOLED_PLATFORMS": "antigravity, openai",
            "ADMISSION_MODEL_NAMESPACE_PREFIX": "publishers/",
        },
    )
    assert config.pooled_platforms == frozenset({"antigravity", "openai"})
    assert config.model_namespace_prefix == "publishers/"


def test_empty_environment_values_are_ignored():
    config = load_admission_config(
        environ={
            "ADMISSION_POOLED_PLATFORMS": " , ",
            "ADMISSION_MODEL_NAMESPACE_PREFIX": "  ",
        }
    )
    assert config == AdmissionConfig()


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("ADMISSION_POOLED_PLATFORMS", "gemini")
    assert load_admission_config().pooled_platforms == frozenset({"gemini"})
