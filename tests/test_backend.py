"""Tests for building the live backend from settings."""

import pytest

from cardgen.core.config import GenerationSettings
from cardgen.modules.flashcards.backend import (
    BackendNotConfiguredError,
    GenerativeBackend,
    PydanticAIBackend,
    backend_from_settings,
    build_backend,
)
from tests.conftest import FakeBackend


def _settings(**env: str) -> GenerationSettings:
    defaults = {
        "MODEL_PROVIDER": "",
        "DEEPSEEK_API_KEY": None,
        "GEMINI_API_KEY": None,
        "OPENROUTER_API_KEY": None,
    }
    defaults.update(env)
    return GenerationSettings(_env_file=None, **defaults)


class TestGenerationSettings:
    def test_no_provider_means_no_backend(self) -> None:
        assert _settings().backend_configured is False

    def test_placeholder_key_counts_as_missing(self) -> None:
        cfg = _settings(MODEL_PROVIDER="deepseek", DEEPSEEK_API_KEY="your-deepseek-api-key-here")
        assert cfg.backend_configured is False

    def test_real_key_configures_backend(self) -> None:
        cfg = _settings(MODEL_PROVIDER="DeepSeek", DEEPSEEK_API_KEY="sk-test")
        assert cfg.provider == "deepseek"
        assert cfg.backend_configured is True

    def test_default_timeout(self) -> None:
        assert _settings().timeout_seconds == 30.0


class TestBuildBackend:
    def test_no_provider(self) -> None:
        assert build_backend(_settings()) is None

    def test_missing_key_raises(self) -> None:
        with pytest.raises(BackendNotConfiguredError):
            build_backend(_settings(MODEL_PROVIDER="google"))

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(BackendNotConfiguredError, match="Unknown model provider"):
            build_backend(_settings(MODEL_PROVIDER="carrier-pigeon"))

    def test_misconfiguration_degrades_to_none(self) -> None:
        assert backend_from_settings(_settings(MODEL_PROVIDER="openrouter")) is None

    def test_deepseek_backend(self) -> None:
        backend = build_backend(_settings(MODEL_PROVIDER="deepseek", DEEPSEEK_API_KEY="sk-test"))
        assert isinstance(backend, PydanticAIBackend)
        assert backend.name == "deepseek"
        assert isinstance(backend, GenerativeBackend)


def test_fake_backend_satisfies_protocol() -> None:
    assert isinstance(FakeBackend(), GenerativeBackend)
