"""Tests for configuration loading and validation."""
from __future__ import annotations

import dataclasses
import logging
from types import SimpleNamespace

import pytest

from xai_provider.config import (
    AdapterTimeout,
    XAIConfig,
    missing_configuration_keys,
    validate_configuration,
)
from xai_provider.errors import ConfigurationError
from xai_provider.provider import xai


class TestXAIConfig:
    def test_defaults(self) -> None:
        config = XAIConfig()
        assert config.xai_api_key is None
        assert config.timeout == AdapterTimeout()

    def test_frozen(self) -> None:
        config = XAIConfig(xai_api_key="k")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.xai_api_key = "other"  # type: ignore[misc]

    def test_repr_hides_key(self) -> None:
        assert "secret" not in repr(XAIConfig(xai_api_key="secret"))


class TestFromEnv:
    def test_reads_key(self) -> None:
        config = XAIConfig.from_env({"XAI_API_KEY": "abc"})
        assert config.xai_api_key == "abc"

    def test_missing_key_is_none(self) -> None:
        assert XAIConfig.from_env({}).xai_api_key is None

    def test_empty_key_is_none(self) -> None:
        assert XAIConfig.from_env({"XAI_API_KEY": ""}).xai_api_key is None

    def test_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("XAI_API_KEY", "from-env")
        assert XAIConfig.from_env().xai_api_key == "from-env"

    def test_timeout(self) -> None:
        config = XAIConfig.from_env({"XAI_TIMEOUT": "30"})
        assert config.timeout.request == 30.0

    def test_invalid_timeout_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="xai_provider"):
            config = XAIConfig.from_env({"XAI_TIMEOUT": "soon"})
        assert config.timeout == AdapterTimeout()
        assert "Invalid XAI_TIMEOUT" in caplog.text


class TestValidateConfiguration:
    def test_passes_when_present(self) -> None:
        validate_configuration(XAIConfig(xai_api_key="k"), xai.required_configuration_keys())

    def test_raises_when_missing(self) -> None:
        with pytest.raises(ConfigurationError, match="xai_api_key"):
            validate_configuration(XAIConfig(), xai.required_configuration_keys())

    def test_lists_every_missing_key(self) -> None:
        config = SimpleNamespace(a="", b=None, c="set")
        assert missing_configuration_keys(config, ["c", "b", "a", "d"]) == ["a", "b", "d"]


class TestTimeoutBounds:
    @pytest.mark.parametrize("raw", ["0", "-5", "0.0"])
    def test_non_positive_falls_back(self, raw: str, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="xai_provider"):
            config = XAIConfig.from_env({"XAI_TIMEOUT": raw})
        assert config.timeout == AdapterTimeout()
        assert "Invalid XAI_TIMEOUT" in caplog.text
