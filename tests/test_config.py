"""Tests for havenox.config — AppConfig defaults and environment loading."""

import dataclasses

import pytest

from havenox.config import DEFAULT_SERVICE_URL, DEFAULT_TREASURY_ADDRESS, AppConfig


class TestDefaults:
    def test_values(self) -> None:
        config = AppConfig()
        assert config.host == "0.0.0.0"
        assert config.port == 4000
        assert config.treasury_address == DEFAULT_TREASURY_ADDRESS
        assert config.service_url == DEFAULT_SERVICE_URL
        assert config.data_dir == "data"
        assert config.max_body_size == 1_000_000
        assert config.cors.allow_origins == ("*",)

    def test_frozen(self) -> None:
        config = AppConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.port = 5000  # type: ignore[misc]


class TestFromEnv:
    def test_empty_environment_keeps_defaults(self) -> None:
        assert AppConfig.from_env({}) == AppConfig()

    def test_reads_variables(self) -> None:
        config = AppConfig.from_env(
            {
                "HOST": "127.0.0.1",
                "PORT": "8080",
                "TREASURY_ADDRESS": "kaspa:abc",
                "SERVICE_URL": "http://localhost:3000",
                "HAVENOX_DATA_DIR": "/var/lib/havenox",
                "LOG_LEVEL": "DEBUG",
                "LOG_FORMAT": "JSON",
            }
        )
        assert config.host == "127.0.0.1"
        assert config.port == 8080
        assert config.treasury_address == "kaspa:abc"
        assert config.service_url == "http://localhost:3000"
        assert config.data_dir == "/var/lib/havenox"
        assert config.log_level == "debug"
        assert config.log_format == "json"

    def test_empty_values_ignored(self) -> None:
        config = AppConfig.from_env({"TREASURY_ADDRESS": "", "HOST": ""})
        assert config.treasury_address == DEFAULT_TREASURY_ADDRESS
        assert config.host == "0.0.0.0"

    @pytest.mark.parametrize("raw", ["abc", "0", "-5", "", "80.5"])
    def test_invalid_port_falls_back(self, raw: str) -> None:
        assert AppConfig.from_env({"PORT": raw}).port == 4000

    def test_overrides_win(self) -> None:
        config = AppConfig.from_env({"PORT": "8080", "HOST": "10.0.0.1"}, port=9000, host=None)
        assert config.port == 9000
        assert config.host == "10.0.0.1"

    def test_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TREASURY_ADDRESS", "kaspa:from-env")
        monkeypatch.delenv("PORT", raising=False)
        config = AppConfig.from_env()
        assert config.treasury_address == "kaspa:from-env"
        assert config.port == 4000
