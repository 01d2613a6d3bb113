"""Tests for greeter.config — AppConfig frozen dataclass."""

import pytest

from greeter.config import AppConfig
from greeter.errors import ConfigurationError


class TestAppConfig:
    def test_defaults(self) -> None:
        cfg = AppConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 8000
        assert cfg.debug is False
        assert cfg.reload is False
        assert cfg.log_level == "info"

    def test_override(self) -> None:
        cfg = AppConfig(host="0.0.0.0", port=3000, debug=True, log_level="debug")

        assert cfg.host == "0.0.0.0"
        assert cfg.port == 3000
        assert cfg.debug is True
        assert cfg.log_level == "debug"

    def test_frozen(self) -> None:
        cfg = AppConfig()

        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ConfigurationError, match="log_level"):
            AppConfig(log_level="loud")

    def test_invalid_port(self) -> None:
        with pytest.raises(ConfigurationError, match="port"):
            AppConfig(port=70000)


class TestFromEnv:
    def test_empty_env_gives_defaults(self) -> None:
        assert AppConfig.from_env({}) == AppConfig()

    def test_reads_variables(self) -> None:
        cfg = AppConfig.from_env(
            {
                "GREETER_HOST": "0.0.0.0",
                "GREETER_PORT": "9000",
                "GREETER_DEBUG": "yes",
                "GREETER_LOG_LEVEL": "WARNING",
            }
        )
        assert cfg == AppConfig(host="0.0.0.0", port=9000, debug=True, log_level="warning")

    def test_debug_false(self) -> None:
        assert AppConfig.from_env({"GREETER_DEBUG": "off"}).debug is False

    def test_bad_port(self) -> None:
        with pytest.raises(ConfigurationError, match="GREETER_PORT"):
            AppConfig.from_env({"GREETER_PORT": "eighty"})

    def test_bad_bool(self) -> None:
        with pytest.raises(ConfigurationError, match="GREETER_DEBUG"):
            AppConfig.from_env({"GREETER_DEBUG": "maybe"})

    def test_defaults_to_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GREETER_PORT", "8123")
        assert AppConfig.from_env().port == 8123
