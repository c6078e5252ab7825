"""
Unit tests for ledgerkit configuration.
"""

import os
import sys
from unittest.mock import patch

import pytest
from pydantic import ValidationError

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ledgerkit.config.provider import ConfigProvider, EnvConfigProvider, SessionConfig


class TestSessionConfig:
    """Test session configuration model."""

    def test_defaults(self):
        config = SessionConfig()
        assert config.retry_limit == 4
        assert config.log_level == "INFO"

    def test_negative_retry_limit_rejected(self):
        with pytest.raises(ValidationError):
            SessionConfig(retry_limit=-1)

    def test_log_level_normalized(self):
        assert SessionConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            SessionConfig(log_level="chatty")
        assert "Unknown log level" in str(exc_info.value)


class TestEnvConfigProvider:
    """Test environment-based configuration."""

    def test_reads_environment(self):
        with patch.dict(os.environ, {"LEDGER_RETRY_LIMIT": "9", "LOG_LEVEL": "warning"}):
            config = EnvConfigProvider().get_session_config()

        assert config.retry_limit == 9
        assert config.log_level == "WARNING"

    def test_defaults_when_unset(self):
        with patch.dict(os.environ, {}, clear=True):
            config = EnvConfigProvider().get_session_config()

        assert config == SessionConfig()

    def test_non_integer_retry_limit(self):
        with patch.dict(os.environ, {"LEDGER_RETRY_LIMIT": "lots"}):
            with pytest.raises(ValueError):
                EnvConfigProvider().get_session_config()

    def test_negative_retry_limit(self):
        with patch.dict(os.environ, {"LEDGER_RETRY_LIMIT": "-2"}):
            with pytest.raises(ValidationError):
                EnvConfigProvider().get_session_config()

    def test_satisfies_provider_protocol(self):
        provider: ConfigProvider = EnvConfigProvider()
        assert isinstance(provider.get_session_config(), SessionConfig)
