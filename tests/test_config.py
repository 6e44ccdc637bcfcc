"""
Tests for letta_mcp/config.py - environment-sourced settings.
"""

import dataclasses

import pytest

from letta_mcp.config import Settings, load_settings


class TestSettingsFromEnv:

    def test_reads_all_values(self):
        settings = Settings.from_env({
            "LETTA_API_KEY": "sk-123",
            "LETTA_DEFAULT_AGENT_ID": "agent-1",
            "LETTA_BASE_URL": "http://localhost:8283",
            "LETTA_MCP_LOG_LEVEL": "DEBUG",
        })
        assert settings == Settings(
            api_key="sk-123",
            default_agent_id="agent-1",
            base_url="http://localhost:8283",
            log_level="DEBUG",
        )

    def test_defaults_when_unset(self):
        settings = Settings.from_env({})
        assert settings.api_key is None
        assert settings.default_agent_id is None
        assert settings.base_url is None
        assert settings.log_level == "INFO"

    def test_blank_values_treated_as_unset(self):
        settings = Settings.from_env({"LETTA_API_KEY": "   ", "LETTA_DEFAULT_AGENT_ID": ""})
        assert settings.api_key is None
        assert settings.default_agent_id is None

    def test_values_are_stripped(self):
        settings = Settings.from_env({"LETTA_API_KEY": " sk-123\n"})
        assert settings.api_key == "sk-123"

    def test_frozen(self):
        settings = Settings.from_env({})
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.api_key = "changed"


class TestLoadSettings:

    def test_uses_process_environment(self, monkeypatch):
        monkeypatch.setenv("LETTA_API_KEY", "from-env")
        monkeypatch.delenv("LETTA_DEFAULT_AGENT_ID", raising=False)

        settings = load_settings()

        assert settings.api_key == "from-env"
        assert settings.default_agent_id is None
