"""Tests for settings, logging helpers and the entry point."""

import pytest

from coolify_mcp import main as entry
from coolify_mcp.config import Settings
from coolify_mcp.coolify_client import ConfigurationError
from coolify_mcp.logging import redact_payload


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ["COOLIFY_BASE_URL", "COOLIFY_ACCESS_TOKEN", "COOLIFY_TIMEOUT_SECONDS", "ADAPTER_TRANSPORT"]:
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.coolify_base_url == "http://localhost:3000"
        assert settings.coolify_access_token == ""
        assert settings.coolify_timeout_seconds is None
        assert settings.adapter_transport == "stdio"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("COOLIFY_BASE_URL", "https://coolify.internal/")
        monkeypatch.setenv("COOLIFY_ACCESS_TOKEN", "0|abc")
        monkeypatch.setenv("COOLIFY_TIMEOUT_SECONDS", "12.5")
        monkeypatch.setenv("ADAPTER_PORT", "9001")

        settings = Settings()

        assert settings.coolify_base_url == "https://coolify.internal/"
        assert settings.coolify_access_token == "0|abc"
        assert settings.coolify_timeout_seconds == 12.5
        assert settings.adapter_port == 9001


class TestRedaction:
    """Tests for log payload redaction."""

    def test_redacts_sensitive_keys(self):
        payload = {
            "uuid": "abc",
            "private_key": "-----BEGIN",
            "client_secret": "s",
            "redis_password": "p",
            "nested": {"webhook_secret": "w", "name": "n"},
            "data": [{"key": "A", "value": "1"}, "plain"],
        }

        redacted = redact_payload(payload)

        assert redacted["uuid"] == "abc"
        assert redacted["private_key"] == "***REDACTED***"
        assert redacted["client_secret"] == "***REDACTED***"
        assert redacted["redis_password"] == "***REDACTED***"
        assert redacted["nested"] == {"webhook_secret": "***REDACTED***", "name": "n"}
        assert redacted["data"] == [{"key": "A", "value": "1"}, "plain"]
        assert payload["private_key"] == "-----BEGIN"

    def test_redacts_values_of_sensitive_env_vars(self):
        payload = {
            "uuid": "abc",
            "data": [
                {"key": "DB_PASSWORD", "value": "hunter2"},
                {"key": "APP_ENV", "value": "production"},
            ],
        }

        redacted = redact_payload(payload)

        assert redacted["data"] == [
            {"key": "DB_PASSWORD", "value": "***REDACTED***"},
            {"key": "APP_ENV", "value": "production"},
        ]

    def test_single_env_var_call(self):
        redacted = redact_payload({"uuid": "abc", "key": "STRIPE_API_KEY", "value": "sk_live"})

        assert redacted == {"uuid": "abc", "key": "STRIPE_API_KEY", "value": "***REDACTED***"}


class TestEntryPoint:
    """Tests for startup configuration failures."""

    @pytest.mark.asyncio
    async def test_missing_token(self, monkeypatch):
        monkeypatch.setattr(entry, "get_settings", lambda: Settings(coolify_access_token=""))

        with pytest.raises(ConfigurationError, match="COOLIFY_ACCESS_TOKEN environment variable is required"):
            await entry._run()

    def test_unsupported_transport(self, settings):
        bad = settings.model_copy(update={"adapter_transport": "websocket"})

        with pytest.raises(ConfigurationError, match="Unsupported transport"):
            entry._runner(bad, server=None)

    def test_main_exits_on_startup_error(self, monkeypatch):
        monkeypatch.setattr(entry, "get_settings", lambda: Settings(coolify_access_token=""))

        with pytest.raises(SystemExit) as exc_info:
            entry.main()

        assert exc_info.value.code == 1


class TestToolAllowlist:
    """Tests for allowlist parsing."""

    def test_unset_allows_everything(self, settings):
        assert settings.tool_allowlist() == set()

    def test_parses_comma_separated_names(self, settings):
        limited = settings.model_copy(update={"adapter_tool_allowlist": " list_servers ,,get_version "})

        assert limited.tool_allowlist() == {"list_servers", "get_version"}
