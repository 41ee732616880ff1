"""Tests for configuration and URL building."""

import pytest
from pydantic import ValidationError

import settings
from votes_client import ClientConfig, ConfigurationError, build_url


class TestBuildUrl:
    def test_appends_code(self):
        cfg = ClientConfig(base_url="https://x.test/fn", access_code="abc")
        assert build_url(cfg, "/api/postVote", True) == "https://x.test/fn/api/postVote?code=abc"

    def test_suppressed_code(self):
        cfg = ClientConfig(base_url="https://x.test/fn", access_code="abc")
        assert build_url(cfg, "/api/getVotes", False) == "https://x.test/fn/api/getVotes"

    def test_no_code_configured(self):
        cfg = ClientConfig(base_url="https://x.test/fn")
        assert build_url(cfg, "/api/postUser") == "https://x.test/fn/api/postUser"

    def test_empty_code_is_ignored(self):
        cfg = ClientConfig(base_url="https://x.test/fn", access_code="")
        assert cfg.url("/api/postUser") == "https://x.test/fn/api/postUser"

    def test_trailing_slash_stripped(self):
        cfg = ClientConfig(base_url="https://x.test/fn/", access_code="abc")
        assert cfg.url("/api/postUser") == "https://x.test/fn/api/postUser?code=abc"

    def test_code_not_escaped(self):
        cfg = ClientConfig(base_url="https://x.test", access_code="a b&c==")
        assert cfg.url("/p") == "https://x.test/p?code=a b&c=="


class TestFromEnv:
    def test_reads_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "FUNCTIONS_BASE", "https://x.test/fn/")
        monkeypatch.setattr(settings, "FUNCTION_CODE", "abc")
        monkeypatch.setattr(settings, "FUNCTIONS_TIMEOUT", "2.5")
        cfg = ClientConfig.from_env()
        assert cfg.base_url == "https://x.test/fn/"
        assert cfg.trimmed_base == "https://x.test/fn"
        assert cfg.access_code == "abc"
        assert cfg.timeout == 2.5

    def test_optional_values(self, monkeypatch):
        monkeypatch.setattr(settings, "FUNCTIONS_BASE", "https://x.test/fn")
        monkeypatch.setattr(settings, "FUNCTION_CODE", "")
        monkeypatch.setattr(settings, "FUNCTIONS_TIMEOUT", None)
        cfg = ClientConfig.from_env()
        assert cfg.access_code is None
        assert cfg.timeout is None

    def test_missing_base(self, monkeypatch):
        monkeypatch.setattr(settings, "FUNCTIONS_BASE", None)
        with pytest.raises(ConfigurationError):
            ClientConfig.from_env()

    def test_frozen(self):
        cfg = ClientConfig(base_url="https://x.test")
        with pytest.raises(ValidationError):
            cfg.base_url = "https://other.test"

    def test_invalid_timeout(self, monkeypatch):
        monkeypatch.setattr(settings, "FUNCTIONS_BASE", "https://x.test/fn")
        monkeypatch.setattr(settings, "FUNCTIONS_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError, match="FUNCTIONS_TIMEOUT"):
            ClientConfig.from_env()
