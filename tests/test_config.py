"""Tests for config loading."""

import os
import tempfile

from prox.config import ProxConfig, load_config


def test_load_config_defaults(monkeypatch):
    """Loading with no path returns all defaults."""
    monkeypatch.delenv("PROX_ESTIMATOR_URL", raising=False)
    monkeypatch.delenv("PROX_ESTIMATOR_API_KEY", raising=False)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)

    config = load_config()
    assert isinstance(config, ProxConfig)
    assert config.remote.backend == "http"
    assert config.remote.timeout is None
    assert config.remote.http.url == ""
    assert config.remote.http.api_key == ""
    assert config.remote.claude.api_key == ""
    assert config.remote.claude.model == "claude-sonnet-4-5-20250929"
    assert config.expiring.within_days == 7


def test_load_config_nonexistent_file():
    """Loading a nonexistent file returns defaults."""
    config = load_config("/nonexistent/path.toml")
    assert config.expiring.within_days == 7


def test_load_config_from_toml():
    """Loading a valid TOML file populates config."""
    toml_content = b"""\
[remote]
backend = "claude"
timeout = 5

[remote.http]
url = "https://estimator.example.com/estimate-dates"
api_key = "http-key"

[remote.claude]
api_key = "test-key-123"
model = "claude-haiku"

[expiring]
within_days = 3
"""
    with tempfile.NamedTemporaryFile(suffix=".toml", delete=False) as f:
        f.write(toml_content)
        f.flush()
        config = load_config(f.name)

    os.unlink(f.name)

    assert config.remote.backend == "claude"
    assert config.remote.timeout == 5.0
    assert config.remote.http.url == "https://estimator.example.com/estimate-dates"
    assert config.remote.http.api_key == "http-key"
    assert config.remote.claude.api_key == "test-key-123"
    assert config.remote.claude.model == "claude-haiku"
    assert config.expiring.within_days == 3


def test_env_vars_fill_missing_secrets(monkeypatch):
    monkeypatch.setenv("PROX_ESTIMATOR_URL", "https://env.example.com/estimate")
    monkeypatch.setenv("PROX_ESTIMATOR_API_KEY", "env-http-key")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "env-claude-key")

    config = load_config()
    assert config.remote.http.url == "https://env.example.com/estimate"
    assert config.remote.http.api_key == "env-http-key"
    assert config.remote.claude.api_key == "env-claude-key"


def test_config_file_overrides_env(monkeypatch, tmp_path):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "env-claude-key")
    path = tmp_path / "prox.toml"
    path.write_text('[remote.claude]\napi_key = "file-key"\n', encoding="utf-8")

    config = load_config(path)
    assert config.remote.claude.api_key == "file-key"
    assert config.remote.backend == "http"
