"""TOML configuration loader."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]


@dataclass
class HttpRemoteConfig:
    url: str = ""
    api_key: str = ""


@dataclass
class ClaudeRemoteConfig:
    api_key: str = ""
    model: str = "claude-sonnet-4-5-20250929"


@dataclass
class RemoteConfig:
    backend: str = "http"
    timeout: float | None = None
    http: HttpRemoteConfig = field(default_factory=HttpRemoteConfig)
    claude: ClaudeRemoteConfig = field(default_factory=ClaudeRemoteConfig)


@dataclass
class ExpiringConfig:
    within_days: int = 7


@dataclass
class ProxConfig:
    remote: RemoteConfig = field(default_factory=RemoteConfig)
    expiring: ExpiringConfig = field(default_factory=ExpiringConfig)


def load_config(path: str | Path | None = None) -> ProxConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The estimator URL and API keys can be supplied via environment variables.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    rem = raw.get("remote", {})
    exp = raw.get("expiring", {})

    http_cfg = rem.get("http", {})
    claude_cfg = rem.get("claude", {})

    # Resolve secrets: config file → environment variable
    http_url = http_cfg.get("url", "") or os.environ.get("PROX_ESTIMATOR_URL", "")
    http_api_key = http_cfg.get("api_key", "") or os.environ.get(
        "PROX_ESTIMATOR_API_KEY", ""
    )
    claude_api_key = claude_cfg.get("api_key", "") or os.environ.get(
        "ANTHROPIC_API_KEY", ""
    )

    timeout = rem.get("timeout")

    return ProxConfig(
        remote=RemoteConfig(
            backend=rem.get("backend", "http"),
            timeout=float(timeout) if timeout is not None else None,
            http=HttpRemoteConfig(url=http_url, api_key=http_api_key),
            claude=ClaudeRemoteConfig(
                api_key=claude_api_key,
                model=claude_cfg.get("model", "claude-sonnet-4-5-20250929"),
            ),
        ),
        expiring=ExpiringConfig(
            within_days=exp.get("within_days", 7),
        ),
    )
