"""Configuration resolution: defaults, JSON config file, environment, flags."""

from __future__ import annotations

import json
import os
from pathlib import Path

from cmvp_tui.collectors import (
    DEFAULT_API_BASE,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    ApiConfig,
)

DEFAULTS: dict = {
    "api_base": DEFAULT_API_BASE,
    "timeout_seconds": DEFAULT_TIMEOUT_SECONDS,
    "user_agent": DEFAULT_USER_AGENT,
}

ENV_KEYS = {
    "CMVP_API_BASE": "api_base",
    "CMVP_TIMEOUT": "timeout_seconds",
}


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"config path not found: {config_path}")

    try:
        data = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON config: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError("config must be a JSON object")
    unknown = sorted(set(data) - set(DEFAULTS))
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(unknown)}")
    return data


def _timeout(value) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid timeout: {value!r}") from exc
    if timeout <= 0:
        raise ValueError(f"timeout must be positive: {value!r}")
    return timeout


def resolve_config(
    config_path: str | None = None,
    overrides: dict | None = None,
    environ: dict | None = None,
) -> dict:
    """Merge defaults < config file < environment < explicit overrides."""
    env = os.environ if environ is None else environ
    resolved = dict(DEFAULTS)
    resolved.update(load_user_config(config_path))

    for env_key, key in ENV_KEYS.items():
        value = env.get(env_key)
        if value:
            resolved[key] = value

    for key, value in (overrides or {}).items():
        if value is not None:
            resolved[key] = value

    api_base = str(resolved["api_base"]).strip()
    if not api_base:
        raise ValueError("api_base must not be empty")
    resolved["api_base"] = api_base.rstrip("/")
    resolved["timeout_seconds"] = _timeout(resolved["timeout_seconds"])
    resolved["user_agent"] = str(resolved["user_agent"])
    return resolved


def api_config(resolved: dict) -> ApiConfig:
    return ApiConfig(
        base_url=resolved["api_base"],
        timeout=resolved["timeout_seconds"],
        user_agent=resolved["user_agent"],
    )
