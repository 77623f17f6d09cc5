"""Collector helpers and package exports."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://ethanolivertroy.github.io/NIST-CMVP-API/api"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_USER_AGENT = "cmvp-tui"


class ApiError(Exception):
    """A whole-request failure against the catalog API."""


class ApiStatusError(ApiError):
    def __init__(self, status_code: int, label: str):
        super().__init__(f"API returned status {status_code} for {label}")
        self.status_code = status_code
        self.label = label


@dataclass(frozen=True)
class ApiConfig:
    base_url: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT

    def url_for(self, name: str) -> str:
        return f"{self.base_url.rstrip('/')}/{name}"


def new_session(config: ApiConfig) -> requests.Session:
    session = requests.Session()
    session.headers.update({"User-Agent": config.user_agent, "Accept": "application/json"})
    return session


def get_json(session: requests.Session, config: ApiConfig, name: str, label: str) -> Any:
    """GET one API document and decode it.

    Raises ApiError on transport failure, on a non-2xx status and on a body
    that is not JSON. The status message has the form
    "API returned status <code> for <label>".
    """
    url = config.url_for(name)
    logger.debug("GET %s", url)
    try:
        response = session.get(url, timeout=config.timeout)
    except requests.RequestException as exc:
        raise ApiError(str(exc)) from exc

    if not 200 <= response.status_code < 300:
        raise ApiStatusError(response.status_code, label)

    try:
        return response.json()
    except ValueError as exc:
        raise ApiError(f"invalid JSON for {label}: {exc}") from exc


def as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        try:
            return int(value)
        except (ValueError, OverflowError):
            return 0
    return 0


def as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def as_str_tuple(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(text for text in (as_str(item) for item in value) if text)
