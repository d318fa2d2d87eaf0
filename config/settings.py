"""
Runtime settings, read from the environment.

Values are resolved when the getter is called, not at import time, so a change
to SHEET_URL is picked up by the next fetch.
"""
import os
from typing import Optional

from hurricane.constants import DEFAULT_SHEET_URL, DEFAULT_REQUEST_TIMEOUT, DEFAULT_CHUNK_SIZE


def _env(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def get_sheet_url() -> str:
    """Returns the SHEET_URL override, or the default hurricanes sheet."""
    return _env("SHEET_URL") or DEFAULT_SHEET_URL


def get_request_timeout() -> float:
    raw = _env("REQUEST_TIMEOUT")
    try:
        timeout = float(raw) if raw else DEFAULT_REQUEST_TIMEOUT
    except ValueError:
        return DEFAULT_REQUEST_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_REQUEST_TIMEOUT


def get_chunk_size() -> int:
    raw = _env("SHEET_CHUNK_SIZE")
    try:
        size = int(raw) if raw else DEFAULT_CHUNK_SIZE
    except ValueError:
        return DEFAULT_CHUNK_SIZE
    return size if size > 0 else DEFAULT_CHUNK_SIZE


def get_log_dir() -> str:
    return _env("LOG_DIR") or "logs"


def get_log_level() -> str:
    return (_env("LOG_LEVEL") or "INFO").upper()
