"""
Configuration helpers for the GoldRush MCP server.

This module centralizes base URL selection, API key loading, default timeouts,
logging options, and the aggregation cap. No secrets are stored in the
repository; the API key is read from the environment, a local ``.env`` file, or
a key file if present.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# Default connection settings
DEFAULT_BASE_URL = os.getenv("GOLDRUSH_BASE_URL", "https://api.covalenthq.com")


def _load_timeout() -> float:
    raw_timeout = os.getenv("GOLDRUSH_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return 30.0
    return 30.0


def _load_max_aggregate_items() -> Optional[int]:
    raw = os.getenv("GOLDRUSH_MAX_AGGREGATE_ITEMS")
    if not raw:
        return None
    try:
        parsed = int(raw)
    except ValueError:
        return None
    return parsed if parsed > 0 else None


def _load_port() -> int:
    raw = os.getenv("GOLDRUSH_MCP_PORT")
    if raw:
        try:
            return int(raw)
        except ValueError:
            return 8000
    return 8000


DEFAULT_TIMEOUT = _load_timeout()
DEFAULT_MAX_AGGREGATE_ITEMS = _load_max_aggregate_items()

# API key handling
API_KEY_ENV_VAR = "GOLDRUSH_API_KEY"
API_KEY_FILE_ENV_VAR = "GOLDRUSH_API_KEY_FILE"
DEFAULT_API_KEY_FILE = "goldrush_api_key.txt"

LOG_LEVEL = os.getenv("GOLDRUSH_MCP_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("GOLDRUSH_MCP_LOG_FORMAT", "json")  # json or plain
HTTP_HOST = os.getenv("GOLDRUSH_MCP_HOST", "127.0.0.1")
HTTP_PORT = _load_port()


def load_api_key() -> Optional[str]:
    """
    Load the GoldRush API key from environment or a local file.

    Returns:
        The API key string if available, otherwise None. The key is never logged
        or returned to callers.
    """
    env_key = os.getenv(API_KEY_ENV_VAR)
    if env_key and env_key.strip():
        return env_key.strip()

    key_path = os.getenv(API_KEY_FILE_ENV_VAR, DEFAULT_API_KEY_FILE)
    if key_path:
        path = Path(key_path)
        if path.is_file():
            return path.read_text(encoding="utf-8").strip() or None

    return None


@dataclass(slots=True)
class GoldRushConfig:
    """Runtime configuration for GoldRush API access and the MCP surface."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    api_key: Optional[str] = load_api_key()
    max_aggregate_items: Optional[int] = DEFAULT_MAX_AGGREGATE_ITEMS
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT
    http_host: str = HTTP_HOST
    http_port: int = HTTP_PORT


default_config = GoldRushConfig()
