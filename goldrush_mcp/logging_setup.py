"""Logging configuration shared by the HTTP and stdio transports."""

from __future__ import annotations

import json
import logging
import sys

from goldrush_mcp.config import GoldRushConfig, default_config

EXTRA_FIELDS = ("tool", "request_id", "error", "uri")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: GoldRushConfig = default_config) -> None:
    """
    Install a single stderr handler on the root logger.

    Stdout is reserved for protocol traffic in stdio mode, so logs always go
    to stderr.
    """
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stderr)
    if config.log_format.lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logging.basicConfig(level=level, handlers=[handler], force=True)
