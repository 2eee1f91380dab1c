"""
Serialize upstream payloads into MCP text content.

JSON consumers commonly decode numbers as IEEE-754 doubles, which silently
truncate integers beyond 2**53 - 1 (token balances, wei amounts, gas values).
Such integers are emitted as decimal strings instead; everything else is
serialized unchanged.
"""

from __future__ import annotations

import json
from typing import Any

MAX_SAFE_INTEGER = 2**53 - 1


def to_json_safe(value: Any) -> Any:
    """Recursively replace unsafe integers with their decimal string form."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if abs(value) > MAX_SAFE_INTEGER:
            return str(value)
        return value
    if isinstance(value, dict):
        return {key: to_json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_safe(item) for item in value]
    return value


def stringify_with_bigint(value: Any) -> str:
    """Pretty-print ``value`` as JSON (2-space indent) with large integers as strings."""
    return json.dumps(to_json_safe(value), indent=2, ensure_ascii=False)
