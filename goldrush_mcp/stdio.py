"""
Standard-I/O transport: newline-delimited JSON-RPC on stdin/stdout.

One session serves the whole process and messages are handled one at a
time, in arrival order. Stdout carries protocol traffic only; logs go to
stderr.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO

from goldrush_mcp import mcp
from goldrush_mcp.config import GoldRushConfig, default_config

logger = logging.getLogger(__name__)


def _write(stream: TextIO, payload: Dict[str, Any]) -> None:
    stream.write(json.dumps(payload, ensure_ascii=False) + "\n")
    stream.flush()


async def handle_line(session: mcp.McpSession, line: str) -> Optional[Dict[str, Any]]:
    try:
        body = json.loads(line)
    except ValueError:
        logger.warning("stdio received malformed JSON")
        return mcp.parse_error_payload()
    return await mcp.handle_message(session, body)


async def serve(
    session: mcp.McpSession,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """Read messages until stdin reaches EOF."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    loop = asyncio.get_running_loop()
    while True:
        line = await loop.run_in_executor(None, stdin.readline)
        if not line:
            break
        line = line.strip()
        if not line:
            continue
        response = await handle_line(session, line)
        if response is not None:
            _write(stdout, response)
    logger.info("stdio input closed")


async def _run(config: GoldRushConfig, api_key: str) -> None:
    session = mcp.create_session(api_key, config)
    try:
        await serve(session)
    finally:
        await session.aclose()


def run_stdio(config: GoldRushConfig = default_config) -> int:
    """Serve over stdio; returns the process exit status."""
    if not config.api_key:
        logger.error(
            "GOLDRUSH_API_KEY is not set; provide it via the environment, a .env file, or --api-key"
        )
        return 1
    logger.info("GoldRush MCP server running on stdio")
    asyncio.run(_run(config, config.api_key))
    return 0
