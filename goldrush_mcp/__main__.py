"""Command-line entry point: ``python -m goldrush_mcp``."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from goldrush_mcp.config import default_config
from goldrush_mcp.logging_setup import configure_logging

logger = logging.getLogger("goldrush_mcp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goldrush-mcp",
        description="Serve GoldRush blockchain data to MCP clients.",
    )
    parser.add_argument(
        "--transport",
        choices=("stdio", "http"),
        default="stdio",
        help="stdio for local clients (default), http for a networked server.",
    )
    parser.add_argument("--host", default=default_config.http_host, help="HTTP bind address.")
    parser.add_argument("--port", type=int, default=default_config.http_port, help="HTTP port.")
    parser.add_argument(
        "--api-key",
        default=None,
        help="GoldRush API key for stdio mode (overrides GOLDRUSH_API_KEY).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = default_config
    if args.api_key:
        config = replace(config, api_key=args.api_key.strip())
    configure_logging(config)

    if args.transport == "http":
        import uvicorn

        logger.info("GoldRush MCP server listening on %s:%s", args.host, args.port)
        uvicorn.run("goldrush_mcp.server:app", host=args.host, port=args.port, log_config=None)
        return 0

    from goldrush_mcp.stdio import run_stdio

    return run_stdio(config)


if __name__ == "__main__":
    sys.exit(main())
