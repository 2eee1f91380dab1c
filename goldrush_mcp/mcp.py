"""
JSON-RPC surface for MCP clients, shared by the HTTP and stdio transports.

A session binds one upstream client (one API key) to one sealed registry.
Transports own the session lifetime and hand each decoded message to
``handle_message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from goldrush_mcp import __version__
from goldrush_mcp.config import GoldRushConfig, default_config
from goldrush_mcp.goldrush_api import GoldRushApiClient
from goldrush_mcp.registry import McpError, Registry
from goldrush_mcp.resources import ALL_RESOURCES
from goldrush_mcp.tools import ALL_TOOLS

logger = logging.getLogger(__name__)

MCP_SERVER_NAME = "goldrush-mcp-server"
MCP_SERVER_VERSION = __version__

PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


def build_registry(
    client: Any,
    config: GoldRushConfig | None = None,
    *,
    tools=ALL_TOOLS,
    resources=ALL_RESOURCES,
) -> Registry:
    config = config or default_config
    registry = Registry(client, max_aggregate_items=config.max_aggregate_items)
    registry.begin_registration()
    for tool in tools:
        registry.add_tool(tool)
    for resource in resources:
        registry.add_resource(resource)
    registry.seal()
    return registry


class McpSession:
    """Upstream client plus the registry bound to it."""

    def __init__(self, client: Any, registry: Registry) -> None:
        self.client = client
        self.registry = registry

    async def aclose(self) -> None:
        self.registry.close()
        await self.client.aclose()


def create_session(api_key: str, config: GoldRushConfig | None = None) -> McpSession:
    config = config or default_config
    client = GoldRushApiClient(config, api_key=api_key)
    return McpSession(client, build_registry(client, config))


def jsonrpc_success_payload(rpc_id: Any, result: Any) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "id": rpc_id, "result": result}


def jsonrpc_error_payload(rpc_id: Any, code: int, message: str, data: Any = None) -> Dict[str, Any]:
    error: Dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": rpc_id, "error": error}


def parse_error_payload() -> Dict[str, Any]:
    return jsonrpc_error_payload(None, PARSE_ERROR, "Parse error")


def _initialize_result(params: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "protocolVersion": params["protocolVersion"],
        "serverInfo": {"name": MCP_SERVER_NAME, "version": MCP_SERVER_VERSION},
        "capabilities": {
            "tools": {"listChanged": False},
            "resources": {"listChanged": False, "subscribe": False},
        },
    }


async def handle_message(
    session: McpSession, body: Any, *, request_id: Optional[str] = None
) -> Optional[Dict[str, Any]]:
    """
    Handle one decoded JSON-RPC message.

    Returns the response payload, or None when the message is a
    notification and no response must be sent.
    """
    if not isinstance(body, dict):
        return jsonrpc_error_payload(None, INVALID_REQUEST, "Invalid request")

    method = body.get("method")
    rpc_id = body.get("id")
    if not isinstance(method, str) or not method:
        return jsonrpc_error_payload(rpc_id, INVALID_REQUEST, "Invalid request")

    if "id" not in body:
        logger.debug(
            "mcp notification method=%s request_id=%s",
            method,
            request_id,
            extra={"request_id": request_id},
        )
        return None

    raw_params = body.get("params")
    if raw_params is None:
        params: Dict[str, Any] = {}
    elif isinstance(raw_params, dict):
        params = raw_params
    else:
        return jsonrpc_error_payload(rpc_id, INVALID_PARAMS, "Invalid params")

    try:
        return await _dispatch_method(session, method, rpc_id, params, request_id)
    except McpError as exc:
        return jsonrpc_error_payload(rpc_id, exc.code, exc.message, exc.data)
    except Exception:
        logger.exception(
            "mcp method=%s failed request_id=%s",
            method,
            request_id,
            extra={"request_id": request_id},
        )
        return jsonrpc_error_payload(rpc_id, INTERNAL_ERROR, "Internal error")


async def _dispatch_method(
    session: McpSession,
    method: str,
    rpc_id: Any,
    params: Dict[str, Any],
    request_id: Optional[str],
) -> Dict[str, Any]:
    registry = session.registry

    if method == "initialize":
        protocol_version = params.get("protocolVersion")
        if not isinstance(protocol_version, str) or not protocol_version:
            return jsonrpc_error_payload(rpc_id, INVALID_PARAMS, "Invalid params")
        logger.debug(
            "mcp initialize requested protocol=%s request_id=%s",
            protocol_version,
            request_id,
            extra={"request_id": request_id},
        )
        return jsonrpc_success_payload(rpc_id, _initialize_result(params))

    if method == "ping":
        return jsonrpc_success_payload(rpc_id, {})

    if method in ("tools/list", "list_tools"):
        return jsonrpc_success_payload(rpc_id, {"tools": registry.list_tools()})

    if method in ("tools/call", "call_tool"):
        tool_name = params.get("name") or params.get("tool")
        arguments = params.get("arguments")
        if arguments is None:
            arguments = params.get("params")
        if not isinstance(tool_name, str) or not tool_name.strip():
            return jsonrpc_error_payload(rpc_id, INVALID_PARAMS, "Invalid params")
        result = await registry.dispatch(tool_name, arguments, request_id=request_id)
        return jsonrpc_success_payload(rpc_id, result)

    if method == "resources/list":
        return jsonrpc_success_payload(rpc_id, {"resources": registry.list_resources()})

    if method == "resources/templates/list":
        return jsonrpc_success_payload(
            rpc_id, {"resourceTemplates": registry.list_resource_templates()}
        )

    if method == "resources/read":
        uri = params.get("uri")
        if not isinstance(uri, str) or not uri:
            return jsonrpc_error_payload(rpc_id, INVALID_PARAMS, "Invalid params")
        result = await registry.read(uri, request_id=request_id)
        return jsonrpc_success_payload(rpc_id, result)

    return jsonrpc_error_payload(rpc_id, METHOD_NOT_FOUND, "Method not found")
