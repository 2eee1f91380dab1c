"""FastAPI application serving the MCP JSON-RPC surface over HTTP."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from goldrush_mcp import __version__, mcp
from goldrush_mcp.config import default_config
from goldrush_mcp.logging_setup import configure_logging
from goldrush_mcp.metrics import default_metrics

configure_logging(default_config)
logger = logging.getLogger(__name__)

HEALTH_STATUS = {"status": "ok"}
APP_VERSION = __version__
UNAUTHORIZED = -32001
METHOD_NOT_ALLOWED = -32000

# Builds the per-request session; replaced in tests.
session_factory = mcp.create_session

app = FastAPI(
    title="GoldRush MCP Server",
    description="Read-only GoldRush blockchain data exposed as MCP tools and resources.",
    version=APP_VERSION,
)


@app.middleware("http")
async def add_request_context(request: Request, call_next):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    start = time.time()
    default_metrics.incr_request()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    default_metrics.record_duration(request_id, duration_ms)
    response.headers["X-Request-ID"] = request_id
    return response


def _bearer_token(header: Optional[str]) -> Optional[str]:
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer":
        return None
    token = token.strip()
    return token or None


@app.get("/health")
async def health() -> JSONResponse:
    """Lightweight health endpoint for monitoring."""
    return JSONResponse(content=HEALTH_STATUS)


@app.get("/metrics")
async def metrics() -> JSONResponse:
    """Return in-process metrics snapshot."""
    return JSONResponse(content=default_metrics.snapshot())


@app.post("/mcp")
async def mcp_gateway(request: Request) -> Response:
    """
    JSON-RPC endpoint for MCP clients.

    Each request must carry ``Authorization: Bearer <GoldRush API key>``. A
    fresh session (upstream client plus registry) is built for the request
    and released before the response is sent.
    """
    request_id = getattr(request.state, "request_id", None)
    start_time = time.time()

    def _respond(
        payload: Dict[str, Any],
        status_code: int = 200,
        *,
        outcome: str,
        method_label: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> JSONResponse:
        duration_ms = (time.time() - start_time) * 1000
        error_code = payload.get("error", {}).get("code") if "error" in payload else None
        logger.debug(
            "mcp outcome=%s method=%s id=%s status=%s duration_ms=%.2f error_code=%s",
            outcome,
            method_label,
            payload.get("id"),
            status_code,
            duration_ms,
            error_code,
            extra={"request_id": request_id, "error": error_code},
        )
        return JSONResponse(status_code=status_code, content=payload, headers=headers)

    api_key = _bearer_token(request.headers.get("authorization"))
    if api_key is None:
        default_metrics.incr_unauthorized()
        logger.warning(
            "mcp outcome=unauthorized request_id=%s", request_id, extra={"request_id": request_id}
        )
        payload = mcp.jsonrpc_error_payload(
            None, UNAUTHORIZED, "Unauthorized: missing or invalid bearer token"
        )
        return _respond(
            payload, 401, outcome="unauthorized", headers={"WWW-Authenticate": "Bearer"}
        )

    try:
        body = await request.json()
    except ValueError:
        return _respond(mcp.parse_error_payload(), 400, outcome="error")

    if not isinstance(body, dict):
        payload = mcp.jsonrpc_error_payload(None, mcp.INVALID_REQUEST, "Invalid request")
        return _respond(payload, 400, outcome="error")

    method = body.get("method")
    try:
        session = session_factory(api_key, default_config)
        try:
            payload = await mcp.handle_message(session, body, request_id=request_id)
        finally:
            await session.aclose()
    except Exception:
        logger.exception(
            "mcp method=%s failed request_id=%s",
            method,
            request_id,
            extra={"request_id": request_id},
        )
        payload = mcp.jsonrpc_error_payload(body.get("id"), mcp.INTERNAL_ERROR, "Internal error")
        return _respond(payload, 500, outcome="error", method_label=method)

    if payload is None:
        return Response(status_code=202)
    outcome = "error" if "error" in payload else "success"
    return _respond(payload, outcome=outcome, method_label=method)


def _method_not_allowed() -> JSONResponse:
    return JSONResponse(
        status_code=405,
        content=mcp.jsonrpc_error_payload(None, METHOD_NOT_ALLOWED, "Method not allowed."),
        headers={"Allow": "POST"},
    )


@app.get("/mcp")
async def mcp_get() -> JSONResponse:
    """Server-initiated streams are not offered."""
    return _method_not_allowed()


@app.delete("/mcp")
async def mcp_delete() -> JSONResponse:
    """Sessions are per request; there is nothing to terminate."""
    return _method_not_allowed()


# Run with: uvicorn goldrush_mcp.server:app
