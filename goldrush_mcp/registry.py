"""
Tool and resource registry with the dispatch boundary.

A ``Registry`` is bound to one upstream client (one API key). It is filled
while REGISTERING, sealed into READY, and serves ``dispatch``/``read`` until
closed. Handler failures never escape ``dispatch``; they are shaped into an
error ``ToolResult`` instead.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Pattern, Type
from urllib.parse import unquote

from pydantic import BaseModel, ValidationError

from goldrush_mcp.encoding import stringify_with_bigint
from goldrush_mcp.metrics import MetricsRecorder, default_metrics
from goldrush_mcp.pagination import collect_all_pages, single_page

logger = logging.getLogger(__name__)

INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
RESOURCE_NOT_FOUND = -32002


class McpError(Exception):
    """Base error carrying the JSON-RPC code transports should report."""

    code = INTERNAL_ERROR

    def __init__(self, message: str, *, data: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.data = data


class RegistrationError(McpError):
    """Raised for duplicate names/URIs or registration outside REGISTERING."""


class RegistryClosedError(McpError):
    """Raised when the registry is used outside the READY state."""


class UnknownToolError(McpError):
    code = INVALID_PARAMS


class ToolValidationError(McpError):
    code = INVALID_PARAMS


class ResourceNotFoundError(McpError):
    code = RESOURCE_NOT_FOUND


class ResourceReadError(McpError):
    code = INTERNAL_ERROR


class AggregationPolicy(str, Enum):
    SINGLE_PAGE = "single_page"
    ALL_PAGES = "all_pages"


class RegistryState(str, Enum):
    UNINITIALIZED = "uninitialized"
    REGISTERING = "registering"
    READY = "ready"
    CLOSED = "closed"


# (client, validated params) -> envelope for SINGLE_PAGE, page iterator for ALL_PAGES.
ToolHandler = Callable[[Any, Any], Any]
ResourceHandler = Callable[[str, Dict[str, str], Any], Awaitable[str]]


@dataclass(slots=True, frozen=True)
class ToolDefinition:
    name: str
    description: str
    params_model: Type[BaseModel]
    handler: ToolHandler
    policy: AggregationPolicy = AggregationPolicy.SINGLE_PAGE

    def input_schema(self) -> Dict[str, Any]:
        return self.params_model.model_json_schema(by_alias=True)


def _template_pattern(template: str) -> Pattern[str]:
    parts = re.split(r"\{(\w+)\}", template)
    regex = ""
    for index, part in enumerate(parts):
        if index % 2:
            regex += f"(?P<{part}>[^/]+)"
        else:
            regex += re.escape(part)
    return re.compile(f"^{regex}$")


@dataclass(slots=True)
class ResourceDefinition:
    """A fixed-URI resource, or a URI template with ``{var}`` placeholders."""

    name: str
    handler: ResourceHandler
    uri: Optional[str] = None
    uri_template: Optional[str] = None
    title: Optional[str] = None
    description: str = ""
    mime_type: str = "application/json"
    _pattern: Optional[Pattern[str]] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if (self.uri is None) == (self.uri_template is None):
            raise RegistrationError(
                f"Resource {self.name} needs exactly one of uri or uri_template"
            )
        if self.uri_template is not None:
            self._pattern = _template_pattern(self.uri_template)

    @property
    def is_template(self) -> bool:
        return self.uri_template is not None

    @property
    def key(self) -> str:
        return self.uri if self.uri is not None else self.uri_template  # type: ignore[return-value]

    def match(self, uri: str) -> Optional[Dict[str, str]]:
        if self._pattern is None:
            return {} if uri == self.uri else None
        found = self._pattern.match(uri)
        if found is None:
            return None
        return {key: unquote(value) for key, value in found.groupdict().items()}

    def describe(self) -> Dict[str, Any]:
        entry: Dict[str, Any] = {"name": self.name}
        if self.is_template:
            entry["uriTemplate"] = self.uri_template
        else:
            entry["uri"] = self.uri
        if self.title:
            entry["title"] = self.title
        entry["description"] = self.description
        entry["mimeType"] = self.mime_type
        return entry


def text_result(text: str, *, is_error: bool = False) -> Dict[str, Any]:
    return {"content": [{"type": "text", "text": text}], "isError": is_error}


class Registry:
    def __init__(
        self,
        client: Any,
        *,
        max_aggregate_items: Optional[int] = None,
        metrics: MetricsRecorder | None = None,
    ) -> None:
        self.client = client
        self.max_aggregate_items = max_aggregate_items
        self.metrics = metrics or default_metrics
        self.state = RegistryState.UNINITIALIZED
        self._tools: Dict[str, ToolDefinition] = {}
        self._resources: Dict[str, ResourceDefinition] = {}

    # Lifecycle ---------------------------------------------------------

    def begin_registration(self) -> None:
        if self.state is not RegistryState.UNINITIALIZED:
            raise RegistrationError(f"Cannot begin registration in state {self.state.value}")
        self.state = RegistryState.REGISTERING

    def add_tool(self, tool: ToolDefinition) -> None:
        self._require_registering()
        if tool.name in self._tools:
            raise RegistrationError(f"Duplicate tool name: {tool.name}")
        self._tools[tool.name] = tool

    def add_resource(self, resource: ResourceDefinition) -> None:
        self._require_registering()
        if resource.key in self._resources:
            raise RegistrationError(f"Duplicate resource: {resource.key}")
        self._resources[resource.key] = resource

    def seal(self) -> None:
        self._require_registering()
        self.state = RegistryState.READY

    def close(self) -> None:
        self.state = RegistryState.CLOSED

    def _require_registering(self) -> None:
        if self.state is not RegistryState.REGISTERING:
            raise RegistrationError(f"Registry is not accepting registrations ({self.state.value})")

    def _require_ready(self) -> None:
        if self.state is not RegistryState.READY:
            raise RegistryClosedError(f"Registry is not ready ({self.state.value})")

    # Listing -----------------------------------------------------------

    def list_tools(self) -> List[Dict[str, Any]]:
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "inputSchema": tool.input_schema(),
            }
            for tool in self._tools.values()
        ]

    def list_resources(self) -> List[Dict[str, Any]]:
        return [res.describe() for res in self._resources.values() if not res.is_template]

    def list_resource_templates(self) -> List[Dict[str, Any]]:
        return [res.describe() for res in self._resources.values() if res.is_template]

    def get_tool(self, name: str) -> Optional[ToolDefinition]:
        return self._tools.get(name)

    # Dispatch ----------------------------------------------------------

    def validate(self, tool: ToolDefinition, arguments: Any) -> BaseModel:
        try:
            return tool.params_model.model_validate({} if arguments is None else arguments)
        except ValidationError as exc:
            raise ToolValidationError(
                f"Invalid arguments for tool {tool.name}",
                data=exc.errors(include_url=False, include_context=False),
            ) from exc

    async def _run(self, tool: ToolDefinition, params: BaseModel) -> Any:
        if tool.policy is AggregationPolicy.ALL_PAGES:
            pages = tool.handler(self.client, params)
            return await collect_all_pages(pages, max_items=self.max_aggregate_items)
        return single_page(await tool.handler(self.client, params))

    async def dispatch(
        self, name: str, arguments: Any = None, *, request_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Validate ``arguments`` and invoke the named tool.

        Unknown tools and invalid arguments raise (they are protocol errors).
        Anything raised by the handler or the upstream is returned as an
        ``isError`` result.
        """
        self._require_ready()
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(f"Unknown tool: {name}")
        params = self.validate(tool, arguments)

        try:
            payload = await self._run(tool, params)
        except Exception as exc:
            logger.warning(
                "tool=%s outcome=error error=%s request_id=%s",
                name,
                exc,
                request_id,
                extra={"tool": name, "request_id": request_id, "error": type(exc).__name__},
            )
            self.metrics.record_tool(name, success=False)
            return text_result(f"Error: {exc}", is_error=True)

        logger.info(
            "tool=%s outcome=success request_id=%s",
            name,
            request_id,
            extra={"tool": name, "request_id": request_id},
        )
        self.metrics.record_tool(name, success=True)
        return text_result(stringify_with_bigint(payload))

    async def read(self, uri: str, *, request_id: Optional[str] = None) -> Dict[str, Any]:
        self._require_ready()
        resource = self._resources.get(uri)
        variables: Optional[Dict[str, str]] = {} if resource is not None and not resource.is_template else None
        if variables is None:
            resource = None
            for candidate in self._resources.values():
                if not candidate.is_template:
                    continue
                variables = candidate.match(uri)
                if variables is not None:
                    resource = candidate
                    break
        if resource is None or variables is None:
            raise ResourceNotFoundError("Resource not found", data={"uri": uri})

        try:
            text = await resource.handler(uri, variables, self.client)
        except Exception as exc:
            logger.warning(
                "resource=%s outcome=error error=%s request_id=%s",
                resource.name,
                exc,
                request_id,
                extra={"uri": uri, "request_id": request_id, "error": type(exc).__name__},
            )
            raise ResourceReadError(f"Error: {exc}") from exc

        self.metrics.record_resource_read(resource.name)
        return {"contents": [{"uri": uri, "mimeType": resource.mime_type, "text": text}]}
